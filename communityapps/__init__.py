"""Catalog of community applet manifests, name helpers and validation rules."""

__version__ = "0.1.0"