"""The description of a community applet."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from communityapps.validate import (
    validate_author,
    validate_desc,
    validate_file_name,
    validate_id,
    validate_name,
    validate_package_name,
    validate_summary,
)

_STAR_EXT = ".star"


@dataclass(frozen=True)
class Manifest:
    """Metadata and source of one applet."""

    id: str
    name: str
    summary: str
    desc: str
    author: str
    file_name: str
    package_name: str
    source: bytes = field(default=b"", repr=False)

    def validate(self) -> Manifest:
        """Check every field, raising ValidationError on the first bad one."""
        validate_id(self.id)
        validate_name(self.name)
        validate_summary(self.summary)
        validate_desc(self.desc)
        validate_author(self.author)
        validate_file_name(self.file_name)
        validate_package_name(self.package_name)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialisable form of the manifest, without the applet source."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if f.name != "source"
        }


def generate_package_name(name: str) -> str:
    """Build a package name from an app name."""
    stripped = name.replace("-", "").replace("_", "")
    return "".join(stripped.split()).lower()


def generate_id(name: str) -> str:
    """Build an app id from an app name."""
    return "-".join(name.replace("_", "-").split()).lower()


def generate_file_name(name: str) -> str:
    """Build the applet source file name from an app name."""
    return "_".join(name.replace("-", "_").split()).lower() + _STAR_EXT