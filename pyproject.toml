[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "communityapps"
version = "0.1.0"
description = "Catalog of community display applets, with manifest name helpers and validation rules."
requires-python = ">=3.10"
dependencies = []
keywords = ["applets", "manifest", "catalog", "validation", "pixel display"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["communityapps"]

[tool.hatch.build.targets.sdist]
include = ["communityapps", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
