"""Rules that app metadata must follow to display properly in the mobile app."""

from __future__ import annotations

import unicodedata

# Longest app name to date; raising it needs testing in the mobile app.
MAX_NAME_LENGTH = 16

# Longest app summary to date; raising it needs testing in the mobile app.
MAX_SUMMARY_LENGTH = 27

_DASH = "-"
_UNDERSCORE = "_"
_PUNCTUATION = (".", "!", "?")
_STAR_EXT = ".star"


class ValidationError(ValueError):
    """Raised when a piece of app metadata breaks a rule."""


def _is_letter_or_number(ch: str) -> bool:
    return unicodedata.category(ch)[0] in ("L", "N")


def _is_separator(ch: str) -> bool:
    if ch.isascii():
        return not (ch.isalnum() or ch == _UNDERSCORE)
    if _is_letter_or_number(ch):
        return False
    return ch.isspace()


def _title_char(ch: str) -> str:
    titled = ch.title()
    return titled if len(titled) == 1 else ch


def _title(text: str) -> str:
    """Capitalise the first letter of each word, leaving the rest untouched."""
    result = []
    prev = " "
    for ch in text:
        result.append(_title_char(ch) if _is_separator(prev) else ch)
        prev = ch
    return "".join(result)


def _first_word_is_title(text: str) -> bool:
    first = text.split(" ")[0]
    return first == _title(first)


def validate_name(name: str) -> str:
    """Check an app name and return it unchanged."""
    if not name:
        raise ValidationError("name cannot be empty")
    if name != _title(name):
        raise ValidationError(f"'{name}' should be title case, 'Fuzzy Clock' for example")
    if len(name.encode("utf-8")) > MAX_NAME_LENGTH:
        raise ValidationError(f"app names need to be less then {MAX_NAME_LENGTH} characters")
    return name


def validate_summary(summary: str) -> str:
    """Check an app summary and return it unchanged."""
    if not summary:
        raise ValidationError("summary cannot be empty")
    if len(summary.encode("utf-8")) > MAX_SUMMARY_LENGTH:
        raise ValidationError(
            f"app summaries need to be less then {MAX_SUMMARY_LENGTH} characters"
        )
    if summary.endswith(_PUNCTUATION):
        raise ValidationError("app summaries should not end in punctuation")
    if not _first_word_is_title(summary):
        raise ValidationError("app summaries should start with an uppercased character")
    return summary


def validate_desc(desc: str) -> str:
    """Check an app description and return it unchanged."""
    if not desc:
        raise ValidationError("desc cannot be empty")
    if not desc.endswith(_PUNCTUATION):
        raise ValidationError("app descriptions should end in punctuation")
    if not _first_word_is_title(desc):
        raise ValidationError("app descriptions should start with an uppercased character")
    return desc


def validate_author(author: str) -> str:
    """Check an app author and return it unchanged."""
    if not author:
        raise ValidationError("author cannot be empty")
    return author


def validate_package_name(package_name: str) -> str:
    """Check a package name and return it unchanged."""
    if not package_name:
        raise ValidationError("package names cannot be empty")
    if package_name != package_name.lower():
        raise ValidationError("package names should be lower case")
    if not all(_is_letter_or_number(ch) for ch in package_name):
        raise ValidationError(
            "package names can only contain letters, numbers, or an underscore character"
        )
    return package_name


def validate_file_name(file_name: str) -> str:
    """Check the applet source file name and return it unchanged."""
    if not file_name:
        raise ValidationError("fileName cannot be empty")
    if not file_name.endswith(_STAR_EXT):
        raise ValidationError(f"file names should end in .star: '{file_name}'")
    stem = file_name[: -len(_STAR_EXT)]
    if stem != stem.lower():
        raise ValidationError("file names should be lower case")
    if not all(_is_letter_or_number(ch) or ch == _UNDERSCORE for ch in stem):
        raise ValidationError(
            "file names can only contain letters, numbers, or an underscore character"
        )
    return file_name


def validate_id(app_id: str) -> str:
    """Check an app id and return it unchanged."""
    if not app_id:
        raise ValidationError("id cannot be empty")
    lowered = app_id.lower()
    if app_id != lowered:
        raise ValidationError(f"ids should be lower case, {app_id} != {lowered}")
    if not all(_is_letter_or_number(ch) or ch == _DASH for ch in app_id):
        raise ValidationError("ids can only contain letters, numbers, or a dash character")
    return app_id