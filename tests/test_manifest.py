import dataclasses

import pytest

from communityapps.manifest import (
    Manifest,
    generate_file_name,
    generate_id,
    generate_package_name,
)
from communityapps.validate import ValidationError


def _foo_tracker(**changes):
    base = Manifest(
        id="foo-tracker",
        name="Foo Tracker",
        summary="Track realtime foo",
        desc="The foo tracker provides realtime feeds for foo.",
        author="Tidbyt",
        file_name="foo_tracker.star",
        package_name="footracker",
        source=b'def main():\n    return None\n',
    )
    return dataclasses.replace(base, **changes)


def test_manifest_keeps_source(tmp_path):
    path = tmp_path / "source.star"
    path.write_bytes(b'load("render.star", "render")\n')
    m = _foo_tracker(source=path.read_bytes())
    assert m.source == path.read_bytes()


@pytest.mark.parametrize(
    "value, expected",
    [("Cool App", "coolapp"), ("CoolApp", "coolapp"), ("cool-app", "coolapp"), ("cool_app", "coolapp")],
)
def test_generate_package_name(value, expected):
    assert generate_package_name(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Cool App", "cool_app.star"),
        ("CoolApp", "coolapp.star"),
        ("cool-app", "cool_app.star"),
        ("cool_app", "cool_app.star"),
    ],
)
def test_generate_file_name(value, expected):
    assert generate_file_name(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("Cool App", "cool-app"), ("CoolApp", "coolapp"), ("cool-app", "cool-app"), ("cool_app", "cool-app")],
)
def test_generate_id(value, expected):
    assert generate_id(value) == expected


def test_validate_returns_manifest_when_valid():
    m = _foo_tracker()
    assert m.validate() is m


@pytest.mark.parametrize(
    "field_name, value, message",
    [
        ("id", "Foo-Tracker", "ids should be lower case"),
        ("name", "foo tracker", "title case"),
        ("summary", "Track realtime foo.", "punctuation"),
        ("desc", "The foo tracker", "punctuation"),
        ("author", "", "author cannot be empty"),
        ("file_name", "foo_tracker", "should end in .star"),
        ("package_name", "foo_tracker", "package names can only contain"),
    ],
)
def test_validate_rejects_bad_field(field_name, value, message):
    with pytest.raises(ValidationError, match=message):
        _foo_tracker(**{field_name: value}).validate()


def test_validate_checks_id_before_name():
    with pytest.raises(ValidationError, match="id cannot be empty"):
        _foo_tracker(id="", name="").validate()


def test_to_dict_omits_source():
    assert _foo_tracker().to_dict() == {
        "id": "foo-tracker",
        "name": "Foo Tracker",
        "summary": "Track realtime foo",
        "desc": "The foo tracker provides realtime feeds for foo.",
        "author": "Tidbyt",
        "file_name": "foo_tracker.star",
        "package_name": "footracker",
    }


def test_generated_names_validate():
    name = "Cool App"
    assert generate_id(name) == "cool-app"
    m = _foo_tracker(
        id=generate_id(name),
        name=name,
        file_name=generate_file_name(name),
        package_name=generate_package_name(name),
    )
    assert m.validate().package_name == "coolapp"


def test_manifest_equality_depends_on_fields():
    assert _foo_tracker() == _foo_tracker()
    assert _foo_tracker(name="Bar Tracker") != _foo_tracker()