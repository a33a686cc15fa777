import pytest

from communityapps.apps_a_to_c import manifests
from communityapps.manifest import generate_file_name, generate_id, generate_package_name

EXPECTED_IDS = [
    "abstract-clock",
    "analog-clock",
    "analog-time",
    "arcade-classics",
    "bgg-hotness",
    "bible-votd",
    "big-clock",
    "binary-clock",
    "clock-by-henry",
]


def test_ids_in_order():
    assert [m.id for m in manifests()] == EXPECTED_IDS


@pytest.mark.parametrize("app_id", EXPECTED_IDS)
def test_every_manifest_validates(app_id):
    app = next(m for m in manifests() if m.id == app_id)
    assert app.validate() is app


@pytest.mark.parametrize("app", manifests(), ids=lambda m: m.id)
def test_names_derive_from_app_name(app):
    assert app.id == generate_id(app.name)
    assert app.file_name == generate_file_name(app.name)
    assert app.package_name == generate_package_name(app.name)


def test_ids_are_unique():
    ids = [m.id for m in manifests()]
    assert len(ids) == len(set(ids))


def test_each_call_gives_equal_fresh_list():
    first, second = manifests(), manifests()
    assert first == second
    assert first is not second


def test_fuzzy_fields_of_known_app():
    by_id = {m.id: m for m in manifests()}
    big = by_id["big-clock"]
    assert big.name == "Big Clock"
    assert big.author == "Joey Hoer"
    assert big.to_dict()["file_name"] == "big_clock.star"
    assert "source" not in big.to_dict()