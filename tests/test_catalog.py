from itertools import chain

import pytest

from communityapps import apps_a_to_c, apps_c_to_h, apps_i_to_p, apps_p_to_t, apps_t_to_w
from communityapps.catalog import AppNotFoundError, find_manifest, get_manifests


def _all_module_manifests():
    return list(
        chain(
            apps_a_to_c.manifests(),
            apps_c_to_h.manifests(),
            apps_i_to_p.manifests(),
            apps_p_to_t.manifests(),
            apps_t_to_w.manifests(),
        )
    )


@pytest.mark.parametrize("index", range(len(get_manifests())))
def test_manifests_validate(index):
    app = get_manifests()[index]
    assert app.validate() is app


def test_find_manifest_existing():
    expected = next(app for app in apps_c_to_h.manifests() if app.id == "fuzzy-clock")
    found = find_manifest(expected.id)
    assert found == expected


def test_find_manifest_missing():
    with pytest.raises(AppNotFoundError, match="app manifest does not exist"):
        find_manifest("foo-bar-123")


def test_missing_app_is_a_lookup_error():
    with pytest.raises(LookupError):
        find_manifest("")


def test_catalogue_covers_every_module_manifest():
    catalogue_ids = {app.id for app in get_manifests()}
    module_ids = {app.id for app in _all_module_manifests()}
    assert catalogue_ids == module_ids


def test_only_countdown_clock_is_listed_twice():
    ids = [app.id for app in get_manifests()]
    assert len(ids) == len(_all_module_manifests()) + 1
    duplicates = {app_id for app_id in ids if ids.count(app_id) > 1}
    assert duplicates == {"countdown-clock"}


def test_countdown_clock_positions():
    ids = [app.id for app in get_manifests()]
    first = ids.index("countdown-clock")
    assert ids[first + 1] == "crypto-tracker"
    assert ids[first + 2] == "countdown-clock"


def test_catalogue_ends():
    apps = get_manifests()
    assert apps[0].id == "abstract-clock"
    assert apps[-1].id == "world-clock"


@pytest.mark.parametrize("app", _all_module_manifests(), ids=lambda app: app.id)
def test_every_app_can_be_found(app):
    assert find_manifest(app.id) == app


def test_found_manifest_serialises_without_source():
    data = find_manifest("world-clock").to_dict()
    assert data["name"] == "World Clock"
    assert "source" not in data