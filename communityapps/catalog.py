"""The full list of community applets and lookup by id."""

from __future__ import annotations

from itertools import chain

from communityapps import (
    apps_a_to_c,
    apps_c_to_h,
    apps_i_to_p,
    apps_p_to_t,
    apps_t_to_w,
)
from communityapps.manifest import Manifest

# Catalogue order as shown to users; countdown-clock is listed twice.
_CATALOGUE_ORDER = (
    "abstract-clock",
    "analog-clock",
    "analog-time",
    "arcade-classics",
    "bgg-hotness",
    "bible-votd",
    "big-clock",
    "binary-clock",
    "clock-by-henry",
    "coingecko-price",
    "countdown-clock",
    "crypto-tracker",
    "countdown-clock",
    "date-progress",
    "date-time-clock",
    "day-night-map",
    "destiny-2-stats",
    "digibyte-price",
    "digital-rain",
    "dvd-logo",
    "dw-headline",
    "espn-news",
    "fishbyt",
    "flags",
    "fuzzy-clock",
    "ga-pilot-buddy",
    "happy-hour",
    "hvv-departures",
    "ifparank",
    "iss-tracker",
    "jokes-jokeapi",
    "launchcountdown",
    "lirr",
    "mbta",
    "mn-light-rail",
    "nationaltoday",
    "near-earth-objs",
    "netatmo",
    "nft",
    "nightscout",
    "nixel-clock",
    "noaa-buoy",
    "nyan-cat",
    "nyc-bus",
    "oh-highway-signs",
    "pagerduty",
    "path-train-schedule",
    "phase-of-moon",
    "pokedex",
    "powerball",
    "purpleair",
    "random-slackmoji",
    "reddit-images",
    "sbb-timetable",
    "snyk",
    "sports-scores",
    "sports-standings",
    "spotthestation",
    "steam",
    "strava",
    "sunrise-sunset",
    "tempest",
    "they-said-so",
    "todoist",
    "transsee",
    "twitter-follows",
    "unsplash",
    "us-yield-curve",
    "vertical-message",
    "warframe-cycles",
    "weather-map",
    "world-clock",
)

_SOURCES = (apps_a_to_c, apps_c_to_h, apps_i_to_p, apps_p_to_t, apps_t_to_w)


class AppNotFoundError(LookupError):
    """Raised when no applet has the requested id."""


def get_manifests() -> list[Manifest]:
    """Return every community applet manifest in catalogue order."""
    by_id = {
        app.id: app
        for app in chain.from_iterable(source.manifests() for source in _SOURCES)
    }
    return [by_id[app_id] for app_id in _CATALOGUE_ORDER]


def find_manifest(app_id: str) -> Manifest:
    """Return the manifest with the given id, or raise AppNotFoundError."""
    for app in get_manifests():
        if app.id == app_id:
            return app
    raise AppNotFoundError("app manifest does not exist")