"""Community applets whose names run from A to C."""

from __future__ import annotations

from communityapps.manifest import Manifest


def manifests() -> list[Manifest]:
    """Return fresh manifests for the applets in this range, in catalogue order."""
    return [
        Manifest(
            id="abstract-clock",
            name="Abstract Clock",
            author="AmillionAir",
            summary="Shows Time",
            desc="Uses 60 Pixels to display time across width of Tidbyt.",
            file_name="abstract_clock.star",
            package_name="abstractclock",
        ),
        Manifest(
            id="analog-clock",
            name="Analog Clock",
            author="Chris Jones (@IPv6Freely)",
            summary="Shows a simple analog clock",
            desc="Shows a simple analog clock with month and day.",
            file_name="analog_clock.star",
            package_name="analogclock",
        ),
        Manifest(
            id="analog-time",
            name="Analog Time",
            author="rs7q5 (RIS)",
            summary="Show time analog style",
            desc="Shows the time on an analog style clock.",
            file_name="analog_time.star",
            package_name="analogtime",
        ),
        Manifest(
            id="arcade-classics",
            name="Arcade Classics",
            author="Steve Otteson",
            summary="Classic arcade animations",
            desc="Animations from classic arcade video games.",
            file_name="arcade_classics.star",
            package_name="arcadeclassics",
        ),
        Manifest(
            id="bgg-hotness",
            name="BGG Hotness",
            author="Henry So, Jr.",
            summary="BoardGameGeek Hotness",
            desc="Shows the top items from BoardGameGeek's Board Game Hotness list.",
            file_name="bgg_hotness.star",
            package_name="bgghotness",
        ),
        Manifest(
            id="bible-votd",
            name="Bible VOTD",
            author="danrods",
            summary="Shows a daily bible verse",
            desc="Shows a bible verse on a daily cadence.",
            file_name="bible_votd.star",
            package_name="biblevotd",
        ),
        Manifest(
            id="big-clock",
            name="Big Clock",
            author="Joey Hoer",
            summary="A large retro-style clock",
            desc=(
                "Display a large retro-style clock; the clock can change color at night "
                "based on sunrise and sunset times for a given location, supports 24-hour "
                "and 12-hour variants and optionally flashes the separator."
            ),
            file_name="big_clock.star",
            package_name="bigclock",
        ),
        Manifest(
            id="binary-clock",
            name="Binary Clock",
            author="LukiLeu",
            summary="Shows a binary clock",
            desc="This app show the current date and time in a binary format.",
            file_name="binary_clock.star",
            package_name="binaryclock",
        ),
        Manifest(
            id="clock-by-henry",
            name="Clock By Henry",
            author="Henry So, Jr.",
            summary="Large Digit Time With Date",
            desc=(
                "Show the time with numbers you can see from across the room! "
                "Bonus date included."
            ),
            file_name="clock_by_henry.star",
            package_name="clockbyhenry",
        ),
    ]