"""Community applets whose names run from T to W."""

from __future__ import annotations

from communityapps.manifest import Manifest


def manifests() -> list[Manifest]:
    """Return fresh manifests for the applets in this range, in catalogue order."""
    return [
        Manifest(
            id="twitter-follows",
            name="Twitter Follows",
            author="Nick Penree",
            summary="Twitter Follower Count",
            desc="Display the follower count for a provided screen name.",
            file_name="twitter_follows.star",
            package_name="twitterfollows",
        ),
        Manifest(
            id="unsplash",
            name="Unsplash",
            author="zephyern",
            summary="Shows random photos",
            desc="Displays a random image from Unsplash.",
            file_name="unsplash.star",
            package_name="unsplash",
        ),
        Manifest(
            id="us-yield-curve",
            name="US Yield Curve",
            author="Rob Kimball",
            summary="Plots treasury rates",
            desc=(
                "Track changes to the yield curve over different US Treasury "
                "maturities."
            ),
            file_name="us_yield_curve.star",
            package_name="usyieldcurve",
        ),
        Manifest(
            id="vertical-message",
            name="Vertical Message",
            author="rs7q5 (RIS)",
            summary="Display messages vertically",
            desc="Display a message vertically.",
            file_name="vertical_message.star",
            package_name="verticalmessage",
        ),
        Manifest(
            id="warframe-cycles",
            name="Warframe Cycles",
            author="grantmatheny",
            summary="Time in Warframe open areas",
            desc=(
                "Tells you the cycle that's active in each of the Warframe open areas "
                "and in Earth missions."
            ),
            file_name="warframe_cycles.star",
            package_name="warframecycles",
        ),
        Manifest(
            id="weather-map",
            name="Weather Map",
            author="Felix Bruns",
            summary="Weather Map",
            desc=(
                "Display real-time precipitation radar for a location. Powered by "
                "the RainViewer API."
            ),
            file_name="weather_map.star",
            package_name="weathermap",
        ),
        Manifest(
            id="world-clock",
            name="World Clock",
            author="Elliot Bentley",
            summary="Multi timezone clock",
            desc="Displays the time in up to three different locations.",
            file_name="world_clock.star",
            package_name="worldclock",
        ),
    ]