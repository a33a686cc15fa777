"""Community applets whose names run from I to P."""

from __future__ import annotations

from communityapps.manifest import Manifest


def manifests() -> list[Manifest]:
    """Return fresh manifests for the applets in this range, in catalogue order."""
    return [
        Manifest(
            id="ifparank",
            name="IFPARank",
            author="cubsaaron",
            summary="Display IFPA Ranking",
            desc=(
                "Display an International Flipper Pinball Association (IFPA) "
                "World Ranking."
            ),
            file_name="ifparank.star",
            package_name="ifparank",
        ),
        Manifest(
            id="iss-tracker",
            name="ISS Tracker",
            author="Chris Jones (@IPv6Freely)",
            summary="Tracks the ISS Position",
            desc=(
                "Tracks the position of the International Space Station using "
                "LAT/LONG coordinates."
            ),
            file_name="iss_tracker.star",
            package_name="isstracker",
        ),
        Manifest(
            id="jokes-jokeapi",
            name="Jokes JokeAPI",
            author="rs7q5 (RIS)",
            summary="Displays jokes from JokeAPI",
            desc="Displays different jokes from JokeAPI.",
            file_name="jokes_jokeapi.star",
            package_name="jokesjokeapi",
        ),
        Manifest(
            id="launchcountdown",
            name="LaunchCountdown",
            author="Robert Ison",
            summary="Displays next world launch",
            desc="Displays the next rocket launch in the world.",
            file_name="launchcountdown.star",
            package_name="launchcountdown",
        ),
        Manifest(
            id="lirr",
            name="LIRR",
            author="bralax",
            summary="LIRR Train Times",
            desc="Long Island Railroad Train Times.",
            file_name="lirr.star",
            package_name="lirr",
        ),
        Manifest(
            id="mbta",
            name="MBTA",
            author="Marcus Better",
            summary="MBTA departures",
            desc="MBTA bus and rail departure times.",
            file_name="mbta.star",
            package_name="mbta",
        ),
        Manifest(
            id="mn-light-rail",
            name="MN Light Rail",
            author="Alex Miller",
            summary="Train Departure Times",
            desc="Shows Light Rail Departure Times from Selected Stop.",
            file_name="mn_light_rail.star",
            package_name="mnlightrail",
        ),
        Manifest(
            id="nationaltoday",
            name="NationalToday",
            author="rs7q5 (RIS)",
            summary="Get NationalToday holidays",
            desc="Displays today's holidays from NationalToday.",
            file_name="nationaltoday.star",
            package_name="nationaltoday",
        ),
        Manifest(
            id="near-earth-objs",
            name="Near Earth Objs",
            author="noahcolvin",
            summary="Show next near earth object",
            desc=(
                "Displays the name, speed, distance, and arrival of the next near "
                "Earth object from NeoWs."
            ),
            file_name="near_earth_objs.star",
            package_name="nearearthobjs",
        ),
        Manifest(
            id="netatmo",
            name="Netatmo",
            author="danmcclain",
            summary="Weather from your Netatmo",
            desc="Get your current weather from your Netatmo weather station.",
            file_name="netatmo.star",
            package_name="netatmo",
        ),
        Manifest(
            id="nft",
            name="NFT",
            author="nipterink",
            summary="Random Opensea NFT",
            desc="Displays a random NFT associated with an Ethereum public address.",
            file_name="nft.star",
            package_name="nft",
        ),
        Manifest(
            id="nightscout",
            name="Nightscout",
            author="Jeremy Tavener",
            summary="Shows Nightscout CGM Data",
            desc=(
                "Displays Continuous Glucose Monitoring (CGM) data from the "
                "Nightscout Open Source project (https://nightscout.github.io/)."
            ),
            file_name="nightscout.star",
            package_name="nightscout",
        ),
        Manifest(
            id="nixel-clock",
            name="Nixel Clock",
            author="Olly Stedall @saltedlolly",
            summary="A Pixel Nixie Clock",
            desc="Nixie Tube Clock + Pixels = Nixel Clock!",
            file_name="nixel_clock.star",
            package_name="nixelclock",
        ),
        Manifest(
            id="noaa-buoy",
            name="NOAA Buoy",
            author="tavdog",
            summary="Show buoy swell info",
            desc=(
                "Display swell data for user specified buoy. Find buoy_id's here : "
                "https://www.ndbc.noaa.gov/obs.shtml Buoy must have "
                "height,period,direction to display correctly."
            ),
            file_name="noaa_buoy.star",
            package_name="noaabuoy",
        ),
        Manifest(
            id="nyan-cat",
            name="Nyan Cat",
            author="Mack Ward",
            summary="Nyan Cat Animation",
            desc="An animated cartoon cat with a Pop-Tart for a torso.",
            file_name="nyan_cat.star",
            package_name="nyancat",
        ),
        Manifest(
            id="nyc-bus",
            name="NYC Bus",
            author="samandmoore",
            summary="NYC Bus departures",
            desc="Real time bus departures for your preferred stop.",
            file_name="nyc_bus.star",
            package_name="nycbus",
        ),
        Manifest(
            id="oh-highway-signs",
            name="OH Highway Signs",
            author="noahcolvin",
            summary="Displays OH highway signs",
            desc="Displays messages from overhead signs on Ohio highways.",
            file_name="oh_highway_signs.star",
            package_name="ohhighwaysigns",
        ),
        Manifest(
            id="pagerduty",
            name="PagerDuty",
            author="Nick Penree",
            summary="Show PagerDuty stats",
            desc="Show PagerDuty incident stats and on-call status.",
            file_name="pagerduty.star",
            package_name="pagerduty",
        ),
        Manifest(
            id="path-train-schedule",
            name="Path Schedule",
            author="Todd Greenberg",
            summary="Schedule for path train",
            desc=(
                "Shows train arrivals for upcoming inbound and outbound trains at "
                "path train stations."
            ),
            file_name="path_train_schedule.star",
            package_name="pathtrainschedule",
        ),
    ]