"""Community applets whose names run from C to H."""

from __future__ import annotations

from communityapps.manifest import Manifest


def manifests() -> list[Manifest]:
    """Return fresh manifests for the applets in this range, in catalogue order."""
    return [
        Manifest(
            id="coingecko-price",
            name="CoinGecko Price",
            author="Allen Schober (@aschober)",
            summary="Crypto price from CoinGecko",
            desc=(
                "Displays the current price of any coin supported by CoinGecko against "
                "one or two other currencies. Crypto price data updated every 10 minutes. "
                "Data provided by CoinGecko."
            ),
            file_name="coingecko_price.star",
            package_name="coingeckoprice",
        ),
        Manifest(
            id="countdown-clock",
            name="Countdown Clock",
            author="CubsAaron",
            summary="Countdown to an event",
            desc="Display the days, hours, and minutes remaining to a specified event.",
            file_name="countdown_clock.star",
            package_name="countdownclock",
        ),
        Manifest(
            id="crypto-tracker",
            name="Crypto Tracker",
            author="Ethan Fuerst (@ethanfuerst)",
            summary="Tracks crypto price",
            desc="Display crypto prices in USD over the last 24 hours.",
            file_name="crypto_tracker.star",
            package_name="cryptotracker",
        ),
        Manifest(
            id="date-progress",
            name="Date Progress",
            author="possan",
            summary="Shows date as percentages",
            desc=(
                "Shows todays date as colorful progressbars, you can show the progress "
                "of the current day, month and year."
            ),
            file_name="date_progress.star",
            package_name="dateprogress",
        ),
        Manifest(
            id="date-time-clock",
            name="Date Time Clock",
            author="Alex Miller/AmillionAir",
            summary="Shows full time and date",
            desc="Displays the full date and current time for user.",
            file_name="date_time_clock.star",
            package_name="datetimeclock",
        ),
        Manifest(
            id="day-night-map",
            name="Day Night Map",
            author="Henry So, Jr.",
            summary="Day & Night World Map",
            desc=(
                "A map of the Earth showing the day and the night. The map is based on "
                "Equirectangular (0°) by Tobias Jung (CC BY-SA 4.0)."
            ),
            file_name="day_night_map.star",
            package_name="daynightmap",
        ),
        Manifest(
            id="destiny-2-stats",
            name="Destiny 2 Stats",
            author="brandontod97",
            summary="Display Destiny stats",
            desc=(
                "Gets the emblem, race, class, and light level of your most recently "
                "played Destiny 2 character."
            ),
            file_name="destiny_2_stats.star",
            package_name="destiny2stats",
        ),
        Manifest(
            id="digibyte-price",
            name="DigiByte Price",
            author="Olly Stedall @saltedlolly",
            summary="Display DigiByte Price",
            desc=(
                "Displays the current DigiByte price in one or two fiat currencies "
                "and/or in Satoshis. Data provided by CoinGecko. Updated every 10 "
                "minutes. If you would like an additional currency supported, pease "
                "let me know in the Tidbyt community Discord."
            ),
            file_name="digibyte_price.star",
            package_name="digibyteprice",
        ),
        Manifest(
            id="digital-rain",
            name="Digital Rain",
            author="Henry So, Jr.",
            summary="Digital Rain à la Matrix",
            desc=(
                "Generates an animation loop of falling code similar to that from the "
                "Matrix movie. A new sequence every 30 minutes."
            ),
            file_name="digital_rain.star",
            package_name="digitalrain",
        ),
        Manifest(
            id="dvd-logo",
            name="DVD Logo",
            author="Mack Ward",
            summary="Bouncing DVD Logo",
            desc=(
                "A screensaver from before the streaming era. "
                "Will it hit the corner this time?"
            ),
            file_name="dvd_logo.star",
            package_name="dvdlogo",
        ),
        Manifest(
            id="dw-headline",
            name="DW Headline",
            author="bmdelaune",
            summary="DailyWire Headlines",
            desc="Shows the latest published headline on DailyWire.com.",
            file_name="dw_headline.star",
            package_name="dwheadline",
        ),
        Manifest(
            id="espn-news",
            name="ESPN News",
            author="rs7q5 (RIS)",
            summary="Get top headlines from ESPN",
            desc=(
                "Displays the top three headlines from the Top Headlines section on "
                "ESPN or a specific user-selected sport."
            ),
            file_name="espn_news.star",
            package_name="espnnews",
        ),
        Manifest(
            id="fishbyt",
            name="Fishbyt",
            author="vlauffer",
            summary="Fish facts",
            desc="Gaze upon glorious marine life.",
            file_name="fishbyt.star",
            package_name="fishbyt",
        ),
        Manifest(
            id="flags",
            name="Flags",
            author="btjones",
            summary="Displays a country flag",
            desc="Displays a random or specific country flag.",
            file_name="flags.star",
            package_name="flags",
        ),
        Manifest(
            id="fuzzy-clock",
            name="Fuzzy Clock",
            author="Max Timkovich",
            summary="Human readable time",
            desc="Display the time in a groovy, human-readable way.",
            file_name="fuzzy_clock.star",
            package_name="fuzzyclock",
        ),
        Manifest(
            id="ga-pilot-buddy",
            name="GA Pilot Buddy",
            author="icdevin",
            summary="Local flight rules and wx",
            desc=(
                "See local aerodrome flight rules and current abbreviated "
                "METAR information."
            ),
            file_name="ga_pilot_buddy.star",
            package_name="gapilotbuddy",
        ),
        Manifest(
            id="happy-hour",
            name="Happy Hour",
            author="Nicole Brooks",
            summary="Hourly Cocktail Generator",
            desc=(
                "Displays a new cocktail every hour, on the hour. Cheers to my mom for "
                "the color scheme, idea, AND name!"
            ),
            file_name="happy_hour.star",
            package_name="happyhour",
        ),
        Manifest(
            id="hvv-departures",
            name="HVV Departures",
            author="Felix Bruns",
            summary="HVV Departures",
            desc=(
                "Display real-time departure times for trains, buses and ferries "
                "in Hamburg (HVV)."
            ),
            file_name="hvv_departures.star",
            package_name="hvvdepartures",
        ),
    ]