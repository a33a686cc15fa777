"""Community applets whose names run from P to T."""

from __future__ import annotations

from communityapps.manifest import Manifest


def manifests() -> list[Manifest]:
    """Return fresh manifests for the applets in this range, in catalogue order."""
    return [
        Manifest(
            id="phase-of-moon",
            name="Phase Of Moon",
            author="Alan Fleming",
            summary="Shows the phase of the moon",
            desc="Shows the current phase of the moon.",
            file_name="phase_of_moon.star",
            package_name="phaseofmoon",
        ),
        Manifest(
            id="pokedex",
            name="Pokedex",
            author="Mack Ward",
            summary="Display a random Pokemon",
            desc=(
                "Display a random Pokemon alongside its name, number, height, "
                "and weight."
            ),
            file_name="pokedex.star",
            package_name="pokedex",
        ),
        Manifest(
            id="powerball",
            name="PowerBall",
            author="AmillionAir",
            summary="Shows Powerball Numbers",
            desc="Shows up to date powerball numbers and next drawing.",
            file_name="powerball.star",
            package_name="powerball",
        ),
        Manifest(
            id="purpleair",
            name="PurpleAir",
            author="posburn",
            summary="Displays local air quality",
            desc="Displays the local air quality index from a PurpleAir sensor.",
            file_name="purpleair.star",
            package_name="purpleair",
        ),
        Manifest(
            id="random-slackmoji",
            name="Random Slackmoji",
            author="btjones",
            summary="Displays a random Slackmoji",
            desc="Displays a random image from slackmojis.com!",
            file_name="random_slackmoji.star",
            package_name="randomslackmoji",
        ),
        Manifest(
            id="reddit-images",
            name="Reddit Images",
            author="Nicole Brooks",
            summary="Shuffle Subreddit Images",
            desc=(
                "Description: Show a random image post from a custom list of "
                "subreddits (up to 10) and/or a list of default subreddits. Use the "
                "ID displayed to access the post on a computer, at "
                "http://www.reddit.com/{id}. All fields are optional."
            ),
            file_name="reddit_images.star",
            package_name="redditimages",
        ),
        Manifest(
            id="sbb-timetable",
            name="SBB Timetable",
            author="LukiLeu",
            summary="SBB Timetable",
            desc=(
                "Shows a timetable for a station in the Swiss Public "
                "Transport network."
            ),
            file_name="sbb_timetable.star",
            package_name="sbbtimetable",
        ),
        Manifest(
            id="snyk",
            name="Snyk",
            author="Andrew Powell",
            summary="Snyk project issue counts",
            desc=(
                "Shows medium/high/critical issue counts for the configured "
                "Snyk project."
            ),
            file_name="snyk.star",
            package_name="snyk",
        ),
        Manifest(
            id="sports-scores",
            name="Sports Scores",
            author="rs7q5",
            summary="Get daily sports scores",
            desc=(
                "Get daily scores or live updates of sports. Scores for the previous "
                "day are shown until 11am EST."
            ),
            file_name="sports_scores.star",
            package_name="sportsscores",
        ),
        Manifest(
            id="sports-standings",
            name="Sports Standings",
            author="rs7q5 (RIS)",
            summary="Get sports standings",
            desc="Get various sports standings (data courtesy of ESPN).",
            file_name="sports_standings.star",
            package_name="sportsstandings",
        ),
        Manifest(
            id="spotthestation",
            name="SpotTheStation",
            author="Robert Ison",
            summary="Next ISS visit overhead",
            desc="Enter your spotthestation.nasa.gov location's RSS Feed URL.",
            file_name="spotthestation.star",
            package_name="spotthestation",
        ),
        Manifest(
            id="steam",
            name="Steam",
            author="Jeremy Tavener",
            summary="Steam Now Playing",
            desc=(
                "Displays current game or previous games. Use https://steamid.xyz/ "
                "to find your 17 digit Steam ID."
            ),
            file_name="steam.star",
            package_name="steam",
        ),
        Manifest(
            id="strava",
            name="Strava",
            author="Rob Kimball",
            summary="Displays athlete stats",
            desc="Displays your YTD or all-time athlete stats recorded on Strava.",
            file_name="strava.star",
            package_name="strava",
        ),
        Manifest(
            id="sunrise-sunset",
            name="Sunrise Sunset",
            author="Alan Fleming",
            summary="Shows sunrise and set times",
            desc="Displays with icon sunrise and sunset times.",
            file_name="sunrise_sunset.star",
            package_name="sunrisesunset",
        ),
        Manifest(
            id="tempest",
            name="Tempest Weather",
            author="Rohan Singh",
            summary="Tempest weather station",
            desc="Show readings from your Tempest weather station.",
            file_name="tempest.star",
            package_name="tempest",
        ),
        Manifest(
            id="they-said-so",
            name="They Said So",
            author="Henry So, Jr.",
            summary="Quote of the Day",
            desc="Quote of the day powered by theysaidso.com.",
            file_name="they_said_so.star",
            package_name="theysaidso",
        ),
        Manifest(
            id="todoist",
            name="Todoist",
            author="zephyern",
            summary="Integration with Todoist",
            desc="Shows the number of tasks you have due today.",
            file_name="todoist.star",
            package_name="todoist",
        ),
        Manifest(
            id="transsee",
            name="TransSee",
            author="[email]",
            summary="Realtime transit prediction",
            desc=(
                "Provides real-time transit predictions based on actual travel times "
                "for over 150 agencies. Requires paid premium. See transsee.ca/tidbyt "
                "for usage information."
            ),
            file_name="transsee.star",
            package_name="transsee",
        ),
    ]