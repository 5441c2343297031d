"""Application settings and configuration."""

from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
DATA_URL = "https://d396qusza40orc.cloudfront.net/repdata%2Fdata%2FStormData.csv.bz2"
DATA_FILE = DATA_DIR / "StormData.csv.bz2"

# Report output directory
EXPORT_DIR = BASE_DIR / "output" / "latest_run"

# Event groups, lowest precedence first. A later group overwrites the label
# of an earlier one when both match.
EVENT_GROUP_DEFINITIONS = [
    (
        "rain/storms",
        [
            "thunderstorm",
            "tstm wind",
            "lightning",
            "wind",
            "wnd",
            "tropical storm",
            "heavy rain",
            "hurricane",
            "waterspout",
            "storm surge",
            "landslide",
            "surf",
            "tsunami",
            "typhoon",
            "excessive rainfall",
            "wet",
            "mixed precip",
        ],
    ),
    ("tornado/hail", ["tornado", "hail", "funnel", "sleet"]),
    ("flood", ["flood", "stream fld", "rip current"]),
    (
        "winter",
        [
            "snow",
            "blizzard",
            "avalanche",
            "winter",
            "ice",
            "freez",
            "cold",
            "frost",
            "icy",
            "windchill",
            "hypothermia",
            "wintry",
            "glaze",
            r"unusual\w* cool",
        ],
    ),
    (
        "summer/heat",
        [
            "fire",
            "heat",
            "drought",
            "dust storm",
            "dust devil",
            "dry microburst",
            "hyperthermia",
            r"unseasonabl\w* (warm|dry|hot)",
            "record warmth",
            r"unusual\w* warm",
        ],
    ),
    ("fog", ["fog", "smoke"]),
]

# Download settings
DOWNLOAD_SETTINGS = {
    "timeout": 120,
    "chunk_size": 8192,
}

# Analysis settings
ANALYSIS_SETTINGS = {
    "min_year": None,  # keep every year
    "top_n": 7,
}

# API settings
API_SETTINGS = {
    "title": "Storm Impact API",
    "description": "Health and economic impact of US weather events by event group",
    "version": "1.0.0",
}
