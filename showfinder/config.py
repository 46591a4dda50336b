import os

# TVmaze is the only catalog the widget talks to
TVMAZE_API_URL = "https://api.tvmaze.com/"

# used when TVmaze has no image for a show
DEFAULT_IMAGE_URL = "https://tinyurl.com/missing-tv"

LOG_DIR = os.getenv("SHOWFINDER_LOG_DIR", "data/log")
LOG_LEVEL = os.getenv("SHOWFINDER_LOG_LEVEL", "INFO").upper()
DEBUG = os.getenv("SHOWFINDER_DEBUG", "").lower() in ("1", "true", "yes")
