from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables (real env wins over the file)
load_dotenv(BASE_DIR / "secret.env")

TMDB_API_KEY     = os.getenv("TMDB_API_KEY")
OMDB_API_KEY     = os.getenv("OMDB_API_KEY")

# File / folder paths
LOG_PATH         = Path(os.getenv("CINESCORE_LOG_PATH", BASE_DIR / "cinescore_debug.log"))
STATE_PATH       = Path(os.getenv("CINESCORE_STATE_PATH", Path.home() / ".cinescore" / "state.json"))

# API endpoints
TMDB_BASE_URL        = "https://api.themoviedb.org/3"
OMDB_URL             = "https://www.omdbapi.com/"
IMDB_TITLE_URL       = "https://www.imdb.com/title"
ROTTEN_TOMATOES_URL  = "https://www.rottentomatoes.com/m"
METACRITIC_URL       = "https://www.metacritic.com/movie"

# Network
REQUEST_TIMEOUT   = 10                                         # seconds
MIN_REQUEST_DELAY = float(os.getenv("CINESCORE_MIN_DELAY", "0.4"))   # ≈ 2.5 req/sec

# Scoring – the only two supported profiles
SCORE_WEIGHT_PROFILES = {
    "critic": {
        "imdb":        0.40,
        "tomatometer": 0.35,
        "metascore":   0.25,
    },
    "audience": {
        "imdb":        0.60,
        "tomatometer": 0.20,
        "metascore":   0.20,
    },
}
SOURCE_DISPLAY_NAMES = {
    "imdb":        "IMDB",
    "tomatometer": "Rotten Tomatoes",
    "metascore":   "Metacritic",
}

# UI-free labels
THEME_MODES = ("light", "dark")
GENERIC_FAILURE = "Failed to load {what}. Please try again later."
