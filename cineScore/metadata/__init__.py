"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – rating / score dataclasses
* api_clients – TMDb / OMDb wrappers
* analytics   – CineScore aggregation, details service
"""

# ── core objects ──────────────────────────────────────────────────────────
from cineScore.metadata.core.models import CineScore, MovieDetails, RatingSet, ScoreOptions

# ── API clients ───────────────────────────────────────────────────────────
from cineScore.metadata.api_clients import get_tmdb_client, get_omdb_client

# ── analytics convenience ────────────────────────────────────────────────
from cineScore.metadata.analytics.scoring         import compute_score
from cineScore.metadata.analytics.details_service import fetch_movie_details

__all__ = [
    "CineScore",
    "MovieDetails",
    "RatingSet",
    "ScoreOptions",
    "get_tmdb_client",
    "get_omdb_client",
    "compute_score",
    "fetch_movie_details",
]
