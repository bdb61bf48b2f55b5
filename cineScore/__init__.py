"""
cineScore
~~~~~~~~~

Top-level package for the CineScore movie catalogue.

Exports:
  - compute_score and its input / output dataclasses
  - fetch_movie_details (TMDb metadata + OMDb ratings + score)
  - AppState (theme / weighting preference, explicit load & save)
"""

# scoring core
from cineScore.metadata.core.models import (
    CineScore,
    MovieDetails,
    RatingSet,
    ScoreOptions,
)
from cineScore.metadata.analytics.scoring import compute_score

# services
from cineScore.metadata.analytics.details_service import fetch_movie_details
from cineScore.app_state import AppState

__all__ = [
    # scoring
    "CineScore",
    "MovieDetails",
    "RatingSet",
    "ScoreOptions",
    "compute_score",
    # services
    "fetch_movie_details",
    "AppState",
]
