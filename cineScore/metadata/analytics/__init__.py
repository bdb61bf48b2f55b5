"""
metadata.analytics
~~~~~~~~~~~~~~~~~~
Stateless scoring helpers plus the per-movie details service.
"""

from .scoring import (
    compute_score,
    calculate_reliability,
    reliability_label,
    score_band,
)

from .details_service import fetch_movie_details, rescore   # network helper

__all__ = [
    "compute_score",
    "calculate_reliability",
    "reliability_label",
    "score_band",
    "fetch_movie_details",
    "rescore",
]
