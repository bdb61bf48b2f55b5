from cineScore.metadata.core.models import (
    CineScore,
    ImdbRating,
    MetacriticRating,
    MovieDetails,
    RatingSet,
    ScoreOptions,
    TomatoRating,
)

__all__ = [
    "CineScore", "ImdbRating", "MetacriticRating", "MovieDetails",
    "RatingSet", "ScoreOptions", "TomatoRating",
]
