# fetch_movie_details(movie_id) → metadata + ratings + CineScore
from __future__ import annotations

from cineScore.settings import GENERIC_FAILURE
from cineScore.utils import log_debug
from cineScore.metadata.core.models import MovieDetails, ScoreOptions
from cineScore.metadata.analytics.scoring import compute_score
from cineScore.metadata.api_clients.errors import ApiError
from cineScore.metadata.api_clients import tmdb_client, omdb_client


def fetch_movie_details(
    movie_id: int | None,
    audience_focused: bool = False,
    tmdb: tmdb_client.TMDBClient | None = None,
    omdb: omdb_client.OMDBClient | None = None,
) -> MovieDetails:
    """
    Everything the detail view needs for one TMDb id.

    Priority order
    --------------
    1. TMDb   – descriptive metadata (failure → user-facing error)
    2. OMDb   – ratings via the TMDb `imdb_id` (failure → logged, no score)
    3. CineScore over whatever ratings arrived
    """
    if not movie_id:
        return MovieDetails()

    # ══════════ 1. TMDb ════════════════════════════════════════════════
    tmdb = tmdb or tmdb_client.get_client()
    try:
        movie = tmdb.get_movie_details(movie_id)
    except ApiError as exc:
        log_debug(f"Error fetching movie details for {movie_id}: {exc}")
        return MovieDetails(error=GENERIC_FAILURE.format(what="movie details"))

    result = MovieDetails(movie=movie)

    # ══════════ 2. OMDb ratings ════════════════════════════════════════
    imdb_id = movie.get("imdb_id")
    if not imdb_id:
        log_debug(f"No IMDb id for TMDb {movie_id}; skipping ratings")
        return result

    omdb = omdb or omdb_client.get_client()
    try:
        result.ratings = omdb.get_movie_ratings(imdb_id)
    except ApiError as exc:
        # movie details are still worth showing
        log_debug(f"Error fetching ratings for {imdb_id}: {exc}")
        return result

    # ══════════ 3. CineScore ═══════════════════════════════════════════
    result.cine_score = compute_score(result.ratings, ScoreOptions(audience_focused))
    return result


def rescore(details: MovieDetails, audience_focused: bool) -> MovieDetails:
    """Recompute the CineScore for a new weighting profile; no network."""
    if details.ratings is not None:
        details.cine_score = compute_score(details.ratings, ScoreOptions(audience_focused))
    return details
