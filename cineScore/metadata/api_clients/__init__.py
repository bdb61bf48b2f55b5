"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around the TMDb / OMDb REST APIs.
Use ``get_tmdb_client()`` / ``get_omdb_client()`` if you only need one
shared instance.
"""

from cineScore.metadata.api_clients.errors      import ApiError, RateLimitReached, RatingsUnavailable
from cineScore.metadata.api_clients.tmdb_client import TMDBClient, get_client as get_tmdb_client
from cineScore.metadata.api_clients.omdb_client import OMDBClient, get_client as get_omdb_client

__all__ = [
    "ApiError", "RateLimitReached", "RatingsUnavailable",
    "TMDBClient", "OMDBClient", "get_tmdb_client", "get_omdb_client",
]
