# cineScore/metadata/api_clients/omdb_client.py
from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from cineScore import settings
from cineScore.utils import log_debug, slugify, throttle
from cineScore.metadata.core.models import (
    ImdbRating, MetacriticRating, RatingSet, TomatoRating)
from cineScore.metadata.api_clients.errors import ApiError, RateLimitReached, RatingsUnavailable


class OMDBClient:
    """
    Wrapper around OMDb that turns one payload per IMDb id into the
    `RatingSet` the scorer consumes.
    """

    # ────────────────────────────────────────────────────────────────
    # Construction
    # ────────────────────────────────────────────────────────────────
    def __init__(self, api_key: str | None = None, session: requests.Session | None = None):
        self.api_key = api_key or settings.OMDB_API_KEY
        if not self.api_key:
            raise RuntimeError("OMDB_API_KEY not set and no api_key passed")
        self.session = session or requests.Session()

    # ────────────────────────────────────────────────────────────────
    # Internal – one HTTP GET
    # ────────────────────────────────────────────────────────────────
    @throttle()
    def _payload(self, imdb_id: str) -> dict:
        if not imdb_id:
            raise ValueError("Provide imdb_id")

        params = {"apikey": self.api_key, "i": imdb_id, "plot": "full"}
        try:
            resp = self.session.get(settings.OMDB_URL, params=params,
                                    timeout=settings.REQUEST_TIMEOUT)
        except requests.RequestException as exc:
            log_debug(f"OMDb fetch error for {imdb_id}: {exc}")
            raise ApiError(f"OMDb request failed: {exc}") from exc

        if resp.status_code == 429:
            log_debug("OMDb rate limit reached")
            raise RateLimitReached("OMDb rate limit reached", status=429)
        if not resp.ok:
            log_debug(f"OMDb HTTP {resp.status_code} for {imdb_id}")
            raise ApiError(f"OMDb returned HTTP {resp.status_code}", status=resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            log_debug(f"OMDb sent non-JSON for {imdb_id}")
            raise ApiError("OMDb returned an unreadable payload") from exc

    # ────────────────────────────────────────────────────────────────
    # Public
    # ────────────────────────────────────────────────────────────────
    def get_movie_info(self, imdb_id: str) -> dict:
        """Raw OMDb JSON (full plot) for *imdb_id*."""
        return self._payload(imdb_id)

    def get_movie_ratings(self, imdb_id: str) -> RatingSet:
        """
        IMDb / Rotten Tomatoes / Metacritic block for *imdb_id*.

        Raises
        ------
        RatingsUnavailable
            OMDb answered ``Response: "False"``.
        ApiError
            Transport / HTTP failure.
        """
        data = self._payload(imdb_id)
        if not data or data.get("Response") != "True":
            log_debug(f"OMDb: no ratings for {imdb_id} ({(data or {}).get('Error')})")
            raise RatingsUnavailable("No ratings data available")
        return self.extract_ratings(data, imdb_id=imdb_id)

    # ────────────────────────────────────────────────────────────────
    # Ratings block – pure
    # ────────────────────────────────────────────────────────────────
    @staticmethod
    def extract_ratings(data: Dict[str, Any], imdb_id: str | None = None) -> RatingSet:
        imdb_id = imdb_id or data.get("imdbID")
        title = data.get("Title") or ""

        ratings = RatingSet(
            imdb=ImdbRating(
                rating=_na(data.get("imdbRating")),
                votes=_na(data.get("imdbVotes")),
                url=f"{settings.IMDB_TITLE_URL}/{imdb_id}" if imdb_id else None,
            )
        )

        rt = _find_source(data, "Rotten Tomatoes")
        if rt is not None:
            ratings.rotten_tomatoes = TomatoRating(
                tomatometer=rt.replace("%", ""),
                url=f"{settings.ROTTEN_TOMATOES_URL}/{slugify(title, '_')}",
            )

        mc = _find_source(data, "Metacritic")
        if mc is not None:
            ratings.metacritic = MetacriticRating(
                metascore=mc.replace("/100", ""),
                url=f"{settings.METACRITIC_URL}/{slugify(title, '-')}",
            )
        return ratings


# ─────────────────────── tiny parsing helpers
def _na(txt: Any) -> Optional[str]:
    return None if txt in (None, "", "N/A") else str(txt)


def _find_source(data: Dict[str, Any], source: str) -> Optional[str]:
    for entry in data.get("Ratings") or []:
        if entry.get("Source") == source:
            return _na(entry.get("Value"))
    return None


_client: OMDBClient | None = None


def get_client() -> OMDBClient:
    """Shared instance, created on first use."""
    global _client
    if _client is None:
        _client = OMDBClient()
    return _client
