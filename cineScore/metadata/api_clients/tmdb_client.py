from __future__ import annotations

import datetime as _dt
from typing import Any, List, Optional

import requests

from cineScore import settings
from cineScore.utils import log_debug, throttle
from cineScore.metadata.api_clients.errors import ApiError, RateLimitReached

_TIME_WINDOWS = ("day", "week")
_RELEASE_TYPES = ("now_playing", "upcoming")
RELEASE_WINDOW_DAYS = 30
TOP_RATED_MIN_VOTES = 1000


class TMDBClient:
    """Thin wrapper around The Movie Database (TMDb) v3 REST API."""

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(self, api_key: str | None = None, session: requests.Session | None = None):
        self.api_key = api_key or settings.TMDB_API_KEY
        if not self.api_key:
            raise RuntimeError("TMDB_API_KEY not set and no api_key passed")
        self.session = session or requests.Session()

    @throttle()
    def _get(self, path: str, **params) -> dict:
        params["api_key"] = self.api_key
        url = f"{settings.TMDB_BASE_URL}{path}"
        try:
            r = self.session.get(url, params=params, timeout=settings.REQUEST_TIMEOUT)
        except requests.RequestException as exc:
            log_debug(f"TMDb {path} failed: {exc}")
            raise ApiError(f"TMDb request failed: {exc}") from exc

        if r.status_code == 429:
            log_debug("TMDb rate limit reached")
            raise RateLimitReached("TMDb rate limit reached", status=429)
        if not r.ok:
            log_debug(f"TMDb {path} → HTTP {r.status_code}")
            raise ApiError(f"TMDb returned HTTP {r.status_code}", status=r.status_code)
        try:
            return r.json()
        except ValueError as exc:
            log_debug(f"TMDb {path} sent non-JSON")
            raise ApiError("TMDb returned an unreadable payload") from exc

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------
    def get_trending_movies(self, time_window: str = "week", page: int = 1) -> dict:
        if time_window not in _TIME_WINDOWS:
            raise ValueError(f"time_window must be one of {_TIME_WINDOWS}")
        return self._get(f"/trending/movie/{time_window}", page=page)

    def search_movies(
        self,
        query: str,
        page: int = 1,
        year: int | None = None,
        sort_by: str | None = None,
        **extra: Any,
    ) -> dict:
        """`/search/movie`; adult titles are always excluded."""
        if not query or not query.strip():
            raise ValueError("Search query is empty.")
        params: dict[str, Any] = {"query": query.strip(), "page": page, "include_adult": "false"}
        if year:
            params["primary_release_year"] = year
        if sort_by:
            params["sort_by"] = sort_by
        params.update(extra)
        return self._get("/search/movie", **params)

    def get_movies_by_genre(self, genre_id: int, page: int = 1) -> dict:
        return self._get(
            "/discover/movie",
            with_genres=genre_id,
            page=page,
            sort_by="popularity.desc",
        )

    def get_top_rated(self, page: int = 1, genre_id: int | None = None) -> dict:
        """Highest average first, ignoring titles with fewer than 1000 votes."""
        params: dict[str, Any] = {
            "page": page,
            "sort_by": "vote_average.desc",
            "vote_count.gte": TOP_RATED_MIN_VOTES,
        }
        if genre_id:
            params["with_genres"] = genre_id
        return self._get("/discover/movie", **params)

    def get_new_releases(
        self,
        release_type: str = "now_playing",
        page: int = 1,
        genre_id: int | None = None,
        today: _dt.date | None = None,
    ) -> dict:
        """
        Now-playing / upcoming list.

        Without a genre this is TMDb's own list. A genre filter switches to
        `/discover/movie` over a 30-day window: the last 30 days for
        *now_playing*, the next 30 days for *upcoming*.
        """
        if release_type not in _RELEASE_TYPES:
            raise ValueError(f"release_type must be one of {_RELEASE_TYPES}")
        if not genre_id:
            return self._get(f"/movie/{release_type}", page=page)

        today = today or _dt.date.today()
        span = _dt.timedelta(days=RELEASE_WINDOW_DAYS)
        start, end = (today - span, today) if release_type == "now_playing" else (today, today + span)
        return self._get(
            "/discover/movie",
            page=page,
            with_genres=genre_id,
            sort_by="primary_release_date.desc",
            **{
                "primary_release_date.gte": start.isoformat(),
                "primary_release_date.lte": end.isoformat(),
            },
        )

    def get_genres(self) -> List[dict]:
        """[{ "id": 28, "name": "Action" }, …]"""
        return self._get("/genre/movie/list").get("genres", [])

    # ------------------------------------------------------------------
    # Single movie
    # ------------------------------------------------------------------
    def get_movie_details(self, movie_id: int) -> dict:
        details = self._get(
            f"/movie/{movie_id}",
            append_to_response="credits,videos,images",
        )
        log_debug(f"TMDb → details for ID={movie_id} “{details.get('title')}”")
        return details

    @staticmethod
    def trailer_url(details: dict) -> Optional[str]:
        """First YouTube trailer in an appended `videos` block."""
        return next(
            (f"https://www.youtube.com/watch?v={v['key']}"
             for v in (details.get("videos") or {}).get("results", [])
             if v.get("site") == "YouTube" and v.get("type") == "Trailer" and v.get("key")),
            None,
        )


_client: TMDBClient | None = None


def get_client() -> TMDBClient:
    """Shared instance, created on first use."""
    global _client
    if _client is None:
        _client = TMDBClient()
    return _client
