# RatingSet / ScoreOptions / CineScore dataclasses (+ the details DTO)
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

Reliability = Literal["high", "medium", "low"]


@dataclass(slots=True)
class ImdbRating:
    rating: str | None = None          # "7.9"   (0‥10)
    votes: str | None = None           # "1,234,567"
    url: str | None = None


@dataclass(slots=True)
class TomatoRating:
    tomatometer: str | None = None     # "93" or "93%"
    url: str | None = None


@dataclass(slots=True)
class MetacriticRating:
    metascore: str | None = None       # "74" or "74/100"
    url: str | None = None


@dataclass(slots=True)
class RatingSet:
    """Per-source rating records; any subset may be missing."""
    imdb: ImdbRating | None = None
    rotten_tomatoes: TomatoRating | None = None
    metacritic: MetacriticRating | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "RatingSet":
        """
        Build from the keyed-record shape

            {"imdb": {"rating": …}, "rottenTomatoes": {"tomatometer": …},
             "metacritic": {"metascore": …}}

        Unknown keys are ignored; non-mapping entries count as absent.
        """
        data = data or {}

        def _block(*keys: str) -> dict | None:
            for k in keys:
                blob = data.get(k)
                if isinstance(blob, Mapping):
                    return dict(blob)
            return None

        im = _block("imdb")
        rt = _block("rottenTomatoes", "rotten_tomatoes")
        mc = _block("metacritic")
        return cls(
            imdb=ImdbRating(im.get("rating"), im.get("votes"), im.get("url")) if im is not None else None,
            rotten_tomatoes=TomatoRating(rt.get("tomatometer"), rt.get("url")) if rt is not None else None,
            metacritic=MetacriticRating(mc.get("metascore"), mc.get("url")) if mc is not None else None,
        )

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        out: Dict[str, Dict[str, Any]] = {}
        if self.imdb:
            out["imdb"] = {"rating": self.imdb.rating, "votes": self.imdb.votes, "url": self.imdb.url}
        if self.rotten_tomatoes:
            out["rottenTomatoes"] = {"tomatometer": self.rotten_tomatoes.tomatometer,
                                     "url": self.rotten_tomatoes.url}
        if self.metacritic:
            out["metacritic"] = {"metascore": self.metacritic.metascore, "url": self.metacritic.url}
        return out


@dataclass(slots=True, frozen=True)
class ScoreOptions:
    audience_focused: bool = False


@dataclass(slots=True, frozen=True)
class CineScore:
    score: float
    normalized_scores: Dict[str, float]
    used_sources: Tuple[str, ...]
    audience_focused: bool
    reliability: Reliability

    def to_dict(self) -> Dict[str, Any]:
        """camelCase wire shape, as the front end consumes it."""
        return {
            "score": self.score,
            "normalizedScores": dict(self.normalized_scores),
            "usedSources": list(self.used_sources),
            "audienceFocused": self.audience_focused,
            "reliability": self.reliability,
        }


@dataclass(slots=True)
class MovieDetails:
    movie: Optional[dict] = None
    ratings: Optional[RatingSet] = None
    cine_score: Optional[CineScore] = None
    error: Optional[str] = None
