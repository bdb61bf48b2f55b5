# compute_score(), reliability helpers

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Dict, List, Mapping, Optional, Tuple

from cineScore.settings import SCORE_WEIGHT_PROFILES, SOURCE_DISPLAY_NAMES
from cineScore.metadata.core.models import (
    CineScore, RatingSet, Reliability, ScoreOptions)

_RELIABILITY_LABELS = {
    "high":   "High Reliability",
    "medium": "Medium Reliability",
    "low":    "Low Reliability",
}


# ─────────────────────── parsing helpers
def _parse_number(raw: Any, suffix: str = "") -> Optional[float]:
    """
    Float value of *raw* with an optional trailing *suffix* removed.
    None / "" / "N/A" / garbage / NaN / ±inf  →  None (source unusable).
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    else:
        txt = str(raw).strip()
        if suffix and txt.endswith(suffix):
            txt = txt[: -len(suffix)].strip()
        if "_" in txt:                     # "8_0" is Python syntax, not a rating
            return None
        try:
            value = float(txt)
        except ValueError:
            return None
    return value if math.isfinite(value) else None


def _round1(value: float) -> float:
    """Round half away from zero to one decimal place."""
    if not math.isfinite(value):
        return value
    # shave float noise first: 8.25 * w / w can come back as 8.2499999…
    exact = Decimal(repr(round(value, 9)))
    with localcontext() as ctx:
        ctx.prec = 400                     # every finite double fits
        return float(exact.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _raw_values(r: RatingSet) -> List[Tuple[str, Optional[float]]]:
    """Normalized 0‥10 value per source key, fixed order IMDB → RT → MC."""
    imdb = _parse_number(r.imdb.rating) if r.imdb else None
    tomato = _parse_number(r.rotten_tomatoes.tomatometer, "%") if r.rotten_tomatoes else None
    meta = _parse_number(r.metacritic.metascore, "/100") if r.metacritic else None
    return [
        ("imdb",        imdb),
        ("tomatometer", tomato / 10 if tomato is not None else None),
        ("metascore",   meta / 10 if meta is not None else None),
    ]


# ─────────────────────── public API
def calculate_reliability(source_count: int) -> Reliability:
    if source_count >= 3:
        return "high"
    if source_count >= 2:
        return "medium"
    return "low"


def reliability_label(reliability: str | None) -> str:
    return _RELIABILITY_LABELS.get(reliability or "", "Unknown Reliability")


def score_band(score: float) -> str:
    """Coarse quality band used when displaying a CineScore."""
    if score >= 8:
        return "great"
    if score >= 6:
        return "good"
    if score >= 4:
        return "fair"
    return "poor"


def compute_score(
    ratings: RatingSet | Mapping[str, Any] | None,
    options: ScoreOptions | Mapping[str, Any] | None = None,
) -> CineScore:
    """
    Weighted consensus of IMDb, Rotten Tomatoes and Metacritic on 0‥10.

    Only the sources that carry a parseable number take part; the weights
    of those sources are renormalised so a missing source never drags the
    score down. Never raises – no usable source gives ``score == 0`` and
    ``reliability == "low"``.
    """
    if not isinstance(ratings, RatingSet):
        ratings = RatingSet.from_dict(ratings if isinstance(ratings, Mapping) else None)
    if isinstance(options, Mapping):
        flag = options.get("audienceFocused", options.get("audience_focused", False))
    else:
        flag = getattr(options, "audience_focused", False)
    audience = flag is True
    weights = SCORE_WEIGHT_PROFILES["audience" if audience else "critic"]

    weighted_sum = 0.0
    total_weight = 0.0
    used_sources: List[str] = []
    normalized: Dict[str, float] = {}

    for key, value in _raw_values(ratings):
        if value is None:
            continue
        weighted_sum += value * weights[key]
        total_weight += weights[key]
        used_sources.append(SOURCE_DISPLAY_NAMES[key])
        normalized[key] = value

    score = _round1(weighted_sum / total_weight) if total_weight > 0 else 0.0

    return CineScore(
        score=score,
        normalized_scores=normalized,
        used_sources=tuple(used_sources),
        audience_focused=audience,
        reliability=calculate_reliability(len(used_sources)),
    )
