import argparse
import sys
from pathlib import Path
from typing import List, Optional

from cineScore import settings
from cineScore.app_state import AppState
from cineScore.utils import log_debug
from cineScore.metadata.core.models import RatingSet, ScoreOptions, CineScore
from cineScore.metadata.analytics.scoring import compute_score, reliability_label, score_band
from cineScore.metadata.analytics.details_service import fetch_movie_details
from cineScore.metadata.api_clients import ApiError, TMDBClient, get_tmdb_client


# ────────────────────────────────────────────────────────────────────────────
# 1 ▸ plain-text renderers
# ────────────────────────────────────────────────────────────────────────────
def _print_movie_list(payload: dict) -> None:
    results = payload.get("results", [])
    if not results:
        print("No movies found.")
        return
    for m in results:
        year = (m.get("release_date") or "")[:4] or "----"
        vote = m.get("vote_average")
        vote_txt = f"{vote:.1f}" if isinstance(vote, (int, float)) else "--"
        print(f"{m.get('id') or '-':>8}  {year}  {vote_txt:>4}  {m.get('title')}")
    print(f"-- page {payload.get('page', 1)} of {payload.get('total_pages', 1)}")


def _print_score(cs: CineScore) -> None:
    print(f"CineScore: {cs.score:.1f}/10 ({score_band(cs.score)})")
    print(f"  {reliability_label(cs.reliability)} · "
          f"{len(cs.used_sources)} source{'s' if len(cs.used_sources) != 1 else ''}: "
          f"{', '.join(cs.used_sources) or 'none'}")
    print("  Weighted towards " + ("audience scores" if cs.audience_focused else "critic scores"))
    for key, value in cs.normalized_scores.items():
        print(f"    {key:<12} {value:.1f}")


# ────────────────────────────────────────────────────────────────────────────
# 2 ▸ sub-commands
# ────────────────────────────────────────────────────────────────────────────
def cmd_trending(args, state: AppState) -> int:
    _print_movie_list(get_tmdb_client().get_trending_movies(args.window, args.page))
    return 0


def cmd_search(args, state: AppState) -> int:
    _print_movie_list(get_tmdb_client().search_movies(
        args.query, page=args.page, year=args.year, sort_by=args.sort_by))
    return 0


def cmd_top_rated(args, state: AppState) -> int:
    _print_movie_list(get_tmdb_client().get_top_rated(args.page, args.genre))
    return 0


def cmd_new_releases(args, state: AppState) -> int:
    _print_movie_list(get_tmdb_client().get_new_releases(args.type, args.page, args.genre))
    return 0


def cmd_genres(args, state: AppState) -> int:
    for g in get_tmdb_client().get_genres():
        print(f"{g.get('id') or '-':>6}  {g.get('name')}")
    return 0


def cmd_details(args, state: AppState) -> int:
    audience = args.audience or state.audience_focused
    details = fetch_movie_details(args.movie_id, audience_focused=audience)
    if details.error:
        print(details.error, file=sys.stderr)
        return 1

    movie = details.movie or {}
    print(f"{movie.get('title')} ({(movie.get('release_date') or '')[:4]})")
    if movie.get("overview"):
        print(movie["overview"])
    if trailer := TMDBClient.trailer_url(movie):
        print(f"Trailer: {trailer}")
    if details.cine_score is None:
        print("No rating data available")
    else:
        _print_score(details.cine_score)
    return 0


def cmd_score(args, state: AppState) -> int:
    ratings = RatingSet.from_dict({
        "imdb":           {"rating": args.imdb} if args.imdb is not None else None,
        "rottenTomatoes": {"tomatometer": args.rt} if args.rt is not None else None,
        "metacritic":     {"metascore": args.metacritic} if args.metacritic is not None else None,
    })
    audience = args.audience or state.audience_focused
    _print_score(compute_score(ratings, ScoreOptions(audience)))
    return 0


def cmd_theme(args, state: AppState) -> int:
    if args.action == "toggle":
        state.toggle_theme()
    print(f"Theme: {state.theme_mode}")
    return 0


def cmd_audience(args, state: AppState) -> int:
    if args.action == "toggle":
        state.toggle_audience_focus()
    print("Default weighting: " + ("audience" if state.audience_focused else "critic"))
    return 0


# ────────────────────────────────────────────────────────────────────────────
# 3 ▸ argument parser
# ────────────────────────────────────────────────────────────────────────────
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cinescore",
                                description="Browse TMDb and compute CineScores.")
    p.add_argument("--state", default=None, help="path of the preferences file")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("trending", help="trending movies")
    s.add_argument("--window", choices=["day", "week"], default="week")
    s.add_argument("--page", type=int, default=1)
    s.set_defaults(func=cmd_trending)

    s = sub.add_parser("search", help="search by title")
    s.add_argument("query")
    s.add_argument("--year", type=int)
    s.add_argument("--sort-by", dest="sort_by")
    s.add_argument("--page", type=int, default=1)
    s.set_defaults(func=cmd_search)

    s = sub.add_parser("top-rated", help="highest rated (1000+ votes)")
    s.add_argument("--genre", type=int)
    s.add_argument("--page", type=int, default=1)
    s.set_defaults(func=cmd_top_rated)

    s = sub.add_parser("new-releases", help="now playing / upcoming")
    s.add_argument("--type", choices=["now_playing", "upcoming"], default="now_playing")
    s.add_argument("--genre", type=int)
    s.add_argument("--page", type=int, default=1)
    s.set_defaults(func=cmd_new_releases)

    s = sub.add_parser("genres", help="list TMDb genres")
    s.set_defaults(func=cmd_genres)

    s = sub.add_parser("details", help="metadata + CineScore for one movie")
    s.add_argument("movie_id", type=int)
    s.add_argument("--audience", action="store_true", help="audience-focused weights")
    s.set_defaults(func=cmd_details)

    s = sub.add_parser("score", help="CineScore from ratings you type in")
    s.add_argument("--imdb", help="IMDb rating, 0-10")
    s.add_argument("--rt", help="Rotten Tomatoes tomatometer, 0-100")
    s.add_argument("--metacritic", help="Metascore, 0-100")
    s.add_argument("--audience", action="store_true", help="audience-focused weights")
    s.set_defaults(func=cmd_score)

    s = sub.add_parser("theme", help="show or toggle light/dark preference")
    s.add_argument("action", choices=["show", "toggle"], nargs="?", default="show")
    s.set_defaults(func=cmd_theme)

    s = sub.add_parser("audience", help="show or toggle the default weighting profile")
    s.add_argument("action", choices=["show", "toggle"], nargs="?", default="show")
    s.set_defaults(func=cmd_audience)
    return p


# ────────────────────────────────────────────────────────────────────────────
# 4 ▸ entry
# ────────────────────────────────────────────────────────────────────────────
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    state_path = Path(args.state) if args.state else settings.STATE_PATH

    state = AppState.load(state_path)          # init boundary
    try:
        return args.func(args, state)
    except (ApiError, RuntimeError, ValueError) as exc:
        log_debug(f"{args.command} failed: {exc}")
        print(settings.GENERIC_FAILURE.format(what=args.command.replace("-", " ")),
              file=sys.stderr)
        return 1
    finally:
        state.save(state_path)                 # teardown boundary


if __name__ == "__main__":
    sys.exit(main())
