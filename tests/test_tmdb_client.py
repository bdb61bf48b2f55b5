import datetime as dt

import pytest

from cineScore.metadata.api_clients.errors import ApiError, RateLimitReached
from cineScore.metadata.api_clients.tmdb_client import TMDBClient

PAGE = {"page": 1, "total_pages": 3, "results": [{"id": 27205, "title": "Inception"}]}


def make(fake_session, fake_response, *payloads):
    session = fake_session(*(fake_response(p) for p in payloads))
    return TMDBClient(session=session), session


def test_trending(fake_session, fake_response):
    client, session = make(fake_session, fake_response, PAGE)
    assert client.get_trending_movies("day", page=2) == PAGE
    call = session.calls[0]
    assert call["url"] == "https://api.themoviedb.org/3/trending/movie/day"
    assert call["params"] == {"page": 2, "api_key": "tmdb-test-key"}


def test_trending_rejects_unknown_window(fake_session, fake_response):
    client, _ = make(fake_session, fake_response)
    with pytest.raises(ValueError):
        client.get_trending_movies("month")


def test_details_appends_extras(fake_session, fake_response):
    client, session = make(fake_session, fake_response, {"id": 27205, "title": "Inception"})
    client.get_movie_details(27205)
    call = session.calls[0]
    assert call["url"].endswith("/movie/27205")
    assert call["params"]["append_to_response"] == "credits,videos,images"


def test_search_params(fake_session, fake_response):
    client, session = make(fake_session, fake_response, PAGE, PAGE)
    client.search_movies("  inception ")
    client.search_movies("alien", page=2, year=1979, sort_by="popularity.desc")
    first, second = (c["params"] for c in session.calls)
    assert first == {"query": "inception", "page": 1, "include_adult": "false",
                     "api_key": "tmdb-test-key"}
    assert second["primary_release_year"] == 1979
    assert second["sort_by"] == "popularity.desc"


def test_search_requires_query(fake_session, fake_response):
    client, _ = make(fake_session, fake_response)
    with pytest.raises(ValueError):
        client.search_movies("   ")


def test_genre_listing_and_discover(fake_session, fake_response):
    genres = {"genres": [{"id": 28, "name": "Action"}]}
    client, session = make(fake_session, fake_response, genres, PAGE)
    assert client.get_genres() == [{"id": 28, "name": "Action"}]
    client.get_movies_by_genre(28)
    assert session.calls[1]["url"].endswith("/discover/movie")
    assert session.calls[1]["params"]["sort_by"] == "popularity.desc"
    assert session.calls[1]["params"]["with_genres"] == 28


def test_top_rated_floor_on_votes(fake_session, fake_response):
    client, session = make(fake_session, fake_response, PAGE, PAGE)
    client.get_top_rated()
    client.get_top_rated(page=3, genre_id=18)
    plain, genre = (c["params"] for c in session.calls)
    assert plain["sort_by"] == "vote_average.desc"
    assert plain["vote_count.gte"] == 1000
    assert "with_genres" not in plain
    assert genre["with_genres"] == 18 and genre["page"] == 3


def test_new_releases_without_genre_uses_list(fake_session, fake_response):
    client, session = make(fake_session, fake_response, PAGE)
    client.get_new_releases("upcoming")
    assert session.calls[0]["url"].endswith("/movie/upcoming")


@pytest.mark.parametrize("kind, gte, lte", [
    ("now_playing", "2024-05-02", "2024-06-01"),
    ("upcoming", "2024-06-01", "2024-07-01"),
])
def test_new_releases_with_genre_uses_window(fake_session, fake_response, kind, gte, lte):
    client, session = make(fake_session, fake_response, PAGE)
    client.get_new_releases(kind, genre_id=35, today=dt.date(2024, 6, 1))
    params = session.calls[0]["params"]
    assert session.calls[0]["url"].endswith("/discover/movie")
    assert params["primary_release_date.gte"] == gte
    assert params["primary_release_date.lte"] == lte
    assert params["sort_by"] == "primary_release_date.desc"


def test_new_releases_rejects_unknown_type(fake_session, fake_response):
    client, _ = make(fake_session, fake_response)
    with pytest.raises(ValueError):
        client.get_new_releases("classics")


def test_status_mapping(fake_session, fake_response):
    session = fake_session(fake_response({}, status_code=429), fake_response({}, status_code=404))
    client = TMDBClient(session=session)
    with pytest.raises(RateLimitReached):
        client.get_trending_movies()
    with pytest.raises(ApiError) as info:
        client.get_movie_details(1)
    assert info.value.status == 404


def test_trailer_url():
    details = {"videos": {"results": [
        {"site": "Vimeo", "type": "Trailer", "key": "x"},
        {"site": "YouTube", "type": "Teaser", "key": "y"},
        {"site": "YouTube", "type": "Trailer", "key": "YoHD9XEInc0"},
    ]}}
    assert TMDBClient.trailer_url(details) == "https://www.youtube.com/watch?v=YoHD9XEInc0"
    assert TMDBClient.trailer_url({}) is None
