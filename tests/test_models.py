from cineScore.metadata.core.models import RatingSet


def test_from_dict_accepts_both_key_styles():
    a = RatingSet.from_dict({"rottenTomatoes": {"tomatometer": "90"}})
    b = RatingSet.from_dict({"rotten_tomatoes": {"tomatometer": "90"}})
    assert a == b
    assert a.rotten_tomatoes.tomatometer == "90"
    assert a.imdb is None and a.metacritic is None


def test_non_mapping_entries_are_absent():
    r = RatingSet.from_dict({"imdb": "8.0", "metacritic": None, "letterboxd": {"x": 1}})
    assert r == RatingSet()


def test_to_dict_round_trip_shape():
    data = {
        "imdb": {"rating": "7.1", "votes": "10,000", "url": "https://www.imdb.com/title/tt1"},
        "metacritic": {"metascore": "66", "url": None},
    }
    assert RatingSet.from_dict(data).to_dict() == data
