import pytest
from imdb import extract_imdb_id


@pytest.mark.parametrize("text, expected", [
    ("https://www.imdb.com/title/tt0111161/", "tt0111161"),
    ("https://m.imdb.com/title/tt0944947/?ref_=nv_sr_srsg_0", "tt0944947"),
    ("Check this out! The Shawshank Redemption https://imdb.com/title/tt0111161", "tt0111161"),
    ("tt1", "tt1"),
    ("xtt42y", "tt42"),
])
def test_extract_imdb_id(text, expected):
    assert extract_imdb_id(text) == expected


def test_extract_returns_leftmost_match():
    text = "https://www.imdb.com/title/tt0068646/ and https://www.imdb.com/title/tt0071562/"
    assert extract_imdb_id(text) == "tt0068646"


def test_extract_skips_tt_without_digits():
    assert extract_imdb_id("attack at tt, then tt777") == "tt777"


@pytest.mark.parametrize("text", [
    "",
    None,
    "https://www.imdb.com/list/ls000024390/",
    "https://www.imdb.com/name/nm0000151/",
    "TT0111161",
    "tt",
])
def test_extract_no_match(text):
    assert extract_imdb_id(text) is None


def test_extract_ignores_non_ascii_digits():
    # Arabic-Indic digits are not decimal digits in an IMDb ID
    assert extract_imdb_id("tt١٢٣") is None
