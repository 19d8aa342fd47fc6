from datetime import date

import pytest

from netflix_titles.config import DEFAULTS, KIND_MOVIE, KIND_TV_SHOW, QueryDefaults, Tables
from netflix_titles.report import build_queries, run_report


@pytest.fixture
def titles(make_titles):
    return make_titles(
        {"kind": KIND_MOVIE, "country": "India", "cast": "Salman Khan", "releaseYear": 2022,
         "duration": "140 min", "dateAdded": "March 1, 2023", "rating": "TV-14",
         "genres": "Dramas", "description": "A kill happened"},
        {"kind": KIND_TV_SHOW, "country": "India", "director": "Rajiv Chilaka", "releaseYear": 2020,
         "duration": "6 Seasons", "rating": "TV-Y7", "genres": "Kids' TV",
         "description": "A peaceful story"},
    )


def test_build_queries_covers_all_fifteen():
    available = build_queries()
    assert len(available) == 15
    assert list(available)[0] == "count_by_kind"
    assert list(available)[-1] == "categorize_by_keywords"


def test_run_report_renders_every_query(titles, capsys):
    rendered = []
    results = run_report(titles, as_of=date(2024, 1, 1), render=rendered.append)

    assert len(results) == 15
    assert len(rendered) == 15
    assert all(a is b for a, b in zip(rendered, results.values()))

    out = capsys.readouterr().out
    assert "1. Number of movies vs TV shows" in out
    assert "15. Content categorized by keywords (kill, violence)" in out

    assert results["titles_by_director"].count() == 1
    assert results["tv_shows_with_more_seasons_than"].count() == 1
    assert results["titles_added_recently"].count() == 1
    assert results["titles_with_actor_since"].count() == 1


def test_run_report_subset_without_rendering(titles, capsys):
    results = run_report(titles, names=["longest_movie"], render=None)
    assert list(results) == ["longest_movie"]
    assert results["longest_movie"].first().durationMinutes == 140
    assert capsys.readouterr().out == ""


def test_run_report_custom_defaults(titles):
    defaults = QueryDefaults(release_year=2022, min_seasons=6)
    results = run_report(titles, defaults=defaults, render=None)
    assert results["titles_released_in"].count() == 1
    assert results["tv_shows_with_more_seasons_than"].count() == 0


def test_run_report_unknown_query(titles):
    with pytest.raises(ValueError, match="nope"):
        run_report(titles, names=["nope"], render=None)


def test_default_scenario():
    assert DEFAULTS.release_year == 2020
    assert DEFAULTS.director == "Rajiv Chilaka"
    assert DEFAULTS.keywords == ("kill", "violence")


def test_table_names():
    tables = Tables()
    assert tables.bronze_titles == "workspace.bronze.netflix_titles_raw"
    assert tables.silver_titles == "workspace.silver.netflix_titles"
