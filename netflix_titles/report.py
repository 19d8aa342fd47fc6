"""
Runs the analytical queries in order and renders each result.

Rendering defaults to `DataFrame.show`; notebooks pass `display` instead.
"""
from collections import OrderedDict
from datetime import date
from typing import Callable, Dict, Iterable, Optional

from pyspark.sql import DataFrame

from netflix_titles import queries
from netflix_titles.config import DEFAULTS, QueryDefaults


def _show(df: DataFrame) -> None:
    df.show(n=20, truncate=False)


def build_queries(defaults: QueryDefaults = DEFAULTS, as_of: Optional[date] = None) -> "OrderedDict[str, tuple]":
    """
    name -> (heading, titles -> DataFrame), in report order.
    """
    return OrderedDict([
        ("count_by_kind", (
            "Number of movies vs TV shows",
            queries.count_by_kind)),
        ("most_common_rating_by_kind", (
            "Most common rating for movies and TV shows",
            queries.most_common_rating_by_kind)),
        ("titles_released_in", (
            f"Titles released in {defaults.release_year}",
            lambda t: queries.titles_released_in(t, defaults.release_year))),
        ("top_countries_by_content", (
            f"Top {defaults.top_countries} countries with the most content",
            lambda t: queries.top_countries_by_content(t, defaults.top_countries))),
        ("longest_movie", (
            "Longest movie",
            queries.longest_movie)),
        ("titles_added_recently", (
            f"Content added in the last {defaults.recent_years} years",
            lambda t: queries.titles_added_recently(t, defaults.recent_years, as_of))),
        ("titles_by_director", (
            f"Titles directed by {defaults.director}",
            lambda t: queries.titles_by_director(t, defaults.director))),
        ("tv_shows_with_more_seasons_than", (
            f"TV shows with more than {defaults.min_seasons} seasons",
            lambda t: queries.tv_shows_with_more_seasons_than(t, defaults.min_seasons))),
        ("count_by_genre", (
            "Content items per genre",
            queries.count_by_genre)),
        ("top_release_years_for_country", (
            f"Top {defaults.top_release_years} years by share of {defaults.country} releases",
            lambda t: queries.top_release_years_for_country(t, defaults.country, defaults.top_release_years))),
        ("titles_with_genre_suffix", (
            f"Titles listed as {defaults.genre_suffix}",
            lambda t: queries.titles_with_genre_suffix(t, defaults.genre_suffix))),
        ("titles_without_director", (
            "Titles without a director",
            queries.titles_without_director)),
        ("titles_with_actor_since", (
            f"Titles with {defaults.actor} in the last {defaults.actor_years} years",
            lambda t: queries.titles_with_actor_since(t, defaults.actor, defaults.actor_years, as_of))),
        ("top_actors_for_country", (
            f"Top {defaults.top_actors} actors in {defaults.country} titles",
            lambda t: queries.top_actors_for_country(t, defaults.country, defaults.top_actors))),
        ("categorize_by_keywords", (
            "Content categorized by keywords ({})".format(", ".join(defaults.keywords)),
            lambda t: queries.categorize_by_keywords(t, defaults.keywords))),
    ])


def run_report(
    titles: DataFrame,
    names: Optional[Iterable[str]] = None,
    defaults: QueryDefaults = DEFAULTS,
    as_of: Optional[date] = None,
    render: Optional[Callable[[DataFrame], None]] = _show,
) -> Dict[str, DataFrame]:
    """
    Run the selected queries (all by default) and render each result under
    a numbered heading. Returns the result DataFrames keyed by query name.
    Pass render=None to only build the results.
    """
    available = build_queries(defaults, as_of)
    selected = list(available) if names is None else list(names)

    unknown = [n for n in selected if n not in available]
    if unknown:
        raise ValueError(f"Unknown queries: {', '.join(unknown)}")

    results = OrderedDict()
    positions = {name: i for i, name in enumerate(available, start=1)}
    for name in selected:
        heading, query = available[name]
        results[name] = query(titles)
        if render is not None:
            print(f"\n{positions[name]}. {heading}")
            render(results[name])

    return results
