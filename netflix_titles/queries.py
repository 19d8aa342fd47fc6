"""
Analytical queries over the conformed titles table.

Every query is a pure DataFrame -> DataFrame transformation; nothing here
triggers a Spark action. Ranked outputs always carry a secondary sort key
(the natural key, ascending) so results do not depend on partitioning.

Parse failures never raise: unparsable durations and dates become NULL and
the row only drops out of the query that needed the value.
"""
from datetime import date
from functools import reduce
from typing import Iterable, Optional

from pyspark.sql import DataFrame, Window
from pyspark.sql import functions as F

from netflix_titles.config import (
    CATEGORY_BAD,
    CATEGORY_GOOD,
    DATE_ADDED_FORMAT,
    DEFAULTS,
    KIND_MOVIE,
    KIND_TV_SHOW,
)
from netflix_titles.helpers import parse_leading_int_col, require_columns, split_values


def _positive(name: str, value: int) -> int:
    if value is None or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


def _resolve_as_of(as_of: Optional[date]) -> date:
    return as_of if as_of is not None else date.today()


def _count_split_values(titles: DataFrame, column: str, alias: str) -> DataFrame:
    """
    One row per trimmed, non-empty value of a comma-joined column, counted.
    """
    return (
        titles
        .select(F.explode(split_values(F.col(column))).alias(alias))
        .groupBy(alias)
        .agg(F.count("*").alias("titleCount"))
        .orderBy(F.col("titleCount").desc(), F.col(alias).asc())
    )


# 1. Movies vs TV shows

def count_by_kind(titles: DataFrame) -> DataFrame:
    require_columns(titles, ["kind"])
    return (
        titles
        .groupBy("kind")
        .agg(F.count("*").alias("titleCount"))
        .orderBy(F.col("kind").asc_nulls_last())
    )


# 2. Most common rating per kind

def most_common_rating_by_kind(titles: DataFrame) -> DataFrame:
    """
    Ratings with the highest count within each kind. Tied ratings share
    rank 1 and are all returned. NULL ratings are not counted.
    """
    require_columns(titles, ["kind", "rating"])

    rating_counts = (
        titles
        .filter(F.col("rating").isNotNull())
        .groupBy("kind", "rating")
        .agg(F.count("*").alias("ratingCount"))
    )

    w_kind = Window.partitionBy("kind").orderBy(F.col("ratingCount").desc())
    return (
        rating_counts
        .withColumn("rnk", F.rank().over(w_kind))
        .filter(F.col("rnk") == 1)
        .drop("rnk")
        .orderBy(F.col("kind").asc_nulls_last(), F.col("rating").asc())
    )


# 3. Titles released in a given year

def titles_released_in(titles: DataFrame, year: int = DEFAULTS.release_year) -> DataFrame:
    require_columns(titles, ["id", "releaseYear"])
    return titles.filter(F.col("releaseYear") == year).orderBy("id")


# 4. Top countries by content

def top_countries_by_content(titles: DataFrame, limit: int = DEFAULTS.top_countries) -> DataFrame:
    require_columns(titles, ["country"])
    return _count_split_values(titles, "country", "country").limit(_positive("limit", limit))


# 5. Longest movie

def longest_movie(titles: DataFrame) -> DataFrame:
    """
    The movie with the most minutes; equal lengths resolve to the lowest id.
    """
    require_columns(titles, ["id", "kind", "duration"])
    return (
        titles
        .filter(F.col("kind") == KIND_MOVIE)
        .withColumn("durationMinutes", parse_leading_int_col(F.col("duration")))
        .filter(F.col("durationMinutes").isNotNull())
        .orderBy(F.col("durationMinutes").desc(), F.col("id").asc())
        .limit(1)
    )


# 6. Added in the last N years

def titles_added_recently(
    titles: DataFrame,
    years: int = DEFAULTS.recent_years,
    as_of: Optional[date] = None,
) -> DataFrame:
    require_columns(titles, ["id", "dateAdded"])
    _positive("years", years)
    as_of = _resolve_as_of(as_of)

    parsed = F.to_date(
        F.try_to_timestamp(F.trim(F.col("dateAdded")), F.lit(DATE_ADDED_FORMAT))
    )
    cutoff = F.add_months(F.lit(as_of), -12 * years)

    return (
        titles
        .withColumn("dateAddedParsed", parsed)
        .filter(
            F.col("dateAddedParsed").isNotNull() &
            (F.col("dateAddedParsed") >= cutoff)
        )
        .orderBy(F.col("dateAddedParsed").desc(), F.col("id").asc())
    )


# 7. Titles by director

def titles_by_director(titles: DataFrame, director: str = DEFAULTS.director) -> DataFrame:
    require_columns(titles, ["id", "director"])
    return (
        titles
        .filter(F.exists(split_values(F.col("director")), lambda name: name == director))
        .orderBy("id")
    )


# 8. TV shows with more than N seasons

def tv_shows_with_more_seasons_than(titles: DataFrame, seasons: int = DEFAULTS.min_seasons) -> DataFrame:
    require_columns(titles, ["id", "kind", "duration"])
    return (
        titles
        .filter(F.col("kind") == KIND_TV_SHOW)
        .withColumn("seasonCount", parse_leading_int_col(F.col("duration")))
        .filter(F.col("seasonCount") > seasons)
        .orderBy(F.col("seasonCount").desc(), F.col("id").asc())
    )


# 9. Content per genre

def count_by_genre(titles: DataFrame) -> DataFrame:
    require_columns(titles, ["genres"])
    return _count_split_values(titles, "genres", "genre")


# 10. Top release years by share of a country's content

def top_release_years_for_country(
    titles: DataFrame,
    country: str = DEFAULTS.country,
    limit: int = DEFAULTS.top_release_years,
) -> DataFrame:
    """
    Share of a country's titles released in each year, as a percentage
    rounded to 2 decimals. The country field must equal `country` exactly;
    co-productions listing several countries are not included.
    """
    require_columns(titles, ["country", "releaseYear"])
    _positive("limit", limit)

    scoped = titles.filter(F.col("country") == country)
    country_total = scoped.agg(F.count("*").alias("countryTotal"))

    return (
        scoped
        .groupBy("releaseYear")
        .agg(F.count("*").alias("titleCount"))
        .crossJoin(country_total)
        .select(
            F.lit(country).alias("country"),
            F.col("releaseYear"),
            F.col("titleCount"),
            # decimal so exact halves round up (23 of 160 -> 14.38)
            F.round(
                F.col("titleCount").cast("decimal(20,0)") * 100 / F.col("countryTotal").cast("decimal(20,0)"),
                2,
            ).cast("double").alias("releaseShare"),
        )
        .orderBy(F.col("releaseShare").desc(), F.col("releaseYear").asc_nulls_last())
        .limit(limit)
    )


# 11. Genre field ending with a suffix

def titles_with_genre_suffix(titles: DataFrame, suffix: str = DEFAULTS.genre_suffix) -> DataFrame:
    require_columns(titles, ["id", "genres"])
    return titles.filter(F.col("genres").endswith(suffix)).orderBy("id")


# 12. Titles without a director

def titles_without_director(titles: DataFrame) -> DataFrame:
    require_columns(titles, ["id", "director"])
    return titles.filter(F.col("director").isNull()).orderBy("id")


# 13. Actor appearances in the last N years

def titles_with_actor_since(
    titles: DataFrame,
    actor: str = DEFAULTS.actor,
    years: int = DEFAULTS.actor_years,
    as_of: Optional[date] = None,
) -> DataFrame:
    require_columns(titles, ["id", "cast", "releaseYear"])
    _positive("years", years)
    as_of = _resolve_as_of(as_of)

    return (
        titles
        .filter(
            F.col("cast").contains(actor) &
            (F.col("releaseYear") > as_of.year - years)
        )
        .orderBy(F.col("releaseYear").desc(), F.col("id").asc())
    )


# 14. Top actors for a country

def top_actors_for_country(
    titles: DataFrame,
    country: str = DEFAULTS.country,
    limit: int = DEFAULTS.top_actors,
) -> DataFrame:
    require_columns(titles, ["country", "cast"])
    scoped = titles.filter(F.col("country") == country)
    return _count_split_values(scoped, "cast", "actor").limit(_positive("limit", limit))


# 15. Keyword categorization of descriptions

def categorize_by_keywords(
    titles: DataFrame,
    keywords: Iterable[str] = DEFAULTS.keywords,
) -> DataFrame:
    """
    'Bad' when the description mentions any keyword (case-insensitive
    substring), else 'Good'. Both categories are always returned.
    """
    require_columns(titles, ["description"])
    keywords = [k.lower() for k in keywords if k]
    if not keywords:
        raise ValueError("keywords must contain at least one non-empty keyword")

    description = F.lower(F.col("description"))
    is_bad = reduce(lambda a, b: a | b, [description.contains(k) for k in keywords])

    counts = (
        titles
        .select(
            F.when(is_bad, F.lit(CATEGORY_BAD))
             .otherwise(F.lit(CATEGORY_GOOD))
             .alias("category")
        )
        .groupBy("category")
        .agg(F.count("*").alias("titleCount"))
    )

    categories = titles.sparkSession.createDataFrame(
        [(CATEGORY_BAD,), (CATEGORY_GOOD,)], "category string"
    )
    return (
        categories
        .join(counts, on="category", how="left")
        .fillna(0, subset=["titleCount"])
        .orderBy("category")
    )


__all__ = [
    "count_by_kind",
    "most_common_rating_by_kind",
    "titles_released_in",
    "top_countries_by_content",
    "longest_movie",
    "titles_added_recently",
    "titles_by_director",
    "tv_shows_with_more_seasons_than",
    "count_by_genre",
    "top_release_years_for_country",
    "titles_with_genre_suffix",
    "titles_without_director",
    "titles_with_actor_since",
    "top_actors_for_country",
    "categorize_by_keywords",
]
