import os
from dataclasses import dataclass, field
from typing import Tuple


# consistent timestamps
SESSION_TIMEZONE = "UTC"

# Raw Paths (Volumes)

BASE_RAW_PATH       = os.getenv("NETFLIX_BASE_RAW_PATH", "/Volumes/workspace/landing/inbox/source_v1")
NETFLIX_RAW_PATH    = f"{BASE_RAW_PATH}/netflix"
NETFLIX_TITLES_PATH = os.getenv("NETFLIX_TITLES_PATH", f"{NETFLIX_RAW_PATH}/netflix_titles.csv")

# Same options for every raw CSV read (descriptions span lines, quotes are doubled)
CSV_READ_OPTIONS = {
    "header": "true",
    "quote": "\"",
    "escape": "\"",
    "multiLine": "true",
    "mode": "PERMISSIVE",
}

# Title kinds as they appear in the dataset
KIND_MOVIE   = "Movie"
KIND_TV_SHOW = "TV Show"

# Keyword categorization labels
CATEGORY_BAD  = "Bad"
CATEGORY_GOOD = "Good"

# e.g. "September 25, 2021"
DATE_ADDED_FORMAT = "MMMM d, yyyy"


@dataclass(frozen=True)
class Tables:
    catalog: str = "workspace"
    bronze_schema: str = "bronze"
    silver_schema: str = "silver"
    titles_raw: str = "netflix_titles_raw"
    titles: str = "netflix_titles"

    @property
    def bronze_titles(self) -> str:
        return f"{self.catalog}.{self.bronze_schema}.{self.titles_raw}"

    @property
    def silver_titles(self) -> str:
        return f"{self.catalog}.{self.silver_schema}.{self.titles}"


@dataclass(frozen=True)
class QueryDefaults:
    """
    Scenario parameters of the analytical queries.
    """
    release_year: int = 2020
    top_countries: int = 5
    recent_years: int = 5
    director: str = "Rajiv Chilaka"
    min_seasons: int = 5
    country: str = "India"
    top_release_years: int = 5
    genre_suffix: str = "Documentaries"
    actor: str = "Salman Khan"
    actor_years: int = 10
    top_actors: int = 10
    keywords: Tuple[str, ...] = field(default=("kill", "violence"))


DEFAULTS = QueryDefaults()
