# tests/conftest.py
"""
Global test bootstrap
- One local SparkSession for the whole run (UTC, few shuffle partitions)
- `make_titles` builds a titles DataFrame from partial row dicts
"""

import pytest
from pyspark.sql import SparkSession

from netflix_titles.schema import TITLE_COLUMNS, TITLE_SCHEMA


@pytest.fixture(scope="session")
def spark():
    session = (
        SparkSession.builder
        .master("local[1]")
        .appName("netflix-titles-tests")
        .config("spark.sql.session.timeZone", "UTC")
        .config("spark.sql.shuffle.partitions", "2")
        .config("spark.sql.legacy.timeParserPolicy", "CORRECTED")
        .config("spark.ui.enabled", "false")
        .getOrCreate()
    )
    yield session
    session.stop()


@pytest.fixture
def make_titles(spark):
    """
    make_titles({"kind": "Movie", "duration": "90 min"}, ...) -> DataFrame.
    Missing columns are NULL; ids default to s1, s2, ...
    """
    def _make(*rows):
        full_rows = []
        for i, row in enumerate(rows, start=1):
            values = {"id": f"s{i}"}
            values.update(row)
            full_rows.append(tuple(values.get(c) for c in TITLE_COLUMNS))
        return spark.createDataFrame(full_rows, TITLE_SCHEMA)

    return _make
