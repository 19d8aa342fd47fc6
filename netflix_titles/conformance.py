"""
Silver conformance: Bronze titles -> Title table.

- Column names to lowerCamelCase, then mapped onto the Title model
  (show_id -> id, type -> kind, listed_in -> genres)
- Text trimmed; blank strings become NULL (loader convention, switchable)
- releaseYear cast to int when it is a plain number, else NULL
- Rows without an id are dropped; duplicate ids keep the first by title
"""
from pyspark.sql import DataFrame, Window
from pyspark.sql import functions as F

from netflix_titles.helpers import (
    clean_string_columns,
    rename_columns_to_camel,
    require_columns,
)
from netflix_titles.schema import RAW_COLUMN_RENAMES, TITLE_COLUMNS


def conform_titles(bronze_df: DataFrame, blank_as_null: bool = True) -> DataFrame:
    titles = rename_columns_to_camel(bronze_df)
    for old, new in RAW_COLUMN_RENAMES.items():
        if old in titles.columns:
            titles = titles.withColumnRenamed(old, new)

    require_columns(titles, TITLE_COLUMNS)

    titles = titles.select(*TITLE_COLUMNS)
    titles = clean_string_columns(titles, blank_as_null=blank_as_null)

    year_str = F.trim(F.col("releaseYear").cast("string"))
    titles = titles.withColumn(
        "releaseYear",
        F.when(year_str.rlike(r"^[0-9]{1,4}$"), year_str.cast("int"))
         .otherwise(F.lit(None).cast("int"))
    )

    titles = titles.filter(F.col("id").isNotNull() & (F.col("id") != ""))

    # id is unique in the Title model
    w_id = Window.partitionBy("id").orderBy(F.col("title").asc_nulls_last())
    titles = (
        titles
        .withColumn("rn", F.row_number().over(w_id))
        .filter(F.col("rn") == 1)
        .drop("rn")
    )

    return titles.select(*TITLE_COLUMNS)
