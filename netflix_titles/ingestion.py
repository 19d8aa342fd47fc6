"""
Bronze ingestion of the raw Netflix titles CSV.

Keeps data as received (no business transforms): only column names are made
Unity Catalog-safe and lineage columns are appended.
"""
import os

from pyspark.sql import DataFrame, SparkSession
from pyspark.sql import functions as F

from netflix_titles.config import CSV_READ_OPTIONS, NETFLIX_TITLES_PATH
from netflix_titles.helpers import clean_column_names


def read_titles_csv(spark: SparkSession, csv_path: str = NETFLIX_TITLES_PATH) -> DataFrame:
    """
    Read the raw titles CSV with permissive options; every column is a string.
    """
    # Local paths fail fast; Volume / cloud paths are left to Spark
    if "://" not in csv_path and not csv_path.startswith("/Volumes/") and not os.path.exists(csv_path):
        raise FileNotFoundError(f"Titles CSV not found: {csv_path}")

    raw_df = spark.read.options(**CSV_READ_OPTIONS).csv(csv_path)
    return clean_column_names(raw_df)


def add_ingestion_metadata(df: DataFrame, source_name: str, file_name: str) -> DataFrame:
    return (
        df
        .withColumn("ingestionDate", F.current_timestamp())
        .withColumn("source", F.lit(source_name))
        .withColumn("fileName", F.lit(file_name))
    )


def build_bronze_titles(
    spark: SparkSession,
    csv_path: str = NETFLIX_TITLES_PATH,
    source_name: str = "netflix_titles_csv",
) -> DataFrame:
    raw_df = read_titles_csv(spark, csv_path)
    bronze_df = add_ingestion_metadata(raw_df, source_name, csv_path)

    # For small–medium CSVs: avoid many tiny files
    return bronze_df.repartition(1)
