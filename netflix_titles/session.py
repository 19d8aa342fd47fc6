import os

from pyspark.sql import SparkSession

from netflix_titles.config import SESSION_TIMEZONE


def get_spark(app_name: str = "netflix-titles-analytics") -> SparkSession:
    """
    Active session inside a notebook, otherwise a local one.
    """
    builder = SparkSession.builder.appName(app_name)
    if "SPARK_MASTER" in os.environ:
        builder = builder.master(os.environ["SPARK_MASTER"])
    elif SparkSession.getActiveSession() is None:
        builder = builder.master("local[*]")

    spark = builder.getOrCreate()

    # consistent timestamps; unparsable dates become NULL instead of raising
    spark.conf.set("spark.sql.session.timeZone", SESSION_TIMEZONE)
    spark.conf.set("spark.sql.legacy.timeParserPolicy", "CORRECTED")
    return spark
