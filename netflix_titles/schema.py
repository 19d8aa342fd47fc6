from pyspark.sql.types import IntegerType, StringType, StructField, StructType


# Conformed Title columns (Silver), in output order
TITLE_SCHEMA = StructType([
    StructField("id", StringType(), False),
    StructField("kind", StringType(), True),
    StructField("title", StringType(), True),
    StructField("director", StringType(), True),
    StructField("cast", StringType(), True),
    StructField("country", StringType(), True),
    StructField("dateAdded", StringType(), True),
    StructField("releaseYear", IntegerType(), True),
    StructField("rating", StringType(), True),
    StructField("duration", StringType(), True),
    StructField("genres", StringType(), True),
    StructField("description", StringType(), True),
])

TITLE_COLUMNS = [f.name for f in TITLE_SCHEMA.fields]

# Raw columns (after camelCase) whose Silver name differs
RAW_COLUMN_RENAMES = {
    "showId": "id",
    "type": "kind",
    "listedIn": "genres",
}
