# Databricks notebook source
# MAGIC %md
# MAGIC # Silver Layer – Titles Conformance (Assumptions & Design Notes)
# MAGIC
# MAGIC **Purpose:**  
# MAGIC Turn the raw Bronze titles into the Title table the analytical queries read.
# MAGIC
# MAGIC ## Key Assumptions
# MAGIC - Column names are converted to **lowerCamelCase**, then mapped onto the Title model:
# MAGIC   - show_id → id, type → kind, listed_in → genres
# MAGIC - Text is trimmed and empty strings become `NULL` (a title with no director has `director IS NULL`).
# MAGIC - releaseYear is cast to int; anything that is not a plain year becomes `NULL`.
# MAGIC - Rows without an id are dropped; id is unique.
# MAGIC - duration and dateAdded stay as free text: each query parses them and skips values that do not parse.
# MAGIC
# MAGIC ## Output Silver Tables
# MAGIC - silver.netflix_titles

# COMMAND ----------

# MAGIC %sql
# MAGIC USE CATALOG workspace;
# MAGIC CREATE SCHEMA IF NOT EXISTS silver

# COMMAND ----------

# MAGIC %md
# MAGIC ##Imports

# COMMAND ----------

from netflix_titles.config import Tables
from netflix_titles.conformance import conform_titles
from netflix_titles.session import get_spark

spark = get_spark()
tables = Tables()

# COMMAND ----------

# MAGIC %md
# MAGIC ##Silver – Netflix Titles

# COMMAND ----------

bronze_titles = spark.table(tables.bronze_titles)

netflix_titles = conform_titles(bronze_titles)

netflix_titles.write \
    .mode("overwrite") \
    .option("overwriteSchema", "true") \
    .format("delta") \
    .saveAsTable(tables.silver_titles)

print(f"Created Silver table {tables.silver_titles}")

# COMMAND ----------

bronze_count = bronze_titles.count()
silver_count = spark.table(tables.silver_titles).count()

print("BRONZE Titles rows:  ", bronze_count)
print("SILVER Titles rows:  ", silver_count)
print("Titles removed:      ", bronze_count - silver_count)
