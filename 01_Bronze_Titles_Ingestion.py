# Databricks notebook source
# MAGIC %md
# MAGIC #Bronze Layer – Netflix Titles Ingestion
# MAGIC **Purpose:**  
# MAGIC Store the raw Netflix titles CSV exactly as received, with no business rules applied.
# MAGIC
# MAGIC **Key Assumptions**
# MAGIC - 'netflix_titles.csv' has been uploaded to the landing Volume (override with 'NETFLIX_TITLES_PATH').
# MAGIC - Descriptions may span several lines and contain doubled quotes, so the CSV is read multi-line and PERMISSIVE.
# MAGIC - Column names are sanitized to be Unity Catalog-safe.
# MAGIC - Metadata added in Bronze: ingestionDate, source, fileName
# MAGIC
# MAGIC **Output**
# MAGIC - bronze.netflix_titles_raw

# COMMAND ----------

# MAGIC %sql
# MAGIC USE CATALOG workspace;
# MAGIC CREATE SCHEMA IF NOT EXISTS bronze

# COMMAND ----------

# MAGIC %md
# MAGIC ##Imports

# COMMAND ----------

from netflix_titles.config import NETFLIX_TITLES_PATH, Tables
from netflix_titles.ingestion import build_bronze_titles, read_titles_csv
from netflix_titles.session import get_spark

spark = get_spark()
tables = Tables()

# COMMAND ----------

# MAGIC %md
# MAGIC ##Bronze table

# COMMAND ----------

bronze_titles = build_bronze_titles(spark, NETFLIX_TITLES_PATH)

(
    bronze_titles.write
                 .format("delta")
                 .mode("overwrite")
                 .option("overwriteSchema", "true")
                 .saveAsTable(tables.bronze_titles)
)

print(f"Created Bronze table {tables.bronze_titles}")

# COMMAND ----------

# MAGIC %md
# MAGIC #Verification

# COMMAND ----------

raw_titles_count    = read_titles_csv(spark, NETFLIX_TITLES_PATH).count()
bronze_titles_count = spark.table(tables.bronze_titles).count()

print("RAW Titles rows:     ", raw_titles_count)
print("BRONZE Titles rows:  ", bronze_titles_count)
print("Titles removed:      ", raw_titles_count - bronze_titles_count)
