# Databricks notebook source
# MAGIC %md
# MAGIC # Analytical Queries
# MAGIC
# MAGIC Fifteen business questions over silver.netflix_titles:
# MAGIC   - 1. Movies vs TV shows
# MAGIC   - 2. Most common rating per type
# MAGIC   - 3. Titles released in 2020
# MAGIC   - 4. Top 5 countries by content
# MAGIC   - 5. Longest movie
# MAGIC   - 6. Content added in the last 5 years
# MAGIC   - 7. Titles by 'Rajiv Chilaka'
# MAGIC   - 8. TV shows with more than 5 seasons
# MAGIC   - 9. Content per genre
# MAGIC   - 10. Top 5 years by share of India's releases
# MAGIC   - 11. Documentaries
# MAGIC   - 12. Titles without a director
# MAGIC   - 13. 'Salman Khan' titles in the last 10 years
# MAGIC   - 14. Top 10 actors in Indian titles
# MAGIC   - 15. 'Bad' vs 'Good' content by description keywords
# MAGIC
# MAGIC Every query is also importable from `netflix_titles.queries`.

# COMMAND ----------

from netflix_titles.config import Tables
from netflix_titles.report import run_report
from netflix_titles.session import get_spark

spark = get_spark()
tables = Tables()

netflix_titles = spark.table(tables.silver_titles).cache()

# COMMAND ----------

results = run_report(netflix_titles, render=display)

# COMMAND ----------

# MAGIC %md
# MAGIC ####Movies vs TV shows should add up to the table

# COMMAND ----------

kind_total = results["count_by_kind"].groupBy().sum("titleCount").first()[0]
print("Titles:              ", netflix_titles.count())
print("Movies + TV shows:   ", kind_total)
