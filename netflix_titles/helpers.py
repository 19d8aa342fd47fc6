import re
from typing import Iterable

from pyspark.sql import Column, DataFrame
from pyspark.sql import functions as F


class MissingColumnsError(ValueError):
    """Raised when a DataFrame lacks columns an operation reads."""

    def __init__(self, missing):
        self.missing = sorted(missing)
        super().__init__(f"DataFrame is missing required columns: {', '.join(self.missing)}")


def require_columns(df: DataFrame, columns: Iterable[str]) -> DataFrame:
    missing = set(columns) - set(df.columns)
    if missing:
        raise MissingColumnsError(missing)
    return df


# Helper: clean column names for Unity Catalog

def clean_column_names(df: DataFrame) -> DataFrame:
    """
    Make column names Unity Catalog–safe:
    - strip spaces + hidden chars
    - replace ANY non [A-Za-z0-9_] with '_'
    - collapse multiple '_' into one
    - if name starts with digit, prefix with 'c_'
    """

    new_cols = []
    for col in df.columns:
        col_clean = re.sub(r"[\t\n\r\ufeff]", "", col.strip())
        col_clean = re.sub(r"[^A-Za-z0-9_]", "_", col_clean)
        col_clean = re.sub(r"_+", "_", col_clean)
        if re.match(r"^[0-9]", col_clean):
            col_clean = "c_" + col_clean
        if col_clean == "":
            col_clean = "col_unnamed"
        new_cols.append(col_clean)

    return df.toDF(*new_cols)


def clean_string_columns(df: DataFrame, blank_as_null: bool = True) -> DataFrame:
    """
    Trim whitespace on all string columns. Blank values become NULL unless
    blank_as_null is False, in which case they stay as empty strings.
    """
    for col_name, col_type in df.dtypes:
        if col_type != "string":
            continue
        trimmed = F.trim(F.col(col_name))
        if blank_as_null:
            trimmed = F.when(trimmed == "", F.lit(None)).otherwise(trimmed)
        df = df.withColumn(col_name, trimmed)
    return df


def to_camel_case(col_name: str) -> str:
    """
    Convert snake_case / spaces / UPPER to lowerCamelCase.
    If the name already looks like camelCase or PascalCase, keep it
    (just force first letter to lower-case).
    """
    if col_name is None:
        return col_name

    raw = col_name.strip()
    if raw == "":
        return raw

    if "_" not in raw and " " not in raw and not raw.isupper():
        return raw[0].lower() + raw[1:]

    parts = [p for p in raw.replace(" ", "_").split("_") if p]
    if not parts:
        return col_name

    first = parts[0].lower()
    rest = [p[:1].upper() + p[1:].lower() for p in parts[1:]]
    return first + "".join(rest)


def rename_columns_to_camel(df: DataFrame) -> DataFrame:
    for c in df.columns:
        new_name = to_camel_case(c)
        if new_name != c:
            df = df.withColumnRenamed(c, new_name)
    return df


def split_values(col: Column) -> Column:
    """
    Comma-joined text -> array of trimmed, non-empty values.
    NULL input stays NULL (explodes to no rows).
    """
    pieces = F.transform(F.split(col, ","), lambda x: F.trim(x))
    return F.filter(pieces, lambda x: x != "")


def parse_leading_int_col(col: Column) -> Column:
    """
    Integer before the first space of a free-text value.
      '90 min'     -> 90
      '3 Seasons'  -> 3
      'unknown'    -> NULL
    """
    first_token = F.split(F.trim(col), r"\s+").getItem(0)
    return (
        F.when(first_token.rlike(r"^[0-9]{1,9}$"), first_token.cast("int"))
         .otherwise(F.lit(None).cast("int"))
    )
