import pytest
from pyspark.sql import functions as F

from netflix_titles.conformance import conform_titles
from netflix_titles.helpers import MissingColumnsError
from netflix_titles.ingestion import add_ingestion_metadata, build_bronze_titles, read_titles_csv
from netflix_titles.schema import TITLE_COLUMNS

TITLES_CSV = (
    "show_id,type,title,director,cast,country,date_added,release_year,rating,duration,listed_in,description\n"
    's1,Movie,Dick Johnson Is Dead,Kirsten Johnson,,United States,"September 25, 2021",2020,PG-13,90 min,'
    'Documentaries,"As her father nears the end of his life, filmmaker Kirsten Johnson stages his death."\n'
    's2,TV Show,Blood & Water,,"Ama Qamata, Khosi Ngema","South Africa",'
    '"September 24, 2021",2021,TV-MA,2 Seasons,"International TV Shows, TV Dramas, TV Mysteries",'
    '"After crossing paths at a party, a Cape Town teen sets out\n'
    'to prove whether a ""private-school swimming star"" is her sister."\n'
    's3,Movie,  Sankofa  , Haile Gerima ,,"United States, Ghana","September 24, 2021",1993,TV-MA,125 min,'
    '"Dramas, Independent Movies",On a photo shoot in Ghana.\n'
    ',Movie,No Id,,,,,,,,,\n'
    's4,Movie,Bad Year,,,,,unknown,,,,\n'
)


@pytest.fixture
def titles_csv(tmp_path):
    path = tmp_path / "netflix_titles.csv"
    path.write_text(TITLES_CSV, encoding="utf-8")
    return str(path)


def test_read_titles_csv_keeps_rows_as_received(spark, titles_csv):
    raw = read_titles_csv(spark, titles_csv)
    assert raw.columns[:3] == ["show_id", "type", "title"]
    assert raw.count() == 5

    s2 = raw.filter("show_id = 's2'").first()
    assert "\n" in s2.description
    assert '"private-school swimming star"' in s2.description


def test_read_titles_csv_missing_local_file(spark, tmp_path):
    with pytest.raises(FileNotFoundError):
        read_titles_csv(spark, str(tmp_path / "missing.csv"))


def test_build_bronze_titles_adds_lineage(spark, titles_csv):
    bronze = build_bronze_titles(spark, titles_csv)
    row = bronze.filter("show_id = 's1'").first()
    assert row.source == "netflix_titles_csv"
    assert row.fileName == titles_csv
    assert row.ingestionDate is not None


def test_add_ingestion_metadata(spark):
    df = spark.createDataFrame([("s1",)], "show_id string")
    assert add_ingestion_metadata(df, "src", "f.csv").columns == [
        "show_id", "ingestionDate", "source", "fileName",
    ]


def test_conform_titles_maps_onto_title_model(spark, titles_csv):
    titles = conform_titles(build_bronze_titles(spark, titles_csv))
    assert titles.columns == TITLE_COLUMNS

    rows = {r.id: r for r in titles.collect()}
    assert sorted(rows) == ["s1", "s2", "s3", "s4"]

    assert rows["s1"].kind == "Movie"
    assert rows["s1"].cast is None
    assert rows["s1"].releaseYear == 2020
    assert rows["s2"].kind == "TV Show"
    assert rows["s2"].director is None
    assert rows["s2"].genres == "International TV Shows, TV Dramas, TV Mysteries"
    assert rows["s3"].title == "Sankofa"
    assert rows["s3"].director == "Haile Gerima"
    assert rows["s3"].dateAdded == "September 24, 2021"
    assert rows["s4"].releaseYear is None


def test_conform_titles_can_keep_blanks(spark):
    bronze = spark.createDataFrame(
        [tuple(["s1", "Movie", "T", "", None, "", "", "2020", "", "", "", ""])],
        "show_id string, type string, title string, director string, cast string, country string, "
        "date_added string, release_year string, rating string, duration string, listed_in string, "
        "description string",
    )
    row = conform_titles(bronze, blank_as_null=False).first()
    assert row.director == ""
    assert row.cast is None
    assert row.releaseYear == 2020


def test_conform_titles_drops_duplicate_ids(spark):
    bronze = spark.createDataFrame(
        [("s1", "Movie", "B", "2020"), ("s1", "Movie", "A", "2020")],
        "show_id string, type string, title string, release_year string",
    )
    for name in ["director", "cast", "country", "date_added", "rating", "duration", "listed_in", "description"]:
        bronze = bronze.withColumn(name, F.lit(None).cast("string"))
    rows = conform_titles(bronze).collect()
    assert [(r.id, r.title) for r in rows] == [("s1", "A")]


def test_conform_titles_requires_title_columns(spark):
    bronze = spark.createDataFrame([("s1", "Movie")], "show_id string, type string")
    with pytest.raises(MissingColumnsError):
        conform_titles(bronze)
