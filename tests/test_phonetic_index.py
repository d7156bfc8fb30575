"""
Tests for the DuckDB phonetic name index.
"""
import duckdb
import pandas as pd
import pytest

from metaphone_utils.index import (
    build_name_index,
    encode_frame,
    register_functions,
    search_name_index,
)


def test_encode_frame():
    df = pd.DataFrame({"name": ["Smith", None, "bacher"], "id": [1, 2, 3]})
    out = encode_frame(df, "name")
    assert list(out["primary"]) == ["SM0", "", "PKR"]
    assert list(out["alternate"]) == ["XMT", "", ""]
    assert list(out["id"]) == [1, 2, 3]
    # input is left untouched
    assert "primary" not in df.columns


def test_encode_frame_no_limit():
    df = pd.DataFrame({"name": ["Filipowicz"]})
    out = encode_frame(df, "name", limit_length=False)
    assert out.loc[0, "primary"] == "FLPTS"
    assert out.loc[0, "alternate"] == "FLPFX"


def test_register_functions():
    con = duckdb.connect()
    try:
        register_functions(con)
        row = con.execute("""
            SELECT metaphone_primary('Schmidt'),
                   metaphone_alternate('Schmidt'),
                   metaphone_alternate('bacher'),
                   metaphone_primary(NULL)
        """).fetchone()
    finally:
        con.close()
    assert row == ("XMT", "SMT", None, None)


@pytest.fixture
def index_db(tmp_path):
    db = tmp_path / "names.duckdb"
    count = build_name_index(["Smith", "", "  ", "Schmidt", "Jones", "Wasserman"], db)
    assert count == 4
    return db


def test_build_name_index_rows(index_db):
    con = duckdb.connect(str(index_db), read_only=True)
    try:
        rows = con.execute(
            "SELECT name, primary_code, alternate_code FROM names ORDER BY name"
        ).fetchall()
    finally:
        con.close()
    assert rows == [
        ("Jones", "JNS", "ANS"),
        ("Schmidt", "XMT", "SMT"),
        ("Smith", "SM0", "XMT"),
        ("Wasserman", "ASRM", "FSRM"),
    ]


def test_search_name_index(index_db):
    found = search_name_index("Smyth", index_db)
    assert list(found["name"]) == ["Schmidt", "Smith"]

    found = search_name_index("Vasserman", index_db)
    assert list(found["name"]) == ["Wasserman"]

    assert search_name_index("Zola", index_db).empty


def test_build_replaces_table(index_db):
    assert build_name_index(["bacher"], index_db) == 1
    assert list(search_name_index("packer", index_db)["name"]) == ["bacher"]
    assert search_name_index("Smith", index_db).empty


def test_custom_table(tmp_path):
    db = tmp_path / "names.duckdb"
    build_name_index(["Jones"], db, table="people")
    assert list(search_name_index("Jones", db, table="people")["name"]) == ["Jones"]


def test_invalid_table_name(tmp_path):
    with pytest.raises(ValueError):
        build_name_index(["Smith"], tmp_path / "x.duckdb", table="names; DROP TABLE names")
    with pytest.raises(ValueError):
        search_name_index("Smith", tmp_path / "x.duckdb", table="")
