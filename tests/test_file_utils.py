import io
import zipfile

from sqlgen.utils.file_utils import create_zip_from_scripts, safe_file_stem, script_file_name


def test_safe_file_stem():
    assert safe_file_stem("Spark SQL") == "spark_sql"
    assert safe_file_stem("dbo.[Order Lines]") == "dbo._order_lines"
    assert safe_file_stem("***") == "script"
    assert safe_file_stem("", default="table") == "table"


def test_script_file_name():
    assert script_file_name("Users", "SQL Server") == "users_sql_server.sql"


def test_create_zip_from_scripts():
    buffer = create_zip_from_scripts({"a.sql": "SELECT 1;", "b.sql": "SELECT 2;"})
    assert isinstance(buffer, io.BytesIO)
    with zipfile.ZipFile(buffer) as zf:
        assert zf.read("a.sql") == b"SELECT 1;"
        assert sorted(zf.namelist()) == ["a.sql", "b.sql"]
