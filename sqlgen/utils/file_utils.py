"""
File helpers for packaging generated scripts.
Builds download file names and in-memory ZIP bundles; nothing is written to disk.
"""
import io
import re
import zipfile
from typing import Dict

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


def safe_file_stem(value: str, default: str = "script") -> str:
    """
    Turn an arbitrary label (table or dialect name) into a file-name stem.

    Args:
        value: Label such as ``dbo.[Users]`` or ``Spark SQL``
        default: Stem used when nothing usable is left

    Returns:
        Lowercase stem containing only letters, digits, ``_``, ``.`` and ``-``
    """
    stem = _UNSAFE_CHARS.sub("_", value or "").strip("._-").lower()
    return stem or default


def script_file_name(table_name: str, dialect_name: str) -> str:
    return f"{safe_file_stem(table_name, 'table')}_{safe_file_stem(dialect_name, 'dialect')}.sql"


def create_zip_from_scripts(scripts: Dict[str, str]) -> io.BytesIO:
    """
    Creates a ZIP archive in memory from a mapping of file name to content.

    Args:
        scripts: File name (arcname) to script text

    Returns:
        io.BytesIO positioned at the start of the ZIP data
    """
    zip_buffer = io.BytesIO()
    with zipfile.ZipFile(zip_buffer, "w", zipfile.ZIP_DEFLATED, False) as zip_file:
        for arcname, content in scripts.items():
            zip_file.writestr(arcname, content)
    zip_buffer.seek(0)
    return zip_buffer
