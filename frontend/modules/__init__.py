# Subpackage aggregating Streamlit page renderers

from .general import display_home_page
from .workbench import (
    display_generate_sql_page,
    display_inspect_schema_page,
)

__all__ = [
    "display_home_page",
    "display_generate_sql_page",
    "display_inspect_schema_page",
]
