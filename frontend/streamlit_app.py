import streamlit as st
from dataclasses import dataclass
from typing import Callable, List, Dict
from modules.general import display_home_page
from modules.workbench import (
    display_generate_sql_page,
    display_inspect_schema_page,
)

# --- Page Configuration & Session State Initialization ---
st.set_page_config(layout="wide", page_title="SQLGen - CRUD Script Generator")

# Hide the (irrelevant) Streamlit "Deploy" button in local runs
hide_streamlit_style = """
            <style>
            /* Hide deploy button from toolbar if present */
            div[data-testid="stToolbar"] button[title*="Deploy"] {
                display: none !important;
            }
            </style>
            """
st.markdown(hide_streamlit_style, unsafe_allow_html=True)

if 'generation_data' not in st.session_state: # To store results from sql/generate
    st.session_state.generation_data = None
if 'generation_download' not in st.session_state: # ZIP built from the same request as generation_data
    st.session_state.generation_download = None
if 'current_page' not in st.session_state:
    st.session_state.current_page = "Home"
if 'pro_enabled' not in st.session_state: # Simulates the Pro license cookie
    st.session_state.pro_enabled = False


@dataclass
class Page:
    title: str
    render: Callable[[], None]
    category: str  # e.g. "Workbench", "General"

# Registry of available pages
PAGES: List[Page] = [
    Page("Home", display_home_page, "General"),
    Page("Generate SQL", display_generate_sql_page, "Workbench"),
    Page("Inspect Schema", display_inspect_schema_page, "Workbench"),
]

# Utility: map title -> Page for quick lookup
_PAGE_MAP: Dict[str, Page] = {p.title: p for p in PAGES}


def _render_sidebar():
    """Render sidebar navigation dynamically from the PAGES registry."""
    pro = st.sidebar.toggle("Pro license", value=st.session_state.pro_enabled, key="pro_toggle_sidebar")
    if pro != st.session_state.pro_enabled:
        st.session_state.pro_enabled = pro
        st.session_state.generation_data = None
        st.session_state.generation_download = None
        st.rerun()

    if st.sidebar.button("🏠 Home", key="nav_btn_home_main", type="primary" if st.session_state.current_page == "Home" else "secondary", use_container_width=True):
        st.session_state.current_page = "Home"
        st.rerun()

    st.sidebar.markdown("**🛠️ Workbench**")
    for page in PAGES:
        if page.category == "General":
            continue
        btn_key = f"nav_btn_{page.title.replace(' ', '_').lower()}"
        btn_type = "primary" if st.session_state.current_page == page.title else "secondary"
        if st.sidebar.button(page.title, key=btn_key, type=btn_type, use_container_width=True):
            st.session_state.current_page = page.title
            st.rerun()

# ------------------------------------------------------------------
# Main application dispatch
# ------------------------------------------------------------------

if st.session_state.current_page not in _PAGE_MAP:
    st.session_state.current_page = "Home"

_render_sidebar()
_PAGE_MAP[st.session_state.current_page].render()
