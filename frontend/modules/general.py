import streamlit as st

__all__ = ["display_home_page"]


def display_home_page():
    st.title("Welcome to SQLGen!")
    st.markdown(
        """
        SQLGen turns a single `CREATE TABLE` statement into parameterized
        INSERT / UPDATE / SELECT statements for eight SQL dialects.

        **Key Features:**

        *   **Parameterized CRUD:** placeholders in each dialect's native style (`@name`, `$1`, `?`, `:name`).
        *   **Stored Procedures (Pro):** INSERT / UPDATE / DELETE procedures for SQL Server, MySQL, MariaDB, PostgreSQL and Oracle.
        *   **Schema Inspection:** see exactly which columns and keys were recognised.

        Use the sidebar to navigate through the different modules of the application.
        """
    )
    if st.session_state.pro_enabled:
        st.info("Pro features are enabled for this session.")
    else:
        st.info("You are using the free tier. Toggle the Pro license in the sidebar to unlock procedures and the diff stub.")
