import streamlit as st

from utils import (
    SAMPLE_CREATE_TABLE,
    list_dialects_api,
    parse_sql_api,
    generate_sql_api,
    download_sql_api,
)

__all__ = [
    "display_generate_sql_page",
    "display_inspect_schema_page",
]


def _create_sql_input(key):
    return st.text_area(
        "CREATE TABLE statement",
        value=st.session_state.get("create_sql", SAMPLE_CREATE_TABLE),
        height=220,
        key=key,
    )


def display_generate_sql_page():
    st.header("Generate SQL")

    create_sql = _create_sql_input("gen_create_sql")
    dialects = list_dialects_api()
    targets = st.multiselect("Target dialects", dialects, default=dialects, key="gen_targets")

    pro = st.session_state.pro_enabled
    col1, col2 = st.columns(2)
    include_procedures = col1.checkbox("Stored procedures (Pro)", value=pro, disabled=not pro, key="gen_procs")
    include_diff = col2.checkbox("DDL diff placeholder (Pro)", value=pro, disabled=not pro, key="gen_diff")

    if st.button("Generate", key="generate_btn", type="primary"):
        st.session_state.create_sql = create_sql
        st.session_state.generation_download = None
        with st.spinner("Generating…"):
            data = generate_sql_api(create_sql, targets, include_procedures, include_diff, pro=pro)
            st.session_state.generation_data = data
            # Fetched once, from the same request, so the archive matches the tabs below.
            if data and not data.get("error"):
                zip_bytes, file_name = download_sql_api(create_sql, targets, include_procedures, include_diff, pro=pro)
                if zip_bytes:
                    st.session_state.generation_download = (zip_bytes, file_name)

    data = st.session_state.generation_data
    if not data:
        return
    if data.get("error"):
        st.error(f"Error: {data['error']}")
        return

    if data.get("status") == "success":
        st.success(data.get("message", "Done."))
    else:
        st.warning(data.get("message", "Finished with warnings."))

    table = data.get("table", {})
    if table.get("primary_key_inferred"):
        st.info(f"No primary key declared; using {', '.join(table.get('effective_primary_keys', []))} as the key.")

    results = data.get("results", {})
    if results:
        tabs = st.tabs(list(results))
        for tab, (dialect, script) in zip(tabs, results.items()):
            with tab:
                st.code(script, language="sql")

    if data.get("syntax_issues"):
        with st.expander(f"Syntax check ({len(data['syntax_issues'])} issue(s))"):
            st.json(data["syntax_issues"])

    download = st.session_state.get("generation_download")
    if download:
        zip_bytes, file_name = download
        st.download_button(
            "Download all (.zip)",
            data=zip_bytes,
            file_name=file_name,
            mime="application/zip",
            key="download_zip_btn",
        )


def display_inspect_schema_page():
    st.header("Inspect Schema")
    st.caption("Shows how the parser reads your statement: columns, types, flags and keys.")

    create_sql = _create_sql_input("inspect_create_sql")
    if st.button("Parse", key="parse_btn"):
        st.session_state.create_sql = create_sql
        with st.spinner("Parsing…"):
            resp = parse_sql_api(create_sql)
        if resp.get("error"):
            st.error(f"Error: {resp['error']}")
            return
        table = resp.get("table", {})
        st.subheader(f"Table: {table.get('name')}")
        st.dataframe(table.get("columns", []), use_container_width=True)
        st.json(resp)
