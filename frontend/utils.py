import streamlit as st
import requests
import os
import re

# --- Configuration ---
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5001/api/v1")
# Must match entitlement.cookie_name / cookie_value in sqlgen/settings.yaml
PRO_COOKIE_NAME = os.getenv("SQLGEN_PRO_COOKIE", "SQLGen_Pro")
PRO_COOKIE_VALUE = "1"
# Used only if the API is unreachable when the page loads.
FALLBACK_DIALECTS = ["SQL Server", "PostgreSQL", "MySQL", "MariaDB", "SQLite", "Oracle", "Snowflake", "Spark SQL"]

SAMPLE_CREATE_TABLE = """CREATE TABLE Users (
    UserId INT IDENTITY(1,1) PRIMARY KEY,
    Email NVARCHAR(255) NOT NULL,
    DisplayName NVARCHAR(100),
    Balance DECIMAL(18,2) NOT NULL,
    IsActive BIT NOT NULL,
    CreatedAt DATETIME2 NOT NULL
)"""


def _pro_cookies(pro: bool):
    return {PRO_COOKIE_NAME: PRO_COOKIE_VALUE} if pro else None


# --- API Call Functions ---

def api_post_request(endpoint, payload, cookies=None):
    """Helper function to make POST requests to the API."""
    try:
        response = requests.post(f"{API_BASE_URL}/{endpoint}", json=payload, cookies=cookies)
        response.raise_for_status()  # Raise an exception for HTTP errors (4xx or 5xx)
        return response.json()
    except requests.exceptions.HTTPError as http_err:
        st.error(f"HTTP error occurred: {http_err} - Response: {response.text}")
        try:
            return response.json() # Try to return JSON error details if possible
        except ValueError:
            return {"error": response.text, "status_code": response.status_code}
    except requests.exceptions.RequestException as req_err:
        st.error(f"Request error occurred: {req_err}")
        return {"error": str(req_err)}
    except ValueError as json_err: # Handle cases where response is not JSON
        st.error(f"JSON decode error: {json_err} - Response: {response.text}")
        return {"error": "Failed to decode JSON response", "raw_response": response.text}


def api_get_request(endpoint, params=None):
    """Helper function to make GET requests to the API."""
    try:
        response = requests.get(f"{API_BASE_URL}/{endpoint}", params=params)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as http_err:
        st.error(f"HTTP error occurred: {http_err} - Response: {response.text}")
        try:
            return response.json()
        except ValueError:
            return {"error": response.text, "status_code": response.status_code}
    except requests.exceptions.RequestException as req_err:
        st.error(f"Request error occurred: {req_err}")
        return {"error": str(req_err)}


def list_dialects_api():
    """Calls the /dialects endpoint, falling back to the built-in list."""
    resp = api_get_request("dialects")
    return resp.get("dialects") or FALLBACK_DIALECTS


def parse_sql_api(create_sql):
    """Calls the /sql/parse endpoint."""
    return api_post_request("sql/parse", {"create_sql": create_sql})


def _generation_payload(create_sql, targets, include_procedures, include_diff):
    return {
        "create_sql": create_sql,
        "targets": list(targets),
        "include_procedures": include_procedures,
        "include_diff": include_diff,
    }


def generate_sql_api(create_sql, targets, include_procedures, include_diff, pro=False):
    """Calls the /sql/generate endpoint."""
    payload = _generation_payload(create_sql, targets, include_procedures, include_diff)
    return api_post_request("sql/generate", payload, cookies=_pro_cookies(pro))


def _attachment_name(response, default):
    """File name from the Content-Disposition header the API sets."""
    match = re.search(r'filename="([^"]+)"', response.headers.get("content-disposition", ""))
    return match.group(1) if match else default


def download_sql_api(create_sql, targets, include_procedures, include_diff, pro=False):
    """Calls the /sql/generate/download endpoint.

    Returns ``(zip_bytes, file_name)`` using the server's archive name, or
    ``(None, None)`` if the request failed.
    """
    payload = _generation_payload(create_sql, targets, include_procedures, include_diff)
    try:
        response = requests.post(
            f"{API_BASE_URL}/sql/generate/download", json=payload, cookies=_pro_cookies(pro)
        )
        response.raise_for_status()
        return response.content, _attachment_name(response, "scripts.zip")
    except requests.exceptions.RequestException as req_err:
        st.error(f"Download failed: {req_err}")
        return None, None
