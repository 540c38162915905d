# client/components.py
import re
import streamlit as st
import pandas as pd

EMAIL_RE = re.compile(r"^\S+@\S+\.\S+$")

def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email or ""))

def show_table(rows, caption: str | None = None):
    """Render a list[dict] as a dataframe; otherwise show JSON."""
    if caption:
        st.caption(caption)
    if isinstance(rows, list):
        if rows and isinstance(rows[0], dict):
            st.dataframe(pd.DataFrame(rows))
        else:
            st.write(rows)
    else:
        st.write(rows)

def show_json(obj, caption: str | None = None):
    if caption:
        st.caption(caption)
    st.json(obj)

def show_api_error(err):
    """Map API status codes to the right kind of alert."""
    status = getattr(err, "status", None)
    if status in (400, 422):
        st.error(f"Invalid data: {err}")
    elif status == 403:
        st.error(f"Captcha: {err}")
    elif status == 409:
        st.warning(f"Duplicate: {err}")
    else:
        st.error(f"Could not reach the server (check CORS/network): {err}")
