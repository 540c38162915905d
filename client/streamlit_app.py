# client/streamlit_app.py
import streamlit as st
import api as API

st.set_page_config(page_title="Contact Client", layout="wide")
st.title("✉️ Contact Client")

st.markdown("""
This is the home page.

Use the **sidebar Pages** to open:
- **✉️ Contact** — Fill in the contact form and POST it to `/api/contact` (needs a reCAPTCHA token).
- **👤 Register** — Create a user through `/api/register`.
- **📥 Insert** — Generate or paste records and POST them to `/api/insert/{table}` one by one.
""")

with st.sidebar:
    st.header("Settings")
    st.text_input("API Base URL (from env)", value=API.API, disabled=True)
    if st.button("Health check"):
        try:
            st.success(API.health())
        except Exception as e:
            st.error(f"Health check failed: {e}")

st.info("Tip: set `API_BASE_URL` in `client/.env` or export it before running `streamlit run client/streamlit_app.py`.")
