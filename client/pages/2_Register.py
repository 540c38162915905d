import streamlit as st
import api as API
from components import is_valid_email, show_api_error

st.title("👤 Register")

with st.form("register_form"):
    name = st.text_input("Name *")
    email = st.text_input("Email *")
    password = st.text_input("Password *", type="password", help="At least 6 characters")
    submitted = st.form_submit_button("Create user")

if submitted:
    if not name.strip() or not email.strip() or not password:
        st.warning("Fill in the required fields.")
    elif not is_valid_email(email.strip()):
        st.warning("Check your email address.")
    else:
        try:
            resp = API.register({"name": name.strip(), "email": email.strip(), "password": password})
            st.success(f"{resp.get('message')} (id={resp.get('id')})")
        except Exception as e:
            show_api_error(e)
