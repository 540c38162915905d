import streamlit as st
import api as API
from components import is_valid_email, show_api_error

st.title("✉️ Contact")

with st.form("contact_form", clear_on_submit=False):
    name = st.text_input("Name *")
    email = st.text_input("Email *")
    phone = st.text_input("Phone")
    message = st.text_area("Message *", height=160)
    terms = st.checkbox("I accept the terms and conditions")
    token = st.text_input("reCAPTCHA token", help="Token produced by the reCAPTCHA widget on the real site")
    submitted = st.form_submit_button("Send message")

if submitted:
    name, email, phone, message = name.strip(), email.strip(), phone.strip(), message.strip()

    # Front-side checks before bothering the API
    if not name or not email or not message:
        st.warning("Fill in the required fields.")
    elif not is_valid_email(email):
        st.warning("Check your email address.")
    elif not terms:
        st.warning("You must accept the terms and conditions.")
    elif not token.strip():
        st.warning("Please confirm you are not a robot.")
    else:
        payload = {
            "name": name,
            "email": email,
            "phone": phone,
            "message": message,
            "accepted_terms": terms,
            "token": token.strip(),
        }
        with st.spinner("Sending..."):
            try:
                resp = API.contact(payload)
                st.success(resp.get("message") or "Your message was sent.")
            except Exception as e:
                show_api_error(e)
