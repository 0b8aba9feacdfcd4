"""
0_Login.py — Login & Register page.
This is page 0 in the Streamlit sidebar so it always appears first.
"""
import streamlit as st
from components.api_client import login, register, APIError
from components.theme import apply_theme

# ── Page config ───────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="Quiz Bot — Login",
    page_icon="🧠",
    layout="centered",
)
apply_theme()

st.markdown(
    """
    <style>
    .auth-title {
        font-size: 1.8rem;
        font-weight: 700;
        color: #E6EAF2;
        text-align: center;
        margin: 2rem 0 0.25rem 0;
    }
    .auth-sub {
        font-size: 0.9rem;
        color: #A7B0C0;
        text-align: center;
        margin-bottom: 1.8rem;
    }
    div.stButton > button, div.stFormSubmitButton > button { width: 100%; }
    </style>
    """,
    unsafe_allow_html=True,
)


def _start_session(data: dict) -> None:
    st.session_state["access_token"] = data["access_token"]
    st.session_state["refresh_token"] = data["refresh_token"]
    st.session_state["user"] = data["user"]


# ── Redirect if already logged in ────────────────────────────────────────────
if st.session_state.get("access_token"):
    st.success("You are already logged in.")
    st.page_link("pages/1_Quiz_Studio.py", label="Go to Quiz Studio →")
    st.stop()

st.markdown(
    '<div class="auth-title">🧠 Quiz Bot</div>'
    '<div class="auth-sub">AI-generated quizzes on any topic</div>',
    unsafe_allow_html=True,
)

tab_login, tab_register = st.tabs(["Sign In", "Create Account"])

# ── LOGIN ─────────────────────────────────────────────────────────────────────
with tab_login:
    with st.form("login_form"):
        email = st.text_input("Email", placeholder="you@example.com")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign In")

    if submitted:
        if not email or not password:
            st.error("Please fill in both fields.")
        else:
            try:
                data = login(email.strip().lower(), password)
                _start_session(data)
                st.success(f"Welcome back, {data['user']['display_name']}!")
                st.switch_page("pages/1_Quiz_Studio.py")
            except APIError as e:
                st.error(str(e))

# ── REGISTER ──────────────────────────────────────────────────────────────────
with tab_register:
    with st.form("register_form"):
        r_name = st.text_input("Name (optional)", placeholder="Ada", key="r_name")
        r_email = st.text_input("Email", placeholder="you@example.com", key="r_email")
        r_password = st.text_input("Password (min 8 chars)", type="password", key="r_pass")
        r_confirm = st.text_input("Confirm Password", type="password", key="r_confirm")
        r_submitted = st.form_submit_button("Create Account")

    if r_submitted:
        if not r_email or not r_password:
            st.error("Email and password are required.")
        elif r_password != r_confirm:
            st.error("Passwords do not match.")
        elif len(r_password) < 8:
            st.error("Password must be at least 8 characters.")
        else:
            try:
                data = register(
                    r_email.strip().lower(),
                    r_password,
                    r_name.strip() or None,
                )
                _start_session(data)
                st.success("Account created! Redirecting…")
                st.switch_page("pages/1_Quiz_Studio.py")
            except APIError as e:
                st.error(str(e))
