"""
Home.py — Entry point of the Quiz Bot Streamlit app.
Checks for a valid JWT; redirects to login if missing.
Shows a welcome dashboard when authenticated.
"""
import html

import streamlit as st

from components.theme import apply_theme

st.set_page_config(
    page_title="Quiz Bot",
    page_icon="🧠",
    layout="wide",
)
apply_theme()


# ── Auth guard ─────────────────────────────────────────────────────────────────
def _require_auth():
    if not st.session_state.get("access_token"):
        st.warning("Please sign in to start quizzing.")
        st.page_link("pages/0_Login.py", label="👉 Go to Login")
        st.stop()


_require_auth()

user = st.session_state["user"]
display_name = user.get("display_name") or user["email"]

# ── Sidebar ────────────────────────────────────────────────────────────────────
with st.sidebar:
    st.markdown(
        f"<div style='color:#A7B0C0;font-size:0.8rem;margin-bottom:0.3rem'>Signed in as</div>"
        f"<div style='color:#E6EAF2;font-weight:600'>{html.escape(display_name)}</div>"
        f"<div style='color:#A7B0C0;font-size:0.75rem'>{html.escape(user['email'])}</div>",
        unsafe_allow_html=True,
    )
    st.divider()
    if st.button("Sign Out", key="sidebar-logout"):
        # drop tokens and any quiz state tied to this account
        for k in list(st.session_state.keys()):
            st.session_state.pop(k, None)
        st.rerun()

# ── Dashboard header ──────────────────────────────────────────────────────────
st.markdown(f"## 👋 Welcome back, **{display_name}**")
st.markdown(
    "<p style='color:#A7B0C0;margin-top:-0.5rem'>"
    "Ask for any subject and get a fresh multiple-choice quiz.</p>",
    unsafe_allow_html=True,
)
st.divider()

# ── Feature cards ─────────────────────────────────────────────────────────────
col1, col2 = st.columns(2)

with col1:
    st.markdown(
        """
        <div class="dash-card">
          <h3>🧠 Quiz Studio</h3>
          <p>Generate a quiz on any topic, answer it, and save it to your library.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    st.page_link("pages/1_Quiz_Studio.py", label="Start a Quiz →")

with col2:
    st.markdown(
        """
        <div class="dash-card">
          <h3>👤 Profile</h3>
          <p>Manage saved quizzes and share public links.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    st.page_link("pages/2_Profile.py", label="Open Profile →")
