"""theme.py — shared CSS (dark palette) injected at the top of each page."""
import streamlit as st

_CSS = """
<style>
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap');

html, body, [class*="css"] {
    font-family: 'Inter', system-ui, sans-serif;
    background-color: #0B1220;
    color: #E6EAF2;
}
.stApp { background-color: #0B1220; }

.dash-card {
    background: #111B2E;
    border: 1px solid #22304A;
    border-radius: 12px;
    padding: 1.4rem 1.6rem;
}
.dash-card h3 { color: #E6EAF2; margin-bottom: 0.4rem; }
.dash-card p  { color: #A7B0C0; margin: 0; font-size: 0.9rem; }

.badge {
    display: inline-block;
    border-radius: 999px;
    padding: 0.1rem 0.6rem;
    font-size: 0.7rem;
    font-weight: 600;
    border: 1px solid #22304A;
    color: #A7B0C0;
}
.badge.public { border-color: #10B981; color: #6EE7B7; }
.badge.score  { border-color: #10B981; color: #A7F3D0; background: rgba(16,185,129,0.15); }

.quiz-title { color: #FCD34D; font-size: 1.6rem; font-weight: 600; }

div.stButton > button {
    background: #1A2540;
    color: #E6EAF2;
    border: 1px solid #22304A;
    border-radius: 8px;
    padding: 0.45rem 1.1rem;
    font-weight: 500;
    text-align: left;
    transition: background 0.2s;
}
div.stButton > button:hover { background: #22304A; }
div.stButton > button[kind="primary"] { background: #6D5EF7; border: none; font-weight: 600; }
div.stButton > button[kind="primary"]:hover { background: #5a4dd6; }
</style>
"""


def apply_theme() -> None:
    st.markdown(_CSS, unsafe_allow_html=True)
