"""3_Shared_Quiz.py — read-only view of a public quiz, opened with ?share=<share_id>."""
import streamlit as st

from components.api_client import APIError, get_public_quiz
from components.quiz_view import render_quiz, reset_answers
from components.theme import apply_theme
from quizbot.quiz import QuizValidationError, parse_quiz

st.set_page_config(page_title="Shared Quiz", page_icon="🔗", layout="centered")
apply_theme()

ANSWERS_KEY = "shared_answers"

share_id = (st.query_params.get("share") or "").strip()
if not share_id:
    st.info("Open a shared quiz link to take it here.")
    st.stop()

# a different link means a different quiz: drop answers from the previous one
if st.session_state.get("shared_id") != share_id:
    st.session_state["shared_id"] = share_id
    st.session_state.pop("shared_quiz", None)
    reset_answers(ANSWERS_KEY)

quiz = st.session_state.get("shared_quiz")
if quiz is None:
    try:
        with st.spinner("Loading…"):
            quiz = parse_quiz(get_public_quiz(share_id))
    except APIError as exc:
        st.error(str(exc))
        st.stop()
    except QuizValidationError:
        st.error("This quiz could not be displayed.")
        st.stop()
    st.session_state["shared_quiz"] = quiz

with st.container(border=True):
    render_quiz(quiz, ANSWERS_KEY)
