"""
1_Quiz_Studio.py — generate, answer and save quizzes.

Session state
-------------
studio_quiz      : Quiz | None    – the active quiz
studio_answers   : AnswerSession  – locked answers for the active quiz
studio_saved_id  : str | None     – library id when the active quiz is saved
studio_pending_topic : str | None – topic of the generation in flight
"""
import streamlit as st

from components.api_client import (
    APIError,
    call_with_refresh,
    generate_quiz,
    get_quiz,
    list_quizzes,
    save_quiz,
)
from components.feedback import clear_feedback, render_feedback, show_feedback
from components.generation import (
    finish_generation,
    is_generating,
    pending_topic,
    request_generation,
)
from components.quiz_view import render_quiz, reset_answers
from components.theme import apply_theme
from quizbot.quiz import QuizValidationError, parse_quiz

st.set_page_config(page_title="Quiz Studio", page_icon="🧠", layout="wide")
apply_theme()

ANSWERS_KEY = "studio_answers"

# ── Auth guard ─────────────────────────────────────────────────────────────
if not st.session_state.get("access_token"):
    st.warning("Please sign in first.")
    st.page_link("pages/0_Login.py", label="👉 Go to Login")
    st.stop()

user = st.session_state["user"]


def _activate(quiz, saved_id=None) -> None:
    # answers always restart with the quiz they belong to
    st.session_state["studio_quiz"] = quiz
    st.session_state["studio_saved_id"] = saved_id
    reset_answers(ANSWERS_KEY)


def _deactivate() -> None:
    st.session_state["studio_quiz"] = None
    st.session_state["studio_saved_id"] = None
    reset_answers(ANSWERS_KEY)


def _error_message(exc: APIError, fallback: str) -> str:
    if exc.status_code == 401:
        return "Your session has expired, please log in again."
    return str(exc) or fallback


# ── Handlers ──────────────────────────────────────────────────────────────────

def handle_generate(prompt: str) -> None:
    clear_feedback()
    topic = prompt.strip()
    if not topic:
        show_feedback("info", "Please enter a subject first.")
        return

    _deactivate()
    try:
        with st.spinner("Generating your quiz…"):
            data = call_with_refresh(st.session_state, generate_quiz, topic)
    except APIError as exc:
        if exc.status_code == 502:
            show_feedback("error", "I couldn't understand the quiz data I received. Please try again.")
        else:
            show_feedback("error", _error_message(exc, "Something went wrong while generating your quiz."))
        return

    if data.get("status") == "rejected":
        show_feedback("info", f'"{topic}" is not a valid quiz topic. Try a different subject.')
        return

    try:
        quiz = parse_quiz(data.get("quiz"))
    except QuizValidationError:
        show_feedback("error", "I couldn't understand the quiz data I received. Please try again.")
        return

    _activate(quiz)
    show_feedback("success", "Here is your freshly generated quiz, have fun!")


def handle_save() -> None:
    clear_feedback()
    quiz = st.session_state.get("studio_quiz")
    if quiz is None:
        return
    if st.session_state.get("studio_saved_id"):
        show_feedback("info", "This quiz is already in your library.")
        return

    try:
        data = call_with_refresh(st.session_state, save_quiz, quiz.to_dict())
    except APIError as exc:
        if exc.status_code == 404:
            show_feedback("error", "I couldn't confirm your session, please log in again.")
        else:
            show_feedback("error", f"Error saving quiz: {_error_message(exc, 'unknown error')}")
        return

    st.session_state["studio_saved_id"] = data["quiz"]["id"]
    if data.get("created"):
        show_feedback("success", "Quiz saved successfully, find it anytime in your library.")
    else:
        show_feedback("info", "This quiz is already in your library.")


def handle_load(quiz_id: str) -> None:
    clear_feedback()
    if st.session_state.get("studio_saved_id") == quiz_id:
        return
    try:
        data = call_with_refresh(st.session_state, get_quiz, quiz_id)
        quiz = parse_quiz(data)
    except APIError as exc:
        show_feedback("error", _error_message(exc, "Unable to load that quiz right now."))
        return
    except QuizValidationError as exc:
        show_feedback("error", f"That saved quiz is damaged: {exc}")
        return

    _activate(quiz, saved_id=quiz_id)
    show_feedback("success", f'Loaded "{quiz.subject}" from your library.')


# ── Sidebar: library ──────────────────────────────────────────────────────────
with st.sidebar:
    st.markdown("### Your quizzes")
    search = st.text_input("Search saved quizzes", key="studio_search", label_visibility="collapsed",
                           placeholder="Search saved quizzes")
    try:
        recent = call_with_refresh(st.session_state, list_quizzes)
    except APIError as exc:
        recent = []
        st.caption(_error_message(exc, "Could not load your library."))

    needle = search.strip().lower()
    shown = [q for q in recent if needle in q["subject"].lower()] if needle else recent

    if not shown:
        st.caption(
            "No saved quizzes yet. Generate one and hit save."
            if not recent else "No quizzes match your search."
        )
    for item in shown:
        active = st.session_state.get("studio_saved_id") == item["id"]
        label = f"{'▸ ' if active else ''}{item['subject']}"
        st.button(label, key=f"load-{item['id']}", use_container_width=True,
                  on_click=handle_load, args=(item["id"],))
        badge = "public" if item["is_public"] else ""
        st.markdown(
            f"<span class='badge {badge}'>{'Public' if item['is_public'] else 'Private'}</span> "
            f"<span style='color:#A7B0C0;font-size:0.7rem'>{item['created_at'][:16].replace('T', ' ')}</span>",
            unsafe_allow_html=True,
        )
    st.divider()
    st.page_link("pages/2_Profile.py", label="Profile →")

# ── Main: prompt ──────────────────────────────────────────────────────────────
display_name = user.get("display_name") or user.get("email")
st.markdown(f"## Welcome back, {display_name}!")
st.caption(
    "Ask for any subject and I'll craft a fresh multiple-choice quiz. "
    "You can answer it right here, save it for later, or share it from your profile."
)

def _queue_generate() -> None:
    request_generation(st.session_state, st.session_state.get("studio_prompt", ""))


with st.form("generate_form", clear_on_submit=False):
    st.text_input(
        "What should we quiz you on today?",
        key="studio_prompt",
        placeholder="e.g. Neural networks, Renaissance art, photosynthesis",
    )
    busy = is_generating(st.session_state)
    st.form_submit_button(
        "Generating..." if busy else "Generate",
        type="primary",
        disabled=busy,
        on_click=_queue_generate,
    )

# the form above has rendered disabled; run the queued request, then re-enable
topic = pending_topic(st.session_state)
if topic is not None:
    try:
        handle_generate(topic)
    finally:
        finish_generation(st.session_state)
    st.rerun()

render_feedback()

# ── Main: active quiz ─────────────────────────────────────────────────────────
quiz = st.session_state.get("studio_quiz")
if quiz is None:
    st.markdown(
        """
        <div class="dash-card" style="text-align:center">
          <h3>Start a conversation</h3>
          <p>Ask for a quiz topic above and I'll craft a tailored multiple-choice quiz for you.
          You can save it, share it, or revisit it anytime from the sidebar.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    st.stop()

with st.container(border=True):
    render_quiz(quiz, ANSWERS_KEY)

    is_saved = bool(st.session_state.get("studio_saved_id"))
    st.button(
        "Saved" if is_saved else "Save to library",
        key="save-quiz",
        type="primary",
        disabled=is_saved,
        on_click=handle_save,
    )
