"""
feedback.py — dismissible feedback banner.

Feedback lives in st.session_state["feedback"] as {"type", "message"} where
type is "success" | "error" | "info". Pages call show_feedback() from their
handlers and render_feedback() once where the banner should appear.
"""
import streamlit as st

_KEY = "feedback"

_HEADINGS = {
    "success": "Success",
    "error":   "Something went wrong",
    "info":    "Heads up",
}

_RENDER = {
    "success": st.success,
    "error":   st.error,
    "info":    st.info,
}


def show_feedback(kind: str, message: str) -> None:
    if kind not in _HEADINGS:
        raise ValueError(f"unknown feedback type: {kind}")
    st.session_state[_KEY] = {"type": kind, "message": message}


def clear_feedback() -> None:
    st.session_state.pop(_KEY, None)


def render_feedback() -> None:
    feedback = st.session_state.get(_KEY)
    if not feedback:
        return
    body, dismiss = st.columns([12, 1])
    with body:
        _RENDER[feedback["type"]](f"**{_HEADINGS[feedback['type']]}**  \n{feedback['message']}")
    with dismiss:
        st.button("✕", key="feedback-dismiss", help="Dismiss", on_click=clear_feedback)
