"""
quiz_view.py — renders a quiz and records answers.

The answer session for a quiz is stored in st.session_state[state_key] and
only ever replaced through quizbot.quiz.select_answer, so the first option
picked for a question stays locked.
"""
import html

import streamlit as st

from quizbot.quiz import (
    LETTERS,
    Quiz,
    answered_count,
    is_complete,
    new_session,
    option_state,
    score,
    select_answer,
)

_MARKS = {
    "idle":    "",
    "correct": "✅ ",
    "wrong":   "❌ ",
    "muted":   "",
}


def subject_heading(subject: str) -> str:
    # subjects come from the model or from other users' shared quizzes
    return f"<div class='quiz-title'>{html.escape(subject)}</div>"


def reset_answers(state_key: str) -> None:
    st.session_state[state_key] = new_session()


def _lock(state_key: str, index: int, letter: str) -> None:
    session = st.session_state.get(state_key, new_session())
    st.session_state[state_key] = select_answer(session, index, letter)


def render_quiz(quiz: Quiz, state_key: str) -> None:
    session = st.session_state.setdefault(state_key, new_session())
    total = len(quiz.questions)

    head, progress = st.columns([3, 1])
    with head:
        st.markdown(subject_heading(quiz.subject), unsafe_allow_html=True)
    with progress:
        st.caption(f"{answered_count(session)}/{total} answered")
        if is_complete(session, quiz):
            st.markdown(
                f"<span class='badge score'>Score: {score(session, quiz)} / {total}</span>",
                unsafe_allow_html=True,
            )

    for index, question in enumerate(quiz.questions):
        st.markdown(f"**{index + 1}. {question.question}**")
        answered = index in session
        for letter, option in zip(LETTERS, question.options):
            state = option_state(session, index, letter, question.answer)
            st.button(
                f"{_MARKS[state]}{letter}. {option}",
                key=f"{state_key}-{index}-{letter}",
                disabled=answered,
                use_container_width=True,
                on_click=_lock,
                args=(state_key, index, letter),
            )
        if answered:
            st.caption(f"Correct answer: **{question.answer}**")
        st.write("")
