"""2_Profile.py — account details and saved quiz management (share, unshare, delete)."""
import os

import streamlit as st

from components.api_client import APIError, call_with_refresh, delete_quiz, list_quizzes, set_visibility
from components.feedback import clear_feedback, render_feedback, show_feedback
from components.theme import apply_theme

st.set_page_config(page_title="Profile", page_icon="👤", layout="wide")
apply_theme()

# Where the Streamlit app is served; used to build shareable links
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:8501").rstrip("/")
PROFILE_LIST_LIMIT = 100

# ── Auth guard ─────────────────────────────────────────────────────────────
if not st.session_state.get("access_token"):
    st.warning("You're not signed in.")
    st.page_link("pages/0_Login.py", label="👉 Go to Sign in")
    st.stop()

user = st.session_state["user"]


def share_url(share_id: str) -> str:
    return f"{PUBLIC_BASE_URL}/Shared_Quiz?share={share_id}"


# ── Handlers ──────────────────────────────────────────────────────────────────

def handle_toggle(quiz_id: str, make_public: bool) -> None:
    clear_feedback()
    try:
        call_with_refresh(st.session_state, set_visibility, quiz_id, make_public)
    except APIError as exc:
        show_feedback("error", str(exc))
        return
    show_feedback("success", "Quiz is now public." if make_public else "Quiz is now private.")


def handle_delete(quiz_id: str) -> None:
    clear_feedback()
    st.session_state.pop("confirm_delete", None)
    try:
        call_with_refresh(st.session_state, delete_quiz, quiz_id)
    except APIError as exc:
        show_feedback("error", str(exc))
        return
    if st.session_state.get("studio_saved_id") == quiz_id:
        # the quiz open in the studio is no longer in the library
        st.session_state["studio_saved_id"] = None
    show_feedback("success", "Quiz deleted.")


# ── Account ───────────────────────────────────────────────────────────────────
st.title("👤 Profile")
with st.container(border=True):
    st.markdown(f"**Name:** {user.get('name') or '—'}")
    st.markdown(f"**Email:** {user['email']}")

render_feedback()

# ── Saved quizzes ─────────────────────────────────────────────────────────────
st.subheader("Saved Quizzes")
try:
    quizzes = call_with_refresh(st.session_state, list_quizzes, limit=PROFILE_LIST_LIMIT)
except APIError as exc:
    st.error(str(exc))
    st.stop()

if not quizzes:
    st.caption("No quizzes saved yet.")

for q in quizzes:
    with st.container(border=True):
        info, stamp = st.columns([4, 1])
        with info:
            st.markdown(f"**{q['subject']}**")
            st.caption(f"{q['question_count']} questions")
        with stamp:
            st.caption(q["created_at"][:16].replace("T", " "))

        share, toggle, delete = st.columns([3, 1, 1])
        with share:
            if q["is_public"] and q["share_id"]:
                st.code(share_url(q["share_id"]), language=None)
            else:
                st.caption("Make public to get a shareable link.")
        with toggle:
            st.button(
                "Make private" if q["is_public"] else "Make public",
                key=f"toggle-{q['id']}",
                on_click=handle_toggle,
                args=(q["id"], not q["is_public"]),
                use_container_width=True,
            )
        with delete:
            if st.session_state.get("confirm_delete") == q["id"]:
                st.button(
                    "Confirm delete",
                    key=f"confirm-{q['id']}",
                    type="primary",
                    on_click=handle_delete,
                    args=(q["id"],),
                    use_container_width=True,
                )
            elif st.button("Delete", key=f"delete-{q['id']}", use_container_width=True):
                st.session_state["confirm_delete"] = q["id"]
                st.rerun()
