"""
api_client.py — single HTTP client for all frontend → Flask communication.
Reads API_BASE_URL from .env (falls back to localhost:5000).
Authenticated helpers take the JWT access token stored in st.session_state.
"""
import os
import requests
from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")

# Generation waits on the model; everything else should be quick
GENERATE_TIMEOUT = 120


class APIError(Exception):
    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


def _headers(token: str | None = None) -> dict:
    h = {"Content-Type": "application/json"}
    if token:
        h["Authorization"] = f"Bearer {token}"
    return h


def _raise(resp: requests.Response) -> None:
    if not resp.ok:
        try:
            body = resp.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        # flask-jwt-extended reports token problems under "msg"
        msg = body.get("error") or body.get("msg") or resp.text
        raise APIError(msg, resp.status_code)


def _request(method: str, path: str, token: str | None = None, timeout: float = 30, **kwargs) -> dict:
    try:
        resp = requests.request(
            method,
            f"{API_BASE_URL}{path}",
            headers=_headers(token),
            timeout=timeout,
            **kwargs,
        )
    except requests.RequestException as exc:
        raise APIError(f"Could not reach the server: {exc}") from exc
    _raise(resp)
    return resp.json()


# ── Auth ─────────────────────────────────────────────────────────────────────

def register(email: str, password: str, name: str | None = None) -> dict:
    return _request(
        "POST", "/api/auth/register",
        json={"email": email, "password": password, "name": name},
        timeout=10,
    )


def login(email: str, password: str) -> dict:
    return _request(
        "POST", "/api/auth/login",
        json={"email": email, "password": password},
        timeout=10,
    )


def refresh_token(refresh_tok: str) -> str:
    return _request("POST", "/api/auth/refresh", token=refresh_tok, timeout=10)["access_token"]


def call_with_refresh(state, fn, *args, **kwargs):
    """
    Call fn(access_token, *args, **kwargs) with the token held in *state*
    (st.session_state on the pages).

    An expired access token (401) is exchanged once for a new one using the
    stored refresh token, and the call is retried. A failed refresh raises
    the refresh APIError.
    """
    try:
        return fn(state["access_token"], *args, **kwargs)
    except APIError as exc:
        if exc.status_code != 401 or not state.get("refresh_token"):
            raise
    state["access_token"] = refresh_token(state["refresh_token"])
    return fn(state["access_token"], *args, **kwargs)


# ── Generic authenticated helpers ────────────────────────────────────────────

def authed_get(path: str, access_token: str, params: dict | None = None) -> dict:
    return _request("GET", path, token=access_token, params=params)


def authed_post(path: str, access_token: str, payload: dict, timeout: float = 30) -> dict:
    return _request("POST", path, token=access_token, json=payload, timeout=timeout)


def authed_patch(path: str, access_token: str, payload: dict) -> dict:
    return _request("PATCH", path, token=access_token, json=payload)


def authed_delete(path: str, access_token: str) -> dict:
    return _request("DELETE", path, token=access_token, timeout=10)


# ── Quizzes ──────────────────────────────────────────────────────────────────

def generate_quiz(access_token: str, prompt: str) -> dict:
    return authed_post(
        "/api/quizzes/generate", access_token, {"prompt": prompt},
        timeout=GENERATE_TIMEOUT,
    )


def save_quiz(access_token: str, quiz: dict) -> dict:
    return authed_post("/api/quizzes", access_token, quiz)


def list_quizzes(access_token: str, limit: int = 30) -> list:
    return authed_get("/api/quizzes", access_token, params={"limit": limit})


def get_quiz(access_token: str, quiz_id: str) -> dict:
    return authed_get(f"/api/quizzes/{quiz_id}", access_token)


def delete_quiz(access_token: str, quiz_id: str) -> dict:
    return authed_delete(f"/api/quizzes/{quiz_id}", access_token)


def set_visibility(access_token: str, quiz_id: str, is_public: bool) -> dict:
    return authed_patch(
        f"/api/quizzes/{quiz_id}/visibility", access_token, {"is_public": is_public}
    )


def get_public_quiz(share_id: str) -> dict:
    return _request("GET", f"/api/public/quizzes/{share_id}", timeout=10)
