"""
LLM wrapper client.

Thin HTTP client for an OpenAI-compatible chat completions API.

Public API
----------
    get_client() -> WrapperClient      – built from the current app config
    WrapperClient.chat_completions(model, messages, temperature, max_tokens, top_p=None) -> dict
    WrapperError                       – any transport, status or decoding failure

All LLM traffic in the backend goes through this module.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import requests
from flask import current_app

log = logging.getLogger(__name__)


class WrapperError(Exception):
    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class WrapperClient:
    def __init__(self, base_url: str, api_key: str = "", timeout: float = 60):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self) -> dict:
        h = {"Content-Type": "application/json"}
        if self.api_key:
            h["Authorization"] = f"Bearer {self.api_key}"
        return h

    def _post(self, path: str, payload: dict) -> dict:
        url = f"{self.base_url}{path}"
        try:
            resp = requests.post(
                url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise WrapperError(f"request to {url} failed: {exc}") from exc

        if not resp.ok:
            raise WrapperError(
                f"{url} returned {resp.status_code}: {resp.text[:300]}",
                resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise WrapperError(f"{url} returned a non-JSON body") from exc

    def chat_completions(
        self,
        model: str,
        messages: List[dict],
        temperature: float = 0.7,
        max_tokens: int = 1024,
        top_p: Optional[float] = None,
    ) -> dict:
        payload = {
            "model":       model,
            "messages":    messages,
            "temperature": temperature,
            "max_tokens":  max_tokens,
        }
        if top_p is not None:
            payload["top_p"] = top_p
        log.debug("chat_completions model=%s messages=%d", model, len(messages))
        return self._post("/chat/completions", payload)


def get_client() -> WrapperClient:
    base_url = current_app.config.get("WRAPPER_BASE_URL")
    if not base_url:
        raise WrapperError("WRAPPER_BASE_URL is not configured")
    return WrapperClient(
        base_url=base_url,
        api_key=current_app.config.get("WRAPPER_KEY", ""),
        timeout=current_app.config.get("WRAPPER_TIMEOUT", 60),
    )
