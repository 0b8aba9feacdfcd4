"""
End-to-end smoke check of the quiz API against a live server.

Requires a running Flask server with a reachable LLM endpoint
(python backend/run.py). Run from project root:
    python smoke_api.py

Registers (or logs in) two users and exercises generate, save, duplicate
save, listing, sharing and deletion.
"""

import json
import sys
import requests

BASE = "http://localhost:5000"

EMAIL    = "smoke_quiz@quizbot.local"
PASSWORD = "smoketest123"
EMAIL_B  = "smoke_quiz_b@quizbot.local"  # second user for isolation checks
TOPIC    = "Photosynthesis"


def hdr(label: str):
    print("\n" + "=" * 60)
    print(label)
    print("=" * 60)


def check(resp: requests.Response, *expected):
    if resp.status_code not in expected:
        print(f"FAIL  expected={expected}  got={resp.status_code}")
        try:
            print(json.dumps(resp.json(), indent=2))
        except ValueError:
            print(resp.text[:600])
        sys.exit(1)
    return resp


def register_or_login(email: str, password: str) -> str:
    """Return an access token, registering the user first if needed."""
    r = requests.post(f"{BASE}/api/auth/register",
                      json={"email": email, "password": password})
    if r.status_code == 201:
        return r.json()["access_token"]
    check(r, 409)
    r2 = requests.post(f"{BASE}/api/auth/login",
                       json={"email": email, "password": password})
    check(r2, 200)
    return r2.json()["access_token"]


def main():
    hdr("Acquiring access tokens")
    auth_a = {"Authorization": f"Bearer {register_or_login(EMAIL, PASSWORD)}"}
    auth_b = {"Authorization": f"Bearer {register_or_login(EMAIL_B, PASSWORD)}"}
    print("OK  tokens for user A and user B")

    hdr("Auth enforcement – unauthenticated request must fail")
    r = requests.get(f"{BASE}/api/quizzes")
    check(r, 401, 422)  # Flask-JWT returns 401 or 422 for a missing token
    print(f"OK  status={r.status_code}")

    hdr("POST /api/quizzes/generate – blank prompt returns 400")
    r = requests.post(f"{BASE}/api/quizzes/generate", json={"prompt": "   "}, headers=auth_a)
    check(r, 400)
    print(f"OK  error='{r.json().get('error')}'")

    hdr(f"POST /api/quizzes/generate – topic {TOPIC!r}")
    print("Waiting for the model (up to 120s) …")
    r = requests.post(f"{BASE}/api/quizzes/generate", json={"prompt": TOPIC},
                      headers=auth_a, timeout=120)
    check(r, 200)
    data = r.json()
    if data["status"] == "rejected":
        print(f"FAIL  model rejected {TOPIC!r}")
        sys.exit(1)
    quiz = data["quiz"]
    assert quiz["questions"], "generated quiz has no questions"
    for q in quiz["questions"]:
        assert len(q["options"]) == 4, "question without 4 options"
        assert q["answer"] in "ABCD", f"bad answer letter {q['answer']!r}"
    print(f"OK  {len(quiz['questions'])} questions on {quiz['subject']!r}")

    hdr("POST /api/quizzes – save, then save again")
    r = check(requests.post(f"{BASE}/api/quizzes", json=quiz, headers=auth_a), 201)
    quiz_id = r.json()["quiz"]["id"]
    shouty = dict(quiz, subject=f"  {quiz['subject'].upper()}  ")
    r = check(requests.post(f"{BASE}/api/quizzes", json=shouty, headers=auth_a), 200)
    assert r.json()["created"] is False, "duplicate quiz was saved twice"
    assert r.json()["quiz"]["id"] == quiz_id
    print(f"OK  quiz_id={quiz_id}, duplicate detected")

    hdr("GET /api/quizzes – isolation between users")
    ids_a = [q["id"] for q in check(requests.get(f"{BASE}/api/quizzes", headers=auth_a), 200).json()]
    ids_b = [q["id"] for q in check(requests.get(f"{BASE}/api/quizzes", headers=auth_b), 200).json()]
    assert quiz_id in ids_a and quiz_id not in ids_b, "ISOLATION FAIL"
    check(requests.get(f"{BASE}/api/quizzes/{quiz_id}", headers=auth_b), 404)
    print("OK  user B cannot see user A's quiz")

    hdr("PATCH visibility + GET /api/public/quizzes/<share_id>")
    r = check(requests.patch(f"{BASE}/api/quizzes/{quiz_id}/visibility",
                             json={"is_public": True}, headers=auth_a), 200)
    share_id = r.json()["share_id"]
    check(requests.get(f"{BASE}/api/public/quizzes/{share_id}"), 200)
    check(requests.patch(f"{BASE}/api/quizzes/{quiz_id}/visibility",
                         json={"is_public": False}, headers=auth_a), 200)
    check(requests.get(f"{BASE}/api/public/quizzes/{share_id}"), 404)
    print(f"OK  share_id={share_id} resolves only while public")

    hdr("DELETE /api/quizzes/<id>")
    check(requests.delete(f"{BASE}/api/quizzes/{quiz_id}", headers=auth_b), 404)
    check(requests.delete(f"{BASE}/api/quizzes/{quiz_id}", headers=auth_a), 200)
    check(requests.get(f"{BASE}/api/quizzes/{quiz_id}", headers=auth_a), 404)
    print("OK  deleted")

    hdr("ALL CHECKS PASSED")


if __name__ == "__main__":
    main()
