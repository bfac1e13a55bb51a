"""Tests for the phone verification API."""

from datetime import timedelta

import pytest

pytestmark = pytest.mark.integration

from phonebook.core.auth.models import VerificationAttempt
from phonebook.core.auth.verification_service import create_attempt
from phonebook.core.utils.dates import utcnow


def _request_code(client, number="070-123 45 67", **extra):
    resp = client.post("/request-verification", json={"number": number, **extra})
    assert resp.status_code == 200, resp.get_json()
    key = resp.get_json()["id"]
    attempt = VerificationAttempt.query.filter_by(key=key).one()
    return key, attempt.code


def _wrong(code: str) -> str:
    return "111111" if code != "111111" else "222222"


class TestRequestVerification:
    def test_creates_attempt_with_canonical_number(self, client):
        resp = client.post("/request-verification", json={"number": "070-123 45 67"})

        assert resp.status_code == 200
        data = resp.get_json()
        assert data["ok"] is True
        assert data["message"] == "Verification code sent"
        attempt = VerificationAttempt.query.filter_by(key=data["id"]).one()
        assert attempt.number == "+46701234567"

    def test_explicit_country_code(self, client):
        resp = client.post(
            "/request-verification",
            json={"number": "(201) 555-0123", "country_code": "us"},
        )

        assert resp.status_code == 200
        attempt = VerificationAttempt.query.filter_by(key=resp.get_json()["id"]).one()
        assert attempt.number == "+12015550123"

    def test_unparseable_number(self, client):
        resp = client.post("/request-verification", json={"number": "not a number"})

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "invalid_phone_number"

    def test_number_from_other_region(self, client):
        resp = client.post("/request-verification", json={"number": "+12015550123"})

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "invalid_phone_number_for_region"
        assert VerificationAttempt.query.count() == 0

    def test_missing_body(self, client):
        resp = client.post("/request-verification")

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "bad_request"


class TestCancelVerification:
    def test_cancel_then_missing(self, client):
        key, _ = _request_code(client)

        resp = client.post("/cancel-verification", json={"attempt_key": key})
        assert resp.status_code == 200
        assert resp.get_json()["message"] == "Verification canceled"

        resp = client.post("/cancel-verification", json={"attempt_key": key})
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "attempt_not_found"

    def test_missing_key(self, client):
        resp = client.post("/cancel-verification", json={})

        assert resp.status_code == 400


class TestVerify:
    def test_verify_issues_token_for_number(self, client):
        key, code = _request_code(client)

        resp = client.post("/verify", json={"attempt_key": key, "code": code})

        assert resp.status_code == 200
        data = resp.get_json()
        assert data["ok"] is True
        assert data["token"]

        me = client.get("/api/me", headers={"Authorization": f"Bearer {data['token']}"})
        assert me.status_code == 200
        assert me.get_json()["number"] == "+46701234567"
        assert me.get_json()["user_key"] == data["user_key"]

    def test_second_verify_is_not_found(self, client):
        key, code = _request_code(client)
        client.post("/verify", json={"attempt_key": key, "code": code})

        resp = client.post("/verify", json={"attempt_key": key, "code": code})

        assert resp.status_code == 404
        assert resp.get_json()["error"] == "attempt_not_found"

    def test_wrong_code_allows_retry(self, client):
        key, code = _request_code(client)

        resp = client.post("/verify", json={"attempt_key": key, "code": _wrong(code)})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "invalid_or_expired_code"

        resp = client.post("/verify", json={"attempt_key": key, "code": code})
        assert resp.status_code == 200

    def test_padded_code_is_rejected(self, client):
        key, code = _request_code(client)

        resp = client.post("/verify", json={"attempt_key": key, "code": f" {code}\n"})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "invalid_or_expired_code"

        resp = client.post("/verify", json={"attempt_key": key, "code": code})
        assert resp.status_code == 200

    def test_expired_code_is_rejected_and_consumed(self, app, client):
        attempt = create_attempt("+46701234567", now=utcnow() - timedelta(minutes=6))

        resp = client.post("/verify", json={"attempt_key": attempt.key, "code": attempt.code})
        assert resp.status_code == 400

        assert VerificationAttempt.query.filter_by(key=attempt.key).first() is None

    def test_same_number_logs_into_same_user(self, client):
        first_key, first_code = _request_code(client)
        first = client.post("/verify", json={"attempt_key": first_key, "code": first_code}).get_json()

        second_key, second_code = _request_code(client, number="+46701234567")
        second = client.post("/verify", json={"attempt_key": second_key, "code": second_code}).get_json()

        assert first["user_key"] == second["user_key"]

    def test_verify_reuses_identity_created_as_contact(self, client, make_user):
        existing = make_user("+46701234567")
        key, code = _request_code(client)

        resp = client.post("/verify", json={"attempt_key": key, "code": code})

        assert resp.get_json()["user_key"] == existing.key

    def test_missing_fields(self, client):
        resp = client.post("/verify", json={"attempt_key": "abc"})

        assert resp.status_code == 400
        assert resp.get_json()["error"] == "bad_request"


class TestServiceEndpoints:
    def test_ping(self, client):
        resp = client.get("/ping")

        assert resp.status_code == 200
        assert resp.get_data(as_text=True) == "pong"

    def test_health(self, client):
        assert client.get("/health").get_json() == {"ok": True}
