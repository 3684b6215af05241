"""
Unit tests for password hashing and access tokens
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from customer_api.config import Settings
from customer_api.core.errors import InvalidToken, MissingToken
from customer_api.core.security import (
    build_password_context,
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


@pytest.fixture
def token_settings() -> Settings:
    return Settings(jwt_secret="unit-test-secret")


class TestPasswordHashing:

    def test_hash_uses_bcrypt_cost_ten(self):
        context = build_password_context(10)
        hashed = get_password_hash(context, "p")
        assert hashed != "p"
        assert hashed.startswith("$2b$10$")

    def test_verify_accepts_matching_password(self, pwd_context):
        hashed = get_password_hash(pwd_context, "p")
        assert verify_password(pwd_context, "p", hashed)

    def test_verify_rejects_wrong_password(self, pwd_context):
        hashed = get_password_hash(pwd_context, "p")
        assert not verify_password(pwd_context, "wrong", hashed)

    def test_hashes_are_salted(self, pwd_context):
        assert get_password_hash(pwd_context, "same") != get_password_hash(pwd_context, "same")


class TestAccessTokens:

    def test_claims_round_trip(self, token_settings):
        token = create_access_token(token_settings, 7, "alice")
        claims = decode_access_token(token_settings, token)
        assert claims.user_id == 7
        assert claims.username == "alice"

    def test_expires_one_hour_after_issue(self, token_settings):
        issued = datetime.now(timezone.utc).replace(microsecond=0)
        token = create_access_token(token_settings, 1, "alice", now=issued)
        claims = decode_access_token(token_settings, token)
        assert claims.issued_at == issued
        assert claims.expires_at - claims.issued_at == timedelta(hours=1)

    def test_expired_token_is_invalid(self, token_settings):
        issued = datetime.now(timezone.utc) - timedelta(hours=1, minutes=1)
        token = create_access_token(token_settings, 1, "alice", now=issued)
        with pytest.raises(InvalidToken):
            decode_access_token(token_settings, token)

    def test_expiry_checked_against_given_clock(self, token_settings):
        issued = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)
        token = create_access_token(token_settings, 1, "alice", now=issued)

        claims = decode_access_token(token_settings, token, now=issued + timedelta(minutes=59))
        assert claims.username == "alice"

        with pytest.raises(InvalidToken):
            decode_access_token(token_settings, token, now=issued + timedelta(hours=1))
        with pytest.raises(InvalidToken):
            decode_access_token(token_settings, token, now=issued + timedelta(hours=1, seconds=1))

    def test_wrong_secret_is_invalid(self, token_settings):
        other = Settings(jwt_secret="another-secret")
        token = create_access_token(other, 1, "alice")
        with pytest.raises(InvalidToken):
            decode_access_token(token_settings, token)

    def test_garbage_is_invalid(self, token_settings):
        with pytest.raises(InvalidToken):
            decode_access_token(token_settings, "not-a-jwt")

    def test_token_without_identity_is_invalid(self, token_settings):
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            token_settings.jwt_secret,
            algorithm="HS256",
        )
        with pytest.raises(InvalidToken):
            decode_access_token(token_settings, token)

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token(self, token_settings, token):
        with pytest.raises(MissingToken):
            decode_access_token(token_settings, token)

    def test_missing_and_invalid_map_to_different_statuses(self):
        assert MissingToken().status_code == 401
        assert InvalidToken().status_code == 403
