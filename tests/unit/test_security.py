"""Tests for operator password hashing and session signing keys."""

import logging

from lutorlandia.api.app import session_signing_key
from lutorlandia.config import Settings
from lutorlandia.security import hash_password, verify_password


def test_hash_verifies_original_password():
    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert hashed.startswith("$2")
    assert verify_password("correct horse", hashed)


def test_wrong_password_fails():
    assert not verify_password("wrong", hash_password("correct horse"))


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_malformed_hash_is_a_mismatch():
    # Plaintext left over from an unhashed legacy row
    assert verify_password("lutorlandia", "lutorlandia") is False


def test_unset_session_secret_gets_random_key(caplog):
    settings = Settings(_env_file=None)
    assert settings.session_secret is None

    with caplog.at_level(logging.WARNING, logger="lutorlandia.api.app"):
        first = session_signing_key(settings)
    second = session_signing_key(settings)

    assert first != second
    assert len(first) >= 32
    assert "session_secret not set" in caplog.text


def test_configured_session_secret_is_used():
    settings = Settings(_env_file=None, session_secret="an-operator-secret")
    assert session_signing_key(settings) == "an-operator-secret"
