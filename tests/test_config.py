"""
tests.test_config

`AdminConfig` hashing and verification.
"""

from __future__ import annotations

import pytest

from relay_admin.auth.config import MAX_SECRET_BYTES, AdminConfig
from relay_admin.auth.errors import AuthError, AuthErrorKind
from relay_admin.auth.header import XApiToken

SECRETS = ["s3cr3t", "correct horse battery staple", "x", "pässüord"]


@pytest.mark.parametrize("secret", SECRETS)
def test_build_then_verify_same_secret(secret: str) -> None:
    cfg = AdminConfig.build(secret, rounds=4)
    assert cfg.verify(XApiToken(secret)) is True


@pytest.mark.parametrize("secret", SECRETS)
def test_verify_other_secret_is_false_not_error(secret: str) -> None:
    cfg = AdminConfig.build(secret, rounds=4)
    assert cfg.verify(XApiToken(secret + "!")) is False
    assert cfg.verify(XApiToken("wrong")) is False


def test_build_never_keeps_plaintext() -> None:
    cfg = AdminConfig.build("s3cr3t", rounds=4)
    assert "s3cr3t" not in cfg.hashed_api_token
    assert cfg.hashed_api_token.startswith("$2")
    assert "s3cr3t" not in repr(cfg)


def test_build_uses_fresh_salt() -> None:
    a = AdminConfig.build("s3cr3t", rounds=4)
    b = AdminConfig.build("s3cr3t", rounds=4)
    assert a.hashed_api_token != b.hashed_api_token


def test_build_default_cost_is_twelve() -> None:
    cfg = AdminConfig.build("s3cr3t")
    assert cfg.hashed_api_token.split("$")[2] == "12"


def test_build_failure_is_hash_error() -> None:
    with pytest.raises(AuthError) as info:
        AdminConfig.build("a" * (MAX_SECRET_BYTES + 1), rounds=4)
    assert info.value.kind is AuthErrorKind.HASH
    assert isinstance(info.value.__cause__, ValueError)


def test_overlong_presented_token_is_mismatch() -> None:
    cfg = AdminConfig.build("a" * MAX_SECRET_BYTES, rounds=4)
    assert cfg.verify(XApiToken("a" * (MAX_SECRET_BYTES + 1))) is False


def test_corrupt_hash_is_verify_error() -> None:
    cfg = AdminConfig(hashed_api_token="not-a-bcrypt-hash")
    with pytest.raises(AuthError) as info:
        cfg.verify(XApiToken("s3cr3t"))
    assert info.value.kind is AuthErrorKind.VERIFY
