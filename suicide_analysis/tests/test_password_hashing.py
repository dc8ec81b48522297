from __future__ import annotations

from suicide_analysis.application.services.password_hashing import BcryptPasswordHasher


def test_default_cost_factor_is_ten() -> None:
    hashed = BcryptPasswordHasher().hash("secret1")

    assert hashed.startswith("$2b$10$")
    assert hashed != "secret1"


def test_hash_is_salted_per_call() -> None:
    hasher = BcryptPasswordHasher(rounds=4)

    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert hasher.verify("secret1", first)
    assert hasher.verify("secret1", second)


def test_verify_rejects_wrong_password() -> None:
    hasher = BcryptPasswordHasher(rounds=4)

    assert not hasher.verify("wrong", hasher.hash("secret1"))


def test_verify_malformed_hash_returns_false() -> None:
    hasher = BcryptPasswordHasher(rounds=4)

    assert hasher.verify("secret1", "not-a-bcrypt-hash") is False
