import pytest

from tasklist.security import PasswordHasher


def test_hash_then_verify(hasher):
    stored = hasher.hash_password("correct-horse")
    assert hasher.verify("correct-horse", stored)


def test_wrong_password_does_not_verify(hasher):
    stored = hasher.hash_password("correct-horse")
    assert not hasher.verify("battery-staple", stored)
    assert not hasher.verify("", stored)


def test_same_plaintext_gets_fresh_salt(hasher):
    first = hasher.hash_password("correct-horse")
    second = hasher.hash_password("correct-horse")
    assert first != second
    assert hasher.verify("correct-horse", first)
    assert hasher.verify("correct-horse", second)


def test_hash_is_not_plaintext(hasher):
    stored = hasher.hash_password("correct-horse")
    assert "correct-horse" not in stored
    assert stored.startswith("$2b$04$")


@pytest.mark.parametrize(
    "stored",
    [
        "",
        "not-a-hash",
        "$2b$04$tooshort",
        "$2b$04$" + "!" * 53,
        "plaintext-password-stored-by-mistake-and-padded-to-sixty-chars",
        "$2b$04$ünicode" + "a" * 46,
        None,
    ],
)
def test_malformed_hash_is_a_failed_verification(hasher, stored):
    assert hasher.verify("anything", stored) is False


def test_long_passwords_verify(hasher):
    password = "p" * 100
    stored = hasher.hash_password(password)
    assert hasher.verify(password, stored)


def test_unicode_password(hasher):
    stored = hasher.hash_password("pässwörd-✓")
    assert hasher.verify("pässwörd-✓", stored)
    assert not hasher.verify("passwort-✓", stored)


@pytest.mark.parametrize("rounds", [3, 32])
def test_rounds_out_of_range(rounds):
    with pytest.raises(ValueError):
        PasswordHasher(rounds=rounds)


def test_rounds_are_embedded_in_hash():
    stored = PasswordHasher(rounds=5).hash_password("x")
    assert stored.startswith("$2b$05$")
    # any hasher can verify, the cost travels with the hash
    assert PasswordHasher(rounds=4).verify("x", stored)


def test_dummy_hash_is_cached(hasher):
    assert hasher.dummy_hash is hasher.dummy_hash
    assert hasher.dummy_hash.startswith("$2b$04$")
