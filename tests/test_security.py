# /tests/test_security.py

from campus_admin.core.security import PasswordHasher


def test_hash_is_salted_and_verifies():
    hasher = PasswordHasher()
    first, second = hasher.hash("pa55word"), hasher.hash("pa55word")

    assert first != second
    assert hasher.verify("pa55word", first)
    assert not hasher.verify("wrong", first)


def test_verify_treats_unrecognised_hash_as_mismatch():
    assert PasswordHasher().verify("pa55word", "plaintext-that-was-never-hashed") is False

