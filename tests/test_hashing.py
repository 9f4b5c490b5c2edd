"""Tests for password hashing."""

import pytest

from feedhub.exceptions import MalformedCredentialError


def test_hash_is_salted(hasher):
    """Test hashing the same password twice gives different hashes."""
    first = hasher.hash("correct horse")
    second = hasher.hash("correct horse")

    assert first != second
    assert hasher.verify("correct horse", first)
    assert hasher.verify("correct horse", second)


def test_verify_wrong_password(hasher):
    """Test a wrong password does not verify."""
    hashed = hasher.hash("correct horse")
    assert hasher.verify("battery staple", hashed) is False


@pytest.mark.parametrize("password", ["", None, 12345])
def test_hash_rejects_malformed_password(hasher, password):
    """Test non-string or empty passwords raise a domain error."""
    with pytest.raises(MalformedCredentialError):
        hasher.hash(password)


@pytest.mark.parametrize("hashed", ["", "not-a-hash", "$2b$04$short"])
def test_verify_rejects_malformed_hash(hasher, hashed):
    """Test stored hashes that cannot be parsed raise a domain error."""
    with pytest.raises(MalformedCredentialError):
        hasher.verify("correct horse", hashed)
