"""Tests for password generation and validation."""

import secrets

import pytest
from pydantic import ValidationError

from credkit.config import PasswordPolicy
from credkit.errors import InvalidConfigError, RngUnavailableError
from credkit.password import (
    ALPHABET,
    ALPHABET_SIZE,
    FIRST_DIGIT,
    FIRST_LETTER,
    PUNCTUATION,
    gen_password,
    valid_password,
)


def test_alphabet_partition():
    assert ALPHABET_SIZE == 80
    assert len(set(ALPHABET)) == 80
    assert FIRST_LETTER == 18
    assert FIRST_DIGIT == 70
    assert ALPHABET[:18] == PUNCTUATION
    assert ALPHABET[18] == "A"
    assert ALPHABET[43] == "Z"
    assert ALPHABET[44] == "a"
    assert ALPHABET[69] == "z"
    assert ALPHABET[70:] == "0123456789"
    assert all(not c.isalnum() and c.isprintable() for c in PUNCTUATION)


def test_default_length():
    assert len(gen_password()) == 12


def test_default_length_from_settings(monkeypatch):
    from credkit.settings import settings

    monkeypatch.setattr(settings, "PASS_LENGTH", 8)
    assert len(gen_password()) == 8
    monkeypatch.setattr(settings, "PASS_LENGTH", 16)
    assert len(gen_password()) == 16


def test_length_from_policy():
    assert len(gen_password(policy=PasswordPolicy(length=20))) == 20


@pytest.mark.parametrize("length", range(2, 65))
def test_generated_passwords_are_valid(length):
    password = gen_password(length)
    assert len(password) == length
    assert all(c in ALPHABET for c in password)
    assert valid_password(password)
    assert any(c in PUNCTUATION for c in password)
    assert any(c.isdigit() for c in password)


def test_generated_passwords_differ():
    passwords = {gen_password(16) for _ in range(50)}
    assert len(passwords) == 50


@pytest.mark.parametrize("length", [1, 0, -3])
def test_too_short_length_rejected(length):
    with pytest.raises(InvalidConfigError):
        gen_password(length)


def test_policy_rejects_short_length():
    with pytest.raises(ValidationError):
        PasswordPolicy(length=1)


def test_rejection_sampling_retries(monkeypatch):
    # first draw has no digit, second has no punctuation, third is good
    draws = iter([[0, 20, 30], [20, 30, 75], [0, 20, 75]])
    values = []

    def fake_randbelow(n):
        assert n == 80
        if not values:
            values.extend(next(draws))
        return values.pop(0)

    monkeypatch.setattr(secrets, "randbelow", fake_randbelow)
    assert gen_password(3) == "!C5"


def test_rng_failure_propagates(monkeypatch):
    def broken_randbelow(n):
        raise OSError("no entropy")

    monkeypatch.setattr(secrets, "randbelow", broken_randbelow)
    with pytest.raises(RngUnavailableError) as excinfo:
        gen_password(12)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_valid_password_has_a_digit_and_a_symbol():
    for password in ["hfjkshf6hj#", "8auyk kjkjh", "ty3uhi@ksd"]:
        assert valid_password(password) is True


def test_invalid_password_has_no_digit_or_symbol():
    for password in ["hfjkshfhj", "auykkjkjh", "tyuhiksd"]:
        assert valid_password(password) is False


def test_invalid_password_has_no_digit():
    for password in ["hf:jksh#fhj", "au$ykkjkjh", "(tyu)hiksd"]:
        assert valid_password(password) is False


def test_invalid_password_has_no_symbol():
    for password in ["h8fjkshfhj", "auykk2jkj1h", "0tyuhi67ksd"]:
        assert valid_password(password) is False


def test_empty_password_is_invalid():
    assert valid_password("") is False


def test_password_minimum_length():
    assert valid_password("4ghY&j2", PasswordPolicy(min_length=6)) is True
    assert valid_password("4ghY&j2", PasswordPolicy(min_length=8)) is False


def test_password_minimum_length_from_settings(monkeypatch):
    from credkit.settings import settings

    monkeypatch.setattr(settings, "PASS_MIN_LENGTH", 8)
    assert valid_password("4ghY&j2") is False
    assert valid_password("4ghY&j2x") is True
