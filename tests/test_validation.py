from __future__ import annotations

import pytest

from webhelpers.core.validation import is_valid_email, is_valid_url
from webhelpers import text


@pytest.mark.parametrize(
    "email",
    ["john.doe+tag@example.com", "a_b-c@sub.domain.org", "a@b"],
)
def test_is_valid_email_accepts(email: str):
    assert is_valid_email(email)


@pytest.mark.parametrize(
    "email",
    ["no-at-sign", "a b@c.com", "user@exa mple.com", "@example.com", "user@", "a@b.com\n", ""],
)
def test_is_valid_email_rejects(email: str):
    assert not is_valid_email(email)


@pytest.mark.parametrize(
    "value",
    ["user@example.com", "first.last@sub.example.org", "USER@EXAMPLE.COM"],
)
def test_is_valid_url_accepts_mailbox_shaped_values(value: str):
    assert is_valid_url(value)


@pytest.mark.parametrize(
    "value",
    [
        "https://example.com",
        "example.com",
        "a@b.c",
        "user@example",
        "user@-bad.com",
        "user@example.com\n",
        "user@example.\u017f\u017f",
        "user@example.\u212a\u212a",
    ],
)
def test_is_valid_url_rejects(value: str):
    assert not is_valid_url(value)


def test_text_module_reexports_validators():
    assert text.is_valid_email is is_valid_email
    assert text.is_valid_url is is_valid_url
