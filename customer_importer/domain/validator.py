"""
Basic syntactic email validation.

Only the shape `local@domain` is checked: exactly one `@`, with non-empty text
on both sides. No RFC 5322 conformance, no normalization.
"""

from __future__ import annotations

from customer_importer.domain.errors import InvalidEmailError


def is_valid_email(email: str) -> bool:
    """Return True if `email` has exactly one `@` and non-empty parts around it."""
    local, sep, domain = email.partition("@")
    if not sep:
        return False
    return bool(local) and bool(domain) and "@" not in domain


def extract_domain(email: str) -> str:
    """Return the domain part of a valid email, raising InvalidEmailError otherwise."""
    if not is_valid_email(email):
        raise InvalidEmailError(email)
    return email.partition("@")[2]


__all__ = ["is_valid_email", "extract_domain"]
