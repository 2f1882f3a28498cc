"""Stock validators for text prompts.

A validator takes the current input and raises ``ValueError`` with a
user-facing message when the input is not acceptable.
"""

from __future__ import annotations

import re
from email.utils import parseaddr
from typing import Callable
from urllib.parse import urlparse

Validator = Callable[[str], None]


def required(message: str = "This field is required") -> Validator:
    def _validate(value: str) -> None:
        if not value.strip():
            raise ValueError(message)

    return _validate


def regex(pattern: str, message: str = "") -> Validator:
    compiled = re.compile(pattern)

    def _validate(value: str) -> None:
        if not compiled.search(value):
            raise ValueError(message or f"Input must match: {pattern}")

    return _validate


def email(message: str = "Please enter a valid email address") -> Validator:
    def _validate(value: str) -> None:
        _name, address = parseaddr(value)
        if not address or address != value.strip():
            raise ValueError(message)
        local, sep, domain = address.partition("@")
        if not sep or not local or "@" in domain or "." not in domain:
            raise ValueError(message)

    return _validate


def url(message: str = "Please enter a valid URL") -> Validator:
    def _validate(value: str) -> None:
        if not value or " " in value:
            raise ValueError(message)
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(message)

    return _validate


def min_length(length: int) -> Validator:
    def _validate(value: str) -> None:
        if len(value) < length:
            raise ValueError(f"Input must be at least {length} characters")

    return _validate


def max_length(length: int) -> Validator:
    def _validate(value: str) -> None:
        if len(value) > length:
            raise ValueError(f"Input must be at most {length} characters")

    return _validate


def length_between(minimum: int, maximum: int) -> Validator:
    def _validate(value: str) -> None:
        if not minimum <= len(value) <= maximum:
            raise ValueError(f"Input must be between {minimum} and {maximum} characters")

    return _validate


def chain(*validators: Validator) -> Validator:
    """Run ``validators`` in order; the first complaint wins."""

    def _validate(value: str) -> None:
        for validator in validators:
            validator(value)

    return _validate
