#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Checks applied to the add contact form before a contact is created."""

import re

# general purpose patterns, not country specific
PHONE_PATTERN = re.compile(
    r"(\+[0-9]+[\- \.]*)?(\([0-9]+\)[\- \.]*)?([0-9][0-9\- \.]+[0-9])"
)
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9\+\.\_\%\-\+]{1,256}"
    r"\@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)


def is_blank(value: str) -> bool:
    return not value.strip()


def is_valid_phone(phone: str) -> bool:
    return not is_blank(phone) and PHONE_PATTERN.fullmatch(phone) is not None


def is_valid_email(email: str) -> bool:
    return not is_blank(email) and EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_contact(name: str, phone: str, email: str) -> bool:
    """Returns `True` if the name is not blank and both phone and email
    match their patterns. No normalisation is applied to the values."""
    return not is_blank(name) and is_valid_phone(phone) and is_valid_email(email)
