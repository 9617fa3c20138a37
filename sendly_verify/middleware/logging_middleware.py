"""Logging helpers with sensitive data redaction."""

import re

# Sensitive parameters to redact from URLs
SENSITIVE_PARAMS = [
    "api_key",
    "apikey",
    "token",
    "password",
    "secret",
    "key",
    "access_token",
    "authorization",
    "bearer",
]

_DIGITS = re.compile(r"\d")


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    redacted = url
    for param in SENSITIVE_PARAMS:
        pattern = rf"\b{param}=([^&\s\"]+)"
        redacted = re.sub(pattern, f"{param}=***REDACTED***", redacted, flags=re.IGNORECASE)
    return redacted


def mask_phone(phone: str) -> str:
    """Mask all but the last four digits of a phone number."""
    total = len(_DIGITS.findall(phone))
    if total <= 4:
        return "*" * len(phone)

    seen = 0
    masked = []
    for char in phone:
        if char.isdigit():
            seen += 1
            masked.append(char if seen > total - 4 else "*")
        else:
            masked.append(char)
    return "".join(masked)
