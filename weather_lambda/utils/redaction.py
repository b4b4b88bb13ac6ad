"""Sensitive data redaction for log output."""

import re

# Sensitive parameters to redact from URLs
SENSITIVE_PARAMS = [
    "apikey",
    "api_key",
    "key",
    "token",
    "password",
    "secret",
    "access_token",
    "authorization",
]


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    redacted = url
    for param in SENSITIVE_PARAMS:
        pattern = rf"\b{param}=([^&\s\"]+)"
        redacted = re.sub(pattern, f"{param}=***REDACTED***", redacted, flags=re.IGNORECASE)
    return redacted
