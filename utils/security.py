"""
Redaction helpers for anything that may echo provider credentials back to
logs or API responses (httpx error strings include the full request URL).
"""

import re


def redact_secrets_from_text(text: str) -> str:
    """
    Redact secrets from plain text using regex patterns.

    Args:
        text: String potentially containing secrets in URLs or headers

    Returns:
        String with secrets replaced with '[REDACTED]'
    """
    if not text:
        return text

    redactions = [
        (r"(api_key=)[^&\s]+", r"\1[REDACTED]"),
        (r"(key=)[^&\s]+", r"\1[REDACTED]"),
        (r"(token=)[^&\s]+", r"\1[REDACTED]"),
        (r"(x-api-key:)\s*[^\s]+", r"\1 [REDACTED]"),
        (r"(Authorization: Bearer)\s+[^\s]+", r"\1 [REDACTED]"),
    ]

    out = text
    for pattern, repl in redactions:
        out = re.sub(pattern, repl, out, flags=re.IGNORECASE)
    return out
