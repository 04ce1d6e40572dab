# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Error message sanitization utility for the MCP server.

Tool failures are logged before they are handed back to the MCP host. This
module strips credentials (BetaHub tokens, bearer headers, JWTs) from those
messages so they never end up in log files.
"""

import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Patterns for detecting sensitive information in error messages
SENSITIVE_PATTERNS = {
    "betahub_token": [
        r"\bpat-[A-Za-z0-9_\-]+",  # Personal access token
        r"\btkn-[A-Za-z0-9_\-]+",  # Project auth token
    ],
    "bearer": [
        r"(?i)bearer\s+[A-Za-z0-9_\-.=+/]+",
    ],
    "jwt": [
        r"\beyJ[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]*",
    ],
    "credentials": [
        r"(?i)(?:--)?token['\"]?\s*[:=]\s*['\"]?[^\s'\"&]+",
        r"(?i)authorization['\"]?\s*[:=]\s*['\"]?[^\s'\"]+",
    ],
}

# Compile patterns for performance
COMPILED_PATTERNS = {
    category: [re.compile(pattern) for pattern in patterns]
    for category, patterns in SENSITIVE_PATTERNS.items()
}


def detect_sensitive_info(text: str) -> dict[str, list[str]]:
    """
    Detect sensitive information in text.

    Args:
        text: Text to scan for sensitive information

    Returns:
        Dictionary mapping sensitivity categories to the matched strings
    """
    if not text:
        return {}

    found: dict[str, list[str]] = {}

    for category, patterns in COMPILED_PATTERNS.items():
        matches = [match.group(0) for pattern in patterns for match in pattern.finditer(text)]
        if matches:
            found[category] = matches

    return found


def redact_sensitive_info(text: str, replacement: str = "[REDACTED]") -> str:
    """
    Redact sensitive information from text.

    Args:
        text: Text to redact
        replacement: String to use for redacted content

    Returns:
        Text with sensitive information redacted
    """
    if not text:
        return text

    result = text

    for patterns in COMPILED_PATTERNS.values():
        for pattern in patterns:
            result = pattern.sub(replacement, result)

    return result


def log_error_safely(
    error: BaseException,
    context: Optional[dict[str, Any]] = None,
    logger_instance: Optional[logging.Logger] = None,
) -> str:
    """
    Log an error with credentials redacted.

    Args:
        error: Exception to log
        context: Additional context rendered as ``key=value`` pairs
        logger_instance: Logger to use (defaults to module logger)

    Returns:
        The redacted message that was logged
    """
    if logger_instance is None:
        logger_instance = logger

    safe_message = redact_sensitive_info(str(error))
    details = " ".join(f"{key}={value}" for key, value in (context or {}).items())
    prefix = f"[{details}] " if details else ""

    logger_instance.error(f"{prefix}{type(error).__name__}: {safe_message}")
    return safe_message
