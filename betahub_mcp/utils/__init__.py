"""Utility modules for the BetaHub MCP Server."""

from .error_mapping import raise_for_api_error
from .error_sanitization import detect_sensitive_info, log_error_safely, redact_sensitive_info
from .input_validation import InputValidator

__all__ = [
    "raise_for_api_error",
    "detect_sensitive_info",
    "log_error_safely",
    "redact_sensitive_info",
    "InputValidator",
]
