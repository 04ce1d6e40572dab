# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Input validation utilities for MCP tools.

Every tool validates its arguments here before touching the network. Error
messages name the MCP-facing (camelCase) parameter so the calling model can
correct its request.
"""

import logging
import re
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Optional

from ..errors import ValidationError

logger = logging.getLogger(__name__)


class InputValidator:
    """
    Input validator for the BetaHub MCP tools.

    All methods are classmethods that return the normalized value (or None
    for an absent optional value) and raise ``ValidationError`` otherwise.
    """

    # Project ids are slugs such as "pr-123" or plain numbers
    PROJECT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")

    # Individual ids inside a comma-separated list
    ID_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")

    # Calendar date, optionally followed by a time and a Z or +HH:MM offset.
    # Checked before fromisoformat, whose accepted forms differ across
    # Python versions.
    DATE_PATTERN = re.compile(
        r"^\d{4}-\d{2}-\d{2}"
        r"(T\d{2}:\d{2}(:\d{2}(\.\d{3}|\.\d{6})?)?([Zz]|[+-]\d{2}:\d{2})?)?$"
    )

    MAX_STRING_LENGTH = 1000

    @classmethod
    def validate_project_id(cls, project_id: Any, field_name: str = "projectId") -> str:
        """
        Validate a project id.

        Raises:
            ValidationError: If the id is missing, not a string, or malformed
        """
        if project_id is None or project_id == "":
            raise ValidationError(f"{field_name} is required", field_name)

        if isinstance(project_id, bool) or not isinstance(project_id, (str, int)):
            raise ValidationError(
                f"{field_name} must be a string, got {type(project_id).__name__}",
                field_name,
                project_id,
            )

        project_id = str(project_id).strip()
        if not cls.PROJECT_ID_PATTERN.match(project_id):
            raise ValidationError(
                f"{field_name} contains invalid characters",
                field_name,
                project_id,
            )

        return project_id

    @classmethod
    def validate_choice(
        cls,
        value: Any,
        choices: Iterable[Any],
        field_name: str,
        default: Optional[str] = None,
    ) -> Optional[str]:
        """
        Validate a value against an enumeration.

        Args:
            value: The value to validate (string or enum member)
            choices: Allowed values; an Enum class or any iterable of strings
            field_name: Name of the field (for error messages)
            default: Value returned when ``value`` is None

        Returns:
            The value as a plain string, or ``default``
        """
        if value is None:
            return default

        allowed = [c.value if isinstance(c, Enum) else c for c in choices]
        if isinstance(value, Enum):
            value = value.value

        if value not in allowed:
            raise ValidationError(
                f"{field_name} must be one of: {', '.join(allowed)}",
                field_name,
                value,
            )

        return value

    @classmethod
    def validate_integer(
        cls,
        value: Any,
        field_name: str,
        default: Optional[int] = None,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
    ) -> Optional[int]:
        """
        Validate an integer within an optional inclusive range.

        Raises:
            ValidationError: If the value is not an integer or out of range
        """
        if value is None:
            return default

        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"{field_name} must be an integer, got {type(value).__name__}",
                field_name,
                value,
            )

        if minimum is not None and value < minimum:
            raise ValidationError(
                f"{field_name} must be at least {minimum}", field_name, value
            )

        if maximum is not None and value > maximum:
            raise ValidationError(
                f"{field_name} must be at most {maximum}", field_name, value
            )

        return value

    @classmethod
    def validate_boolean(cls, value: Any, field_name: str, default: bool = False) -> bool:
        """Validate a boolean flag."""
        if value is None:
            return default

        if not isinstance(value, bool):
            raise ValidationError(
                f"{field_name} must be a boolean, got {type(value).__name__}",
                field_name,
                value,
            )

        return value

    @classmethod
    def validate_string(
        cls,
        value: Any,
        field_name: str,
        max_length: int = MAX_STRING_LENGTH,
    ) -> Optional[str]:
        """
        Validate an optional free-text string.

        Empty and whitespace-only strings count as absent.
        """
        if value is None:
            return None

        if not isinstance(value, str):
            raise ValidationError(
                f"{field_name} must be a string, got {type(value).__name__}",
                field_name,
                value,
            )

        value = value.strip()
        if not value:
            return None

        if len(value) > max_length:
            raise ValidationError(
                f"{field_name} exceeds maximum length of {max_length} characters",
                field_name,
            )

        return value

    @classmethod
    def validate_date(cls, value: Any, field_name: str) -> Optional[str]:
        """
        Validate an ISO 8601 date or datetime.

        Accepted forms are ``YYYY-MM-DD`` and ``YYYY-MM-DDTHH:MM[:SS[.fff]]``
        with an optional ``Z`` or ``+HH:MM`` offset. The original string is
        returned unchanged so it reaches the API exactly as supplied.
        """
        value = cls.validate_string(value, field_name, max_length=64)
        if value is None:
            return None

        valid = bool(cls.DATE_PATTERN.match(value))
        if valid:
            candidate = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
            try:
                datetime.fromisoformat(candidate)
            except ValueError:
                valid = False

        if not valid:
            raise ValidationError(
                f"{field_name} must be an ISO 8601 date (YYYY-MM-DD) or datetime",
                field_name,
                value,
            )

        return value

    @classmethod
    def validate_id_list(cls, value: Any, field_name: str) -> Optional[str]:
        """
        Validate a comma-separated list of ids such as ``"1,2,3"``.

        Whitespace around ids is dropped.

        Returns:
            The normalized comma-separated list, or None when absent
        """
        value = cls.validate_string(value, field_name)
        if value is None:
            return None

        ids = [part.strip() for part in value.split(",")]
        if any(not part for part in ids):
            raise ValidationError(
                f"{field_name} must be a comma-separated list of ids",
                field_name,
                value,
            )

        invalid = [part for part in ids if not cls.ID_PATTERN.match(part)]
        if invalid:
            raise ValidationError(
                f"{field_name} contains invalid ids: {', '.join(invalid)}",
                field_name,
                value,
            )

        return ",".join(ids)

    @classmethod
    def validate_search_target(
        cls, query: Optional[str], scoped_id: Optional[str]
    ) -> None:
        """
        Require exactly one of ``query`` and ``scopedId``.

        Args:
            query: Already-validated text query
            scoped_id: Already-validated scoped id
        """
        if not query and not scoped_id:
            raise ValidationError("Either query or scopedId must be provided")

        if query and scoped_id:
            raise ValidationError("Provide either query or scopedId, not both")
