# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Enumerations for BetaHub resource states and tool options."""

from enum import Enum


class TokenKind(str, Enum):
    """Kinds of credential, derived from the token prefix."""

    PERSONAL_ACCESS = "personal_access"
    PROJECT = "project"
    BEARER = "bearer"


class FeatureRequestStatus(str, Enum):
    """Feature request (suggestion) states accepted as a filter."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    DUPLICATE = "duplicate"


class SuggestionSort(str, Enum):
    """Sort orders for the feature request listing."""

    TOP = "top"
    NEW = "new"
    ALL = "all"
    MODERATION = "moderation"
    REJECTED = "rejected"
    MUTED = "muted"
    DUPLICATES = "duplicates"


class IssueStatus(str, Enum):
    """Issue (bug report) states accepted as a filter."""

    NEW = "new"
    IN_PROGRESS = "in_progress"
    NEEDS_MORE_INFO = "needs_more_info"
    RESOLVED = "resolved"
    CLOSED = "closed"
    WONT_FIX = "wont_fix"


class IssuePriority(str, Enum):
    """Issue priorities accepted as a filter."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"
