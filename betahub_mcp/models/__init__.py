"""Data models for the BetaHub MCP Server."""

from .enums import (
    FeatureRequestStatus,
    IssuePriority,
    IssueStatus,
    SuggestionSort,
    TokenKind,
)
from .session import Session, TokenInfo, TokenProject, User, token_kind_for
from .pagination import Pagination
from .project import Project
from .feature_request import FeatureRequest
from .issue import Issue
from .issue_tag import IssueTag, TagForest, TagSection
from .release import Release
from .search import (
    FullSearchResult,
    ScopedIdSearchResult,
    SearchResult,
    TitleSearchResult,
    parse_search_response,
)
from .tool_response import ToolResponse

__all__ = [
    "FeatureRequestStatus",
    "IssuePriority",
    "IssueStatus",
    "SuggestionSort",
    "TokenKind",
    "Session",
    "TokenInfo",
    "TokenProject",
    "User",
    "token_kind_for",
    "Pagination",
    "Project",
    "FeatureRequest",
    "Issue",
    "IssueTag",
    "TagForest",
    "TagSection",
    "Release",
    "FullSearchResult",
    "ScopedIdSearchResult",
    "SearchResult",
    "TitleSearchResult",
    "parse_search_response",
    "ToolResponse",
]
