"""MCP tools for the BetaHub MCP Server."""

from .list_issue_tags import list_issue_tags
from .list_issues import list_issues
from .list_projects import list_projects
from .list_releases import list_releases
from .list_suggestions import list_suggestions
from .search_issues import search_issues
from .search_suggestions import search_suggestions

__all__ = [
    "list_issue_tags",
    "list_issues",
    "list_projects",
    "list_releases",
    "list_suggestions",
    "search_issues",
    "search_suggestions",
]
