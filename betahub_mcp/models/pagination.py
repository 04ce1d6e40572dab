# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Pagination block attached to every paginated list response."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class Pagination(BaseModel):
    """Page position of a list response."""

    current_page: int = Field(ge=1, description="Current page number")
    total_pages: int = Field(ge=1, description="Total number of pages")
    total_count: int = Field(ge=0, description="Total number of items across all pages")
    per_page: int = Field(ge=1, description="Page size")

    @classmethod
    def resolve(
        cls,
        upstream: Optional[dict[str, Any]],
        item_count: int,
        per_page: int,
    ) -> "Pagination":
        """
        Build a pagination block, falling back to defaults for missing values.

        Missing or zero upstream values fall back to page 1, one total page,
        ``item_count`` items and the requested page size.

        Args:
            upstream: The ``pagination`` object from the API response, if any
            item_count: Number of items in the returned list
            per_page: Requested (or service default) page size
        """
        upstream = upstream if isinstance(upstream, dict) else {}
        return cls(
            current_page=upstream.get("current_page") or 1,
            total_pages=upstream.get("total_pages") or 1,
            total_count=upstream.get("total_count") or item_count,
            per_page=upstream.get("per_page") or per_page,
        )
