# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Data model for feature requests (suggestions)."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .session import User


class FeatureRequest(BaseModel):
    """A feature request as exposed to MCP clients.

    ``status`` is kept as the upstream string: the filter enumeration lives in
    ``FeatureRequestStatus``, but the service may report states outside it.
    """

    model_config = ConfigDict(extra="ignore")

    id: Union[int, str] = Field(description="Feature request ID")
    title: Optional[str] = Field(default=None, description="Title")
    description: Optional[str] = Field(default=None, description="Description")
    status: Optional[str] = Field(default=None, description="Workflow status")
    votes: Optional[int] = Field(default=None, description="Vote count")
    voted: Optional[bool] = Field(default=None, description="Whether the token owner voted")
    is_duplicate: Optional[bool] = Field(default=None, description="Marked as a duplicate")
    duplicates_count: Optional[int] = Field(default=None, description="Number of duplicates")
    user: Optional[User] = Field(default=None, description="Author")
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = Field(default=None, description="Feature request page URL")
