# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Data model for issues (bug reports)."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .session import User


class Issue(BaseModel):
    """An issue as exposed to MCP clients."""

    model_config = ConfigDict(extra="ignore")

    id: Union[int, str] = Field(description="Issue ID")
    title: Optional[str] = Field(default=None, description="Title")
    description: Optional[str] = Field(default=None, description="Description")
    status: Optional[str] = Field(default=None, description="Workflow status")
    priority: Optional[str] = Field(default=None, description="Priority")
    score: Optional[Union[int, float]] = Field(default=None, description="Issue score")
    # Steps arrive as strings or as {"step": ...} objects
    steps_to_reproduce: Optional[list[Union[str, dict[str, Any]]]] = Field(
        default=None, description="Ordered reproduction steps"
    )
    assigned_to: Optional[Union[User, str]] = Field(default=None, description="Assignee")
    reported_by: Optional[Union[User, str]] = Field(default=None, description="Reporter")
    potential_duplicate: Optional[Any] = Field(
        default=None, description="Reference to a suspected duplicate issue"
    )
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = Field(default=None, description="Issue page URL")
