# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Data model for BetaHub projects."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Project(BaseModel):
    """A BetaHub project visible to the authenticated token."""

    model_config = ConfigDict(extra="ignore")

    id: Union[int, str] = Field(description="Project ID (e.g. pr-123)")
    name: Optional[str] = Field(default=None, description="Project name")
    description: Optional[str] = Field(default=None, description="Project description")
    url: Optional[str] = Field(default=None, description="Project page URL")
    member_count: Optional[int] = Field(default=0, ge=0, description="Number of project members")
    created_at: Optional[str] = Field(default=None, description="Creation timestamp")
    updated_at: Optional[str] = Field(default=None, description="Last update timestamp")
