# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Data model for project releases."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Release(BaseModel):
    """A published (or dynamically created) release of a project."""

    model_config = ConfigDict(extra="ignore")

    id: Union[int, str] = Field(description="Release ID")
    project_id: Optional[Union[int, str]] = None
    label: Optional[str] = Field(default=None, description="Version label, e.g. v1.2.0")
    summary: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    download_link: Optional[str] = Field(default=None, description="Build download URL")
    dynamically_created: Optional[bool] = Field(
        default=None,
        description="True when the release was synthesized rather than explicitly published",
    )
    url: Optional[str] = Field(default=None, description="Release detail page URL")
