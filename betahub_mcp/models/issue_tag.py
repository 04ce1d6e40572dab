# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Data models for issue tags and their two-level hierarchy."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

TagId = Union[int, str]


class IssueTag(BaseModel):
    """An issue tag. Child tags point at their parent through ``parent_tag_id``."""

    model_config = ConfigDict(extra="ignore")

    id: TagId = Field(description="Tag ID, usable in the issue tag filter")
    name: str = Field(description="Tag name")
    color: Optional[str] = Field(default=None, description="Display color, e.g. #FF0000")
    description: Optional[str] = None
    parent_tag_id: Optional[TagId] = Field(
        default=None, description="ID of the parent tag, if this is a sub-tag"
    )


class TagSection(BaseModel):
    """A top-level tag and the sub-tags declared under it."""

    parent: IssueTag
    children: list[IssueTag] = Field(default_factory=list)


class TagForest(BaseModel):
    """
    Two-level forest built from a flat parent-pointer list.

    Tags without a parent become sections. Tags whose parent is one of those
    sections are attached to it; every other tag with a parent is an orphan.
    Nesting deeper than two levels is not modeled, so a child of a child is
    also reported as an orphan.
    """

    sections: list[TagSection] = Field(default_factory=list)
    orphans: list[IssueTag] = Field(default_factory=list)

    @classmethod
    def build(cls, tags: list[IssueTag]) -> "TagForest":
        sections: list[TagSection] = []
        by_id: dict[str, TagSection] = {}
        for tag in tags:
            if tag.parent_tag_id is None:
                section = TagSection(parent=tag)
                sections.append(section)
                by_id.setdefault(str(tag.id), section)

        orphans: list[IssueTag] = []
        for tag in tags:
            if tag.parent_tag_id is None:
                continue
            section = by_id.get(str(tag.parent_tag_id))
            if section is None:
                orphans.append(tag)
            else:
                section.children.append(tag)

        return cls(sections=sections, orphans=orphans)
