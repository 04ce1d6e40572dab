# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Result shapes of the feature request and issue search endpoints.

The search endpoints answer with one of three shapes depending on the
request: a bare list of titles, an object carrying a list of full entities,
or a single entity when looking up by scoped ID. The shape is resolved once,
in ``parse_search_response``, into a tagged union keyed by ``type``.
"""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from .feature_request import FeatureRequest
from .issue import Issue

SearchEntity = Union[FeatureRequest, Issue]


def _drop_none(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


class TitleSearchResult(BaseModel):
    """Plain text search: the service returned matching titles only."""

    type: Literal["title_search"] = "title_search"
    titles: list[Any] = Field(default_factory=list)
    query: Optional[str] = None
    partial: bool = False

    def to_dict(self, list_key: str, item_key: str, project_id: str) -> dict[str, Any]:
        return _drop_none(
            {
                "titles": self.titles,
                "type": self.type,
                "project_id": project_id,
                "query": self.query,
                "partial": self.partial,
            }
        )


class FullSearchResult(BaseModel):
    """Text search returning full entities."""

    type: Literal["full_search"] = "full_search"
    items: list[Any] = Field(default_factory=list)
    has_more: bool = False
    query: Optional[str] = None
    partial: bool = False

    def to_dict(self, list_key: str, item_key: str, project_id: str) -> dict[str, Any]:
        return _drop_none(
            {
                list_key: self.items,
                "has_more": self.has_more,
                "type": self.type,
                "project_id": project_id,
                "query": self.query,
                "partial": self.partial,
            }
        )


class ScopedIdSearchResult(BaseModel):
    """Lookup of a single entity by its scoped ID."""

    type: Literal["scoped_id_search"] = "scoped_id_search"
    item: dict[str, Any]
    scoped_id: Optional[str] = None

    def to_dict(self, list_key: str, item_key: str, project_id: str) -> dict[str, Any]:
        return _drop_none(
            {
                item_key: self.item,
                "type": self.type,
                "project_id": project_id,
                "scoped_id": self.scoped_id,
            }
        )


SearchResult = Union[TitleSearchResult, FullSearchResult, ScopedIdSearchResult]


def _reshape(entity_model: type[SearchEntity], raw: Any) -> Any:
    if not isinstance(raw, dict):
        return raw
    return entity_model.model_validate(raw).model_dump(mode="json", exclude_unset=True)


def parse_search_response(
    response: Any,
    list_key: str,
    entity_model: type[SearchEntity],
    query: Optional[str] = None,
    scoped_id: Optional[str] = None,
    partial: bool = False,
) -> SearchResult:
    """
    Discriminate a raw search response into one of the three result shapes.

    Args:
        response: Decoded JSON body of the search endpoint
        list_key: Key holding the entity list in full results
            (``feature_requests`` or ``issues``)
        entity_model: Model used as the field allow-list for entities
        query: The text query that was sent, if any
        scoped_id: The scoped ID that was looked up, if any
        partial: Whether partial (autocomplete) mode was requested

    Returns:
        TitleSearchResult, FullSearchResult or ScopedIdSearchResult
    """
    if isinstance(response, list):
        return TitleSearchResult(titles=response, query=query, partial=partial)

    if isinstance(response, dict) and list_key in response:
        items = response.get(list_key) or []
        return FullSearchResult(
            items=[_reshape(entity_model, item) for item in items],
            has_more=bool(response.get("has_more", False)),
            query=query,
            partial=partial,
        )

    return ScopedIdSearchResult(
        item=_reshape(entity_model, response) if isinstance(response, dict) else {},
        scoped_id=scoped_id,
    )
