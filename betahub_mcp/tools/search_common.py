# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Argument handling shared by the feature request and issue search tools."""

from typing import Any
from urllib.parse import urlencode

from ..utils.input_validation import InputValidator


class SearchArguments:
    """Validated search arguments and the query string they produce."""

    def __init__(
        self,
        project_id: Any,
        query: Any = None,
        scoped_id: Any = None,
        skip_ids: Any = None,
        partial: Any = None,
    ):
        self.project_id = InputValidator.validate_project_id(project_id)
        self.query = InputValidator.validate_string(query, "query")
        self.scoped_id = InputValidator.validate_string(scoped_id, "scopedId", max_length=100)
        InputValidator.validate_search_target(self.query, self.scoped_id)
        self.skip_ids = InputValidator.validate_id_list(skip_ids, "skipIds")
        self.partial = InputValidator.validate_boolean(partial, "partial")

    def query_string(self) -> str:
        """Encode the non-empty arguments as query, scoped_id, skip_ids, partial."""
        params: dict[str, str] = {}
        if self.query:
            params["query"] = self.query
        if self.scoped_id:
            params["scoped_id"] = self.scoped_id
        if self.skip_ids:
            params["skip_ids"] = self.skip_ids
        if self.partial:
            params["partial"] = "true"
        return urlencode(params)

    def endpoint(self, path: str) -> str:
        query_string = self.query_string()
        return f"{path}?{query_string}" if query_string else path
