# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Envelope returned by every tool: a single text content item."""

import json
from typing import Any

from mcp.types import TextContent
from pydantic import BaseModel


class ToolResponse(BaseModel):
    """Result from an MCP tool invocation."""

    content: list[TextContent]

    @classmethod
    def from_text(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(type="text", text=text)])

    @classmethod
    def from_json(cls, payload: Any) -> "ToolResponse":
        """Serialize ``payload`` as pretty-printed JSON (two-space indent)."""
        return cls.from_text(json.dumps(payload, indent=2, ensure_ascii=False, default=str))

    @property
    def text(self) -> str:
        """Text of the single content item."""
        return self.content[0].text
