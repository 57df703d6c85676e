"""JSON output formatter for CLI."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any

from vnscript.cli.formatters.base import OutputFormat, OutputFormatter


class JsonFormatter(OutputFormatter[Any]):
    """Generic JSON formatter for CLI output."""

    def format(self, data: Any, format_type: OutputFormat = OutputFormat.JSON) -> str:  # noqa: ARG002
        """Format data as JSON.

        Args:
            data: Data to format
            format_type: Output format type (ignored, always JSON)

        Returns:
            JSON string
        """
        return self._dumps(self._to_jsonable(data))

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Format an error response."""
        error_msg = str(error) if isinstance(error, Exception) else error
        return self._dumps({"success": False, "error": error_msg, "code": code})

    def _to_jsonable(self, data: Any) -> Any:
        if hasattr(data, "to_dict"):
            return data.to_dict()
        if hasattr(data, "model_dump"):
            return data.model_dump()
        if is_dataclass(data) and not isinstance(data, type):
            return asdict(data)
        if isinstance(data, list | tuple):
            return [self._to_jsonable(item) for item in data]
        return data

    def _dumps(self, data: Any) -> str:
        return json.dumps(data, default=str, ensure_ascii=False, indent=2)
