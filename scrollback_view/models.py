"""
Scrollback Data Models

Pydantic models for log lines and plain row descriptors handed to renderers.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LineType(str, Enum):
    """Semantic category of a log line."""

    PLAIN = "plain"
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    DIM = "dim"


class LogLine(BaseModel):
    """
    One emitted line of output.

    Known ``type`` values are coerced to ``LineType``. Anything else, including
    null or non-string values, is kept as a string so the renderer can fall
    back to the default look instead of rejecting the line. A missing type
    means ``plain``; an explicit null becomes the empty string.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    type: Union[LineType, str] = Field(default=LineType.PLAIN, union_mode="left_to_right")
    timestamp: Optional[float] = None  # Unix timestamp, never rendered

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> Union[LineType, str]:
        if isinstance(value, LineType):
            return value
        if value is None:
            return ""
        try:
            return LineType(value)
        except (ValueError, TypeError):
            return str(value)

    @classmethod
    def plain(cls, text: str) -> "LogLine":
        return cls(text=text, type=LineType.PLAIN)

    @classmethod
    def success(cls, text: str) -> "LogLine":
        return cls(text=text, type=LineType.SUCCESS)

    @classmethod
    def error(cls, text: str) -> "LogLine":
        return cls(text=text, type=LineType.ERROR)

    @classmethod
    def info(cls, text: str) -> "LogLine":
        return cls(text=text, type=LineType.INFO)

    @classmethod
    def dim(cls, text: str) -> "LogLine":
        return cls(text=text, type=LineType.DIM)


@dataclass(frozen=True)
class Row:
    """
    Renderable row descriptor.

    Attributes:
        glyph: Leading glyph including its trailing space ("" for none)
        color: Color name understood by the backend, or None for default
        dim: Whether the row is rendered with reduced emphasis
        text: Row content
    """

    glyph: str
    color: Optional[str]
    dim: bool
    text: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize row for JSON output."""
        return asdict(self)
