"""Caller-supplied query options."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import OPTION_ALIASES
from ..utils.coerce import to_natural_number
from .row import Row
from .target import RenderTarget


class SheetQueryOptions(BaseModel):
    """Options for one query call.

    Unknown keys are ignored. `chunk_size` and `headers` never fail
    validation: negative or unparseable values become 0.
    """

    url: str = ""
    query: str = ""
    target: Any = None
    chunk_size: int = 0
    labels: list[str] = Field(default_factory=list)
    row_template: Callable[[Row], str] | None = None
    callback: Callable[..., Any] | None = None
    headers: int = 0
    reset: bool = False

    model_config = ConfigDict(frozen=True, extra="ignore", arbitrary_types_allowed=True)

    @field_validator("url", "query", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("chunk_size", "headers", mode="before")
    @classmethod
    def _natural_number(cls, v: Any) -> int:
        return to_natural_number(v)

    @field_validator("labels", mode="before")
    @classmethod
    def _labels_as_strings(cls, v: Any) -> list[str]:
        if not v:
            return []
        return [str(label) for label in v]

    @field_validator("target")
    @classmethod
    def _render_target(cls, v: Any) -> Any:
        if v is not None and not isinstance(v, RenderTarget):
            raise ValueError("target must provide is_table and append_html()")
        return v

    @field_validator("reset", mode="before")
    @classmethod
    def _truthy(cls, v: Any) -> bool:
        return bool(v)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None, **overrides: Any) -> SheetQueryOptions:
        """Build options from a loose mapping, resolving legacy names.

        Within one mapping, canonical names win over their aliases (`sql`,
        `resetStatus`, `rowHandler`, camelCase spellings). Keyword overrides
        win over the mapping.
        """
        merged = {**resolve_aliases(options or {}), **resolve_aliases(overrides)}
        return cls.model_validate(merged)


def resolve_aliases(options: Mapping[str, Any]) -> dict[str, Any]:
    """Rename legacy and camelCase option names to canonical ones."""
    resolved: dict[str, Any] = {}
    for name, value in options.items():
        if name in OPTION_ALIASES:
            resolved.setdefault(OPTION_ALIASES[name], value)
        else:
            resolved[name] = value
    return resolved
