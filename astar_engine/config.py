"""Validated configuration for a single search."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchConfig(BaseModel):
    """Everything :func:`~astar_engine.search.find_path` needs to run a search."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    cost_function: Callable[[Any, Any], float]
    move_function: Callable[[Any], Iterable[Any]]
    start: Any
    end: Any
    max_iterations: int | None = Field(default=None, ge=0)
    tie_breaker: Callable[[Any], Any] | None = Field(default=None)

    @field_validator("start", "end")
    @classmethod
    def _require_hashable(cls, value: Any) -> Any:
        try:
            hash(value)
        except TypeError as exc:
            raise ValueError(
                f"positions must be hashable, got {type(value).__name__}"
            ) from exc
        return value

    def with_endpoints(self, start: Any, end: Any) -> SearchConfig:
        """Return a validated copy searching from ``start`` to ``end``."""

        payload = {name: getattr(self, name) for name in type(self).model_fields}
        payload.update(start=start, end=end)
        return type(self)(**payload)


__all__ = ["SearchConfig"]
