"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, repval.toml only contains
overrides.  An empty file (or no file) gives the integer element with
its example bounds.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from repval.domain.element import ElementBinding
from repval.domain.kinds import ValueKind
from repval.infrastructure.stream import DEFAULT_DISCARD_LIMIT


class ElementConfig(BaseModel):
    """[element] section.

    ``name``, ``low`` and ``high`` fall back to the kind's label and
    example bounds when omitted.
    """

    model_config = {"frozen": True}

    kind: ValueKind = ValueKind.INTEGER
    name: str | None = None
    low: Any = None
    high: Any = None

    def binding(self) -> ElementBinding:
        """Build the element binding described by this section."""
        return ElementBinding(kind=self.kind, name=self.name, low=self.low, high=self.high)

    @model_validator(mode="after")
    def _check_binding(self) -> ElementConfig:
        self.binding()
        return self


class ReaderConfig(BaseModel):
    """[reader] section."""

    model_config = {"frozen": True}

    discard_limit: int = Field(default=DEFAULT_DISCARD_LIMIT, ge=1)


class DemoConfig(BaseModel):
    """[demo] section — bounds for the integer and float range demos."""

    model_config = {"frozen": True}

    int_low: int = 6
    int_high: int = 37
    float_low: float = 5.5
    float_high: float = 42.8

    @model_validator(mode="after")
    def _check_bounds(self) -> DemoConfig:
        if self.int_low > self.int_high:
            raise ValueError(f"demo int_low {self.int_low} is greater than int_high {self.int_high}")
        if self.float_low > self.float_high:
            raise ValueError(
                f"demo float_low {self.float_low} is greater than float_high {self.float_high}"
            )
        return self


class RepvalConfig(BaseModel):
    """Root config model matching repval.toml structure."""

    model_config = {"frozen": True}

    element: ElementConfig = Field(default_factory=ElementConfig)
    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)
