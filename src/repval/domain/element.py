"""Element binding — the generic "element" type bound to one kind.

An element is an alias for exactly one :class:`ValueKind`, chosen when
the binding is constructed, together with a display name and the
closed interval used by the range-checked demo.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator

from repval.domain.errors import TypeMismatch
from repval.domain.kinds import ValueKind, coerce


class ElementBinding(BaseModel):
    """Frozen binding of the element type to a concrete kind.

    ``name``, ``low`` and ``high`` default to the kind's label and
    example bounds.  Bounds are coerced to the kind, and ``low > high``
    is rejected at construction.
    """

    model_config = {"frozen": True}

    kind: ValueKind = ValueKind.INTEGER
    name: str = ""
    low: Any = None
    high: Any = None

    @model_validator(mode="before")
    @classmethod
    def _fill_and_coerce(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        values = dict(data)
        kind = ValueKind(values.get("kind") or ValueKind.INTEGER)
        default_low, default_high = kind.example_bounds
        values["kind"] = kind
        values["name"] = values.get("name") or kind.label
        for field, default in (("low", default_low), ("high", default_high)):
            raw = values.get(field)
            if raw is None:
                values[field] = default
                continue
            try:
                values[field] = coerce(kind, raw)
            except TypeMismatch as exc:
                msg = f"element {field} {raw!r} is not a valid {kind.label}"
                raise ValueError(msg) from exc
        if values["low"] > values["high"]:
            msg = f"element low {values['low']!r} is greater than high {values['high']!r}"
            raise ValueError(msg)
        return values

    @property
    def expected(self) -> str:
        """Rejection-message text naming the element, e.g. ``"an element (boolean)"``."""
        return f"an element ({self.name})"
