"""Read-request lifecycle states."""

from __future__ import annotations

from enum import StrEnum


class ReadState(StrEnum):
    """States of a single read request.

    ``AWAITING_INPUT`` is initial, ``ACCEPTED`` is the only terminal
    state.  ``TYPE_OK_RANGE_PENDING`` is entered on the range-checked
    path only.
    """

    AWAITING_INPUT = "awaiting_input"
    FAULTED = "faulted"
    TYPE_OK_RANGE_PENDING = "type_ok_range_pending"
    ACCEPTED = "accepted"
