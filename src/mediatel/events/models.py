"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Time-series event record.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias

from ..contracts import NULL_VALUE

Scalar: TypeAlias = str | int | float | bool
Row: TypeAlias = tuple[Scalar, ...]


def render_value(value: object) -> Scalar:
    """Map one cell to its wire form: ``None`` to ``"null"``, bools to ``"true"``/``"false"``."""
    if value is None:
        return NULL_VALUE
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return value
    return str(value)


def is_row(value: object) -> bool:
    """Whether `value` is itself a row (a non-string sequence)."""

    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


@dataclass(frozen=True, slots=True)
class Event:
    """
    Named record of columns and one or more rows of values.

    `values` holds either a single flat row or a sequence of rows. The first
    element decides which: when it is itself a sequence the event is
    multi-point.

    Attributes:
        name: Measurement name in the time-series backend.
        columns: Column names, in row order.
        values: One row, or a sequence of rows.
        use_local_time: Prepend a capture-time column when encoding.
    """

    name: str
    columns: tuple[str, ...]
    values: tuple[Scalar, ...] | tuple[Row, ...]
    use_local_time: bool = True

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError(f"Event '{self.name}' must carry at least one value")

    @property
    def is_multipoint(self) -> bool:
        return is_row(self.values[0])

    def rows(self) -> list[Row]:
        """Return values normalized to a list of rows."""
        if self.is_multipoint:
            return [tuple(row) for row in self.values]  # type: ignore[arg-type]
        return [tuple(self.values)]  # type: ignore[arg-type]


def make_event(
    name: str,
    columns: Sequence[str],
    values: Sequence[Scalar] | Sequence[Sequence[Scalar]],
    *,
    use_local_time: bool = True,
) -> Event:
    """
    Build an immutable `Event`, freezing nested rows into tuples.

    Cells are rendered the same way as factory-built events, so bools and
    ``None`` never reach the wire payload as JSON literals.
    """
    if values and is_row(values[0]):
        frozen: tuple = tuple(
            tuple(render_value(v) for v in row) for row in values  # type: ignore[union-attr]
        )
    else:
        frozen = tuple(render_value(v) for v in values)
    return Event(
        name=name,
        columns=tuple(columns),
        values=frozen,
        use_local_time=use_local_time,
    )
