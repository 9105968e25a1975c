"""Column-consensus summaries of option strings.

Given the n-th option of every issue in a group, keep each character column
where all values agree and redact the rest, so a reviewer can tell at a
glance whether a slot is uniform (``"1.2.3"``) or varies (``"1.2.?"``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mirrorball.domain.model import SlotSummary

if TYPE_CHECKING:
    from collections.abc import Sequence

PLACEHOLDER = "?"


def _consensus(values: Sequence[str | None]) -> list[str | None]:
    width = max((len(value) for value in values if value is not None), default=0)
    columns: list[str | None] = []
    for index in range(width):
        column = {
            value[index] if value is not None and index < len(value) else None
            for value in values
        }
        columns.append(column.pop() if len(column) == 1 and None not in column else None)
    return columns


def summarize(values: Sequence[str | None]) -> list[str]:
    """Return one symbol per character column of ``values``.

    A column yields its character when every value has the same character
    there, otherwise ``PLACEHOLDER``. Values shorter than the longest one
    and ``None`` entries never match, so they force the placeholder.
    """

    return [PLACEHOLDER if symbol is None else symbol for symbol in _consensus(values)]


def summarize_slot(values: Sequence[str | None]) -> SlotSummary:
    columns = _consensus(values)
    text = "".join(PLACEHOLDER if symbol is None else symbol for symbol in columns)
    return SlotSummary(text=text, uniform=None not in columns)
