"""
Row label ordering.

Curved stage-front rows (AA, BB, CC, DD) come first in that order, then every
other label shorter-first, ties broken alphabetically.
"""

from typing import Iterable


STAGE_FRONT_ROWS: tuple[str, ...] = ('AA', 'BB', 'CC', 'DD')

_STAGE_FRONT_INDEX = {label: index for index, label in enumerate(STAGE_FRONT_ROWS)}


def row_sort_key(label: str) -> tuple[int, int, int, str, str]:
    front_index = _STAGE_FRONT_INDEX.get(label.upper())
    if front_index is not None:
        return (0, front_index, 0, '', label)
    # casefold gives the case-insensitive collation, the raw label keeps the order total
    return (1, 0, len(label), label.casefold(), label)


def sort_row_labels(labels: Iterable[str]) -> list[str]:
    return sorted(set(labels), key=row_sort_key)
