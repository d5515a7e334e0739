"""Precomputed sine and cosine tables in tenth-of-a-degree steps."""

from __future__ import annotations

import math
from functools import lru_cache

PI = 3.14159
TABLE_SIZE = 3600


def angle_index(angle: float) -> int:
    """Return the table index for an angle in radians.

    The angle is truncated to tenths of a degree and wrapped into the
    table, so negative angles land at the end of the table.
    """
    return int(angle * 180.0 / PI * 10) % TABLE_SIZE


class TrigTables:
    """Cosine and sine lookups for angles in tenth-of-a-degree steps."""

    def __init__(self) -> None:
        angles = [i * 0.1 * PI / 180.0 for i in range(TABLE_SIZE)]
        self.cos_table: tuple[float, ...] = tuple(math.cos(a) for a in angles)
        self.sin_table: tuple[float, ...] = tuple(math.sin(a) for a in angles)

    def cos(self, angle: float) -> float:
        """Cosine of ``angle`` (radians) read from the table."""
        return self.cos_table[angle_index(angle)]

    def sin(self, angle: float) -> float:
        """Sine of ``angle`` (radians) read from the table."""
        return self.sin_table[angle_index(angle)]


@lru_cache(maxsize=None)
def get_tables() -> TrigTables:
    """Return the shared tables, building them on first use."""
    return TrigTables()