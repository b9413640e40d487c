from __future__ import annotations


def change_rate(current: int, previous: int) -> int:
    """Signed percentage change from `previous` to `current`, as a whole number.

    From nothing to something is +100; nothing to nothing is 0.
    """
    if current < 0 or previous < 0:
        raise ValueError("counts must be non-negative")
    if previous == 0:
        return 100 if current > 0 else 0
    return round((current - previous) / previous * 100)


def share(part: int, whole: int) -> int:
    """Whole-number percentage of `part` in `whole`; 0 when `whole` is 0."""
    if whole <= 0:
        return 0
    return round(part / whole * 100)
