"""Date manipulation utilities"""

from datetime import date


def full_years_between(start: date, end: date) -> int:
    """Whole years elapsed from start to end; not yet complete if end's month/day precede start's"""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
