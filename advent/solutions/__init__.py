"""Daily puzzle solutions for days 1 to 6, one module per day."""

__all__ = ["day01", "day02", "day03", "day04", "day05", "day06"]