"""A collection of integer grades with summary statistics."""

from __future__ import annotations

from quantgrades import stats

__all__ = ["Grades"]


class Grades:
    """Stores integer grades and computes simple statistics over them."""

    def __init__(self) -> None:
        self._notes: list[int] = []

    def add(self, grade: int) -> None:
        """Append a grade."""
        self._notes.append(grade)

    @property
    def notes(self) -> tuple[int, ...]:
        """All grades in the order they were added."""
        return tuple(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def mean(self) -> float:
        """Arithmetic mean, 0.0 when there are no grades."""
        result = stats.calculate_mean(self._notes)
        return result if result is not None else 0.0

    def median(self) -> float:
        """Median, 0.0 when there are no grades."""
        result = stats.calculate_median(self._notes)
        return result if result is not None else 0.0

    def stddev(self) -> float:
        """Standard deviation, 0.0 when there are fewer than two grades."""
        if len(self._notes) < 2:
            return 0.0
        result = stats.calculate_stddev(self._notes)
        return result if result is not None else 0.0

    def maximum(self) -> int:
        """Highest grade, 0 when there are no grades."""
        result = stats.calculate_max(self._notes)
        return result if result is not None else 0

    def minimum(self) -> int:
        """Lowest grade, 0 when there are no grades."""
        result = stats.calculate_min(self._notes)
        return result if result is not None else 0

    def format_grades(self) -> str:
        """All grades separated by single spaces."""
        return " ".join(str(grade) for grade in self._notes)

    def summary(self) -> str:
        """Multi-line report of mean, median, standard deviation, max and min."""
        if not self._notes:
            return "No grades available."
        lines = [
            "=== Statistics ===",
            f"Mean: {stats.calculate_mean(self._notes):g}",
            f"Median: {stats.calculate_median(self._notes):g}",
            f"StdDev: {stats.calculate_stddev(self._notes):g}",
            f"Max: {stats.calculate_max(self._notes)}",
            f"Min: {stats.calculate_min(self._notes)}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grades({self._notes!r})"