"""Time-ordered container of market bars."""

from __future__ import annotations

from collections.abc import Iterator

from quantgrades.domain.quote import Quote

__all__ = ["BarSeries"]


class BarSeries:
    """Append-only sequence of :class:`Quote` bars used by the backtest engine."""

    def __init__(self, quotes: list[Quote] | None = None) -> None:
        self._quotes: list[Quote] = list(quotes) if quotes else []

    def add(self, quote: Quote) -> None:
        """Append a bar to the end of the series."""
        self._quotes.append(quote)

    def __len__(self) -> int:
        return len(self._quotes)

    def __iter__(self) -> Iterator[Quote]:
        return iter(self._quotes)

    def __getitem__(self, index: int) -> Quote:
        return self._quotes[index]

    def at(self, index: int) -> Quote:
        """Return the bar at a non-negative index; raise IndexError otherwise."""
        if not 0 <= index < len(self._quotes):
            raise IndexError(f"BarSeries index {index} out of range")
        return self._quotes[index]

    def first(self) -> Quote:
        """Return the first bar; raise IndexError if the series is empty."""
        if not self._quotes:
            raise IndexError("BarSeries is empty")
        return self._quotes[0]

    def last(self) -> Quote:
        """Return the most recent bar; raise IndexError if the series is empty."""
        if not self._quotes:
            raise IndexError("BarSeries is empty")
        return self._quotes[-1]

    def clear(self) -> None:
        """Remove every bar."""
        self._quotes.clear()

    @property
    def data(self) -> tuple[Quote, ...]:
        """Read-only view of all bars."""
        return tuple(self._quotes)

    def __repr__(self) -> str:
        return f"BarSeries({len(self._quotes)} bars)"