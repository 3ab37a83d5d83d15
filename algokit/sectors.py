"""Trading volume per sector, ranked."""

from __future__ import annotations

from collections import defaultdict

DEFAULT_TOP = 5


class SectorTracker:
    """Accumulates traded value per sector through instrument-to-sector links."""

    def __init__(self, k: int = DEFAULT_TOP) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._sectors_of: defaultdict[str, list[str]] = defaultdict(list)
        self._volume: defaultdict[str, float] = defaultdict(float)

    def add_instrument(self, instrument: str, sector: str) -> None:
        """Link ``instrument`` to ``sector``; an instrument may belong to several."""
        self._sectors_of[instrument].append(sector)

    def record_trade(self, instrument: str, value: float) -> None:
        """Add ``value`` to every sector holding ``instrument``; unknown ones are ignored."""
        for sector in self._sectors_of.get(instrument, ()):
            self._volume[sector] += value

    def top_sectors(self) -> list[tuple[str, float]]:
        """Up to ``k`` traded sectors by descending volume, ties by name."""
        ranked = sorted(self._volume.items(), key=lambda item: (-item[1], item[0]))
        return ranked[: self.k]