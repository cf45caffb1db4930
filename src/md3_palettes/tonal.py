"""Tonal palette contract and the materialyoucolor-backed implementation."""

from typing import Protocol, runtime_checkable

from materialyoucolor.palettes.tonal_palette import (
    TonalPalette as _MaterialTonalPalette,
)

MIN_TONE = 0
MAX_TONE = 100


@runtime_checkable
class TonalPaletteProvider(Protocol):
    """Anything that can answer a tone lookup for a single seed color."""

    @property
    def key_color(self) -> int:
        """The palette's key color as an ARGB int."""
        ...

    def tone(self, tone: int) -> int:
        """Return the ARGB color at ``tone`` (0 is black, 100 is white)."""
        ...


class TonalPalette:
    """Tonal ramp derived once from a seed color.

    The HCT math is done by ``materialyoucolor``; this wrapper pins the
    tone range and memoizes lookups so repeated scheme builds stay cheap.
    """

    __slots__ = ("_cache", "_palette", "seed")

    def __init__(self, seed: int) -> None:
        self.seed = seed & 0xFFFFFFFF
        self._palette = _MaterialTonalPalette.from_int(self.seed)
        self._cache: dict[int, int] = {}

    @classmethod
    def from_argb(cls, seed: int) -> "TonalPalette":
        """Build a palette from a 0xAARRGGBB seed."""
        return cls(seed)

    @property
    def key_color(self) -> int:
        """The palette's key color as an ARGB int."""
        return self._palette.key_color.to_int()

    def tone(self, tone: int) -> int:
        """Return the ARGB color at ``tone``.

        Raises:
            ValueError: If ``tone`` is outside [0, 100].
        """
        if not MIN_TONE <= tone <= MAX_TONE:
            raise ValueError(f"Tone must be in [{MIN_TONE}, {MAX_TONE}], got {tone}")
        if tone not in self._cache:
            self._cache[tone] = self._palette.tone(tone)
        return self._cache[tone]

    def __repr__(self) -> str:
        return f"TonalPalette(seed={self.seed:#010x})"
