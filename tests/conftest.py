"""Shared pytest fixtures for md3_palettes tests."""

import pytest

from md3_palettes.scheme import Family, Scheme, build_scheme

KEY_COLOR_MARKER = 0xFF


class StubPalette:
    """Tonal palette that encodes its family marker and the tone in the color.

    ``tone(n)`` returns green = marker, blue = n, so a scheme field can be
    traced back to exactly which palette and tone produced it.
    """

    def __init__(self, marker: int) -> None:
        self.marker = marker
        self.calls: list[int] = []

    @property
    def key_color(self) -> int:
        return 0xFF000000 | (self.marker << 8) | KEY_COLOR_MARKER

    def tone(self, tone: int) -> int:
        self.calls.append(tone)
        return 0xFF000000 | (self.marker << 8) | tone


MARKERS = {family: index + 1 for index, family in enumerate(Family)}


@pytest.fixture
def stub_palettes() -> dict[Family, StubPalette]:
    """One distinguishable stub per family."""
    return {family: StubPalette(marker) for family, marker in MARKERS.items()}


@pytest.fixture
def make_scheme(stub_palettes):
    """Build a scheme from the stubs for the requested mode."""

    def _make(is_dark: bool, with_custom: bool = True) -> Scheme:
        return build_scheme(
            stub_palettes[Family.PRIMARY],
            stub_palettes[Family.SECONDARY],
            stub_palettes[Family.TERTIARY],
            stub_palettes[Family.NEUTRAL],
            stub_palettes[Family.NEUTRAL_VARIANT],
            stub_palettes[Family.ERROR],
            is_dark=is_dark,
            custom=stub_palettes[Family.CUSTOM] if with_custom else None,
        )

    return _make
