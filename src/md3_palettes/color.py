"""ARGB packing and the NRGBA color value used by schemes."""

from typing import NamedTuple

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class NRGBA(NamedTuple):
    """Non-premultiplied color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 0xFF

    @classmethod
    def from_argb(cls, argb: int) -> "NRGBA":
        """Unpack a 0xAARRGGBB integer."""
        argb &= 0xFFFFFFFF
        return cls(
            r=(argb >> 16) & 0xFF,
            g=(argb >> 8) & 0xFF,
            b=argb & 0xFF,
            a=(argb >> 24) & 0xFF,
        )

    @property
    def argb(self) -> int:
        """Pack back into a 0xAARRGGBB integer."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    @property
    def hex(self) -> str:
        """CSS style hex, with the alpha suffix only when not opaque."""
        rgb = f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        if self.a == 0xFF:
            return rgb
        return f"{rgb}{self.a:02X}"

    def __str__(self) -> str:
        return self.hex


TRANSPARENT = NRGBA(0, 0, 0, 0)


def parse_argb(value: int | str) -> int:
    """Parse a seed color given as an int or a hex string.

    Accepted strings are ``#RRGGBB``, ``#AARRGGBB`` and ``0xAARRGGBB``
    (case-insensitive). Six digit forms are treated as fully opaque.
    """
    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"ARGB value out of range: {value:#x}")
        return value

    text = value.strip()
    if text.startswith("#"):
        digits = text[1:]
    elif text.lower().startswith("0x"):
        digits = text[2:]
    else:
        raise ValueError(f"Expected '#RRGGBB', '#AARRGGBB' or '0xAARRGGBB': {value!r}")

    if len(digits) not in (6, 8) or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"Malformed color: {value!r}")

    argb = int(digits, 16)
    if len(digits) == 6:
        argb |= 0xFF000000
    return argb
