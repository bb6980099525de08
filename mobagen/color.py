"""RGBA colours as bytes (``Color32``) and as floats (``Colorf``)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from mobagen.random import range_int


def _byte(packed: int, shift: int) -> int:
    return (packed >> shift) & 0xFF


@dataclass(frozen=True)
class Color32:
    """An RGBA colour with one byte per channel; alpha 255 is opaque.

    The packed 32-bit form holds alpha in the top byte, then blue, green
    and red in the lowest byte.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an integer in 0..255, got {value!r}")

    @classmethod
    def from_packed(cls, packed: int) -> Color32:
        """Unpack a 32-bit ``0xAABBGGRR`` word."""
        packed &= 0xFFFFFFFF
        return cls(_byte(packed, 0), _byte(packed, 8), _byte(packed, 16), _byte(packed, 24))

    @classmethod
    def from_colorf(cls, color: Colorf) -> Color32:
        """Convert float channels in ``[0, 1]`` to bytes, truncating."""
        return cls(int(color.r * 255), int(color.g * 255), int(color.b * 255), int(color.a * 255))

    def packed(self) -> int:
        """Return the colour as a 32-bit ``0xAABBGGRR`` word."""
        return self.a << 24 | self.b << 16 | self.g << 8 | self.r

    def __getitem__(self, index: int) -> int:
        """Channels by index: 0 alpha, 1 red, 2 green, 3 blue.

        Index 4 is accepted and, like index 0, gives alpha.
        """
        if index < 0 or index > 4:
            raise IndexError("Out of color range")
        return (self.a, self.r, self.g, self.b, self.a)[index]

    @classmethod
    def random(cls, low: int = 0, high: int = 255) -> Color32:
        """Return an opaque colour with each of r, g, b drawn from ``[low, high]``."""
        return cls(range_int(low, high), range_int(low, high), range_int(low, high), 255)

    @classmethod
    def lerp(cls, c1: Color32, c2: Color32, t: float) -> Color32:
        """Interpolate red, green and blue linearly; the result is opaque."""

        def mix(start: int, end: int) -> int:
            if t == 1:
                return end
            return int(start + t * (end - start))

        return cls(mix(c1.r, c2.r), mix(c1.g, c2.g), mix(c1.b, c2.b))

    def light(self) -> Color32:
        """Return the opaque colour halfway towards white."""
        return Color32((self.r + 255) // 2, (self.g + 255) // 2, (self.b + 255) // 2)

    def dark(self) -> Color32:
        """Return the opaque colour at half intensity."""
        return Color32(self.r // 2, self.g // 2, self.b // 2)


@dataclass
class Colorf:
    """An RGBA colour with float channels, normally within ``[0, 1]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_packed(cls, packed: int) -> Colorf:
        """Read a 32-bit word: alpha in bits 24-31, red in 16-23, green in 8-15.

        Blue is read from the same byte as green.
        """
        packed &= 0xFFFFFFFF
        green = _byte(packed, 8) / 255
        return cls(_byte(packed, 16) / 255, green, green, _byte(packed, 24) / 255)

    @classmethod
    def from_color32(cls, color: Color32) -> Colorf:
        return cls(color.r / 255, color.g / 255, color.b / 255, color.a / 255)

    @classmethod
    def hsv_to_rgb(cls, h: float, s: float, v: float, hdr: bool = True) -> Colorf:
        """Build an opaque RGB colour from hue, saturation and value.

        Hue is a fraction of a full turn. Without ``hdr`` the channels of a
        saturated colour are clamped to ``[0, 1]``. Raises ``ValueError``
        when the hue lies outside the range the conversion covers.
        """
        result = cls(0.0, 0.0, 0.0)
        if s == 0.0:
            result.r = result.g = result.b = v
            return result
        if v == 0.0:
            return result

        f = h * 6.0
        sector = math.floor(f)
        frac = f - sector
        p = v * (1.0 - s)
        q = v * (1.0 - s * frac)
        t = v * (1.0 - s * (1.0 - frac))
        table = {
            -1: (v, p, q),
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
            5: (v, p, q),
            6: (v, t, p),
        }
        try:
            result.r, result.g, result.b = table[sector]
        except KeyError:
            raise ValueError(f"hue {h!r} is out of range") from None
        if not hdr:
            result.r = min(max(result.r, 0.0), 1.0)
            result.g = min(max(result.g, 0.0), 1.0)
            result.b = min(max(result.b, 0.0), 1.0)
        return result


class Colors:
    """Named colours."""

    TRANSPARENT_BLACK: ClassVar[Color32] = Color32.from_packed(0)
    TRANSPARENT: ClassVar[Color32] = Color32.from_packed(0)
    ALICE_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFFFF8F0)
    ANTIQUE_WHITE: ClassVar[Color32] = Color32.from_packed(0xFFD7EBFA)
    AQUA: ClassVar[Color32] = Color32.from_packed(0xFFFFFF00)
    AQUAMARINE: ClassVar[Color32] = Color32.from_packed(0xFFD4FF7F)
    AZURE: ClassVar[Color32] = Color32.from_packed(0xFFFFFFF0)
    BEIGE: ClassVar[Color32] = Color32.from_packed(0xFFDCF5F5)
    BISQUE: ClassVar[Color32] = Color32.from_packed(0xFFC4E4FF)
    BLACK: ClassVar[Color32] = Color32.from_packed(0xFF000000)
    BLANCHED_ALMOND: ClassVar[Color32] = Color32.from_packed(0xFFCDEBFF)
    BLUE: ClassVar[Color32] = Color32.from_packed(0xFFFF0000)
    BLUE_VIOLET: ClassVar[Color32] = Color32.from_packed(0xFFE22B8A)
    BROWN: ClassVar[Color32] = Color32.from_packed(0xFF2A2AA5)
    BURLY_WOOD: ClassVar[Color32] = Color32.from_packed(0xFF87B8DE)
    CADET_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFA09E5F)
    CHARTREUSE: ClassVar[Color32] = Color32.from_packed(0xFF00FF7F)
    CHOCOLATE: ClassVar[Color32] = Color32.from_packed(0xFF1E69D2)
    CORAL: ClassVar[Color32] = Color32.from_packed(0xFF507FFF)
    CORNFLOWER_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFED9564)
    CORNSILK: ClassVar[Color32] = Color32.from_packed(0xFFDCF8FF)
    CRIMSON: ClassVar[Color32] = Color32.from_packed(0xFF3C14DC)
    CYAN: ClassVar[Color32] = Color32.from_packed(0xFFFFFF00)
    DARK_BLUE: ClassVar[Color32] = Color32.from_packed(0xFF8B0000)
    DARK_CYAN: ClassVar[Color32] = Color32.from_packed(0xFF8B8B00)
    DARK_GOLDENROD: ClassVar[Color32] = Color32.from_packed(0xFF0B86B8)
    DARK_GRAY: ClassVar[Color32] = Color32.from_packed(0xFFA9A9A9)
    DARK_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF006400)
    DARK_KHAKI: ClassVar[Color32] = Color32.from_packed(0xFF6BB7BD)
    DARK_MAGENTA: ClassVar[Color32] = Color32.from_packed(0xFF8B008B)
    DARK_OLIVE_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF2F6B55)
    DARK_ORANGE: ClassVar[Color32] = Color32.from_packed(0xFF008CFF)
    DARK_ORCHID: ClassVar[Color32] = Color32.from_packed(0xFFCC3299)
    DARK_RED: ClassVar[Color32] = Color32.from_packed(0xFF00008B)
    DARK_SALMON: ClassVar[Color32] = Color32.from_packed(0xFF7A96E9)
    DARK_SEA_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF8BBC8F)
    DARK_SLATE_BLUE: ClassVar[Color32] = Color32.from_packed(0xFF8B3D48)
    DARK_SLATE_GRAY: ClassVar[Color32] = Color32.from_packed(0xFF4F4F2F)
    DARK_TURQUOISE: ClassVar[Color32] = Color32.from_packed(0xFFD1CE00)
    DARK_VIOLET: ClassVar[Color32] = Color32.from_packed(0xFFD30094)
    DEEP_PINK: ClassVar[Color32] = Color32.from_packed(0xFF9314FF)
    DEEP_SKY_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFFFBF00)
    DIM_GRAY: ClassVar[Color32] = Color32.from_packed(0xFF696969)
    DODGER_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFFF901E)
    FIREBRICK: ClassVar[Color32] = Color32.from_packed(0xFF2222B2)
    FLORAL_WHITE: ClassVar[Color32] = Color32.from_packed(0xFFF0FAFF)
    FOREST_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF228B22)
    FUCHSIA: ClassVar[Color32] = Color32.from_packed(0xFFFF00FF)
    GAINSBORO: ClassVar[Color32] = Color32.from_packed(0xFFDCDCDC)
    GHOST_WHITE: ClassVar[Color32] = Color32.from_packed(0xFFFFF8F8)
    GOLD: ClassVar[Color32] = Color32.from_packed(0xFF00D7FF)
    GOLDENROD: ClassVar[Color32] = Color32.from_packed(0xFF20A5DA)
    GRAY: ClassVar[Color32] = Color32.from_packed(0xFF808080)
    GREEN: ClassVar[Color32] = Color32.from_packed(0xFF008000)
    GREEN_YELLOW: ClassVar[Color32] = Color32.from_packed(0xFF2FFFAD)
    HONEYDEW: ClassVar[Color32] = Color32.from_packed(0xFFF0FFF0)
    HOT_PINK: ClassVar[Color32] = Color32.from_packed(0xFFB469FF)
    INDIAN_RED: ClassVar[Color32] = Color32.from_packed(0xFF5C5CCD)
    INDIGO: ClassVar[Color32] = Color32.from_packed(0xFF82004B)
    IVORY: ClassVar[Color32] = Color32.from_packed(0xFFF0FFFF)
    KHAKI: ClassVar[Color32] = Color32.from_packed(0xFF8CE6F0)
    LAVENDER: ClassVar[Color32] = Color32.from_packed(0xFFFAE6E6)
    LAVENDER_BLUSH: ClassVar[Color32] = Color32.from_packed(0xFFF5F0FF)
    LAWN_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF00FC7C)
    LEMON_CHIFFON: ClassVar[Color32] = Color32.from_packed(0xFFCDFAFF)
    LIGHT_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFE6D8AD)
    LIGHT_CORAL: ClassVar[Color32] = Color32.from_packed(0xFF8080F0)
    LIGHT_CYAN: ClassVar[Color32] = Color32.from_packed(0xFFFFFFE0)
    LIGHT_GOLDENROD_YELLOW: ClassVar[Color32] = Color32.from_packed(0xFFD2FAFA)
    LIGHT_GRAY: ClassVar[Color32] = Color32.from_packed(0xFFD3D3D3)
    LIGHT_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF90EE90)
    LIGHT_PINK: ClassVar[Color32] = Color32.from_packed(0xFFC1B6FF)
    LIGHT_SALMON: ClassVar[Color32] = Color32.from_packed(0xFF7AA0FF)
    LIGHT_SEA_GREEN: ClassVar[Color32] = Color32.from_packed(0xFFAAB220)
    LIGHT_SKY_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFFACE87)
    LIGHT_SLATE_GRAY: ClassVar[Color32] = Color32.from_packed(0xFF998877)
    LIGHT_STEEL_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFDEC4B0)
    LIGHT_YELLOW: ClassVar[Color32] = Color32.from_packed(0xFFE0FFFF)
    LIME: ClassVar[Color32] = Color32.from_packed(0xFF00FF00)
    LIME_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF32CD32)
    LINEN: ClassVar[Color32] = Color32.from_packed(0xFFE6F0FA)
    MAGENTA: ClassVar[Color32] = Color32.from_packed(0xFFFF00FF)
    MAROON: ClassVar[Color32] = Color32.from_packed(0xFF000080)
    MEDIUM_AQUAMARINE: ClassVar[Color32] = Color32.from_packed(0xFFAACD66)
    MEDIUM_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFCD0000)
    MEDIUM_ORCHID: ClassVar[Color32] = Color32.from_packed(0xFFD355BA)
    MEDIUM_PURPLE: ClassVar[Color32] = Color32.from_packed(0xFFDB7093)
    MEDIUM_SEA_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF71B33C)
    MEDIUM_SLATE_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFEE687B)
    MEDIUM_SPRING_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF9AFA00)
    MEDIUM_TURQUOISE: ClassVar[Color32] = Color32.from_packed(0xFFCCD148)
    MEDIUM_VIOLET_RED: ClassVar[Color32] = Color32.from_packed(0xFF8515C7)
    MIDNIGHT_BLUE: ClassVar[Color32] = Color32.from_packed(0xFF701919)
    MINT_CREAM: ClassVar[Color32] = Color32.from_packed(0xFFFAFFF5)
    MISTY_ROSE: ClassVar[Color32] = Color32.from_packed(0xFFE1E4FF)
    MOCCASIN: ClassVar[Color32] = Color32.from_packed(0xFFB5E4FF)
    NAVAJO_WHITE: ClassVar[Color32] = Color32.from_packed(0xFFADDEFF)
    NAVY: ClassVar[Color32] = Color32.from_packed(0xFF800000)
    OLD_LACE: ClassVar[Color32] = Color32.from_packed(0xFFE6F5FD)
    OLIVE: ClassVar[Color32] = Color32.from_packed(0xFF008080)
    OLIVE_DRAB: ClassVar[Color32] = Color32.from_packed(0xFF238E6B)
    ORANGE: ClassVar[Color32] = Color32.from_packed(0xFF00A5FF)
    ORANGE_RED: ClassVar[Color32] = Color32.from_packed(0xFF0045FF)
    ORCHID: ClassVar[Color32] = Color32.from_packed(0xFFD670DA)
    PALE_GOLDENROD: ClassVar[Color32] = Color32.from_packed(0xFFAAE8EE)
    PALE_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF98FB98)
    PALE_TURQUOISE: ClassVar[Color32] = Color32.from_packed(0xFFEEEEAF)
    PALE_VIOLET_RED: ClassVar[Color32] = Color32.from_packed(0xFF9370DB)
    PAPAYA_WHIP: ClassVar[Color32] = Color32.from_packed(0xFFD5EFFF)
    PEACH_PUFF: ClassVar[Color32] = Color32.from_packed(0xFFB9DAFF)
    PERU: ClassVar[Color32] = Color32.from_packed(0xFF3F85CD)
    PINK: ClassVar[Color32] = Color32.from_packed(0xFFCBC0FF)
    PLUM: ClassVar[Color32] = Color32.from_packed(0xFFDDA0DD)
    POWDER_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFE6E0B0)
    PURPLE: ClassVar[Color32] = Color32.from_packed(0xFF800080)
    RED: ClassVar[Color32] = Color32.from_packed(0xFF0000FF)
    ROSY_BROWN: ClassVar[Color32] = Color32.from_packed(0xFF8F8FBC)
    ROYAL_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFE16941)
    SADDLE_BROWN: ClassVar[Color32] = Color32.from_packed(0xFF13458B)
    SALMON: ClassVar[Color32] = Color32.from_packed(0xFF7280FA)
    SANDY_BROWN: ClassVar[Color32] = Color32.from_packed(0xFF60A4F4)
    SEA_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF578B2E)
    SEA_SHELL: ClassVar[Color32] = Color32.from_packed(0xFFEEF5FF)
    SIENNA: ClassVar[Color32] = Color32.from_packed(0xFF2D52A0)
    SILVER: ClassVar[Color32] = Color32.from_packed(0xFFC0C0C0)
    SKY_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFEBCE87)
    SLATE_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFCD5A6A)
    SLATE_GRAY: ClassVar[Color32] = Color32.from_packed(0xFF908070)
    SNOW: ClassVar[Color32] = Color32.from_packed(0xFFFAFAFF)
    SPRING_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF7FFF00)
    STEEL_BLUE: ClassVar[Color32] = Color32.from_packed(0xFFB48246)
    TAN: ClassVar[Color32] = Color32.from_packed(0xFF8CB4D2)
    TEAL: ClassVar[Color32] = Color32.from_packed(0xFF808000)
    THISTLE: ClassVar[Color32] = Color32.from_packed(0xFFD8BFD8)
    TOMATO: ClassVar[Color32] = Color32.from_packed(0xFF4763FF)
    TURQUOISE: ClassVar[Color32] = Color32.from_packed(0xFFD0E040)
    VIOLET: ClassVar[Color32] = Color32.from_packed(0xFFEE82EE)
    WHEAT: ClassVar[Color32] = Color32.from_packed(0xFFB3DEF5)
    WHITE: ClassVar[Color32] = Color32.from_packed(0xFFFFFFFF)
    WHITE_SMOKE: ClassVar[Color32] = Color32.from_packed(0xFFF5F5F5)
    YELLOW: ClassVar[Color32] = Color32.from_packed(0xFF00FFFF)
    YELLOW_GREEN: ClassVar[Color32] = Color32.from_packed(0xFF32CD9A)