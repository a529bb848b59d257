"""Colour values used by icon.sys and their editable float form."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_CHANNEL_MAX = 255


def _check_channel(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= _CHANNEL_MAX:
        raise ValueError(f"colour channel {name} must be an integer 0-255, got {value!r}")


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_channel(name, getattr(self, name))


@dataclass(frozen=True)
class ColorF:
    """A floating-point RGBA colour, channels nominally in 0.0-1.0."""

    r: float
    g: float
    b: float
    a: float


def convert_color_to_float(color: int) -> float:
    """Map an 8-bit channel to the 0.0-1.0 range."""
    _check_channel("value", color)
    return color / 255.0


def convert_color_to_int(color: float) -> int:
    """Map a 0.0-1.0 channel to 8 bits, truncating and saturating."""
    scaled = color * 255.0
    if math.isnan(scaled):
        return 0
    return max(0, min(_CHANNEL_MAX, int(scaled)))


@dataclass
class PS2RgbaInterface:
    """An editable colour: three float RGB channels and a float alpha."""

    rgb: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    alpha: float = 0.0

    def __post_init__(self) -> None:
        self.rgb = list(self.rgb)
        if len(self.rgb) != 3:
            raise ValueError(f"rgb must have three channels, got {len(self.rgb)}")

    @classmethod
    def from_color_f(cls, color_f: ColorF) -> PS2RgbaInterface:
        """Build from a float colour, keeping the channels as they are."""
        return cls(rgb=[color_f.r, color_f.g, color_f.b], alpha=color_f.a)

    @classmethod
    def from_color(cls, color: Color) -> PS2RgbaInterface:
        """Build from an 8-bit colour, scaling each channel to 0.0-1.0."""
        return cls(
            rgb=[
                convert_color_to_float(color.r),
                convert_color_to_float(color.g),
                convert_color_to_float(color.b),
            ],
            alpha=convert_color_to_float(color.a),
        )

    def to_color_f(self) -> ColorF:
        """Return the colour as floats."""
        r, g, b = self.rgb
        return ColorF(r=r, g=g, b=b, a=self.alpha)

    def to_color(self) -> Color:
        """Return the colour as 8-bit channels."""
        r, g, b = self.rgb
        return Color(
            r=convert_color_to_int(r),
            g=convert_color_to_int(g),
            b=convert_color_to_int(b),
            a=convert_color_to_int(self.alpha),
        )