from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import ImageColor

HEX_DIGITS = set("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class Color:
    """8-bit RGBA colour as supplied by request configuration"""
    red: int
    green: int
    blue: int
    alpha: int = 255

    @classmethod
    def transparent(cls) -> "Color":
        return cls(0, 0, 0, 0)

    @classmethod
    def from_string(cls, value: Optional[str]) -> "Color":
        """Parse a colour parameter, falling back to transparent black"""
        return cls.parse(value) or cls.transparent()

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Color"]:
        """
        Parse a colour parameter

        Accepted forms (leading '#' optional):
        - RGB / ARGB: shorthand hex, each digit doubled
        - RRGGBB / AARRGGBB: full hex
        - a CSS colour name, e.g. "black"

        Returns None for anything else.
        """
        if not value:
            return None

        code = value[1:] if value.startswith("#") else value

        if len(code) in (3, 4, 6, 8) and all(c in HEX_DIGITS for c in code):
            if len(code) in (3, 4):
                code = "".join(c * 2 for c in code)
            if len(code) == 6:
                code = "FF" + code
            alpha, red, green, blue = (int(code[i:i + 2], 16) for i in range(0, 8, 2))
            return cls(red, green, blue, alpha)

        if value.isalpha():
            try:
                red, green, blue = ImageColor.getrgb(value)[:3]
            except ValueError:
                return None
            return cls(red, green, blue)

        return None

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_rgba(self) -> Tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)


@dataclass(frozen=True)
class TintParameters:
    """Configuration for the tint processor"""
    color: Color
