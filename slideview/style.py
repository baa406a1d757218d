"""Text styles: sets of coloured, offset copies drawn under a string."""

from __future__ import annotations

from dataclasses import dataclass, field

Color = tuple[int, int, int, int]


@dataclass
class StyleBit:
    """One layer of a style: an offset and a colour.

    A colour whose components are all zero stands for "use the text colour".
    """

    x_offset: int = 0
    y_offset: int = 0
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    @property
    def color(self) -> Color:
        return (self.r, self.g, self.b, self.a)


@dataclass
class Style:
    """A named, ordered collection of style layers."""

    name: str | None = None
    bits: list[StyleBit] = field(default_factory=list)

    def add_bit(
        self,
        x_offset: int = 0,
        y_offset: int = 0,
        r: int = 0,
        g: int = 0,
        b: int = 0,
        a: int = 0,
    ) -> StyleBit:
        """Append a layer and return it."""
        bit = StyleBit(x_offset, y_offset, r, g, b, a)
        self.bits.append(bit)
        return bit

    def origin_shift(self) -> tuple[int, int]:
        """Return how far to move the text so no layer lands at negative coordinates."""
        min_x = min((bit.x_offset for bit in self.bits), default=0)
        min_y = min((bit.y_offset for bit in self.bits), default=0)
        return (-min(min_x, 0), -min(min_y, 0))

    def extend_size(self, width: int, height: int) -> tuple[int, int]:
        """Grow a plain text size by the spread of the layer offsets."""
        xs = [bit.x_offset for bit in self.bits]
        ys = [bit.y_offset for bit in self.bits]
        max_x = max(max(xs, default=0), 0)
        min_x = min(min(xs, default=0), 0)
        max_y = max(max(ys, default=0), 0)
        min_y = min(min(ys, default=0), 0)
        return (width + max_x - min_x, height + max_y - min_y)

    def bit_color(self, bit: StyleBit, default: Color) -> Color:
        """Return the colour to draw *bit* in, falling back to *default*."""
        if bit.r + bit.g + bit.b + bit.a == 0:
            return default
        return bit.color

    def layers(self, x: int, y: int, default: Color) -> list[tuple[int, int, Color]]:
        """Return (x, y, colour) for every layer when drawing text at (x, y)."""
        shift_x, shift_y = self.origin_shift()
        base_x, base_y = x + shift_x, y + shift_y
        return [
            (base_x + bit.x_offset, base_y + bit.y_offset, self.bit_color(bit, default))
            for bit in self.bits
        ]