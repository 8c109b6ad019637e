"""Fractal parameters and the per-point escape-time iteration."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum

SIZE = 600
DEFAULT_ITERATIONS = 42
DEFAULT_COLOR = 0xFCBE11
DEFAULT_ZOOM = 300.0
DEFAULT_OFFSET = -((SIZE / 2.0) / DEFAULT_ZOOM)
DEFAULT_JULIA = complex(-0.745429, 0.05)
JULIA_BAILOUT = 4.0
DIVERGENCE_BAILOUT = sys.float_info.max
PIXEL_MASK = 0xFFFFFFFF


class Kind(Enum):
    """The fractals that can be drawn."""

    MANDEL = "mandel"
    JULIA = "julia"
    SHIP = "ship"

    @classmethod
    def from_name(cls, name: str) -> Kind:
        """Look a fractal up by its exact name."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError("fractals: mandel, julia, ship") from None


@dataclass
class Fractal:
    """View and iteration settings of one fractal.

    A pixel (x, y) maps to the complex point
    ``x / zoom + offset_x + i * (y / zoom + offset_y)``.
    """

    kind: Kind
    max_iterations: int = DEFAULT_ITERATIONS
    color_scheme: int = DEFAULT_COLOR
    zoom: float = DEFAULT_ZOOM
    offset_x: float = DEFAULT_OFFSET
    offset_y: float = DEFAULT_OFFSET
    julia: complex = DEFAULT_JULIA

    def escape_count(self, x: int, y: int) -> int:
        """Return the iteration at which the point escapes, or max_iterations."""
        px = x / self.zoom + self.offset_x
        py = y / self.zoom + self.offset_y
        if self.kind is Kind.JULIA:
            zr, zi = px, py
            cr, ci = self.julia.real, self.julia.imag
            bailout = JULIA_BAILOUT
        else:
            zr = zi = 0.0
            cr, ci = px, py
            bailout = DIVERGENCE_BAILOUT
        fold = self.kind is Kind.SHIP

        for i in range(self.max_iterations):
            temp = zr * zr - zi * zi + cr
            if fold:
                zi = abs(2.0 * zr * zi) + ci
                zr = abs(temp)
            else:
                zi = 2.0 * zr * zi + ci
                zr = temp
            if zr * zr + zi * zi >= bailout:
                return i
        return self.max_iterations

    def color_at(self, x: int, y: int) -> int:
        """Return the 32-bit pixel value for (x, y); points in the set are black."""
        count = self.escape_count(x, y)
        if count == self.max_iterations:
            return 0
        return (self.color_scheme * count) & PIXEL_MASK