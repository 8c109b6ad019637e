"""Whole-image rendering of a fractal into numpy arrays indexed [y, x]."""

from __future__ import annotations

import numpy as np

from .fractal import (
    DIVERGENCE_BAILOUT,
    JULIA_BAILOUT,
    PIXEL_MASK,
    SIZE,
    Fractal,
    Kind,
)


def escape_counts(fractal: Fractal, size: int = SIZE) -> np.ndarray:
    """Return the escape count of every pixel of a ``size`` x ``size`` image.

    Element [y, x] equals ``fractal.escape_count(x, y)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    shape = (size, size)
    axis = np.arange(size, dtype=np.float64) / fractal.zoom
    px = np.broadcast_to(axis + fractal.offset_x, shape)
    py = np.broadcast_to((axis + fractal.offset_y)[:, None], shape)

    if fractal.kind is Kind.JULIA:
        zr, zi = px.copy(), py.copy()
        cr, ci = fractal.julia.real, fractal.julia.imag
        bailout = JULIA_BAILOUT
    else:
        zr = np.zeros(shape)
        zi = np.zeros(shape)
        cr, ci = px, py
        bailout = DIVERGENCE_BAILOUT
    fold = fractal.kind is Kind.SHIP

    counts = np.full(shape, fractal.max_iterations, dtype=np.int64)
    active = np.ones(shape, dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(fractal.max_iterations):
            if not active.any():
                break
            temp = zr * zr - zi * zi + cr
            if fold:
                zi = np.abs(2.0 * zr * zi) + ci
                zr = np.abs(temp)
            else:
                zi = 2.0 * zr * zi + ci
                zr = temp
            escaped = active & (zr * zr + zi * zi >= bailout)
            counts[escaped] = i
            active &= ~escaped
    return counts


def render(fractal: Fractal, size: int = SIZE) -> np.ndarray:
    """Return the 32-bit pixel values of the image, indexed [y, x]."""
    counts = escape_counts(fractal, size)
    colors = (np.int64(fractal.color_scheme) * counts) & PIXEL_MASK
    colors[counts == fractal.max_iterations] = 0
    return colors.astype(np.uint32)