"""Interactive escape-time fractal explorer: Mandelbrot, Julia and Burning Ship,
with small text, number, buffer and stream helpers."""

__version__ = "0.1.0"