import numpy as np
import pytest

from fractol.fractal import SIZE, Fractal, Kind
from fractol.render import escape_counts, render


def _small_view(kind, **extra):
    return Fractal(kind, zoom=4.0, offset_x=-2.0, offset_y=-1.5, max_iterations=30, **extra)


@pytest.mark.parametrize("kind", list(Kind))
def test_counts_match_pointwise_iteration(kind):
    f = _small_view(kind)
    counts = escape_counts(f, 16)
    assert counts.shape == (16, 16)
    for y in range(16):
        for x in range(16):
            assert counts[y, x] == f.escape_count(x, y)


@pytest.mark.parametrize("kind", list(Kind))
def test_render_matches_color_at(kind):
    f = _small_view(kind)
    image = render(f, 12)
    assert image.dtype == np.uint32
    for y in range(12):
        for x in range(12):
            assert int(image[y, x]) == f.color_at(x, y)


def test_counts_vary_across_image():
    counts = escape_counts(_small_view(Kind.MANDEL), 16)
    assert counts.min() < counts.max()
    assert counts.max() <= 30


def test_default_size_and_centre():
    f = Fractal(Kind.MANDEL, max_iterations=10)
    counts = escape_counts(f)
    assert counts.shape == (SIZE, SIZE)
    assert counts[SIZE // 2, SIZE // 2] == 10
    assert render(f)[SIZE // 2, SIZE // 2] == 0


def test_custom_julia_constant():
    f = _small_view(Kind.JULIA, julia=complex(0.285, 0.01))
    counts = escape_counts(f, 10)
    assert counts[3, 7] == f.escape_count(7, 3)


def test_empty_image():
    assert escape_counts(Fractal(Kind.SHIP), 0).shape == (0, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        escape_counts(Fractal(Kind.MANDEL), -1)