import pytest

from fractol.fractal import (
    COLOR_BLACK,
    COLOR_WHITE,
    HEIGHT,
    WIDTH,
    Fractal,
    FractalKind,
)


def test_defaults_match_initial_view():
    fractal = Fractal(FractalKind.MANDELBROT)
    assert fractal.name == "mandelbrot"
    assert fractal.escape_value == 4
    assert fractal.iterations == 40
    assert (fractal.shift_x, fractal.shift_y, fractal.zoom) == (0.0, 0.0, 1.0)


def test_julia_name_defaults_to_kind():
    assert Fractal(FractalKind.JULIA, julia=0.3j).name == "julia"


def test_center_of_mandelbrot_never_escapes():
    fractal = Fractal(FractalKind.MANDELBROT)
    assert fractal.pixel_color(WIDTH // 2, HEIGHT // 2) == COLOR_WHITE


def test_corner_escapes_on_first_step():
    fractal = Fractal(FractalKind.MANDELBROT)
    assert fractal.pixel_color(0, 0) == COLOR_BLACK


def test_no_iterations_gives_white_everywhere():
    fractal = Fractal(FractalKind.MANDELBROT, iterations=0)
    assert fractal.pixel_color(0, 0) == COLOR_WHITE
    image = fractal.render(5, 4)
    assert {image.get_pixel(x, y) for x in range(5) for y in range(4)} == {COLOR_WHITE}


def test_negative_iterations_give_white():
    fractal = Fractal(FractalKind.JULIA, julia=1 + 1j, iterations=-5)
    assert fractal.pixel_color(0, 0, 10, 10) == COLOR_WHITE


def test_zero_zoom_maps_every_pixel_to_shift_point():
    fractal = Fractal(FractalKind.MANDELBROT, zoom=0.0)
    image = fractal.render(6, 6)
    assert {image.get_pixel(x, y) for x in range(6) for y in range(6)} == {COLOR_WHITE}


@pytest.mark.parametrize(
    "fractal",
    [
        Fractal(FractalKind.MANDELBROT),
        Fractal(FractalKind.MANDELBROT, shift_x=-0.5, shift_y=0.25, zoom=0.6, iterations=25),
        Fractal(FractalKind.JULIA, julia=complex(-0.8, 0.156)),
        Fractal(FractalKind.JULIA, julia=complex(0.285, 0.01), zoom=1.3, iterations=60),
    ],
)
def test_render_matches_pixel_color(fractal):
    width, height = 24, 18
    image = fractal.render(width, height)
    assert (image.width, image.height) == (width, height)
    for y in range(height):
        for x in range(width):
            assert image.get_pixel(x, y) == fractal.pixel_color(x, y, width, height)


def test_colors_stay_between_black_and_white():
    fractal = Fractal(FractalKind.JULIA, julia=complex(-0.4, 0.6))
    image = fractal.render(16, 16)
    values = [image.get_pixel(x, y) for x in range(16) for y in range(16)]
    assert all(COLOR_BLACK <= value <= COLOR_WHITE for value in values)
    assert len(set(values)) > 1


def test_julia_with_point_as_constant_matches_mandelbrot():
    # Pixel (1, 1) of a 4x4 view starts at -1 + 1i.
    mandelbrot = Fractal(FractalKind.MANDELBROT)
    julia = Fractal(FractalKind.JULIA, julia=complex(-1.0, 1.0))
    assert julia.pixel_color(1, 1, 4, 4) == mandelbrot.pixel_color(1, 1, 4, 4)


def test_julia_constant_changes_the_picture():
    first = Fractal(FractalKind.JULIA, julia=0j).render(12, 12)
    second = Fractal(FractalKind.JULIA, julia=complex(-0.8, 0.156)).render(12, 12)
    assert first.data != second.data