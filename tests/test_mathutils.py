import pytest

from fractol.mathutils import scale, step


@pytest.mark.parametrize(
    ("value", "new_min", "new_max", "old_max", "expected"),
    [
        (0, -2, 2, 800, -2),
        (800, -2, 2, 800, 2),
        (0, 2, -2, 800, 2),
        (800, 2, -2, 800, -2),
        (40, 0x000000, 0xFFFFFF, 40, 0xFFFFFF),
        (0, 0x000000, 0xFFFFFF, 40, 0x000000),
    ],
)
def test_scale_endpoints(value, new_min, new_max, old_max, expected):
    assert scale(value, new_min, new_max, old_max) == pytest.approx(expected)


def test_scale_midpoint_of_symmetric_range():
    assert scale(400, -2, 2, 800) == pytest.approx(0.0)


def test_scale_is_monotonic():
    values = [scale(x, -2, 2, 800) for x in range(0, 801, 50)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_scale_flipped_range_is_mirror():
    for x in range(0, 801, 100):
        assert scale(x, 2, -2, 800) == pytest.approx(-scale(x, -2, 2, 800))


@pytest.mark.parametrize("c", [0j, 1 + 1j, -0.8 + 0.156j, 0.285 + 0.01j])
def test_step_from_origin_gives_c(c):
    assert step(0j, c) == c


def test_step_squares_imaginary_unit():
    assert step(1j, 0) == -1


@pytest.mark.parametrize(
    ("z", "c"), [(0.5 + 0.25j, -0.1 + 0.3j), (-1.5 + 2j, 0.7 - 0.2j), (3 - 4j, 0j)]
)
def test_step_conjugate_symmetry(z, c):
    assert step(z.conjugate(), c.conjugate()) == step(z, c).conjugate()


def test_step_accepts_real_numbers():
    assert step(2, 0) == step(2 + 0j, 0j)
    assert step(-2, 0) == step(2, 0)