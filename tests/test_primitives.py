import io
import math

import pytest

from shapes import Primitive, Circle, Rectangle, Triangle, scale_length


class TestScaleLength:
    @pytest.mark.parametrize(
        "value, factor, expected",
        [
            (5, 2, 10),
            (5, 2.5, 12),
            (-5, 2.5, -12),
            (7, 0.5, 3),
            (-7, 0.5, -3),
            (10, 0, 0),
            (10, -1.5, -15),
            (0, 3.0, 0),
        ],
    )
    def test_truncates_toward_zero(self, value, factor, expected):
        assert scale_length(value, factor) == expected

    def test_uses_single_precision(self):
        # 2**24 + 1 has no exact float32 representation
        assert scale_length(16777217, 1.0) == 16777216

    @pytest.mark.parametrize("factor", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite_factor(self, factor):
        with pytest.raises(ValueError):
            scale_length(3, factor)

    def test_rejects_overflowing_product(self):
        with pytest.raises(ValueError):
            scale_length(10**38, 10.0)


class TestDraw:
    def test_circle_line(self, circle, capsys):
        circle.draw()
        assert capsys.readouterr().out == "Drawing Circle at (10, 20) with Radius 5\n"

    def test_rectangle_line(self, rectangle):
        buf = io.StringIO()
        rectangle.draw(buf)
        assert buf.getvalue() == "Drawing Rectangle at (30, 40) with Width 8 and Height 12\n"

    def test_triangle_line(self, triangle):
        assert triangle.describe() == "Drawing Triangle at (50, 60) with Side Length 10"

    def test_negative_sizes_are_drawn_as_is(self):
        assert Circle(-1, -2, -3).describe() == "Drawing Circle at (-1, -2) with Radius -3"

    def test_repr_does_not_need_describe(self):
        assert repr(Primitive(3, 4)) == "<Primitive at (3, 4)>"
        assert repr(Circle(1, 2, 3)) == "<Circle at (1, 2)>"

    def test_base_primitive_is_abstract(self):
        p = Primitive(0, 0)
        with pytest.raises(NotImplementedError):
            p.describe()
        with pytest.raises(NotImplementedError):
            p.scale(2)


class TestMove:
    def test_shifts_position_only(self, rectangle):
        rectangle.move(-35, 5)
        assert (rectangle.x, rectangle.y) == (-5, 45)
        assert (rectangle.width, rectangle.height) == (8, 12)

    @pytest.mark.parametrize("shape", [Circle(1, 1, 4), Triangle(1, 1, 4)])
    def test_sizes_unchanged(self, shape):
        before = shape.describe().split(" with ")[1]
        shape.move(100, -100)
        assert (shape.x, shape.y) == (101, -99)
        assert shape.describe().split(" with ")[1] == before


class TestScale:
    def test_circle(self, circle):
        circle.scale(1.5)
        assert circle.radius == 7
        assert (circle.x, circle.y) == (10, 20)

    def test_rectangle_uses_same_factor_for_both_sides(self, rectangle):
        rectangle.scale(0.5)
        assert (rectangle.width, rectangle.height) == (4, 6)
        assert (rectangle.x, rectangle.y) == (30, 40)

    def test_triangle(self, triangle):
        triangle.scale(-2)
        assert triangle.side_length == -20

    def test_zero_factor(self, circle):
        circle.scale(0)
        assert circle.radius == 0
        assert circle.describe().endswith("Radius 0")

    def test_rectangle_left_untouched_when_one_side_overflows(self):
        r = Rectangle(0, 0, 10, 10**38)
        with pytest.raises(ValueError):
            r.scale(10.0)
        assert (r.width, r.height) == (10, 10**38)
