"""Tests for the Rectangle and Circle shapes."""

import math

import pytest

from objtasks.shapes import Circle, Rectangle


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_get_area(self):
        assert Rectangle(10, 20).get_area() == 200

    def test_area_property(self):
        assert Rectangle(3, 4).area == 12

    def test_area_follows_mutation(self):
        r = Rectangle(2, 5)
        r.width = 4
        assert r.get_area() == 20

    def test_zero_size(self):
        assert Rectangle(0, 7).get_area() == 0

    def test_equality(self):
        assert Rectangle(1, 2) == Rectangle(1, 2)
        assert Rectangle(1, 2) != Rectangle(2, 1)


class TestCircle:
    def test_get_area(self):
        assert Circle(10).get_area() == pytest.approx(math.pi * 100)

    def test_area_property(self):
        assert Circle(1).area == pytest.approx(math.pi)
