"""
Shared fixtures for the primitive and editor tests.
"""

import pytest

from shapes import Circle, Rectangle, Triangle, Group
from editor import build_demo_scene


@pytest.fixture
def circle() -> Circle:
    return Circle(10, 20, 5)


@pytest.fixture
def rectangle() -> Rectangle:
    return Rectangle(30, 40, 8, 12)


@pytest.fixture
def triangle() -> Triangle:
    return Triangle(50, 60, 10)


@pytest.fixture
def group(circle, rectangle) -> Group:
    g = Group(0, 0)
    g.add_member(circle)
    g.add_member(rectangle)
    return g


@pytest.fixture
def demo_scene():
    return build_demo_scene()
