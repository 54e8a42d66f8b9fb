"""Global pytest configuration for the typewrap test suite.

Fixtures give each test a private validation context and make sure the
process-wide toggle is back on afterwards.
"""

import pytest

import typewrap
from typewrap import Runtime


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "runtime: tests the validation toggle")
    config.addinivalue_line("markers", "parser: tests textual signatures")


@pytest.fixture(autouse=True)
def restore_validation():
    """Leave the process-wide toggle enabled after every test."""
    yield
    typewrap.set_validation_enabled(True)


@pytest.fixture
def runtime() -> Runtime:
    """Provide a private validation context."""
    return Runtime()


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class Point3D(Point):
    def __init__(self, x, y, z):
        super().__init__(x, y)
        self.z = z


@pytest.fixture
def point_cls() -> type:
    return Point


@pytest.fixture
def point3d_cls() -> type:
    return Point3D
