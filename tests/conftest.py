import pytest
import densematrix as dm


@pytest.fixture
def a2():
    return dm.Matrix([[1, 2], [3, 4]])


@pytest.fixture
def b2():
    return dm.Matrix([[5, 6], [7, 8]])


@pytest.fixture
def m3():
    """Provide a 3x3 matrix with distinct entries."""
    return dm.Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def invertible3():
    """Provide an invertible 3x3 matrix with determinant 37 and nonzero pivots."""
    return dm.Matrix([[4, 3, 2], [1, 3, 1], [2, 1, 5]])


@pytest.fixture
def invertible4():
    return dm.Matrix([[2, 1, 0, 3], [1, 4, 1, 0], [0, 2, 5, 1], [1, 0, 1, 6]])
