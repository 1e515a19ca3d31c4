"""Determinants and Gauss-Jordan inversion, cross-checked with scipy."""
import logging
import pytest
import numpy as np
from scipy import linalg
import densematrix as dm
import densematrix.gauss


def test_determinant_2x2(a2):
    assert a2.determinant() == -2


def test_determinant_small_cases():
    assert dm.Matrix([[7]]).determinant() == 7
    assert dm.Matrix.identity(4).determinant() == 1
    assert dm.Matrix().determinant() == 1


def test_determinant_3x3(invertible3, m3):
    assert invertible3.determinant() == pytest.approx(37)
    assert m3.determinant() == pytest.approx(0)


def test_determinant_sign_convention():
    # cyclic permutation, only the second column contributes
    assert dm.Matrix([[0, 1, 0], [0, 0, 1], [1, 0, 0]]).determinant() == 1
    assert dm.Matrix([[0, 1, 0], [1, 0, 0], [0, 0, 1]]).determinant() == -1


def test_determinant_matches_scipy(invertible4):
    assert invertible4.determinant() == pytest.approx(linalg.det(invertible4.to_numpy()))
    rng = np.random.default_rng(42)
    arr = rng.normal(size=(5, 5))
    assert dm.Matrix(arr).determinant() == pytest.approx(linalg.det(arr))


def test_determinant_nonsquare():
    with pytest.raises(dm.DomainError):
        dm.Matrix([[1, 2, 3], [4, 5, 6]]).determinant()
    with pytest.raises(ArithmeticError):
        dm.Matrix([1, 2]).determinant()


def test_determinant_does_not_modify(invertible3):
    before = dm.Matrix(invertible3)
    invertible3.determinant()
    assert invertible3 == before


def test_inverse_2x2(a2):
    assert a2.inverse().is_close(dm.Matrix([[-2, 1], [1.5, -0.5]]))


def test_inverse_is_inverse(invertible3, invertible4):
    for a in [invertible3, invertible4]:
        eye = dm.Matrix.identity(a.height)
        assert (a * a.inverse()).is_close(eye)
        assert (a.inverse() * a).is_close(eye)


def test_inverse_matches_scipy(invertible4):
    np.testing.assert_allclose(invertible4.inverse().to_numpy(), linalg.inv(invertible4.to_numpy()), atol=1e-12)


def test_inverse_does_not_modify(invertible3):
    before = dm.Matrix(invertible3)
    invertible3.inverse()
    assert invertible3 == before


def test_inverse_singular():
    with pytest.raises(dm.DomainError, match="not invertible"):
        dm.Matrix([[1, 2], [2, 4]]).inverse()
    with pytest.raises(dm.DomainError):
        dm.Matrix([[1, 2, 3]]).inverse()


def test_inverse_zero_pivot():
    swap = dm.Matrix([[0, 1], [1, 0]])
    assert swap.determinant() == -1
    with pytest.raises(dm.DomainError, match="pivot"):
        swap.inverse()


def test_inverse_tolerance():
    nearly_singular = dm.Matrix([[1, 2], [2, 4.0000001]])
    assert nearly_singular.inverse() is not None
    with pytest.raises(dm.DomainError):
        nearly_singular.inverse(tolerance=1e-3)
    with pytest.raises(dm.DomainError):
        dm.Gauss(1e-3).invert(nearly_singular)


def test_inverse_of_view(invertible4):
    block = dm.MatrixView(invertible4, 1, 1, 2, 2)
    assert (block * block.inverse()).is_close(dm.Matrix.identity(2))


def test_inverse_logs_elimination_steps(a2, caplog):
    with caplog.at_level(logging.DEBUG, logger="densematrix.gauss"):
        a2.inverse()
    steps = [r for r in caplog.records if "Gauss-Jordan step" in r.getMessage()]
    assert len(steps) == 2


def test_large_cofactor_expansion_warns(invertible3, caplog, monkeypatch):
    monkeypatch.setattr(densematrix.gauss, "COFACTOR_WARN_SIZE", 2)
    with caplog.at_level(logging.WARNING, logger="densematrix.gauss"):
        invertible3.determinant()
    assert any("Cofactor expansion" in r.getMessage() for r in caplog.records)


def test_disable_logger(invertible3, caplog, monkeypatch):
    monkeypatch.setattr(densematrix.gauss, "COFACTOR_WARN_SIZE", 2)
    with caplog.at_level(logging.WARNING, logger="densematrix.gauss"):
        with dm.DisableLogger():
            invertible3.determinant()
    assert not caplog.records
