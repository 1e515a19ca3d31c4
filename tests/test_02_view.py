"""Matrix views: aliasing, address parsing and arithmetic through views."""
import pytest
import densematrix as dm
from densematrix import MatrixView


def test_view_reads_target(m3):
    view = MatrixView(m3, 2, 2, 3, 3)
    assert view.shape == (2, 2)
    assert view.head_row == 2
    assert view.head_column == 2
    assert view.target is m3
    assert view.to_list() == [[5, 6], [8, 9]]


def test_view_writes_through(m3):
    view = MatrixView(m3, 2, 2, 3, 3)
    view[1, 1] = 50
    assert m3[2, 2] == 50.0
    m3[3, 3] = 90
    assert view[2, 2] == 90.0


def test_view_out_of_range(m3):
    with pytest.raises(dm.RangeError):
        MatrixView(m3, 1, 1, 4, 3)
    with pytest.raises(dm.RangeError):
        MatrixView(m3, 1, 2, 3, 4)
    with pytest.raises(IndexError):
        MatrixView(m3, 0, 1, 1, 1)
    with pytest.raises(dm.RangeError):
        MatrixView(m3, 2, 1, 1, 1)


def test_view_local_bounds(m3):
    view = MatrixView(m3, 1, 1, 2, 2)
    with pytest.raises(dm.MatrixIndexError):
        view[3, 1]
    with pytest.raises(dm.MatrixIndexError):
        view[1, 3] = 0
    assert m3[1, 3] == 3.0


def test_view_of_view_refers_to_matrix(m3):
    outer = MatrixView(m3, 2, 1, 3, 3)
    inner = MatrixView(outer, 1, 2, 2, 3)
    assert inner.target is m3
    assert (inner.head_row, inner.head_column) == (2, 2)
    assert inner.to_list() == [[5, 6], [8, 9]]
    with pytest.raises(dm.RangeError):
        MatrixView(outer, 1, 1, 3, 1)


def test_select_row(m3):
    row = m3.select("R2")
    assert row.height == 1
    assert row.width == 3
    assert row[1, 1] == m3[2, 1]
    assert row.to_list() == [[4, 5, 6]]


def test_select_column(m3):
    col = dm.select(m3, "C3")
    assert col.shape == (3, 1)
    assert col.to_list() == [[3], [6], [9]]


def test_select_out_of_range(m3):
    with pytest.raises(dm.RangeError):
        m3.select("R5")
    with pytest.raises(dm.RangeError):
        m3.select("C0")


def test_select_bad_format(m3):
    for address in ["X1", "r1", "", "1R"]:
        with pytest.raises(dm.FormatError):
            m3.select(address)
    with pytest.raises(dm.FormatError) as excinfo:
        m3.select("Rtwo")
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_view_assign(m3):
    row = m3.select("R1")
    same = row
    assert row.assign(dm.Matrix([[0, 0, 0]])) is same
    assert m3.to_list() == [[0, 0, 0], [4, 5, 6], [7, 8, 9]]
    assert row.shape == (1, 3)


def test_view_assign_shape_mismatch(m3):
    with pytest.raises(dm.ShapeError):
        m3.select("R1").assign(dm.Matrix([1, 2, 3]))
    assert m3 == dm.Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


def test_view_assign_from_overlapping_view(m3):
    left = MatrixView(m3, 1, 1, 2, 2)
    right = MatrixView(m3, 1, 2, 2, 3)
    right.assign(left)
    assert m3.to_list() == [[1, 1, 2], [4, 4, 5], [7, 8, 9]]


def test_view_add_overlapping_view(m3):
    left = MatrixView(m3, 1, 1, 2, 2)
    right = MatrixView(m3, 1, 2, 2, 3)
    right += left
    assert m3.to_list() == [[1, 3, 5], [4, 9, 11], [7, 8, 9]]


def test_row_operations_through_views(m3):
    row1 = m3.select("R1")
    row2 = m3.select("R2")
    row2 -= 4 * row1
    assert m3.to_list() == [[1, 2, 3], [0, -3, -6], [7, 8, 9]]
    row1 *= 2
    row1 /= 4
    assert m3.to_list()[0] == [0.5, 1, 1.5]


def test_view_arithmetic_returns_matrix(m3):
    row = m3.select("R1")
    total = row + row
    assert type(total) is dm.Matrix
    assert total == dm.Matrix([[2, 4, 6]])
    total[1, 1] = 0
    assert m3[1, 1] == 1.0
    assert row * m3.select("C1") == dm.Matrix([[1 * 1 + 2 * 4 + 3 * 7]])
    assert (m3.select("C2") | m3.select("C1")).to_list() == [[2, 1], [5, 4], [8, 7]]


def test_view_matrix_product_in_place(m3):
    row = m3.select("R3")
    row *= dm.Matrix.identity(3) * 2
    assert m3.to_list()[2] == [14, 16, 18]
    with pytest.raises(dm.ShapeError):
        row *= dm.Matrix([1, 1, 1])
    assert m3.to_list()[2] == [14, 16, 18]


def test_view_participates_in_determinant(m3):
    assert MatrixView(m3, 1, 1, 2, 2).determinant() == -3.0
    assert MatrixView(m3, 2, 2, 3, 3).transposed() == dm.Matrix([[5, 8], [6, 9]])


def test_view_str_and_repr(m3):
    view = MatrixView(m3, 1, 2, 1, 3)
    assert str(view) == "   2\t   3\t\n"
    assert repr(view) == "MatrixView(rows=1..1, columns=2..3, values=[[2.0, 3.0]])"
