#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Views on rectangular regions of a matrix

A MatrixView does not own any values. Reads and writes are translated to the
coordinates of the target matrix, so modifications through the view show up in
the target and vice versa. A view must not be used after its target has been
reassigned to a different shape.
"""

from .errors import ShapeError, RangeError, FormatError
from .matrix_base import MatrixBase
from .names import ROW, COLUMN


class MatrixView(MatrixBase):
    """A view on rows first_row..last_row and columns first_col..last_col of target

    The area of a view cannot be changed after construction. A view of a view
    refers directly to the underlying matrix.

    Example:
        >>> m = Matrix([[1, 2, 3], [4, 5, 6]])
        >>> view = MatrixView(m, 1, 2, 2, 3)
        >>> view[1, 1] = 0
        >>> m[1, 2]
        0.0
    """

    def __init__(self, target: MatrixBase, first_row: int, first_col: int, last_row: int, last_col: int):
        if not (1 <= first_row <= last_row <= target.height and 1 <= first_col <= last_col <= target.width):
            raise RangeError(f"The view's rows {first_row}..{last_row} and columns {first_col}..{last_col} "
                             f"extend outside the {target.height}x{target.width} matrix itself.")
        if isinstance(target, MatrixView):
            first_row += target.head_row - 1
            first_col += target.head_column - 1
            last_row += target.head_row - 1
            last_col += target.head_column - 1
            target = target.target
        self._target = target
        self._head_row = first_row
        self._head_column = first_col
        self._height = last_row - first_row + 1
        self._width = last_col - first_col + 1

    @property
    def target(self) -> MatrixBase:
        """The matrix this view accesses"""
        return self._target

    @property
    def head_row(self) -> int:
        """The index of the first row of the target that this view accesses"""
        return self._head_row

    @property
    def head_column(self) -> int:
        """The index of the first column of the target that this view accesses"""
        return self._head_column

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def get_value_at(self, row: int, col: int) -> float:
        self._check_coordinate(row, col)
        return self._target.get_value_at(self._head_row + row - 1, self._head_column + col - 1)

    def set_value_at(self, row: int, col: int, value: float) -> None:
        self._check_coordinate(row, col)
        self._target.set_value_at(self._head_row + row - 1, self._head_column + col - 1, value)

    def assign(self, source: MatrixBase) -> 'MatrixView':
        """Replaces the view's values with those of source

        Raises:
            ShapeError: If source and view have different dimensions.
        """
        if not self.is_same_shape(source):
            raise ShapeError(f"Assignment to MatrixView requires matrix of same dimensions: "
                             f"{self._height}x{self._width}, got {source.height}x{source.width}.")
        self.set_at(1, 1, source)
        return self

    def __repr__(self) -> str:
        return (f"MatrixView(rows={self._head_row}..{self._head_row + self._height - 1}, "
                f"columns={self._head_column}..{self._head_column + self._width - 1}, "
                f"values={self.to_list()!r})")


def select(matrix: MatrixBase, address: str) -> MatrixView:
    """Returns a view on a whole row or column of matrix

    The address is a selector character followed by a one-indexed number:
    'R<n>' selects row n and 'C<n>' selects column n.

    Example:
        select(m, 'R2') or m.select('C1')

    Raises:
        FormatError: If the selector is unknown or the number is not an integer.
        RangeError: If the row or column does not exist.
    """
    if not address or address[0] not in (ROW, COLUMN):
        raise FormatError(f"Address format incorrect: {address!r}")
    try:
        number = int(address[1:])
    except ValueError as err:
        raise FormatError(f"Address index is not an integer: {address!r}") from err
    if address[0] == ROW:
        return MatrixView(matrix, number, 1, number, matrix.width)
    return MatrixView(matrix, 1, number, matrix.height, number)
