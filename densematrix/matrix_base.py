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
"""Matrix interface shared by owned matrices and views

MatrixBase is the read/write/shape contract of a matrix: element access by
1-indexed (row, column), ``width`` and ``height``. All arithmetic is
implemented here against that contract, so a MatrixView can take part in any
expression a Matrix can. Operators that do not assign always return a new
Matrix; assigning operators (``+=``, ``*=``, ...) write through
``set_value_at`` and return the receiver.
"""

from abc import ABC, abstractmethod
from numbers import Real
from typing import Iterator, List, Tuple
import numpy as np

from .errors import ShapeError, DimensionMismatch, RangeError, MatrixIndexError
from .names import ROW, COLUMN, TOLERANCE
from .text_io import format_matrix


class MatrixBase(ABC):
    """Base interface of Matrix and MatrixView"""

    # mutable, so not hashable
    __hash__ = None
    # numpy operands defer to the reflected operators below
    __array_ufunc__ = None

    @property
    @abstractmethod
    def height(self) -> int:
        """Number of rows"""
        pass

    @property
    @abstractmethod
    def width(self) -> int:
        """Number of columns"""
        pass

    @abstractmethod
    def get_value_at(self, row: int, col: int) -> float:
        """Get the value at the 1-indexed position (row, col)"""
        pass

    @abstractmethod
    def set_value_at(self, row: int, col: int, value: float) -> None:
        """Set the value at the 1-indexed position (row, col)"""
        pass

    @abstractmethod
    def assign(self, source: 'MatrixBase') -> 'MatrixBase':
        """Replace the values of this matrix with those of source"""
        pass

    # Shape

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    def is_same_shape(self, other: 'MatrixBase') -> bool:
        """Checks if this and another matrix have the same dimensions"""
        return self.width == other.width and self.height == other.height

    def _coordinates(self) -> Iterator[Tuple[int, int]]:
        for row in range(1, self.height + 1):
            for col in range(1, self.width + 1):
                yield row, col

    def _check_coordinate(self, row: int, col: int) -> None:
        if not (1 <= row <= self.height and 1 <= col <= self.width):
            raise MatrixIndexError(f"Position ({row}, {col}) does not exist in a "
                                   f"{self.height}x{self.width} matrix.")

    def _require_same_shape(self, other: 'MatrixBase') -> None:
        if not self.is_same_shape(other):
            raise ShapeError(f"Operands must have like dimensions: {self.height}x{self.width} "
                             f"and {other.height}x{other.width}.")

    # Element access

    def __getitem__(self, key: Tuple[int, int]) -> float:
        row, col = _unpack_key(key)
        return self.get_value_at(row, col)

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        row, col = _unpack_key(key)
        self.set_value_at(row, col, value)

    def set_at(self, row: int, col: int, source: 'MatrixBase') -> None:
        """Starting at (row, col), fill in the values of source

        Raises:
            RangeError: If source does not fit into this matrix at (row, col).
        """
        if row < 1 or col < 1 or row + source.height - 1 > self.height or col + source.width - 1 > self.width:
            raise RangeError(f"A {source.height}x{source.width} matrix placed at ({row}, {col}) "
                             f"does not fit into a {self.height}x{self.width} matrix.")
        # read everything first, source may alias this matrix
        staged = source.to_list()
        for row_offset, values in enumerate(staged):
            for col_offset, value in enumerate(values):
                self.set_value_at(row + row_offset, col + col_offset, value)

    def select(self, address: str) -> 'MatrixView':
        """Returns a view on a whole row ('R<n>') or column ('C<n>')"""
        from .matrix_view import select
        return select(self, address)

    # Conversion

    def to_list(self) -> List[List[float]]:
        """Get all rows as a 2D list of floats"""
        return [[self.get_value_at(row, col) for col in range(1, self.width + 1)] for row in range(1, self.height + 1)]

    def to_numpy(self) -> np.ndarray:
        """Copy the values into a (height, width) numpy array"""
        return np.array(self.to_list(), dtype=float).reshape(self.height, self.width)

    def copy(self) -> 'Matrix':
        from .matrix import Matrix
        return Matrix(self)

    def transposed(self) -> 'Matrix':
        """Returns a transposed copy of this matrix"""
        from .matrix import Matrix
        result = Matrix()
        result._install(self.width, self.height,
                        {(col, row): self.get_value_at(row, col) for row, col in self._coordinates()})
        return result

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row. O(n!)."""
        from .gauss import Gauss
        return Gauss.get_instance().determinant(self)

    def inverse(self, tolerance: float = 0.0) -> 'Matrix':
        """Inverse by Gauss-Jordan elimination

        Args:
            tolerance (optional (float)): (Default: 0.0)
                Determinants with an absolute value not above this tolerance are
                treated as zero.

        Raises:
            DomainError: If the matrix is not square or not invertible.
        """
        from .gauss import Gauss
        return Gauss(tolerance).invert(self)

    def is_close(self, other: 'MatrixBase', tolerance: float = TOLERANCE) -> bool:
        """Same shape and all values within an absolute tolerance"""
        if not self.is_same_shape(other):
            return False
        return all(abs(self.get_value_at(r, c) - other.get_value_at(r, c)) <= tolerance for r, c in self._coordinates())

    def __eq__(self, other):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.is_same_shape(other) and all(
            self.get_value_at(r, c) == other.get_value_at(r, c) for r, c in self._coordinates())

    def __str__(self) -> str:
        return format_matrix(self)

    # Scalar and matrix multiplication

    def _product(self, other: 'MatrixBase') -> 'Matrix':
        from .matrix import Matrix
        if self.width != other.height:
            raise DimensionMismatch(f"Right operand must have as many rows as the left has columns: "
                                    f"{self.height}x{self.width} * {other.height}x{other.width}.")
        rows = []
        for row in range(1, self.height + 1):
            left_row = self.select(f"{ROW}{row}")
            values = []
            for col in range(1, other.width + 1):
                right_col = other.select(f"{COLUMN}{col}")
                values.append(sum(left_row.get_value_at(1, i) * right_col.get_value_at(i, 1)
                                  for i in range(1, self.width + 1)))
            rows.append(values)
        return Matrix(rows)

    def __imul__(self, other):
        if isinstance(other, MatrixBase):
            return self.assign(self._product(other))
        if not isinstance(other, Real):
            return NotImplemented
        for row, col in self._coordinates():
            self.set_value_at(row, col, self.get_value_at(row, col) * other)
        return self

    def __mul__(self, other):
        if not isinstance(other, (MatrixBase, Real)):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return self * other

    def __matmul__(self, other):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self * other

    def __imatmul__(self, other):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        self *= other
        return self

    # Scalar division and vertical concatenation

    def __itruediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Division of a matrix by zero.")
        for row, col in self._coordinates():
            self.set_value_at(row, col, self.get_value_at(row, col) / other)
        return self

    def __truediv__(self, other):
        if isinstance(other, MatrixBase):
            from .concat import concat_vertical
            return concat_vertical(self, other)
        if not isinstance(other, Real):
            return NotImplemented
        result = self.copy()
        result /= other
        return result

    def __or__(self, other):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        from .concat import concat_horizontal
        return concat_horizontal(self, other)

    def __neg__(self) -> 'Matrix':
        return self * -1

    def __pos__(self) -> 'Matrix':
        return self.copy()

    # Addition and subtraction

    def __iadd__(self, other):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        self._require_same_shape(other)
        staged = [(row, col, self.get_value_at(row, col) + other.get_value_at(row, col))
                  for row, col in self._coordinates()]
        for row, col, value in staged:
            self.set_value_at(row, col, value)
        return self

    def __add__(self, other):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __isub__(self, other):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        self._require_same_shape(other)
        self += -other
        return self

    def __sub__(self, other):
        if not isinstance(other, MatrixBase):
            return NotImplemented
        result = self.copy()
        result -= other
        return result


def _unpack_key(key) -> Tuple[int, int]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"Matrix positions are (row, column) pairs, got {key!r}")
    return key
