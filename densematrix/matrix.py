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
"""Dense matrix of floating-point numbers

Values are kept in a dictionary keyed by 1-indexed (row, column) pairs. The
shape is fixed at construction and only changes through ``assign``, which
replaces every value at once.
"""

from typing import Dict, List, Tuple
import numpy as np

from .errors import ShapeError, MatrixIndexError
from .matrix_base import MatrixBase
from .text_io import parse_rows


def _is_row(item) -> bool:
    return isinstance(item, (list, tuple)) or (isinstance(item, np.ndarray) and item.ndim == 1)


class Matrix(MatrixBase):
    """Matrix class. Does matrix math. Cannot be resized except by reassignment.

    Supported signatures:
    - Matrix() - empty matrix
    - Matrix([[1, 2], [3, 4]]) - from a list of rows
    - Matrix([1, 2, 3]) - column vector from a flat list
    - Matrix("1 2\\n3 4\\n") or Matrix(stream) - parsed from text
    - Matrix(other) - copy of a Matrix or MatrixView
    - Matrix(array) - from a 1-D (column vector) or 2-D numpy array

    Example:
        >>> a = Matrix([[1, 2], [3, 4]])
        >>> a.determinant()
        -2.0
        >>> a[2, 1]
        3.0
    """

    def __init__(self, data=None):
        self._height = 0
        self._width = 0
        self._values: Dict[Tuple[int, int], float] = {}
        if data is None:
            return
        if isinstance(data, MatrixBase):
            self.assign(data)
        elif isinstance(data, np.ndarray):
            self._init_from_numpy(data)
        elif isinstance(data, str) or hasattr(data, 'readline'):
            self._init_from_rows(parse_rows(data))
        else:
            data = list(data)
            if data and _is_row(data[0]):
                self._init_from_rows(data)
            else:
                self._init_from_column(data)

    def _init_from_rows(self, rows: List[List[float]]):
        width = None
        values = {}
        for row, numbers in enumerate(rows, start=1):
            if not _is_row(numbers):
                raise ShapeError(f"Row {row} is not a sequence of numbers: {numbers!r}")
            numbers = list(numbers)
            if width is None:
                if not numbers:
                    raise ShapeError("Matrix rows must not be empty.")
                width = len(numbers)
            elif len(numbers) != width:
                raise ShapeError(f"Matrix must have uniform width: row {row} has {len(numbers)} "
                                 f"values, expected {width}.")
            for col, value in enumerate(numbers, start=1):
                values[(row, col)] = float(value)
        self._install(len(rows), width or 0, values)

    def _init_from_column(self, numbers: List[float]):
        # construct as a single row, then transpose
        if not numbers:
            return
        self._init_from_rows([numbers])
        self.assign(self.transposed())

    def _init_from_numpy(self, array: np.ndarray):
        if array.ndim == 1:
            self._init_from_column(array.tolist())
        elif array.ndim == 2:
            self._init_from_rows(array.tolist() if array.size else [])
        else:
            raise ShapeError(f"Expected a 1-D or 2-D array, got {array.ndim} dimensions.")

    def _install(self, height: int, width: int, values: Dict[Tuple[int, int], float]):
        self._height = height
        self._width = width
        self._values = values

    @classmethod
    def identity(cls, dimension: int) -> 'Matrix':
        """Generates an identity matrix with the given dimension"""
        if dimension < 0:
            raise ShapeError(f"negative dimension: {dimension}")
        return cls([[1.0 if row == col else 0.0 for col in range(dimension)] for row in range(dimension)])

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def get_value_at(self, row: int, col: int) -> float:
        try:
            return self._values[(row, col)]
        except KeyError:
            raise MatrixIndexError(f"Position ({row}, {col}) does not exist in a "
                                   f"{self._height}x{self._width} matrix.") from None

    def set_value_at(self, row: int, col: int, value: float) -> None:
        if (row, col) not in self._values:
            raise MatrixIndexError(f"Position ({row}, {col}) does not exist in a "
                                   f"{self._height}x{self._width} matrix.")
        self._values[(row, col)] = float(value)

    def assign(self, source: MatrixBase) -> 'Matrix':
        """Copy assignment. Replaces shape and values completely.

        All values of source are read before anything is written, so source may
        be a view on this matrix. Views on this matrix become invalid if the
        shape changes.
        """
        if source is self:
            return self
        values = {(row, col): source.get_value_at(row, col) for row, col in source._coordinates()}
        self._install(source.height, source.width, values)
        return self

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"
