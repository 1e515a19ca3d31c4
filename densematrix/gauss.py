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
"""Determinant and inverse of square matrices

The determinant is computed by recursive cofactor expansion along the first
row and the inverse by Gauss-Jordan elimination without row exchanges. Both
work on views and concatenations of the input and never modify it.
"""

import logging

from .errors import DomainError
from .matrix import Matrix
from .matrix_base import MatrixBase
from .matrix_view import MatrixView
from .names import ROW, COFACTOR_WARN_SIZE

LOG = logging.getLogger(__name__)


class Gauss:
    """Determinant and Gauss-Jordan inversion

    Args:
        tolerance (optional (float)): (Default: 0.0)
            A matrix whose determinant has an absolute value not above the
            tolerance is treated as singular.
    """

    _instance = None

    def __init__(self, tolerance: float = 0.0):
        self.tolerance = tolerance

    @classmethod
    def get_instance(cls) -> 'Gauss':
        """Get shared instance with zero tolerance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def determinant(self, matrix: MatrixBase) -> float:
        """Determinant by cofactor expansion along the first row

        The cost grows with n!, so matrices larger than COFACTOR_WARN_SIZE are
        reported with a warning. The determinant of the empty matrix is 1.

        Raises:
            DomainError: If the matrix is not square.
        """
        if matrix.width != matrix.height:
            raise DomainError(f"Can't compute determinant of nonsquare matrix: {matrix.height}x{matrix.width}")
        if matrix.width == 0:
            return 1.0
        if matrix.width > COFACTOR_WARN_SIZE:
            LOG.warning(f"Cofactor expansion of a {matrix.height}x{matrix.width} matrix, this may take very long.")
        return _cofactor_expansion(matrix)

    def is_singular(self, matrix: MatrixBase) -> bool:
        return abs(self.determinant(matrix)) <= self.tolerance

    def invert(self, matrix: MatrixBase) -> Matrix:
        """Inverse by Gauss-Jordan elimination

        For row N, divide it by its Nth element. Then, for every other row M,
        subtract row N multiplied by the Nth element of row M. This turns the
        working copy into an identity matrix. Applying the same steps to an
        identity matrix yields the inverse.

        Raises:
            DomainError: If the matrix is not square, singular, or a zero pivot
                is met (rows are never exchanged).
        """
        if self.is_singular(matrix):
            raise DomainError("Matrix not invertible.")
        size = matrix.height
        working = Matrix(matrix)
        inverse = Matrix.identity(size)
        for row in range(1, size + 1):
            address = f"{ROW}{row}"
            working_row = working.select(address)
            inverse_row = inverse.select(address)
            pivot = working[row, row]
            if pivot == 0:
                raise DomainError(f"Zero pivot in row {row}, matrix can't be inverted without row exchanges.")
            working_row /= pivot
            inverse_row /= pivot
            for other in range(1, size + 1):
                if other == row:
                    continue
                other_address = f"{ROW}{other}"
                factor = working[other, row]
                working_other = working.select(other_address)
                working_other -= factor * working_row
                inverse_other = inverse.select(other_address)
                inverse_other -= factor * inverse_row
            if LOG.isEnabledFor(logging.DEBUG):
                LOG.debug(f"Gauss-Jordan step {row} of {size}:\n{working | inverse}")
        return inverse


def _minor(matrix: MatrixBase, col: int) -> MatrixBase:
    """Rows 2..n of matrix without column col"""
    size = matrix.width
    if col == 1:
        return MatrixView(matrix, 2, 2, size, size)
    if col == size:
        return MatrixView(matrix, 2, 1, size, size - 1)
    # concatenate the submatrices on either side of the column
    return MatrixView(matrix, 2, 1, size, col - 1) | MatrixView(matrix, 2, col + 1, size, size)


def _cofactor_expansion(matrix: MatrixBase) -> float:
    size = matrix.width
    if size == 1:
        return matrix[1, 1]
    if size == 2:
        return matrix[1, 1] * matrix[2, 2] - matrix[1, 2] * matrix[2, 1]
    determinant = 0.0
    for col in range(1, size + 1):
        sign = 1 if col % 2 == 1 else -1
        determinant += sign * matrix[1, col] * _cofactor_expansion(_minor(matrix, col))
    return determinant
