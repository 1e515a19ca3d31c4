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
"""Least-squares polynomial fitting with the normal equations"""

import logging
from typing import Iterable

from .errors import ShapeError, DomainError
from .matrix import Matrix

LOG = logging.getLogger(__name__)


def vandermonde(xs: Iterable[float], order: int) -> Matrix:
    """Vandermonde matrix with one row [x^order, ..., x^2, x, 1] per x value"""
    if order < 0:
        raise DomainError(f"Polynomial order must not be negative: {order}")
    return Matrix([[float(x)**power for power in range(order, -1, -1)] for x in xs])


def polyfit(xs: Iterable[float], ys: Iterable[float], order: int) -> Matrix:
    """Fit a polynomial of the given order to data points

    Solves the normal equations VᵀV a = Vᵀy, where V is the Vandermonde matrix
    of the x values.

    Example:
        coefficients = polyfit([0, 1, 2], [1, 3, 7], 2)

    Args:
        xs (list of float):
            x values of the data points.

        ys (list of float):
            y values of the data points.

        order (int):
            Order of the fitted polynomial.

    Returns:
        (Matrix):
        Column vector of the order + 1 coefficients, highest power first.

    Raises:
        ShapeError: If xs and ys have different lengths.
        DomainError: If there are fewer distinct x values than coefficients.
    """
    xs = list(xs)
    ys = list(ys)
    if len(xs) != len(ys):
        raise ShapeError(f"Got {len(xs)} x values but {len(ys)} y values.")
    if len(xs) < order + 1:
        raise DomainError(f"A polynomial of order {order} needs at least {order + 1} data points, got {len(xs)}.")
    v = vandermonde(xs, order)
    v_t = v.transposed()
    LOG.debug(f"Vandermonde matrix:\n{v}")
    return (v_t * v).inverse() * v_t * Matrix(ys)


def format_polynomial(coefficients: Matrix) -> str:
    """Renders a column of coefficients as 'a x^n + ... + b x + c'"""
    degree = coefficients.height - 1
    terms = []
    for row in range(1, coefficients.height + 1):
        power = degree - row + 1
        value = f"{coefficients[row, 1]:g}"
        if power == 0:
            terms.append(value)
        elif power == 1:
            terms.append(value + "x")
        else:
            terms.append(f"{value}x^{power}")
    return " + ".join(terms)
