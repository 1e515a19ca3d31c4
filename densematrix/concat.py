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
"""Vertical and horizontal concatenation of matrices"""

from .errors import ShapeError
from .matrix import Matrix


def concat_vertical(upper, lower) -> Matrix:
    """Stacks the rows of lower below the rows of upper (``upper / lower``)

    Raises:
        ShapeError: If the matrices have different widths.
    """
    if upper.width != lower.width:
        raise ShapeError(f"Can't vertically concatenate matrices of different widths: "
                         f"{upper.width} and {lower.width}.")
    return Matrix(upper.to_list() + lower.to_list())


def concat_horizontal(left, right) -> Matrix:
    """Places the columns of right next to the columns of left (``left | right``)

    With left = [[a, b], [c, d]] and right = [[e, f], [g, h]], (left | right)ᵀ
    is [[a, c], [b, d], [e, g], [f, h]], which is leftᵀ / rightᵀ.

    Raises:
        ShapeError: If the matrices have different heights.
    """
    if left.height != right.height:
        raise ShapeError(f"Can't horizontally concatenate matrices of different heights: "
                         f"{left.height} and {right.height}.")
    return concat_vertical(left.transposed(), right.transposed()).transposed()
