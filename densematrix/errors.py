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
"""Exceptions raised by densematrix

Every error derives from MatrixError and from the closest builtin exception,
so callers may catch either ``MatrixError`` or e.g. ``ValueError``.
"""


class MatrixError(Exception):
    """Base class of all densematrix errors"""


class ShapeError(MatrixError, ValueError):
    """Operand dimensions are incompatible"""


class DimensionMismatch(ShapeError):
    """Left width and right height of a matrix product disagree"""


class RangeError(MatrixError, IndexError):
    """A view or placement extends outside the target matrix"""


class MatrixIndexError(MatrixError, IndexError):
    """An element access addresses a coordinate that does not exist"""


class DomainError(MatrixError, ArithmeticError):
    """Operation is undefined for the given matrix"""


class FormatError(MatrixError, ValueError):
    """An address string could not be parsed"""
