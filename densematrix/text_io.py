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
"""Reading and writing matrices as whitespace-delimited text

A matrix is written one row per line. Within a row, values are separated by
whitespace. Input ends at the first blank line or at the end of the stream.
"""

import io
import logging
from typing import List, TextIO, Union

from .errors import ShapeError
from .names import FIELD_WIDTH, PRECISION, SEPARATOR

LOG = logging.getLogger(__name__)


def _parse_line(line: str) -> List[float]:
    values = []
    for token in line.split():
        try:
            values.append(float(token))
        except ValueError:
            # a malformed token ends the row
            LOG.debug(f"Stopped reading row at malformed token {token!r}.")
            break
    return values


def parse_rows(source: Union[str, TextIO]) -> List[List[float]]:
    """Parses rows of numbers from a string or text stream

    Lines are read until a blank line or the end of the stream. The first row
    fixes the width of the matrix, every following row must have the same
    number of values. Lines after the terminating blank line are not consumed.

    Args:
        source (str or text stream):
            E.g.: "1 2\\n3 4\\n" or io.StringIO("1 2\\n3 4\\n") or sys.stdin

    Returns:
        (List of lists of float):
        The rows of the matrix. E.g.: [[1.0, 2.0], [3.0, 4.0]]

    Raises:
        ShapeError: If a row has a different number of values than the first.
    """
    if isinstance(source, str):
        source = io.StringIO(source)
    rows = []
    width = None
    for line_no, line in enumerate(iter(source.readline, ''), start=1):
        if not line.strip():
            break
        values = _parse_line(line)
        if width is None:
            if not values:
                raise ShapeError(f"Line {line_no} does not start with a number: {line.rstrip()!r}")
            width = len(values)
        elif len(values) != width:
            raise ShapeError(f"Matrix must have uniform width: line {line_no} has {len(values)} "
                             f"values, expected {width}.")
        rows.append(values)
    return rows


def read_matrix(source: Union[str, TextIO]) -> 'Matrix':
    """Reads a Matrix from a string or text stream (see parse_rows)"""
    from .matrix import Matrix
    return Matrix(parse_rows(source))


def format_value(value: float, width: int = FIELD_WIDTH, precision: int = PRECISION) -> str:
    """Right-justify value in a field of the given width, with the given significant digits"""
    if value == 0:
        # mixing negative and positive zero is ugly
        value = 0.0
    return f"{value:{width}.{precision}g}"


def format_matrix(matrix, width: int = FIELD_WIDTH, precision: int = PRECISION) -> str:
    """Renders a matrix as text

    Every value is followed by a tab, every row by a newline.
    """
    return ''.join(''.join(format_value(value, width, precision) + SEPARATOR for value in row) + '\n'
                   for row in matrix.to_list())


def write_matrix(matrix, writer: TextIO, width: int = FIELD_WIDTH, precision: int = PRECISION) -> None:
    """Write the text rendering of matrix to a text stream"""
    writer.write(format_matrix(matrix, width, precision))
