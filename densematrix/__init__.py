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
"""densematrix: dense matrices with views, determinants and Gauss-Jordan inversion"""

from .names import *
import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .errors import *
from .matrix_base import MatrixBase
from .matrix import Matrix
from .matrix_view import MatrixView, select
from .concat import concat_vertical, concat_horizontal
from .gauss import Gauss
from .text_io import parse_rows, read_matrix, format_value, format_matrix, write_matrix
from .polyfit import vandermonde, polyfit, format_polynomial
