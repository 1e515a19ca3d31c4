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
"""Command line front end: fit a polynomial to data read from stdin

    usage: densematrix-polyfit [--order N] [--plot] [--plt_backend BACKEND] [--verbose]

Data is entered as one 'x y' pair per line and ended with a blank line.
"""

from argparse import ArgumentParser
import logging
import sys
from typing import List, TextIO, Tuple

import matplotlib.pyplot as plt
from matplotlib import use as set_matplotlib_backend
import numpy as np

from .errors import MatrixError, ShapeError
from .matrix import Matrix
from .names import PLT_BACKEND, SHOW
from .polyfit import vandermonde, polyfit, format_polynomial
from .text_io import parse_rows

LOG = logging.getLogger(__name__)


def read_pairs(stream: TextIO) -> Tuple[List[float], List[float]]:
    """Reads 'x y' lines until a blank line and returns the x and y values"""
    data = Matrix(parse_rows(stream))
    if data.height == 0:
        raise ShapeError("No data points entered.")
    if data.width != 2:
        raise ShapeError(f"Enter one pair of X and Y values per line, got {data.width} values per line.")
    return [data[row, 1] for row in range(1, data.height + 1)], [data[row, 2] for row in range(1, data.height + 1)]


def plot_fit(xs: List[float], ys: List[float], coefficients: Matrix, **kwargs):
    """Plot the data points and the fitted polynomial

    Args:
        plt_backend (optional (str)):
            The matplotlib backend that should be used for plotting, e.g. 'agg' or 'TkAgg'.

        show (optional (bool)): (Default: True)
            Should matplotlib show the plot or should it stop after plot generation.

    Returns:
        The matplotlib axes of the plot.
    """
    if kwargs.get(PLT_BACKEND):
        set_matplotlib_backend(kwargs[PLT_BACKEND])
    show = kwargs.get(SHOW, True)
    grid = np.linspace(min(xs), max(xs), 200)
    fitted = (vandermonde(grid.tolist(), coefficients.height - 1) * coefficients).to_numpy().ravel()
    _, ax = plt.subplots()
    ax.scatter(xs, ys, color='black', label='data')
    ax.plot(grid, fitted, label=format_polynomial(coefficients))
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.legend()
    if show:
        plt.show()
    return ax


def main(order=None, plot=False, plt_backend=None, stdin: TextIO = None, stdout: TextIO = None):
    """Reads data, prints the intermediate matrices and the fitted coefficients

    Args:
        order (optional (int)):
            Order of the polynomial. Asked for on stdin when not given.

        plot (optional (bool)): (Default: False)
            Plot data and fit with matplotlib.

        plt_backend (optional (str)):
            matplotlib backend used for plotting.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    print("Enter one pair of X and Y values per line, the two separated by a space:", file=stdout)
    print("(Enter a blank line when you're done.):", file=stdout)
    xs, ys = read_pairs(stdin)
    LOG.info(f"Read {len(xs)} data points.")

    if order is None:
        print("To what order polynomial should this data be fitted?", file=stdout)
        order = int(stdin.readline())

    print("\nHere is your data:", file=stdout)
    print(Matrix([[x, y] for x, y in zip(xs, ys)]), file=stdout)
    v = vandermonde(xs, order)
    print("Here is your Vandermonde matrix:", file=stdout)
    print(v, file=stdout)
    print("Here is its transpose:", file=stdout)
    print(v.transposed(), file=stdout)
    print("Here is VᵀV:", file=stdout)
    print(v.transposed() * v, file=stdout)

    coefficients = polyfit(xs, ys, order)
    print("Computed coefficients:", file=stdout)
    print(format_polynomial(coefficients), file=stdout)

    if plot:
        plot_fit(xs, ys, coefficients, plt_backend=plt_backend)
    return coefficients


def start(order=None, plot=False, plt_backend=None, verbose=False) -> int:
    """Configures logging and runs main. Returns the exit status."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format='%(levelname)s: %(message)s')
    try:
        main(order, plot, plt_backend)
    except (MatrixError, ValueError) as err:
        LOG.error(str(err))
        return 1
    return 0


def start_from_command_line():
    """Entry point of densematrix-polyfit"""
    parser = ArgumentParser(prog='densematrix-polyfit',
                            description='Fit a polynomial to x y pairs read from stdin by solving the normal equations.')
    parser.add_argument("-o", "--order", type=int, help="order of the fitted polynomial (asked for if omitted)")
    parser.add_argument("--plot", action='store_true', help="plot data and fitted polynomial with matplotlib")
    parser.add_argument("--plt_backend", help="matplotlib backend used with --plot")
    parser.add_argument("-v", "--verbose", action='store_true', help="log progress messages")
    args = parser.parse_args()
    sys.exit(start(args.order, args.plot, args.plt_backend, args.verbose))
