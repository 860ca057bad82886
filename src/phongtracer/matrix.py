# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

from phongtracer.geometry import Tuple
from phongtracer.misc import are_close, EPSILON

# Matrices whose determinant is smaller than this (in absolute value) are
# considered singular. The threshold is far below EPSILON, so that strongly
# scaled shapes (e.g., a sphere shrunk by a factor 0.01) remain invertible.
SINGULAR_THRESHOLD = 1e-12

SUPPORTED_SIZES = (2, 3, 4)


class SingularMatrixError(ArithmeticError):
    """Raised when the inverse of a non-invertible matrix is requested"""

    def __init__(self, error_message):
        super().__init__(error_message)


def _identity_rows(size):
    return [[1.0 if row == col else 0.0 for col in range(size)] for row in range(size)]


class Matrix:
    """A square matrix of size 2×2, 3×3, or 4×4

    Elements are accessed using the syntax ``m[row][col]``. If no rows are passed to the
    constructor, the matrix is the identity. Comparisons between matrices are done with a
    tolerance of ``EPSILON`` on each element.

    The determinant and the inverse are computed through the Laplace (cofactor) expansion.
    This is exponential in the size of the matrix, which is acceptable only because
    matrices never get larger than 4×4: do not reuse this code for larger matrices.
    """

    def __init__(self, rows=None, size=4):
        if rows is None:
            rows = _identity_rows(size)

        size = len(rows)
        if size not in SUPPORTED_SIZES:
            raise ValueError(f"unsupported matrix size {size}, it must be one of {SUPPORTED_SIZES}")

        for cur_row in rows:
            if len(cur_row) != size:
                raise ValueError(f"matrix {rows} is not square")

        self.rows = [[float(x) for x in cur_row] for cur_row in rows]

    @property
    def size(self):
        return len(self.rows)

    def __getitem__(self, row):
        return self.rows[row]

    def set(self, row, col, value):
        """Change the element at position (row, col)"""
        self.rows[row][col] = float(value)

    def is_close(self, other, epsilon=EPSILON):
        """Return True if the two matrices have the same size and roughly the same elements"""
        if self.size != other.size:
            return False

        for i in range(self.size):
            for j in range(self.size):
                if not are_close(self.rows[i][j], other.rows[i][j], epsilon=epsilon):
                    return False

        return True

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented

        return self.is_close(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(f"unable to multiply a {self.size}×{self.size} matrix "
                                 f"with a {other.size}×{other.size} matrix")

            n = self.size
            result = [[0.0 for j in range(n)] for i in range(n)]
            for i in range(n):
                for j in range(n):
                    for k in range(n):
                        result[i][j] += self.rows[i][k] * other.rows[k][j]

            return Matrix(result)
        elif isinstance(other, Tuple):
            if self.size != 4:
                raise ValueError(f"unable to apply a {self.size}×{self.size} matrix to a tuple")

            row0, row1, row2, row3 = self.rows
            return Tuple(
                x=other.x * row0[0] + other.y * row0[1] + other.z * row0[2] + other.w * row0[3],
                y=other.x * row1[0] + other.y * row1[1] + other.z * row1[2] + other.w * row1[3],
                z=other.x * row2[0] + other.y * row2[1] + other.z * row2[2] + other.w * row2[3],
                w=other.x * row3[0] + other.y * row3[1] + other.z * row3[2] + other.w * row3[3],
            )
        else:
            raise TypeError(f"Invalid type {type(other)} multiplied to a Matrix object")

    def transpose(self):
        n = self.size
        return Matrix([[self.rows[col][row] for col in range(n)] for row in range(n)])

    def submatrix(self, row, col):
        """Return a copy of the matrix with one row and one column removed"""
        if self.size == 2:
            raise ValueError("unable to compute the submatrix of a 2×2 matrix")

        return Matrix([
            [value for j, value in enumerate(cur_row) if j != col]
            for i, cur_row in enumerate(self.rows)
            if i != row
        ])

    def minor(self, row, col):
        """Return the determinant of the submatrix at (row, col)"""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row, col):
        """Return the minor at (row, col), with its sign changed if row + col is odd"""
        minor = self.minor(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    def determinant(self):
        if self.size == 2:
            (a, b), (c, d) = self.rows
            return a * d - b * c

        return sum(self.rows[0][col] * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self):
        return abs(self.determinant()) >= SINGULAR_THRESHOLD

    def inverse(self):
        """Return the inverse of the matrix

        Raise :class:`.SingularMatrixError` if the matrix is not invertible."""
        det = self.determinant()
        if abs(det) < SINGULAR_THRESHOLD:
            raise SingularMatrixError(f"the matrix {self} is not invertible (determinant {det})")

        n = self.size
        result = [[0.0 for j in range(n)] for i in range(n)]
        for row in range(n):
            for col in range(n):
                # Note the swap of "row" and "col": this is the transpose of the cofactor matrix
                result[col][row] = self.cofactor(row, col) / det

        return Matrix(result)

    def __repr__(self):
        fmtstring = "   [" + " ".join(["{:6.3e}"] * self.size) + "],\n"
        result = "[\n"
        for cur_row in self.rows:
            result += fmtstring.format(*cur_row)
        result += "]"
        return result


def identity_matrix(size=4):
    """Return a new identity matrix"""
    return Matrix(size=size)
