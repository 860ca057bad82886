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

from math import sin, cos

from phongtracer.geometry import Tuple
from phongtracer.matrix import Matrix, SingularMatrixError, identity_matrix


def _as_matrix(m):
    return m if isinstance(m, Matrix) else Matrix(m)


class Transformation:
    """An affine transformation.

    This class encodes an affine transformation as a 4×4 matrix together with its inverse.
    If the inverse is not provided, it is computed once in the constructor and cached:
    shapes, patterns, and cameras query it for every ray, so it must never be recomputed.
    Constructing a transformation from a singular matrix raises
    :class:`.SingularMatrixError`.
    """

    def __init__(self, m=None, invm=None):
        self.m = identity_matrix() if m is None else _as_matrix(m)
        if self.m.size != 4:
            raise ValueError(f"a transformation requires a 4×4 matrix, got {self.m.size}×{self.m.size}")

        if invm is None:
            self.invm = self.m.inverse()
        else:
            self.invm = _as_matrix(invm)

    def __mul__(self, other):
        if isinstance(other, Tuple):
            return self.m * other
        elif isinstance(other, Transformation):
            result_m = self.m * other.m
            result_invm = other.invm * self.invm  # Reverse order! (A B)^-1 = B^-1 A^-1
            return Transformation(m=result_m, invm=result_invm)
        else:
            raise TypeError(f"Invalid type {type(other)} multiplied to a Transformation object")

    def transform_normal(self, normal: Tuple) -> Tuple:
        """Apply the transformation to a normal

        Normals must be transformed using the transpose of the inverse matrix, otherwise they
        would not stay perpendicular to the surface under non-uniform scalings. The result is
        always a vector (w = 0) and it is *not* normalized."""
        row0, row1, row2, row3 = self.invm.rows
        return Tuple(
            x=normal.x * row0[0] + normal.y * row1[0] + normal.z * row2[0] + normal.w * row3[0],
            y=normal.x * row0[1] + normal.y * row1[1] + normal.z * row2[1] + normal.w * row3[1],
            z=normal.x * row0[2] + normal.y * row1[2] + normal.z * row2[2] + normal.w * row3[2],
            w=0.0,
        )

    def is_consistent(self):
        """Check the internal consistency of the transformation.

        This method is useful when writing tests."""
        return (self.m * self.invm).is_close(identity_matrix())

    def __repr__(self):
        return repr(self.m)

    def is_close(self, other):
        """Check if `other` represents the same transform."""
        return self.m.is_close(other.m) and self.invm.is_close(other.invm)

    def __eq__(self, other):
        if not isinstance(other, Transformation):
            return NotImplemented

        return self.is_close(other)

    def inverse(self):
        """Return a `Transformation` object representing the inverse affine transformation.

        This method is very cheap to call."""
        return Transformation(m=self.invm, invm=self.m)


def translation(x: float, y: float, z: float):
    """Return a :class:`.Transformation` object encoding a rigid translation

    The parameters specify the amount of shift to be applied along the three axes."""
    m, invm = identity_matrix(), identity_matrix()
    for row, value in enumerate((x, y, z)):
        m.set(row, 3, value)
        invm.set(row, 3, -value)

    return Transformation(m=m, invm=invm)


def scaling(x: float, y: float, z: float):
    """Return a :class:`.Transformation` object encoding a scaling

    The parameters specify the amount of scaling along the three directions X, Y, Z.
    A null factor makes the transformation singular."""
    if x == 0.0 or y == 0.0 or z == 0.0:
        raise SingularMatrixError(f"scaling by ({x}, {y}, {z}) is not invertible")

    m, invm = identity_matrix(), identity_matrix()
    for row, value in enumerate((x, y, z)):
        m.set(row, row, value)
        invm.set(row, row, 1.0 / value)

    return Transformation(m=m, invm=invm)


def rotation_x(angle_rad: float):
    """Return a :class:`.Transformation` object encoding a rotation around the X axis

    The parameter `angle_rad` specifies the rotation angle (in radians). The positive sign is
    given by the right-hand rule."""
    sinang, cosang = sin(angle_rad), cos(angle_rad)
    return Transformation(
        m=[[1.0, 0.0, 0.0, 0.0],
           [0.0, cosang, -sinang, 0.0],
           [0.0, sinang, cosang, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[1.0, 0.0, 0.0, 0.0],
              [0.0, cosang, sinang, 0.0],
              [0.0, -sinang, cosang, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def rotation_y(angle_rad: float):
    """Return a :class:`.Transformation` object encoding a rotation around the Y axis

    The parameter `angle_rad` specifies the rotation angle (in radians). The positive sign is
    given by the right-hand rule."""
    sinang, cosang = sin(angle_rad), cos(angle_rad)
    return Transformation(
        m=[[cosang, 0.0, sinang, 0.0],
           [0.0, 1.0, 0.0, 0.0],
           [-sinang, 0.0, cosang, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[cosang, 0.0, -sinang, 0.0],
              [0.0, 1.0, 0.0, 0.0],
              [sinang, 0.0, cosang, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def rotation_z(angle_rad: float):
    """Return a :class:`.Transformation` object encoding a rotation around the Z axis

    The parameter `angle_rad` specifies the rotation angle (in radians). The positive sign is
    given by the right-hand rule."""
    sinang, cosang = sin(angle_rad), cos(angle_rad)
    return Transformation(
        m=[[cosang, -sinang, 0.0, 0.0],
           [sinang, cosang, 0.0, 0.0],
           [0.0, 0.0, 1.0, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[cosang, sinang, 0.0, 0.0],
              [-sinang, cosang, 0.0, 0.0],
              [0.0, 0.0, 1.0, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float):
    """Return a :class:`.Transformation` object encoding a shear

    Each parameter tells how much a coordinate moves in proportion to another one:
    e.g., `xy` is the amount by which x changes in proportion to y. Since there is no
    closed formula for the inverse, this is computed numerically."""
    m = identity_matrix()
    m.set(0, 1, xy)
    m.set(0, 2, xz)
    m.set(1, 0, yx)
    m.set(1, 2, yz)
    m.set(2, 0, zx)
    m.set(2, 1, zy)
    return Transformation(m=m)


def view_transform(from_point: Tuple, to: Tuple, up: Tuple):
    """Return the transformation that orients the world relative to an eye

    The eye sits at `from_point` and looks at `to`; `up` is a vector pointing roughly
    upwards. The result maps world space into camera space."""
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)

    orientation = identity_matrix()
    for col, value in enumerate((left.x, left.y, left.z)):
        orientation.set(0, col, value)
    for col, value in enumerate((true_up.x, true_up.y, true_up.z)):
        orientation.set(1, col, value)
    for col, value in enumerate((-forward.x, -forward.y, -forward.z)):
        orientation.set(2, col, value)

    return Transformation(m=orientation) * translation(-from_point.x, -from_point.y, -from_point.z)
