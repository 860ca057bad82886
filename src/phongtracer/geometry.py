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

import math
from dataclasses import dataclass

from phongtracer.misc import are_close, EPSILON


class ZeroLengthVectorError(ValueError):
    """Raised when a vector with null length is normalized"""

    def __init__(self, error_message):
        super().__init__(error_message)


@dataclass(eq=False)
class Tuple:
    """A 4-component tuple holding either a point or a vector

    The field `w` is used as a tag: it is 1 for points and 0 for vectors. The usual
    affine rules apply when combining tuples, e.g., the difference of two points is
    a vector, and the sum of a point and a vector is a point. Use the helper functions
    :func:`.point` and :func:`.vector` to build new tuples."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def is_point(self):
        return self.w == 1.0

    def is_vector(self):
        return self.w == 0.0

    def is_close(self, other, epsilon=EPSILON):
        """Return True if the two tuples are of the same kind and have roughly the same components"""
        return (are_close(self.x, other.x, epsilon=epsilon) and
                are_close(self.y, other.y, epsilon=epsilon) and
                are_close(self.z, other.z, epsilon=epsilon) and
                self.w == other.w)

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented

        return self.is_close(other)

    def __add__(self, other):
        """Sum two vectors, or one vector and one point"""
        if not isinstance(other, Tuple):
            raise TypeError(f"Unable to run Tuple.__add__ on a {type(self)} and a {type(other)}.")

        if self.is_point() and other.is_point():
            raise TypeError("Unable to sum two points")

        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other):
        """Subtract one tuple from another

        The difference of two points is a vector; subtracting a vector from a point
        yields another point."""
        if not isinstance(other, Tuple):
            raise TypeError(f"Unable to run Tuple.__sub__ on a {type(self)} and a {type(other)}.")

        if self.is_vector() and other.is_point():
            raise TypeError("Unable to subtract a point from a vector")

        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self):
        """Return the reversed tuple"""
        return Tuple(-self.x, -self.y, -self.z, self.w)

    def __mul__(self, scalar):
        """Compute the product between a tuple and a scalar"""
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w)

    def __truediv__(self, scalar):
        """Divide each of the x/y/z components by a scalar"""
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w)

    def __getitem__(self, item):
        """Return the i-th component of the tuple, starting from 0"""
        assert (item >= 0) and (item < 4), f"wrong tuple index {item}"
        return (self.x, self.y, self.z, self.w)[item]

    def dot(self, other):
        """Compute the dot product between two vectors"""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def squared_magnitude(self):
        """Return the squared norm (Euclidean length) of a vector

        This is faster than `Tuple.magnitude` if you just need the squared norm."""
        return self.x ** 2 + self.y ** 2 + self.z ** 2

    def magnitude(self):
        """Return the norm (Euclidean length) of a vector"""
        return math.sqrt(self.squared_magnitude())

    def normalize(self):
        """Return a vector with the same direction as this one and unit length

        Raise :class:`.ZeroLengthVectorError` if the vector has zero length, as it has
        no direction."""
        norm = self.magnitude()
        if norm == 0.0:
            raise ZeroLengthVectorError(f"unable to normalize the zero-length vector {self}")

        return vector(self.x / norm, self.y / norm, self.z / norm)

    def cross(self, other):
        """Compute the cross (outer) product between two vectors"""
        return vector(self.y * other.z - self.z * other.y,
                      self.z * other.x - self.x * other.z,
                      self.x * other.y - self.y * other.x)

    def reflect(self, normal):
        """Reflect this vector around `normal`, which must be normalized"""
        return self - normal * (2.0 * self.dot(normal))


def point(x=0.0, y=0.0, z=0.0):
    """Return a :class:`.Tuple` representing a point in 3D space"""
    return Tuple(x, y, z, 1.0)


def vector(x=0.0, y=0.0, z=0.0):
    """Return a :class:`.Tuple` representing a vector in 3D space"""
    return Tuple(x, y, z, 0.0)


ORIGIN = point(0.0, 0.0, 0.0)

VEC_X = vector(1.0, 0.0, 0.0)
VEC_Y = vector(0.0, 1.0, 0.0)
VEC_Z = vector(0.0, 0.0, 1.0)
