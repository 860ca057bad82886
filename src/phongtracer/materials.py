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

from dataclasses import dataclass, field
from typing import Union

from phongtracer.colors import Color, BLACK, WHITE
from phongtracer.geometry import Tuple
from phongtracer.lights import PointLight
from phongtracer.patterns import Pattern

DEFAULT_AMBIENT = 0.1
DEFAULT_DIFFUSE = 0.9
DEFAULT_SPECULAR = 0.9
DEFAULT_SHININESS = 200.0


@dataclass
class Material:
    """A material described by the Phong reflection model

    The class has the following fields:

    -   `color`: the base color of the surface (a :class:`.Color`)
    -   `ambient`, `diffuse`, `specular`: the weights of the three Phong terms
    -   `shininess`: the exponent of the specular term; large values produce small highlights
    -   `pattern`: an optional :class:`.Pattern`. If present, it replaces `color`.
    """
    color: Color = field(default_factory=lambda: Color(WHITE.r, WHITE.g, WHITE.b))
    ambient: float = DEFAULT_AMBIENT
    diffuse: float = DEFAULT_DIFFUSE
    specular: float = DEFAULT_SPECULAR
    shininess: float = DEFAULT_SHININESS
    pattern: Union[Pattern, None] = None

    def color_at(self, point: Tuple, shape=None) -> Color:
        """Return the color of the surface at `point` (in world space)

        If the material has no pattern, this is just `color`. Otherwise the pattern is
        sampled in the reference frame of `shape`, or directly at `point` if no shape is
        provided."""
        if not self.pattern:
            return self.color

        if shape is None:
            return self.pattern.pattern_at(self.pattern.transformation.invm * point)

        return self.pattern.pattern_at_shape(shape, point)

    def lighting(self, light: PointLight, point: Tuple, eyev: Tuple, normalv: Tuple,
                 in_shadow: bool = False, shape=None) -> Color:
        """Compute the color of a surface point lit by `light` using the Phong model

        The vectors `eyev` (towards the observer) and `normalv` must be normalized. If
        `in_shadow` is True, only the ambient term contributes to the result."""
        effective_color = self.color_at(point, shape) * light.intensity
        lightv = (light.position - point).normalize()
        ambient = effective_color * self.ambient

        if in_shadow:
            return ambient

        light_dot_normal = lightv.dot(normalv)
        if light_dot_normal < 0.0:
            # The light is on the other side of the surface
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)

        reflectv = (-lightv).reflect(normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            specular = light.intensity * (self.specular * reflect_dot_eye ** self.shininess)

        return ambient + diffuse + specular
