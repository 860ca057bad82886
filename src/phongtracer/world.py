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

import logging
from typing import List, Union

from phongtracer.colors import Color, BLACK, WHITE
from phongtracer.geometry import Tuple, point
from phongtracer.intersections import Intersections, PrecomputedData
from phongtracer.lights import PointLight
from phongtracer.materials import Material
from phongtracer.ray import Ray
from phongtracer.shapes import Shape, Sphere
from phongtracer.transformations import scaling

logger = logging.getLogger(__name__)


class MissingLightError(RuntimeError):
    """Raised when a world without a light source is asked to shade a point"""

    def __init__(self, error_message):
        super().__init__(error_message)


class World:
    """A class holding a list of shapes and a light, which make a «world»

    You can add shapes to a world using :meth:`.World.add_shape`. Typically, you call
    :meth:`.World.color_at` to compute the color seen along a ray. The world is never
    modified while computing colors, so the same instance can be shared by several
    renderers.
    """

    shapes: List[Shape]
    light: Union[PointLight, None]

    def __init__(self, light: Union[PointLight, None] = None):
        self.shapes = []
        self.light = light

    def add_shape(self, shape: Shape):
        """Append a new shape to this world

        The shape gets its position in the list as its `index`."""
        shape.index = len(self.shapes)
        self.shapes.append(shape)
        logger.debug("added %s #%d to the world", type(shape).__name__, shape.index)

    def intersect(self, ray: Ray) -> Intersections:
        """Return all the intersections between a ray and the shapes in this world"""
        result = Intersections()
        for shape in self.shapes:
            result.extend(shape.intersect(ray))

        return result

    def _require_light(self) -> PointLight:
        if self.light is None:
            raise MissingLightError("the world has no light source")

        return self.light

    def is_shadowed(self, world_point: Tuple) -> bool:
        """Return True if some shape lies between `world_point` and the light"""
        light = self._require_light()

        to_light = light.position - world_point
        distance = to_light.magnitude()
        hit = self.intersect(Ray(origin=world_point, direction=to_light.normalize())).hit()

        return (hit is not None) and (hit.t < distance)

    def shade_hit(self, comps: PrecomputedData) -> Color:
        """Compute the color at the point described by `comps`"""
        light = self._require_light()

        return comps.object.material.lighting(
            light=light,
            point=comps.point,
            eyev=comps.eyev,
            normalv=comps.normalv,
            in_shadow=self.is_shadowed(comps.over_point),
            shape=comps.object,
        )

    def color_at(self, ray: Ray) -> Color:
        """Return the color seen along `ray`, or black if the ray hits nothing"""
        hit = self.intersect(ray).hit()
        if hit is None:
            return BLACK

        return self.shade_hit(hit.prepare_computations(ray))


def default_world() -> World:
    """Return a world with one light and two concentric spheres

    This is the reference scene used in the tests: a white light at (-10, 10, -10), a
    greenish unit sphere, and a second white sphere with radius 0.5 inside the first one."""
    world = World(light=PointLight(position=point(-10.0, 10.0, -10.0), intensity=WHITE))
    world.add_shape(Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)))
    world.add_shape(Sphere(transformation=scaling(0.5, 0.5, 0.5)))
    return world
