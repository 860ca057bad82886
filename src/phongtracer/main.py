#!/usr/bin/env python3
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

from dataclasses import dataclass
from math import pi, radians
from time import process_time
from typing import Union
import logging

from phongtracer.camera import Camera
from phongtracer.colors import Color, WHITE
from phongtracer.geometry import point, vector
from phongtracer.lights import PointLight
from phongtracer.materials import Material
from phongtracer.patterns import CheckersPattern, GradientPattern, RingPattern, StripePattern
from phongtracer.shapes import Plane, Sphere
from phongtracer.transformations import rotation_x, rotation_y, scaling, translation, view_transform
from phongtracer.world import World

import click

logger = logging.getLogger(__name__)

LOG_LEVELS = ["debug", "info", "warning", "error"]


@dataclass
class Parameters:
    width: int = 640
    height: int = 480
    fov_deg: float = 60.0
    png_output: Union[str, None] = "output.png"
    ppm_output: Union[str, None] = None


def demo_world() -> World:
    """Build the demo scene: three spheres standing on a checkered floor in front of a wall"""
    world = World(light=PointLight(position=point(-10.0, 10.0, -10.0), intensity=WHITE))

    # Shift the checkers by half a unit, so that the floor does not lie on a boundary between cells
    floor_pattern = CheckersPattern(Color(1.0, 0.9, 0.9), Color(0.3, 0.3, 0.3),
                                    transformation=translation(0.0, 0.5, 0.0))
    world.add_shape(Plane(material=Material(pattern=floor_pattern, specular=0.0)))

    wall_pattern = StripePattern(Color(0.9, 0.9, 1.0), Color(0.6, 0.6, 0.8),
                                 transformation=rotation_y(pi / 4.0) * scaling(0.5, 0.5, 0.5))
    world.add_shape(Plane(transformation=translation(0.0, 0.0, 5.0) * rotation_x(pi / 2.0),
                          material=Material(pattern=wall_pattern, specular=0.0)))

    world.add_shape(Sphere(
        transformation=translation(-0.5, 1.0, 0.5),
        material=Material(color=Color(0.1, 1.0, 0.5), diffuse=0.7, specular=0.3),
    ))

    right_pattern = GradientPattern(Color(0.5, 1.0, 0.1), Color(1.0, 0.2, 0.1),
                                    transformation=translation(-1.0, 0.0, 0.0) * scaling(2.0, 1.0, 1.0))
    world.add_shape(Sphere(
        transformation=translation(1.5, 0.5, -0.5) * scaling(0.5, 0.5, 0.5),
        material=Material(pattern=right_pattern, diffuse=0.7, specular=0.3),
    ))

    left_pattern = RingPattern(Color(1.0, 0.8, 0.1), Color(0.8, 0.4, 0.1),
                               transformation=scaling(0.2, 0.2, 0.2))
    world.add_shape(Sphere(
        transformation=translation(-1.5, 0.33, -0.75) * scaling(0.33, 0.33, 0.33),
        material=Material(pattern=left_pattern, diffuse=0.7, specular=0.3),
    ))

    return world


def render_demo(parameters: Parameters):
    world = demo_world()
    camera = Camera(
        hsize=parameters.width,
        vsize=parameters.height,
        field_of_view=radians(parameters.fov_deg),
        transformation=view_transform(point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)),
    )

    click.echo(f"Generating a {parameters.width}×{parameters.height} image")

    def print_progress(row, col):
        click.echo(f"Rendering row {row + 1}/{parameters.height}\r", nl=False)

    start_time = process_time()
    image = camera.render(world, callback=print_progress)
    elapsed_time = process_time() - start_time

    click.echo(f"Rendering completed in {elapsed_time:.1f} s")

    if parameters.ppm_output:
        with open(parameters.ppm_output, "wb") as outf:
            image.write_ppm(outf)
        click.echo(f"PPM image written to {parameters.ppm_output}")

    if parameters.png_output:
        with open(parameters.png_output, "wb") as outf:
            image.write_png(outf)
        click.echo(f"PNG image written to {parameters.png_output}")


@click.group()
@click.option("--log-level", type=click.Choice(LOG_LEVELS), default="warning",
              help="Minimum severity of the log messages to print")
def cli(log_level):
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(name)s [%(levelname)s] %(message)s",
    )


@click.command("render")
@click.option("--width", type=click.IntRange(min=1), default=640, help="Width of the image to render")
@click.option("--height", type=click.IntRange(min=1), default=480, help="Height of the image to render")
@click.option("--fov-deg", type=click.FloatRange(min=0.0, max=180.0, min_open=True, max_open=True),
              default=60.0, help="Horizontal field of view, in degrees")
@click.option(
    "--png-output",
    type=str,
    default="output.png",
    help="Name of the PNG file to create (pass an empty string to skip it)",
)
@click.option(
    "--ppm-output",
    type=str,
    default=None,
    help="Name of the PPM file to create",
)
def render(width, height, fov_deg, png_output, ppm_output):
    """Render the demo scene"""
    parameters = Parameters(
        width=width,
        height=height,
        fov_deg=fov_deg,
        png_output=png_output,
        ppm_output=ppm_output,
    )

    try:
        render_demo(parameters)
    except OSError as e:
        logger.error("unable to save the image: %s", e)
        raise click.ClickException(f"unable to save the image: {e}")


cli.add_command(render)

if __name__ == "__main__":
    cli()
