import logging

import numpy as np

import ray
from geometry import Sphere
from materials import Material
from utils import vec, save_image

"""
The scene progression of the renderer, from a plain gradient to spheres with
shadows, mirrors and glass. Every stage uses the same four spheres, eye point
and field of view.
"""

logger = logging.getLogger(__name__)

WIDTH = 1024
HEIGHT = 768
FOV = np.pi / 2

SPHERE_LAYOUT = [
    (vec([-3, 0, -16]), 2),
    (vec([-1, -1.5, -12]), 2),
    (vec([1.5, -0.5, -18]), 3),
    (vec([7, 5, -18]), 4),
]

LIGHTS = [
    ray.PointLight(vec([-20, 20, 20]), 1.5),
    ray.PointLight(vec([30, 50, -25]), 1.8),
    ray.PointLight(vec([30, 20, 30]), 1.7),
]


class ExampleSceneDef(object):
    def __init__(self, camera, scene, lights, shade=ray.cast_ray):
        self.camera = camera
        self.scene = scene
        self.lights = lights
        self.shade = shade

    def pixels(self):
        return ray.render_image(self.camera, self.scene, self.lights, shade=self.shade)

    def render(self, output_path=None):
        """Render the scene; return the float image, or write it to output_path."""
        pix = self.pixels()
        if output_path is None:
            return pix
        save_image(pix, output_path)
        logger.info("wrote %s", output_path)


class GradientSceneDef(ExampleSceneDef):
    def __init__(self, width, height):
        super().__init__(ray.Camera(width, height), ray.Scene([]), [])

    def pixels(self):
        return ray.render_gradient(self.camera.width, self.camera.height)


def _spheres(materials):
    return [Sphere(center, radius, mat) for (center, radius), mat in zip(SPHERE_LAYOUT, materials)]


def GradientExample(width=WIDTH, height=HEIGHT):
    return GradientSceneDef(width, height)


def SilhouetteExample(width=WIDTH, height=HEIGHT):
    ivory = Material(vec([0.4, 0.4, 0.3]))
    red_rubber = Material(vec([0.3, 0.1, 0.1]))

    scene = ray.Scene(_spheres([ivory, red_rubber, red_rubber, ivory]))
    camera = ray.Camera(width, height, fov=FOV)
    return ExampleSceneDef(camera=camera, scene=scene, lights=[], shade=ray.flat_shade)


def DiffuseExample(width=WIDTH, height=HEIGHT):
    ivory = Material(vec([0.4, 0.4, 0.3]))
    red_rubber = Material(vec([0.3, 0.1, 0.1]))

    scene = ray.Scene(_spheres([ivory, red_rubber, red_rubber, ivory]))
    camera = ray.Camera(width, height, fov=FOV)
    return ExampleSceneDef(camera=camera, scene=scene, lights=LIGHTS[:1])


def LightingExample(width=WIDTH, height=HEIGHT):
    ivory = Material(vec([0.4, 0.4, 0.3]), albedo=(0.6, 0.3, 0.0), specular_exponent=50.)
    red_rubber = Material(vec([0.3, 0.1, 0.1]), albedo=(0.9, 0.1, 0.0), specular_exponent=10.)

    scene = ray.Scene(_spheres([ivory, red_rubber, red_rubber, ivory]))
    camera = ray.Camera(width, height, fov=FOV)
    return ExampleSceneDef(camera=camera, scene=scene, lights=LIGHTS)


def ReflectionExample(width=WIDTH, height=HEIGHT):
    ivory = Material(vec([0.4, 0.4, 0.3]), albedo=(0.6, 0.3, 0.1), specular_exponent=50.)
    red_rubber = Material(vec([0.3, 0.1, 0.1]), albedo=(0.9, 0.1, 0.0), specular_exponent=10.)
    mirror = Material(vec([1.0, 1.0, 1.0]), albedo=(0.0, 10.0, 0.8), specular_exponent=1425.)

    scene = ray.Scene(_spheres([ivory, mirror, red_rubber, mirror]))
    camera = ray.Camera(width, height, fov=FOV)
    return ExampleSceneDef(camera=camera, scene=scene, lights=LIGHTS)


def RefractionExample(width=WIDTH, height=HEIGHT):
    ivory = Material(vec([0.4, 0.4, 0.3]), albedo=(0.6, 0.3, 0.1, 0.0), specular_exponent=50.)
    glass = Material(vec([0.6, 0.7, 0.8]), albedo=(0.0, 0.5, 0.1, 0.8), specular_exponent=125., refractive_index=1.5)
    red_rubber = Material(vec([0.3, 0.1, 0.1]), albedo=(0.9, 0.1, 0.0, 0.0), specular_exponent=10.)
    mirror = Material(vec([1.0, 1.0, 1.0]), albedo=(0.0, 10.0, 0.8, 0.0), specular_exponent=1425.)

    scene = ray.Scene(_spheres([ivory, glass, red_rubber, mirror]))
    camera = ray.Camera(width, height, fov=FOV)
    return ExampleSceneDef(camera=camera, scene=scene, lights=LIGHTS)
