import logging
import time

import numpy as np
from geometry import no_hit
from utils import vec, normalize, reflect, refract

"""
Core implementation of the ray tracer: rays, camera, lights, the scene, the
recursive shading function `cast_ray` and the entry point `render_image`.

Vectors and colors are float64 NumPy arrays of shape (3,). Ray directions are
expected to be unit length; callers normalize before casting.
"""

logger = logging.getLogger(__name__)

MAX_DEPTH = 4 # max recursion depth
EPSILON = 1e-3 # for offsetting rays

WHITE = vec([1, 1, 1])


class Ray:

    def __init__(self, origin, direction):
        """Create a ray with the given origin and direction.

        Parameters:
          origin : (3,) -- the start point of the ray, a 3D point
          direction : (3,) -- the direction of the ray, a unit 3D vector
        """
        self.origin = np.array(origin, np.float64)
        self.direction = np.array(direction, np.float64)


class Camera:

    def __init__(self, width, height, fov=np.pi / 2, eye=vec([0, 0, 0])):
        """Create a camera looking down -z from eye.

        Parameters:
          width, height : int -- image size in pixels
          fov : float -- vertical field of view in radians
          eye : (3,) -- origin shared by every camera ray
        """
        self.width = width
        self.height = height
        self.fov = fov
        self.eye = vec(eye)
        self.screen_depth = height / -(2.0 * np.tan(fov / 2.0))

    def generate_ray(self, column, row):
        """Compute the ray through the center of pixel (column, row); row 0 is the top."""
        x = column + 0.5 - self.width / 2.0
        y = -row - 0.5 + self.height / 2.0
        return Ray(self.eye, normalize(vec([x, y, self.screen_depth])))


def offset_origin(point, normal, direction):
    """Nudge a secondary ray's origin off the surface, to the side the ray travels into."""
    if np.dot(direction, normal) < 0:
        return point - normal * EPSILON
    return point + normal * EPSILON


class PointLight:
    def __init__(self, position, intensity):
        """Create a point light at given position and with given intensity"""
        self.position = vec(position)
        self.intensity = intensity

    def illuminate(self, ray, hit, scene):
        """Compute the (diffuse, specular) intensity this light adds at a surface point.

        Both are 0 when another surface sits between the point and the light.
        """
        light_vec_full = self.position - hit.point
        light_dist = np.linalg.norm(light_vec_full)
        light_vec = normalize(light_vec_full)

        shadow_origin = offset_origin(hit.point, hit.normal, light_vec)
        blocker = scene.intersect(Ray(shadow_origin, light_vec))
        if blocker.t < np.inf and np.linalg.norm(blocker.point - shadow_origin) < light_dist:
            return 0.0, 0.0

        diffuse = self.intensity * max(0.0, np.dot(light_vec, hit.normal))
        highlight = max(0.0, np.dot(reflect(light_vec, hit.normal), ray.direction))
        specular = self.intensity * highlight ** hit.material.specular_exponent
        return diffuse, specular


class Scene:

    def __init__(self, surfs, bg_color=vec([0.2, 0.7, 0.8])):
        """Create a scene containing the given spheres, scanned in order.
        """
        self.surfs = list(surfs)
        self.bg_color = vec(bg_color)

    def intersect(self, ray):
        """Computes the first (smallest t) intersection between a ray and the scene.

        Ties keep the surface that comes first.
        """
        closest_hit = no_hit
        for surf in self.surfs:
            hit = surf.intersect(ray)
            if hit.t < closest_hit.t:
                closest_hit = hit
        return closest_hit


def cast_ray(ray, scene, lights, depth=0, max_depth=MAX_DEPTH):
    """Compute the color seen along a ray.

    Surfaces are lit with Phong diffuse and specular terms from every unshadowed
    light, plus mirror reflection and (for materials with a fourth albedo
    weight) refraction, each traced recursively. Past max_depth, or when
    nothing is hit, the background color is returned.

    Parameters:
      ray : Ray -- the ray to trace
      scene : Scene -- the spheres and background
      lights : list of PointLight -- the lights in the scene
      depth : int -- number of bounces already taken
      max_depth : int -- last depth at which surfaces are still shaded
    Return:
      (3,) -- the color, not clamped
    """
    if depth > max_depth:
        return scene.bg_color

    hit = scene.intersect(ray)
    if hit.t == np.inf:
        return scene.bg_color

    mat = hit.material
    x = hit.point
    n = hit.normal

    reflect_dir = reflect(ray.direction, n)
    reflect_ray = Ray(offset_origin(x, n, reflect_dir), reflect_dir)
    reflect_color = cast_ray(reflect_ray, scene, lights, depth + 1, max_depth)

    refract_color = None
    if mat.has_refraction:
        # total internal reflection gives a zero direction, traced anyway
        refract_dir = refract(ray.direction, n, mat.refractive_index)
        refract_ray = Ray(offset_origin(x, n, refract_dir), refract_dir)
        refract_color = cast_ray(refract_ray, scene, lights, depth + 1, max_depth)

    diffuse = 0.0
    specular = 0.0
    for light in lights:
        light_diffuse, light_specular = light.illuminate(ray, hit, scene)
        diffuse += light_diffuse
        specular += light_specular

    color = (mat.diffuse_color * diffuse * mat.albedo[0]
             + WHITE * specular * mat.albedo[1]
             + reflect_color * mat.albedo[2])
    if refract_color is not None:
        color = color + refract_color * mat.albedo[3]
    return color


def flat_shade(ray, scene, lights, depth=0, max_depth=MAX_DEPTH):
    """Unlit shading: the diffuse color of the nearest surface, or the background."""
    hit = scene.intersect(ray)
    if hit.t == np.inf:
        return scene.bg_color
    return hit.material.diffuse_color


def render_image(camera, scene, lights, shade=cast_ray):
    """
    render a ray traced image, one ray per pixel through its center.

    Returns a (height, width, 3) float array, top row first.
    """
    nx, ny = camera.width, camera.height
    output_image = np.zeros((ny, nx, 3), np.float64)

    logger.info("rendering %dx%d image of %d spheres and %d lights",
                nx, ny, len(scene.surfs), len(lights))
    start_time = time.perf_counter()
    for i in range(ny):
        logger.debug("rendering row %d/%d...", i + 1, ny)
        for j in range(nx):
            output_image[i, j] = shade(camera.generate_ray(j, i), scene, lights)
    logger.info("rendered in %.2fs", time.perf_counter() - start_time)

    return output_image


def render_gradient(nx, ny):
    """Background-only image: red grows left to right, green top to bottom."""
    output_image = np.zeros((ny, nx, 3), np.float64)
    output_image[:, :, 0] = (np.arange(nx) / nx)[np.newaxis, :]
    output_image[:, :, 1] = (np.arange(ny) / ny)[:, np.newaxis]
    return output_image
