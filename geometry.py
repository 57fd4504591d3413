import numpy as np
from utils import vec, normalize

class Hit:
    def __init__(self, t, point=None, normal=None, material=None):
        """Create a Hit with the given data.

        Parameters:
          t : float -- the distance of the intersection along the ray
          point : (3,) -- the 3D point where the intersection happens
          normal : (3,) -- the 3D outward-facing unit normal to the surface at the hit point
          material : (Material) -- the material of the surface
        """
        self.t = t
        self.point = point
        self.normal = normal
        self.material = material

# Value to represent absence of an intersection
no_hit = Hit(np.inf)


class Sphere:

    def __init__(self, center, radius, material):
        """Create a sphere with the given center and radius.

        Parameters:
          center : (3,) -- a 3D point specifying the sphere's center
          radius : float -- a Python float specifying the sphere's radius
          material : Material -- the material of the surface
        """
        if radius <= 0:
            raise ValueError(f"sphere radius must be positive: {radius}")
        self.center = vec(center)
        self.radius = radius
        self.material = material

    def intersect(self, ray):
        """Computes the first non-negative intersection between a ray and this sphere.

        The ray direction must be unit length. A hit at exactly t = 0 counts.

        Parameters:
          ray : Ray -- the ray to intersect with the sphere
        Return:
          Hit -- the hit data
        """
        to_center = self.center - ray.origin
        tca = np.dot(to_center, ray.direction)
        d2 = np.dot(to_center, to_center) - tca * tca
        r2 = self.radius * self.radius
        if d2 > r2:
            return no_hit

        thc = np.sqrt(r2 - d2)
        near = tca - thc
        far = tca + thc
        if near >= 0.0:
            t = near
        elif far >= 0.0:
            t = far
        else:
            return no_hit

        point = ray.origin + ray.direction * t
        normal = normalize(point - self.center)
        return Hit(t, point, normal, self.material)

    def __repr__(self):
        return f"Sphere(center={list(self.center)}, radius={self.radius}, material={self.material!r})"
