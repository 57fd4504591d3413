from utils import vec

class Material:

    def __init__(self, diffuse_color, albedo=(1., 0., 0.), specular_exponent=1., refractive_index=1.):
        """
        Create a new material with the given parameters.

        Parameters:
          diffuse_color : (3,) -- Diffuse color
          albedo : 3 or 4 floats -- Weights of the diffuse, specular, reflected
                   and (optionally) refracted contributions
          specular_exponent : float -- Specular exponent (shininess)
          refractive_index : float -- Index of Refraction (1.0 for air, 1.5 for glass)
        """
        if len(albedo) not in (3, 4):
            raise ValueError(f"albedo needs 3 or 4 weights, got {len(albedo)}")
        if any(w < 0 for w in albedo):
            raise ValueError(f"albedo weights must be non-negative: {tuple(albedo)}")
        if specular_exponent <= 0:
            raise ValueError(f"specular exponent must be positive: {specular_exponent}")
        if refractive_index < 1:
            raise ValueError(f"refractive index must be at least 1: {refractive_index}")

        self.diffuse_color = vec(diffuse_color)
        self.albedo = tuple(float(w) for w in albedo)
        self.specular_exponent = specular_exponent
        self.refractive_index = refractive_index

    @property
    def has_refraction(self):
        return len(self.albedo) == 4

    def __repr__(self):
        return (f"Material(diffuse_color={self.diffuse_color.tolist()}, albedo={self.albedo}, "
                f"specular_exponent={self.specular_exponent}, refractive_index={self.refractive_index})")
