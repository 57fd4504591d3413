import numpy as np
from PIL import Image

def vec(list):
    """Handy shorthand to make a double-precision float array."""
    return np.array(list, dtype=np.float64)

def normalize(v):
    """Return a unit vector in the direction of the vector v.

    A zero vector has no direction and is returned unchanged.
    """
    norm = np.linalg.norm(v)
    if norm == 0:
        return v
    return v * (1.0 / norm)

def reflect(v, n):
    """Mirror the direction v about the unit normal n."""
    return v - n * (2.0 * np.dot(v, n))

def refract(v, n, refractive_index):
    """Bend the unit direction v through a surface with unit normal n (Snell's law).

    Parameters:
      v : (3,) -- incident direction
      n : (3,) -- outward surface normal
      refractive_index : float -- index of the medium inside the surface
    Return:
      (3,) -- transmitted direction, or the zero vector on total internal reflection
    """
    cos_i = -max(-1.0, min(1.0, np.dot(v, n)))
    if cos_i < 0:
        # leaving the medium
        cos_i = -cos_i
        n = -n
        eta = refractive_index
    else:
        eta = 1.0 / refractive_index
    k = 1 - eta * eta * (1 - cos_i * cos_i)
    if k < 0:
        return np.zeros(3)
    return v * eta + n * (eta * cos_i - np.sqrt(k))


def to_bytes(img):
    """Convert float colors to 8-bit channels.

    Values are scaled by 255 and truncated, not rounded. Anything outside the
    byte range saturates at 0 or 255 and NaN becomes 0.
    """
    scaled = np.nan_to_num(np.asarray(img, dtype=np.float64) * 255.0, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(np.trunc(scaled), 0, 255).astype(np.uint8)

def save_image(img, filename):
    """Write an (ny, nx, 3) float image to disk; the extension picks the format (.ppm is binary P6)."""
    Image.fromarray(to_bytes(img)).save(filename)

def load_image(filename):
    """Read an image file back as an (ny, nx, 3) uint8 array."""
    with Image.open(filename) as pil_img:
        return np.array(pil_img.convert('RGB'), dtype=np.uint8)
