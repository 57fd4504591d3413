import os
import tempfile
import unittest

import numpy as np
from utils import vec, normalize, reflect, refract, to_bytes, save_image, load_image


class TestVectorHelpers(unittest.TestCase):

    def test_vec_is_double(self):
        self.assertEqual(vec([1, 2, 3]).dtype, np.float64)

    def test_normalize(self):
        np.testing.assert_almost_equal(normalize(vec([3, 0, 4])), [0.6, 0, 0.8])
        self.assertAlmostEqual(np.linalg.norm(normalize(vec([-2, 7, 1]))), 1.0)

    def test_normalize_zero_vector(self):
        # no direction to keep; must not produce NaNs
        np.testing.assert_array_equal(normalize(np.zeros(3)), np.zeros(3))

    def test_reflect(self):
        v = normalize(vec([1, -1, 0]))
        np.testing.assert_almost_equal(reflect(v, vec([0, 1, 0])), normalize(vec([1, 1, 0])))
        # grazing direction is unchanged
        np.testing.assert_almost_equal(reflect(vec([1, 0, 0]), vec([0, 1, 0])), [1, 0, 0])


class TestRefract(unittest.TestCase):

    def test_normal_incidence_entering(self):
        d = refract(vec([0, 0, -1]), vec([0, 0, 1]), 1.5)
        np.testing.assert_almost_equal(d, [0, 0, -1])

    def test_normal_incidence_exiting(self):
        # ray travelling along the outward normal is leaving the medium
        d = refract(vec([0, 0, 1]), vec([0, 0, 1]), 1.5)
        np.testing.assert_almost_equal(d, [0, 0, 1])

    def test_snell_angle(self):
        v = normalize(vec([1, 0, -1]))
        d = refract(v, vec([0, 0, 1]), 1.5)
        self.assertAlmostEqual(np.linalg.norm(d), 1.0)
        self.assertAlmostEqual(d[0], np.sin(np.pi / 4) / 1.5)
        self.assertLess(d[2], 0)

    def test_unit_index_passes_straight_through(self):
        v = normalize(vec([0.3, -0.2, -1]))
        np.testing.assert_almost_equal(refract(v, vec([0, 0, 1]), 1.0), v)

    def test_total_internal_reflection(self):
        # leaving glass at a grazing angle
        v = normalize(vec([1, 0, 0.1]))
        np.testing.assert_array_equal(refract(v, vec([0, 0, 1]), 1.5), np.zeros(3))


class TestByteConversion(unittest.TestCase):

    def test_truncates(self):
        np.testing.assert_array_equal(
            to_bytes(vec([0.0, 0.5, 0.999, 1.0])),
            [0, 127, 254, 255]
        )

    def test_out_of_range_saturates(self):
        np.testing.assert_array_equal(
            to_bytes(vec([1.2, 7.0, -0.1, -3.0, np.nan, np.inf])),
            [255, 255, 0, 0, 0, 255]
        )
        self.assertEqual(to_bytes(vec([2.0])).dtype, np.uint8)


class TestSaveImage(unittest.TestCase):

    def test_ppm_layout(self):
        img = np.zeros((2, 3, 3))
        img[0, 0] = [1.0, 0.5, 0.0]
        img[1, 2] = [0.0, 0.0, 1.5]
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'out.ppm')
            save_image(img, path)
            with open(path, 'rb') as f:
                data = f.read()
            np.testing.assert_array_equal(load_image(path), to_bytes(img))

        header = b"P6\n3 2\n255\n"
        self.assertEqual(data[:len(header)], header)
        self.assertEqual(len(data), len(header) + 2 * 3 * 3)
        pixels = data[len(header):]
        self.assertEqual(pixels[:3], bytes([255, 127, 0]))
        self.assertEqual(pixels[-3:], bytes([0, 0, 255]))


if __name__ == '__main__':
    unittest.main()
