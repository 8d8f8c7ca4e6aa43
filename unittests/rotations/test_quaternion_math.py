from unittest import TestCase

import numpy as np

from pandas import Timestamp, Timedelta

from enginemath import rotations as rot
from enginemath import scalar_math as sm


SQRT_HALF = np.sqrt(2) / 2

Y_90 = np.array([0, SQRT_HALF, 0, SQRT_HALF])

Y_45 = np.array([0, np.sin(np.pi / 8), 0, np.cos(np.pi / 8)])


class TestQuaternionIdentity(TestCase):

    def test_quaternion_identity(self):

        np.testing.assert_array_equal(rot.quaternion_identity(), [0, 0, 0, 1])


class TestQuaternionMagnitude(TestCase):

    def test_quaternion_magnitude(self):

        self.assertAlmostEqual(rot.quaternion_square_magnitude([1, 2, 3, 4]), 30)
        self.assertAlmostEqual(rot.quaternion_magnitude([1, 2, 3, 4]), np.sqrt(30))
        self.assertAlmostEqual(rot.quaternion_magnitude([0, 0, 0, 1]), 1)
        self.assertEqual(rot.quaternion_magnitude([0, 0, 0, 0]), 0)

    def test_quaternion_dot(self):

        self.assertAlmostEqual(rot.quaternion_dot([1, 2, 3, 4], [4, 3, 2, 1]), 20)
        self.assertAlmostEqual(rot.quaternion_dot([1, 0, 0, 0], [0, 1, 0, 0]), 0)

    def test_bad_shape(self):

        with self.assertRaises(ValueError):
            rot.quaternion_magnitude([1, 2, 3])

        with self.assertRaises(ValueError):
            rot.quaternion_magnitude(1.0)


class TestQuaternionNormalize(TestCase):

    def test_quaternion_normalize(self):

        np.testing.assert_array_almost_equal(rot.quaternion_normalize([1, 2, 3, 4]), np.array([1, 2, 3, 4]) / np.sqrt(30))

        np.testing.assert_array_almost_equal(rot.quaternion_normalize([0, 0, 0, -2]), [0, 0, 0, -1])

        self.assertAlmostEqual(rot.quaternion_magnitude(rot.quaternion_normalize([-3, 0.5, 2, 7])), 1)

    def test_too_small(self):

        np.testing.assert_array_equal(rot.quaternion_normalize([1e-6, 0, 0, 0]), [1e-6, 0, 0, 0])
        np.testing.assert_array_equal(rot.quaternion_normalize([0, 0, 0, 0]), [0, 0, 0, 0])

    def test_input_untouched(self):

        quaternion = np.array([1, 2, 3, 4], dtype=np.float64)

        rot.quaternion_normalize(quaternion)

        np.testing.assert_array_equal(quaternion, [1, 2, 3, 4])


class TestQuaternionConjugate(TestCase):

    def test_quaternion_conjugate(self):

        quaternion = np.array([1, 2, 3, 4], dtype=np.float64)

        np.testing.assert_array_equal(rot.quaternion_conjugate(quaternion), [-1, -2, -3, 4])

        np.testing.assert_array_equal(quaternion, [1, 2, 3, 4])


class TestQuaternionInverse(TestCase):

    def test_quaternion_inverse(self):

        np.testing.assert_array_almost_equal(rot.quaternion_inverse([1, 2, 3, 4]), np.array([-1, -2, -3, 4]) / 30)

        np.testing.assert_array_almost_equal(rot.quaternion_inverse(Y_90), [0, -SQRT_HALF, 0, SQRT_HALF])

    def test_product_is_identity(self):

        for quaternion in [[1, 2, 3, 4], Y_90, [-0.5, 0.1, 3, -2]]:
            with self.subTest(quaternion=quaternion):
                product = rot.quaternion_multiplication(quaternion, rot.quaternion_inverse(quaternion))

                np.testing.assert_array_almost_equal(product, [0, 0, 0, 1])

                product = rot.quaternion_multiplication(rot.quaternion_inverse(quaternion), quaternion)

                np.testing.assert_array_almost_equal(product, [0, 0, 0, 1])

    def test_degenerate(self):

        np.testing.assert_array_equal(rot.quaternion_inverse([0, 0, 0, 0]), [0, 0, 0, 0])
        np.testing.assert_array_equal(rot.quaternion_inverse([1e-3, 0, 0, 0]), [0, 0, 0, 0])


class TestQuaternionMultiplication(TestCase):

    def test_basis(self):

        i = [1, 0, 0, 0]
        j = [0, 1, 0, 0]
        k = [0, 0, 1, 0]

        np.testing.assert_array_equal(rot.quaternion_multiplication(i, j), k)
        np.testing.assert_array_equal(rot.quaternion_multiplication(j, i), [0, 0, -1, 0])
        np.testing.assert_array_equal(rot.quaternion_multiplication(j, k), i)
        np.testing.assert_array_equal(rot.quaternion_multiplication(k, i), j)
        np.testing.assert_array_equal(rot.quaternion_multiplication(i, i), [0, 0, 0, -1])

    def test_identity(self):

        quaternion = [1, 2, 3, 4]

        np.testing.assert_array_equal(rot.quaternion_multiplication(quaternion, [0, 0, 0, 1]), quaternion)
        np.testing.assert_array_equal(rot.quaternion_multiplication([0, 0, 0, 1], quaternion), quaternion)

    def test_composition(self):

        # two 90 degree rotations about y make a 180 degree rotation about y
        np.testing.assert_array_almost_equal(rot.quaternion_multiplication(Y_90, Y_90), [0, 1, 0, 0])

    def test_right_applied_first(self):

        about_z = np.array([0, 0, SQRT_HALF, SQRT_HALF])

        vector = np.array([1.0, 0, 0])

        composed = rot.quaternion_multiplication(Y_90, about_z)

        np.testing.assert_array_almost_equal(rot.quaternion_rotate(composed, vector),
                                             rot.quaternion_rotate(Y_90, rot.quaternion_rotate(about_z, vector)))

        # z first takes x to y, which is unchanged by a rotation about y
        np.testing.assert_array_almost_equal(rot.quaternion_rotate(composed, vector), [0, 1, 0])


class TestQuaternionRotate(TestCase):

    def test_identity(self):

        np.testing.assert_array_almost_equal(rot.quaternion_rotate([0, 0, 0, 1], [1, -2, 3]), [1, -2, 3])

    def test_about_y(self):

        np.testing.assert_array_almost_equal(rot.quaternion_rotate(Y_90, [1, 0, 0]), [0, 0, -1])
        np.testing.assert_array_almost_equal(rot.quaternion_rotate(Y_90, [0, 0, 1]), [1, 0, 0])
        np.testing.assert_array_almost_equal(rot.quaternion_rotate(Y_90, [0, 1, 0]), [0, 1, 0])

    def test_preserves_length(self):

        quaternion = rot.quaternion_normalize([0.3, -0.2, 0.9, 0.4])

        vector = np.array([3.0, -1.0, 2.0])

        self.assertAlmostEqual(np.linalg.norm(rot.quaternion_rotate(quaternion, vector)), np.linalg.norm(vector))

    def test_bad_shape(self):

        with self.assertRaises(ValueError):
            rot.quaternion_rotate(Y_90, [1, 0])


class TestNlerp(TestCase):

    def test_nlerp(self):

        np.testing.assert_array_almost_equal(rot.nlerp([0, 0, 0, 1], Y_90, 0), [0, 0, 0, 1])
        np.testing.assert_array_almost_equal(rot.nlerp([0, 0, 0, 1], Y_90, 1), Y_90)
        np.testing.assert_array_almost_equal(rot.nlerp([0, 0, 0, 1], Y_90, 0.5), Y_45)

    def test_times(self):

        np.testing.assert_array_almost_equal(rot.nlerp([0, 0, 0, 1], Y_90, 15, time0=10, time1=20), Y_45)


class TestSlerp(TestCase):

    def test_end_points(self):

        np.testing.assert_array_almost_equal(rot.slerp([0, 0, 0, 1], Y_90, 0), [0, 0, 0, 1])
        np.testing.assert_array_almost_equal(rot.slerp([0, 0, 0, 1], Y_90, 1), Y_90)

    def test_midpoint(self):

        np.testing.assert_array_almost_equal(rot.slerp([0, 0, 0, 1], Y_90, 0.5), Y_45)

    def test_constant_rate(self):

        q_quarter = rot.slerp([0, 0, 0, 1], Y_90, 0.25)

        np.testing.assert_array_almost_equal(q_quarter, [0, np.sin(np.pi / 16), 0, np.cos(np.pi / 16)])

    def test_shortest_path(self):

        np.testing.assert_array_almost_equal(rot.slerp([0, 0, 0, 1], -Y_90, 0.5), Y_45)

    def test_unnormalized_inputs(self):

        unit = rot.slerp([0, 0, 0, 1], Y_90, 0.25)

        np.testing.assert_array_almost_equal(rot.slerp([0, 0, 0, 2], Y_90, 0.25), unit)
        np.testing.assert_array_almost_equal(rot.slerp([0, 0, 0, 1], 3 * Y_90, 0.25), unit)
        np.testing.assert_array_almost_equal(rot.slerp([0, 0, 0, 0.5], -2 * Y_90, 0.25), unit)

    def test_extrapolation(self):

        np.testing.assert_array_almost_equal(rot.slerp([0, 0, 0, 1], Y_90, 2), [0, 1, 0, 0], decimal=4)

    def test_parallel(self):

        np.testing.assert_array_almost_equal(rot.slerp(Y_90, Y_90, 0.3), Y_90)

        nearly = rot.quaternion_normalize(Y_90 + [1e-7, 0, 0, 0])

        result = rot.slerp(Y_90, nearly, 0.5)

        self.assertTrue(np.isfinite(result).all())
        self.assertAlmostEqual(rot.quaternion_magnitude(result), 1)
        np.testing.assert_array_almost_equal(result, Y_90)

    def test_unit_length(self):

        q1 = rot.quaternion_normalize([0.2, -0.4, 0.1, 0.8])
        q2 = rot.quaternion_normalize([-0.7, 0.3, 0.5, 0.1])

        for time in np.linspace(-0.5, 1.5, 21):
            with self.subTest(time=time):
                self.assertAlmostEqual(rot.quaternion_magnitude(rot.slerp(q1, q2, time)), 1)

    def test_times(self):

        time0 = Timestamp('2020-01-01T00:00:00')
        time1 = time0 + Timedelta(seconds=10)

        np.testing.assert_array_almost_equal(rot.slerp([0, 0, 0, 1], Y_90, time0 + Timedelta(seconds=5),
                                                       time0=time0, time1=time1),
                                             Y_45)

        np.testing.assert_array_almost_equal(rot.slerp([0, 0, 0, 1], Y_90, 3.0, time0=2.0, time1=4.0), Y_45)

    def test_bad_times(self):

        with self.assertRaises(ValueError):
            rot.slerp([0, 0, 0, 1], Y_90, 1, time0=1, time1=1)

        with self.assertRaises(TypeError):
            rot.slerp([0, 0, 0, 1], Y_90, 'now')

    def test_inputs_untouched(self):

        q1 = -Y_90.copy()

        rot.slerp([0, 0, 0, 1], q1, 0.5)

        np.testing.assert_array_equal(q1, -Y_90)

    def test_orthogonal(self):

        # the half way point between the identity and a 180 degree rotation about z
        result = rot.slerp([0, 0, 0, 1], [0, 0, 1, 0], 0.5)

        np.testing.assert_array_almost_equal(result, [0, 0, sm.sqrt(0.5), sm.sqrt(0.5)], decimal=4)
