from unittest import TestCase

import numpy as np

from rotquat import rotations as rq
from rotquat.rotations.core import conversions


ORDERS = ['XYZ', 'XZY', 'YXZ', 'YZX', 'ZXY', 'ZYX']

ANGLE_SETS = [(0.3, -0.7, 1.1), (-1.1, 0.5, -0.2), (0.9, 1.0, -1.15), (0, 0, 0), (0.01, -0.02, 0.03)]


class TestQuaternionToRotMat(TestCase):

    def test_quaternion_to_rotmat(self):

        np.testing.assert_array_almost_equal(rq.quaternion_to_rotmat([0, 0, 0, 1]), np.eye(3))

        np.testing.assert_array_almost_equal(rq.quaternion_to_rotmat([0, 0, -np.sqrt(2) / 2, np.sqrt(2) / 2]),
                                             [[0, 1, 0], [-1, 0, 0], [0, 0, 1]])

        np.testing.assert_array_almost_equal(rq.quaternion_to_rotmat([1, 0, 0, 0]),
                                             [[1, 0, 0], [0, -1, 0], [0, 0, -1]])

        np.testing.assert_array_almost_equal(rq.quaternion_to_rotmat([0.25532186, 0.51064372, 0.76596558,
                                                                      0.29555113]),
                                             [[-0.69492056, -0.19200697, 0.69297817],
                                              [0.71352099, -0.30378504, 0.6313497],
                                              [0.08929286, 0.93319235, 0.34810748]])

    def test_double_cover(self):

        q = np.array([0.25532186, -0.51064372, 0.76596558, 0.29555113])

        np.testing.assert_array_almost_equal(rq.quaternion_to_rotmat(q), rq.quaternion_to_rotmat(-q))

        # not normalized
        np.testing.assert_array_almost_equal(rq.quaternion_to_rotmat(q), rq.quaternion_to_rotmat(4 * q))

    def test_orthonormal(self):

        rotmat = rq.quaternion_to_rotmat([1, 2, 3, 4])

        np.testing.assert_array_almost_equal(rotmat @ rotmat.T, np.eye(3))
        self.assertAlmostEqual(np.linalg.det(rotmat), 1)


class TestRotMatToQuaternion(TestCase):

    def test_rotmat_to_quaternion(self):

        q = rq.rotmat_to_quaternion(np.eye(3))

        np.testing.assert_allclose(q, [0, 0, 0, 1], atol=1e-16)

        q = rq.rotmat_to_quaternion(np.array([[-1., 0, 0], [0, 1, 0], [0, 0, -1]]))

        np.testing.assert_allclose(np.abs(q), [0, 1, 0, 0], atol=1e-16)

        q = rq.rotmat_to_quaternion(np.array([[1., 0, 0], [0, -1, 0], [0, 0, -1]]))

        np.testing.assert_allclose(np.abs(q), [1, 0, 0, 0], atol=1e-16)

        q = rq.rotmat_to_quaternion(np.array([[-1., 0, 0], [0, -1, 0], [0, 0, 1]]))

        np.testing.assert_allclose(np.abs(q), [0, 0, 1, 0], atol=1e-16)

        q = rq.rotmat_to_quaternion([[0, 1, 0], [-1, 0, 0], [0, 0, 1]])

        np.testing.assert_allclose(q, [0, 0, -np.sqrt(2) / 2, np.sqrt(2) / 2], atol=1e-16)

        q = rq.rotmat_to_quaternion([[-0.69492056, -0.19200697, 0.69297817],
                                     [0.71352099, -0.30378504, 0.6313497],
                                     [0.08929286, 0.93319235, 0.34810748]])

        np.testing.assert_array_almost_equal(q, [0.25532186, 0.51064372, 0.76596558, 0.29555113], decimal=6)

    def test_round_trip(self):

        # one quaternion landing in each of the four branches
        quaternions = [[0.1, 0.2, 0.3, 0.9],
                       [0.9, 0.2, -0.3, 0.1],
                       [0.2, -0.9, 0.3, 0.1],
                       [-0.3, 0.2, 0.9, -0.1]]

        for quaternion in quaternions:

            with self.subTest(quaternion=quaternion):

                quaternion = np.array(quaternion) / np.linalg.norm(quaternion)

                q = rq.rotmat_to_quaternion(rq.quaternion_to_rotmat(quaternion))

                if q @ quaternion < 0:
                    q = -q

                np.testing.assert_array_almost_equal(q, quaternion)

    def test_bad_shape(self):

        with self.assertRaises(ValueError):
            rq.rotmat_to_quaternion(np.eye(4))


class TestAxisAngle(TestCase):

    def test_axis_angle_to_quaternion(self):

        q = rq.axis_angle_to_quaternion([0, 0, 2], np.pi / 2)

        np.testing.assert_array_almost_equal(q, [0, 0, np.sqrt(2) / 2, np.sqrt(2) / 2])

        q = rq.axis_angle_to_quaternion([0, 0, 2], np.pi / 2, assume_unit=True)

        np.testing.assert_array_almost_equal(q, [0, 0, np.sqrt(2), np.sqrt(2) / 2])

        q = rq.axis_angle_to_quaternion([1, 0, 0], 0)

        np.testing.assert_array_equal(q, [0, 0, 0, 1])

    def test_zero_axis(self):

        with self.assertWarns(UserWarning):
            q = rq.axis_angle_to_quaternion([0, 0, 0], 1)

        np.testing.assert_array_almost_equal(q, [np.sin(0.5), 0, 0, np.cos(0.5)])

    def test_quaternion_to_axis_angle(self):

        axis, angle = rq.quaternion_to_axis_angle([0, 0, np.sqrt(2) / 2, np.sqrt(2) / 2])

        np.testing.assert_array_almost_equal(axis, [0, 0, 1])
        self.assertAlmostEqual(angle, np.pi / 2)

        axis, angle = rq.quaternion_to_axis_angle([0, 0, 0, 1])

        np.testing.assert_array_equal(axis, [0, 0, 0])
        self.assertEqual(angle, 0)

        axis, angle = rq.quaternion_to_axis_angle([0, 0, 0, -1])

        self.assertAlmostEqual(angle, 2 * np.pi)

    def test_round_trip(self):

        axes = [[1, 0, 0], [0, 1, 0], [0, 0, 1], [1, 2, 3], [-0.5, 0.1, 0.2]]
        angles = [0.1, 1, 2.5, 3.1, -0.4, -2.9]

        for axis in axes:

            axis = np.array(axis) / np.linalg.norm(axis)

            for angle in angles:

                with self.subTest(axis=axis, angle=angle):

                    axis_out, angle_out = rq.quaternion_to_axis_angle(rq.axis_angle_to_quaternion(axis, angle))

                    self.assertAlmostEqual(angle_out, abs(angle))
                    np.testing.assert_allclose(axis_out, np.sign(angle) * axis, atol=1e-5)


class TestEulerToRotMat(TestCase):

    def test_euler_to_rotmat(self):

        np.testing.assert_array_almost_equal(rq.euler_to_rotmat([0.1, 0.2, 0.3], 'XYZ'),
                                             rq.rot_x(0.1) @ rq.rot_y(0.2) @ rq.rot_z(0.3))

        np.testing.assert_array_almost_equal(rq.euler_to_rotmat([0.1, 0.2, 0.3], 'yxz'),
                                             rq.rot_y(0.2) @ rq.rot_x(0.1) @ rq.rot_z(0.3))

        np.testing.assert_array_almost_equal(rq.euler_to_rotmat([0.1, 0.2, 0.3], 'ZYX'),
                                             rq.rot_z(0.3) @ rq.rot_y(0.2) @ rq.rot_x(0.1))

    def test_invalid_order(self):

        with self.assertRaises(ValueError):
            rq.euler_to_rotmat([0.1, 0.2, 0.3], 'XXY')


class TestEulerToQuaternion(TestCase):

    def test_single_axis(self):

        for order in ORDERS:

            with self.subTest(order=order):

                np.testing.assert_array_almost_equal(rq.euler_to_quaternion([0.4, 0, 0], order),
                                                     [np.sin(0.2), 0, 0, np.cos(0.2)])

                np.testing.assert_array_almost_equal(rq.euler_to_quaternion([0, 0.4, 0], order),
                                                     [0, np.sin(0.2), 0, np.cos(0.2)])

                np.testing.assert_array_almost_equal(rq.euler_to_quaternion([0, 0, 0.4], order),
                                                     [0, 0, np.sin(0.2), np.cos(0.2)])

    def test_matches_rotmat(self):

        for order in ORDERS:

            for angles in ANGLE_SETS:

                with self.subTest(order=order, angles=angles):

                    q = rq.euler_to_quaternion(angles, order)

                    self.assertAlmostEqual(np.linalg.norm(q), 1)

                    np.testing.assert_array_almost_equal(rq.quaternion_to_rotmat(q),
                                                         rq.euler_to_rotmat(angles, order))

    def test_dispatch(self):

        explicit = {'XYZ': conversions.euler_to_quaternion_xyz, 'XZY': conversions.euler_to_quaternion_xzy,
                    'YXZ': conversions.euler_to_quaternion_yxz, 'YZX': conversions.euler_to_quaternion_yzx,
                    'ZXY': conversions.euler_to_quaternion_zxy, 'ZYX': conversions.euler_to_quaternion_zyx}

        for order, function in explicit.items():

            with self.subTest(order=order):

                np.testing.assert_array_equal(rq.euler_to_quaternion([0.3, -0.7, 1.1], order),
                                              function(0.3, -0.7, 1.1))

                np.testing.assert_array_equal(rq.euler_to_quaternion([0.3, -0.7, 1.1], order.lower()),
                                              function(0.3, -0.7, 1.1))

    def test_invalid_order(self):

        with self.assertRaises(ValueError):
            rq.euler_to_quaternion([0.1, 0.2, 0.3], 'XYX')


class TestQuaternionToEuler(TestCase):

    def test_round_trip(self):

        for order in ORDERS:

            for angles in ANGLE_SETS:

                with self.subTest(order=order, angles=angles):

                    angles_out = rq.quaternion_to_euler(rq.euler_to_quaternion(angles, order), order)

                    np.testing.assert_allclose(angles_out, angles, atol=1e-10)

    def test_sign_and_scale(self):

        q = rq.euler_to_quaternion([0.3, -0.7, 1.1], 'ZXY')

        np.testing.assert_allclose(rq.quaternion_to_euler(-3 * q, 'zxy'), [0.3, -0.7, 1.1], atol=1e-10)

    def test_singularity(self):

        # the angle about the middle axis of each order is +/- pi/2, the first axis angle is recovered and the last is 0
        for sign in [1, -1]:

            singular_angles = {'XYZ': (0.4, sign * np.pi / 2, 0),
                               'XZY': (0.4, 0, sign * np.pi / 2),
                               'YXZ': (sign * np.pi / 2, 0.4, 0),
                               'YZX': (0, 0.4, sign * np.pi / 2),
                               'ZXY': (sign * np.pi / 2, 0, 0.4),
                               'ZYX': (0, sign * np.pi / 2, 0.4)}

            for order, angles in singular_angles.items():

                with self.subTest(order=order, sign=sign):

                    angles_out = rq.quaternion_to_euler(rq.euler_to_quaternion(angles, order), order)

                    np.testing.assert_allclose(angles_out, angles, atol=1e-7)

    def test_singularity_same_rotation(self):

        for sign in [1, -1]:

            with self.subTest(sign=sign):

                angles = (0.4, sign * np.pi / 2, -0.25)

                angles_out = rq.quaternion_to_euler(rq.euler_to_quaternion(angles, 'XYZ'), 'XYZ')

                self.assertEqual(angles_out[2], 0)
                np.testing.assert_array_almost_equal(rq.euler_to_rotmat(angles_out, 'XYZ'),
                                                     rq.euler_to_rotmat(angles, 'XYZ'))

    def test_returns_floats(self):

        angles_out = rq.quaternion_to_euler([0, 0, 0, 1])

        self.assertEqual(angles_out, (0.0, 0.0, 0.0))
        self.assertTrue(all(isinstance(angle, float) for angle in angles_out))

    def test_invalid_order(self):

        with self.assertRaises(ValueError):
            rq.quaternion_to_euler([0, 0, 0, 1], 'ABC')
