from unittest import TestCase

import numpy as np

from rotquat.rotations import frames


class TestOrthonormalize(TestCase):

    def check_basis(self, basis, right, up, back):

        np.testing.assert_array_almost_equal(basis[0], right)
        np.testing.assert_array_almost_equal(basis[1], up)
        np.testing.assert_array_almost_equal(basis[2], back)

        np.testing.assert_array_almost_equal(np.cross(basis[0], basis[1]), basis[2])

    def test_orthonormal_input(self):

        self.check_basis(frames.orthonormalize([1, 0, 0], [0, 1, 0], [0, 0, 1]), [1, 0, 0], [0, 1, 0], [0, 0, 1])

        self.check_basis(frames.orthonormalize([0, 1, 0], [-1, 0, 0]), [0, 1, 0], [-1, 0, 0], [0, 0, 1])

    def test_skewed_input(self):

        self.check_basis(frames.orthonormalize([2, 0, 0], [1, 1, 0]), [1, 0, 0], [0, 1, 0], [0, 0, 1])

        self.check_basis(frames.orthonormalize([1, 1, 0], [0, 1, 0], [0, 0, 5]),
                         np.array([1, 1, 0]) / np.sqrt(2), np.array([-1, 1, 0]) / np.sqrt(2), [0, 0, 1])

    def test_back_sign(self):

        self.check_basis(frames.orthonormalize([1, 0, 0], [0, 1, 0], [0, 0, -1]), [1, 0, 0], [0, -1, 0], [0, 0, -1])

    def test_parallel(self):

        with self.assertWarns(UserWarning):
            basis = frames.orthonormalize([1, 0, 0], [3, 0, 0])

        self.check_basis(basis, [1, 0, 0], [0, 1, 0], [0, 0, 1])

        with self.assertWarns(UserWarning):
            basis = frames.orthonormalize([0, 1, 0], [0, 1, 0])

        self.check_basis(basis, [0, 1, 0], [0, 0, 1], [1, 0, 0])

    def test_zero_vectors(self):

        with self.assertWarns(UserWarning):
            basis = frames.orthonormalize([0, 0, 0], [0, 1, 0])

        self.check_basis(basis, [1, 0, 0], [0, 1, 0], [0, 0, 1])

        with self.assertWarns(UserWarning):
            basis = frames.orthonormalize([1, 0, 0], [0, 0, 0])

        self.check_basis(basis, [1, 0, 0], [0, 1, 0], [0, 0, 1])


class TestLookAtBasis(TestCase):

    def check_basis(self, basis, right, up, back):

        np.testing.assert_array_almost_equal(basis[0], right)
        np.testing.assert_array_almost_equal(basis[1], up)
        np.testing.assert_array_almost_equal(basis[2], back)

        np.testing.assert_array_almost_equal(np.cross(basis[0], basis[1]), basis[2])

    def test_look_at_basis(self):

        self.check_basis(frames.look_at_basis([0, 0, 0], [0, 0, -1]), [1, 0, 0], [0, 1, 0], [0, 0, 1])

        self.check_basis(frames.look_at_basis([1, 2, 3], [1, 2, -10]), [1, 0, 0], [0, 1, 0], [0, 0, 1])

        self.check_basis(frames.look_at_basis([0, 0, 0], [1, 0, 0]), [0, 0, 1], [0, 1, 0], [-1, 0, 0])

        self.check_basis(frames.look_at_basis([0, 0, 0], [0, 0, -1], up=[1, 0, 0]), [0, -1, 0], [1, 0, 0],
                         [0, 0, 1])

    def test_up_not_perpendicular(self):

        right, up, back = frames.look_at_basis([0, 0, 0], [0, 0, -1], up=[0, 1, 1])

        np.testing.assert_array_almost_equal(up, [0, 1, 0])
        np.testing.assert_array_almost_equal(-back, [0, 0, -1])

    def test_up_parallel_to_look(self):

        with self.assertWarns(UserWarning):
            basis = frames.look_at_basis([0, 0, 0], [0, 1, 0])

        self.check_basis(basis, [0, 0, -1], [1, 0, 0], [0, -1, 0])

    def test_up_and_x_parallel_to_look(self):

        with self.assertWarns(UserWarning):
            basis = frames.look_at_basis([0, 0, 0], [1, 0, 0], up=[1, 0, 0])

        self.check_basis(basis, [0, 0, 1], [0, 1, 0], [-1, 0, 0])

        with self.assertWarns(UserWarning):
            basis = frames.look_at_basis([0, 0, 0], [-1, 0, 0], up=[1, 0, 0])

        self.check_basis(basis, [0, 0, -1], [0, 1, 0], [1, 0, 0])

    def test_coincident_eye_and_target(self):

        with self.assertWarns(UserWarning):
            basis = frames.look_at_basis([1, 1, 1], [1, 1, 1])

        self.check_basis(basis, [-1, 0, 0], [0, 1, 0], [0, 0, -1])
