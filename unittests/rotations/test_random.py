from itertools import islice
from unittest import TestCase

import numpy as np

from rotquat.rotations import Quaternion, RandomQuaternionGenerator, RandomQuaternionOptions
from rotquat.rotations.random import shoemake_quaternion


class TestShoemakeQuaternion(TestCase):

    def test_shoemake_quaternion(self):

        np.testing.assert_array_almost_equal(shoemake_quaternion(0, 0, 0), [0, 1, 0, 0])

        np.testing.assert_array_almost_equal(shoemake_quaternion(1, 0, 0.25), [0, 0, 1, 0])

        np.testing.assert_array_almost_equal(shoemake_quaternion(0.5, 0.125, 0.5),
                                             [0.5, 0.5, 0, -np.sqrt(0.5)])

    def test_unit(self):

        for u, v, w in [(0.1, 0.2, 0.3), (0.99, 0.5, 0.01), (0.5, 0.5, 0.5)]:

            with self.subTest(u=u, v=v, w=w):

                self.assertAlmostEqual(np.linalg.norm(shoemake_quaternion(u, v, w)), 1)


class TestRandomQuaternionGenerator(TestCase):

    def test_default_seed(self):

        generator = RandomQuaternionGenerator()

        self.assertEqual(generator.seed, 1)

        self.assertEqual(generator(), RandomQuaternionGenerator(RandomQuaternionOptions(seed=1))())

    def test_reproducible(self):

        first = RandomQuaternionGenerator(RandomQuaternionOptions(seed=42))
        second = RandomQuaternionGenerator(RandomQuaternionOptions(seed=42))

        self.assertEqual([first() for _ in range(10)], [second() for _ in range(10)])

        other = RandomQuaternionGenerator(RandomQuaternionOptions(seed=43))

        self.assertNotEqual(RandomQuaternionGenerator(RandomQuaternionOptions(seed=42))(), other())

    def test_unit_quaternions(self):

        generator = RandomQuaternionGenerator()

        for _ in range(50):

            q = generator.next()

            self.assertIsInstance(q, Quaternion)
            self.assertTrue(q.is_unit())

    def test_shared_stream(self):

        reference = RandomQuaternionGenerator(RandomQuaternionOptions(seed=7))
        expected = [reference() for _ in range(4)]

        generator = RandomQuaternionGenerator(RandomQuaternionOptions(seed=7))

        drawn = [generator(), generator.next(), next(generator)]
        drawn.extend(islice(generator, 1))

        self.assertEqual(drawn, expected)

    def test_reset_settings(self):

        generator = RandomQuaternionGenerator(RandomQuaternionOptions(seed=3))

        first = [generator() for _ in range(3)]

        generator.seed = 10
        generator()

        generator.reset_settings()

        self.assertEqual(generator.seed, 3)
        self.assertEqual([generator() for _ in range(3)], first)

    def test_independent_streams(self):

        first = RandomQuaternionGenerator(RandomQuaternionOptions(seed=5))
        second = RandomQuaternionGenerator(RandomQuaternionOptions(seed=5))

        expected = second()

        # drawing from one generator does not advance another
        for _ in range(5):
            first()

        self.assertEqual(RandomQuaternionGenerator(RandomQuaternionOptions(seed=5))(), expected)

    def test_no_seed(self):

        generator = RandomQuaternionGenerator(RandomQuaternionOptions(seed=None))

        self.assertIsNone(generator.seed)
        self.assertTrue(generator().is_unit())

    def test_uniform(self):

        generator = RandomQuaternionGenerator()

        matrices = np.array([generator().to_matrix() for _ in range(2000)])

        # the rotation matrices of uniformly distributed rotations average to zero
        np.testing.assert_allclose(matrices.mean(axis=0), np.zeros((3, 3)), atol=0.1)
