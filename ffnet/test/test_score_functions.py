import unittest

import numpy as np

from ffnet.core.exception import DimensionMismatch
from ffnet.score_functions import accuracy


class TestAccuracy(unittest.TestCase):

    def test_all_hits(self):

        labels = np.eye(3)
        outputs = np.array([[0.9, 0.1, 0.2],
                            [0.3, 0.8, 0.1],
                            [0.2, 0.4, 0.7]])

        self.assertEqual(accuracy(outputs, labels), 1.0)

    def test_partial_hits(self):

        labels = np.array([[1., 0., 0.],
                           [0., 1., 0.],
                           [0., 0., 1.],
                           [1., 0., 0.]])
        outputs = np.array([[0.9, 0.1, 0.2],
                            [0.9, 0.8, 0.1],
                            [0.2, 0.4, 0.7],
                            [0.1, 0.5, 0.2]])

        self.assertEqual(accuracy(outputs, labels), 0.5)

    def test_ties_count_as_hits(self):

        labels = np.array([[0., 1., 0.]])
        outputs = np.array([[0.6, 0.6, 0.1]])

        self.assertEqual(accuracy(outputs, labels), 1.0)

    def test_no_true_class_uses_first_column(self):

        labels = np.zeros((2, 3))
        outputs = np.array([[0.9, 0.1, 0.2],
                            [0.1, 0.9, 0.2]])

        self.assertEqual(accuracy(outputs, labels), 0.5)

    def test_empty(self):
        self.assertEqual(accuracy(np.zeros((0, 3)), np.zeros((0, 3))), 0.0)

    def test_shape_mismatch(self):
        with self.assertRaises(DimensionMismatch):
            accuracy(np.zeros((4, 3)), np.zeros((5, 3)))
