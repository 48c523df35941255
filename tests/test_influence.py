import unittest

from cascadeim.diffusion.influence import estimate_influence, per_cascade_counts
from cascadeim.errors import EmptyCascadeSetError
from cascadeim.graphs.cascades import CascadeSet

from tests.helpers import example_cascades, random_dag_cascades


class TestEstimateInfluence(unittest.TestCase):

    def test_average_over_cascades(self):
        cascades = example_cascades()
        self.assertEqual(per_cascade_counts(cascades, {1}), [4, 1, 2, 1])
        self.assertAlmostEqual(estimate_influence(cascades, {1}), 2.0)

    def test_empty_seed_set_is_zero(self):
        self.assertEqual(estimate_influence(example_cascades(), set()), 0.0)

    def test_no_cascades_raises(self):
        with self.assertRaises(EmptyCascadeSetError):
            estimate_influence([], {1})

    def test_order_independent(self):
        cascades = example_cascades()
        self.assertEqual(
            estimate_influence(cascades, {1, 5}),
            estimate_influence(list(reversed(cascades)), {1, 5}),
        )

    def test_monotone_in_seed_set(self):
        cascades = random_dag_cascades()
        seeds = set()
        previous = estimate_influence(cascades, seeds)
        for node in [3, 11, 1, 20, 7]:
            seeds.add(node)
            current = estimate_influence(cascades, seeds)
            self.assertLessEqual(previous, current)
            previous = current

    def test_accepts_cascade_set(self):
        cascade_set = CascadeSet.from_adjacency(example_cascades())
        self.assertAlmostEqual(estimate_influence(cascade_set, {1}), 2.0)


if __name__ == "__main__":
    unittest.main()
