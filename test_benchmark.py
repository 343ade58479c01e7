import argparse, os, tempfile, unittest
import benchmark
from veb import VEB


class TestGenerateKeys(unittest.TestCase):
    def test_keys_are_distinct_sorted_and_in_range(self):
        keys = benchmark.generate_keys(256, 100, seed=3)
        self.assertEqual(len(keys), 100)
        self.assertEqual(keys, sorted(set(keys)))
        self.assertTrue(all(0 <= k < 256 for k in keys))
        self.assertTrue(all(type(k) is int for k in keys))

    def test_clipped_to_universe(self):
        self.assertEqual(benchmark.generate_keys(8, 50, seed=0), list(range(8)))

    def test_seed_is_reproducible(self):
        self.assertEqual(benchmark.generate_keys(1024, 30, seed=7),
                         benchmark.generate_keys(1024, 30, seed=7))


class TestNeighbourWalk(unittest.TestCase):
    def setUp(self):
        self.tree = benchmark.build_tree(64, [3, 10, 11, 40, 41, 63])

    def test_build_tree(self):
        self.assertIsInstance(self.tree, VEB)
        self.assertEqual(list(self.tree), [3, 10, 11, 40, 41, 63])

    def test_walk_from_non_member(self):
        pre_res, succ_res = benchmark.neighbour_walk(self.tree, 20, 2, 3)
        self.assertEqual(pre_res, [11, 10])
        self.assertEqual(succ_res, [40, 41, 63])

    def test_walk_stops_at_ends(self):
        pre_res, succ_res = benchmark.neighbour_walk(self.tree, 10, 5, 0)
        self.assertEqual(pre_res, [3])
        self.assertEqual(succ_res, [])
        pre_res, succ_res = benchmark.neighbour_walk(self.tree, 41, 0, 5)
        self.assertEqual(succ_res, [63])


class TestRun(unittest.TestCase):
    def test_run_records_speed(self):
        with tempfile.TemporaryDirectory() as tmp:
            record_path = os.path.join(tmp, "QUERY_SPEED")
            args = argparse.Namespace(universe_bits=8, num_keys=50,
                                      num_queries=20, pre_step=3, succ_step=3,
                                      seed=5, speed_record_path=record_path)
            timings = benchmark.run(args)
            self.assertEqual(set(timings), {'alloc', 'insert', 'member', 'walk', 'delete'})
            with open(os.path.join(record_path, "speed_log.txt")) as fr:
                lines = fr.read().splitlines()
            self.assertEqual([l.split(",")[0] for l in lines],
                             ['alloc', 'insert', 'member', 'walk', 'delete'])

    def test_main(self):
        self.assertIsNone(benchmark.main(["--universe_bits", "6", "--num_keys", "20",
                                          "--num_queries", "5"]))

    def test_main_rejects_bad_universe(self):
        with self.assertRaises(SystemExit):
            benchmark.main(["--universe_bits", "0"])


if __name__ == '__main__':
    unittest.main()
