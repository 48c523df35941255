import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from cascadeim.cli import main
from cascadeim.config import RunConfig
from cascadeim.errors import ConfigError
from cascadeim.reporting import format_influence, format_seed_set


class TestReporting(unittest.TestCase):

    def test_format_seed_set(self):
        self.assertEqual(format_seed_set({3, 1, 2}), "{1, 2, 3}")
        self.assertEqual(format_seed_set([7]), "{7}")
        self.assertEqual(format_seed_set(set()), "{}")

    def test_format_influence(self):
        self.assertEqual(format_influence(2), "2.000000")
        self.assertEqual(format_influence(1.5), "1.500000")


class TestRunConfig(unittest.TestCase):

    def test_valid(self):
        with tempfile.TemporaryDirectory() as d:
            config = RunConfig(cascade_dir=d, k=3).validate()
            self.assertEqual(config.k, 3)

    def test_invalid_k(self):
        with tempfile.TemporaryDirectory() as d:
            for k in [0, -2, 1.5, True]:
                with self.assertRaises(ConfigError):
                    RunConfig(cascade_dir=d, k=k).validate()

    def test_missing_directory(self):
        with self.assertRaises(ConfigError):
            RunConfig(cascade_dir="/nonexistent/cascades", k=1).validate()

    def test_invalid_processes(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(ConfigError):
                RunConfig(cascade_dir=d, k=1, processes=0).validate()


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        cascades = {
            "c0.txt": "# cascade 0\n1 2\n2 3\n2 4\n",
            "c1.txt": "5 6\n",
            "c2.txt": "% cascade 2\n1 7\n",
            "c3.txt": "8 9\n",
        }
        for name, text in cascades.items():
            with open(os.path.join(self.tmp.name, name), "w", encoding="utf-8") as f:
                f.write(text)

    def tearDown(self):
        self.tmp.cleanup()

    def run_cli(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            status = main(list(argv))
        return status, out.getvalue(), err.getvalue()

    def test_reference_run(self):
        status, out, _ = self.run_cli(self.tmp.name, "-k", "1")
        self.assertEqual(status, 0)
        self.assertIn("CASCADES READ! NUMBER OF CASCADES: 4", out)
        self.assertIn("APPROXIMATELY OPTIMAL SET (SIZE 1): {1}", out)
        self.assertIn("INFLUENCE OF APPROX. OPTIMAL SET (NUMBER OF NODES): 2.000000", out)
        self.assertIn("TIME (SEC):", out)

    def test_lazy_with_summary(self):
        status, out, _ = self.run_cli(self.tmp.name, "-k", "2", "--lazy", "--summary")
        self.assertEqual(status, 0)
        self.assertIn("{1, 5}", out)
        self.assertIn("MOST FREQUENTLY REACHED NODES", out)
        self.assertIn("CASCADE DEPTH FROM SEEDS: mean=1.000 max=2", out)

    def test_invalid_k_exits_with_error(self):
        status, _, err = self.run_cli(self.tmp.name, "-k", "0")
        self.assertEqual(status, 2)
        self.assertIn("k must be a positive integer", err)

    def test_undecodable_cascade_exits_with_error(self):
        with open(os.path.join(self.tmp.name, "c4.txt"), "wb") as f:
            f.write(b"1 2\n\xff\xfe 3\n")
        status, _, err = self.run_cli(self.tmp.name, "-k", "1")
        self.assertEqual(status, 2)
        self.assertIn("not a UTF-8 text file", err)

    def test_empty_directory_exits_with_error(self):
        with tempfile.TemporaryDirectory() as d:
            status, _, err = self.run_cli(d, "-k", "1")
        self.assertEqual(status, 2)
        self.assertIn("No '*.txt' cascade files", err)


if __name__ == "__main__":
    unittest.main()
