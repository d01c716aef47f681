import io
import unittest

import mock

from kivy_life import cli
from kivy_life.constants import CLEAR_SCREEN


class MainTestCase(unittest.TestCase):

    def _run(self, *argv):
        stream = io.StringIO()
        status = cli.main(list(argv), stream=stream)
        return status, stream.getvalue()

    def test_prints_each_generation(self):
        status, out = self._run("-w", "3", "-H", "3", "-c", "1,0;1,1;1,2",
                                "-g", "2", "-d", "0", "--no-clear")
        self.assertEqual(status, 0)
        self.assertEqual(out, (
            ". O . \n"
            ". O . \n"
            ". O . \n"
            "\n"
            "Generation 1:\n"
            ". . . \n"
            "O O O \n"
            ". . . \n"
            "\n"
            "Generation 2:\n"
            ". O . \n"
            ". O . \n"
            ". O . \n"
            "\n"
        ))

    def test_unicode_mode_and_clear(self):
        status, out = self._run("-w", "2", "-H", "1", "-c", "0,0",
                                "-m", "unicode", "-d", "0")
        self.assertEqual(status, 0)
        self.assertTrue(out.startswith("● ○ \n\n"))
        self.assertIn(CLEAR_SCREEN, out)

    def test_pattern_option(self):
        status, out = self._run("-w", "4", "-H", "4", "-p", "block",
                                "-o", "1,1", "-g", "1", "-d", "0", "--no-clear")
        self.assertEqual(status, 0)
        self.assertEqual(out.count("O"), 8)

    def test_delay_sleeps(self):
        with mock.patch("kivy_life.cli.time.sleep") as sleep:
            self._run("-w", "2", "-H", "2", "-g", "3", "-d", "250", "--no-clear")
        self.assertEqual(sleep.call_count, 3)
        sleep.assert_called_with(0.25)

    def test_invalid_cells_exit(self):
        with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            with self.assertRaises(SystemExit) as cm:
                self._run("-w", "3", "-H", "3", "-c", "1;2,2")
        self.assertEqual(cm.exception.code, 2)
        self.assertIn("Invalid cell format", stderr.getvalue())

    def test_out_of_bounds_exit(self):
        with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            with self.assertRaises(SystemExit) as cm:
                self._run("-w", "3", "-H", "3", "-c", "3,0")
        self.assertEqual(cm.exception.code, 2)
        self.assertIn("outside 3x3 grid", stderr.getvalue())

    def test_negative_bounds_exit(self):
        with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            with self.assertRaises(SystemExit) as cm:
                self._run("-w", "-1", "-H", "3")
        self.assertEqual(cm.exception.code, 2)
        self.assertIn("width and height must be non-negative", stderr.getvalue())
