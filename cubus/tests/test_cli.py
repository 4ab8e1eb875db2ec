import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from rich.console import Console

from cubus.app.cli import format_result, main
from cubus.core import CubeModel, Move
from cubus.render.net import print_net, render_net
from cubus.solve.equivalence_search import SearchResult


def run_cli(*argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        try:
            code = main(list(argv))
        except SystemExit as exc:
            code = exc.code
    return code, out.getvalue(), err.getvalue()


class TestRenderNet(unittest.TestCase):
    def test_solved_2x2(self):
        expected = "\n".join([
            "     W W",
            "     W W",
            "O O  G G  R R  B B",
            "O O  G G  R R  B B",
            "     Y Y",
            "     Y Y",
        ])
        self.assertEqual(render_net(CubeModel(2)), expected)

    def test_printed_lines_have_no_trailing_space(self):
        buf = io.StringIO()
        cube = CubeModel(3).moved(Move("x", 1, 1))
        print_net(cube, Console(file=buf, width=120))
        lines = buf.getvalue().splitlines()
        self.assertEqual(len(lines), 9)
        for line in lines:
            self.assertEqual(line, line.rstrip())
        self.assertEqual(buf.getvalue(), render_net(cube) + "\n")

    def test_top_layer_turn(self):
        lines = render_net(CubeModel(3).moved(Move("y", 2, 1))).splitlines()
        self.assertEqual(lines[3], "B B B  O O O  G G G  R R R")
        self.assertEqual(lines[4], "O O O  G G G  R R R  B B B")


class TestFormatResult(unittest.TestCase):
    def test_singular(self):
        lines = format_result(SearchResult(["X1"], 1))
        self.assertEqual(lines, ["1 sequence from 1 exploratory move:", "X1"])

    def test_rows_of_four(self):
        seqs = ["a", "b", "c", "d", "e"]
        lines = format_result(SearchResult(seqs, 30))
        self.assertEqual(lines[0], "5 sequences from 30 exploratory moves:")
        self.assertEqual(lines[1], "a\tb\tc\td")
        self.assertEqual(lines[2], "e")

    def test_no_sequences(self):
        self.assertEqual(format_result(SearchResult([], 0)), ["0 sequences from 0 exploratory moves:"])


class TestCli(unittest.TestCase):
    def test_apply_mode(self):
        code, out, _ = run_cli("2", "X0")
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 7)
        self.assertEqual(lines[-1], "X0")
        self.assertNotIn("sequence", out)

    def test_search_mode(self):
        code, out, _ = run_cli("-2", "2X0")
        self.assertEqual(code, 0)
        self.assertIn("1 sequence from 138 exploratory moves:", out)
        self.assertEqual(out.splitlines()[-1], "X0X0")

    def test_search_mode_with_empty_sequence(self):
        code, out, _ = run_cli("-3")
        self.assertEqual(code, 0)
        self.assertIn("1 sequence from 0 exploratory moves:", out)

    def test_arguments_are_joined(self):
        code, out, _ = run_cli("3", "X1Y1", "# comentario", "Z1")
        self.assertEqual(code, 0)
        self.assertTrue(out.endswith("X1Y1\n# comentario\nZ1\n"))

    def test_bad_token(self):
        code, out, err = run_cli("3", "X1", "Q1")
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("'Q1'", err)

    def test_bad_token_names_whole_argument(self):
        code, out, err = run_cli("3", "X1", "X12")
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("'X12'", err)

    def test_layer_out_of_range(self):
        code, out, err = run_cli("-3", "X3")
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("'X3'", err)

    def test_bad_size(self):
        for size in ("0", "11", "-11", "abc"):
            with self.subTest(size=size):
                code, out, err = run_cli(size, "X0")
                self.assertEqual(code, 2)
                self.assertEqual(out, "")
                self.assertIn(size, err)


if __name__ == "__main__":
    unittest.main()
