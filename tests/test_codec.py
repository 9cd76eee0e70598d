import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from labyrinth.core.constants import CellState
from labyrinth.core.exceptions import MazeError, MazeStorageError
from labyrinth.engine.generator import generate_maze
from labyrinth.engine.grid import MazeGrid
from labyrinth.io.codec import decode, encode, load_maze, save_maze


HAND_EDITED = "5,5\n#####\n#S #\n# # \n#  F\n#####\n"
CANONICAL = "5,5\n#####\n#S ##\n# # #\n#  F#\n#####\n"

W, P, S, F = CellState.WALL, CellState.PATH, CellState.START, CellState.FINISH


def scenario_grid() -> MazeGrid:
    return MazeGrid.from_rows(
        [
            [W, W, W, W, W],
            [W, S, P, W, W],
            [W, P, W, P, W],
            [W, P, P, F, W],
            [W, W, W, W, W],
        ]
    )


class EncodeTests(unittest.TestCase):
    def test_encode_scenario_grid(self) -> None:
        self.assertEqual(encode(scenario_grid()), CANONICAL)

    def test_encode_header_is_width_then_height(self) -> None:
        text = encode(MazeGrid(7, 5))
        lines = text.splitlines()
        self.assertEqual(lines[0], "7,5")
        self.assertEqual(len(lines), 6)
        self.assertTrue(all(len(line) == 7 for line in lines[1:]))

    def test_unknown_state_encodes_as_question_mark(self) -> None:
        grid = MazeGrid(3, 1)
        grid.cells[0][1] = "LAVA"  # type: ignore[assignment]
        self.assertEqual(encode(grid), "3,1\n#?#\n")


class DecodeTests(unittest.TestCase):
    def test_hand_edited_scenario_decodes_with_wall_padding(self) -> None:
        grid = decode(HAND_EDITED)
        self.assertEqual(grid, scenario_grid())

    def test_canonical_scenario_round_trips(self) -> None:
        grid = decode(CANONICAL)
        assert grid is not None
        self.assertEqual(grid, scenario_grid())
        self.assertEqual(encode(grid), CANONICAL)

    def test_generated_maze_round_trips(self) -> None:
        for seed in range(5):
            grid = generate_maze(17, 11, seed=seed)
            self.assertEqual(decode(encode(grid)), grid)

    def test_unknown_characters_read_as_path(self) -> None:
        grid = decode("4,1\n#x.F\n")
        assert grid is not None
        self.assertEqual([grid.get(x, 0) for x in range(4)], [W, P, P, F])

    def test_missing_rows_and_columns_default_to_wall(self) -> None:
        grid = decode("4,3\nS \n")
        assert grid is not None
        self.assertEqual(grid.get(0, 0), S)
        self.assertEqual(grid.get(1, 0), P)
        self.assertEqual(grid.get(2, 0), W)
        self.assertEqual(grid.get(3, 0), W)
        self.assertEqual(grid.cells[1], [W, W, W, W])
        self.assertEqual(grid.cells[2], [W, W, W, W])

    def test_extra_rows_and_columns_ignored(self) -> None:
        grid = decode("2,1\n S#\nFF\n")
        assert grid is not None
        self.assertEqual(grid.cells, [[P, S]])

    def test_malformed_headers_return_none(self) -> None:
        for text in (
            "",
            "5,5",
            "5\n#####\n",
            "5,5,5\n#####\n",
            "a,5\n#####\n",
            "5,b\n#####\n",
            "-5,5\n#####\n",
            "5.0,5\n#####\n",
            "1_0,5\n#####\n",
            "+5,5\n#####\n",
            "5,\n#####\n",
        ):
            with self.subTest(text=text):
                self.assertIsNone(decode(text))

    def test_header_whitespace_tolerated(self) -> None:
        grid = decode(" 3 , 1 \n#S#\n")
        assert grid is not None
        self.assertEqual(grid.cells, [[W, S, W]])

    def test_only_cr_and_lf_end_rows(self) -> None:
        grid = decode("3,2\n#\x0c#\n#S#\n")
        assert grid is not None
        self.assertEqual(grid.cells[0], [W, P, W])
        self.assertEqual(grid.find(S), (1, 1))

    def test_crlf_and_bare_cr_line_endings(self) -> None:
        for text in ("3,2\r\n#S#\r\n#F#\r\n", "3,2\r#S#\r#F#\r"):
            with self.subTest(text=text):
                grid = decode(text)
                assert grid is not None
                self.assertEqual(grid.cells, [[W, S, W], [W, F, W]])

    def test_blank_body_line_is_a_row_of_walls(self) -> None:
        grid = decode("2,1\n\n")
        assert grid is not None
        self.assertEqual(grid.cells, [[W, W]])


class FileStorageTests(unittest.TestCase):
    def test_save_then_load(self) -> None:
        grid = generate_maze(9, 7, seed=8)
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "maze.txt"
            save_maze(grid, target)
            self.assertEqual(target.read_text(encoding="utf-8"), encode(grid))
            self.assertEqual(load_maze(target), grid)
            self.assertEqual(load_maze(os.fspath(target)), grid)

    def test_load_missing_file_returns_none(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            self.assertIsNone(load_maze(Path(tmpdir) / "nope.txt"))

    def test_load_malformed_file_returns_none(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "bad.txt"
            target.write_text("not a maze\n#####\n", encoding="utf-8")
            self.assertIsNone(load_maze(target))

    def test_load_tolerates_bytes_that_are_not_utf8(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "latin1.txt"
            target.write_bytes(b"3,1\n#\xe9#\n")
            grid = load_maze(target)
        assert grid is not None
        self.assertEqual(grid.cells, [[W, P, W]])

    def test_save_failure_raises_storage_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "missing-dir" / "maze.txt"
            with self.assertRaises(MazeStorageError) as ctx:
                save_maze(MazeGrid(5, 5), target)
            self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_disk_full_is_reported_as_maze_error(self) -> None:
        with patch.object(Path, "write_text", side_effect=OSError(28, "No space left on device")):
            with self.assertRaises(MazeError):
                save_maze(MazeGrid(5, 5), "anywhere.txt")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
