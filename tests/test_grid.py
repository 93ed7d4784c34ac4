import unittest

from gridmaze.base import NoOp
from gridmaze.masks import allow_all, alternate, from_text, mask_cells, mask_corners
from gridmaze.maze import Cell, Compass, Maze


class CompassTests(unittest.TestCase):
    def test_all_is_fixed_order(self) -> None:
        self.assertEqual(Compass.all(), [Compass.NORTH, Compass.EAST, Compass.SOUTH, Compass.WEST])

    def test_reverse_is_involution(self) -> None:
        self.assertEqual(Compass.NORTH.reverse(), Compass.SOUTH)
        self.assertEqual(Compass.EAST.reverse(), Compass.WEST)
        for direction in Compass.all():
            self.assertEqual(direction.reverse().reverse(), direction)

    def test_neighbour(self) -> None:
        self.assertEqual(Compass.NORTH.neighbour(1, 1), (0, 1))
        self.assertEqual(Compass.EAST.neighbour(1, 1), (1, 2))
        self.assertEqual(Compass.SOUTH.neighbour(1, 1), (2, 1))
        self.assertEqual(Compass.WEST.neighbour(1, 1), (1, 0))

    def test_checked_neighbour(self) -> None:
        self.assertEqual(Compass.NORTH.checked_neighbour(3, 3, 1, 1), (0, 1))
        self.assertEqual(Compass.EAST.checked_neighbour(3, 3, 1, 1), (1, 2))
        self.assertEqual(Compass.SOUTH.checked_neighbour(3, 3, 1, 1), (2, 1))
        self.assertEqual(Compass.WEST.checked_neighbour(3, 3, 1, 1), (1, 0))

    def test_checked_neighbour_leaving_grid(self) -> None:
        self.assertIsNone(Compass.NORTH.checked_neighbour(3, 3, 0, 1))
        self.assertIsNone(Compass.EAST.checked_neighbour(3, 3, 1, 2))
        self.assertIsNone(Compass.SOUTH.checked_neighbour(3, 3, 2, 1))
        self.assertIsNone(Compass.WEST.checked_neighbour(3, 3, 1, 0))

    def test_offset(self) -> None:
        self.assertEqual(Compass.offset(3, 3, 0, 2), 2)
        self.assertEqual(Compass.offset(3, 3, 1, 1), 4)
        self.assertEqual(Compass.offset(3, 3, 2, 0), 6)
        self.assertIsNone(Compass.offset(3, 3, 3, 1))
        self.assertIsNone(Compass.offset(3, 3, 1, 3))
        self.assertIsNone(Compass.offset(3, 3, -1, 0))


class MazeConstructionTests(unittest.TestCase):
    def test_square(self) -> None:
        maze = Maze.square(2)
        self.assertEqual((maze.rows, maze.columns), (2, 2))

    def test_cell_counts(self) -> None:
        maze = Maze.grid(2, 3, allow_all, NoOp())
        self.assertEqual(len(maze.raw_cells()), 6)
        self.assertEqual(len(maze.cells()), 6)

    def test_cell_positions_are_row_major(self) -> None:
        maze = Maze.grid(2, 3)
        self.assertEqual(
            [cell.coords() for cell in maze.cells()],
            [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)],
        )
        for row in range(maze.rows):
            for column in range(maze.columns):
                self.assertEqual(maze.cell(row, column), Cell(row, column))

    def test_out_of_bounds_lookup(self) -> None:
        maze = Maze.square(3)
        self.assertIsNone(maze.cell(0, 3))
        self.assertIsNone(maze.cell(4, 0))
        self.assertIsNone(maze.cell(-1, 0))

    def test_rejects_empty_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            Maze.grid(0, 3)

    def test_masked_cells(self) -> None:
        maze = Maze.grid(2, 3, alternate)
        self.assertEqual(len(maze.raw_cells()), 6)
        self.assertEqual(len(maze.cells()), 3)
        self.assertIsNone(maze.cell(0, 0))
        self.assertIsNotNone(maze.cell(0, 1))

    def test_cell_count_matches_mask_for_several_masks(self) -> None:
        masks = [
            allow_all,
            alternate,
            mask_corners(5, 6),
            mask_cells([(1, 1), (2, 3), (4, 5)]),
            from_text(["#..#", "", "..##", "█..█"]),
        ]
        for allowed in masks:
            maze = Maze.grid(5, 6, allowed)
            expected = sum(1 for r in range(5) for c in range(6) if allowed(r, c))
            self.assertEqual(len(maze.cells()), expected)
            self.assertEqual(len(maze.raw_cells()), 30)

    def test_text_mask_glyphs(self) -> None:
        allowed = from_text(["#.█", "█", "..#"])
        maze = Maze.grid(3, 3, allowed)
        masked = [(r, c) for r in range(3) for c in range(3) if maze.cell(r, c) is None]
        self.assertEqual(masked, [(0, 0), (0, 2), (1, 0), (2, 2)])
        self.assertEqual(len(maze.cells()), 5)

    def test_attributes_missing_for_foreign_cell(self) -> None:
        maze = Maze.grid(2, 2, mask_cells([(0, 0)]))
        with self.assertRaises(KeyError):
            maze.links(Cell(0, 0))
        with self.assertRaises(KeyError):
            maze.neighbours(Cell(5, 5))


class NeighbourTests(unittest.TestCase):
    def setUp(self) -> None:
        self.maze = Maze.square(3)

    def test_top_left(self) -> None:
        neighbours = self.maze.neighbours(self.maze.cell(0, 0))
        self.assertEqual(set(neighbours), {Compass.EAST, Compass.SOUTH})
        self.assertEqual(neighbours[Compass.EAST], self.maze.cell(0, 1))
        self.assertEqual(neighbours[Compass.SOUTH], self.maze.cell(1, 0))

    def test_top_right(self) -> None:
        neighbours = self.maze.neighbours(self.maze.cell(0, 2))
        self.assertEqual(set(neighbours), {Compass.SOUTH, Compass.WEST})
        self.assertEqual(neighbours[Compass.WEST], self.maze.cell(0, 1))

    def test_center(self) -> None:
        neighbours = self.maze.neighbours(self.maze.cell(1, 1))
        self.assertEqual(neighbours[Compass.NORTH], self.maze.cell(0, 1))
        self.assertEqual(neighbours[Compass.EAST], self.maze.cell(1, 2))
        self.assertEqual(neighbours[Compass.SOUTH], self.maze.cell(2, 1))
        self.assertEqual(neighbours[Compass.WEST], self.maze.cell(1, 0))

    def test_bottom_right(self) -> None:
        neighbours = self.maze.neighbours(self.maze.cell(2, 2))
        self.assertEqual(set(neighbours), {Compass.NORTH, Compass.WEST})

    def test_neighbours_are_read_only(self) -> None:
        neighbours = self.maze.neighbours(self.maze.cell(1, 1))
        with self.assertRaises(TypeError):
            neighbours[Compass.NORTH] = Cell(9, 9)  # type: ignore[index]

    def test_masked_slots_are_never_neighbours(self) -> None:
        maze = Maze.grid(3, 3, mask_cells([(0, 1), (1, 0)]))
        self.assertEqual(dict(maze.neighbours(maze.cell(0, 0))), {})
        center = maze.neighbours(maze.cell(1, 1))
        self.assertEqual(set(center), {Compass.EAST, Compass.SOUTH})
        for cell in maze.cells():
            for target in maze.neighbours(cell).values():
                self.assertIsNotNone(maze.cell(*target.coords()))


class LinkTests(unittest.TestCase):
    def setUp(self) -> None:
        self.maze = Maze.square(2)
        self.cell_01 = self.maze.cell(0, 1)
        self.cell_11 = self.maze.cell(1, 1)

    def test_links_start_empty(self) -> None:
        for cell in self.maze.cells():
            self.assertEqual(self.maze.links(cell), frozenset())

    def test_link_is_symmetric(self) -> None:
        self.assertEqual(self.maze.link_cell(self.cell_11, Compass.NORTH), self.cell_01)
        self.assertIn(Compass.SOUTH, self.maze.links(self.cell_01))
        self.assertIn(Compass.NORTH, self.maze.links(self.cell_11))
        self.assertTrue(self.maze.has_link(self.cell_01, Compass.SOUTH))
        self.assertEqual(self.maze.linked_neighbours(self.cell_01), [self.cell_11])

    def test_link_without_neighbour_is_noop(self) -> None:
        self.assertIsNone(self.maze.link_cell(self.cell_01, Compass.NORTH))
        self.assertEqual(self.maze.links(self.cell_01), frozenset())

    def test_unlink_from_other_side(self) -> None:
        self.maze.link_cell(self.cell_11, Compass.NORTH)
        self.assertEqual(self.maze.unlink_cell(self.cell_01, Compass.SOUTH), self.cell_11)
        self.assertEqual(self.maze.links(self.cell_01), frozenset())
        self.assertEqual(self.maze.links(self.cell_11), frozenset())

    def test_unlink_without_neighbour_is_noop(self) -> None:
        self.assertIsNone(self.maze.unlink_cell(self.cell_11, Compass.EAST))

    def test_link_then_unlink_restores_every_pair(self) -> None:
        maze = Maze.grid(3, 4, mask_cells([(1, 2)]))
        corner = maze.cell(0, 0)
        maze.link_cell(corner, Compass.EAST)
        for cell in maze.cells():
            for direction in Compass.all():
                other = maze.neighbour(cell, direction)
                before = (maze.links(cell), maze.links(other) if other else None)
                if direction in maze.links(cell):
                    continue
                maze.link_cell(cell, direction)
                maze.unlink_cell(cell, direction)
                after = (maze.links(cell), maze.links(other) if other else None)
                self.assertEqual(before, after)

    def test_has_link_on_masked_slot(self) -> None:
        self.assertFalse(self.maze.has_link(None, Compass.EAST))

    def test_links_returns_a_snapshot(self) -> None:
        links = self.maze.links(self.cell_11)
        self.maze.link_cell(self.cell_11, Compass.WEST)
        self.assertEqual(links, frozenset())


if __name__ == "__main__":
    unittest.main()
