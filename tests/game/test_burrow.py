import numpy as np
import pytest

from amphipod_sorter.game.burrow import (Amphipod, Burrow, CellType, Direction,
                                         ParseError)


class TestBurrow:
    def test_burrow_creation(self):
        burrow = Burrow(5, 3)
        assert burrow.width == 5
        assert burrow.height == 3
        assert burrow.grid.shape == (3, 5)
        assert np.all(burrow.grid == CellType.SPACE)

    def test_valid_position(self):
        burrow = Burrow(5, 3)
        assert burrow.is_valid_position(0, 0)
        assert burrow.is_valid_position(4, 2)
        assert not burrow.is_valid_position(-1, 0)
        assert not burrow.is_valid_position(5, 0)
        assert not burrow.is_valid_position(0, 3)

    def test_parse_cells(self, example_burrow):
        assert example_burrow.width == 13
        assert example_burrow.height == 5
        assert example_burrow.get_cell(0, 0) == CellType.WALL
        assert example_burrow.get_cell(1, 1) == CellType.EMPTY
        assert example_burrow.get_cell(0, 3) == CellType.SPACE
        assert example_burrow.get_cell(3, 2) == Amphipod.BRONZE
        assert example_burrow.get_cell(3, 3) == Amphipod.AMBER
        assert example_burrow.get_cell(5, 3) == Amphipod.DESERT

    def test_short_rows_padded_with_space(self, example_burrow):
        assert example_burrow.get_cell(11, 3) == CellType.SPACE
        assert example_burrow.get_cell(12, 4) == CellType.SPACE

    def test_out_of_bounds_is_absent(self, example_burrow):
        assert example_burrow.get_cell(-1, 0) is None
        assert example_burrow.get_cell(13, 1) is None
        assert example_burrow.get_cell(0, 5) is None

    def test_set_and_take(self, example_burrow):
        example_burrow.set_cell(1, 1, Amphipod.COPPER)
        assert example_burrow.get_cell(1, 1) == Amphipod.COPPER

        assert example_burrow.take_cell(1, 1) == Amphipod.COPPER
        assert example_burrow.get_cell(1, 1) == CellType.EMPTY

        with pytest.raises(IndexError):
            example_burrow.set_cell(20, 1, CellType.EMPTY)
        with pytest.raises(IndexError):
            example_burrow.take_cell(-1, 1)

    def test_invalid_character(self):
        with pytest.raises(ParseError) as excinfo:
            Burrow.from_str("#####\n#.E.#\n#####")

        assert excinfo.value.char == "E"
        assert (excinfo.value.x, excinfo.value.y) == (2, 1)
        assert isinstance(excinfo.value, ValueError)

    def test_tab_is_not_space(self):
        with pytest.raises(ParseError):
            Burrow.from_str("#...#\t\n#####")

    def test_find_amphipods_row_major(self, example_burrow):
        amphipods = list(example_burrow.find_amphipods())
        assert amphipods == [
            (3, 2, Amphipod.BRONZE),
            (5, 2, Amphipod.COPPER),
            (7, 2, Amphipod.BRONZE),
            (9, 2, Amphipod.DESERT),
            (3, 3, Amphipod.AMBER),
            (5, 3, Amphipod.DESERT),
            (7, 3, Amphipod.COPPER),
            (9, 3, Amphipod.AMBER),
        ]
        # A fresh iterator every call
        assert list(example_burrow.find_amphipods()) == amphipods

    def test_count_amphipods(self, example_burrow):
        assert example_burrow.count_amphipods() == {
            Amphipod.AMBER: 2,
            Amphipod.BRONZE: 2,
            Amphipod.COPPER: 2,
            Amphipod.DESERT: 2,
        }

    def test_empty_neighbors(self, example_burrow):
        assert set(example_burrow.get_empty_neighbors(3, 1)) == {(2, 1), (4, 1)}
        assert example_burrow.get_empty_neighbors(3, 3) == []
        assert example_burrow.get_empty_neighbors(3, 2) == [(3, 1)]

    def test_burrow_copy(self, example_burrow):
        burrow_copy = example_burrow.copy()
        assert burrow_copy == example_burrow

        burrow_copy.set_cell(1, 1, Amphipod.DESERT)
        assert example_burrow.get_cell(1, 1) == CellType.EMPTY
        assert burrow_copy != example_burrow

    def test_equality_and_hash(self, example_text):
        first = Burrow.from_str(example_text)
        second = Burrow.from_str(example_text)

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

        second.set_cell(3, 2, Amphipod.AMBER)
        assert first != second
        assert len({first, second}) == 2

    def test_hash_follows_mutation(self, example_burrow):
        before = hash(example_burrow)
        cell = example_burrow.take_cell(3, 2)
        assert hash(example_burrow) != before

        example_burrow.set_cell(3, 2, cell)
        assert hash(example_burrow) == before

    def test_string_representation(self, example_text, example_burrow):
        assert str(example_burrow) == example_text.rstrip("\n")
        assert str(Burrow.from_str(str(example_burrow))) == str(example_burrow)


class TestAmphipod:
    def test_energy(self):
        assert Amphipod.AMBER.energy == 1
        assert Amphipod.BRONZE.energy == 10
        assert Amphipod.COPPER.energy == 100
        assert Amphipod.DESERT.energy == 1000

    def test_symbol(self):
        assert [a.symbol for a in Amphipod] == ["A", "B", "C", "D"]


class TestDirection:
    def test_direction_properties(self):
        assert Direction.UP.dx == 0
        assert Direction.UP.dy == -1
        assert Direction.DOWN.dx == 0
        assert Direction.DOWN.dy == 1
        assert Direction.LEFT.dx == -1
        assert Direction.LEFT.dy == 0
        assert Direction.RIGHT.dx == 1
        assert Direction.RIGHT.dy == 0
