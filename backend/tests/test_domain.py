"""
Tests for the domain entities - directions, config, snake, food, scores, snapshots.
"""

import pytest
import sys
import os
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    WIDTH, HEIGHT, START_LENGTH, EngineConfig,
    InvariantViolation, CorruptScoreHistoryError,
    Snake, FoodGrid, ScoreHistory, GameState,
)


class TestDirection:
    """Tests for the Direction enum."""

    def test_reverse_pairs(self):
        """Each direction reverses to its opposite."""
        assert UP.reverse == DOWN
        assert DOWN.reverse == UP
        assert LEFT.reverse == RIGHT
        assert RIGHT.reverse == LEFT

    def test_deltas_use_screen_coordinates(self):
        """UP decreases y, DOWN increases y."""
        assert UP.delta == (0, -1)
        assert DOWN.delta == (0, 1)
        assert LEFT.delta == (-1, 0)
        assert RIGHT.delta == (1, 0)

    def test_string_values(self):
        """Directions compare equal to their string names."""
        assert Direction("UP") is UP
        assert RIGHT == "RIGHT"
        assert len(VALID_MOVES) == 4


class TestEngineConfig:
    """Tests for EngineConfig defaults and validation."""

    def test_defaults(self):
        """Defaults match the classic 40x20 board."""
        config = EngineConfig()
        assert (config.width, config.height) == (WIDTH, HEIGHT) == (40, 20)
        assert config.start_length == START_LENGTH == 3
        assert config.max_food == 10
        assert config.max_high_scores == 10

    def test_interval_for_score(self):
        """The tick interval shrinks with score and halves at the difficulty constant."""
        config = EngineConfig()
        assert config.interval_for_score(0) == 200
        assert config.interval_for_score(5) == 160
        assert config.interval_for_score(20) == 100
        assert config.interval_for_score(60) == 50

    def test_interval_is_monotonic(self):
        """A higher score never gives a slower game."""
        config = EngineConfig()
        intervals = [config.interval_for_score(s) for s in range(200)]
        assert intervals == sorted(intervals, reverse=True)
        assert intervals[-1] > 0

    def test_in_bounds(self):
        """in_bounds covers [0, width) x [0, height)."""
        config = EngineConfig()
        assert config.in_bounds((0, 0))
        assert config.in_bounds((39, 19))
        assert not config.in_bounds((40, 0))
        assert not config.in_bounds((0, 20))
        assert not config.in_bounds((-1, 5))

    def test_rejects_short_snake(self):
        """start_length below 2 is rejected."""
        with pytest.raises(ValueError):
            EngineConfig(start_length=1)

    def test_rejects_snake_that_does_not_fit(self):
        """The starting snake must fit on the board."""
        with pytest.raises(ValueError):
            EngineConfig(width=4, start_position=(2, 3))

    def test_rejects_non_positive_tuning(self):
        """Tuning values must be positive."""
        with pytest.raises(ValueError):
            EngineConfig(difficulty_constant=0)
        with pytest.raises(ValueError):
            EngineConfig(spawn_period_seconds=0)
        with pytest.raises(ValueError):
            EngineConfig(max_food=0)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_head_and_tail(self):
        """head is the first position, tail the last."""
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)
        assert len(snake) == 3

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for efficient operations."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_push_head_and_pop_tail(self):
        """push_head adds at the front, pop_tail removes from the back."""
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        snake.push_head((6, 5))
        assert snake.pop_tail() == (3, 5)
        assert list(snake) == [(6, 5), (5, 5), (4, 5)]

    def test_contains(self):
        """Membership checks body cells."""
        snake = Snake([(5, 5), (4, 5)])
        assert (4, 5) in snake
        assert (3, 5) not in snake

    def test_empty_snake_rejected(self):
        """A snake needs at least one cell."""
        with pytest.raises(ValueError):
            Snake([])

    def test_check_invariants_duplicates(self):
        """Duplicate cells are an invariant violation."""
        snake = Snake([(5, 5), (4, 5), (5, 5)])
        with pytest.raises(InvariantViolation):
            snake.check_invariants(10, 10)

    def test_check_invariants_out_of_bounds(self):
        """Cells off the board are an invariant violation."""
        snake = Snake([(10, 5), (9, 5)])
        with pytest.raises(InvariantViolation):
            snake.check_invariants(10, 10)

    def test_check_invariants_valid(self):
        """A well-formed snake passes."""
        Snake([(5, 5), (4, 5), (3, 5)]).check_invariants(10, 10)


class TestFoodGrid:
    """Tests for the FoodGrid class."""

    def test_place_and_remove(self):
        """Food can be placed and removed."""
        food = FoodGrid(10, 10)
        food.place((3, 3))
        assert (3, 3) in food
        assert len(food) == 1
        food.remove((3, 3))
        assert (3, 3) not in food
        assert len(food) == 0

    def test_remove_missing_is_noop(self):
        """Removing an empty cell does nothing."""
        food = FoodGrid(10, 10)
        food.remove((1, 1))
        assert len(food) == 0

    def test_place_out_of_bounds_raises(self):
        """Food must be on the board."""
        food = FoodGrid(10, 10)
        with pytest.raises(ValueError):
            food.place((10, 0))

    def test_free_cells_row_major_and_filtered(self):
        """free_cells skips food and occupied cells and lists rows top to bottom."""
        food = FoodGrid(3, 2)
        food.place((1, 0))
        free = food.free_cells({(0, 1)})
        assert free == [(0, 0), (2, 0), (1, 1), (2, 1)]

    def test_free_cells_none_left(self):
        """A full board has no free cells."""
        food = FoodGrid(2, 1)
        food.place((0, 0))
        assert food.free_cells({(1, 0)}) == []


class TestScoreHistory:
    """Tests for the ScoreHistory leaderboard."""

    def test_ignores_non_positive_scores(self):
        """A score of zero never enters the leaderboard."""
        history = ScoreHistory()
        assert history.record(0) is False
        assert len(history) == 0

    def test_sorted_descending(self):
        """Scores are kept highest first."""
        history = ScoreHistory([3, 9, 1, 9, 4])
        assert history.to_list() == [9, 9, 4, 3, 1]
        assert history.best == 9

    def test_capped_at_ten(self):
        """Only the ten highest scores are kept."""
        history = ScoreHistory(range(1, 16))
        assert history.to_list() == list(range(15, 5, -1))

    def test_record_reports_whether_score_made_the_board(self):
        """A tie with the lowest entry of a full board does not displace it."""
        history = ScoreHistory([5] * 10)
        assert history.record(5) is False
        assert history.record(6) is True
        assert history.to_list() == [6] + [5] * 9

    def test_empty_best_is_zero(self):
        """An empty leaderboard has best 0."""
        assert ScoreHistory().best == 0

    def test_from_list_round_trip(self):
        """from_list accepts what to_list produced."""
        history = ScoreHistory([7, 2, 11])
        assert ScoreHistory.from_list(history.to_list()) == history

    @pytest.mark.parametrize("scores", [
        [1, 2],
        [3, 0],
        [3, -1],
        [3, "2"],
        [True],
        [1.5],
        list(range(11, 0, -1)),
        {"scores": [1]},
    ])
    def test_from_list_rejects_impossible_lists(self, scores):
        """Lists that record() could never produce are corrupt."""
        with pytest.raises(CorruptScoreHistoryError):
            ScoreHistory.from_list(scores)

    def test_capacity_must_be_positive(self):
        """A zero-capacity leaderboard is rejected."""
        with pytest.raises(ValueError):
            ScoreHistory(capacity=0)


class TestGameState:
    """Tests for the GameState snapshot."""

    def _state(self, **overrides):
        values = dict(
            tick=7,
            snake=[(2, 1), (1, 1), (0, 1)],
            food=[(3, 0)],
            score=0,
            paused=False,
            direction=RIGHT,
            pending_direction=None,
            previous_tail=(0, 0),
            tick_interval_ms=200,
            last_final_score=None,
            high_scores=[4, 2],
            width=4,
            height=2,
        )
        values.update(overrides)
        return GameState(**values)

    def test_previous_head_is_neck(self):
        """previous_head is the cell right behind the head."""
        state = self._state()
        assert state.head == (2, 1)
        assert state.previous_head == (1, 1)

    def test_tick_interval_seconds(self):
        """tick_interval converts milliseconds to seconds."""
        assert self._state(tick_interval_ms=150).tick_interval == pytest.approx(0.15)

    def test_print_board(self):
        """print_board draws food, head and body with row 0 first."""
        board = self._state().print_board()
        assert board.split("\n") == [
            " 0 . . . A",
            " 1 T T H .",
        ]

    def test_to_dict(self):
        """to_dict is JSON friendly."""
        data = self._state(pending_direction=UP).to_dict()
        assert data["snake"] == [[2, 1], [1, 1], [0, 1]]
        assert data["direction"] == "RIGHT"
        assert data["pending_direction"] == "UP"
        assert data["high_scores"] == [4, 2]

    def test_repr(self):
        """GameState has a useful string representation."""
        assert "tick=7" in repr(self._state())
