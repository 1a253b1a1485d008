"""Tests for KnapsackResult."""

import numpy as np
import pytest

from knapsack_ga import Individual, ItemSet, KnapsackResult


@pytest.fixture
def members(small_items: ItemSet) -> tuple[Individual, ...]:
    """Three members with values 3, 7, 6 and weights 2, 5, 5."""
    return tuple(
        Individual(np.array(genes), small_items) for genes in ([1, 0, 0, 0], [1, 1, 0, 0], [0, 0, 0, 1])
    )


class TestKnapsackResult:
    """Tests for result construction and properties."""

    def test_best_property(self, members) -> None:
        """best returns the member at best_idx."""
        result = KnapsackResult(
            members=members,
            best_idx=1,
            best_feasible=members[1],
            history=np.array([6, 7]),
            generations=1,
            evaluations=5,
        )

        assert result.best is members[1]
        assert result.best.total_value == 7
        np.testing.assert_array_equal(result.values, [3, 7, 6])

    def test_best_feasible_may_be_none(self, members) -> None:
        """A run without any feasible Individual reports None."""
        result = KnapsackResult(
            members=members, best_idx=1, best_feasible=None, history=np.array([7]), generations=0, evaluations=3
        )

        assert result.best_feasible is None

    def test_history_copied_and_frozen(self, members) -> None:
        """The history array is copied and read-only."""
        history = np.array([6, 7])
        result = KnapsackResult(
            members=members, best_idx=1, best_feasible=None, history=history, generations=1, evaluations=5
        )

        history[0] = 0
        assert result.history[0] == 6
        with pytest.raises(ValueError):
            result.history[0] = 1

    def test_members_stored_as_tuple(self, members) -> None:
        """A list of members is converted to a tuple."""
        result = KnapsackResult(
            members=list(members),  # type: ignore[arg-type]
            best_idx=0,
            best_feasible=None,
            history=np.array([7]),
            generations=0,
            evaluations=3,
        )

        assert isinstance(result.members, tuple)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @pytest.mark.parametrize("best_idx", [-1, 3])
    def test_best_idx_out_of_bounds_raises(self, members, best_idx: int) -> None:
        """best_idx must address a member."""
        with pytest.raises(ValueError, match="out of bounds"):
            KnapsackResult(
                members=members,
                best_idx=best_idx,
                best_feasible=None,
                history=np.array([7]),
                generations=0,
                evaluations=3,
            )

    def test_best_idx_non_integer_raises(self, members) -> None:
        """best_idx must be an integer."""
        with pytest.raises(TypeError, match="best_idx must be an integer"):
            KnapsackResult(
                members=members,
                best_idx=1.0,  # type: ignore[arg-type]
                best_feasible=None,
                history=np.array([7]),
                generations=0,
                evaluations=3,
            )

    def test_history_wrong_length_raises(self, members) -> None:
        """history has one entry per generation plus the initial one."""
        with pytest.raises(ValueError, match="history must have shape"):
            KnapsackResult(
                members=members,
                best_idx=1,
                best_feasible=None,
                history=np.array([7, 7]),
                generations=2,
                evaluations=7,
            )

    def test_history_not_array_raises(self, members) -> None:
        """history must be a numpy array."""
        with pytest.raises(TypeError, match="history must be a numpy array"):
            KnapsackResult(
                members=members,
                best_idx=1,
                best_feasible=None,
                history=[7],  # type: ignore[arg-type]
                generations=0,
                evaluations=3,
            )
