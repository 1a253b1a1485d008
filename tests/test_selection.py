"""Tests for binary tournament selection."""

import numpy as np
import pytest

from knapsack_ga import ItemSet, binary_tournament, select_parents


@pytest.fixture
def dominated_population(unit_items: ItemSet, make_population):
    """Population whose slot 2 (value 1000) strictly dominates all others."""
    return make_population(unit_items, [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 1], [1, 1, 0, 0]])


class TestBinaryTournament:
    """Tests for binary_tournament."""

    @pytest.mark.parametrize("draws", [[2, 0], [0, 2], [2, 3], [3, 2], [2, 2]])
    def test_dominant_member_always_wins(self, dominated_population, fixed_draws, draws: list[int]) -> None:
        """A strictly dominant member wins from either draw position."""
        assert binary_tournament(dominated_population, fixed_draws([draws])) == 2

    def test_draws_exactly_two_candidates(self, dominated_population, fixed_draws) -> None:
        """Each tournament draws one pair of candidates from the whole population."""
        draws = fixed_draws([[0, 1]])

        binary_tournament(dominated_population, draws)

        assert draws.sizes == [2]

    def test_higher_value_wins(self, dominated_population, fixed_draws) -> None:
        """The candidate with greater total value is chosen."""
        # values: slot 0 -> 1, slot 3 -> 11
        assert binary_tournament(dominated_population, fixed_draws([[0, 3]])) == 3
        assert binary_tournament(dominated_population, fixed_draws([[3, 0]])) == 3

    def test_tie_keeps_first_draw(self, small_items: ItemSet, make_population, fixed_draws) -> None:
        """On equal values the first-drawn candidate wins."""
        # slots 0 and 1 both have value 7
        pop = make_population(small_items, [[1, 1, 0, 0], [1, 1, 0, 0], [0, 0, 0, 0]])

        assert binary_tournament(pop, fixed_draws([[1, 0]])) == 1
        assert binary_tournament(pop, fixed_draws([[0, 1]])) == 0

    def test_returns_valid_index(self, dominated_population, rng: np.random.Generator) -> None:
        """Winners are valid slot indices of type int."""
        for _ in range(50):
            idx = binary_tournament(dominated_population, rng)
            assert isinstance(idx, int)
            assert 0 <= idx < len(dominated_population)

    def test_selection_pressure(self, dominated_population, rng: np.random.Generator) -> None:
        """The dominant member is chosen far more often than uniform sampling would."""
        # P(win) = 1 - (3/4)**2 = 0.4375 versus 0.25 under uniform sampling
        wins = sum(binary_tournament(dominated_population, rng) == 2 for _ in range(2000))
        assert wins > 700

    def test_worst_member_can_win_only_against_itself(self, dominated_population, fixed_draws) -> None:
        """The lowest-value member wins only when drawn twice."""
        assert binary_tournament(dominated_population, fixed_draws([[0, 0]])) == 0
        assert binary_tournament(dominated_population, fixed_draws([[0, 1]])) == 1


class TestSelectParents:
    """Tests for select_parents."""

    def test_two_independent_tournaments(self, dominated_population, fixed_draws) -> None:
        """Each parent comes from its own tournament, in draw order."""
        parents = select_parents(dominated_population, fixed_draws([[0, 1], [3, 0]]))

        assert parents == (1, 3)

    def test_parents_may_coincide(self, dominated_population, fixed_draws) -> None:
        """Both tournaments may resolve to the same member."""
        parents = select_parents(dominated_population, fixed_draws([[2, 0], [1, 2]]))

        assert parents == (2, 2)
