"""
Tests for the shared arranger behaviour: cyclic scoring, the serpentine
shelf mapper and argument checks in arrange().
"""

import pytest

from product_arranger.models.product import ProductList
from product_arranger.models.similarity import SimilarityMatrix
from product_arranger.optimization import BruteForceArranger, HillClimbingArranger
from product_arranger.utils.constants import OVERFLOW_RAISE
from product_arranger.utils.error_handler import (
    ConfigurationError,
    DistributionError,
    EmptyProductListError,
    InvalidDimensionsError,
    ShelfOverflowError,
)

from conftest import make_products, names


# =============================================================================
# Scoring
# =============================================================================

class TestCalculateScore:

    def test_two_products_count_both_directions(self):
        similarity = SimilarityMatrix.from_nested({"A": {"B": 3.0}, "B": {"A": 5.0}})
        arranger = BruteForceArranger(similarity)
        a, b = make_products("A", "B")

        assert arranger.calculate_score([a, b]) == 8.0

    def test_sequence_is_scored_as_a_cycle(self):
        similarity = SimilarityMatrix.from_pairs([("A", "B", 1.0), ("B", "C", 2.0), ("C", "A", 4.0)])
        arranger = BruteForceArranger(similarity)
        a, b, c = make_products("A", "B", "C")

        assert arranger.calculate_score([a, b, c]) == 7.0

    def test_wraparound_uses_last_to_first(self):
        # Only C -> A is known; the closing pair must be looked up in that order
        similarity = SimilarityMatrix.from_nested({"C": {"A": 2.5}})
        arranger = BruteForceArranger(similarity)
        a, b, c = make_products("A", "B", "C")

        assert arranger.calculate_score([a, b, c]) == 2.5

    def test_single_product_scores_against_itself(self):
        a, = make_products("A")
        assert BruteForceArranger(SimilarityMatrix()).calculate_score([a]) == 0.0

        self_similar = SimilarityMatrix.from_nested({"A": {"A": 2.0}})
        assert BruteForceArranger(self_similar).calculate_score([a]) == 2.0

    def test_unknown_products_score_zero(self, chain_similarity):
        x, y = make_products("X", "Y")
        assert BruteForceArranger(chain_similarity).calculate_score([x, y]) == 0.0

    def test_empty_sequence_scores_zero(self, chain_similarity):
        assert BruteForceArranger(chain_similarity).calculate_score([]) == 0.0


# =============================================================================
# Shelf mapper
# =============================================================================

class TestMapToShelf:

    @pytest.fixture
    def arranger(self, chain_similarity):
        return BruteForceArranger(chain_similarity)

    def test_rows_alternate_direction(self, arranger, six_products):
        coordinates = {}
        grid = arranger.map_to_shelf(six_products, 3, 2, coordinates)

        assert names(grid) == [["A", "B", "C"], ["F", "E", "D"]]

    def test_coordinates_record_fill_position(self, arranger, six_products):
        coordinates = {}
        arranger.map_to_shelf(six_products, 3, 2, coordinates)

        assert coordinates == {
            "A": (0, 0), "B": (0, 1), "C": (0, 2),
            # odd row: D is filled first although it is drawn in the last column
            "D": (1, 0), "E": (1, 1), "F": (1, 2),
        }

    def test_three_rows(self, arranger, six_products):
        grid = arranger.map_to_shelf(six_products, 2, 3, {})
        assert names(grid) == [["A", "B"], ["D", "C"], ["E", "F"]]

    def test_short_sequence_is_padded_with_empty_cells(self, arranger, four_products):
        coordinates = {}
        grid = arranger.map_to_shelf(four_products, 3, 2, coordinates)

        assert names(grid) == [["A", "B", "C"], [None, None, "D"]]
        assert len(grid) == 2
        assert all(len(row) == 3 for row in grid)
        assert set(coordinates) == {"A", "B", "C", "D"}

    def test_empty_sequence_gives_empty_grid(self, arranger):
        coordinates = {}
        grid = arranger.map_to_shelf([], 2, 2, coordinates)

        assert grid == [[None, None], [None, None]]
        assert coordinates == {}

    def test_mapping_is_deterministic(self, arranger, six_products):
        first_coordinates, second_coordinates = {}, {}
        first = arranger.map_to_shelf(six_products, 4, 2, first_coordinates)
        second = arranger.map_to_shelf(six_products, 4, 2, second_coordinates)

        assert first == second
        assert first_coordinates == second_coordinates

    def test_overflow_is_dropped_by_default(self, arranger, four_products):
        coordinates = {}
        grid = arranger.map_to_shelf(four_products, 3, 1, coordinates)

        assert names(grid) == [["A", "B", "C"]]
        assert "D" not in coordinates

    def test_overflow_can_raise(self, chain_similarity, four_products):
        arranger = BruteForceArranger(chain_similarity, overflow_policy=OVERFLOW_RAISE)

        with pytest.raises(ShelfOverflowError):
            arranger.map_to_shelf(four_products, 3, 1, {})

    def test_unknown_overflow_policy(self, chain_similarity):
        with pytest.raises(ConfigurationError):
            BruteForceArranger(chain_similarity, overflow_policy="squeeze")


# =============================================================================
# arrange() argument checks
# =============================================================================

@pytest.mark.parametrize("arranger_cls", [BruteForceArranger, HillClimbingArranger])
class TestArrangeChecks:

    @pytest.mark.parametrize("width,height,limit", [(3, 2, -1), (3, 2, 0), (0, 0, 5), (-1, 10, 10)])
    def test_empty_products_fail_first(self, arranger_cls, chain_similarity, width, height, limit):
        arranger = arranger_cls(chain_similarity)

        with pytest.raises(EmptyProductListError):
            arranger.arrange([], width, height, limit)

    def test_empty_product_list_object(self, arranger_cls, chain_similarity):
        with pytest.raises(EmptyProductListError):
            arranger_cls(chain_similarity).arrange(ProductList("empty"), 2, 2)

    def test_empty_error_is_a_distribution_error(self, arranger_cls, chain_similarity):
        with pytest.raises(DistributionError):
            arranger_cls(chain_similarity).arrange([], 2, 2)

    @pytest.mark.parametrize("width,height", [(0, 2), (2, 0), (-1, 3), (3, -1)])
    def test_non_positive_dimensions(self, arranger_cls, chain_similarity, four_products, width, height):
        with pytest.raises(InvalidDimensionsError):
            arranger_cls(chain_similarity).arrange(four_products, width, height)

    def test_accepts_product_list(self, arranger_cls, chain_similarity, product_list):
        grid = arranger_cls(chain_similarity).arrange(product_list, 2, 2)

        placed = {p.name for row in grid for p in row if p is not None}
        assert placed <= {"A", "B", "C", "D"}
        assert len(grid) == 2 and all(len(row) == 2 for row in grid)

    def test_fills_caller_coordinates(self, arranger_cls, chain_similarity, four_products):
        coordinates = {}
        grid = arranger_cls(chain_similarity).arrange(four_products, 2, 2, coordinates=coordinates)

        placed = [p for row in grid for p in row if p is not None]
        assert set(coordinates) == {p.name for p in placed}

    def test_display_name(self, arranger_cls, chain_similarity):
        assert arranger_cls(chain_similarity).name in ("Brute Force", "Hill Climbing")
