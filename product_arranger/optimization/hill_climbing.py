from itertools import combinations
from typing import List, Optional, Tuple

import numpy as np

from product_arranger.models.product import Product
from product_arranger.models.similarity import SimilarityMatrix
from product_arranger.utils.constants import DEFAULT_OVERFLOW_POLICY, HILL_CLIMBING_NAME
from product_arranger.utils.monitor import monitor
from .base_optimizer import BaseArranger


class HillClimbingArranger(BaseArranger):
    """Greedy construction followed by best-swap hill climbing.

    The start product is drawn from rng, which may be any object exposing
    numpy's Generator.integers(high); pass a seeded generator for repeatable
    arrangements.
    """

    name = HILL_CLIMBING_NAME

    def __init__(self, similarity: SimilarityMatrix, rng=None, seed: Optional[int] = None,
                 overflow_policy: str = DEFAULT_OVERFLOW_POLICY):
        super().__init__(similarity, overflow_policy)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @monitor.time_it
    def order_products(self, products: List[Product], capacity: int, limit: int) -> List[Product]:
        first = products[int(self.rng.integers(len(products)))]
        size = min(capacity, len(products))

        current = self.initial_solution(first, products, size)
        self.metrics['start_product'] = first.name
        self.metrics['initial_score'] = self.calculate_score(current)
        self.logger.debug(f"Greedy start from {first.name}: score {self.metrics['initial_score']:.2f}")

        return self.hill_climb(current, limit)

    def initial_solution(self, first: Product, products: List[Product], size: int) -> List[Product]:
        """Grow an ordering from first, always appending the most similar unused product"""
        solution = [first]
        candidates = [p for p in products if p != first]
        while len(solution) < size and candidates:
            chosen = self.most_similar(solution[-1], candidates)
            candidates.remove(chosen)
            solution.append(chosen)
        return solution

    def hill_climb(self, current: List[Product], limit: int) -> List[Product]:
        """Move to the best single-swap neighbor until none improves, or limit steps"""
        current_score = self.calculate_score(current)
        steps = 0
        while limit < 0 or steps < limit:
            neighbor, neighbor_score = self.best_neighbor(current)
            if neighbor is None or neighbor_score <= current_score:
                break
            current, current_score = neighbor, neighbor_score
            steps += 1
            self.logger.debug(f"Step {steps}: score {current_score:.2f}")

        self.metrics['improvement_steps'] = steps
        self.metrics['best_score'] = current_score
        return current

    def best_neighbor(self, solution: List[Product]) -> Tuple[Optional[List[Product]], float]:
        """Best ordering reachable by swapping one pair of positions"""
        neighbor = list(solution)
        best_swap = None
        best_score = 0.0
        for i, j in combinations(range(len(neighbor)), 2):
            neighbor[i], neighbor[j] = neighbor[j], neighbor[i]
            score = self.calculate_score(neighbor)
            neighbor[i], neighbor[j] = neighbor[j], neighbor[i]
            # Strict comparison keeps the first of equally good neighbors
            if best_swap is None or score > best_score:
                best_swap, best_score = (i, j), score

        if best_swap is None:
            return None, 0.0

        i, j = best_swap
        neighbor[i], neighbor[j] = neighbor[j], neighbor[i]
        return neighbor, best_score
