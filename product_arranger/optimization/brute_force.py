from itertools import islice
from typing import Iterator, List, Sequence, Tuple

from product_arranger.models.product import Product
from product_arranger.utils.constants import BRUTE_FORCE_NAME
from product_arranger.utils.monitor import monitor
from .base_optimizer import BaseArranger


class BruteForceArranger(BaseArranger):
    """Exhaustive search over product combinations.

    Every combination of min(capacity, n) products is scored as a cycle in
    the order it is generated and the best one is kept. Combinations are not
    permuted, so the winner is the best subset in its generated order. The
    limit caps how many combinations are generated.
    """

    name = BRUTE_FORCE_NAME

    @monitor.time_it
    def order_products(self, products: List[Product], capacity: int, limit: int) -> List[Product]:
        size = min(capacity, len(products))
        combinations = self._generate_combinations(products, size)
        if limit >= 0:
            # Lazy generation: nothing past the cap is ever built
            combinations = islice(combinations, limit)

        best: List[Product] = []
        best_score = 0.0
        explored = 0
        for combination in combinations:
            explored += 1
            score = self.calculate_score(combination)
            if score > best_score:
                best_score = score
                best = list(combination)
                self.logger.debug(f"New best {best_score:.2f} after {explored} combinations")

        self.metrics['combinations_explored'] = explored
        self.metrics['best_score'] = best_score
        self.logger.info(f"{self.name}: explored {explored} combinations of {size} products")
        return best

    def _generate_combinations(self, products: Sequence[Product], size: int) -> Iterator[Tuple[Product, ...]]:
        """Depth-first generation of the size-combinations of products, in input order"""
        n = len(products)
        stack: List[int] = []
        i = 0
        while True:
            # Leave enough products after i to complete the combination
            while len(stack) < size and i <= n - (size - len(stack)):
                stack.append(i)
                i += 1
            if len(stack) == size:
                yield tuple(products[j] for j in stack)
            if not stack:
                return
            i = stack.pop() + 1
