from enum import Enum
from typing import List, Union

from product_arranger.models.similarity import SimilarityMatrix
from product_arranger.utils.error_handler import ConfigurationError
from .base_optimizer import BaseArranger
from .brute_force import BruteForceArranger
from .hill_climbing import HillClimbingArranger


class ArrangementAlgorithm(Enum):
    BRUTE_FORCE = "brute_force"
    HILL_CLIMBING = "hill_climbing"


_ARRANGERS = {
    ArrangementAlgorithm.BRUTE_FORCE: BruteForceArranger,
    ArrangementAlgorithm.HILL_CLIMBING: HillClimbingArranger,
}


def _resolve(algorithm: Union[str, ArrangementAlgorithm]) -> ArrangementAlgorithm:
    """Map an enum member, its value or its display name to the enum"""
    if isinstance(algorithm, ArrangementAlgorithm):
        return algorithm
    key = str(algorithm).strip().lower()
    for member, arranger_cls in _ARRANGERS.items():
        if key in (member.value, arranger_cls.name.lower()):
            return member
    raise ConfigurationError(
        f"Unknown algorithm: {algorithm}. Available: {[a.value for a in ArrangementAlgorithm]}"
    )


def create_arranger(algorithm: Union[str, ArrangementAlgorithm], similarity: SimilarityMatrix,
                    **kwargs) -> BaseArranger:
    """Instantiate the arranger for an algorithm; kwargs go to its constructor"""
    return _ARRANGERS[_resolve(algorithm)](similarity, **kwargs)


def available_algorithms() -> List[str]:
    return [arranger_cls.name for arranger_cls in _ARRANGERS.values()]
