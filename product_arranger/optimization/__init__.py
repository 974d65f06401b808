from .base_optimizer import BaseArranger
from .brute_force import BruteForceArranger
from .hill_climbing import HillClimbingArranger
from .factory import ArrangementAlgorithm, create_arranger, available_algorithms

__all__ = ['BaseArranger', 'BruteForceArranger', 'HillClimbingArranger', 'ArrangementAlgorithm',
           'create_arranger', 'available_algorithms']
