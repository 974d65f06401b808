from .logger import get_logger, configure_logging
from .monitor import monitor
from .error_handler import (
    ArrangerError, DataLoadError, ValidationError, ConfigurationError, ProductError,
    ShelfError, DistributionError, EmptyProductListError, InvalidDimensionsError,
    ShelfOverflowError, handle_errors
)

__all__ = ['get_logger', 'configure_logging', 'monitor', 'ArrangerError', 'DataLoadError',
           'ValidationError', 'ConfigurationError', 'ProductError', 'ShelfError',
           'DistributionError', 'EmptyProductListError', 'InvalidDimensionsError',
           'ShelfOverflowError', 'handle_errors']
