from functools import wraps
from typing import Callable, Any

class ArrangerError(Exception):
    """Base exception for the product arrangement system"""
    pass

class DataLoadError(ArrangerError):
    """Error loading data"""
    pass

class ValidationError(ArrangerError):
    """Data validation error"""
    pass

class ConfigurationError(ArrangerError):
    """Configuration error"""
    pass

class ProductError(ArrangerError):
    """Invalid product data"""
    pass

class ShelfError(ArrangerError):
    """Shelf state error"""
    pass

class DistributionError(ArrangerError):
    """Distribution could not be produced or looked up"""
    pass

class EmptyProductListError(DistributionError):
    """No products were supplied for an arrangement"""
    pass

class InvalidDimensionsError(DistributionError):
    """Grid width or height is not positive"""
    pass

class ShelfOverflowError(DistributionError):
    """More products than the grid can hold"""
    pass

def handle_errors(default_return=None, raise_on_error=True):
    """Decorator for error handling"""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except ArrangerError:
                if raise_on_error:
                    raise
                return default_return
            except Exception as e:
                if raise_on_error:
                    raise ArrangerError(f"Unexpected error in {func.__name__}: {str(e)}") from e
                return default_return
        return wrapper
    return decorator
