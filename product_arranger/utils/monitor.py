import time
from functools import wraps

from product_arranger.utils.logger import get_logger

class PerformanceMonitor:
    """Monitor search performance"""

    def time_it(self, func):
        """Decorator to time function execution"""
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            result = func(*args, **kwargs)
            duration = time.perf_counter() - start
            get_logger().debug(f"{func.__qualname__} took {duration:.4f}s")
            return result
        return wrapper

monitor = PerformanceMonitor()
