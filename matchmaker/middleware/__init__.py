"""
Middleware package for request logging.
"""

from .performance import PerformanceMiddleware

__all__ = ["PerformanceMiddleware"]
