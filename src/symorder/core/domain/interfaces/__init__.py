"""Domain interfaces."""

from .order_detector import OrderDetector

__all__ = ["OrderDetector"]
