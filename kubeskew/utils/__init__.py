"""Shared helpers."""

from .logger import get_logger, set_log_level
from .quantity import parse_quantity, quantity_value

__all__ = ["get_logger", "set_log_level", "parse_quantity", "quantity_value"]
