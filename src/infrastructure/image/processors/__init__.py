from .tint import Tint
from .filter import Filter

__all__ = ["Tint", "Filter"]
