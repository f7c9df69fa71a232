from .zones import find_support_levels

__all__ = ["find_support_levels"]
