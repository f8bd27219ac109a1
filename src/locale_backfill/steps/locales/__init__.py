from .load import LoadLocalesStep

__all__ = ["LoadLocalesStep"]
