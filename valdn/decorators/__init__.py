from .validates_decorator import validates

__all__ = [
    "validates",
]
