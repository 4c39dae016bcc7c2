from .arguments import tokenize_args
from .quantity import parse_quantity

__all__ = ["tokenize_args", "parse_quantity"]
