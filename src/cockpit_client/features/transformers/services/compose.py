"""Transformer composition utilities."""

from functools import reduce
from typing import TypeVar

from ..entities.protocols import ResponseTransformer

T = TypeVar("T")


class ComposedTransformer:
    """Applies transformers left to right, feeding each output to the next."""
    
    def __init__(self, *transformers: ResponseTransformer):
        self.transformers = transformers
    
    def transform(self, value: T) -> T:
        return reduce(lambda result, transformer: transformer.transform(result), self.transformers, value)


def compose_transformers(*transformers: ResponseTransformer) -> ComposedTransformer:
    """Compose transformers; with no arguments this is the identity."""
    return ComposedTransformer(*transformers)
