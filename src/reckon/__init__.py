"""Reckon: an embeddable calculator expression evaluator."""

__version__ = "0.1.0"
