"""Core primitives shared by the generator and the solvers."""

from .random_source import MASK32, XorShiftRandom

__all__ = ["MASK32", "XorShiftRandom"]
