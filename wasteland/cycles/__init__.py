"""Cycle combiner: least common multiple over per-walker arrival steps."""

from wasteland.cycles.combine import EmptyInputSetError, combine, gcd, lcm

__all__ = ["EmptyInputSetError", "combine", "gcd", "lcm"]
