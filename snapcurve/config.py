"""
snapcurve/config.py
-------------------
Tuning constants for the catenary solver.

The iteration counts were chosen empirically. Changing them trades accuracy
against solve time, it does not fix incorrect classifications.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """Immutable solver settings shared by every CatenaryToPoint instance."""
    # Exponential bracket expansion steps (trial values g*2^n, n = 1..N)
    interval_search_iterations: int = 12
    # Bisection steps applied to a found bracket
    bisect_refine_count: int = 14
    # s <= |P| * straight_line_tolerance is treated as a taut line segment
    straight_line_tolerance: float = 1.00005
    # Horizontal offset below which the chain is treated as hanging vertically
    vertical_tolerance: float = 0.001
    # |R(a0)| below this accepts the initial guess as the root
    root_tolerance: float = 1e-6

    def __post_init__(self):
        if self.interval_search_iterations < 1:
            raise ValueError("interval_search_iterations must be at least 1.")
        if self.bisect_refine_count < 0:
            raise ValueError("bisect_refine_count must be non-negative.")
        if self.straight_line_tolerance < 1.0:
            raise ValueError("straight_line_tolerance must be >= 1.0.")


DEFAULT_CONFIG = SolverConfig()
