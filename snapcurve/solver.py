"""
snapcurve/solver.py
-------------------
Catenary from the local origin to a relative point P, with a fixed arc length.

The local frame is "y up": axis 1 is vertical and every other axis is
horizontal. Gravity pulls towards -y. The solver works out which shape the
chain takes (a true catenary, a taut line segment, or a vertical fold) the
first time it is evaluated, and caches the result until P or the arc length
changes.

Usage:
    cat = CatenaryToPoint2D((4.0, 0.0), 5.0)
    mid = cat.evaluate(2.5)        # position half way along the chain
    tangent = cat.evaluate(2.5, 1) # unit tangent at the same spot
"""
import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np

from . import catenary1d
from .config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

# Index of the vertical (up) axis in every local frame
VERTICAL_AXIS = 1


class CatenaryStateError(RuntimeError):
    ''' Raised when evaluation reaches a state that solve() should have replaced. '''


class Evaluability(Enum):
    UNKNOWN = 0
    CATENARY = 1
    LINEAR_VERTICAL = 2
    LINE_SEGMENT = 3


# --- Solve States ---
@dataclass(frozen=True)
class UnknownState:
    kind = Evaluability.UNKNOWN


@dataclass(frozen=True)
class CatenaryState:
    ''' Cached catenary solution.

    Attributes:
        a (float): Shape parameter.
        delta_x, delta_y (float): Offset of the apex so the curve
            y = a*cosh((x - delta_x)/a) + delta_y passes through the origin and P.
        arc_length_offset (float): Signed arc length from the apex to the origin.
    '''
    a: float
    delta_x: float
    delta_y: float
    arc_length_offset: float
    kind = Evaluability.CATENARY


@dataclass(frozen=True)
class LineSegmentState:
    kind = Evaluability.LINE_SEGMENT


@dataclass(frozen=True)
class LinearVerticalState:
    kind = Evaluability.LINEAR_VERTICAL


UNKNOWN = UnknownState()
LINE_SEGMENT = LineSegmentState()
LINEAR_VERTICAL = LinearVerticalState()


class CatenaryToPoint:
    """
    A catenary curve from the local origin to a point P with arc length s.

    Subclasses fix the dimension of P (2 or 3). The catenary itself always
    lies in the vertical half-plane containing P, so the same root search
    serves every dimension.

    Attributes:
        config (SolverConfig): Iteration counts and tolerances.
    """
    dimension = None

    def __init__(self, p, length, config=None):
        self.config = config or DEFAULT_CONFIG
        self._p = self._as_point(p)
        self._s = _check_length(length)
        self._state = UNKNOWN

    # --- Inputs ---
    @property
    def p(self):
        ''' The end point, relative to the local origin. '''
        return self._p.copy()

    @p.setter
    def p(self, value):
        value = self._as_point(value)
        if not np.array_equal(value, self._p):
            self._p = value
            self._state = UNKNOWN

    @property
    def length(self):
        ''' Arc length of the chain. '''
        return self._s

    @length.setter
    def length(self, value):
        value = _check_length(value)
        if value != self._s:
            self._s = value
            self._state = UNKNOWN

    # --- Queries ---
    @property
    def state(self):
        return self._state

    @property
    def evaluability(self):
        return self._state.kind

    @property
    def shape_parameter(self):
        ''' The solved catenary parameter a, or None for the degenerate shapes. '''
        state = self.solve()
        if isinstance(state, CatenaryState):
            return state.a
        return None

    @property
    def is_vertical(self):
        return bool(np.all(np.abs(self._horizontal()) < self.config.vertical_tolerance))

    @property
    def is_straight_line(self):
        return bool(self._s <= np.linalg.norm(self._p) * self.config.straight_line_tolerance)

    # --- Solving ---
    def solve(self):
        """
        Classifies the configuration and caches the derived parameters.
        Does nothing if the state is already known.

        Returns:
            The active solve state.
        """
        if self._state is UNKNOWN:
            self._state = self._classify()
            logger.debug("%r classified as %s", self, self._state.kind.name)
        return self._state

    def _classify(self):
        cfg = self.config

        # 1. Taut (or too short): straight line from origin to P
        if self.is_straight_line:
            return LINE_SEGMENT

        # 2. Hanging almost straight down: two vertical segments
        if self.is_vertical:
            return LINEAR_VERTICAL

        # 3. A real catenary, solved for positive horizontal offset
        p_abs_x = float(np.linalg.norm(self._horizontal()))
        p_y = float(self._p[VERTICAL_AXIS])
        s = self._s
        c = np.sqrt(s * s - p_y * p_y)

        guess = (p_abs_x * p_abs_x) / (2 * s)
        bounds = find_root_bounds(p_abs_x, c, guess,
                                  cfg.interval_search_iterations,
                                  cfg.root_tolerance)
        if bounds is None:
            # 4. No sign change within the search range
            logger.warning("Root bracketing failed for P=%s, s=%.6g after %d steps; "
                           "falling back to a line segment.",
                           self._p, s, cfg.interval_search_iterations)
            return LINE_SEGMENT

        low, high = bounds
        if high != low:
            low, high = bisect_root(p_abs_x, c, low, high, cfg.bisect_refine_count)
        a = 0.5 * (low + high)

        delta_x, delta_y = catenary_delta(a, p_abs_x, p_y)
        offset = float(catenary1d.arc_length(-delta_x, a))
        return CatenaryState(a=a, delta_x=delta_x, delta_y=delta_y, arc_length_offset=offset)

    # --- Evaluation ---
    def evaluate(self, s, n=0):
        """
        Evaluates the chain at arc length s measured from the origin.

        Args:
            s (float): Arc length along the chain (0 = origin, length = P).
            n (int): Derivative order. 0 = position, 1 = unit tangent, ...

        Returns:
            np.ndarray: Point (n == 0) or derivative vector in the local frame.
        """
        n = _check_order(n)
        s = float(s)
        state = self.solve()

        if isinstance(state, CatenaryState):
            return self._evaluate_catenary(state, s, n)
        elif isinstance(state, LineSegmentState):
            return self._evaluate_line_segment(s, n)
        elif isinstance(state, LinearVerticalState):
            return self._evaluate_linear_vertical(s, n)
        raise CatenaryStateError(f"Failed to evaluate {self!r}: evaluability is still unknown.")

    def _evaluate_catenary(self, state, s, n):
        a = state.a
        s_apex = s + state.arc_length_offset
        if n == 0:
            x = float(catenary1d.x_by_arc_length(s_apex, a)) + state.delta_x
            y = float(catenary1d.evaluate(x - state.delta_x, a)) + state.delta_y
        else:
            x, y = catenary1d.derivative_by_arc_length(s_apex, a, n)
        return self._compose(x * self._horizontal_direction(), y)

    def _evaluate_line_segment(self, s, n):
        if n == 0:
            return self._p * (s / self._s)
        if n == 1:
            mag = np.linalg.norm(self._p)
            if mag == 0.0:
                return np.zeros_like(self._p)
            return self._p / mag
        return np.zeros_like(self._p)

    def _evaluate_linear_vertical(self, s, n):
        # Fold point: the chain descends for s < turn, then climbs back up to P
        turn = -(self._p[VERTICAL_AXIS] - self._s) / 2.0
        horizontal = self._horizontal()
        if n == 0:
            y = -s if s < turn else -2.0 * turn + s
            # drift sideways so the end lands exactly on P
            return self._compose(horizontal * (s / self._s), y)
        if n == 1:
            return self._compose(horizontal / self._s, -1.0 if s < turn else 1.0)
        return np.zeros_like(self._p)

    # --- Helpers ---
    def _as_point(self, p):
        arr = np.array(p, dtype=np.float64)
        if self.dimension is not None and arr.shape != (self.dimension,):
            raise ValueError(f"{type(self).__name__} expects a point of dimension "
                             f"{self.dimension}, got shape {arr.shape}.")
        if arr.ndim != 1 or arr.size < 2:
            raise ValueError(f"Expected a point with at least 2 coordinates, got shape {arr.shape}.")
        return arr

    def _horizontal(self):
        return np.delete(self._p, VERTICAL_AXIS)

    def _horizontal_direction(self):
        h = self._horizontal()
        return h / np.linalg.norm(h)

    @staticmethod
    def _compose(horizontal, vertical):
        ''' Reassembles a local vector from its horizontal part and vertical value. '''
        return np.insert(np.asarray(horizontal, dtype=np.float64), VERTICAL_AXIS, vertical)

    def __repr__(self):
        return (f"{type(self).__name__}(p={self._p}, s={self._s}, "
                f"state={self._state.kind.name})")


class CatenaryToPoint2D(CatenaryToPoint):
    ''' Catenary from the origin to a 2D point (x, y). '''
    dimension = 2


class CatenaryToPoint3D(CatenaryToPoint):
    ''' Catenary from the origin to a 3D point (x, y, z), y up. '''
    dimension = 3


# --- Root Finding ---
def residual(a, p_abs_x, c):
    ''' R(a) = 2a*sinh(x/2a) - c. Monotonically decreasing for a > 0. '''
    with np.errstate(over="ignore"):
        return float(2 * a * np.sinh(p_abs_x / (2 * a)) - c)


def find_root_bounds(p_abs_x, c, guess, iterations, tolerance):
    """
    Exponentially searches for a bracket [low, high] around the root of the
    residual, starting from the initial guess.

    Returns:
        (low, high) tuple, or None if no sign change was found.
    """
    y = residual(guess, p_abs_x, c)
    low = high = guess
    if abs(y) < tolerance:
        # Landed on the root with the initial guess
        return low, high

    finding_upper = y > 0
    for n in range(1, iterations + 1):
        if finding_upper:
            # Positive: the previous value is a lower bound
            low = high
            high = guess * 2.0 ** n
            if residual(high, p_abs_x, c) < 0:
                return low, high
        else:
            # Negative: the previous value is an upper bound
            high = low
            low = guess * 2.0 ** -n
            if residual(low, p_abs_x, c) > 0:
                return low, high
    return None


def bisect_root(p_abs_x, c, low, high, count):
    ''' Halves the bracket `count` times, keeping the root inside. '''
    for _ in range(count):
        mid = 0.5 * (low + high)
        if residual(mid, p_abs_x, c) > 0:
            low = mid
        else:
            high = mid
    return low, high


def catenary_delta(a, p_x, p_y):
    ''' Apex offset making the catenary pass through both the origin and (p_x, p_y). '''
    delta_x = p_x / 2 - a * np.arcsinh(p_y / (2 * a * np.sinh(p_x / (2 * a))))
    # Symmetric about the apex, so cosh(delta_x) == cosh(-delta_x)
    delta_y = -catenary1d.evaluate(delta_x, a)
    return float(delta_x), float(delta_y)


def _check_length(value):
    value = float(value)
    if not np.isfinite(value) or value <= 0.0:
        raise ValueError(f"Arc length must be positive and finite, got {value}.")
    return value


def _check_order(n):
    n = int(n)
    if n < 0:
        raise ValueError(f"Derivative order must be non-negative, got {n}.")
    return n
