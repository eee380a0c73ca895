"""
snapcurve/catenary.py
---------------------
Catenary curves between two points in 2D, 3D and 4D space.

A curve owns its endpoints, arc length and slack ("gravity") direction.
It composes a PlaneEmbedding (where the chain hangs) with a lower
dimensional CatenaryToPoint solver (what shape it takes):

    Catenary2D -> 2D frame -> CatenaryToPoint2D
    Catenary3D -> 2D frame -> CatenaryToPoint2D
    Catenary4D -> 3D frame -> CatenaryToPoint3D

Both are rebuilt lazily on the next evaluation after an input changes.
Changing only the arc length keeps the frame and re-solves the shape.

Usage:
    chain = Catenary3D(p0=(0, 0, 0), p1=(4, 0, 1), length=6.0,
                       slack_direction=(0, 0, -1))
    pts = chain.sample(50)
"""
import logging
from enum import Enum

import numpy as np

from .embedding import PlaneEmbedding
from .geometry import ArcLengthCurve
from .solver import CatenaryToPoint2D, CatenaryToPoint3D

logger = logging.getLogger(__name__)


class Readiness(Enum):
    NOT_READY = 0
    READY = 1


class CatenaryCurve(ArcLengthCurve):
    """
    A hanging chain from p0 to p1 with a given arc length.

    Attributes:
        dimension (int): World dimension, fixed by the subclasses.

    Note:
        Instances cache their solution in place and are not safe to share
        between threads without external locking.
    """
    dimension = None

    def __init__(self, p0, p1, length, slack_direction, config=None):
        p0 = self._as_point(p0)
        p1 = self._as_point(p1)
        slack = self._as_direction(slack_direction, p0.size)

        local_dimension = 2 if p0.size <= 3 else 3
        self._space = PlaneEmbedding(p0, -slack, local_dimension)
        self._p1 = p1
        self._slack = slack

        solver_type = CatenaryToPoint2D if local_dimension == 2 else CatenaryToPoint3D
        # Placeholder endpoint, replaced by the embedded one in ready()
        self._catenary = solver_type((p1 - p0)[:local_dimension], length, config)
        self._readiness = Readiness.NOT_READY

    # --- Inputs ---
    @property
    def length(self):
        return self._catenary.length

    @length.setter
    def length(self, value):
        # The frame does not depend on the arc length
        self._catenary.length = value

    @property
    def p0(self):
        return self._space.origin.copy()

    @p0.setter
    def p0(self, value):
        value = self._as_point(value)
        if not np.array_equal(value, self._space.origin):
            self._space.origin = value
            self._readiness = Readiness.NOT_READY

    @property
    def p1(self):
        return self._p1.copy()

    @p1.setter
    def p1(self, value):
        value = self._as_point(value)
        if not np.array_equal(value, self._p1):
            self._p1 = value
            self._readiness = Readiness.NOT_READY

    @property
    def slack_direction(self):
        return self._slack.copy()

    @slack_direction.setter
    def slack_direction(self, value):
        value = self._as_direction(value, self._p1.size)
        if not np.array_equal(value, self._slack):
            self._slack = value
            self._space.up = -value
            self._readiness = Readiness.NOT_READY

    # --- State ---
    @property
    def readiness(self):
        return self._readiness

    @property
    def is_ready(self):
        return self._readiness is Readiness.READY

    @property
    def embedding(self):
        ''' The local frame (valid once ready). '''
        self.ready()
        return self._space

    @property
    def solver(self):
        ''' The nested relative solver (valid once ready). '''
        self.ready()
        return self._catenary

    @property
    def classification(self):
        ''' Which shape the chain takes: catenary, line segment or linear vertical. '''
        self.ready()
        return self._catenary.solve().kind

    def ready(self):
        ''' Embeds p1 in the local frame and hands it to the solver. '''
        if self._readiness is Readiness.READY:
            return
        p1_local = self._space.include(self._p1)
        self._catenary.p = p1_local
        self._readiness = Readiness.READY
        logger.debug("%s embedded p1 at local %s", type(self).__name__, p1_local)

    # --- Evaluation ---
    def evaluate(self, s, n=0):
        """
        Evaluates the curve at arc length s from p0.

        Args:
            s (float): Arc length along the chain (0 = p0, length = p1).
            n (int): Derivative order. 0 returns a point, anything else a vector.

        Returns:
            np.ndarray: World space point or vector.
        """
        self.ready()
        local = self._catenary.evaluate(s, n)
        if n == 0:
            return self._space.transform_point(local)
        return self._space.transform_vector(local)

    # --- Helpers ---
    def _as_point(self, p):
        arr = np.array(p, dtype=np.float64)
        if self.dimension is not None and arr.shape != (self.dimension,):
            raise ValueError(f"{type(self).__name__} expects points of dimension "
                             f"{self.dimension}, got shape {arr.shape}.")
        if arr.ndim != 1 or not 2 <= arr.size <= 4:
            raise ValueError(f"Catenary curves live in 2D, 3D or 4D, got shape {arr.shape}.")
        return arr

    @staticmethod
    def _as_direction(value, dim):
        arr = np.array(value, dtype=np.float64)
        if arr.shape != (dim,):
            raise ValueError(f"Slack direction must have shape ({dim},), got {arr.shape}.")
        if not np.any(arr):
            raise ValueError("Slack direction cannot be zero.")
        return arr

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (np.array_equal(self.p0, other.p0) and
                np.array_equal(self._p1, other._p1) and
                np.array_equal(self._slack, other._slack) and
                self.length == other.length)

    # Mutable, so not hashable
    __hash__ = None

    def __repr__(self):
        return (f"{type(self).__name__}(p0={self.p0}, p1={self._p1}, "
                f"length={self.length}, slack_direction={self._slack})")


class Catenary2D(CatenaryCurve):
    dimension = 2


class Catenary3D(CatenaryCurve):
    dimension = 3


class Catenary4D(CatenaryCurve):
    dimension = 4
