''' geometry.py
    -----------
    Base classes for curves parameterized by arc length.
    Subclasses only provide evaluate() and length; sampling and
    polyline length estimates are shared.
'''
import numpy as np
from abc import ABC, abstractmethod


class ArcLengthCurve(ABC):
    ''' Abstract base for all curves evaluated by arc length.
        Enforces that every subclass MUST implement the
        following methods.
    '''

    @property
    @abstractmethod
    def length(self):
        ''' Total arc length of the curve. '''
        pass

    @abstractmethod
    def evaluate(self, s, n=0):
        ''' Returns the position (n = 0) or n-th derivative at arc length s
            (0.0 <= s <= length). '''
        pass

    def sample(self, count, n=0):
        """
        Evaluates the curve at `count` evenly spaced arc lengths,
        including both ends.

        Returns:
            np.ndarray: [count, dim] array of points (or derivatives).
        """
        if count < 2:
            raise ValueError("Sampling needs at least 2 points.")
        return np.array([self.evaluate(s, n) for s in np.linspace(0.0, self.length, count)])

    def points(self, count=64):
        ''' Polyline approximation of the curve, used for plotting. '''
        return self.sample(count)

    def approximate_length(self, accuracy=8):
        ''' Sums the chord lengths of a polyline with `accuracy` vertices. '''
        pts = self.sample(max(2, int(accuracy)))
        return float(np.sum(np.linalg.norm(np.diff(pts, axis=0), axis=1)))
