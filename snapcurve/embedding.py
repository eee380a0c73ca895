"""
snapcurve/embedding.py
----------------------
Local "y up" frames used to reduce an N-dimensional catenary to the 2D/3D
relative solver.
"""
import numpy as np

# Establish a tolerance for degenerate projections
GEOM_TOL = 1e-12


class PlaneEmbedding:
    ''' An orthonormal k-dimensional frame embedded in N-dimensional space.

    The frame's y axis is the "up" axis (opposite to the slack direction).
    The x axis is rotated around y so that a target point lies in the
    {x, y} half-plane with x >= 0. For a 3D frame in 4D space the z axis
    completes the basis and the target has z == 0.

    In 2D (k == N == 2) there is no freedom to rotate: x is the clockwise
    perpendicular of y and the target may land on either side.

    Attributes:
        origin (np.ndarray): World position of the local origin.
        axes (np.ndarray): [k, N] matrix whose rows are the X, Y(, Z) axes.
    '''

    def __init__(self, origin, up, local_dimension=2):
        self.origin = np.array(origin, dtype=np.float64)
        self.world_dimension = self.origin.size
        self.local_dimension = int(local_dimension)

        if self.origin.ndim != 1 or self.world_dimension < 2:
            raise ValueError(f"Origin must be a point, got shape {self.origin.shape}.")
        if not 2 <= self.local_dimension <= self.world_dimension:
            raise ValueError(f"Cannot embed a {self.local_dimension}D frame "
                             f"in {self.world_dimension}D space.")

        self.axes = np.zeros((self.local_dimension, self.world_dimension))
        self.up = up
        self._orient(None)

    @property
    def up(self):
        ''' The unit Y axis of the frame. '''
        return self.axes[1].copy()

    @up.setter
    def up(self, value):
        value = np.array(value, dtype=np.float64)
        if value.shape != (self.world_dimension,):
            raise ValueError(f"Up axis must have shape ({self.world_dimension},), got {value.shape}.")
        mag = np.linalg.norm(value)
        if mag < GEOM_TOL:
            raise ValueError("Up axis cannot be zero length.")
        self.axes[1] = value / mag

    def include(self, target):
        """
        Rotates the frame around its up axis so `target` lies in the frame,
        and returns the target's local coordinates.

        Args:
            target (array-like): World space point.

        Returns:
            np.ndarray: Local coordinates (x, y) or (x, y, 0).
        """
        rel = np.array(target, dtype=np.float64) - self.origin
        self._orient(rel)
        return self.inverse_transform_vector(rel)

    def _orient(self, rel):
        y_axis = self.axes[1]

        if self.world_dimension == 2:
            # Fixed: rotate the up axis 90 degrees clockwise
            self.axes[0] = (y_axis[1], -y_axis[0])
            return

        x_axis = None
        if rel is not None:
            # Remove the vertical component; what's left points at the target
            flat = rel - y_axis * np.dot(y_axis, rel)
            mag = np.linalg.norm(flat)
            if mag > GEOM_TOL * max(1.0, np.linalg.norm(rel)):
                x_axis = flat / mag
        if x_axis is None:
            x_axis = _orthogonal_axis([y_axis])
        self.axes[0] = x_axis

        if self.local_dimension == 3:
            self.axes[2] = _orthogonal_axis([x_axis, y_axis])

    # --- Transforms ---
    def transform_point(self, pt):
        ''' Local point -> world point. '''
        return self.origin + np.asarray(pt, dtype=np.float64) @ self.axes

    def transform_vector(self, vec):
        ''' Local vector -> world vector, ignoring the origin. '''
        return np.asarray(vec, dtype=np.float64) @ self.axes

    def inverse_transform_point(self, pt):
        ''' World point -> local point. '''
        return self.axes @ (np.asarray(pt, dtype=np.float64) - self.origin)

    def inverse_transform_vector(self, vec):
        ''' World vector -> local vector. '''
        return self.axes @ np.asarray(vec, dtype=np.float64)

    def __repr__(self):
        return (f"PlaneEmbedding(origin={self.origin}, "
                f"axes={self.axes.tolist()})")


def _orthogonal_axis(basis):
    """
    Returns a unit vector orthogonal to every (orthonormal) vector in `basis`.
    Tries the world axes in order and keeps the first that survives
    Gram-Schmidt, so the choice is deterministic.
    """
    dim = len(basis[0])
    best, best_mag = None, 0.0
    for i in range(dim):
        candidate = np.zeros(dim)
        candidate[i] = 1.0
        for b in basis:
            candidate -= b * np.dot(b, candidate)
        mag = np.linalg.norm(candidate)
        # Anything this far from the span is well conditioned
        if mag > 0.5:
            return candidate / mag
        if mag > best_mag:
            best, best_mag = candidate, mag
    return best / best_mag
