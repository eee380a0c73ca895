"""
snapcurve/quality.py
--------------------
Tools for inspecting how faithfully a curve honours its inputs.
Calculates endpoint errors, tangent speed and polyline length.
"""
import numpy as np
import matplotlib.pyplot as plt

from snapcore.display import Display


class CurveQuality:
    """
    Inspector class for an arc length parameterized curve (e.g. Catenary3D).

    Usage:
        inspector = CurveQuality(curve, samples=200)
        inspector.analyze()
        inspector.print_report()
        inspector.plot()
    """
    def __init__(self, curve, samples=128):
        if samples < 2:
            raise ValueError("CurveQuality needs at least 2 samples.")
        self.curve = curve
        self.samples = int(samples)

        # Metric Storage
        self.arc_lengths = np.array([])
        self.points = np.array([])
        self.speeds = np.array([])
        self.start_error = 0.0
        self.end_error = 0.0
        self.polyline_length = 0.0

        self._analyzed = False

    def analyze(self):
        """
        Samples the curve and computes metrics.
        """
        c = self.curve
        self.arc_lengths = np.linspace(0.0, c.length, self.samples)
        self.points = c.sample(self.samples)
        tangents = c.sample(self.samples, n=1)
        self.speeds = np.linalg.norm(tangents, axis=1)

        self.start_error = float(np.linalg.norm(self.points[0] - c.p0))
        self.end_error = float(np.linalg.norm(self.points[-1] - c.p1))
        self.polyline_length = float(np.sum(np.linalg.norm(np.diff(self.points, axis=0), axis=1)))

        self._analyzed = True
        return self

    @property
    def max_endpoint_error(self):
        if not self._analyzed: self.analyze()
        return max(self.start_error, self.end_error)

    @property
    def max_speed_deviation(self):
        ''' Largest |(|dP/ds|) - 1| over the samples. Zero for unit speed curves. '''
        if not self._analyzed: self.analyze()
        return float(np.max(np.abs(self.speeds - 1.0)))

    @property
    def length_error(self):
        ''' Polyline length minus the requested arc length. Chords cut corners,
            so this is normally slightly negative. '''
        if not self._analyzed: self.analyze()
        return self.polyline_length - self.curve.length

    def print_report(self, display=None):
        """ Writes a summary to stdout through the shared Display. """
        if not self._analyzed: self.analyze()
        d = display
        if d is None:
            d = Display("Curve Quality", repr(self.curve))
            d.header()

        d.section(f"Curve Quality Report ({self.samples} Samples)")
        d.setup_stats_columns(["Metric", "Value", "Status"], [18, 12, 28])

        kind = getattr(self.curve, "classification", None)
        if kind is not None:
            d.log_stats("Classification", kind.name, "")

        err = self.max_endpoint_error
        status = "[OK]" if err < 1e-4 else "[!] WARNING: Endpoint Drift"
        d.log_stats("Endpoint Error", err, status)

        dev = self.max_speed_deviation
        if dev < 1e-6: status = "[OK] Unit Speed"
        elif dev < 1e-2: status = "[~] CAUTION"
        else: status = "[!] WARNING: Not Unit Speed"
        d.log_stats("Speed Deviation", dev, status)

        d.log_stats("Polyline Length", self.polyline_length, "")
        d.log_stats("Length Error", self.length_error, "")

    def plot(self, ax=None, show=False):
        """ Draws the sampled curve and its tangent speed. """
        if not self._analyzed: self.analyze()

        if ax is None:
            fig, ax = plt.subplots(1, 2, figsize=(10, 4))
        else:
            fig = ax[0].figure

        # --- 1. Shape (first two world axes) ---
        pts = self.points
        ax[0].plot(pts[:, 0], pts[:, 1], color='steelblue')
        ax[0].plot(pts[[0, -1], 0], pts[[0, -1], 1], 'o', color='salmon')
        ax[0].set_aspect('equal', adjustable='datalim')
        ax[0].set_title("Curve (axes 0, 1)")

        # --- 2. Tangent speed ---
        ax[1].plot(self.arc_lengths, self.speeds, color='seagreen')
        ax[1].axhline(1.0, color='red', linestyle='--', label='Unit Speed')
        ax[1].set_title("Tangent Speed")
        ax[1].set_xlabel("Arc Length")
        ax[1].legend()

        fig.tight_layout()
        if show:
            plt.show()
        return fig, ax
