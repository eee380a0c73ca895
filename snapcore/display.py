"""
snapcore/display.py
-------------------
Standardized console output for Snap Suite reports.
Provides consistent headers, section breaks, and tabular rows.
"""
import logging
import sys
import time
import numpy as np

logger = logging.getLogger(__name__)


class ConsoleDisplay:
    def __init__(self, title, context_info="", stream=None):
        """
        Initialize the display manager.

        Args:
            title (str): Name of the report (e.g. "Curve Quality")
            context_info (str): What is being reported on (e.g. a curve repr)
            stream (file, optional): Where to write. Defaults to stdout.
        """
        self.title = title
        self.context = context_info
        self.stream = stream
        self.start_time = time.time()
        self._col_widths = []
        self._headers = []

    def _print(self, text=""):
        print(text, file=self.stream or sys.stdout)

    def header(self):
        """Prints the Minimalist Header."""
        width = 70
        self._print("-" * width)
        self._print(f"SnapCurve :: {self.title}")
        self._print(f"Context   :: {self.context}")
        self._print("-" * width + "\n")

    def section(self, name):
        """Prints a visual break for a new phase (e.g., 'Sampling')."""
        self._print(f"--- {name} ---")

    def setup_stats_columns(self, headers, widths=None):
        """
        Defines the columns for the table rows.

        Args:
            headers (list of str): Column names, e.g. ["Metric", "Value"]
            widths (list of int, optional): Width of each column. Defaults to 12.
        """
        self._headers = headers
        if widths is None:
            self._col_widths = [12] * len(headers)
        else:
            self._col_widths = widths

        self._print()
        header_str = "  ".join([h.rjust(w) for h, w in zip(self._headers, self._col_widths)])
        self._print(header_str)
        self._print("-" * len(header_str))

    def log_stats(self, *args):
        """
        Prints a row of data matching the columns defined in setup_stats_columns.
        Automatically formats floats (scientific vs fixed) based on magnitude.
        """
        if len(args) != len(self._col_widths):
            logger.warning("Display row expected %d values, got %d: %s",
                           len(self._col_widths), len(args), args)
            return

        self._print("  ".join(format_cell(val, width)
                              for val, width in zip(args, self._col_widths)))

    def success(self, message="Report Complete"):
        """Prints the success footer with elapsed time."""
        elapsed = time.time() - self.start_time
        self._print(f"\n>> {message} ({elapsed:.2f}s)\n")

    def error(self, message):
        """Prints a critical error message."""
        self._print(f"\n!! CRITICAL ERROR: {message} !!\n")


def format_cell(val, width):
    ''' Right-justifies one table value; floats pick fixed or scientific notation. '''
    if isinstance(val, (bool, np.bool_)):
        return str(bool(val)).rjust(width)
    if isinstance(val, (int, np.integer)):
        return f"{val:d}".rjust(width)
    if isinstance(val, (float, np.floating)):
        abs_val = abs(val)
        if abs_val == 0:
            return f"{0.0:.4f}".rjust(width)
        if abs_val < 1e-2 or abs_val >= 1e5:
            return f"{val:.2e}".rjust(width)
        return f"{val:.4f}".rjust(width)
    return str(val).rjust(width)


# -- Convenience Alias --
Display = ConsoleDisplay
