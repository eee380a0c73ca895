"""
-------
conftest.py
-------
Shared pytest fixtures for curve tests.
"""

import pytest
import numpy as np
import matplotlib
matplotlib.use("Agg")  # headless backend for CI
import matplotlib.pyplot as plt

from snapcurve.catenary import Catenary2D, Catenary3D


# -----------------------------------------------------------------------------
# Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def fig_ax():
    """
    Create and yield an isolated Figure with two Axes.

    The figure is automatically closed after the test.
    """
    fig, ax = plt.subplots(1, 2, figsize=(8, 3))
    yield fig, ax
    plt.close(fig)


# -----------------------------------------------------------------------------
# Curve fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sagging_chain():
    """Level endpoints 4 apart, chain of length 5, gravity along -y."""
    return Catenary2D((0.0, 0.0), (4.0, 0.0), 5.0, (0.0, -1.0))


@pytest.fixture
def taut_chain():
    """3-4-5 triangle with essentially no slack."""
    return Catenary2D((0.0, 0.0), (3.0, 4.0), 5.00001, (0.0, -1.0))


@pytest.fixture
def vertical_chain():
    """P1 straight below P0 with 2 units of extra chain."""
    return Catenary2D((0.0, 0.0), (0.0, -5.0), 7.0, (0.0, -1.0))


@pytest.fixture
def chain_3d():
    """Skewed endpoints in 3D with gravity along -z."""
    return Catenary3D((1.0, -2.0, 0.5), (4.0, 2.0, -1.0), 8.0, (0.0, 0.0, -1.0))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
