"""
ex01a_catenary_2d.py
--------------------
Goal: Hang three 2D chains and check which shape the solver picks.
  1. Level endpoints with slack    -> CATENARY
  2. Almost no slack               -> LINE_SEGMENT
  3. P1 straight below P0          -> LINEAR_VERTICAL
"""
import logging

import numpy as np
import matplotlib.pyplot as plt

from snapcore.logging_utils import configure_logging
from snapcurve.catenary import Catenary2D

logger = logging.getLogger("snapcurve.examples")


def run():
    configure_logging(level=logging.DEBUG)

    print("--- 1. Building Chains ---")
    chains = {
        "sagging":  Catenary2D((0.0, 0.0), (4.0, 0.0), 5.0, (0.0, -1.0)),
        "taut":     Catenary2D((0.0, 0.0), (3.0, 4.0), 5.00001, (0.0, -1.0)),
        "vertical": Catenary2D((0.0, 0.0), (0.0, -5.0), 7.0, (0.0, -1.0)),
    }

    print("\n--- 2. Classification ---")
    for name, chain in chains.items():
        end = chain.evaluate(chain.length)
        err = np.linalg.norm(end - chain.p1)
        print(f"{name:>9s}: {chain.classification.name:<16s} |P(s) - P1| = {err:.2e}")
        if err > 1e-3:
            logger.warning("%s chain misses its endpoint by %.3e", name, err)

    print("\n--- 3. Mid-span ---")
    mid = chains["sagging"].evaluate(2.5)
    print(f"Sagging chain at s=2.5: {mid} (should hang below y=0)")

    print("\n--- 4. Plotting ---")
    fig, ax = plt.subplots(figsize=(6, 5))
    for name, chain in chains.items():
        pts = chain.sample(100)
        ax.plot(pts[:, 0], pts[:, 1], label=name)
    ax.set_aspect('equal', adjustable='datalim')
    ax.legend()
    ax.set_title("Catenary2D")
    plt.show()


if __name__ == "__main__":
    run()
