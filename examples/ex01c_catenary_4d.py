"""
ex01c_catenary_4d.py
--------------------
Goal: Show that a 4D chain is the same curve as a 2D one once it is
rotated into its hanging plane.
"""
import numpy as np

from snapcurve.catenary import Catenary2D, Catenary4D


def run():
    print("--- 1. Building Chains ---")
    flat = Catenary2D((0.0, 0.0), (3.0, 0.0), 5.0, (0.0, -1.0))
    chain = Catenary4D((0.0, 0.0, 0.0, 0.0), (1.0, 2.0, 2.0, 0.0), 5.0, (0.0, 0.0, 0.0, -1.0))
    print(f"Created: {flat}")
    print(f"Created: {chain}")

    print("\n--- 2. Local Frame ---")
    print(f"Axes (rows):\n{chain.embedding.axes}")
    print(f"P1 local: {chain.solver.p}")

    print("\n--- 3. Comparing Profiles ---")
    direction = np.array([1.0, 2.0, 2.0]) / 3.0
    worst = 0.0
    for s in np.linspace(0.0, 5.0, 11):
        u, v = flat.evaluate(s)
        expected = np.append(u * direction, v)
        worst = max(worst, np.linalg.norm(chain.evaluate(s) - expected))

    if worst < 1e-9:
        print(f" -> SUCCESS: 4D chain matches the 2D profile (max diff {worst:.1e}).")
    else:
        print(f" -> FAILURE: profiles differ by {worst:.3e}")


if __name__ == "__main__":
    run()
