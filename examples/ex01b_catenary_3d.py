"""
ex01b_catenary_3d.py
--------------------
Goal: Hang a chain between two skewed points in 3D, then change its
length and gravity and watch it re-solve lazily.
Runs the CurveQuality inspector on every configuration.
"""
import logging

from snapcore.display import Display
from snapcore.logging_utils import configure_logging
from snapcurve.catenary import Catenary3D
from snapcurve.quality import CurveQuality


def run():
    configure_logging(level=logging.INFO)

    chain = Catenary3D(p0=(1.0, -2.0, 0.5), p1=(4.0, 2.0, -1.0),
                       length=8.0, slack_direction=(0.0, 0.0, -1.0))

    d = Display("Catenary3D", repr(chain))
    d.header()

    # 1. Baseline
    CurveQuality(chain, samples=200).print_report(d)

    # 2. More chain, same frame
    chain.length = 12.0
    print(f"\nLength -> 12.0 (frame still ready: {chain.is_ready})")
    CurveQuality(chain, samples=200).print_report(d)

    # 3. Sideways gravity, frame rebuilt
    chain.slack_direction = (0.0, -1.0, 0.0)
    print(f"\nSlack -> -y (frame still ready: {chain.is_ready})")
    inspector = CurveQuality(chain, samples=200)
    inspector.print_report(d)

    d.success()
    inspector.plot(show=True)


if __name__ == "__main__":
    run()
