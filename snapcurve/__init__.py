# snapcurve/__init__.py

__version__ = "1.0"

# Closed-form catenary math
from . import catenary1d

# Solver and configuration
from .config import SolverConfig, DEFAULT_CONFIG
from .solver import (CatenaryToPoint, CatenaryToPoint2D, CatenaryToPoint3D,
                     CatenaryStateError, Evaluability)

# Curves
from .embedding import PlaneEmbedding
from .geometry import ArcLengthCurve
from .catenary import CatenaryCurve, Catenary2D, Catenary3D, Catenary4D, Readiness
from .quality import CurveQuality
