''' snapcore: Shared utilities for the Snap Suite of Tools.

- Recommended Versioning Strategy (Semantic Versioning)

A common standard is Major.Minor.Patch (e.g., 1.2.5):

    Major (1.x.x): You broke something (API change). Old scripts might not run.

    Minor (x.2.x): You added a feature (e.g., a new curve type) but old scripts still work.

    Patch (x.x.5): You fixed a bug.


'''
__version__ = "0.7.0"

from .display import ConsoleDisplay, Display
from .logging_utils import configure_logging
