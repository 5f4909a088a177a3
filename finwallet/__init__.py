"""Mini README: Core package initializer for the finwallet console tracker.

This module exposes convenience imports that allow other parts of the
application to access shared helpers without needing to know the exact
module structure. The domain, storage, service and interface layers live in
their own subpackages and are imported explicitly by callers.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
