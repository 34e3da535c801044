"""Base controller classes and error types."""

from kubehoggers.controllers.base.base_controller import BaseController, KubectlError
from kubehoggers.controllers.base.errors import (
    HoggersError,
    ResolutionError,
    UpstreamListingError,
)

__all__ = [
    "BaseController",
    "HoggersError",
    "KubectlError",
    "ResolutionError",
    "UpstreamListingError",
]
