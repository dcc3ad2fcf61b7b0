"""Package licensing."""

from .base import License
from .expr import LicenseExpr, LicenseExprKind, LicenseExprParseError, LicenseExprParseErrorKind
from .spdx import SpdxLicense, SpdxParseError, SpdxParseErrorKind

__all__ = [
    "License",
    "LicenseExpr",
    "LicenseExprKind",
    "LicenseExprParseError",
    "LicenseExprParseErrorKind",
    "SpdxLicense",
    "SpdxParseError",
    "SpdxParseErrorKind",
]
