"""Domain models for the license exceptions maker.

Row models (SourceRow, RowDetails), the approval variants, the SPDX document
(ExceptionDocument, LicenseEntry), the JSON projection (PackageSubset) and
configuration / result containers.
"""

from .approval import Approval, ApacheWaiver, NotWhitelisted, Whitelisted
from .config_models import (
    DocumentConfig,
    ErrorPolicy,
    ExceptionsConfig,
    OutputConfig,
    SourceConfig,
)
from .conversion_result import ConversionResult
from .document import CreationInfo, ExceptionDocument
from .license_entry import NOASSERTION, LicenseEntry
from .package_subset import PackageSubset
from .row_details import ROW_LENGTH, RowDetails, SourceRow

__all__ = [
    # Configuration models
    "DocumentConfig",
    "ErrorPolicy",
    "ExceptionsConfig",
    "OutputConfig",
    "SourceConfig",
    # Row models
    "ROW_LENGTH",
    "RowDetails",
    "SourceRow",
    "Approval",
    "ApacheWaiver",
    "NotWhitelisted",
    "Whitelisted",
    # Document models
    "CreationInfo",
    "ExceptionDocument",
    "LicenseEntry",
    "NOASSERTION",
    "PackageSubset",
    "ConversionResult",
]
