"""
AppcastScout package initializer.
Defines package version and exposes the extraction API and CLI.
"""
__version__ = "0.1.0"

from appcast_scout.engine import extract_appcast_urls, find_appcast_urls
from appcast_scout.errors import ExtractionError, OutputAllocationError, SourceReadError
from appcast_scout.extractor import Candidate, ExtractionResult, Priority

__all__ = [
    "__version__",
    "extract_appcast_urls",
    "find_appcast_urls",
    "ExtractionError",
    "SourceReadError",
    "OutputAllocationError",
    "Candidate",
    "ExtractionResult",
    "Priority",
]
