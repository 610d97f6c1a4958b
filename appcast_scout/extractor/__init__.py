"""appcast_scout.extractor: Byte scanner, classifier, collector and output builder."""

from appcast_scout.extractor.byte_scanner import iter_tokens
from appcast_scout.extractor.classifier import ClassifierRules, UrlClassifier
from appcast_scout.extractor.collector import CandidateCollector, sort_candidates
from appcast_scout.extractor.models import Candidate, ExtractionResult, Priority
from appcast_scout.extractor.output import OutputBuffer, build_output

__all__ = [
    "iter_tokens",
    "ClassifierRules",
    "UrlClassifier",
    "CandidateCollector",
    "sort_candidates",
    "Candidate",
    "ExtractionResult",
    "Priority",
    "OutputBuffer",
    "build_output",
]
