from unused_css.analysis.diff import UnusedReport, find_unused
from unused_css.analysis.extractor import CLASS_SELECTOR_RE, extract_declared_classes
from unused_css.analysis.ignore import IgnoreMatcher
from unused_css.analysis.usage import UsageAccumulator

__all__ = [
    "CLASS_SELECTOR_RE",
    "IgnoreMatcher",
    "UnusedReport",
    "UsageAccumulator",
    "extract_declared_classes",
    "find_unused",
]
