"""Pure aggregation of fetched activity into wrap statistics."""

from github_wrapped.analysis.aggregator import aggregate, aggregate_bundle, rank_languages
from github_wrapped.analysis.badges import classify_badges
from github_wrapped.analysis.remarks import Remarks, build_remarks

__all__ = [
    "aggregate",
    "aggregate_bundle",
    "rank_languages",
    "classify_badges",
    "Remarks",
    "build_remarks",
]
