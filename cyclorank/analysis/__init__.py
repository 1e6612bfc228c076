from .aggregator import ComplexityAggregator
from .analysis_runner import AnalysisRunner
from .classifier import decision_weight
from .collector import collect_declarations, display_name, receiver_string
from .ranking import exceeds_threshold, rank_records, sort_by_complexity
from .summary import average_complexity, format_average
from .walker import function_complexity

__all__ = [
    "AnalysisRunner",
    "ComplexityAggregator",
    "average_complexity",
    "collect_declarations",
    "decision_weight",
    "display_name",
    "exceeds_threshold",
    "format_average",
    "function_complexity",
    "rank_records",
    "receiver_string",
    "sort_by_complexity",
]
