from .checks import check_leaders, check_partition, repeat_pairs, validate_all, validate_params
from .report import format_validation_report, write_validation_report

__all__ = [
    "check_leaders",
    "check_partition",
    "format_validation_report",
    "repeat_pairs",
    "validate_all",
    "validate_params",
    "write_validation_report",
]
