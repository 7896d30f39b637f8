from .logger import get_logger,DEBUG,INFO,WARNING,ERROR
from .lazy_singleton import LazySingleton
from .time_utils import (
    format_time,
    format_duration,
    to_local_naive,
    day_bounds,
    parse_date,
)

__all__ = [
    "get_logger",
    "LazySingleton",
    "format_time",
    "format_duration",
    "to_local_naive",
    "day_bounds",
    "parse_date",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR"
]
