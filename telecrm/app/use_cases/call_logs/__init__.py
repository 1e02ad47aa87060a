"""
Call Log Use Cases
"""

from .dtos import CallLogInfo
from .list_call_logs_use_case import ListCallLogsUseCase
from .log_call_use_case import LogCallUseCase

__all__ = [
    "LogCallUseCase",
    "ListCallLogsUseCase",
    "CallLogInfo",
]
