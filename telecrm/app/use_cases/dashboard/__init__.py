"""
Dashboard Use Cases
"""

from .get_kpi_use_case import GetKPIUseCase, KPIResponse

__all__ = [
    "GetKPIUseCase",
    "KPIResponse",
]
