"""
Lead List Use Cases
"""

from .create_list_use_case import CreateListUseCase
from .dtos import LeadListInfo
from .get_list_use_case import GetListUseCase
from .list_lists_use_case import ListListsUseCase

__all__ = [
    "CreateListUseCase",
    "GetListUseCase",
    "ListListsUseCase",
    "LeadListInfo",
]
