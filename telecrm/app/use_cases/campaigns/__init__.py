"""
Campaign Use Cases
"""

from .create_campaign_use_case import CreateCampaignUseCase
from .dtos import CampaignInfo
from .get_campaign_use_case import GetCampaignUseCase, ListCampaignsUseCase

__all__ = [
    "CreateCampaignUseCase",
    "GetCampaignUseCase",
    "ListCampaignsUseCase",
    "CampaignInfo",
]
