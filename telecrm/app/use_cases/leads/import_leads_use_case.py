"""
Import Leads Use Case

Bulk-loads leads, skipping rows that already exist.
"""

import logging
from typing import List, Optional

from telecrm.app.services.unit_of_work import UnitOfWork
from telecrm.domain.base import utcnow
from telecrm.domain.entities import Lead, LeadStatus
from telecrm.libs.result import Result, Return

from .dtos import ImportLeadsResponse, LeadFields

logger = logging.getLogger(__name__)


class ImportLeadsUseCase:
    """
    Use case for importing leads in bulk.

    Business Rules:
    - A row is a duplicate when a lead with the same phone exists, else the
      same email, else the same company and name
    - Duplicates are counted and skipped, never merged
    - Rows earlier in the same batch count as existing leads
    - Imported leads start unreached
    - An existing target list grows its total_count by the rows imported
    - The whole batch commits at once
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        rows: List[LeadFields],
        list_id: Optional[int] = None,
        campaign_id: Optional[int] = None,
    ) -> Result[ImportLeadsResponse]:
        async with self.uow:
            success_count = 0
            duplicate_count = 0

            for row in rows:
                duplicate = await self.uow.leads.find_duplicate(
                    phone=row.phone,
                    email=row.email,
                    company=row.company,
                    name=row.name,
                )
                if duplicate is not None:
                    duplicate_count += 1
                    continue

                await self.uow.leads.create(
                    Lead(
                        **row.model_dump(),
                        list_id=list_id,
                        campaign_id=campaign_id,
                        status=LeadStatus.unreached,
                    )
                )
                success_count += 1

            if list_id is not None and success_count:
                lead_list = await self.uow.lists.get_by_id(list_id)
                if lead_list is not None:
                    lead_list.total_count += success_count
                    lead_list.updated_at = utcnow()
                    await self.uow.lists.update(lead_list)

            await self.uow.commit()

            logger.info(f"Imported {success_count} leads, skipped {duplicate_count} duplicates")

            return Return.ok(
                ImportLeadsResponse(
                    success_count=success_count, duplicate_count=duplicate_count
                )
            )
