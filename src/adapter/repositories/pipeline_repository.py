from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.pipeline_repository import IPipelineRepository
from src.domain.entities import Pipeline


class PipelineRepository(IPipelineRepository):
    """Pipeline repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_sub_account_id(self, sub_account_id: UUID) -> List[Pipeline]:
        """Get all pipelines of a sub-account"""
        stmt = (
            select(Pipeline)
            .where(Pipeline.sub_account_id == sub_account_id)
            .order_by(Pipeline.created_at, Pipeline.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, pipeline: Pipeline) -> Pipeline:
        """Create a new pipeline"""
        self.session.add(pipeline)
        await self.session.flush()
        await self.session.refresh(pipeline)
        return pipeline
