from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import Pipeline


class IPipelineRepository(ABC):
    """Pipeline repository interface - application layer"""

    @abstractmethod
    async def get_by_sub_account_id(self, sub_account_id: UUID) -> List[Pipeline]:
        """Get all pipelines of a sub-account"""
        pass

    @abstractmethod
    async def create(self, pipeline: Pipeline) -> Pipeline:
        """Create a new pipeline"""
        pass
