"""
Navigation Use Cases
"""

from .dtos import SidebarDetailsInfo, SidebarResponse
from .load_sidebar_use_case import LoadSidebarUseCase

__all__ = ["LoadSidebarUseCase", "SidebarDetailsInfo", "SidebarResponse"]
