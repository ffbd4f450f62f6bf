"""
SubAccount Management Use Cases

All sub-account-related business logic.
"""

from .delete_sub_account_use_case import DeleteSubAccountUseCase
from .dtos import (
    DeleteSubAccountResponse,
    PipelineInfo,
    SubAccountCommand,
    SubAccountDetailsResponse,
    SubAccountInfo,
    UpsertSubAccountResponse,
)
from .get_sub_account_details_use_case import GetSubAccountDetailsUseCase
from .upsert_sub_account_use_case import UpsertSubAccountUseCase

__all__ = [
    "UpsertSubAccountUseCase",
    "GetSubAccountDetailsUseCase",
    "DeleteSubAccountUseCase",
    "DeleteSubAccountResponse",
    "PipelineInfo",
    "SubAccountCommand",
    "SubAccountDetailsResponse",
    "SubAccountInfo",
    "UpsertSubAccountResponse",
]
