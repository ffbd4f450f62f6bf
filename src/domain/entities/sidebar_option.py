"""
SidebarOption Entity

Navigation entry owned by an agency or by a sub-account.
"""

from datetime import UTC, datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint
from sqlmodel import Column, DateTime, Field, SQLModel

# (name, icon, link template) in seeding order
AGENCY_SIDEBAR_DEFAULTS = (
    ("Dashboard", "category", "/agency/{id}"),
    ("Launchpad", "clipboardIcon", "/agency/{id}/launchpad"),
    ("Billing", "payment", "/agency/{id}/billing"),
    ("Settings", "settings", "/agency/{id}/settings"),
    ("Sub Accounts", "person", "/agency/{id}/all-subaccounts"),
    ("Team", "shield", "/agency/{id}/team"),
)

SUB_ACCOUNT_SIDEBAR_DEFAULTS = (
    ("Launchpad", "clipboardIcon", "/subaccount/{id}/launchpad"),
    ("Settings", "settings", "/subaccount/{id}/settings"),
    ("Funnels", "pipelines", "/subaccount/{id}/funnels"),
    ("Media", "database", "/subaccount/{id}/media"),
    ("Automations", "chip", "/subaccount/{id}/automations"),
    ("Pipelines", "flag", "/subaccount/{id}/pipelines"),
    ("Contacts", "person", "/subaccount/{id}/contacts"),
    ("Dashboard", "category", "/subaccount/{id}"),
)


class SidebarOption(SQLModel, table=True):
    """
    SidebarOption entity - a navigation entry.

    Business Rules:
    - Owned by an agency or a sub-account, never both
    - Seeded together with its owner on first creation
    """

    __tablename__ = "sidebar_options"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    name: str = Field(default="Menu", max_length=255)
    icon: str = Field(default="info", max_length=50)
    link: str = Field(default="#")
    # Display order within the owner's sidebar
    position: int = Field(default=0)

    agency_id: Optional[UUID] = Field(
        default=None, foreign_key="agencies.id", index=True, ondelete="CASCADE"
    )
    sub_account_id: Optional[UUID] = Field(
        default=None, foreign_key="sub_accounts.id", index=True, ondelete="CASCADE"
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (
        CheckConstraint(
            "(agency_id IS NULL) <> (sub_account_id IS NULL)",
            name="ck_sidebar_option_single_owner",
        ),
    )


def default_agency_sidebar(agency_id: UUID) -> List[SidebarOption]:
    return [
        SidebarOption(
            name=name,
            icon=icon,
            link=link.format(id=agency_id),
            position=position,
            agency_id=agency_id,
        )
        for position, (name, icon, link) in enumerate(AGENCY_SIDEBAR_DEFAULTS)
    ]


def default_sub_account_sidebar(sub_account_id: UUID) -> List[SidebarOption]:
    return [
        SidebarOption(
            name=name,
            icon=icon,
            link=link.format(id=sub_account_id),
            position=position,
            sub_account_id=sub_account_id,
        )
        for position, (name, icon, link) in enumerate(SUB_ACCOUNT_SIDEBAR_DEFAULTS)
    ]
