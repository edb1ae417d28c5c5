"""Permission policy database model.

Stores CUSTOM policies only. System policies are derived from the role
registry at evaluation time and never written here.

Subject is stored split (subject_type, subject_id) so the evaluation query
can filter on the effective subject set.
"""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class PermissionPolicy(BaseModel):
    """Custom permission policy model.

    Fields:
        id: UUIDv7 string primary key (from BaseModel)
        created_at: Creation timestamp (from BaseModel)
        profile_id: Owning profile
        subject_type: "user", "role" or "group"
        subject_id: Subject identifier
        action_pattern: Action pattern (e.g., "report.*")
        resource_pattern: Resource pattern (e.g., "*", "account:1,account:2")
        effect: "ALLOW" or "DENY"
        description: Human-readable description
        is_system: Always False for stored rows (kept for parity with the domain)
        created_by: Author id
        updated_at: Last description revision (NULL if never revised)

    Indexes:
        - idx_permission_policies_profile_subject: evaluation hot path
    """

    __tablename__ = "permission_policies"

    profile_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
        comment="Owning profile",
    )

    subject_type: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="Subject kind: user, role, group",
    )

    subject_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Subject identifier (user id, role name, group id)",
    )

    action_pattern: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Dot-segmented action pattern",
    )

    resource_pattern: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="*",
        comment="Resource pattern, comma-separated alternatives allowed",
    )

    effect: Mapped[str] = mapped_column(
        String(5),
        nullable=False,
        comment="ALLOW or DENY",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    is_system: Mapped[bool] = mapped_column(
        nullable=False,
        default=False,
    )

    created_by: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
    )

    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    __table_args__ = (
        Index(
            "idx_permission_policies_profile_subject",
            "profile_id",
            "subject_type",
            "subject_id",
        ),
    )
