"""Subject value object (who a policy applies to).

A subject is a tagged value: a SubjectType plus an opaque identifier.
Canonical textual form is the URN ``<kind>:<identifier>``:

    user:abc123
    role:READER
    group:9f2e0c7a

Usage:
    from src.domain.value_objects import Subject

    subject = Subject.from_urn("role:READER")
    assert subject == Subject.role("READER")
    subject.to_urn()  # "role:READER"
"""

from dataclasses import dataclass

from src.domain.enums.subject_type import SubjectType

URN_SEPARATOR = ":"


@dataclass(frozen=True, slots=True, kw_only=True)
class Subject:
    """Principal reference (value object).

    Equality and hashing are by (type, identifier), so subjects can be
    collected in sets when building the effective subject set of a request.

    Attributes:
        type: Kind of principal (USER, ROLE, GROUP).
        identifier: Opaque id (user id, role name or group id).

    Raises:
        ValueError: If identifier is blank.
    """

    type: SubjectType
    identifier: str

    def __post_init__(self) -> None:
        """Validate subject after initialization.

        Raises:
            ValueError: If identifier is empty or whitespace.
        """
        if not self.identifier or not self.identifier.strip():
            raise ValueError("Subject identifier cannot be blank")

    @classmethod
    def user(cls, user_id: str) -> "Subject":
        """Create a USER subject."""
        return cls(type=SubjectType.USER, identifier=str(user_id))

    @classmethod
    def role(cls, role_name: str) -> "Subject":
        """Create a ROLE subject."""
        return cls(type=SubjectType.ROLE, identifier=role_name)

    @classmethod
    def group(cls, group_id: str) -> "Subject":
        """Create a GROUP subject."""
        return cls(type=SubjectType.GROUP, identifier=str(group_id))

    @classmethod
    def from_urn(cls, urn: str) -> "Subject":
        """Parse a subject from its URN form.

        The kind prefix is case-insensitive. Only the first colon separates
        kind from identifier, so identifiers may contain colons.

        Args:
            urn: Subject URN (e.g., "user:abc123", "ROLE:READER").

        Returns:
            Subject: Parsed subject.

        Raises:
            ValueError: If the URN has no colon, an unknown kind, or a
                blank identifier.

        Example:
            >>> Subject.from_urn("group:ops:emea").identifier
            'ops:emea'
        """
        if not urn or URN_SEPARATOR not in urn:
            raise ValueError(f"Invalid subject URN: {urn}")

        prefix, identifier = urn.split(URN_SEPARATOR, 1)
        return cls(type=SubjectType.from_prefix(prefix), identifier=identifier)

    def to_urn(self) -> str:
        """Return the canonical URN form (``<kind-lowercase>:<identifier>``)."""
        return f"{self.type.value}{URN_SEPARATOR}{self.identifier}"

    def __str__(self) -> str:
        """String representation (URN)."""
        return self.to_urn()
