"""Domain value objects with validation.

Immutable value objects for the authorization domain.
"""

from src.domain.value_objects.action import Action
from src.domain.value_objects.decision import Decision
from src.domain.value_objects.pattern import matches_pattern
from src.domain.value_objects.resource import Resource
from src.domain.value_objects.subject import Subject

__all__ = [
    "Action",
    "Decision",
    "Resource",
    "Subject",
    "matches_pattern",
]
