"""Strongly typed identifiers for ideabox entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
DomainId = NewType("DomainId", UUID)
IdeaId = NewType("IdeaId", UUID)
VoteId = NewType("VoteId", UUID)
