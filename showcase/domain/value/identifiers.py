"""Strongly typed identifiers for Showcase domain entities.

Identifiers are database-assigned serial integers. NewType keeps a
ProductId from being passed where a CommentId is expected.
"""

from typing import NewType

UserId = NewType("UserId", int)
ProductId = NewType("ProductId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)
