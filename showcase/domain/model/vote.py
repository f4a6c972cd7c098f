"""Vote entity.

Votes form the ledger behind a product's score. Each user holds at most one
vote row per product; toggling updates that row in place.
"""

from typing import Optional

from showcase.domain.model.common import DomainModel
from showcase.domain.value import ProductId, UserId, VoteId, VoteValue


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One row per (user, product), enforced by a unique constraint
    - value is 1 (upvote) or 0 (no vote / retracted)
    - id is None only for the "nothing to retract" result, which is never stored
    """

    id: Optional[VoteId] = None
    user_id: UserId
    product_id: ProductId
    value: VoteValue = VoteValue.UP
