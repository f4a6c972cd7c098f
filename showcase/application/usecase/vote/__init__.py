"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_vote import GetVoteRequest, GetVoteResponse, GetVoteUseCase, VoteItem
from .list_votes import ListVotesRequest, ListVotesResponse, ListVotesUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetVoteRequest",
    "GetVoteResponse",
    "GetVoteUseCase",
    "ListVotesRequest",
    "ListVotesResponse",
    "ListVotesUseCase",
    "VoteItem",
]
