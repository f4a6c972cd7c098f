"""Nesting of flat comment rows into a depth-bounded thread."""

from collections import defaultdict
from dataclasses import dataclass, field

from showcase.domain.model.comment import Comment
from showcase.domain.value import CommentId

DEFAULT_MAX_DEPTH = 6


@dataclass
class CommentNode:
    """A comment and its rendered replies.

    depth is 0 for top-level comments.
    """

    comment: Comment
    depth: int
    children: list["CommentNode"] = field(default_factory=list)


def build_comment_tree(
    comments: list[Comment], max_depth: int = DEFAULT_MAX_DEPTH
) -> list[CommentNode]:
    """Nest a flat list of comments into threads.

    Roots are comments without a parent. A reply is attached under the
    comment whose id matches its parent_id, provided both belong to the
    same product. A node at depth d is rendered iff d < max_depth; deeper
    replies are dropped silently. Blank comments are left out together with
    everything beneath them. Input order is preserved among siblings.

    Args:
        comments: Flat comment list, usually ordered by creation time
        max_depth: Number of levels to render

    Returns:
        Top-level nodes with their children populated
    """
    replies: dict[CommentId, list[Comment]] = defaultdict(list)
    for comment in comments:
        if comment.parent_id is not None:
            replies[comment.parent_id].append(comment)

    def build_node(comment: Comment, depth: int) -> CommentNode:
        node = CommentNode(comment=comment, depth=depth)
        if depth + 1 >= max_depth or not comment.is_persisted:
            return node
        node.children = [
            build_node(reply, depth + 1)
            for reply in replies.get(comment.id, [])
            if reply.product_id == comment.product_id and not reply.is_blank
        ]
        return node

    if max_depth <= 0:
        return []

    return [
        build_node(comment, 0)
        for comment in comments
        if comment.parent_id is None and not comment.is_blank
    ]
