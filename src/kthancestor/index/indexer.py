"""One-pass construction of the direct-parent and skip indices.

The walk is pre-order. Each stack frame carries its own countdown and
last-sampled ancestor, so sampling restarts independently on every branch.
A node is sampled when its countdown reaches zero, which happens every
`stride` levels below the root.
"""
from __future__ import annotations

from ..logger import init_logger
from ..tree import TreeNode
from .data_structures import (
    DEFAULT_STRIDE,
    NO_PARENT,
    AncestorIndex,
    DirectIndex,
    NodeId,
    ParentRef,
    SkipIndex,
    validate_stride,
)

logger = init_logger(__name__)


def build_index(root: TreeNode, stride: int = DEFAULT_STRIDE) -> AncestorIndex:
    """Index `root` for k-th ancestor queries.

    Parameters:
        root: Root of a finite, acyclic tree with unique node ids. Duplicate ids
            overwrite earlier entries; cycles never terminate.
        stride: Levels between skip samples (>= 1).

    Returns:
        AncestorIndex holding read-only direct and skip indices.

    Raises:
        InvalidStrideError: if `stride` is not an int >= 1.
    """
    stride = validate_stride(stride)

    parents: dict[NodeId, ParentRef] = {}
    jumps: dict[NodeId, ParentRef] = {root.id: NO_PARENT}

    # (node, parent, countdown, last sampled ancestor)
    stack: list[tuple[TreeNode, ParentRef, int, NodeId]] = [(root, NO_PARENT, stride, root.id)]
    while stack:
        node, parent, countdown, sampled = stack.pop()
        parents[node.id] = parent
        if parent is not NO_PARENT:
            countdown -= 1
        if countdown == 0:
            jumps[node.id] = sampled
            countdown = stride
            sampled = node.id
        for child in reversed(node.children):
            stack.append((child, node.id, countdown, sampled))

    logger.debug(
        "indexed %d nodes: %d skip entries at stride %d", len(parents), len(jumps), stride
    )
    return AncestorIndex(DirectIndex(parents), SkipIndex(jumps, stride))
