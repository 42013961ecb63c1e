"""
Remote tree traversal.

Modules:
    - ordering: Partition of entries into files and subdirectories, name ordering
    - sink: Receivers of traversal output
    - coordinator: Concurrent breadth-expanding walk driven by a single queue
"""

from .coordinator import TraversalChunk, TreeTraversal
from .ordering import by_name, order, ordered_partition, partition
from .sink import CallbackSink, CollectingSink, EntrySink

__all__ = [
    "TraversalChunk",
    "TreeTraversal",
    "by_name",
    "order",
    "ordered_partition",
    "partition",
    "CallbackSink",
    "CollectingSink",
    "EntrySink",
]
