# graphorder.kahn

import logging
from typing import Dict, List, Optional, Set

from graphorder.graph import CyclicGraphError, normalize
from graphorder.types import Graph, NormalizedGraph, Ordering

logger = logging.getLogger(__name__)

def in_degrees(graph: NormalizedGraph) -> Dict[str, int]:
    '''Return the number of incoming edges of every node in the specified
    normalized 'graph', counting repeated edges once per occurrence.'''
    degrees = {node: 0 for node in graph}
    for successors in graph.values():
        for successor in successors:
            degrees[successor] += 1
    return degrees

def kahn_sort(graph: Optional[Graph]) -> Ordering:
    '''Return the nodes of the specified 'graph' ordered such that every node
    precedes all of its successors.  Nodes are emitted as their in-degree
    drops to zero, taken from a last-in first-out work stack; the relative
    order of nodes that become ready together is unspecified.  Raise
    'CyclicGraphError' naming, in ascending order, every node whose
    in-degree never reached zero if 'graph' contains a cycle.'''
    normalized = normalize(graph)
    degrees    = in_degrees(normalized)

    stack: List[str] = [node for node, degree in degrees.items() if degree == 0]
    queued: Set[str] = set(stack)
    logger.debug('kahn: %d node(s), %d initially free',
                 len(normalized), len(stack))

    ordering: Ordering = []
    while stack:
        node = stack.pop()
        ordering.append(node)
        for successor in normalized[node]:
            degrees[successor] -= 1
            if degrees[successor] == 0 and successor not in queued:
                stack.append(successor)
                queued.add(successor)

    if len(ordering) != len(normalized):
        blocked = sorted(node for node, degree in degrees.items() if degree > 0)
        logger.debug('kahn: %d node(s) blocked by a cycle', len(blocked))
        raise CyclicGraphError(blocked, 'Cycle involving elements: {}'.format(
                                                          ', '.join(blocked)))

    return ordering
