# graphorder.graph

import logging
from typing import Iterable, List, Optional

from graphorder.types import Graph, NormalizedGraph

logger = logging.getLogger(__name__)

class CyclicGraphError(RuntimeError):
    def __init__(self, cycle: Iterable[str], message: str) -> None:
        self.cycle: List[str] = list(cycle)
        super().__init__(message)

def normalize(graph: Optional[Graph]) -> NormalizedGraph:
    '''Return a copy of the specified 'graph' in which every node that
    appears as a successor also appears as a key.  Successors that are not
    keys of 'graph' are given an empty successor list.  A 'None' graph is
    treated as empty.'''
    normalized: NormalizedGraph = {}
    if graph is None:
        return normalized

    for node, successors in graph.items():
        normalized[node] = list(successors)
        for successor in successors:
            if successor not in graph and successor not in normalized:
                normalized[successor] = []

    added = len(normalized) - len(graph)
    if added:
        logger.debug('normalized graph with %d implicit leaf node(s)', added)
    return normalized
