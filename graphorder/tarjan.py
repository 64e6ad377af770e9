# graphorder.tarjan

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from graphorder.graph import CyclicGraphError, normalize
from graphorder.types import Graph, Mark, Ordering

logger = logging.getLogger(__name__)

def tarjan_sort(graph: Optional[Graph]) -> Ordering:
    '''Return the nodes of the specified 'graph' in reverse depth-first
    postorder, so that every node precedes all of its successors.  Raise
    'CyclicGraphError' naming the single node whose visit was found still in
    progress if 'graph' contains a cycle.  The walk keeps its path on an
    explicit stack, so its depth is not bounded by the interpreter's
    recursion limit.'''
    normalized = normalize(graph)
    marks: Dict[str, Mark] = {node: Mark.UNVISITED for node in normalized}
    result: List[str] = [''] * len(normalized)
    index = len(normalized)

    for root in normalized:
        if marks[root] is Mark.DONE:
            continue

        marks[root] = Mark.IN_PROGRESS
        path: List[Tuple[str, Iterator[str]]] = [(root, iter(normalized[root]))]
        while path:
            node, successors = path[-1]
            for successor in successors:
                mark = marks[successor]
                if mark is Mark.IN_PROGRESS:
                    logger.debug('tarjan: back-edge %s -> %s', node, successor)
                    raise CyclicGraphError([successor],
                                           f'Found cycle at node: {successor}')
                if mark is Mark.UNVISITED:
                    marks[successor] = Mark.IN_PROGRESS
                    path.append((successor, iter(normalized[successor])))
                    break
            else:
                path.pop()
                marks[node] = Mark.DONE
                index -= 1
                result[index] = node

    logger.debug('tarjan: ordered %d node(s)', len(result))
    return result
