# graphorder.types

import enum
from typing import Any, Dict, List, Mapping, Sequence

Graph           = Mapping[str, Sequence[str]]
NormalizedGraph = Dict[str, List[str]]
Ordering        = List[str]

class Mark(enum.Enum):
    '''Depth-first visitation state of a single node.'''
    UNVISITED   = 0
    IN_PROGRESS = 1
    DONE        = 2

Config = Dict[str, Any]
