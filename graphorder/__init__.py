# graphorder

from typing import Callable, Dict, Optional

from graphorder.graph   import CyclicGraphError, normalize
from graphorder.kahn    import kahn_sort
from graphorder.reverse import reverse_kahn, reverse_of, reverse_tarjan
from graphorder.tarjan  import tarjan_sort
from graphorder.types   import Graph, Ordering

ALGORITHMS: Dict[str, Callable[[Optional[Graph]], Ordering]] = {
    'kahn':   kahn_sort,
    'tarjan': tarjan_sort,
}

__all__ = (
    'ALGORITHMS',
    'CyclicGraphError',
    'kahn_sort',
    'normalize',
    'reverse_kahn',
    'reverse_of',
    'reverse_tarjan',
    'tarjan_sort',
)
