# graphorder.reverse

from typing import Optional, Sequence

from graphorder.kahn   import kahn_sort
from graphorder.tarjan import tarjan_sort
from graphorder.types  import Graph, Ordering

def reverse_of(ordering: Sequence[str]) -> Ordering:
    '''Return the elements of the specified 'ordering' in reverse order.'''
    return list(reversed(ordering))

def reverse_kahn(graph: Optional[Graph]) -> Ordering:
    return reverse_of(kahn_sort(graph))

def reverse_tarjan(graph: Optional[Graph]) -> Ordering:
    return reverse_of(tarjan_sort(graph))
