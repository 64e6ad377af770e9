# tests.test_kahn

from unittest import TestCase

from graphorder.graph import CyclicGraphError
from graphorder.kahn  import in_degrees, kahn_sort
from tests.graphs     import (CHAIN, EMPTY, FOREST, PARTIAL_CYCLE, PURE_CYCLE,
                              SINGLETON, add_cycle, generate_dag,
                              is_valid_order, seeded_random)

class InDegreesTest(TestCase):
    def test_empty(self):
        assert(in_degrees({}) == {})

    def test_counts_each_edge(self):
        degrees = in_degrees({'a': ['b', 'b', 'c'], 'b': ['c'], 'c': []})
        assert(degrees == {'a': 0, 'b': 2, 'c': 2})

class KahnSortTest(TestCase):
    def test_empty(self):
        assert(kahn_sort(EMPTY) == [])

    def test_none(self):
        assert(kahn_sort(None) == [])

    def test_singleton(self):
        assert(kahn_sort(SINGLETON) == ['A'])

    def test_two_node_chain(self):
        assert(kahn_sort(CHAIN) == ['Child', 'Parent'])

    def test_shared_leaf(self):
        assert(kahn_sort({'A': ['B', 'C'], 'B': [], 'C': ['B']}) == \
                                                               ['A', 'C', 'B'])

    def test_forest(self):
        ordering = kahn_sort(FOREST)
        assert(is_valid_order(FOREST, ordering))
        assert(ordering in (['2', '0', '4', '1', '3', '5', '6', '7'],
                            ['0', '4', '1', '3', '2', '5', '6', '7']))

    def test_disconnected_node(self):
        graph = dict(FOREST, **{'2': [], '8': []})
        ordering = kahn_sort(graph)
        assert(is_valid_order(graph, ordering))
        assert('8' in ordering)

    def test_implicit_leaf(self):
        assert(kahn_sort({'A': ['B']}) == ['A', 'B'])
        assert(kahn_sort({'A': ['B']}) == kahn_sort({'A': ['B'], 'B': []}))

    def test_multi_edges(self):
        assert(kahn_sort({'A': ['B', 'B'], 'B': []}) == ['A', 'B'])

    def test_random_dags(self):
        rng = seeded_random()
        for _ in range(20):
            graph = generate_dag(rng.randrange(1, 60), rng)
            assert(is_valid_order(graph, kahn_sort(graph)))

    def test_input_unchanged(self):
        graph = {'A': ['B']}
        kahn_sort(graph)
        assert(graph == {'A': ['B']})

class KahnCycleTest(TestCase):
    def test_self_loop(self):
        with self.assertRaises(CyclicGraphError) as cm:
            kahn_sort({'A': ['A']})
        assert(cm.exception.cycle == ['A'])

    def test_pure_cycle(self):
        with self.assertRaises(CyclicGraphError) as cm:
            kahn_sort(PURE_CYCLE)
        assert(cm.exception.cycle == ['0', '1', '2', '3', '4'])

    def test_partial_cycle(self):
        with self.assertRaises(CyclicGraphError) as cm:
            kahn_sort(PARTIAL_CYCLE)
        assert(cm.exception.cycle == ['5', '6', '7'])
        assert(str(cm.exception) == 'Cycle involving elements: 5, 6, 7')

    def test_nodes_downstream_of_cycle_blocked(self):
        with self.assertRaises(CyclicGraphError) as cm:
            kahn_sort({'a': ['b'], 'b': ['a', 'c'], 'c': ['d'], 'e': ['a']})
        assert(cm.exception.cycle == ['a', 'b', 'c', 'd'])

    def test_random_cycles(self):
        rng = seeded_random()
        for _ in range(20):
            graph = generate_dag(rng.randrange(1, 60), rng)
            cycle = add_cycle(graph, rng)
            with self.assertRaises(CyclicGraphError) as cm:
                kahn_sort(graph)
            reported = cm.exception.cycle
            assert(reported == sorted(reported))
            assert(set(cycle) <= set(reported))
