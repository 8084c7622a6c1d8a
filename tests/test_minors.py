"""Tests for minor operations, cleanup and block decomposition."""

from __future__ import annotations

from itertools import combinations

import pytest

from graph_minors import (
    MinorOperation,
    Node,
    UEdge,
    UGraph,
    biconnected_blocks,
    contract_edge,
    delete_edge,
    delete_node,
    is_viable,
    prune,
    reduce_degree,
    remove_isolated_nodes,
    remove_self_loops,
    single_step_minors,
)


def _complete(names: str) -> UGraph:
    return UGraph.from_edges(combinations(names, 2))


def _k33() -> UGraph:
    return UGraph.from_edges((h, u) for h in ["h1", "h2", "h3"] for u in ["u1", "u2", "u3"])


def _cycle(names: str) -> UGraph:
    return UGraph.from_edges((names[i], names[(i + 1) % len(names)]) for i in range(len(names)))


class TestDeletion:
    def test_delete_edge_leaves_source(self) -> None:
        """Edge deletion should return a new graph."""
        graph = _complete("abc")
        minor = delete_edge(graph, UEdge.of("a", "b"))
        assert minor.edge_count == 2
        assert graph.edge_count == 3

    def test_delete_node_cascades(self) -> None:
        """Node deletion should drop incident edges from the copy only."""
        graph = _complete("abcd")
        minor = delete_node(graph, Node("a"))
        assert minor == _complete("bcd")
        assert graph == _complete("abcd")


class TestContraction:
    def test_smaller_endpoint_survives(self) -> None:
        """The smaller endpoint should survive a contraction."""
        minor = contract_edge(UGraph.from_edges([("a", "b"), ("b", "c")]), UEdge.of("a", "b"))
        assert minor is not None
        assert minor.nodes == (Node("a"), Node("c"))
        assert minor.edges == (UEdge.of("a", "c"),)

    def test_parallel_edges_collapse(self) -> None:
        """Contracting a triangle edge should merge the parallel edges."""
        minor = contract_edge(_complete("abc"), UEdge.of("a", "b"))
        assert minor is not None
        assert minor.edges == (UEdge.of("a", "c"),)

    def test_absent_edge(self) -> None:
        """Contracting an absent edge should return None."""
        assert contract_edge(_complete("abc"), UEdge.of("a", "z")) is None

    def test_source_untouched(self) -> None:
        """Contraction should not modify its input."""
        graph = _k33()
        contract_edge(graph, UEdge.of("h1", "u1"))
        assert graph == _k33()

    @pytest.mark.parametrize("edge", _k33().edges)
    def test_k33_contraction(self, edge: UEdge) -> None:
        """Contracting a K3,3 edge should drop one node and one edge net of merges."""
        graph = _k33()
        minor = contract_edge(graph, edge)
        assert minor is not None
        assert minor.node_count == graph.node_count - 1
        assert minor.edge_count <= graph.edge_count
        assert minor.edge_count == 8
        assert not any(e.is_loop() for e in minor.edges)

    def test_contracting_loop_deletes_it(self) -> None:
        """Contracting a self-loop should just delete it."""
        graph = UGraph(nodes=["a", "b"], edges=[("a", "a"), ("a", "b")])
        minor = contract_edge(graph, UEdge.of("a", "a"))
        assert minor is not None
        assert minor.edges == (UEdge.of("a", "b"),)


class TestSingleStepMinors:
    def test_counts_per_operation(self) -> None:
        """K4 should have one minor per edge, node and edge."""
        graph = _complete("abcd")
        ops = [op for op, _, _ in single_step_minors(graph)]
        assert ops.count(MinorOperation.CONTRACT_EDGE) == 6
        assert ops.count(MinorOperation.DELETE_NODE) == 4
        assert ops.count(MinorOperation.DELETE_EDGE) == 6

    def test_deterministic_order(self) -> None:
        """Minor generation order should be reproducible."""
        graph = _complete("abcd")
        first = [(op, arg) for op, arg, _ in single_step_minors(graph)]
        second = [(op, arg) for op, arg, _ in single_step_minors(graph.copy())]
        assert first == second
        assert first[0] == (MinorOperation.CONTRACT_EDGE, UEdge.of("a", "b"))

    def test_operation_filter(self) -> None:
        """Only the requested operations should be applied."""
        graph = _complete("abcd")
        steps = list(single_step_minors(graph, [MinorOperation.DELETE_EDGE]))
        assert len(steps) == 6
        assert all(minor.edge_count == 5 for _, _, minor in steps)

    def test_minors_are_independent(self) -> None:
        """Generated minors should not share state."""
        minors = [minor for _, _, minor in single_step_minors(_complete("abc"))]
        minors[0].add_node(Node("z"))
        assert all(Node("z") not in minor for minor in minors[1:])


class TestCleanup:
    def test_remove_self_loops(self) -> None:
        """Self-loops should be dropped."""
        graph = UGraph(nodes=["a", "b"], edges=[("a", "a"), ("a", "b")])
        assert remove_self_loops(graph).edges == (UEdge.of("a", "b"),)

    def test_remove_isolated_nodes(self) -> None:
        """Nodes without edges should be dropped."""
        graph = _complete("abc")
        graph.add_node(Node("z"))
        assert remove_isolated_nodes(graph) == _complete("abc")

    def test_prune_loop_only_node(self) -> None:
        """A node whose only edge is a loop should be pruned."""
        graph = UGraph(nodes=["a", "b", "c"], edges=[("a", "b"), ("c", "c")])
        assert prune(graph) == UGraph.from_edges([("a", "b")])


class TestReduceDegree:
    def test_cycle_vanishes(self) -> None:
        """A cycle should reduce to nothing."""
        reduced, _ = reduce_degree(_cycle("abcde"))
        assert reduced.node_count == 0
        assert reduced.edge_count == 0

    def test_pendant_removed(self) -> None:
        """A pendant node should be deleted without merges."""
        graph = _complete("abcd")
        graph.add_node(Node("p"))
        graph.add_edge(UEdge.of("a", "p"))
        reduced, merges = reduce_degree(graph)
        assert reduced == _complete("abcd")
        assert merges == []

    def test_subdivision_smoothed(self) -> None:
        """A degree-2 node should be smoothed into its smaller neighbor."""
        graph = _complete("abcde")
        graph.remove_edge(UEdge.of("a", "b"))
        graph.add_node(Node("x"))
        graph.add_edge(UEdge.of("a", "x"))
        graph.add_edge(UEdge.of("x", "b"))
        reduced, merges = reduce_degree(graph)
        assert reduced == _complete("abcde")
        assert merges == [(Node("a"), Node("x"))]

    def test_min_degree_three_untouched(self) -> None:
        """A graph of minimum degree 3 should be left alone."""
        reduced, merges = reduce_degree(_k33())
        assert reduced == _k33()
        assert merges == []

    def test_source_untouched(self) -> None:
        """Reduction should not modify its input."""
        graph = _cycle("abcde")
        reduce_degree(graph)
        assert graph == _cycle("abcde")

    def test_long_subdivision_chain(self) -> None:
        """A long subdivided path should collapse back to one edge."""
        graph = _complete("abcde")
        graph.remove_edge(UEdge.of("a", "b"))
        path = ["a", "p1", "p2", "p3", "p4", "b"]
        for name in path[1:-1]:
            graph.add_node(name)
        for u, v in zip(path, path[1:]):
            graph.add_edge((u, v))
        reduced, merges = reduce_degree(graph)
        assert reduced == _complete("abcde")
        assert len(merges) == 4
        assert {absorbed.name for _, absorbed in merges} == {"p1", "p2", "p3", "p4"}

    def test_pendant_path(self) -> None:
        """A pendant path should be smoothed and then deleted."""
        graph = _complete("abcd")
        for u, v in [("d", "t1"), ("t1", "t2"), ("t2", "t3")]:
            graph.add_node(v)
            graph.add_edge((u, v))
        reduced, merges = reduce_degree(graph)
        assert reduced == _complete("abcd")
        assert merges == [(Node("d"), Node("t1")), (Node("d"), Node("t2"))]


class TestViability:
    def test_thresholds(self) -> None:
        """Viability should follow the K5 and K3,3 size bounds."""
        assert is_viable(_complete("abcde"))
        assert is_viable(_k33())
        assert not is_viable(_complete("abcd"))
        k5_minus_edge = delete_edge(_complete("abcde"), UEdge.of("a", "b"))
        assert not is_viable(k5_minus_edge)


class TestBiconnectedBlocks:
    def test_single_block(self) -> None:
        """K5 should be a single block."""
        blocks = biconnected_blocks(_complete("abcde"))
        assert blocks == [_complete("abcde")]

    def test_bowtie(self) -> None:
        """Two triangles sharing a node should give two blocks."""
        graph = UGraph.from_edges(
            [("a", "b"), ("b", "c"), ("a", "c"), ("c", "d"), ("d", "e"), ("c", "e")]
        )
        blocks = biconnected_blocks(graph)
        assert len(blocks) == 2
        assert {b.canonical_key() for b in blocks} == {
            _complete("abc").canonical_key(),
            _complete("cde").canonical_key(),
        }

    def test_path_gives_bridges(self) -> None:
        """Every bridge should be a block of its own."""
        blocks = biconnected_blocks(UGraph.from_edges([("a", "b"), ("b", "c")]))
        assert sorted(b.edges for b in blocks) == [(UEdge.of("a", "b"),), (UEdge.of("b", "c"),)]

    def test_disconnected_components(self) -> None:
        """Each component should be decomposed separately."""
        graph = UGraph.from_edges(list(combinations("abc", 2)) + list(combinations("xyz", 2)))
        graph.add_node(Node("lonely"))
        blocks = biconnected_blocks(graph)
        assert len(blocks) == 2
        assert all(block.node_count == 3 for block in blocks)

    def test_k5_with_tail(self) -> None:
        """A pendant edge should not join the K5 block."""
        graph = _complete("abcde")
        graph.add_node(Node("f"))
        graph.add_edge(UEdge.of("e", "f"))
        blocks = biconnected_blocks(graph)
        assert _complete("abcde") in blocks
        assert len(blocks) == 2

    def test_edges_partitioned(self) -> None:
        """Blocks should partition the edge set."""
        graph = UGraph.from_edges(
            [("a", "b"), ("b", "c"), ("c", "a"), ("c", "d"), ("d", "e"), ("e", "f"), ("f", "d")]
        )
        blocks = biconnected_blocks(graph)
        all_edges = [edge for block in blocks for edge in block.edges]
        assert sorted(all_edges) == list(graph.edges)
        assert len(blocks) == 3
