"""
Round-based Boruvka Algorithm Implementation for MST
Each round picks the cheapest outgoing edge of every component and merges along it
"""

import queue
import random
import threading
import time
from collections import namedtuple

import networkx as nx

from disjoint_set import DisjointSetForest

# position is display metadata only, never read by the builder
Vertex = namedtuple("Vertex", ["label", "position"], defaults=[None])
Edge = namedtuple("Edge", ["u", "v", "weight"])
TraceStep = namedtuple("TraceStep", ["round", "edge"])


class MSTResult:
    def __init__(self, num_vertices):
        self.num_vertices = num_vertices
        self.edges = set()
        self.trace = []
        self.rounds = 0
        self.components = []
        self.timed_out = False

    def __len__(self):
        return len(self.edges)

    def add(self, round_num, edge):
        """Commit an edge to the tree and record it in the trace"""
        self.edges.add(edge)
        self.trace.append(TraceStep(round_num, edge))

    @property
    def total_weight(self):
        return sum(edge.weight for edge in self.edges)

    @property
    def is_spanning(self):
        return len(self.edges) == max(self.num_vertices - 1, 0)

    def round_edges(self, round_num):
        """Edges committed in a given round, in commit order"""
        return [step.edge for step in self.trace if step.round == round_num]

    def to_dict(self, vertices=None):
        """JSON-friendly summary, using vertex labels when vertices are given"""

        def name(i):
            return vertices[i].label if vertices else i

        return {
            "num_vertices": self.num_vertices,
            "rounds": self.rounds,
            "mst_edges": [
                (name(step.edge.u), name(step.edge.v), step.edge.weight)
                for step in self.trace
            ],
            "trace_rounds": [step.round for step in self.trace],
            "total_weight": self.total_weight,
            "num_edges": len(self.edges),
            "is_spanning": self.is_spanning,
            "components": [[name(v) for v in comp] for comp in self.components],
            "timed_out": self.timed_out,
        }


def index_vertices(vertices):
    """Map each vertex label to its stable index, built once up front"""
    index = {}
    for i, vertex in enumerate(vertices):
        if vertex.label in index:
            raise ValueError(f"Duplicate vertex label: {vertex.label!r}")
        index[vertex.label] = i
    return index


class BoruvkaMST:
    def __init__(self, vertices, edges, workers=1):
        """
        Initialize the builder
        vertices: list of Vertex records, or the number of vertices
        edges: list of Edge (or (u, v, weight) tuples) over vertex indices
        workers: number of threads used for the candidate scan of each round
        """
        if isinstance(vertices, int):
            self.num_vertices = vertices
            self.vertices = None
        else:
            self.vertices = list(vertices)
            self.num_vertices = len(self.vertices)

        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")

        self.edges = [Edge(*edge) for edge in edges]
        self.workers = workers

    def run(self, timeout=None, verbose=False):
        """Run rounds until the tree spans the graph or no merge is possible"""
        n = self.num_vertices
        forest = DisjointSetForest(n)
        result = MSTResult(n)

        if verbose:
            print("Starting Boruvka Algorithm...")
            print(f"Number of vertices: {n}")
            print(f"Number of edges: {len(self.edges)}")

        start_time = time.time()

        while len(result) < n - 1:
            if timeout is not None and time.time() - start_time >= timeout:
                if verbose:
                    print(f"Timeout after {timeout} seconds - collecting results")
                result.timed_out = True
                break

            result.rounds += 1
            if self.workers > 1 and len(self.edges) > 1:
                candidates = self.parallel_scan(forest)
            else:
                candidates = self.scan(forest, self.edges, forest.find)

            merges = self.commit(forest, candidates, result)

            if verbose:
                print(
                    f"Round {result.rounds}: {merges} merges, "
                    f"{forest.count} components remaining"
                )

            if merges == 0:
                # Disconnected input: the remaining components have no crossing edges
                if verbose:
                    print("No crossing edges left - graph is disconnected")
                break

        result.components = forest.components()

        if verbose:
            elapsed = time.time() - start_time
            print(f"Algorithm completed in {elapsed:.4f} seconds")
            print(f"Found {len(result)} MST edges in {result.rounds} rounds")

        return result

    def scan(self, forest, edges, locate):
        """
        Find the cheapest crossing edge of every component
        Returns {representative: edge}; on equal weights the earlier edge is kept
        """
        best = {}
        for edge in edges:
            set1 = locate(edge.u)
            set2 = locate(edge.v)

            if set1 != set2:
                if set1 not in best or edge.weight < best[set1].weight:
                    best[set1] = edge
                if set2 not in best or edge.weight < best[set2].weight:
                    best[set2] = edge

        return best

    def parallel_scan(self, forest):
        """Scan contiguous chunks of the edge list on worker threads, then reduce"""
        num_chunks = min(self.workers, len(self.edges))
        chunk_size = -(-len(self.edges) // num_chunks)
        chunks = [
            self.edges[i : i + chunk_size]
            for i in range(0, len(self.edges), chunk_size)
        ]

        partials = queue.Queue()

        def worker(chunk_index, chunk):
            # Read-only walk; the forest is only mutated in the commit phase
            try:
                partials.put((chunk_index, self.scan(forest, chunk, forest.root), None))
            except Exception as exc:
                partials.put((chunk_index, None, exc))

        threads = [
            threading.Thread(target=worker, args=(i, chunk), daemon=True)
            for i, chunk in enumerate(chunks)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        collected = sorted(
            (partials.get() for _ in threads), key=lambda item: item[0]
        )

        # Reduce in input order so earlier chunks win ties
        best = {}
        for _, partial, error in collected:
            if error is not None:
                raise error
            for root, edge in partial.items():
                if root not in best or edge.weight < best[root].weight:
                    best[root] = edge

        return best

    def commit(self, forest, candidates, result):
        """Merge along each component's candidate in component index order"""
        merges = 0
        for root in sorted(candidates):
            edge = candidates[root]
            if forest.union(edge.u, edge.v):
                result.add(result.rounds, edge)
                merges += 1
        return merges


def create_random_graph(num_nodes=8, edge_probability=0.4, seed=42, connected=True):
    """Create a random graph with random integer weights"""
    rng = random.Random(seed)

    # Generate random graph using Erdos-Renyi model
    G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    # Ensure the graph is connected
    attempts = 0
    while connected and num_nodes > 0 and not nx.is_connected(G) and attempts < 100:
        G = nx.erdos_renyi_graph(
            num_nodes, edge_probability, seed=rng.randint(0, 10000)
        )
        attempts += 1

    if connected and num_nodes > 0 and not nx.is_connected(G):
        # Force connectivity by linking consecutive components
        components = [sorted(c) for c in nx.connected_components(G)]
        for i in range(len(components) - 1):
            G.add_edge(components[i][0], components[i + 1][0])

    edges = [Edge(u, v, rng.randint(1, 10)) for u, v in G.edges()]
    return num_nodes, edges


def networkx_mst_weight(num_nodes, edges):
    """Reference MST (or spanning forest) weight computed by NetworkX"""
    G = nx.MultiGraph()
    G.add_nodes_from(range(num_nodes))
    for u, v, w in edges:
        G.add_edge(u, v, weight=w)

    mst = nx.minimum_spanning_tree(G, weight="weight")
    return mst.size(weight="weight")
