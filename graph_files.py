"""
Graph files for the Boruvka MST builder
Plain-text edge lists (one "source destination weight" line per edge)
and a JSON metadata file describing the whole graph
"""

import json
import os

import matplotlib.pyplot as plt
import networkx as nx

from boruvka_implementation import Edge, Vertex, create_random_graph, index_vertices
from mst_visualization import build_graph, draw_edges, draw_vertices, layout


def read_edge_list(path, vertices=None):
    """
    Read an edge list file
    vertices: known Vertex records; when None, labels are indexed by first appearance
    Returns (vertices, edges, skipped) where skipped counts ignored lines
    """
    vertices = list(vertices) if vertices is not None else None
    fixed = vertices is not None
    index = index_vertices(vertices) if fixed else {}
    if not fixed:
        vertices = []

    edges = []
    skipped = 0

    with open(path, "r") as f:
        for line in f:
            parts = line.split()
            if not parts:
                continue
            if len(parts) != 3:
                skipped += 1
                continue

            start, end, weight = parts
            try:
                weight = int(weight)
            except ValueError:
                skipped += 1
                continue

            if fixed:
                if start not in index or end not in index:
                    skipped += 1
                    continue
            else:
                for label in (start, end):
                    if label not in index:
                        index[label] = len(vertices)
                        vertices.append(Vertex(label))

            edges.append(Edge(index[start], index[end], weight))

    return vertices, edges, skipped


def write_edge_list(path, vertices, edges):
    """Write edges as "source destination weight" lines using vertex labels"""
    with open(path, "w") as f:
        for u, v, w in edges:
            f.write(f"{vertices[u].label} {vertices[v].label} {w}\n")
    return path


def create_graph_files(num_nodes, edges, output_dir="graph_data", vertices=None, draw=True):
    """
    Create the edge list and metadata files for a graph
    Format: edges.txt and graph_metadata.json (plus input_graph.png when drawing)
    """
    os.makedirs(output_dir, exist_ok=True)

    if vertices is None:
        vertices = [Vertex(str(i)) for i in range(num_nodes)]

    print(f"Creating graph files for {num_nodes} nodes...")
    print(f"Output directory: {output_dir}")

    edges_file = os.path.join(output_dir, "edges.txt")
    write_edge_list(edges_file, vertices, edges)
    print(f"  Created {edges_file}: {len(edges)} edges")

    metadata = {
        "num_nodes": num_nodes,
        "num_edges": len(edges),
        "vertices": [
            {"label": v.label, "position": list(v.position) if v.position else None}
            for v in vertices
        ],
        "edges": [list(edge) for edge in edges],
    }

    metadata_file = os.path.join(output_dir, "graph_metadata.json")
    with open(metadata_file, "w") as f:
        json.dump(metadata, f, indent=2)

    print(f"  Created {metadata_file}: Graph metadata")

    if draw:
        visualize_graph(num_nodes, edges, output_dir, vertices)

    return output_dir


def load_graph_metadata(graph_dir="graph_data"):
    """Load vertices and edges back from graph_metadata.json"""
    with open(os.path.join(graph_dir, "graph_metadata.json"), "r") as f:
        metadata = json.load(f)

    records = metadata.get("vertices") or [
        {"label": str(i)} for i in range(metadata["num_nodes"])
    ]
    vertices = [
        Vertex(r["label"], tuple(r["position"]) if r.get("position") else None)
        for r in records
    ]
    edges = [Edge(u, v, w) for u, v, w in metadata["edges"]]
    return vertices, edges


def visualize_graph(num_nodes, edges, output_dir, vertices=None):
    """Draw the input graph, at the vertices' own positions when they have them"""
    G = build_graph(num_nodes, edges, vertices)
    pos = layout(G, vertices)

    fig, ax = plt.subplots(figsize=(10, 8))
    ax.set_title("Input Graph for Boruvka MST", fontsize=14, fontweight="bold")
    draw_edges(G, pos, ax, edges, "gray", 2)
    draw_vertices(G, pos, ax, "lightblue")
    ax.axis("off")

    output_file = os.path.join(output_dir, "input_graph.png")
    fig.savefig(output_file, dpi=150, bbox_inches="tight")
    print(f"  Visualization saved to {output_file}")
    plt.close(fig)
    return output_file


def print_graph_summary(num_nodes, edges):
    """Print summary of the graph"""
    G = nx.MultiGraph()
    G.add_nodes_from(range(num_nodes))
    for u, v, w in edges:
        G.add_edge(u, v, weight=w)

    print("\n" + "=" * 70)
    print("Graph Summary")
    print("=" * 70)
    print(f"Number of nodes: {num_nodes}")
    print(f"Number of edges: {len(edges)}")
    print(f"Is connected: {num_nodes > 0 and nx.is_connected(G)}")

    print("\nEdge list (with weights):")
    for u, v, w in sorted(edges):
        print(f"  ({u}, {v}): weight = {w}")

    mst = nx.minimum_spanning_tree(G, weight="weight")
    print(f"\nExpected MST weight (NetworkX): {mst.size(weight='weight'):g}")
    print("=" * 70)


def main():
    """Main function to create graph files"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate graph files for the Boruvka MST builder"
    )
    parser.add_argument(
        "--nodes", type=int, default=8, help="Number of nodes (default: 8)"
    )
    parser.add_argument(
        "--edge-prob", type=float, default=0.5, help="Edge probability (default: 0.5)"
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--disconnected",
        action="store_true",
        help="Keep the random graph as generated, even if disconnected",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="graph_data",
        help="Output directory (default: graph_data)",
    )

    args = parser.parse_args()

    print("=" * 70)
    print("Graph File Generator for Boruvka MST")
    print("=" * 70)

    print("\nGenerating random graph...")
    print(f"  Nodes: {args.nodes}")
    print(f"  Edge probability: {args.edge_prob}")
    print(f"  Random seed: {args.seed}")

    num_nodes, edges = create_random_graph(
        args.nodes, args.edge_prob, args.seed, connected=not args.disconnected
    )

    print_graph_summary(num_nodes, edges)

    print("\n" + "=" * 70)
    create_graph_files(num_nodes, edges, args.output_dir)

    print("\n" + "=" * 70)
    print("Graph files created successfully!")
    print("=" * 70)
    print("\nTo compute the MST:")
    print(f"  python check_mst.py --graph-dir {args.output_dir}")
    print("=" * 70)


if __name__ == "__main__":
    main()
