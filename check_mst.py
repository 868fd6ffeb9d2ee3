"""
Run the Boruvka MST builder on a graph directory and check it against NetworkX
"""

import json
import math
import os

from boruvka_implementation import BoruvkaMST, networkx_mst_weight
from graph_files import load_graph_metadata, read_edge_list
from mst_visualization import replay_trace, visualize


def check_mst(graph_dir="graph_data", workers=1, timeout=None, delay=0.0, draw=True):
    """Compute the MST of a stored graph, print it and save the results"""
    edges_file = os.path.join(graph_dir, "edges.txt")
    metadata_file = os.path.join(graph_dir, "graph_metadata.json")

    if os.path.exists(metadata_file):
        vertices, edges = load_graph_metadata(graph_dir)
    else:
        vertices, edges, skipped = read_edge_list(edges_file)
        if skipped:
            print(f"Skipped {skipped} malformed lines in {edges_file}")

    result = BoruvkaMST(vertices, edges, workers=workers).run(
        timeout=timeout, verbose=True
    )

    print("\nCommit trace:")
    replay_trace(result, vertices, delay=delay)

    nx_weight = networkx_mst_weight(len(vertices), edges)
    is_correct = math.isclose(result.total_weight, nx_weight)

    print(f"\nTotal MST weight: {result.total_weight}")
    print(f"Number of edges: {len(result)}")
    print(f"Expected edges: {len(vertices) - 1}")
    print(f"NetworkX MST weight: {nx_weight:g}")

    if result.is_spanning:
        print("Graph is connected - MST spans all vertices")
    else:
        print(f"WARNING: graph is disconnected ({len(result.components)} components)")

    print(f"Status: {'✓ CORRECT' if is_correct else '✗ INCORRECT'}")

    results = result.to_dict(vertices)
    results["networkx_weight"] = nx_weight
    results["is_correct"] = is_correct
    results["algorithm"] = "Boruvka"

    output_file = os.path.join(graph_dir, "mst_result.json")
    with open(output_file, "w") as f:
        json.dump(results, f, indent=2)
    print(f"\nResults saved to: {output_file}")

    if draw:
        visualize(
            len(vertices),
            edges,
            result,
            vertices,
            save_path=os.path.join(graph_dir, "mst_result.png"),
        )

    return results


def main():
    """Main function"""
    import argparse

    parser = argparse.ArgumentParser(description="Run Boruvka MST on a graph directory")
    parser.add_argument(
        "--graph-dir",
        type=str,
        default="graph_data",
        help="Graph data directory (default: graph_data)",
    )
    parser.add_argument(
        "--workers", type=int, default=1, help="Scan threads per round (default: 1)"
    )
    parser.add_argument(
        "--timeout", type=float, default=None, help="Deadline in seconds (default: none)"
    )
    parser.add_argument(
        "--delay", type=float, default=0.0, help="Pause between replayed steps"
    )
    parser.add_argument(
        "--no-plot", action="store_true", help="Skip saving the MST image"
    )
    args = parser.parse_args()

    print("=" * 70)
    print("Boruvka MST Check")
    print("=" * 70)
    print(f"Graph directory: {args.graph_dir}")
    print(f"Scan workers: {args.workers}")
    print("=" * 70)

    check_mst(
        args.graph_dir,
        workers=args.workers,
        timeout=args.timeout,
        delay=args.delay,
        draw=not args.no_plot,
    )
    print("=" * 70)


if __name__ == "__main__":
    main()
