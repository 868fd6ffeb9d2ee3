"""
Boruvka MST experiments on random graphs
Each experiment is checked against NetworkX and, optionally, against the threaded scan
"""

import json
import math
import os

from boruvka_implementation import BoruvkaMST, create_random_graph, networkx_mst_weight
from mst_visualization import visualize, visualize_rounds

GRAPH_CONFIGS = [
    {"num_nodes": 5, "edge_probability": 0.5, "seed": 42},
    {"num_nodes": 6, "edge_probability": 0.4, "seed": 100},
    {"num_nodes": 7, "edge_probability": 0.6, "seed": 200},
    {"num_nodes": 6, "edge_probability": 0.7, "seed": 300},
    {"num_nodes": 10, "edge_probability": 0.8, "seed": 400},
    {"num_nodes": 20, "edge_probability": 0.3, "seed": 500},
    {"num_nodes": 12, "edge_probability": 0.15, "seed": 600, "connected": False},
]


def run_experiment(
    num_nodes, edges, experiment_num, workers=1, output_dir="mst_visualizations", draw=True
):
    """Run the Boruvka builder on a single graph configuration"""
    print(f"\n{'=' * 70}")
    print(f"Experiment {experiment_num}: {num_nodes} nodes, {len(edges)} edges")
    print("=" * 70)

    result = BoruvkaMST(num_nodes, edges).run(verbose=True)

    # The threaded scan must commit exactly the same edges in the same order
    parallel_match = True
    if workers > 1:
        parallel = BoruvkaMST(num_nodes, edges, workers=workers).run()
        parallel_match = parallel.trace == result.trace
        print(f"Threaded scan ({workers} workers) matches: {parallel_match}")

    nx_weight = networkx_mst_weight(num_nodes, edges)
    expected_edges = num_nodes - len(result.components)
    is_correct = (
        math.isclose(result.total_weight, nx_weight)
        and len(result) == expected_edges
        and parallel_match
    )

    print(f"\nMST Weight: {result.total_weight}")
    print(f"MST Edges Found: {len(result)}/{num_nodes - 1} for a spanning tree")
    print(f"Components: {len(result.components)}")
    print(f"Rounds: {result.rounds}")
    print(f"NetworkX MST Weight: {nx_weight:g}")
    print(f"Status: {'✓ CORRECT' if is_correct else '✗ INCORRECT'}")

    if draw:
        os.makedirs(output_dir, exist_ok=True)
        visualize(
            num_nodes,
            edges,
            result,
            save_path=f"{output_dir}/boruvka_mst_exp{experiment_num}.png",
        )
        visualize_rounds(
            num_nodes, edges, result, output_dir=f"{output_dir}/exp{experiment_num}_rounds"
        )

    summary = result.to_dict()
    summary.update(
        {
            "experiment": experiment_num,
            "num_edges_input": len(edges),
            "networkx_weight": nx_weight,
            "is_correct": is_correct,
            "edges_found": len(result),
            "edges_expected": expected_edges,
        }
    )
    return summary


def run_all(configs=GRAPH_CONFIGS, workers=1, output_dir="mst_visualizations", draw=True):
    all_results = []

    for i, config in enumerate(configs, 1):
        num_nodes, edges = create_random_graph(
            num_nodes=config["num_nodes"],
            edge_probability=config["edge_probability"],
            seed=config["seed"],
            connected=config.get("connected", True),
        )
        result = run_experiment(num_nodes, edges, i, workers, output_dir, draw)
        all_results.append(result)

    return all_results


def print_summary(all_results):
    print("\n" + "=" * 70)
    print(" " * 25 + "SUMMARY")
    print("=" * 70)
    print(
        f"{'Exp':<5} {'Nodes':<7} {'Edges':<7} {'MST Wt':<9} {'Found':<10} {'Rounds':<8} {'Status':<10}"
    )
    print("-" * 70)

    for result in all_results:
        status = "✓ PASS" if result["is_correct"] else "✗ FAIL"
        found_str = f"{result['edges_found']}/{result['edges_expected']}"
        print(
            f"{result['experiment']:<5} {result['num_vertices']:<7} {result['num_edges_input']:<7} "
            f"{result['total_weight']:<9} {found_str:<10} {result['rounds']:<8} {status:<10}"
        )


def main():
    """Main function - Loop through multiple graph configurations"""
    import argparse

    parser = argparse.ArgumentParser(description="Run Boruvka MST experiments")
    parser.add_argument(
        "--workers", type=int, default=4, help="Threads for the scan comparison (default: 4)"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="mst_visualizations",
        help="Directory for images (default: mst_visualizations)",
    )
    parser.add_argument(
        "--results", type=str, default="boruvka_experiments.json", help="Results file"
    )
    parser.add_argument("--no-plot", action="store_true", help="Skip images")
    args = parser.parse_args()

    print("=" * 70)
    print(" " * 12 + "Boruvka MST Algorithm - Multiple Experiments")
    print("=" * 70)

    all_results = run_all(
        workers=args.workers, output_dir=args.output_dir, draw=not args.no_plot
    )
    print_summary(all_results)

    with open(args.results, "w") as f:
        json.dump(all_results, f, indent=2)

    print("\n" + "=" * 70)
    print(f"All results saved to: {args.results}")
    if not args.no_plot:
        print(f"Visualizations saved in: {args.output_dir}")
    print("=" * 70)


if __name__ == "__main__":
    main()
