"""
Presentation helpers for Boruvka MST results
Step-by-step text replay of the commit trace and matplotlib snapshots
"""

import os
import time

import matplotlib.pyplot as plt
import networkx as nx


def vertex_name(vertices, index):
    return vertices[index].label if vertices else index


def replay_trace(result, vertices=None, delay=0.0):
    """Print each committed edge in commit order, pausing between steps"""
    lines = []
    for i, step in enumerate(result.trace, 1):
        edge = step.edge
        lines.append(
            f"Step {i}: {vertex_name(vertices, edge.u)} - {vertex_name(vertices, edge.v)} "
            f"(Weight: {edge.weight})"
        )
    lines.append(f"Step {len(result.trace) + 1}: No more steps")

    for line in lines:
        print(line)
        if delay:
            time.sleep(delay)

    return lines


def build_graph(num_vertices, edges, vertices=None):
    """NetworkX graph with one node per vertex index and labels attached"""
    G = nx.Graph()
    for i in range(num_vertices):
        G.add_node(i, label=vertex_name(vertices, i))
    for u, v, w in drawable(edges):
        G.add_edge(u, v, weight=w)
    return G


def drawable(edges):
    # Self-loops are never part of a tree and are not drawn
    return [edge for edge in edges if edge[0] != edge[1]]


def layout(G, vertices=None):
    """Use the vertices' own positions when all have one, else a spring layout"""
    if vertices and all(vertex.position is not None for vertex in vertices):
        return {i: vertex.position for i, vertex in enumerate(vertices)}
    return nx.spring_layout(G, seed=42)


def draw_edges(G, pos, ax, edges, color, width):
    edges = drawable(edges)
    if not edges:
        return
    nx.draw_networkx_edges(
        G, pos, edgelist=[(u, v) for u, v, _ in edges], ax=ax, edge_color=color, width=width
    )
    nx.draw_networkx_edge_labels(
        G, pos, {(u, v): w for u, v, w in edges}, ax=ax, font_size=9
    )


def draw_vertices(G, pos, ax, node_color):
    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=node_color, node_size=700)
    nx.draw_networkx_labels(
        G,
        pos,
        nx.get_node_attributes(G, "label"),
        ax=ax,
        font_size=12,
        font_weight="bold",
    )


def visualize(num_vertices, edges, result, vertices=None, save_path="boruvka_mst.png"):
    """Visualize the graph and MST side by side"""
    G = build_graph(num_vertices, edges, vertices)
    pos = layout(G, vertices)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

    # Original graph
    ax1.set_title("Original Graph", fontsize=14, fontweight="bold")
    draw_edges(G, pos, ax1, edges, "black", 1)
    draw_vertices(G, pos, ax1, "lightblue")
    ax1.axis("off")

    # MST
    ax2.set_title(
        f"MST (Boruvka, weight={result.total_weight})", fontsize=14, fontweight="bold"
    )
    draw_edges(G, pos, ax2, [step.edge for step in result.trace], "red", 3)
    draw_vertices(G, pos, ax2, "lightgreen")
    ax2.axis("off")

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    print(f"Visualization saved to {save_path}")
    plt.close(fig)

    return save_path


def visualize_rounds(num_vertices, edges, result, vertices=None, output_dir="mst_rounds"):
    """Save one frame per round: earlier commits in blue, this round's in red"""
    os.makedirs(output_dir, exist_ok=True)

    G = build_graph(num_vertices, edges, vertices)
    pos = layout(G, vertices)

    paths = []
    for round_num in range(1, result.rounds + 1):
        earlier = [step.edge for step in result.trace if step.round < round_num]
        current = result.round_edges(round_num)

        fig, ax = plt.subplots(figsize=(8, 6))
        ax.set_title(f"Round {round_num}", fontsize=14, fontweight="bold")
        nx.draw_networkx_edges(G, pos, ax=ax, edge_color="lightgray", width=1)
        draw_edges(G, pos, ax, earlier, "blue", 2)
        draw_edges(G, pos, ax, current, "red", 3)
        draw_vertices(G, pos, ax, "darkgray")
        ax.axis("off")

        path = os.path.join(output_dir, f"round_{round_num}.png")
        plt.savefig(path, dpi=100, bbox_inches="tight")
        plt.close(fig)
        paths.append(path)

    print(f"Saved {len(paths)} round snapshots to {output_dir}")
    return paths
