"""Tests for edge-list files, graph directories and the command-line checks."""

import json
import os

import pytest

from boruvka_implementation import BoruvkaMST, Edge, Vertex, create_random_graph
from check_mst import check_mst
from create_simple_test import create_layout_test, create_simple_test
from graph_files import (
    create_graph_files,
    load_graph_metadata,
    read_edge_list,
    visualize_graph,
    write_edge_list,
)


class TestReadEdgeList:
    """Parsing plain-text edge lists."""

    def test_labels_indexed_by_first_appearance(self, tmp_path):
        path = tmp_path / "edges.txt"
        path.write_text("B C 2\nA B 1\n\nC  A\t5\n")

        vertices, edges, skipped = read_edge_list(path)

        assert [v.label for v in vertices] == ["B", "C", "A"]
        assert edges == [Edge(0, 1, 2), Edge(2, 0, 1), Edge(1, 2, 5)]
        assert skipped == 0

    def test_malformed_lines_are_skipped(self, tmp_path):
        path = tmp_path / "edges.txt"
        path.write_text("A B 1\nA B\nA B C D\nA B heavy\nB C 2\n")

        vertices, edges, skipped = read_edge_list(path)

        assert len(edges) == 2
        assert skipped == 3

    def test_unknown_labels_skipped_with_fixed_vertices(self, tmp_path):
        path = tmp_path / "edges.txt"
        path.write_text("A B 1\nA Z 4\nB C 2\n")
        known = [Vertex("A", (0, 0)), Vertex("B", (1, 0)), Vertex("C", (1, 1))]

        vertices, edges, skipped = read_edge_list(path, known)

        assert vertices == known
        assert edges == [Edge(0, 1, 1), Edge(1, 2, 2)]
        assert skipped == 1

    def test_write_then_read(self, tmp_path, abcd_graph):
        vertices, edges = abcd_graph
        path = write_edge_list(tmp_path / "edges.txt", vertices, edges)

        assert (tmp_path / "edges.txt").read_text().splitlines()[0] == "A B 1"
        _, loaded, _ = read_edge_list(path, vertices)
        assert loaded == edges


class TestGraphDirectory:
    """Graph directories with metadata."""

    def test_create_and_load(self, tmp_path, capsys):
        n, edges = create_random_graph(6, 0.5, seed=1)
        graph_dir = create_graph_files(n, edges, str(tmp_path / "g"), draw=False)

        vertices, loaded = load_graph_metadata(graph_dir)

        assert [v.label for v in vertices] == [str(i) for i in range(6)]
        assert loaded == edges
        assert os.path.exists(os.path.join(graph_dir, "edges.txt"))
        assert "Creating graph files for 6 nodes" in capsys.readouterr().out

    def test_positions_survive(self, tmp_path):
        graph_dir = create_layout_test(str(tmp_path / "layout"))
        vertices, edges = load_graph_metadata(graph_dir)

        assert vertices[0] == Vertex("A", (50, 50))
        assert BoruvkaMST(vertices, edges).run().total_weight == 22

    def test_input_graph_image(self, tmp_path):
        graph_dir = create_graph_files(
            3, [Edge(0, 1, 1), Edge(1, 2, 2)], str(tmp_path / "img")
        )
        assert os.path.exists(os.path.join(graph_dir, "input_graph.png"))

    def test_input_graph_image_at_vertex_positions(self, tmp_path, capsys):
        vertices = [Vertex("A", (0, 0)), Vertex("B", (10, 0)), Vertex("C", (5, 8))]
        edges = [Edge(0, 1, 1), Edge(1, 2, 2), Edge(2, 2, 4)]

        path = visualize_graph(3, edges, str(tmp_path), vertices)

        assert os.path.getsize(path) > 0
        assert "Visualization saved to" in capsys.readouterr().out


class TestCheckMst:
    """End-to-end check of a stored graph."""

    def test_simple_graph(self, tmp_path):
        graph_dir = create_simple_test(str(tmp_path / "simple"))
        results = check_mst(graph_dir, draw=False)

        assert results["total_weight"] == 6
        assert results["is_correct"] is True
        assert results["mst_edges"] == [("A", "B", 1), ("B", "C", 2), ("C", "D", 3)]

        with open(os.path.join(graph_dir, "mst_result.json")) as f:
            saved = json.load(f)
        assert saved["algorithm"] == "Boruvka"
        assert saved["num_edges"] == 3

    def test_edge_list_only_directory(self, tmp_path, capsys):
        graph_dir = tmp_path / "raw"
        graph_dir.mkdir()
        (graph_dir / "edges.txt").write_text("A B 1\nC D 1\nbroken\n")

        results = check_mst(str(graph_dir), workers=2, draw=False)
        out = capsys.readouterr().out

        assert results["is_spanning"] is False
        assert results["components"] == [["A", "B"], ["C", "D"]]
        assert "Skipped 1 malformed lines" in out
        assert "graph is disconnected" in out

    def test_saves_image(self, tmp_path):
        graph_dir = create_simple_test(str(tmp_path / "drawn"))
        check_mst(graph_dir)
        assert os.path.exists(os.path.join(graph_dir, "mst_result.png"))

    def test_float_weights_marked_correct(self, tmp_path):
        edges = [Edge(0, 1, 0.1), Edge(1, 2, 0.2), Edge(2, 3, 0.3), Edge(0, 3, 0.9)]
        graph_dir = create_graph_files(4, edges, str(tmp_path / "floats"), draw=False)

        results = check_mst(graph_dir, draw=False)

        assert results["total_weight"] == pytest.approx(0.6)
        assert results["is_correct"] is True
