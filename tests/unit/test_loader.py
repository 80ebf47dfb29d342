"""Tests for tolerant document loading."""

import json

import pytest

from pipelint.loader import LoadOutcome, load, load_data, load_pipeline
from pipelint.models import NodeType, Pipeline


class TestLoad:
    """Test load()."""

    @pytest.mark.parametrize("raw, outcome", [
        ("bad json", LoadOutcome.INVALID_SYNTAX),
        ("", LoadOutcome.INVALID_SYNTAX),
        (None, LoadOutcome.INVALID_SYNTAX),
        (b"\xff\xfe{", LoadOutcome.INVALID_SYNTAX),
        ("[" * 100000, LoadOutcome.INVALID_SYNTAX),
        ("[]", LoadOutcome.MISSING_PIPELINES),
        ("{}", LoadOutcome.MISSING_PIPELINES),
        ('{"pipelines": null}', LoadOutcome.MISSING_PIPELINES),
        ('{"pipelines": [{"nodes": [{"type": "execution_node"}]}]}', LoadOutcome.INVALID_SHAPE),
        ('{"pipelines": [{"nodes": [{"id": "n", "inputs": [{"links": [{"id": "l"}]}]}]}]}',
         LoadOutcome.INVALID_SHAPE),
    ])
    def test_unreadable_input(self, raw, outcome):
        result = load(raw)

        assert result.outcome == outcome
        assert result.document is None
        assert not result.ok

    def test_valid_document(self):
        raw = json.dumps({
            "id": "doc",
            "version": "3.0",
            "primary_pipeline": "p1",
            "pipelines": [
                {
                    "id": "p1",
                    "nodes": [
                        {
                            "id": "node-1",
                            "type": "execution_node",
                            "op": "execute-notebook-node",
                            "app_data": {
                                "ui_data": {"label": "Node 1"},
                                "component_parameters": {"filename": "a.ipynb"},
                            },
                            "inputs": [{"id": "in", "links": [{"id": "l", "node_id_ref": "node-0"}]}],
                        },
                    ],
                },
            ],
        })

        result = load(raw)

        assert result.ok
        assert result.outcome == LoadOutcome.OK
        node = result.document.pipelines[0].nodes[0]
        assert node.label == "Node 1"
        assert node.app_data.component_parameters == {"filename": "a.ipynb"}
        assert node.inputs[0].links[0].node_id_ref == "node-0"
        assert result.document.total_nodes == 1

    def test_unknown_node_type_normalized(self):
        result = load_data({"pipelines": [{"nodes": [{"id": "n", "type": "model_node"}]}]})

        assert result.ok
        assert result.document.pipelines[0].nodes[0].type == NodeType.OTHER

    def test_missing_type_defaults_to_other(self):
        result = load_data({"pipelines": [{"nodes": [{"id": "n"}]}]})

        assert result.document.pipelines[0].nodes[0].type == NodeType.OTHER


class TestLoadPipeline:
    """Test load_pipeline()."""

    def test_passes_models_through(self):
        pipeline = Pipeline(nodes=[])
        assert load_pipeline(pipeline) is pipeline

    def test_parses_mapping(self):
        pipeline = load_pipeline({"nodes": [{"id": "n", "type": "super_node"}]})
        assert pipeline.nodes[0].type == NodeType.SUPER_NODE

    @pytest.mark.parametrize("data", [None, [], "x", {"nodes": [{}]}])
    def test_rejects_malformed(self, data):
        assert load_pipeline(data) is None
