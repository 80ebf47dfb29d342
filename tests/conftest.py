"""Shared fixtures for pipelint tests."""

import json

import pytest


@pytest.fixture
def node_spec():
    """Spec for the notebook component: the file is required, the runtime image is not."""
    return {
        "op": "execute-notebook-node",
        "label": "Notebook",
        "app_data": {
            "properties": {
                "current_parameters": {
                    "filename": "",
                    "runtime_image": "",
                    "dependencies": [],
                    "include_subdirectories": False,
                },
                "parameters": [
                    {"id": "filename"},
                    {"id": "runtime_image"},
                    {"id": "dependencies"},
                    {"id": "include_subdirectories"},
                ],
                "uihints": {
                    "parameter_info": [
                        {
                            "parameter_ref": "elyra_filename",
                            "control": "custom",
                            "custom_control_id": "StringControl",
                            "label": {"default": "File"},
                            "data": {"format": "file", "required": True},
                        },
                        {
                            "parameter_ref": "elyra_runtime_image",
                            "control": "custom",
                            "custom_control_id": "EnumControl",
                            "label": {"default": "Runtime Image"},
                            "data": {"items": []},
                        },
                    ],
                    "group_info": [
                        {
                            "type": "panels",
                            "group_info": [
                                {
                                    "id": "elyra_filename",
                                    "type": "controls",
                                    "parameter_refs": ["elyra_filename"],
                                },
                            ],
                        },
                    ],
                },
            },
        },
    }


def make_node(node_id, links=(), node_type="execution_node", op=None, label=None, parameters=None):
    """Build a raw node mapping with one input port holding `links`."""
    node = {
        "id": node_id,
        "type": node_type,
        "app_data": {"ui_data": {"label": label or node_id}},
    }
    if op is not None:
        node["op"] = op
    if parameters is not None:
        node["app_data"]["component_parameters"] = parameters
    if links:
        node["inputs"] = [{
            "links": [{"id": link_id, "node_id_ref": ref} for link_id, ref in links]
        }]
    return node


def make_document(*pipelines):
    """Serialize pipelines (lists of node mappings) into a document string."""
    return json.dumps({
        "pipelines": [{"id": f"pipeline-{i}", "nodes": nodes} for i, nodes in enumerate(pipelines)]
    })


@pytest.fixture
def node_factory():
    return make_node


@pytest.fixture
def document_factory():
    return make_document
