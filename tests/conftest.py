"""
Pytest configuration and fixtures for safeargs tests.
"""

import json

import pytest

from safeargs.codegen.core.model import (
    Action,
    Argument,
    Destination,
    Id,
    NavigationGraph,
)
from safeargs.codegen.core.types import ArgumentType, TypeTag

APP_ID = "com.app"


def arg(name, tag=TypeTag.INT, default=None, is_array=False, class_name=""):
    """Shorthand for building arguments in tests."""
    return Argument(name, ArgumentType(tag, is_array, class_name), default)


def action(name, destination=None, args=(), package=APP_ID):
    target = Id(package, destination) if destination else None
    return Action(Id(package, name), target, tuple(args))


@pytest.fixture
def app_id():
    return APP_ID


@pytest.fixture
def main_destination():
    """Destination with one required-only, one mixed and one argument-less action."""
    return Destination(
        name="com.example.MainFragment",
        id=Id(APP_ID, "main"),
        actions=(
            action("next", "dest2", [arg("a")]),
            action(
                "previous",
                "dest1",
                [arg("a"), arg("b", TypeTag.STRING, default="x")],
            ),
            action("reload"),
        ),
    )


@pytest.fixture
def sample_graph(main_destination):
    return NavigationGraph(
        (
            main_destination,
            Destination(
                name=".SettingsFragment",
                id=Id(APP_ID, "settings"),
                actions=(action("done", "main"),),
                nested=(
                    Destination(
                        id=Id(APP_ID, "about"),
                        actions=(action("back", "settings"),),
                    ),
                ),
            ),
            Destination(name=".EmptyFragment", id=Id(APP_ID, "empty")),
        )
    )


@pytest.fixture
def graph_json():
    """JSON form of a small graph, as a Python dict."""
    return {
        "destinations": [
            {
                "name": ".MainFragment",
                "id": {"package": APP_ID, "name": "main"},
                "actions": [
                    {
                        "id": {"package": APP_ID, "name": "next"},
                        "destination": {"package": APP_ID, "name": "details"},
                        "arguments": [
                            {"name": "itemId", "type": "integer"},
                            {"name": "title", "type": "string", "default": "untitled"},
                            {"name": "visible", "type": "boolean", "default": True},
                            {"name": "tags", "type": "string[]", "default": None},
                        ],
                    }
                ],
            },
            {"name": ".DetailsFragment", "id": {"package": APP_ID, "name": "details"}},
        ]
    }


@pytest.fixture
def graph_file(tmp_path, graph_json):
    path = tmp_path / "nav_graph.json"
    path.write_text(json.dumps(graph_json), encoding="utf-8")
    return path
