# anchor_nav/io/topology.py
"""Persisted graph topology: adjacency plus start/end, no geometry."""

import uuid
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class TopologyModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    adjacency: dict[uuid.UUID, list[uuid.UUID]] = Field(default_factory=dict)
    start: uuid.UUID | None = None
    end: uuid.UUID | None = None


def dump_topology(graph, *, indent: int | None = None) -> str:
    return graph.to_topology().model_dump_json(indent=indent)


def load_topology(text: str | bytes) -> TopologyModel:
    return TopologyModel.model_validate_json(text)


def save_topology(graph, path: str | Path) -> None:
    Path(path).write_text(dump_topology(graph, indent=2), encoding="utf-8")


def read_topology(path: str | Path) -> TopologyModel:
    return load_topology(Path(path).read_text(encoding="utf-8"))
