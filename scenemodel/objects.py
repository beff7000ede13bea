"""Object observations, trajectories and a source that holds them verbatim."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class SceneObject:
    """A single observation of an object.

    ``position`` is (x, y, z); ``orientation`` is a quaternion (w, x, y, z).
    """

    type: str
    position: tuple[float, float, float] | None = None
    orientation: tuple[float, float, float, float] | None = None


@dataclass
class ObjectSet:
    """A set of observations, understood as the trajectory of one object."""

    identifier: str
    objects: list[SceneObject] = field(default_factory=list)


@dataclass
class ObjectInformation:
    """Container for an object's type, instance id and 7D pose.

    The pose holds the position (x, y, z) followed by the orientation as a
    quaternion (w, x, y, z).
    """

    type: str = ""
    instance: str = ""
    pose: tuple[float, ...] = (0.0,) * 7

    def __post_init__(self) -> None:
        self.pose = tuple(float(value) for value in self.pose)
        if len(self.pose) != 7:
            raise ValueError(f"pose must have 7 elements, got {len(self.pose)}")


class ExamplesListSource:
    """A trajectory source that keeps the object sets it is given verbatim."""

    def __init__(self) -> None:
        self.object_sets: list[ObjectSet] = []

    def add_scene_graph_message(self, messages: Iterable[ObjectSet]) -> None:
        """Append every object set in ``messages`` as a trajectory."""
        self.object_sets.extend(messages)