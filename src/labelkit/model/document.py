"""Document, Task and Annotation: the host side that labels talk to.

A ``Document`` is the root of the control tree (views, label groups, labels).
It holds the task being annotated and the active annotation, whose highlighted
region receives label changes.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from labelkit.model.label import Label
from labelkit.model.labels import LabelContainer
from labelkit.model.node import Node
from labelkit.model.region import Region

logger = logging.getLogger(__name__)


@dataclass
class Task:
    """A unit of data to annotate."""

    data: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


@dataclass(eq=False)
class Annotation:
    """One annotator's work on a task: its regions and which one is highlighted."""

    editable: bool = True
    regions: list[Region] = field(default_factory=list)
    highlighted_node: Region | None = None

    def create_region(self, **geometry: Any) -> Region:
        """Add a new region to the annotation."""
        region = Region(geometry=geometry)
        self.regions.append(region)
        return region

    def highlight(self, region: Region) -> None:
        """Make a region the target of label changes.

        Raises:
            ValueError: If the region doesn't belong to this annotation.
        """
        if region not in self.regions:
            raise ValueError(f"Region {region.id} is not part of this annotation")
        self.highlighted_node = region

    def unhighlight(self) -> None:
        self.highlighted_node = None

    def delete_region(self, region: Region) -> None:
        """Remove a region, clearing the highlight if it pointed there."""
        self.regions.remove(region)
        if self.highlighted_node is region:
            self.highlighted_node = None


class View(Node):
    """Layout node grouping other nodes."""

    def __init__(self, *children: Node) -> None:
        for child in children:
            self.add_child(child)

    def __repr__(self) -> str:
        return f"View(children={len(self.children)})"


class Document(View):
    """Root of the control tree.

    Example:
        >>> doc = Document(Labels(name="type", to_name="txt-1"))
        >>> group = doc.label_containers()[0]
        >>> group.add_labels([Label(value="Brand"), Label(value="Product")])
        >>> doc.load_task(Task(data={"text": "..."}))
    """

    def __init__(self, *children: Node, annotation: Annotation | None = None) -> None:
        super().__init__(*children)
        self.annotation = annotation if annotation is not None else Annotation()
        self.task: Task | None = None

    def labels(self) -> Iterator[Label]:
        """All labels in the tree, in document order."""
        for node in self.walk():
            if isinstance(node, Label):
                yield node

    def label_containers(self) -> list[LabelContainer]:
        """All label groups in the tree, in document order."""
        return [node for node in self.walk() if isinstance(node, LabelContainer)]

    def find_container(self, name: str) -> LabelContainer | None:
        """Get a label group by name."""
        for container in self.label_containers():
            if container.name == name:
                return container
        return None

    def load_task(self, task: Task) -> None:
        """Make ``task`` current and re-evaluate every label value against its data."""
        self.task = task
        count = 0
        for label in self.labels():
            label.update_value(task.data)
            count += 1
        logger.info("Loaded task %s: %d labels evaluated", task.id, count)

    def __repr__(self) -> str:
        return f"Document(task={self.task.id if self.task else None!r})"
