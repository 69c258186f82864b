"""Label groups: containers that own labels and decide single vs multi select.

Every concrete group kind (plain text labels and the shape-specific ones) is a
``LabelContainer``; a label finds its group by walking up to the nearest node
with that capability.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar

from labelkit.model.node import Node

if TYPE_CHECKING:
    from labelkit.model.label import Label

logger = logging.getLogger(__name__)


class Choice(StrEnum):
    """Selection policy of a label group."""

    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(eq=False)
class LabelContainer(Node):
    """A group of labels sharing one selection policy.

    The group owns the canonical selection: labels change their siblings only
    through ``unselect_all`` and ``select``.
    """

    tag: ClassVar[str] = "labels"

    name: str
    to_name: str = ""  # name of the object tag being annotated
    choice: Choice = Choice.SINGLE

    def __post_init__(self) -> None:
        try:
            self.choice = Choice(self.choice)
        except ValueError:
            raise ValueError(
                f"Invalid choice {self.choice!r} for {self.tag} '{self.name}': "
                "expected 'single' or 'multiple'"
            ) from None

    @property
    def labels(self) -> list[Label]:
        """Labels in insertion order."""
        return list(self.children)  # type: ignore[arg-type]

    @property
    def should_be_unselected(self) -> bool:
        """Whether selecting a label must unselect the others."""
        return self.choice == Choice.SINGLE

    @property
    def selected_labels(self) -> list[Label]:
        """Selected labels in insertion order."""
        return [label for label in self.labels if label.selected]

    def add_label(self, label: Label) -> Label:
        """Take ownership of a label.

        Raises:
            ValueError: If another label in the same document already uses its id.
        """
        root = self.root
        for node in (root, *root.walk()):
            if node is not label and getattr(node, "id", None) == label.id:
                raise ValueError(f"Duplicate label id '{label.id}' in {self.tag} '{self.name}'")
        return self.add_child(label)

    def add_labels(self, labels: Iterable[Label]) -> list[Label]:
        """Take ownership of several labels, keeping their order."""
        return [self.add_label(label) for label in labels]

    def find_label(self, value: str) -> Label | None:
        """Get the first label whose resolved (or configured) value matches."""
        for label in self.labels:
            if (label.resolved_value or label.value) == value:
                return label
        return None

    def unselect_all(self) -> None:
        """Unselect every label in the group."""
        for label in self.labels:
            label.set_selected(False)

    def select(self, label_id: str) -> None:
        """Select one label of this group.

        Args:
            label_id: Id of a label owned by this group.

        Raises:
            KeyError: If the group doesn't own a label with that id.
        """
        for label in self.labels:
            if label.id == label_id:
                label.set_selected(True)
                return
        raise KeyError(f"Label '{label_id}' not found in {self.tag} '{self.name}'")

    def update_values(self, task_data: Mapping[str, Any] | None) -> None:
        """Re-evaluate every label value against new task data."""
        for label in self.labels:
            label.update_value(task_data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, choice={self.choice.value!r})"


@dataclass(eq=False, repr=False)
class Labels(LabelContainer):
    """Labels for text spans."""

    tag: ClassVar[str] = "labels"


@dataclass(eq=False, repr=False)
class EllipseLabels(LabelContainer):
    """Labels that draw ellipses on images."""

    tag: ClassVar[str] = "ellipselabels"


@dataclass(eq=False, repr=False)
class RectangleLabels(LabelContainer):
    """Labels that draw rectangles on images."""

    tag: ClassVar[str] = "rectanglelabels"


@dataclass(eq=False, repr=False)
class PolygonLabels(LabelContainer):
    """Labels that draw polygons on images."""

    tag: ClassVar[str] = "polygonlabels"


@dataclass(eq=False, repr=False)
class KeyPointLabels(LabelContainer):
    """Labels that place key points on images."""

    tag: ClassVar[str] = "keypointlabels"


@dataclass(eq=False, repr=False)
class BrushLabels(LabelContainer):
    """Labels that paint brush masks on images."""

    tag: ClassVar[str] = "brushlabels"


@dataclass(eq=False, repr=False)
class HyperTextLabels(LabelContainer):
    """Labels for spans of rich (HTML) text."""

    tag: ClassVar[str] = "hypertextlabels"


LABEL_CONTAINER_KINDS: tuple[type[LabelContainer], ...] = (
    Labels,
    EllipseLabels,
    RectangleLabels,
    PolygonLabels,
    KeyPointLabels,
    BrushLabels,
    HyperTextLabels,
)
