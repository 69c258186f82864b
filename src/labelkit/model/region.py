"""Region: an annotated span or area that labels are assigned to."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from labelkit.model.labels import LabelContainer

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Region:
    """A target of annotation, such as a text span or an image rectangle.

    The region keeps one list of label values per label group (keyed by the
    group name). The list is rewritten from the group's selection every time a
    label is toggled while this region is highlighted.
    """

    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    geometry: dict[str, Any] = field(default_factory=dict)  # start/end, x/y/width/height...
    states: dict[str, list[str]] = field(default_factory=dict)  # group name → label values

    def update_single_state(self, group: LabelContainer) -> None:
        """Reconcile the stored labels with the group's current selection.

        Args:
            group: Label group whose selection changed.
        """
        values = [label.resolved_value for label in group.selected_labels]
        self.states[group.name] = values
        logger.debug("Region %s labels for %s: %s", self.id, group.name, values)

    def labels_for(self, group_name: str) -> list[str]:
        """Label values assigned from one group (empty if none)."""
        return list(self.states.get(group_name, []))

    @property
    def has_labels(self) -> bool:
        """Whether any group has assigned at least one label."""
        return any(self.states.values())
