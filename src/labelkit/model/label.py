"""Label: a selectable tag inside a label group.

Example markup the attributes come from:

    <Labels name="type" toName="txt-1">
      <Label alias="B" value="Brand" />
      <Label alias="P" value="Product" />
    </Labels>
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from labelkit.colors import color_for
from labelkit.config import get_settings
from labelkit.model.labels import LabelContainer
from labelkit.model.node import Node
from labelkit.template import TemplateError, run_template

if TYPE_CHECKING:
    from labelkit.model.document import Annotation

logger = logging.getLogger(__name__)


class BackgroundState(Enum):
    """Where a label's background color came from."""

    UNSET = "unset"  # still the configured placeholder
    DERIVED = "derived"  # computed from the label value
    EXPLICIT = "explicit"  # set by config or the user


class LabelContainerNotFoundError(Exception):
    """Exception raised when a label is not inside any label group."""

    pass


class LabelAttrs(BaseModel):
    """Markup attributes of a label tag.

    Markup attribute names are lowercase (``showalias``, ``aliasstyle``,
    ``selectedcolor``); both those and the snake_case names are accepted.
    Boolean attributes accept "true"/"false" strings.
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    value: str | None = None
    selected: bool = False
    alias: str | None = None
    hotkey: str | None = None
    show_alias: bool = Field(
        default=False, validation_alias=AliasChoices("show_alias", "showalias")
    )
    alias_style: str | None = Field(
        default=None, validation_alias=AliasChoices("alias_style", "aliasstyle")
    )
    size: str | None = None
    background: str | None = None
    selected_color: str | None = Field(
        default=None, validation_alias=AliasChoices("selected_color", "selectedcolor")
    )


@dataclass(eq=False)
class Label(Node):
    """A single selectable tag.

    ``value`` may be a template; ``resolved_value`` holds what it evaluates to
    for the current task. The background is derived from the value once and
    then kept for the lifetime of the label, unless it was given explicitly.
    """

    value: str | None = None
    selected: bool = False
    alias: str | None = None
    hotkey: str | None = None  # assigned by the host editor when absent
    show_alias: bool = False
    alias_style: str = field(default_factory=lambda: get_settings().alias_style)
    size: str = field(default_factory=lambda: get_settings().size)
    background: str | None = None
    selected_color: str = field(default_factory=lambda: get_settings().selected_color)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    resolved_value: str = field(default="", init=False)
    background_state: BackgroundState = field(default=BackgroundState.UNSET, init=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError(f"Label id is immutable (label {self.id!r})")
        super().__setattr__(name, value)

    def __post_init__(self) -> None:
        if self.background is None:
            self.background = get_settings().label_background
        else:
            self.background_state = BackgroundState.EXPLICIT
        self._update_background_color(self.resolved_value or self.value)

    @classmethod
    def from_attrs(cls, attrs: Mapping[str, Any]) -> Label:
        """Build a label from markup attributes.

        Args:
            attrs: Raw attributes, e.g. ``{"value": "Brand", "showalias": "true"}``.

        Returns:
            New, unattached label.

        Raises:
            pydantic.ValidationError: If an attribute has the wrong type.
        """
        parsed = LabelAttrs.model_validate(dict(attrs))
        return cls(**parsed.model_dump(exclude_none=True))

    # ------------------------------------------------------------------ #
    # Collaborators
    # ------------------------------------------------------------------ #
    @property
    def group(self) -> LabelContainer:
        """Nearest owning label group.

        Raises:
            LabelContainerNotFoundError: If no ancestor is a label group.
        """
        group = self.find_ancestor(LabelContainer)
        if group is None:
            logger.error("Label %s (%r) is not inside a label group", self.id, self.value)
            raise LabelContainerNotFoundError(
                f"Label '{self.value}' ({self.id}) has no enclosing label group"
            )
        return group

    @property
    def annotation(self) -> Annotation | None:
        """Active annotation of the owning document, if any."""
        from labelkit.model.document import Document

        root = self.root
        return root.annotation if isinstance(root, Document) else None

    # ------------------------------------------------------------------ #
    # Selection
    # ------------------------------------------------------------------ #
    def set_selected(self, value: bool) -> None:
        self.selected = value

    def toggle_selected(self) -> None:
        """Toggle this label, respecting the group policy and the highlighted region.

        In a multi-select group the label flips on its own. In a single-select
        group selecting it unselects the others, and toggling the selected one
        leaves nothing selected. If a region is highlighted and this label is
        the only one selected, nothing happens so the region keeps its label.

        Raises:
            LabelContainerNotFoundError: If the label isn't inside a group.
        """
        was_selected = self.selected
        group = self.group

        annotation = self.annotation
        region = annotation.highlighted_node if annotation is not None else None

        if region is not None:
            selected = group.selected_labels
            # Only checked when exactly one label is selected
            if len(selected) == 1 and selected[0].resolved_value == self.resolved_value:
                logger.debug(
                    "Keeping %r on region %s: it is the region's only label",
                    self.resolved_value,
                    region.id,
                )
                return

        if not group.should_be_unselected:
            self.set_selected(not was_selected)
        elif not was_selected:
            group.unselect_all()
            group.select(self.id)
        else:
            group.unselect_all()

        logger.debug(
            "Toggled %r in %s: %s -> %s",
            self.resolved_value or self.value,
            group.name,
            was_selected,
            self.selected,
        )

        if region is not None:
            region.update_single_state(group)

    def on_hot_key(self) -> None:
        self.toggle_selected()

    def on_click(self) -> bool:
        """Handle a click on the label.

        Returns:
            True if the label was toggled, False if the annotation is read-only.
        """
        annotation = self.annotation
        if annotation is not None and not annotation.editable:
            logger.debug("Ignoring click on %r: annotation is read-only", self.value)
            return False
        self.toggle_selected()
        return True

    # ------------------------------------------------------------------ #
    # Value and color
    # ------------------------------------------------------------------ #
    def update_value(self, task_data: Mapping[str, Any] | None) -> None:
        """Evaluate the value template against task data.

        A template that can't be evaluated yields an empty resolved value.

        Args:
            task_data: Data of the task being annotated.
        """
        try:
            self.resolved_value = run_template(self.value, task_data)
        except TemplateError as e:
            logger.debug("Label %s value %r not resolved: %s", self.id, self.value, e)
            self.resolved_value = ""
        self._update_background_color(self.resolved_value)

    def _update_background_color(self, seed: str | None) -> None:
        if self.background_state is BackgroundState.UNSET:
            self.background = color_for(seed)
            self.background_state = BackgroundState.DERIVED

    def set_background(self, color: str) -> None:
        """Set an explicit background; it is never replaced by a derived one."""
        self.background = color
        self.background_state = BackgroundState.EXPLICIT

    def __repr__(self) -> str:
        return f"Label(value={self.value!r}, selected={self.selected}, id={self.id!r})"
