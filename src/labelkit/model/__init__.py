"""Label model: Label, label groups, Region, Document, Task, Annotation."""

from labelkit.model.document import Annotation, Document, Task, View
from labelkit.model.label import (
    BackgroundState,
    Label,
    LabelAttrs,
    LabelContainerNotFoundError,
)
from labelkit.model.labels import (
    LABEL_CONTAINER_KINDS,
    BrushLabels,
    Choice,
    EllipseLabels,
    HyperTextLabels,
    KeyPointLabels,
    LabelContainer,
    Labels,
    PolygonLabels,
    RectangleLabels,
)
from labelkit.model.node import Node
from labelkit.model.region import Region

__all__ = [
    "LABEL_CONTAINER_KINDS",
    "Annotation",
    "BackgroundState",
    "BrushLabels",
    "Choice",
    "Document",
    "EllipseLabels",
    "HyperTextLabels",
    "KeyPointLabels",
    "Label",
    "LabelAttrs",
    "LabelContainer",
    "LabelContainerNotFoundError",
    "Labels",
    "Node",
    "PolygonLabels",
    "RectangleLabels",
    "Region",
    "Task",
    "View",
]
