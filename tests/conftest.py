"""Shared fixtures for labelkit tests."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from labelkit.config import get_settings
from labelkit.model import Document, Label, LabelContainer, Labels, Task


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop LABELKIT_* variables and the cached settings around every test."""
    for key in list(os.environ):
        if key.startswith("LABELKIT_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def build_document(
    choice: str = "single",
    values: tuple[str, ...] = ("Brand", "Product"),
) -> tuple[Document, LabelContainer, list[Label]]:
    """Document with one Labels group holding a label per value, task loaded."""
    group = Labels(name="type", to_name="txt-1", choice=choice)
    group.add_labels(Label(value=value) for value in values)
    doc = Document(group)
    doc.load_task(Task(data={"text": "Acme launches the Rocket 3000"}))
    return doc, group, group.labels


@pytest.fixture
def single_doc() -> tuple[Document, LabelContainer, list[Label]]:
    """Single-select group with Brand and Product."""
    return build_document("single")


@pytest.fixture
def multi_doc() -> tuple[Document, LabelContainer, list[Label]]:
    """Multi-select group with Brand and Product."""
    return build_document("multiple")


@pytest.fixture
def make_document():
    """Factory for documents with custom choice and label values."""
    return build_document
