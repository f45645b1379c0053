"""Shared fixtures for processor code generation tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from processor_codegen.codegen import GenerationCoordinator, GeneratorConfig


def make_document(
    entries: list[dict[str, Any]] | None = None,
    name: str = "OnvoPay",
    processor_type: str = "PayIn",
    **extra: Any,
) -> dict[str, Any]:
    """Processor document with one data entry per ``{"name", "requestBody"}`` dict."""
    document: dict[str, Any] = {"PaymentProcessorName": name, "type": processor_type}
    if entries is not None:
        document["data"] = [{"api": entry} for entry in entries]
    document.update(extra)
    return document


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Output root that does not exist yet."""
    return tmp_path / "generated"


@pytest.fixture
def config(output_root: Path) -> GeneratorConfig:
    return GeneratorConfig(output_root=str(output_root))


@pytest.fixture
def coordinator(config: GeneratorConfig) -> GenerationCoordinator:
    return GenerationCoordinator(config)


@pytest.fixture
def run(coordinator: GenerationCoordinator):
    """Run generation for a decoded document."""

    def _run(document: dict[str, Any]):
        return coordinator.generate(json.dumps(document))

    return _run


@pytest.fixture
def onvopay_document() -> dict[str, Any]:
    return make_document(
        [{"name": "Create Customer", "requestBody": {"name": "x", "amount": 5}}]
    )
