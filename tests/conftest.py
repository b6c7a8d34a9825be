"""Shared pytest fixtures for acf-blocks tests."""

from pathlib import Path

import pytest

from acf_blocks.core.builder import Builder
from acf_blocks.core.config import BuilderOptions
from acf_blocks.core.module import Module
from acf_blocks.host.memory import InMemoryHost


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def host() -> InMemoryHost:
    """Return a host with the custom fields plugin active."""
    return InMemoryHost()


@pytest.fixture
def builder(host: InMemoryHost) -> Builder:
    """Return a builder with default options."""
    return Builder(host)


@pytest.fixture
def open_builder(host: InMemoryHost) -> Builder:
    """Return a builder that leaves the host's default blocks available."""
    return Builder(host, BuilderOptions(restrict_block_categories=False))


@pytest.fixture
def hero(builder: Builder) -> Module:
    """Return an empty "Hero Banner" module."""
    return builder.add_module("Hero Banner", "layout")
