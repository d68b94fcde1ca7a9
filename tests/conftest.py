"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from pipedit import catalog
from pipedit.catalog import StepCatalog
from pipedit.cli import cli


@pytest.fixture(autouse=True)
def clear_catalog_cache(monkeypatch):
    """Clear the cached step catalog before each test to prevent pollution.

    The catalog in pipedit.catalog.core persists across tests, and
    $PIPEDIT_STEPS from the developer's shell would change which steps are
    known.
    """
    monkeypatch.delenv("PIPEDIT_STEPS", raising=False)
    catalog.reset()
    yield
    catalog.reset()


@pytest.fixture
def test_data():
    """Provide path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def metadata_path(test_data):
    """Provide path to the step metadata catalog."""
    return test_data / "step_metadata.json"


@pytest.fixture
def steps(metadata_path):
    """Step catalog built from the test metadata."""
    return StepCatalog.from_data(json.loads(metadata_path.read_text()))


@pytest.fixture
def pipeline_path(test_data):
    """Provide path to a pipeline exercising every stage shape."""
    return test_data / "pipeline.json"


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["decode", "pipeline.json"])
        result = invoke(["encode"], input_data=tree_json)
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke
