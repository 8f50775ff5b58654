"""
Pytest configuration and shared fixtures
Provides common test fixtures for all test modules
"""

import json
import sys
import tempfile
from pathlib import Path

import pytest

# Add backend directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flowsearch.models.components import Connection, FlowComponent, Processor
from flowsearch.services.search.registry import reset_matcher_registry


@pytest.fixture
def csv_connection():
    """Connection from a CSV reader into an archive step"""
    return Connection(
        identifier="c1",
        source=FlowComponent(identifier="n1", name="Ingest-CSV-Reader", comments=None),
        destination=FlowComponent(identifier="n2", name="Archive", comments="writes csv backups")
    )


@pytest.fixture
def sample_processor():
    """Processor with properties and relationships"""
    return Processor(
        identifier="proc-7",
        name="Fetch Orders",
        comments="Pulls orders from SFTP",
        processor_type="FetchSFTP",
        bundle="standard-processors",
        properties={
            "Hostname": "sftp.orders.local",
            "Remote Path": "/outbound/orders",
            "Password": None
        },
        relationships=["success", "comms.failure", "not.found"]
    )


@pytest.fixture
def test_config_dir():
    """
    Create temporary config directory with a complete matcher configuration
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        config_dir = Path(tmpdir)

        matchers = {
            "version": "1.0",
            "component_kinds": {
                "processor": ["basic", "processor_metadata", "property", "relationship"],
                "input_port": ["basic"],
                "output_port": ["basic"],
                "funnel": ["basic"],
                "label": ["basic", "label"],
                "process_group": ["basic"],
                "remote_process_group": ["basic", "target_uri"],
                "connection": ["connectivity"]
            }
        }
        (config_dir / "matchers.json").write_text(json.dumps(matchers))

        yield config_dir


@pytest.fixture(autouse=True)
def clean_registry():
    """Reset the global matcher registry around each test"""
    reset_matcher_registry()
    yield
    reset_matcher_registry()


# Pytest markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "config: Configuration system tests")
