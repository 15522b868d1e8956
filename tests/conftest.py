"""Conftest for pytest configuration."""

import pytest
from click.testing import CliRunner

from kn.fake import FakeServing
from kn.models import ObjectMeta, ReleaseType, Service, ServiceSpec, ServiceStatus


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="Run integration tests (requires running serving API)",
    )


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if config.getoption("--integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config layer at an empty directory."""
    monkeypatch.setenv("KN_CONFIG_DIR", str(tmp_path / "kn"))
    for var in ["KN_SERVER", "KN_NAMESPACE", "KN_TOKEN", "KN_TIMEOUT"]:
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "kn"


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def expected_service():
    """Service used by the describe tests."""
    return Service(
        metadata=ObjectMeta(name="foo", namespace="default"),
        spec=ServiceSpec(release=ReleaseType(revisions=["a", "b"], rolloutPercent=10)),
        status=ServiceStatus(
            domain="knative.com", latestReadyRevisionName="some-revision"
        ),
    )


@pytest.fixture
def fake_serving(expected_service):
    """Call-recording backend answering with expected_service."""
    return FakeServing(response=expected_service)
