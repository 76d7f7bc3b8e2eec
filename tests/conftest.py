"""Shared fixtures for airdrop_oracle tests."""

from __future__ import annotations

import pytest
from pytest_metadata.plugin import metadata_key

from airdrop_oracle.airdrop.metadata import StaticMetadataResolver
from airdrop_oracle.airdrop.service import AirdropService
from airdrop_oracle.models.config import ContractCoordinates, OracleConfig

from tests.factories import ORACLE_ADDRESS, ORACLE_OBJECT_ID, ORACLE_TYPE
from tests.mocks import MockConnection, MockVerifier

EXPLORER_BASE = "https://explorer.devnet.sui.io"


def sui_explorer_link(kind: str, id: str, label: str | None = None) -> str:
    """Build an HTML anchor to the Sui explorer for the report."""
    url = f"{EXPLORER_BASE}/{kind}/{id}"
    text = label or f"{id[:8]}...{id[-4:]}"
    return f'<a href="{url}" target="_blank">{text}</a>'


# ── Report metadata & explorer links ─────────────────────────────


def pytest_configure(config):
    """Add oracle info to the HTML report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["Destination"] = "Sui (mocked gateway)"
    meta["Oracle Account"] = ORACLE_ADDRESS
    meta["Oracle Object Type"] = ORACLE_TYPE


def pytest_html_results_summary(prefix, summary, postfix):
    """Inject clickable Sui explorer links into the report summary."""
    prefix.append(
        '<div style="margin:8px 0;padding:10px;background:#f8f9fa;border:1px solid #dee2e6;'
        'border-radius:4px;font-family:monospace;font-size:13px;">'
        "<strong>Sui Explorer Links</strong><br/>"
        f'Oracle Account: {sui_explorer_link("addresses", ORACLE_ADDRESS, ORACLE_ADDRESS)}<br/>'
        f'Oracle Object: {sui_explorer_link("objects", ORACLE_OBJECT_ID)}'
        "</div>"
    )


def make_test_config(**overrides) -> OracleConfig:
    """Build an OracleConfig suitable for testing."""
    defaults = dict(
        gateway_endpoint="http://127.0.0.1:5001",
        rpc_timeout=2.0,
        explorer_base_url=EXPLORER_BASE,
        oracle_address=ORACLE_ADDRESS,
        contract=ContractCoordinates(),
        verify_signature=False,
    )
    defaults.update(overrides)
    return OracleConfig(**defaults)


@pytest.fixture
def test_config():
    """Default OracleConfig for tests."""
    return make_test_config()


@pytest.fixture
def mock_connection():
    return MockConnection()


@pytest.fixture
def mock_verifier():
    return MockVerifier()


@pytest.fixture
def service(test_config, mock_connection, mock_verifier):
    """AirdropService wired to a mock gateway connection."""
    return AirdropService(
        config=test_config,
        connection_factory=lambda: mock_connection,
        verifier=mock_verifier,
        metadata=StaticMetadataResolver(test_config.collection_name, test_config.token_uri),
    )
