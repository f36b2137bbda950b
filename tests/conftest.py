"""Shared fixtures for Birdnest tests."""

from typing import Any

import pytest
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.birdnest.const import DOMAIN
from custom_components.birdnest.household import Household
from custom_components.birdnest.store import BirdnestStore

# pylint: disable=invalid-name
pytest_plugins = "pytest_homeassistant_custom_component"
# pylint: enable=invalid-name


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> Any:
    """Enable custom integrations in tests."""
    # pylint: disable=unused-argument
    yield


@pytest.fixture
async def store(hass: HomeAssistant) -> BirdnestStore:
    """Return a loaded store backed by the mocked storage."""
    birdnest_store = BirdnestStore(hass)
    await birdnest_store.async_load()
    return birdnest_store


@pytest.fixture
def household(store: BirdnestStore) -> Household:  # pylint: disable=redefined-outer-name
    """Return all components wired to the test store."""
    return Household(store)


@pytest.fixture
def mock_config_entry() -> MockConfigEntry:
    """Return a mock config entry."""
    return MockConfigEntry(
        domain=DOMAIN,
        title="Birdnest",
        data={},
        entry_id="test_entry_id",
        unique_id=DOMAIN,
    )


@pytest.fixture
async def setup_integration(
    hass: HomeAssistant,
    mock_config_entry: MockConfigEntry,  # pylint: disable=redefined-outer-name
) -> Household:
    """Set up the integration and return its household."""
    mock_config_entry.add_to_hass(hass)
    assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
    await hass.async_block_till_done()
    return hass.data[DOMAIN][mock_config_entry.entry_id]
