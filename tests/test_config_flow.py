"""Tests for the Birdnest config and options flows."""

# pylint: disable=unused-argument  # Fixtures needed for test setup

from unittest.mock import patch

from homeassistant import config_entries
from homeassistant.core import HomeAssistant
from homeassistant.data_entry_flow import FlowResultType
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.birdnest.const import DOMAIN
from custom_components.birdnest.household import Household


async def test_user_flow_creates_entry(hass: HomeAssistant) -> None:
    result = await hass.config_entries.flow.async_init(
        DOMAIN, context={"source": config_entries.SOURCE_USER}
    )
    assert result.get("type") == FlowResultType.FORM
    assert result.get("step_id") == "user"

    with patch("custom_components.birdnest.async_setup_entry", return_value=True) as mock_setup_entry:
        result = await hass.config_entries.flow.async_configure(result["flow_id"], user_input={})
        await hass.async_block_till_done()

    assert result.get("type") == FlowResultType.CREATE_ENTRY
    assert result.get("title") == "Birdnest"
    assert len(mock_setup_entry.mock_calls) == 1


async def test_second_entry_is_aborted(hass: HomeAssistant, mock_config_entry: MockConfigEntry) -> None:
    mock_config_entry.add_to_hass(hass)
    result = await hass.config_entries.flow.async_init(
        DOMAIN, context={"source": config_entries.SOURCE_USER}
    )
    assert result.get("type") == FlowResultType.ABORT


async def test_options_flow_saves_names(
    hass: HomeAssistant, mock_config_entry: MockConfigEntry, setup_integration: Household
) -> None:
    result = await hass.config_entries.options.async_init(mock_config_entry.entry_id)
    assert result.get("type") == FlowResultType.FORM
    assert result.get("step_id") == "init"

    result = await hass.config_entries.options.async_configure(
        result["flow_id"],
        user_input={"parentA": " Anna ", "parentB": "", "child1": "Maya", "child2": "Izzie"},
    )
    assert result.get("type") == FlowResultType.CREATE_ENTRY
    assert setup_integration.settings.get() == {
        "parentA": "Anna",
        "parentB": "Koen",
        "child1": "Maya",
        "child2": "Izzie",
    }
