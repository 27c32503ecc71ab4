"""Tests for the session entry point."""

from unittest.mock import patch

import pytest
import structlog

from catalog_sync import main as main_module
from catalog_sync.api_client import CatalogAPIClient
from catalog_sync.config import Settings
from catalog_sync.controller import ERROR_PLACEHOLDER, CatalogSyncController
from catalog_sync.exceptions import FetchError
from catalog_sync.logging_config import configure_logging

from tests.conftest import PRODUCTS_URL


class TestBuildController:
    """Tests for building a controller from settings."""

    def test_build_from_settings(self) -> None:
        """The controller uses the configured endpoint, timeout, and slots."""
        config = Settings(
            _env_file=None,
            products_url=PRODUCTS_URL,
            slot_count=4,
            fetch_timeout=3.0,
        )

        controller = main_module.build_controller(config)

        assert isinstance(controller.api, CatalogAPIClient)
        assert controller.api.url == PRODUCTS_URL
        assert controller.api.timeout == 3.0
        assert controller.panel.slots.capacity == 4
        assert controller.catalog == []


class TestRunSession:
    """Tests for running a session."""

    @pytest.mark.asyncio
    async def test_success_closes_client(self, controller, mock_api_client, make_products):
        """A loaded session returns True and closes the client."""
        mock_api_client.fetch_products.return_value = make_products(2)

        assert await main_module.run_session(controller) is True

        mock_api_client.close.assert_awaited_once()
        assert len(controller.catalog) == 2

    @pytest.mark.asyncio
    async def test_failure_closes_client(self, controller, mock_api_client, panel):
        """A failed session returns False and still closes the client."""
        mock_api_client.fetch_products.side_effect = FetchError(PRODUCTS_URL, "down")

        assert await main_module.run_session(controller) is False

        mock_api_client.close.assert_awaited_once()
        assert panel.selectable_list.options == [ERROR_PLACEHOLDER]


class TestMain:
    """Tests for the console entry point."""

    @pytest.mark.parametrize(("products", "exit_code"), [(True, 0), (False, 1)])
    def test_exit_code(self, panel, mock_api_client, make_products, products, exit_code) -> None:
        """The exit code reflects whether the catalog loaded."""
        if products:
            mock_api_client.fetch_products.return_value = make_products(1)
        else:
            mock_api_client.fetch_products.side_effect = FetchError(PRODUCTS_URL, "down")
        controller = CatalogSyncController(panel=panel, api_client=mock_api_client)

        with (
            patch.object(main_module, "configure_logging") as mock_configure,
            patch.object(main_module, "build_controller", return_value=controller),
        ):
            assert main_module.main() == exit_code

        mock_configure.assert_called_once()


class TestConfigureLogging:
    """Tests for logging configuration."""

    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        yield
        structlog.reset_defaults()

    @pytest.mark.parametrize("json_output", [True, False])
    def test_configures_structlog(self, json_output) -> None:
        """Logging can be configured with either renderer."""
        configure_logging("debug", json_output=json_output)

        assert structlog.is_configured()
        processors = structlog.get_config()["processors"]
        renderer = processors[-1]
        if json_output:
            assert isinstance(renderer, structlog.processors.JSONRenderer)
        else:
            assert isinstance(renderer, structlog.dev.ConsoleRenderer)
