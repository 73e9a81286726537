"""
Unit tests for the DevPortal facade.
"""

import pytest

from service_portal.app.adapters.gateway_client import GatewayClientAccessor
from service_portal.app.portal import DevPortal
from service_portal.app.state import PortalState
from shared.config import PortalConfig
from shared.errors import ExternalServiceError
from shared.test_helpers import FakeGateway, TestDataFactory


class TestDevPortal:
    """Test cases for DevPortal."""

    @pytest.fixture
    def gateway(self):
        """Create in-memory gateway."""
        gateway = FakeGateway(api_key="abc123")
        gateway.subscribed = ["plan-basic"]
        return gateway

    @pytest.fixture
    def portal(self, gateway):
        """Create DevPortal over the fake gateway."""
        return DevPortal(gateway)

    @pytest.mark.asyncio
    async def test_update_all_user_data_loads_everything(self, portal):
        """Catalog, subscriptions and key are fetched together."""
        catalog, subscriptions, api_key = await portal.update_all_user_data()

        assert catalog == TestDataFactory.create_test_catalog()
        assert subscriptions == [{"id": "plan-basic"}]
        assert api_key == "abc123"
        assert portal.state.catalog == catalog
        assert portal.state.subscriptions == subscriptions
        assert portal.state.api_key == "abc123"

    @pytest.mark.asyncio
    async def test_update_all_user_data_busts_cache_by_default(self, portal, gateway):
        """Each call re-fetches all three resources."""
        await portal.update_all_user_data()
        await portal.update_all_user_data()

        assert gateway.calls_to("GET", "/catalog") == 2
        assert gateway.calls_to("GET", "/subscriptions") == 2
        assert gateway.calls_to("GET", "/apikey") == 2

    @pytest.mark.asyncio
    async def test_update_all_user_data_can_prefer_cache(self, portal, gateway):
        """Passing bust_cache=False reuses loaded data."""
        await portal.update_all_user_data()
        await portal.update_all_user_data(bust_cache=False)

        assert gateway.calls_to("GET", "/catalog") == 1
        assert gateway.calls_to("GET", "/apikey") == 1

    @pytest.mark.asyncio
    async def test_catalog_failure_does_not_fail_update(self, portal, gateway):
        """The catalog recovers on its own."""
        gateway.fail("/catalog")

        catalog, subscriptions, api_key = await portal.update_all_user_data()

        assert catalog == []
        assert api_key == "abc123"

    @pytest.mark.asyncio
    async def test_subscription_failure_fails_update(self, portal, gateway):
        """A failing subscriptions fetch fails the joined update."""
        gateway.fail("/subscriptions", 500)

        with pytest.raises(ExternalServiceError):
            await portal.update_all_user_data()

    @pytest.mark.asyncio
    async def test_api_key_failure_fails_update(self, portal, gateway):
        """A failing API key fetch fails the joined update with the transport error."""
        gateway.fail("/apikey", 403)

        with pytest.raises(ExternalServiceError) as exc_info:
            await portal.update_all_user_data()

        assert exc_info.value.status_code == 403
        assert portal.state.api_key is None

    @pytest.mark.asyncio
    async def test_operations_share_state(self, gateway):
        """Every service writes to the state object handed in."""
        state = PortalState()
        portal = DevPortal(gateway, state=state)

        await portal.subscribe("plan-premium")
        await portal.update_api_key()

        assert portal.get_subscribed_usage_plan("plan-premium") == {"id": "plan-premium"}
        assert state.api_key == "abc123"

    @pytest.mark.asyncio
    async def test_usage_flow(self, portal):
        """Fetched usage can be aggregated directly."""
        response = await portal.fetch_usage("plan-basic")

        assert portal.map_usage_by_date(response.data, "used") == [["2020-01-01", 7], ["2020-01-02", 1]]

    def test_confirm_marketplace_without_plan(self, portal, gateway):
        """No plan id means no request."""
        assert portal.confirm_marketplace_subscription(None, "token") is None
        assert gateway.calls == []

    def test_from_config_uses_gateway_accessor(self):
        """from_config wires the httpx-backed gateway accessor."""
        portal = DevPortal.from_config(PortalConfig(gateway_url="https://portal.example.com", log_level="WARNING"))

        assert isinstance(portal.context.client_factory, GatewayClientAccessor)
        assert portal.context.client_factory.config.gateway_url == "https://portal.example.com"
