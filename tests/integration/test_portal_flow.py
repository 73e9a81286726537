"""
Integration tests for the portal flow over the real httpx transport.
"""

import json
from datetime import date

import httpx
import pytest

from service_portal.app.adapters.gateway_client import GatewayClientAccessor
from service_portal.app.portal import DevPortal
from service_portal.app.state import ApiList, PortalState
from shared.config import PortalConfig
from shared.test_helpers import TestDataFactory


class PortalApi:
    """Minimal in-memory portal REST API served through httpx.MockTransport."""

    def __init__(self):
        self.subscribed = []
        self.requests = []
        self.catalog_status = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.method, request.url.path))
        path = request.url.path

        if path == "/catalog":
            if self.catalog_status != 200:
                return httpx.Response(self.catalog_status, json={"message": "catalog unavailable"})
            return httpx.Response(200, json=TestDataFactory.create_test_catalog())
        if path == "/apikey":
            return httpx.Response(200, json={"value": "live-key"})
        if path == "/subscriptions":
            return httpx.Response(200, json=[{"id": plan_id} for plan_id in self.subscribed])
        if path.startswith("/subscriptions/") and path.endswith("/usage"):
            usage = TestDataFactory.create_test_usage(start_date=request.url.params["start"])
            return httpx.Response(200, json=usage)
        if path.startswith("/subscriptions/"):
            plan_id = path.rsplit("/", 1)[-1]
            if request.method == "PUT" and plan_id not in self.subscribed:
                self.subscribed.append(plan_id)
            if request.method == "DELETE" and plan_id in self.subscribed:
                self.subscribed.remove(plan_id)
            return httpx.Response(204)
        if path.startswith("/marketplace-subscriptions/"):
            return httpx.Response(200, json=json.loads(request.content))
        return httpx.Response(404, json={"message": "not found"})

    def count(self, method: str, path: str) -> int:
        return self.requests.count((method, path))


class TestPortalFlow:
    """End-to-end portal flows."""

    @pytest.fixture
    def api(self):
        """In-memory portal API."""
        return PortalApi()

    @pytest.fixture
    def accessor(self, api):
        """Gateway accessor backed by the in-memory API."""
        config = PortalConfig(gateway_url="https://portal.example.com", api_token="jwt")
        return GatewayClientAccessor(config, transport=httpx.MockTransport(api))

    @pytest.fixture
    def portal(self, accessor):
        """Portal with gateway and generic APIs listed."""
        state = PortalState(api_list=ApiList(
            api_gateway=TestDataFactory.create_test_gateway_apis(),
            generic=TestDataFactory.create_test_generic_apis(),
        ))
        return DevPortal(accessor, state=state)

    @pytest.mark.asyncio
    async def test_sign_in_subscribe_and_review_usage(self, portal, api, accessor):
        """A user loads their data, subscribes, checks usage and unsubscribes."""
        await portal.update_all_user_data()
        assert portal.state.api_key == "live-key"
        assert portal.state.subscriptions == []

        selected = await portal.get_api("FIRST", select_it=True)
        assert portal.state.api is selected
        assert selected["usagePlan"]["id"] == "plan-basic"

        await portal.subscribe("plan-basic")
        assert portal.get_subscribed_usage_plan("plan-basic") == {"id": "plan-basic"}

        response = await portal.fetch_usage("plan-basic")
        series = portal.map_usage_by_date(response.data, "used")
        first_of_month = date.today().replace(day=1).isoformat()
        assert series[0] == [first_of_month, 7]

        await portal.unsubscribe("plan-basic")
        assert portal.get_subscribed_usage_plan("plan-basic") is None
        assert api.count("GET", "/catalog") == 1
        await accessor.aclose()

    @pytest.mark.asyncio
    async def test_catalog_outage_degrades_to_empty(self, portal, api, accessor):
        """A catalog error status leaves an empty catalog and other data intact."""
        api.catalog_status = 503

        catalog, subscriptions, api_key = await portal.update_all_user_data()

        assert catalog == []
        assert api_key == "live-key"
        assert await portal.get_api("1") == {"id": 1, "name": "Another Uploaded Spec"}
        await accessor.aclose()

    @pytest.mark.asyncio
    async def test_marketplace_confirmation(self, portal, api, accessor):
        """Marketplace confirmation posts the token for the plan."""
        response = await portal.confirm_marketplace_subscription("plan-premium", "mp-token")

        assert response.data == {"token": "mp-token"}
        assert api.count("PUT", "/marketplace-subscriptions/plan-premium") == 1
        await accessor.aclose()
