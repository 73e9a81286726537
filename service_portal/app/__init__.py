"""
Developer Portal data-access package.

The portal fronts an API gateway's developer REST API. This package keeps
the client-side view of the signed-in user's data:

- Catalog: available APIs, loaded once and reused
- Subscriptions: usage plans the user is subscribed to
- API key: the user's gateway key
- Usage: per-plan usage, aggregated by calendar date

Structure:
- app.state: PortalState, the mutable application state object.
- app.context: PortalContext, bundling state, request cache and transport.
- app.adapters: HTTP transport to the gateway (httpx).
- app.caching: single-flight request cache.
- app.catalog / app.subscriptions / app.account / app.usage / app.marketplace:
  operations grouped by resource.
- app.portal: DevPortal facade wiring everything together.
"""
