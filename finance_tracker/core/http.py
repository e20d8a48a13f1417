import httpx

from finance_tracker.settings.bridge import BridgeSettings


def new_http_client(settings: BridgeSettings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.api_url,
        timeout=settings.timeout,
    )
