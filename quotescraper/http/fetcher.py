from __future__ import annotations

import time

import httpx

from quotescraper.exceptions import FetchExhausted, ProxyFailure
from quotescraper.http.base import Request
from quotescraper.http.clients import fetch_async
from quotescraper.http.policies import ProxyRotation
from quotescraper.logging import get_logger
from quotescraper.monitoring.metrics import record_request

log = get_logger("quotescraper.http.fetcher")


class ProxyFetcher:
    """
    Retrieves one page of markup by walking the proxy rotation in order.

    A failed proxy (transport error or non-2xx status) moves straight on to the
    next one; there is no retry within a proxy and no backoff.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        proxies: ProxyRotation,
        target_url_template: str,
        timeout_s: float | None = None,
    ) -> None:
        self.client = client
        self.proxies = proxies
        self.target_url_template = target_url_template
        self.timeout_s = timeout_s

    def target_url(self, page_number: int) -> str:
        return self.target_url_template.format(page=page_number)

    async def fetch_page(self, page_number: int) -> str:
        target = self.target_url(page_number)
        failures: list[ProxyFailure] = []
        for proxy in self.proxies:
            try:
                html = await self._attempt(proxy, target)
            except ProxyFailure as e:
                failures.append(e)
                log.warning(
                    "proxy failed",
                    extra={"extra_fields": {"proxy": proxy, "page": page_number, "error": str(e)}},
                )
                continue
            log.info(
                "page fetched",
                extra={"extra_fields": {"proxy": proxy, "page": page_number, "bytes": len(html)}},
            )
            return html
        raise FetchExhausted(page_number, failures)

    async def _attempt(self, proxy: str, target: str) -> str:
        url = self.proxies.build_url(proxy, target)
        t0 = time.perf_counter()
        try:
            resp = await fetch_async(self.client, Request(url=url), self.timeout_s)
        except httpx.HTTPError as e:
            record_request(proxy, status=0, result="error", latency=time.perf_counter() - t0)
            raise ProxyFailure(proxy, url, reason=f"{type(e).__name__}:{e}") from e
        latency = time.perf_counter() - t0
        if not resp.ok:
            record_request(proxy, status=resp.status, result="http_error", latency=latency)
            raise ProxyFailure(proxy, url, status=resp.status)
        record_request(proxy, status=resp.status, result="ok", latency=latency)
        return resp.text or ""
