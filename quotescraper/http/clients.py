from __future__ import annotations

from typing import Any, Mapping

import httpx

from quotescraper.http.base import Request, Response


def _headers(h: Mapping[str, str] | None) -> dict[str, str] | None:
    return dict(h) if h else None


async def fetch_async(client: httpx.AsyncClient, req: Request, default_timeout_s: float | None) -> Response:
    kwargs: dict[str, Any] = {}
    timeout = req.timeout_s if req.timeout_s is not None else default_timeout_s
    if timeout is not None:
        kwargs["timeout"] = timeout
    r = await client.request(
        method=req.method,
        url=req.url,
        headers=_headers(req.headers),
        follow_redirects=True,
        **kwargs,
    )
    return Response(url=str(r.url), status=r.status_code, headers=dict(r.headers), text=r.text)
