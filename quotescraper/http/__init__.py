from .base import Request, Response
from .clients import fetch_async
from .fetcher import ProxyFetcher
from .policies import ProxyRotation

__all__ = ["fetch_async", "ProxyFetcher", "ProxyRotation", "Request", "Response"]
