from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from quotescraper.exceptions import ConfigError

DEFAULT_PROXIES: tuple[str, ...] = (
    "https://api.allorigins.win/raw?url=",
    "https://cors-anywhere.herokuapp.com/",
    "https://thingproxy.freeboard.io/fetch/",
)


@dataclass(frozen=True)
class ProxyConfig:
    bases: tuple[str, ...] = DEFAULT_PROXIES
    # None leaves the transport default in place
    timeout_s: float | None = 20.0


@dataclass(frozen=True)
class ScrapeConfig:
    target_url_template: str = "https://quotes.toscrape.com/page/{page}/"
    max_pages: int = 3
    page_delay_s: float = 0.5


@dataclass(frozen=True)
class ViewConfig:
    page_size: int = 6


@dataclass(frozen=True)
class ExportConfig:
    output_dir: str = "."


@dataclass(frozen=True)
class AppConfig:
    proxy: ProxyConfig = field(default_factory=ProxyConfig)
    scrape: ScrapeConfig = field(default_factory=ScrapeConfig)
    view: ViewConfig = field(default_factory=ViewConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    def validate(self) -> None:
        if not self.proxy.bases:
            raise ConfigError("proxy.bases must list at least one proxy endpoint.")
        if self.proxy.timeout_s is not None and self.proxy.timeout_s <= 0:
            raise ConfigError("proxy.timeout_s must be positive.")
        if "{page}" not in self.scrape.target_url_template:
            raise ConfigError("scrape.target_url_template must contain a {page} placeholder.")
        if self.scrape.max_pages < 1:
            raise ConfigError("scrape.max_pages must be at least 1.")
        if self.scrape.page_delay_s < 0:
            raise ConfigError("scrape.page_delay_s cannot be negative.")
        if self.view.page_size < 1:
            raise ConfigError("view.page_size must be at least 1.")


def _section(raw: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{name}' in {path} must be a mapping.")
    return section


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load an AppConfig from YAML; missing keys fall back to defaults."""
    if path is None:
        config = AppConfig()
        config.validate()
        return config

    p = Path(path)
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(f"Could not read config file {p}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {p} must contain a mapping at the top level.")

    proxy_raw = _section(raw, "proxy", p)
    scrape_raw = _section(raw, "scrape", p)
    view_raw = _section(raw, "view", p)
    export_raw = _section(raw, "export", p)

    bases = proxy_raw.get("bases", list(DEFAULT_PROXIES))
    if not isinstance(bases, list):
        raise ConfigError(f"proxy.bases in {p} must be a list of URLs.")

    try:
        timeout = proxy_raw.get("timeout_s", ProxyConfig.timeout_s)
        config = AppConfig(
            proxy=ProxyConfig(
                bases=tuple(str(b) for b in bases),
                timeout_s=float(timeout) if timeout is not None else None,
            ),
            scrape=ScrapeConfig(
                target_url_template=str(
                    scrape_raw.get("target_url_template", ScrapeConfig.target_url_template)
                ),
                max_pages=int(scrape_raw.get("max_pages", ScrapeConfig.max_pages)),
                page_delay_s=float(scrape_raw.get("page_delay_s", ScrapeConfig.page_delay_s)),
            ),
            view=ViewConfig(page_size=int(view_raw.get("page_size", ViewConfig.page_size))),
            export=ExportConfig(output_dir=str(export_raw.get("output_dir", ExportConfig.output_dir))),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in {p}: {e}") from e

    config.validate()
    return config
