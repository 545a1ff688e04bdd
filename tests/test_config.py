from pathlib import Path

import pytest

from quotescraper.config import DEFAULT_PROXIES, load_config
from quotescraper.exceptions import ConfigError


def test_defaults_without_file():
    config = load_config(None)
    assert config.proxy.bases == DEFAULT_PROXIES
    assert config.scrape.max_pages == 3
    assert config.scrape.page_delay_s == 0.5
    assert config.view.page_size == 6


def test_yaml_overrides_and_fallbacks(tmp_path):
    path = tmp_path / "quotes.yaml"
    path.write_text(
        "proxy:\n"
        "  bases: ['https://only.test/']\n"
        "  timeout_s: null\n"
        "scrape:\n"
        "  max_pages: 5\n"
        "view:\n"
        "  page_size: 10\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.proxy.bases == ("https://only.test/",)
    assert config.proxy.timeout_s is None
    assert config.scrape.max_pages == 5
    assert config.scrape.page_delay_s == 0.5
    assert config.view.page_size == 10
    assert config.export.output_dir == "."


@pytest.mark.parametrize(
    "body",
    [
        "scrape:\n  max_pages: 0\n",
        "view:\n  page_size: 0\n",
        "scrape:\n  page_delay_s: -1\n",
        "proxy:\n  bases: []\n",
        "scrape:\n  target_url_template: 'https://example.test/'\n",
        "scrape:\n  max_pages: lots\n",
        "- just\n- a list\n",
        "proxy:\n  bases: 'https://only.test/'\n",
        "proxy:\n  - https://only.test/\n",
        "view: 6\n",
    ],
)
def test_invalid_config_raises(tmp_path, body):
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yaml")


def test_example_config_matches_builtin_defaults():
    example = Path(__file__).resolve().parent.parent / "config" / "default.yaml"
    assert load_config(example) == load_config(None)
