"""Tests for pubver.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from pubver.core.config import (
    DEFAULT_REGISTRY,
    RegistryConfig,
    normalize_registry_url,
    read_npmrc_registry,
    resolve_registry_config,
)


class TestRegistryConfig:
    def test_defaults(self) -> None:
        config = RegistryConfig()
        assert config.registry_url == "https://registry.npmjs.org"
        assert config.token is None

    def test_package_url(self) -> None:
        config = RegistryConfig(registry_url="https://npm.example.com")
        assert config.package_url("core-ui") == "https://npm.example.com/core-ui"
        assert config.package_url("@acme/core-ui") == "https://npm.example.com/@acme/core-ui"

    def test_frozen(self) -> None:
        config = RegistryConfig()
        with pytest.raises(AttributeError):
            config.token = "x"  # type: ignore[misc]


class TestNormalizeRegistryUrl:
    def test_protocol_relative(self) -> None:
        assert normalize_registry_url("//npm.example.com/") == "https://npm.example.com"

    def test_trailing_slash(self) -> None:
        assert normalize_registry_url("https://npm.example.com/") == "https://npm.example.com"

    def test_untouched(self) -> None:
        assert normalize_registry_url("http://localhost:4873") == "http://localhost:4873"


class TestReadNpmrcRegistry:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert read_npmrc_registry(tmp_path) is None

    def test_reads_registry_line(self, tmp_path: Path) -> None:
        (tmp_path / ".npmrc").write_text(
            "\n  always-auth=true\n  registry=https://npm.example.com/\n", encoding="utf-8"
        )
        assert read_npmrc_registry(tmp_path) == "https://npm.example.com/"

    def test_last_registry_line_wins(self, tmp_path: Path) -> None:
        (tmp_path / ".npmrc").write_text(
            "registry=https://one.example.com\nregistry=https://two.example.com\n", encoding="utf-8"
        )
        assert read_npmrc_registry(tmp_path) == "https://two.example.com"

    def test_scoped_registry_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / ".npmrc").write_text("@acme:registry=https://acme.example.com\n", encoding="utf-8")
        assert read_npmrc_registry(tmp_path) is None


class TestResolveRegistryConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        config = resolve_registry_config(environ={}, project_dir=tmp_path)
        assert config == RegistryConfig(registry_url=DEFAULT_REGISTRY, token=None)

    def test_env_token_wins_over_option(self, tmp_path: Path) -> None:
        config = resolve_registry_config(
            environ={"NPM_TOKEN": "from-env"}, project_dir=tmp_path, token="from-flag"
        )
        assert config.token == "from-env"

    def test_option_token(self, tmp_path: Path) -> None:
        config = resolve_registry_config(environ={}, project_dir=tmp_path, token="from-flag")
        assert config.token == "from-flag"

    def test_env_registry_wins_over_npmrc(self, tmp_path: Path) -> None:
        (tmp_path / ".npmrc").write_text("registry=https://rc.example.com\n", encoding="utf-8")
        config = resolve_registry_config(
            environ={"NPM_REGISTRY": "https://env.example.com/"}, project_dir=tmp_path
        )
        assert config.registry_url == "https://env.example.com"

    def test_npmrc_registry(self, tmp_path: Path) -> None:
        (tmp_path / ".npmrc").write_text("registry=//rc.example.com/\n", encoding="utf-8")
        config = resolve_registry_config(environ={}, project_dir=tmp_path)
        assert config.registry_url == "https://rc.example.com"

    def test_option_registry_wins(self, tmp_path: Path) -> None:
        config = resolve_registry_config(
            environ={"NPM_REGISTRY": "https://env.example.com"},
            project_dir=tmp_path,
            registry="https://flag.example.com",
        )
        assert config.registry_url == "https://flag.example.com"


def test_npmrc_value_containing_registry_is_kept_whole(tmp_path: Path) -> None:
    (tmp_path / ".npmrc").write_text(
        "registry=https://proxy.example.com/?upstream=registry=npmjs\n", encoding="utf-8"
    )
    assert read_npmrc_registry(tmp_path) == "https://proxy.example.com/?upstream=registry=npmjs"
