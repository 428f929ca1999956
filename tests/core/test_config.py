"""
Tests for options, the default-options factory and the IoC container.
"""

import json
from dataclasses import FrozenInstanceError

import pytest

from multi_context_auth.config import (
    ContextOptions,
    ExtractionOptions,
    coerce_options,
)
from multi_context_auth.contrib.dependency_injector import (
    AuthContextContainer,
    resolve_options,
)
from multi_context_auth.factory import create_default_options, options_from_env
from multi_context_auth.resolver import resolve_auth_context


# -----------------------------------------------------------------------------
# Options
# -----------------------------------------------------------------------------


def test_defaults():
    options = ExtractionOptions()
    assert options.environment_mode == "production"
    assert options.origin_table is None
    assert options.prefer_context is True
    assert options.token_type == "access"
    assert not options.is_development


def test_options_are_frozen():
    with pytest.raises(FrozenInstanceError):
        ExtractionOptions().token_type = "refresh"


def test_from_mapping_snake_and_camel_case():
    table = {"admin": ["https://a.example.com"]}
    options = ExtractionOptions.from_mapping(
        {
            "environmentMode": "development",
            "originTable": table,
            "prefer_context": False,
            "tokenType": "refresh",
        }
    )
    assert options == ExtractionOptions(
        environment_mode="development",
        origin_table=table,
        prefer_context=False,
        token_type="refresh",
    )
    assert options.is_development


def test_from_mapping_ignores_unknown_and_invalid_values():
    options = ExtractionOptions.from_mapping(
        {
            "nodeEnv": "development",
            "origin_table": ["not", "a", "mapping"],
            "prefer_context": "false",
            "token_type": "",
        }
    )
    assert options == ExtractionOptions()


def test_from_mapping_non_mapping():
    assert ContextOptions.from_mapping(None) == ContextOptions()
    assert ContextOptions.from_mapping("development") == ContextOptions()


def test_context_options_ignore_extraction_fields():
    options = ContextOptions.from_mapping({"token_type": "refresh"})
    assert options == ContextOptions()


def test_coerce_options_overrides():
    base = ExtractionOptions(token_type="refresh")
    options = coerce_options(base, ExtractionOptions, prefer_context=False)
    assert options.token_type == "refresh"
    assert options.prefer_context is False
    assert base.prefer_context is True


def test_coerce_options_ignores_none_overrides():
    options = coerce_options(None, ExtractionOptions, token_type=None)
    assert options.token_type == "access"


def test_coerce_context_options_to_extraction_options():
    options = coerce_options(
        ContextOptions(environment_mode="development"), ExtractionOptions
    )
    assert isinstance(options, ExtractionOptions)
    assert options.is_development


def test_context_options_view():
    table = {"vendor": "https://v.example.com"}
    options = ExtractionOptions(environment_mode="development", origin_table=table)
    assert options.context_options() == ContextOptions("development", table)


# -----------------------------------------------------------------------------
# Factory
# -----------------------------------------------------------------------------


def test_options_from_env():
    environ = {
        "AUTH_ENVIRONMENT_MODE": "development",
        "AUTH_PREFER_CONTEXT": "false",
        "AUTH_TOKEN_TYPE": "refresh",
        "AUTH_CONTEXT_ORIGINS": json.dumps({"admin": ["https://a.example.com"]}),
    }
    options = options_from_env(environ)
    assert options.environment_mode == "development"
    assert options.prefer_context is False
    assert options.token_type == "refresh"
    assert options.origin_table == {"admin": ["https://a.example.com"]}


def test_options_from_env_invalid_origins_are_ignored(caplog):
    options = options_from_env({"AUTH_CONTEXT_ORIGINS": "{not json"})
    assert options.origin_table is None
    assert "AUTH_CONTEXT_ORIGINS" in caplog.text


def test_options_from_env_with_scalar_origins_resolve_to_none():
    options = options_from_env({"AUTH_CONTEXT_ORIGINS": json.dumps({"customer": 5})})
    req = {"headers": {"origin": "https://customer.example.com"}, "cookies": {}}
    assert resolve_auth_context(req, options.context_options()) is None


def test_options_from_empty_env():
    assert options_from_env({}) == ExtractionOptions()


def test_create_default_options_reads_environment(monkeypatch):
    monkeypatch.setenv("AUTH_ENVIRONMENT_MODE", "development")
    monkeypatch.setenv("AUTH_PREFER_CONTEXT", "true")
    options = create_default_options()
    assert options.is_development
    assert options.prefer_context is True


# -----------------------------------------------------------------------------
# IoC container
# -----------------------------------------------------------------------------


def test_container_builds_options_from_config():
    container = AuthContextContainer()
    container.config.from_dict(
        {"environment_mode": "development", "token_type": "refresh"}
    )
    options = container.extraction_options()
    assert options.is_development
    assert options.token_type == "refresh"
    assert container.extraction_options() is options


def test_container_without_config_uses_defaults():
    container = AuthContextContainer()
    assert container.extraction_options() == ExtractionOptions()


def test_resolve_options_passes_instances_through():
    options = ExtractionOptions(token_type="otp")
    assert resolve_options(options) is options


def test_resolve_options_replaces_markers(monkeypatch):
    monkeypatch.delenv("AUTH_TOKEN_TYPE", raising=False)
    assert resolve_options(object()).token_type == "access"
