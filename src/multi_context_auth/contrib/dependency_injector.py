"""
Dependency Injector integration for multi-context-auth.

Provides an optional IoC container exposing ExtractionOptions built from
configuration. Host applications can extend it or use it directly.

Usage:
    from multi_context_auth.contrib.dependency_injector import AuthContextContainer

    container = AuthContextContainer()
    container.config.from_dict({"environment_mode": "development"})
    container.wire(modules=["multi_context_auth.contrib.fastapi.middleware"])
"""

from typing import Any

from dependency_injector import containers, providers

from multi_context_auth.config import ExtractionOptions
from multi_context_auth.factory import create_default_options


class AuthContextContainer(containers.DeclarativeContainer):
    """
    IoC container for context resolution settings.

    Config keys (all optional, see ExtractionOptions):
    - environment_mode
    - origin_table
    - prefer_context
    - token_type
    """

    config = providers.Configuration()

    extraction_options = providers.Singleton(
        ExtractionOptions.from_mapping,
        config,
    )


def resolve_options(options: Any) -> ExtractionOptions:
    """
    Return injected options, or defaults when nothing was injected.

    An unwired ``Provide[...]`` default arrives as a marker object rather
    than None, so anything that is not ExtractionOptions counts as missing.
    """
    if isinstance(options, ExtractionOptions):
        return options
    return create_default_options()
