"""
Factory functions for default configuration.

Implements the 'if not provided, create' pattern for framework
integrations. Core operations never call this; they take options
explicitly.
"""

import json
import os
import logging

from multi_context_auth.config import ExtractionOptions

logger = logging.getLogger(__name__)


def create_default_options() -> ExtractionOptions:
    """
    Create ExtractionOptions from Django settings or environment variables.

    Sources, first match wins:
    1. Django ``settings.AUTH_CONTEXT_OPTIONS`` (a dict of option fields)
    2. AUTH_ENVIRONMENT_MODE, AUTH_PREFER_CONTEXT, AUTH_TOKEN_TYPE and
       AUTH_CONTEXT_ORIGINS (JSON object) environment variables
    3. Built-in defaults
    """
    # 1. Try Django settings first
    try:
        from django.conf import settings

        if settings.configured:
            django_options = getattr(settings, "AUTH_CONTEXT_OPTIONS", None)
            if isinstance(django_options, dict):
                return ExtractionOptions.from_mapping(django_options)
    except ImportError:
        pass

    # 2. Fall back to environment variables
    return options_from_env(os.environ)


def options_from_env(environ) -> ExtractionOptions:
    data = {
        "environment_mode": environ.get("AUTH_ENVIRONMENT_MODE"),
        "token_type": environ.get("AUTH_TOKEN_TYPE"),
    }

    prefer_context = environ.get("AUTH_PREFER_CONTEXT")
    if prefer_context is not None:
        data["prefer_context"] = prefer_context.strip().lower() in ("1", "true", "yes")

    origins = environ.get("AUTH_CONTEXT_ORIGINS")
    if origins:
        try:
            data["origin_table"] = json.loads(origins)
        except ValueError as e:
            logger.warning(f"Ignoring invalid AUTH_CONTEXT_ORIGINS: {e}")

    return ExtractionOptions.from_mapping(data)
