"""
Per-call configuration for context resolution and token extraction.

Options are frozen dataclasses passed explicitly to every operation.
Nothing here reads the process environment; see ``factory`` for that.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Optional, Sequence, TypeVar, Union

OriginTable = Mapping[str, Union[str, Sequence[str]]]

PRODUCTION = "production"
DEVELOPMENT = "development"

# camelCase spellings accepted in mappings, for configs shared with JS hosts
_KEY_ALIASES = {
    "environmentMode": "environment_mode",
    "originTable": "origin_table",
    "contextOrigins": "origin_table",
    "preferContext": "prefer_context",
    "tokenType": "token_type",
}

T = TypeVar("T", bound="ContextOptions")


@dataclass(frozen=True)
class ContextOptions:
    """
    Options for context resolution.

    ``origin_table`` of None means the built-in DEFAULT_CONTEXT_ORIGINS.
    ``environment_mode == "development"`` enables the X-Auth-Context
    header override.
    """

    environment_mode: str = PRODUCTION
    origin_table: Optional[OriginTable] = None

    @property
    def is_development(self) -> bool:
        return self.environment_mode == DEVELOPMENT

    @classmethod
    def from_mapping(cls: type[T], data: Optional[Mapping]) -> T:
        """
        Build options from a plain mapping.

        Unknown keys are ignored; values of the wrong shape fall back to
        the field default.
        """
        if not isinstance(data, Mapping):
            return cls()
        return cls(**_changes(cls, data))


@dataclass(frozen=True)
class ExtractionOptions(ContextOptions):
    """Options for token extraction (includes the context options)."""

    prefer_context: bool = True
    token_type: str = "access"

    def context_options(self) -> ContextOptions:
        return ContextOptions(
            environment_mode=self.environment_mode,
            origin_table=self.origin_table,
        )


def _valid_field(name: str, value: Any) -> bool:
    if name == "environment_mode":
        return isinstance(value, str)
    if name == "origin_table":
        return isinstance(value, Mapping)
    if name == "prefer_context":
        return isinstance(value, bool)
    if name == "token_type":
        return isinstance(value, str) and bool(value)
    return True


def coerce_options(options: Any, cls: type[T] = ExtractionOptions, **overrides) -> T:
    """
    Normalize ``options`` (None, mapping or options instance) to ``cls``.

    Keyword overrides are validated like mapping values; unset (None)
    overrides are ignored.
    """
    if isinstance(options, cls):
        base = options
    elif isinstance(options, ContextOptions):
        base = cls.from_mapping(
            {f.name: getattr(options, f.name) for f in fields(options)}
        )
    else:
        base = cls.from_mapping(options)

    if not overrides:
        return base
    return replace(base, **_changes(cls, overrides))


def _changes(cls: type, data: Mapping) -> dict:
    known = {f.name for f in fields(cls)}
    changes = {}
    for key, value in data.items():
        name = _KEY_ALIASES.get(key, key)
        if name in known and value is not None and _valid_field(name, value):
            changes[name] = value
    return changes
