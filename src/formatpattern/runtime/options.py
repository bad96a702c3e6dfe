"""Parse-time and call-time option objects.

Options arrive as keyword arguments or plain mappings from the rendering
layer. Both are folded into frozen dataclasses here; keys that name no field
are ignored so callers can pass their whole cell configuration through.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from formatpattern.enums import FormatType
from formatpattern.locale_utils import normalize_locale

if TYPE_CHECKING:
    from .cache import PatternCache

__all__ = ["CallOptions", "FormatOptions"]


def _normalize_currency(currency: object) -> str | None:
    if not isinstance(currency, str):
        return None
    currency = currency.strip().upper()
    return currency or None


def _normalize_locale(locale: object) -> str | None:
    if not isinstance(locale, str):
        return None
    return normalize_locale(locale) or None


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Configuration for parse() and validate().

    Attributes:
        type: Asserted format type; parse fails with TYPE_MISMATCH when the
            pattern is detected as something else. Strings are accepted.
        locale: Default locale for the compiled formatter
        currency: Default ISO 4217 code for currency patterns
        cache: True for the shared cache, False to bypass caching, or a
            PatternCache instance to use instead of the shared one
        validate_only: Stop after validation without compiling
        strict: Apply strict-mode validation rules

    Example:
        >>> FormatOptions.from_mapping({"type": "number", "unknown": 1})
        FormatOptions(type=<FormatType.NUMBER: 'number'>, locale=None, ...)
    """

    type: FormatType | None = None
    locale: str | None = None
    currency: str | None = None
    cache: bool | PatternCache = True
    validate_only: bool = False
    strict: bool = False

    def __post_init__(self) -> None:
        """Coerce string types and normalize locale and currency codes.

        Raises:
            ValueError: If type names no FormatType.
        """
        if self.type is not None and not isinstance(self.type, FormatType):
            try:
                object.__setattr__(self, "type", FormatType(str(self.type).lower()))
            except ValueError:
                choices = ", ".join(member.value for member in FormatType)
                msg = f"Unknown format type '{self.type}'; expected one of: {choices}"
                raise ValueError(msg) from None
        object.__setattr__(self, "locale", _normalize_locale(self.locale))
        object.__setattr__(self, "currency", _normalize_currency(self.currency))

    @classmethod
    def from_mapping(
        cls, options: Mapping[str, Any] | FormatOptions | None = None, /, **overrides: Any
    ) -> FormatOptions:
        """Build options from a mapping and keyword overrides.

        Unrecognized keys are ignored.

        Args:
            options: Mapping of option names, an existing FormatOptions, or None
            **overrides: Keyword options taking precedence over the mapping
        """
        if isinstance(options, FormatOptions):
            base = options
        else:
            base = cls(**_known_fields(cls, options or {}))
        known = _known_fields(cls, overrides)
        return replace(base, **known) if known else base

    def for_metadata(self) -> FormatOptions:
        """Options as recorded on a compiled spec, without per-call cache controls."""
        return replace(self, cache=True, validate_only=False)


@dataclass(frozen=True, slots=True)
class CallOptions:
    """Per-call options accepted by compiled formatters.

    Attributes:
        locale: Locale overriding the parse-time locale
        currency: ISO 4217 code overriding the parse-time currency
        fields: Lookup used by text placeholders
    """

    locale: str | None = None
    currency: str | None = None
    fields: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        """Normalize codes; values of the wrong type are dropped to None."""
        object.__setattr__(self, "locale", _normalize_locale(self.locale))
        object.__setattr__(self, "currency", _normalize_currency(self.currency))
        if self.fields is not None and not isinstance(self.fields, Mapping):
            object.__setattr__(self, "fields", None)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | CallOptions | None) -> CallOptions:
        """Build call options from a mapping, ignoring unrecognized keys.

        Anything other than a mapping or CallOptions counts as no options.
        """
        if isinstance(options, CallOptions):
            return options
        if not isinstance(options, Mapping) or not options:
            return _NO_CALL_OPTIONS
        return cls(**_known_fields(cls, options))


def _known_fields(cls: type, options: Mapping[str, Any]) -> dict[str, Any]:
    names = {field.name for field in fields(cls)}
    return {key: value for key, value in options.items() if key in names}


_NO_CALL_OPTIONS = CallOptions()
