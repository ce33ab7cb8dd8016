"""
Validator registry: resolves a field name to the rule that checks it.

The registry is a single ordered tuple of entries built once. Resolution
returns the first entry registered for a field, so specific per-field
validators (registered first) take precedence over the generic rule table.
A field with no entry resolves to :data:`UNCONSTRAINED`, which accepts any
value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from signup.registration import validators

Check = Callable[[Any], bool]
RuleCheck = Callable[[Any, Mapping[str, Any]], bool]


# ---------------------------------------------------------------------------
# Rule types
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class ValidationRule:
    """A reusable validator plus the parameters it is called with."""

    validator: RuleCheck
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True, slots=True)
class SpecificValidator:
    """Validator bound to exactly one field; called with the value only."""

    field: str
    check: Check

    def __call__(self, value: Any) -> bool:
        return self.check(value)


@dataclass(frozen=True, slots=True)
class GenericRule:
    """Entry of the generic table; called with ``(value, params)``."""

    field: str
    rule: ValidationRule

    def __call__(self, value: Any) -> bool:
        return self.rule.validator(value, self.rule.params)


@dataclass(frozen=True, slots=True)
class UnconstrainedField:
    """Policy for fields nobody registered a validator for: always valid."""

    def __call__(self, value: Any) -> bool:
        return True


UNCONSTRAINED = UnconstrainedField()

Entry = Union[SpecificValidator, GenericRule]
Resolved = Union[SpecificValidator, GenericRule, UnconstrainedField]


# ---------------------------------------------------------------------------
# Built-in tables
# ---------------------------------------------------------------------------
def _frozen(**params: Any) -> Mapping[str, Any]:
    return MappingProxyType(dict(params))


GENERIC_RULES: Mapping[str, ValidationRule] = MappingProxyType(
    {
        "firstname": ValidationRule(validators.validate_length, _frozen(min=1, max=8)),
        "lastname": ValidationRule(validators.validate_length, _frozen(min=1, max=8)),
        "number": ValidationRule(validators.validate_phone_number),
        "gender": ValidationRule(validators.validate_gender),
        "age": ValidationRule(validators.validate_age),
        "address": ValidationRule(validators.validate_length, _frozen(min=1, max=100)),
        "phoneNumber": ValidationRule(validators.validate_phone_number),
    }
)

SPECIFIC_VALIDATORS: tuple[SpecificValidator, ...] = (
    SpecificValidator("firstname", validators.validate_firstname),
    SpecificValidator("lastname", validators.validate_lastname),
    SpecificValidator("number", validators.validate_number),
    SpecificValidator("age", validators.validate_age),
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------
class ValidatorRegistry:
    """Ordered ``(field, validator)`` entries; earlier registration wins."""

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries: tuple[Entry, ...] = tuple(entries)
        index: dict[str, Entry] = {}
        for entry in self._entries:
            index.setdefault(entry.field, entry)
        self._index = MappingProxyType(index)

    @classmethod
    def from_tables(
        cls,
        specific: Iterable[SpecificValidator] = SPECIFIC_VALIDATORS,
        generic: Mapping[str, ValidationRule] = GENERIC_RULES,
    ) -> "ValidatorRegistry":
        entries: list[Entry] = list(specific)
        entries.extend(GenericRule(name, rule) for name, rule in generic.items())
        return cls(entries)

    def resolve(self, field_name: str) -> Resolved:
        """Return the validator that governs ``field_name``."""
        return self._index.get(field_name, UNCONSTRAINED)

    def is_valid(self, field_name: str, value: Any) -> bool:
        return self.resolve(field_name)(value)

    def with_specific(self, field_name: str, check: Check) -> "ValidatorRegistry":
        """New registry with ``check`` ahead of every existing entry."""
        return type(self)((SpecificValidator(field_name, check), *self._entries))

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._index

    def __len__(self) -> int:
        return len(self._entries)


_DEFAULT_REGISTRY = ValidatorRegistry.from_tables()


def default_registry() -> ValidatorRegistry:
    return _DEFAULT_REGISTRY
