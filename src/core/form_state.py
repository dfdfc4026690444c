"""
Form state management for the sign-up form.

This module defines the form phases and the immutable FormState snapshot
handed to the presentation layer, together with the combiner that derives
the overall "can submit" flag from the per-field results.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from types import MappingProxyType

from .form_validators import FormField, ValidationResult


class FormPhase(Enum):
    """
    Enumeration of form phases.

    EDITING is the starting phase; SUBMITTED is terminal for the screen.
    """

    EDITING = auto()  # Accepting edits, submit allowed once every field is valid
    SUBMITTED = auto()  # Submission acknowledged


def combine(results: Mapping[FormField, ValidationResult | None]) -> bool:
    """
    Derive the overall validity from the latest result of each field.

    A field that has not produced a result yet makes the form not submittable.
    """
    for form_field in FormField:
        result = results.get(form_field)
        if result is None or not result.valid:
            return False
    return True


def _empty_results() -> Mapping[FormField, ValidationResult | None]:
    return MappingProxyType(dict.fromkeys(FormField))


@dataclass(frozen=True)
class FormState:
    """Snapshot of every field's latest result plus the form phase."""

    results: Mapping[FormField, ValidationResult | None] = field(default_factory=_empty_results)
    phase: FormPhase = FormPhase.EDITING

    @property
    def all_valid(self) -> bool:
        return combine(self.results)

    @property
    def is_warm(self) -> bool:
        """True once every field has produced at least one result."""
        return all(self.results.get(form_field) is not None for form_field in FormField)

    def result(self, form_field: FormField) -> ValidationResult | None:
        return self.results.get(form_field)

    def with_result(self, form_field: FormField, result: ValidationResult) -> FormState:
        results = dict(self.results)
        results[form_field] = result
        return replace(self, results=MappingProxyType(results))

    def with_phase(self, phase: FormPhase) -> FormState:
        return replace(self, phase=phase)
