"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_localization_service,
    make_store,
    make_tables,
    make_translation_table,
)

__all__ = [
    "make_localization_service",
    "make_store",
    "make_tables",
    "make_translation_table",
]
