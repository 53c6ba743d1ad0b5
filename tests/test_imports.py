"""Tests for Datewise package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_datewise() -> None:
    """Import datewise package succeeds."""
    import datewise

    assert hasattr(datewise, "__version__")
    assert datewise.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import datewise.core submodule succeeds."""
    from datewise import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import datewise.units submodule succeeds."""
    from datewise import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import datewise.format submodule succeeds."""
    from datewise import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import datewise.convert submodule succeeds."""
    from datewise import convert

    assert hasattr(convert, "__all__")


def test_convert_module_not_shadowed() -> None:
    """datewise.convert stays the subpackage, not the convert function."""
    import types

    import datewise

    assert isinstance(datewise.convert, types.ModuleType)
    assert callable(datewise.convert.convert)


def test_import_arithmetic_module() -> None:
    """Import datewise.arithmetic submodule succeeds."""
    from datewise import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_internal_module() -> None:
    """Import datewise._internal submodule succeeds."""
    from datewise import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Error hierarchy is importable and rooted at DatewiseError."""
    from datewise import (
        DatewiseError,
        InvalidAmount,
        InvalidDateFormat,
        InvalidTimezone,
        InvalidUnit,
    )

    for error in (InvalidDateFormat, InvalidTimezone, InvalidUnit, InvalidAmount):
        assert issubclass(error, DatewiseError)


def test_error_code_is_class_name() -> None:
    """Each error exposes its class name as a stable code."""
    from datewise import InvalidUnit

    assert InvalidUnit("bad").code == "InvalidUnit"


def test_public_api_names_resolve() -> None:
    """Every name in datewise.__all__ is an attribute of the package."""
    import datewise

    for name in datewise.__all__:
        assert hasattr(datewise, name), name
