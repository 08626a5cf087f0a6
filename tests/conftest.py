"""Test configuration and fixtures for molform tests."""

import pytest


@pytest.fixture
def simple_formulas() -> list[str]:
    """Formulas without groups."""
    return [
        "H",
        "O2",
        "H2O",
        "CO2",
        "NaCl",
        "C6H12O6",
        "H2SO4",
    ]


@pytest.fixture
def grouped_formulas() -> list[str]:
    """Formulas with bracketed groups, some nested."""
    return [
        "Mg(OH)2",
        "Ca3(PO4)2",
        "Al2(SO4)3",
        "(NH4)2SO4",
        "K4[ON(SO3)2]2",
        "K4[Fe(CN)6]",
        "{[(H)2]3}4",
        "CH3(CH2)4CH3",
    ]


@pytest.fixture
def invalid_formulas() -> list[str]:
    """Formulas that must not parse."""
    return [
        "pie",
        "Mg(OH",
        "Mg(OH}2",
        "H2O ",
        "H-O",
        ")",
        "2H",
        "(H]",
    ]
