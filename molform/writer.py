"""
Formula string writer.

Renders a Molecule back to a compact formula string, either in the
molecule's own order or in Hill order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from molform.types import Atom, Molecule


ORDERS: Final[tuple[str, ...]] = ("input", "hill")


def hill_order(molecule: Molecule) -> list[Atom]:
    """Sort atoms in Hill order.

    With carbon present: C, then H, then the rest alphabetically.
    Without carbon every element, H included, is alphabetical.
    """
    atoms = list(molecule.merged())
    if "C" not in molecule:
        return sorted(atoms, key=lambda atom: atom.symbol)

    def key(atom: Atom) -> tuple[int, str]:
        if atom.symbol == "C":
            return (0, "")
        if atom.symbol == "H":
            return (1, "")
        return (2, atom.symbol)

    return sorted(atoms, key=key)


def to_formula(molecule: Molecule, order: str = "input") -> str:
    """Render a molecule as a formula string.

    Counts of 1 are left implicit and zero counts are dropped.

    Args:
        molecule: Molecule to render.
        order: "input" to keep the molecule's order, "hill" for Hill order.

    Returns:
        Formula string, e.g. ``"MgO2H2"``.

    Raises:
        ValueError: If ``order`` is unknown.

    Example:
        >>> from molform import parse_molecule
        >>> to_formula(parse_molecule("C2H5OH"), order="hill")
        'C2H6O'
    """
    if order == "input":
        atoms = list(molecule)
    elif order == "hill":
        atoms = hill_order(molecule)
    else:
        raise ValueError(f"Unknown order {order!r}, expected one of {ORDERS}")

    parts = []
    for atom in atoms:
        if atom.count <= 0:
            continue
        parts.append(atom.symbol if atom.count == 1 else f"{atom.symbol}{atom.count}")
    return "".join(parts)
