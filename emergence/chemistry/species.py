"""Species and Reaction — immutable records for the equilibrium catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PhaseState(Enum):
    """Physical state of a species.

    Only gases and aqueous species appear in an equilibrium expression.
    """

    GAS = "g"
    AQUEOUS = "aq"
    LIQUID = "l"
    SOLID = "s"


@dataclass(frozen=True)
class Species:
    """One participant in a reaction.

    Attributes:
        formula: Display formula (may contain Unicode sub/superscripts).
        coeff: Stoichiometric coefficient.
        state: Physical state.
        color: Hex colour used when drawing the species.
    """

    formula: str
    coeff: int
    state: PhaseState
    color: str


@dataclass(frozen=True)
class Reaction:
    """A reversible reaction with reference thermodynamic data.

    Attributes:
        name: Unique catalog name.
        reactants: Left-hand species.
        products: Right-hand species.
        delta_h: Standard enthalpy change in kJ/mol (negative =
            exothermic).
        gas_change: Moles of gas products minus moles of gas reactants.
        description: One-line summary.
        kc_298: Equilibrium constant at 298 K.
        max_temp: Highest temperature the reaction is shown at, in K.
    """

    name: str
    reactants: tuple[Species, ...]
    products: tuple[Species, ...]
    delta_h: float
    gas_change: int
    description: str
    kc_298: float
    max_temp: float

    @property
    def is_exothermic(self) -> bool:
        """True when heat is released in the forward direction."""
        return self.delta_h < 0

    @property
    def has_gas(self) -> bool:
        """True if any species on either side is a gas."""
        return any(s.state is PhaseState.GAS for s in self.reactants + self.products)


@dataclass(frozen=True)
class EquilibriumFractions:
    """Visual split between reactants and products; sums to 1."""

    reactant_frac: float
    product_frac: float
