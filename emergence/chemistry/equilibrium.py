"""Chemical equilibrium calculations for a Le Chatelier simulator.

Van't Hoff temperature dependence, Kc/Kp conversion, the reaction
quotient, and qualitative shift predictions.  All functions are closed
form; temperatures are in kelvin and enthalpies in kJ/mol.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum

from emergence.chemistry.species import EquilibriumFractions, PhaseState, Reaction, Species

R_JOULES = 8.314  # J/(mol*K), Van't Hoff
R_ATM = 0.0821  # L*atm/(mol*K), Kp conversion
T_REFERENCE = 298  # K


class Shift(Enum):
    """Direction an equilibrium moves after a disturbance."""

    FORWARD = "forward"
    REVERSE = "reverse"
    NONE = "none"


def kc_at_temperature(reaction: Reaction, temperature: float) -> float:
    """Equilibrium constant at ``temperature`` via the Van't Hoff equation.

    ``ln(K2/K1) = -dH/R * (1/T2 - 1/T1)`` with ``T1 = 298 K``.

    Example: the Haber process (Kc298 = 6e5, dH = -92) gives about 0.18
    at 500 K.

    Args:
        reaction: Supplies ``kc_298`` and ``delta_h``.
        temperature: Target temperature in kelvin.

    Returns:
        Kc at the requested temperature.
    """
    delta_h = reaction.delta_h * 1000  # kJ -> J
    ln_ratio = (-delta_h / R_JOULES) * (1 / temperature - 1 / T_REFERENCE)
    return reaction.kc_298 * math.exp(ln_ratio)


def equilibrium_fractions(kc: float) -> EquilibriumFractions:
    """Map any positive K onto a drawable reactant/product split.

    ``log10 K`` is squashed with ``tanh(logK / 6)`` so that K = 1 gives
    50% products and K = 1e+-10 lands near 90% / 10%.  The product share is
    clamped to ``[0.1, 0.9]``; zero or negative K counts as 1e-30.
    """
    log_k = math.log10(max(kc, 1e-30))
    product = 0.5 + 0.4 * math.tanh(log_k / 6)
    product = max(0.1, min(0.9, product))
    return EquilibriumFractions(reactant_frac=1 - product, product_frac=product)


def kp_from_kc(kc: float, temperature: float, delta_n: float) -> float:
    """``Kp = Kc * (R T)^dn`` for gas-phase reactions."""
    return kc * (R_ATM * temperature) ** delta_n


def q_over_k(
    reactant_ratio: float,
    product_ratio: float,
    reactant_coeffs: float,
    product_coeffs: float,
) -> float:
    """Reaction quotient relative to K.

    Ratios are current concentration over equilibrium concentration.
    Below 1 the system shifts forward, above 1 it shifts in reverse.
    """
    return product_ratio**product_coeffs / reactant_ratio**reactant_coeffs


def partial_pressure(mole_fraction: float, total_pressure: float) -> float:
    """Dalton's law: ``P_i = x_i * P_total``."""
    return mole_fraction * total_pressure


def total_coefficients(species: Iterable[Species]) -> int:
    """Sum coefficients of the species that enter the K expression.

    Pure solids and liquids are left out.  Returns 1 when nothing
    qualifies so the result is safe to use as an exponent divisor.
    """
    counted = (PhaseState.GAS, PhaseState.AQUEOUS)
    return sum(s.coeff for s in species if s.state in counted) or 1


def shift_direction(log_q: float, log_k: float, threshold: float = 0.1) -> int:
    """Return 1 (forward), -1 (reverse) or 0 (within ``threshold`` of K)."""
    if abs(log_q - log_k) < threshold:
        return 0
    return 1 if log_q < log_k else -1


def predict_temperature_effect(delta_h: float, temperature_increases: bool) -> Shift:
    """Heating favours the endothermic direction, cooling the exothermic."""
    if delta_h == 0:
        return Shift.NONE
    exothermic = delta_h < 0
    if temperature_increases:
        return Shift.REVERSE if exothermic else Shift.FORWARD
    return Shift.FORWARD if exothermic else Shift.REVERSE


def predict_pressure_effect(gas_change: float, pressure_increases: bool) -> Shift:
    """Compression favours fewer gas moles, expansion favours more."""
    if gas_change == 0:
        return Shift.NONE
    if pressure_increases:
        return Shift.FORWARD if gas_change < 0 else Shift.REVERSE
    return Shift.FORWARD if gas_change > 0 else Shift.REVERSE
