"""Reaction catalog — reversible reactions with literature thermodynamics.

Values for ``kc_298`` and ``delta_h`` follow the NIST Chemistry WebBook
and standard thermodynamic tables.  The catalog is read-only and loaded
once at import.
"""

from __future__ import annotations

from emergence.chemistry.species import PhaseState, Reaction, Species

_G = PhaseState.GAS
_AQ = PhaseState.AQUEOUS
_L = PhaseState.LIQUID

REACTIONS: tuple[Reaction, ...] = (
    Reaction(
        name="Haber Process",
        reactants=(
            Species("N₂", 1, _G, "#4a90d9"),
            Species("H₂", 3, _G, "#7cb342"),
        ),
        products=(Species("NH₃", 2, _G, "#9c27b0"),),
        delta_h=-92,
        gas_change=-2,
        description="Industrial ammonia synthesis",
        kc_298=6.0e5,  # literature 3.5e5 - 6.8e5
        max_temp=800,
    ),
    Reaction(
        name="Contact Process",
        reactants=(
            Species("SO₂", 2, _G, "#ff9800"),
            Species("O₂", 1, _G, "#e53935"),
        ),
        products=(Species("SO₃", 2, _G, "#795548"),),
        delta_h=-198,
        gas_change=-1,
        description="Sulfuric acid production",
        kc_298=4.0e24,
        max_temp=1000,
    ),
    Reaction(
        name="Water-Gas Shift",
        reactants=(
            Species("CO", 1, _G, "#607d8b"),
            Species("H₂O", 1, _G, "#03a9f4"),
        ),
        products=(
            Species("CO₂", 1, _G, "#9e9e9e"),
            Species("H₂", 1, _G, "#8bc34a"),
        ),
        delta_h=-41,
        gas_change=0,
        description="Hydrogen production",
        kc_298=1.0e5,
        max_temp=1000,
    ),
    Reaction(
        name="Esterification",
        reactants=(
            Species("CH₃COOH", 1, _AQ, "#ff5722"),
            Species("C₂H₅OH", 1, _L, "#4caf50"),
        ),
        products=(
            Species("CH₃COOC₂H₅", 1, _L, "#e91e63"),
            Species("H₂O", 1, _L, "#2196f3"),
        ),
        delta_h=-4,
        gas_change=0,
        description="Ethyl acetate formation",
        kc_298=4.0,
        max_temp=400,
    ),
    Reaction(
        name="NO₂ Dimerization",
        reactants=(Species("NO₂", 2, _G, "#8d6e63"),),
        products=(Species("N₂O₄", 1, _G, "#ffc107"),),
        delta_h=-57,
        gas_change=-1,
        description="Brown gas equilibrium",
        kc_298=170,  # literature 100 - 200
        max_temp=500,
    ),
    Reaction(
        name="Methane Steam Reforming",
        reactants=(
            Species("CH₄", 1, _G, "#00bcd4"),
            Species("H₂O", 1, _G, "#03a9f4"),
        ),
        products=(
            Species("CO", 1, _G, "#607d8b"),
            Species("H₂", 3, _G, "#8bc34a"),
        ),
        delta_h=206,
        gas_change=2,
        description="Syngas production (endothermic)",
        kc_298=1.0e-25,
        max_temp=1500,
    ),
    Reaction(
        name="Carbonic Acid Equilibrium",
        reactants=(
            Species("CO₂", 1, _AQ, "#9e9e9e"),
            Species("H₂O", 1, _L, "#2196f3"),
        ),
        products=(Species("H₂CO₃", 1, _AQ, "#ff9800"),),
        delta_h=-20,
        gas_change=0,
        description="Ocean acidification chemistry",
        kc_298=1.7e-3,
        max_temp=400,
    ),
    Reaction(
        name="PCl₅ Decomposition",
        reactants=(Species("PCl₅", 1, _G, "#673ab7"),),
        products=(
            Species("PCl₃", 1, _G, "#3f51b5"),
            Species("Cl₂", 1, _G, "#cddc39"),
        ),
        delta_h=93,
        gas_change=1,
        description="Phosphorus chloride dissociation (endothermic)",
        kc_298=0.04,
        max_temp=700,
    ),
    Reaction(
        name="Cobalt Chloride Hydration",
        reactants=(
            Species("[CoCl₄]²⁻", 1, _AQ, "#2196f3"),
            Species("H₂O", 6, _L, "#03a9f4"),
        ),
        products=(
            Species("[Co(H₂O)₆]²⁺", 1, _AQ, "#e91e63"),
            Species("Cl⁻", 4, _AQ, "#4caf50"),
        ),
        delta_h=-50,
        gas_change=0,
        description="Blue to pink color change",
        kc_298=1.0e4,
        max_temp=400,
    ),
    Reaction(
        name="Iron(III) Thiocyanate",
        reactants=(
            Species("Fe³⁺", 1, _AQ, "#ff9800"),
            Species("SCN⁻", 1, _AQ, "#9c27b0"),
        ),
        products=(Species("FeSCN²⁺", 1, _AQ, "#f44336"),),
        delta_h=-3,
        gas_change=0,
        description="Blood-red complex formation",
        kc_298=890,  # formation constant
        max_temp=400,
    ),
)

_BY_NAME: dict[str, Reaction] = {r.name: r for r in REACTIONS}


def get_reaction_by_name(name: str) -> Reaction | None:
    """Look up a reaction by exact (case-sensitive) name."""
    return _BY_NAME.get(name)


def exothermic_reactions() -> list[Reaction]:
    """Reactions with delta H < 0."""
    return [r for r in REACTIONS if r.delta_h < 0]


def endothermic_reactions() -> list[Reaction]:
    """Reactions with delta H > 0."""
    return [r for r in REACTIONS if r.delta_h > 0]


def gas_reactions() -> list[Reaction]:
    """Reactions with at least one gas-phase species."""
    return [r for r in REACTIONS if r.has_gas]
