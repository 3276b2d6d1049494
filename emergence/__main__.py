"""Entry point for ``python -m emergence``.

Inspection commands for the kernels' static data: the reaction catalog
evaluated at a chosen temperature, and the effective configuration.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

import yaml

from emergence.chemistry.equilibrium import (
    equilibrium_fractions,
    kc_at_temperature,
    kp_from_kc,
)
from emergence.chemistry.reactions import (
    REACTIONS,
    endothermic_reactions,
    exothermic_reactions,
    gas_reactions,
)
from emergence.config import KernelConfig

_DEFAULT_CONFIG = pathlib.Path(__file__).resolve().parent / "default.yaml"

_FILTERS = {
    "all": lambda: list(REACTIONS),
    "exothermic": exothermic_reactions,
    "endothermic": endothermic_reactions,
    "gas": gas_reactions,
}


def _positive_float(value: str) -> float:
    """Parse a strictly positive float for argparse."""
    try:
        number = float(value)
    except ValueError:
        msg = f"invalid float value: {value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if not number > 0:
        msg = f"must be greater than 0, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _print_reactions(temperature: float, which: str) -> None:
    print(f"{'reaction':<28} {'Kc':>11} {'Kp':>11} {'products':>9}")
    for reaction in _FILTERS[which]():
        kc = kc_at_temperature(reaction, temperature)
        kp = kp_from_kc(kc, temperature, reaction.gas_change)
        frac = equilibrium_fractions(kc)
        print(f"{reaction.name:<28} {kc:>11.3e} {kp:>11.3e} {frac.product_frac:>9.1%}")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="emergence",
        description="Emergence - simulation kernel inspection tools",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    reactions = sub.add_parser("reactions", help="List the reaction catalog")
    reactions.add_argument(
        "-t",
        "--temperature",
        type=_positive_float,
        default=298.0,
        help="Temperature in kelvin, > 0 (default: 298)",
    )
    reactions.add_argument(
        "--filter",
        choices=sorted(_FILTERS),
        default="all",
        help="Subset of reactions to show (default: all)",
    )

    config = sub.add_parser("config", help="Print the effective configuration")
    config.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: the bundled default.yaml)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args and run the selected command."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "reactions":
        _print_reactions(args.temperature, args.filter)
    elif args.command == "config":
        config = KernelConfig.from_yaml(args.config)
        print(yaml.safe_dump(config.to_dict(), sort_keys=False), end="")


if __name__ == "__main__":
    main()
