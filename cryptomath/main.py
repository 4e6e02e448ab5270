"""
cryptomath - Command Line Entry Point

Usage:
    python -m cryptomath.main gcd 48 88
    python -m cryptomath.main lcm 12 18 30 --int64
    python -m cryptomath.main prime 1122157 --wilson
    python -m cryptomath.main crt --residue 2 --residue 3 --modulus 3 --modulus 5
"""

import argparse
import sys
from typing import List, Optional

from . import config
from .algebra.gcd import gcd, gcd_abs
from .algebra.lcm import lcm_all
from .algebra.prime import factorize, is_prime_number, is_probably_prime
from .errors import MathError
from .logger import configure_logging, get_logger
from .modular.arithmetic import crt, euler_phi, mod_exp, mod_inverse

logger = get_logger(__name__)


def print_banner() -> None:
    """Print the list of available modules."""
    print("=" * 50)
    print("Welcome to cryptomath")
    print("=" * 50)
    print("\nAvailable modules:")
    print("  - Algebra (GCD, LCM, primality, factorisation)")
    print("  - Modular arithmetic (exponentiation, inverse, CRT, totient)")
    print("  - Algebraic structures (Z/nZ)")
    print("\nRun with --help for the list of commands.\n")


def format_factorization(factors) -> str:
    """Render {2: 3, 3: 1, 5: 1} as '2^3 * 3 * 5'."""
    if not factors:
        return "1"
    return " * ".join(
        str(p) if exp == 1 else f"{p}^{exp}" for p, exp in factors.items()
    )


def _cmd_gcd(args) -> str:
    result = gcd_abs(args.a, args.b) if args.abs else gcd(args.a, args.b)
    return str(result)


def _cmd_lcm(args) -> str:
    max_value = config.INT64_MAX if args.int64 else args.max_value
    return str(lcm_all(args.values, max_value=max_value))


def _cmd_prime(args) -> str:
    if args.wilson:
        prime = is_prime_number(args.n) is not None
    else:
        prime = is_probably_prime(args.n)
    return f"{args.n} is {'prime' if prime else 'composite'}"


def _cmd_factor(args) -> str:
    return f"{args.n} = {format_factorization(factorize(args.n))}"


def _cmd_modexp(args) -> str:
    return str(mod_exp(args.base, args.exponent, args.modulus))


def _cmd_inverse(args) -> str:
    return str(mod_inverse(args.a, args.m))


def _cmd_crt(args) -> str:
    x, big_m = crt(args.residue or [], args.modulus or [])
    return f"{x} (mod {big_m})"


def _cmd_phi(args) -> str:
    return str(euler_phi(args.n))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cryptomath",
        description="Number theory and modular arithmetic for cryptography fundamentals",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        help=f"Log level (default: {config.LOG_LEVEL}, or CRYPTOMATH_LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=config.LOG_JSON,
        help="Emit log lines as JSON (default: CRYPTOMATH_LOG_JSON env var)",
    )
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("gcd", help="Greatest common divisor")
    p.add_argument("a", type=int)
    p.add_argument("b", type=int)
    p.add_argument("--abs", action="store_true", help="Return the absolute value")
    p.set_defaults(handler=_cmd_gcd)

    p = sub.add_parser("lcm", help="Least common multiple of non-negative integers")
    p.add_argument("values", type=int, nargs="+")
    p.add_argument("--max-value", type=int, default=None, help="Reject results above this value")
    p.add_argument("--int64", action="store_true", help="Reject results that overflow a signed 64-bit integer")
    p.set_defaults(handler=_cmd_lcm)

    p = sub.add_parser("prime", help="Primality test")
    p.add_argument("n", type=int)
    p.add_argument("--wilson", action="store_true", help="Use Wilson's theorem instead of Miller-Rabin")
    p.set_defaults(handler=_cmd_prime)

    p = sub.add_parser("factor", help="Prime factorisation")
    p.add_argument("n", type=int)
    p.set_defaults(handler=_cmd_factor)

    p = sub.add_parser("modexp", help="Modular exponentiation")
    p.add_argument("base", type=int)
    p.add_argument("exponent", type=int)
    p.add_argument("modulus", type=int)
    p.set_defaults(handler=_cmd_modexp)

    p = sub.add_parser("inverse", help="Modular inverse")
    p.add_argument("a", type=int)
    p.add_argument("m", type=int)
    p.set_defaults(handler=_cmd_inverse)

    p = sub.add_parser("crt", help="Chinese Remainder Theorem")
    p.add_argument("--residue", type=int, action="append", help="Residue (repeatable)")
    p.add_argument("--modulus", type=int, action="append", help="Modulus (repeatable)")
    p.set_defaults(handler=_cmd_crt)

    p = sub.add_parser("phi", help="Euler's totient")
    p.add_argument("n", type=int)
    p.set_defaults(handler=_cmd_phi)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for cryptomath."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, args.json_logs)

    if args.command is None:
        print_banner()
        return 0

    logger.info("command_started", command=args.command)
    try:
        output = args.handler(args)
    except MathError as e:
        logger.warning("command_failed", command=args.command, code=e.code, details=e.details)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
