"""HoloPass command-line interface.

Usage examples:
    python -m holopass.cli generate
    python -m holopass.cli generate -n 24 --no-symbols -c 5
    python -m holopass.cli generate -n 12 --no-repeats --json
    python -m holopass.cli estimate 'x7#Kq!' --no-symbols
"""

import argparse
import json
import logging
import sys

from holopass import (
    DEFAULT_LENGTH,
    GenerationOptions,
    HoloPassError,
    InfeasibleConfigurationError,
    estimate_strength,
    generate_password,
    has_enabled_category,
)

logger = logging.getLogger(__name__)

EXIT_NO_CATEGORY = 1
EXIT_INFEASIBLE = 3
EXIT_RANDOM_UNAVAILABLE = 4


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="holopass",
        description="Generate strong passwords with instant strength insights.",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate random passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"Password length, clamped to 4-128 (default: {DEFAULT_LENGTH})",
    )
    _add_option_flags(gen_p)
    gen_p.add_argument(
        "--no-repeats", action="store_true",
        help="Never use the same character twice",
    )
    gen_p.add_argument(
        "-c", "--count", type=_positive_int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument("--json", action="store_true", help="Output as JSON")

    # ── estimate ───────────────────────────────────────────────────────
    est_p = sub.add_parser(
        "estimate", help="Estimate strength of passwords made with given options",
    )
    est_p.add_argument("passwords", nargs="+", help="Passwords to score")
    _add_option_flags(est_p)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "estimate":
        return _cmd_estimate(args)

    parser.print_help()
    return 0


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _add_option_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--no-lowercase", action="store_true")
    p.add_argument("--no-uppercase", action="store_true")
    p.add_argument("--no-digits", action="store_true")
    p.add_argument("--no-symbols", action="store_true")
    p.add_argument(
        "--allow-ambiguous", action="store_true",
        help="Keep look-alike characters such as I, l, 1, O, 0",
    )


def _options_from_args(args: argparse.Namespace) -> GenerationOptions:
    return GenerationOptions(
        length=getattr(args, "length", DEFAULT_LENGTH),
        lowercase=not args.no_lowercase,
        uppercase=not args.no_uppercase,
        digits=not args.no_digits,
        symbols=not args.no_symbols,
        exclude_ambiguous=not args.allow_ambiguous,
        forbid_repeats=getattr(args, "no_repeats", False),
    )


def _bar(report: dict) -> str:
    return "#" * report["score"] + "-" * (4 - report["score"])


def _cmd_generate(args: argparse.Namespace) -> int:
    options = _options_from_args(args)
    if not has_enabled_category(options):
        print("Error: select at least one character category", file=sys.stderr)
        return EXIT_NO_CATEGORY

    if options.length != options.effective_length:
        logger.info("Length %d clamped to %d", options.length, options.effective_length)

    results = []
    try:
        for _ in range(args.count):
            pwd = generate_password(options)
            report = estimate_strength(pwd, options)
            results.append((pwd, report))
    except InfeasibleConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INFEASIBLE
    except HoloPassError as exc:
        logger.error("Generation failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_RANDOM_UNAVAILABLE

    if args.json:
        print(json.dumps([
            {
                "password": pwd,
                "score": report["score"],
                "label": report["label"],
                "bits": round(report["bits"], 1),
            }
            for pwd, report in results
        ]))
    else:
        for pwd, report in results:
            print(f"  {pwd}  ({report['label']}, {report['bits']:.1f} bits)")

    return 0


def _cmd_estimate(args: argparse.Namespace) -> int:
    options = _options_from_args(args)
    if not has_enabled_category(options):
        print("Error: select at least one character category", file=sys.stderr)
        return EXIT_NO_CATEGORY

    for pwd in args.passwords:
        report = estimate_strength(pwd, options)
        print(
            f"  [{_bar(report)}] {report['label']} ({report['bits']:.1f} bits)"
            f"  '{pwd}'"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
