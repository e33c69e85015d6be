"""Command line interface for secret recovery."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from src.core.domain.report import ReconstructionReport
from src.core.errors import SecretRecoveryError
from src.logging_config import setup_logging
from src.recovery.loader import decode_points, load_share_set
from src.recovery.reconstructor import ReconstructionConfig, SecretReconstructor
from src.recovery.selection import SelectionPolicy

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secret-recovery",
        description="Recover f(0) from base-encoded shares via exact Newton interpolation",
    )
    parser.add_argument("input", help="JSON file with keys {n, k} and encoded shares")
    parser.add_argument("--coeffs", action="store_true", help="Also print standard-form coefficients")
    parser.add_argument(
        "--policy",
        choices=[p.value for p in SelectionPolicy],
        default=SelectionPolicy.ASCENDING_X.value,
        help="How to choose k of the n shares",
    )
    parser.add_argument("--max-threshold", type=int, default=None, help="Reject k above this value")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    parser.add_argument("--log-file", default=None)
    return parser


def render_text(report: ReconstructionReport) -> str:
    lines = ["Using points (x: y_dec):"]
    lines.extend(f"  {p.x}: {p.y}" for p in report.points)
    lines.append(f"k = {report.k} -> degree m = {report.degree}")
    lines.append(f"Secret f(0): {report.secret}")

    if report.coefficients is not None:
        lines.append("")
        lines.append("Polynomial coefficients (a0 + a1*x + ... + am*x^m):")
        lines.extend(f"  a{i} = {c}" for i, c in enumerate(report.coefficients))
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    config = ReconstructionConfig(
        selection_policy=SelectionPolicy(args.policy),
        include_coefficients=args.coeffs,
        max_threshold=args.max_threshold,
    )

    try:
        share_set = load_share_set(args.input)
        points = decode_points(share_set)
        report = SecretReconstructor(config).run(points, share_set.keys.k)
    except (SecretRecoveryError, ValueError) as e:
        logger.debug("Reconstruction failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(render_text(report))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
