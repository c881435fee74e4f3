"""Command-line entry point: replay a transaction log, print client balances as CSV."""

from __future__ import annotations

import argparse
import sys

from txledger.core.result import Err, Ok
from txledger.gateway.csv_io import write_report
from txledger.infra.config import LOG_LEVELS, ReplayConfig
from txledger.infra.logging_config import configure_logging
from txledger.replay import replay_file

EXIT_OK = 0
EXIT_REPLAY_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="txledger",
        description="Replay a CSV transaction log and print the final balance of every client.",
    )
    parser.add_argument("input", help="Path to the transaction log (type,client,tx,amount)")
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Log and skip records that fail decoding instead of aborting",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging threshold for stderr (default: WARNING, or TXLEDGER_LOG_LEVEL)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        env_config = ReplayConfig.from_env()
    except TypeError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_REPLAY_ERROR

    config = ReplayConfig(
        strict=env_config.strict and not args.skip_invalid,
        log_level=args.log_level or env_config.log_level,
    )
    configure_logging(config.log_level)

    match replay_file(args.input, config):
        case Err(error):
            print(f"ERROR: {error}", file=sys.stderr)
            return EXIT_REPLAY_ERROR
        case Ok(registry):
            write_report(registry.snapshots(), sys.stdout)
            return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
