# src/fedex_tracking_report/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config.env import EnvError, get_app_env
from .config.logging_config import get_logger
from .io.paths import derive_output_paths
from .pipelines.report_runner import ReportRunner


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fedex-tracking-report",
        description="Track a list of FedEx numbers and write a flattened CSV report.",
    )
    p.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=Path("input.csv"),
        help="Newline-separated tracking numbers. Default: input.csv",
    )
    p.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Report path. Default: <input stem>_report.csv next to the input.",
    )
    p.add_argument(
        "--xlsx",
        type=Path,
        default=None,
        help="Also write the report as an Excel workbook at this path.",
    )
    p.add_argument(
        "--replay",
        type=Path,
        default=None,
        help="JSON file of recorded FedEx response bodies to serve instead of the live API.",
    )
    p.add_argument(
        "--save-bodies",
        type=Path,
        default=None,
        help="Write every raw tracking response body to this JSON file.",
    )
    p.add_argument(
        "--mapping-order",
        action="store_true",
        help="Order rows as FedEx returned them instead of input order.",
    )
    p.add_argument(
        "--no-console",
        action="store_true",
        help="Disable console logging (file logging remains).",
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Default: INFO",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        default_output, log_path = derive_output_paths(args.input)
    except FileNotFoundError:
        print(f"error: input file not found: {args.input}", file=sys.stderr)
        return 2
    output_path = args.output or default_output

    logger = get_logger(
        "fedex_tracking_report",
        level=args.log_level,
        console=not args.no_console,
        log_file=log_path,
    )
    logger.info("Input: %s", args.input)
    logger.info("Report output: %s", output_path)
    logger.info("Log file: %s", log_path)

    # Credentials are only needed against the live API
    try:
        env_cfg = get_app_env(strict=args.replay is None)
    except EnvError as e:
        logger.error("Environment error: %s", e)
        return 2

    from .api.auth import Authenticator
    from .api.body_writer import ApiBodyWriter
    from .api.tracker import BatchTracker
    from .models import CarrierConfig

    if args.replay:
        from .api.replay import ReplayTransport
        try:
            transport = ReplayTransport(args.replay)
        except FileNotFoundError:
            logger.error("Replay file not found: %s", args.replay)
            return 2
        logger.info("Replay mode enabled: %s", args.replay)
    else:
        from .api.transport import RequestsTransport
        transport = RequestsTransport()

    carrier_cfg = CarrierConfig.from_env(env_cfg)
    if not args.replay:
        logger.info("Live FedEx API enabled (tracking=%s)",
                    carrier_cfg.tracking_url)

    writer = ApiBodyWriter(args.save_bodies) if args.save_bodies else None

    try:
        runner = ReportRunner(
            logger,
            authenticator=Authenticator(
                carrier_cfg, transport, logger=logger.getChild("auth")),
            tracker=BatchTracker(
                carrier_cfg, transport,
                logger=logger.getChild("tracker"), body_writer=writer),
            preserve_input_order=not args.mapping_order,
            xlsx_path=args.xlsx,
        )
        runner.run(args.input, output_path)
    except FileNotFoundError as e:
        logger.error("Input missing: %s", e)
        return 2
    except Exception as e:
        logger.exception("Failed to build tracking report: %s", e)
        return 1

    logger.info("Done.")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
