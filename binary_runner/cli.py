"""CLI entry point for running a binary inside an external environment."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from binary_runner.config import RunnerConfig
from binary_runner.harness import run_binary
from binary_runner.models.result import RunResult

EXIT_INVALID_CONFIG = 2

STATUS_SYMBOLS = {
    "success": "✅",
    "failure": "❌",
    "error": "❗",
    "timeout": "⏱️",
}


def log_result_summary(log: logging.Logger, result: RunResult) -> None:
    """Log a one-line summary of a run, plus its message if any."""
    symbol = STATUS_SYMBOLS.get(result.status, "?")
    log.info(
        "%s %s (%s): %s (%.2fs)",
        symbol,
        result.binary,
        result.kind,
        result.status,
        result.duration,
    )
    if result.message:
        log.info("  Message: %s", result.message)


def format_output(result: RunResult) -> dict[str, Any]:
    """Format a run result for JSON output."""
    exit_status = result.exit_status
    return {
        "binary": str(result.binary),
        "kind": str(result.kind),
        "status": result.status,
        "duration": result.duration,
        "exit_code": exit_status.code if exit_status else None,
        "signal": exit_status.signal if exit_status else None,
        "message": result.message,
    }


def load_config(config_json: str | None) -> RunnerConfig:
    """Validate a JSON object into a runner configuration."""
    if config_json is None:
        return RunnerConfig()
    return RunnerConfig.model_validate_json(config_json)


def run(binary: Path, config_json: str | None = None) -> int:
    """Run a binary and return the process exit code."""
    log = logging.getLogger("binary_runner")

    try:
        config = load_config(config_json)
    except ValidationError as error:
        log.error("Invalid configuration: %s", error)
        return EXIT_INVALID_CONFIG

    result = run_binary(binary, config)

    log_result_summary(log, result)
    print(json.dumps(format_output(result), indent=2))

    return 0 if result.status == "success" else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run a binary in an external environment with a timeout"
    )
    parser.add_argument(
        "binary",
        type=Path,
        help="Path to the binary to run",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration for the runner",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(binary=args.binary, config_json=args.config))


if __name__ == "__main__":  # pragma: no cover
    main()
