"""
Config UI Example service - command line entry point.
"""
import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from configui.core.config import Settings, get_settings
from configui.core.logging import setup_logging
from configui.main import create_app
from configui.server import run


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="configui", description="Config UI Example service")
    ap.add_argument("--host", type=str, default=None, help="override HOST")
    ap.add_argument("--port", type=int, default=None, help="override PORT")
    ap.add_argument("--shutdown-timeout", type=float, default=None, help="override SHUTDOWN_TIMEOUT (seconds)")
    ap.add_argument("--log-level", type=str, default=None, help="override LOG_LEVEL")
    return ap


def load_settings(args: argparse.Namespace) -> Settings:
    """Apply command line overrides on top of the environment settings, validating the result."""
    overrides = {
        "HOST": args.host,
        "PORT": args.port,
        "SHUTDOWN_TIMEOUT": args.shutdown_timeout,
        "LOG_LEVEL": args.log_level,
    }
    values = get_settings().model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings.model_validate(values)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        settings = load_settings(args)
    except ValidationError as exc:
        ap.error(f"invalid settings:\n{exc}")

    # configui.main configured logging from the environment on import
    setup_logging(settings)
    return run(settings, create_app(settings))


if __name__ == "__main__":
    sys.exit(main())
