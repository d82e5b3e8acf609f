"""Entry point for the model generator CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from model_generator.cli import build_parser
from model_generator.common import UserInputError
from model_generator.observability import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    setup_logging(Path(args.log_config) if args.log_config else None, verbose=args.verbose)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return int(handler(args))
    except UserInputError as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("filesystem error: %s", exc)
        return 1
    except Exception as exc:  # pragma: no cover
        logger.error("model generation failed: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
