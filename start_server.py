#!/usr/bin/env python3
"""Launch the record store over HTTP.

Usage:
    ./start_server.py                          # Serve on 127.0.0.1:5000
    ./start_server.py --port 8080              # Use custom port
    ./start_server.py --id-strategy sequential # Stable IDs across deletions
"""

import argparse
import logging
import os
import sys

from recordstore.models.domain import IdStrategy
from recordstore.services.config_service import (
    ENV_FALSY_ID_LISTS_ALL,
    ENV_ID_STRATEGY,
    get_config_service,
    reset_config_service,
)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Launch the record store API")
    parser.add_argument("--port", type=int, default=5000, help="Server port (default: 5000)")
    parser.add_argument("--host", default="127.0.0.1", help="Server host (default: 127.0.0.1)")
    parser.add_argument(
        "--id-strategy",
        choices=[s.value for s in IdStrategy],
        help="How record IDs are assigned (default: from config, else positional)",
    )
    parser.add_argument(
        "--falsy-ids-list-all",
        action="store_true",
        help="Treat GET of a falsy id (0) as a request for the whole collection",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        import uvicorn
    except ImportError:
        print("""
ERROR: Server dependencies not installed.

Install them with:
    pip install -e .
""")
        sys.exit(1)

    # The app reads its settings from the environment at startup
    if args.id_strategy:
        os.environ[ENV_ID_STRATEGY] = args.id_strategy
    if args.falsy_ids_list_all:
        os.environ[ENV_FALSY_ID_LISTS_ALL] = "true"
    reset_config_service()

    settings = get_config_service().settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"Record store running at http://{args.host}:{args.port}/records/ (Ctrl+C to stop)")
    uvicorn.run("recordstore.server:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
