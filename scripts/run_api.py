#!/usr/bin/env python
"""
Deathbat Twin Finder - API Server
==================================
Starts the twin finder API under Uvicorn.

Usage:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080 --config config/twin_config.yml

The catalog named in the config is loaded once per worker at startup.
OPENSEA_API_KEY may be set in the environment or a local .env file.
"""

import os
import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from catalog.settings import CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(description='Deathbat Twin Finder API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host to bind to (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=6660, help='Port to bind to (default: 6660)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload for development')
    parser.add_argument('--workers', type=int, default=1, help='Worker processes (default: 1)')
    parser.add_argument(
        '--config',
        default=os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH),
        help=f'Path to config file (default: ${CONFIG_PATH_ENV} or {DEFAULT_CONFIG_PATH})'
    )
    parser.add_argument(
        '--log-level',
        default='info',
        choices=['debug', 'info', 'warning', 'error'],
        help='Uvicorn logging level (default: info)'
    )
    args = parser.parse_args()

    if not Path(args.config).exists():
        print(f"ERROR: Config not found: {args.config}")
        sys.exit(1)

    # Workers and the reloader import api.main fresh and read the config path from env
    os.environ[CONFIG_PATH_ENV] = args.config

    print(f"Deathbat Twin Finder API on http://{args.host}:{args.port} (config: {args.config})")

    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=1 if args.reload else args.workers,
        log_level=args.log_level
    )


if __name__ == '__main__':
    main()
