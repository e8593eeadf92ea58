"""
fsbox Server CLI - Start the sandboxed filesystem MCP server.

Usage:
    fsbox-server                              # stdio transport, root from env
    fsbox-server --base-dir ./workspace       # Custom initial root
    fsbox-server --env /path/to/.env          # Custom env file
    fsbox-server --transport http --port 8000 # Streamable HTTP transport
"""

import argparse
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _apply_env_file(env_path: Path) -> None:
    """Load environment variables from a .env file."""
    from dotenv import load_dotenv

    if not env_path.exists():
        print(f"Error: env file not found: {env_path}", file=sys.stderr)
        sys.exit(2)

    load_dotenv(dotenv_path=str(env_path))


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for fsbox-server CLI."""
    parser = argparse.ArgumentParser(
        prog="fsbox-server",
        description="Serve sandboxed filesystem tools over the Model Context Protocol.",
    )
    parser.add_argument(
        "--base-dir",
        dest="base_dir",
        default=None,
        help="Initial base directory (default: MCP_FILESYSTEM_BASE_DIR env var or ./uploads).",
    )
    parser.add_argument(
        "--env",
        dest="env_file",
        default=None,
        help="Path to .env file (default: .env in current directory, if present).",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="MCP transport (default: stdio).",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to for http/sse (default: 127.0.0.1 or FSBOX_HOST env var).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for http/sse (default: 8000 or PORT env var).",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Log level override (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit.",
    )
    return parser


def run_server(args: argparse.Namespace) -> int:
    """Configure logging and run the MCP server with the given arguments."""
    from fsbox.core.logging_config import setup_logging
    from fsbox.mcp.filesystem.main import serve
    from fsbox.modules.config import config_manager

    # Settings must be re-read after .env and CLI overrides touched the environment
    config_manager.reload_configs()
    setup_logging()

    failed = [name for name, ok in config_manager.validate_config().items() if not ok]
    if failed:
        logger.warning(f"Configuration checks failed: {', '.join(failed)}")

    host = port = None
    if args.transport != "stdio":
        host = args.host or os.getenv("FSBOX_HOST", "127.0.0.1")
        port = args.port or int(os.getenv("PORT", "8000"))

    return serve(transport=args.transport, host=host, port=port)


def main() -> None:
    """Main entry point for fsbox-server CLI."""
    parser = build_parser()
    args = parser.parse_args()

    if args.version:
        from fsbox.version import VERSION
        print(f"fsbox-server version {VERSION}")
        sys.exit(0)

    # Apply env file first (before any other imports that might use env vars)
    if args.env_file:
        _apply_env_file(Path(args.env_file).expanduser())
    else:
        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            _apply_env_file(cwd_env)

    if args.base_dir:
        os.environ["MCP_FILESYSTEM_BASE_DIR"] = args.base_dir
    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level

    sys.exit(run_server(args))


if __name__ == "__main__":
    main()
