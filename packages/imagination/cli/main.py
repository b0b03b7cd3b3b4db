"""Command-line interface for Imagination.

Commands:
    serve         Run the HTTP API with uvicorn
    generate-one  Generate a single image to disk and print a JSON status line
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
import sys

from dotenv import load_dotenv
from rich.console import Console

from imagination.core.config import AppConfig, configure_logging, load_app_config
from imagination.core.generation.standalone import (
    DEFAULT_PROMPT,
    DEFAULT_SIZE,
    GenerationStatus,
    generate_one,
    timestamp_name,
)
from imagination.core.providers import build_image_provider

console = Console()
err_console = Console(stderr=True)


def _load_config(args: argparse.Namespace) -> AppConfig:
    path = Path(args.config) if args.config else None
    return load_app_config(path)


def emit_status(status: GenerationStatus) -> None:
    """Print the final status as one JSON line (stdout for ok, stderr for errors)."""
    target = console if status.ok else err_console
    target.print_json(data=status.to_dict(), indent=None, highlight=False)


def run_generate_one(args: argparse.Namespace) -> int:
    """Generate one image to disk.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    config = _load_config(args)
    # stdout carries the status line only
    configure_logging(config, level=args.log_level, structured=args.log_json, stream=sys.stderr)

    output_dir = Path(args.out_dir or config.assets_dir).resolve()
    name = args.name or timestamp_name()
    provider = build_image_provider(config.provider)

    status = asyncio.run(
        generate_one(
            prompt=args.prompt or DEFAULT_PROMPT,
            size=args.size or DEFAULT_SIZE,
            name=name,
            output_dir=output_dir,
            provider=provider,
        )
    )
    emit_status(status)
    return 0 if status.ok else 1


def run_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API until interrupted."""
    import uvicorn

    from imagination.api import create_app

    config = _load_config(args)
    configure_logging(config, level=args.log_level, structured=args.log_json)

    host = args.host or config.server.host
    port = args.port or config.server.port
    app = create_app(config)

    provider = app.state.image_provider
    console.print(
        f"[green]Imagination-to-Image server listening on http://localhost:{port}[/green] "
        f"(provider: {provider.name if provider else 'fallback only'})"
    )
    uvicorn.run(app, host=host, port=port, log_config=None)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="imagination",
        description="Imagination - prompt-to-image generation with a deterministic fallback",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config (.json/.yaml, default: imagination.json)",
    )
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    p.add_argument(
        "--log-json",
        action="store_true",
        default=None,
        help="Emit structured JSON logs",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind address (default: from config)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: from config/PORT)")

    gen = sub.add_parser("generate-one", help="Generate one image to disk")
    gen.add_argument("--prompt", "-p", default=DEFAULT_PROMPT, help="Prompt text")
    gen.add_argument("--size", "-s", default=DEFAULT_SIZE, help="Image size WxH")
    gen.add_argument(
        "--name",
        "-n",
        default=None,
        help="Output file name without extension (default: sample-YYYYMMDD-HHMMSS)",
    )
    gen.add_argument(
        "--out-dir",
        default=None,
        help="Output directory (default: config assets_dir)",
    )

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    load_dotenv()
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "serve":
        sys.exit(run_serve(args))
    elif args.cmd == "generate-one":
        sys.exit(run_generate_one(args))


if __name__ == "__main__":
    main()
