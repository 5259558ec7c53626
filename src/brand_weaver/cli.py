from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from brand_weaver.config import configure_logging, get_settings
from brand_weaver.generator import generate
from brand_weaver.models import DesignConfig, GeneratedBundle, ProfileData


def _load_json(path: Path) -> object:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def write_bundle(bundle: GeneratedBundle, out_dir: Path) -> list[Path]:
    """Write every bundle file under *out_dir* and return the written paths."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name in sorted(bundle):
        target = out_dir / name
        target.write_text(bundle[name], encoding="utf-8")
        written.append(target)
    return written


def run_generate(args: argparse.Namespace) -> int:
    """Generate a site from a profile JSON file and a design config JSON file.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        profile = ProfileData.model_validate(_load_json(args.profile))
        config = DesignConfig.model_validate(_load_json(args.config))
    except (OSError, json.JSONDecodeError) as exc:
        print(f"❌ Could not read input: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"❌ Invalid input:\n{exc}", file=sys.stderr)
        return 1

    base_url = args.base_url or get_settings().site_url
    bundle = generate(profile, config, year=args.year, base_url=base_url)
    written = write_bundle(bundle, args.output)

    print(f"✅ Generated {len(written)} files in {args.output}")
    for path in written:
        print(f"  - {path.name} ({path.stat().st_size} bytes)")
    return 0


def run_serve(args: argparse.Namespace) -> int:
    """Run the API with uvicorn."""
    from brand_weaver.api.main import main as serve

    serve(host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brand-weaver",
        description="Turn a LinkedIn profile into a static personal website.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: from env)")
    commands = parser.add_subparsers(dest="command", required=True)

    gen = commands.add_parser("generate", help="Generate a site from JSON files")
    gen.add_argument("profile", type=Path, help="ProfileData JSON file")
    gen.add_argument("config", type=Path, help="DesignConfig JSON file")
    gen.add_argument("-o", "--output", type=Path, required=True, help="Output directory")
    gen.add_argument("--year", type=int, default=None, help="Copyright year (default: current)")
    gen.add_argument("--base-url", default=None, help="Public site URL for sitemap/canonical")
    gen.set_defaults(handler=run_generate)

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve.set_defaults(handler=run_serve)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        return args.handler(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
