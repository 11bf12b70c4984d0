#!/usr/bin/env python3
"""
Start the NZ Spelling Converter API, or manage its environment files.

    python run.py --env production --port 8080
    python run.py --validate-env staging
"""

import sys
import argparse

from app.config.loader import ConfigLoader, load_config_for_environment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="NZ Spelling Converter API Server")
    parser.add_argument(
        "--env",
        choices=["development", "staging", "production", "testing"],
        help="Environment to run (default: ENVIRONMENT env var or development)",
    )
    parser.add_argument("--host", help="Host to bind to (overrides config)")
    parser.add_argument("--port", type=int, help="Port to bind to (overrides config)")
    parser.add_argument("--workers", type=int, help="Worker processes (overrides config)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    tools = parser.add_mutually_exclusive_group()
    tools.add_argument("--list-envs", action="store_true", help="List available .env.<environment> files")
    tools.add_argument("--validate-env", metavar="ENV", help="Validate an environment and its data files")
    tools.add_argument("--create-sample", metavar="ENV", help="Write .env.<ENV>.sample")
    return parser


def run_tool(args) -> bool:
    """Handle the non-server options. Returns True if one was given."""
    if args.list_envs:
        print("Available environment configurations:")
        for env in ConfigLoader.get_available_environments():
            print(f"  - {env}")
    elif args.validate_env:
        if not ConfigLoader.validate_environment_config(args.validate_env):
            print(f"✗ Environment '{args.validate_env}' is invalid or its data files are missing")
            sys.exit(1)
        print(f"✓ Environment '{args.validate_env}' configuration is valid")
    elif args.create_sample:
        try:
            print(f"✓ Sample configuration created: {ConfigLoader.create_sample_env_file(args.create_sample)}")
        except (OSError, ValueError) as e:
            print(f"✗ Failed to create sample configuration: {e}")
            sys.exit(1)
    else:
        return False
    return True


def main():
    args = build_parser().parse_args()
    if run_tool(args):
        return

    try:
        settings = load_config_for_environment(args.env)
    except ValueError as e:
        print(f"✗ Failed to load configuration: {e}")
        sys.exit(1)

    overrides = {"host": args.host, "port": args.port, "workers": args.workers}
    for name, value in overrides.items():
        if value:
            setattr(settings, name, value)
    if args.reload:
        settings.reload = True

    print(f"Starting {settings.app_name} v{settings.app_version} ({settings.environment.value})")
    print(f"   Listening on {settings.host}:{settings.port} with {settings.workers} worker(s)")
    print(f"   Corrections file: {settings.get_corrections_path()}")

    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=1 if settings.reload else settings.workers,
        log_level=settings.log_level.value.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
