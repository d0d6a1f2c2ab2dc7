#!/usr/bin/env python3
"""
Application startup script with environment configuration support.
"""

import argparse
import logging
import os
import sys

from travel_lens.config.loader import ConfigLoader, load_config_for_environment
from travel_lens.config.settings import reload_settings
from travel_lens.core.logging import configure_logging

logger = logging.getLogger("travel_lens.run")


def main():
    """Main startup function with environment configuration"""
    parser = argparse.ArgumentParser(description="Travel Lens Relay Server")
    parser.add_argument(
        "--env",
        choices=["development", "staging", "production", "testing"],
        default=None,
        help="Environment to run (default: from ENVIRONMENT env var or development)"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (overrides config)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to (overrides config)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload (overrides config)"
    )
    parser.add_argument(
        "--list-envs",
        action="store_true",
        help="List available environment configurations"
    )
    parser.add_argument(
        "--create-sample",
        help="Create a sample .env file for the specified environment"
    )

    args = parser.parse_args()

    if args.list_envs:
        envs = ConfigLoader.get_available_environments()
        print("Available environment configurations:")
        for env in envs:
            print(f"  - {env}")
        return

    if args.create_sample:
        try:
            sample_file = ConfigLoader.create_sample_env_file(args.create_sample)
            print(f"✓ Sample configuration created: {sample_file}")
        except (ValueError, OSError) as e:
            print(f"✗ Failed to create sample configuration: {e}")
            sys.exit(1)
        return

    try:
        settings = load_config_for_environment(args.env)
    except ValueError as e:
        print(f"✗ Failed to load configuration: {e}")
        sys.exit(1)

    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.reload:
        settings.reload = True

    # The app builds its own settings on import; hand it the same selection
    env_file = ConfigLoader.env_file_for(settings.environment.value)
    if env_file:
        os.environ["ENV_FILE"] = env_file
    os.environ["ENVIRONMENT"] = settings.environment.value
    os.environ["HOST"] = settings.host
    os.environ["PORT"] = str(settings.port)
    reload_settings()

    configure_logging(settings.log_level.value, settings.log_format)
    logger.info(f"Server is running on port {settings.port} ({settings.environment.value})")

    import uvicorn

    uvicorn.run(
        "travel_lens.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.value.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
