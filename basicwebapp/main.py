"""Main module entrypoint for local runtime execution.

This module validates startup configuration, runs database migrations and
launches the selected tier with uvicorn.
"""

import argparse

import uvicorn

from basicwebapp.bootstrap import (
    bootstrap_create_api_application,
    bootstrap_create_web_application,
    bootstrap_run_migrations,
)
from basicwebapp.config import TierSettings, config_configure_logging, config_load_api_settings, config_load_web_settings
from basicwebapp.domain import MigrationRunError


def main() -> None:
    """Run the selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        MigrationRunError: Raised when migrations fail while starting a tier.
        SystemExit: Raised with code 1 when the `migrate` command fails.
    """

    argument_parser = argparse.ArgumentParser(description="BasicWebApp runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "web", "migrate"),
        help="Runtime command: `api` starts the API tier, `web` starts the web tier, "
        "`migrate` applies database migrations for `--tier` and exits",
        type=str,
    )
    argument_parser.add_argument(
        "--tier",
        dest="tier",
        default="api",
        choices=("api", "web"),
        help="Tier whose database configuration `migrate` uses",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    uses_web_settings = parsed_arguments.command == "web" or (
        parsed_arguments.command == "migrate" and parsed_arguments.tier == "web"
    )
    settings: TierSettings = config_load_web_settings() if uses_web_settings else config_load_api_settings()
    config_configure_logging(settings.log_level)

    if parsed_arguments.command == "migrate":
        try:
            bootstrap_run_migrations(settings)
        except MigrationRunError as error:
            raise SystemExit(1) from error
        return

    if parsed_arguments.command == "web":
        application = bootstrap_create_web_application(settings)
    else:
        application = bootstrap_create_api_application(settings)

    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
