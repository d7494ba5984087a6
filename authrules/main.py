import logging

from authrules.config.logging_config import configure_logging
from authrules.config.settings import settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging and report the active field policies."""
    configure_logging(settings.log_level)
    logger.info(f"{settings.app_name} {settings.app_version} ({settings.environment})")

    for rules in (
        settings.get_email_rules(),
        settings.get_username_rules(),
        settings.get_password_rules(),
    ):
        rules.log_configuration()


if __name__ == "__main__":
    main()
