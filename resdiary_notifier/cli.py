"""Command-line entry point for a single availability check run."""

import logging
import sys

from pydantic import ValidationError

from resdiary_notifier.config import Settings, get_config, setup_logging
from resdiary_notifier.models import RestaurantCheckResult
from resdiary_notifier.services import AvailabilityClient, PushoverService, SlotChecker

logger = logging.getLogger(__name__)


def run(settings: Settings) -> list[RestaurantCheckResult]:
    """Run one pass over the configured restaurants.

    Args:
        settings: Validated job settings

    Returns:
        One result per restaurant, in configured order
    """
    logger.info(
        f"Checking {', '.join(settings.restaurant_names)} on "
        f"{settings.reservation_date} for {settings.restaurant_covers} covers"
    )

    notifier = None
    if not settings.disable_pushover:
        notifier = PushoverService.from_settings(settings)

    with AvailabilityClient() as client:
        checker = SlotChecker(settings, client, notifier)
        return checker.run()


def main() -> None:
    """Main entry point for the CLI."""
    try:
        # Validate configuration before any network activity
        settings = get_config()
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        print("\nPlease set the required environment variables:", file=sys.stderr)
        print("  PUSHOVER_API_KEY=your_app_token", file=sys.stderr)
        print("  PUSHOVER_RECIPIENT=your_user_key", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings)
    run(settings)
    sys.exit(0)


if __name__ == "__main__":
    main()
