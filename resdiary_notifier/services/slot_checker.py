"""Availability check orchestration: fetch, filter, notify."""

import logging

from resdiary_notifier.config import Settings
from resdiary_notifier.models import CheckStatus, RestaurantCheckResult
from resdiary_notifier.services.availability_client import (
    AvailabilityClient,
    AvailabilityError,
)
from resdiary_notifier.services.pushover_service import (
    PushoverService,
    build_slot_message,
)
from resdiary_notifier.services.slot_filter import is_slot_acceptable

logger = logging.getLogger(__name__)


class SlotChecker:
    """Runs one sequential pass over the configured restaurants.

    Each restaurant is queried, its slots filtered against the cutoff, and
    acceptable slots notified before the next restaurant is queried. A
    failed query is logged and skipped.
    """

    def __init__(
        self,
        settings: Settings,
        client: AvailabilityClient,
        notifier: PushoverService | None = None,
    ) -> None:
        """Initialize the slot checker.

        Args:
            settings: Job settings
            client: Availability client used for every restaurant
            notifier: Pushover service; not used when notifications are disabled
        """
        self.settings = settings
        self.client = client
        self.notifier = notifier

    @property
    def notifications_enabled(self) -> bool:
        return not self.settings.disable_pushover and self.notifier is not None

    def check_restaurant(self, restaurant: str) -> RestaurantCheckResult:
        """Query one restaurant and process its slots in API order."""
        date = self.settings.reservation_date

        try:
            response = self.client.search(
                restaurant, date, self.settings.restaurant_covers
            )
        except AvailabilityError as e:
            logger.error(f"Availability check failed for {restaurant}: {e}")
            return RestaurantCheckResult(
                restaurant=restaurant, status=CheckStatus.FAILED, error=str(e)
            )

        if not response.time_slots:
            logger.info(f"no slots found at {restaurant} for {date}")
            return RestaurantCheckResult(
                restaurant=restaurant, status=CheckStatus.NO_SLOTS
            )

        accepted = []
        rejected = []
        sent = 0
        for slot in response.time_slots:
            if not is_slot_acceptable(
                slot.time_slot,
                self.settings.reservation_ignore_threshold_hour,
                self.settings.reservation_ignore_threshold_minute,
            ):
                logger.info(
                    f"unacceptable timeslot found at {restaurant}: {slot.display_time}"
                )
                rejected.append(slot)
                continue

            accepted.append(slot)
            message = build_slot_message(restaurant, slot.display_time)
            logger.info(message)
            if self.notifications_enabled and self.notifier.send_message(message):
                sent += 1

        return RestaurantCheckResult(
            restaurant=restaurant,
            status=CheckStatus.SLOTS_FOUND,
            accepted=accepted,
            rejected=rejected,
            notifications_sent=sent,
        )

    def run(self) -> list[RestaurantCheckResult]:
        """Check every configured restaurant in order."""
        results = [
            self.check_restaurant(restaurant)
            for restaurant in self.settings.restaurant_names
        ]

        failed = sum(1 for r in results if r.status == CheckStatus.FAILED)
        accepted = sum(len(r.accepted) for r in results)
        sent = sum(r.notifications_sent for r in results)
        logger.info(
            f"Checked {len(results)} restaurant(s) for {self.settings.reservation_date}: "
            f"{accepted} acceptable slot(s), {sent} notification(s) sent, {failed} failed"
        )
        return results
