"""ResDiary availability search client."""

import logging

import httpx
from pydantic import ValidationError

from resdiary_notifier.models import AvailabilityResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://booking.resdiary.com/api/Restaurant"

# Fixed query parameters sent with every search
SEARCH_PARAMS = {
    "channelCode": "ONLINE",
    "areaId": "0",
    "availabilityType": "Reservation",
}


class AvailabilityError(Exception):
    """Raised when a restaurant's availability could not be fetched or decoded."""

    def __init__(self, restaurant: str, message: str) -> None:
        super().__init__(f"{restaurant}: {message}")
        self.restaurant = restaurant


class AvailabilityClient:
    """Client for the public ResDiary AvailabilitySearch endpoint.

    One GET per call, no authentication, no retries. The underlying
    httpx client can be supplied (e.g. with a mock transport); otherwise one
    is created and owned by this instance.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        """Initialize the availability client."""
        self._owns_client = client is None
        self._client = client or httpx.Client()
        self.base_url = base_url.rstrip("/")

    def search_url(self, restaurant: str) -> str:
        return f"{self.base_url}/{restaurant}/AvailabilitySearch"

    def search(self, restaurant: str, date: str, covers: str) -> AvailabilityResponse:
        """Fetch availability for one restaurant.

        Args:
            restaurant: ResDiary restaurant identifier, e.g. ChesilRectory
            date: Reservation date, YYYY-MM-DD
            covers: Party size, sent verbatim

        Returns:
            Decoded availability response

        Raises:
            AvailabilityError: On transport failure, non-2xx status, or a body
                that does not match the expected shape
        """
        url = self.search_url(restaurant)
        params = {"date": date, "covers": covers, **SEARCH_PARAMS}

        logger.debug(f"GET {url} params={params}")
        try:
            response = self._client.get(url, params=params)
        except httpx.HTTPError as e:
            msg = f"request failed: {e}"
            raise AvailabilityError(restaurant, msg) from e

        if not response.is_success:
            msg = f"received non-OK HTTP status: {response.status_code} {response.reason_phrase}"
            raise AvailabilityError(restaurant, msg)

        try:
            return AvailabilityResponse.model_validate_json(response.content)
        except ValidationError as e:
            msg = f"error parsing JSON: {e}"
            raise AvailabilityError(restaurant, msg) from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "AvailabilityClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
