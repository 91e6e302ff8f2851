"""Status classification and body parsing for SEC responses."""

import logging

from pydantic import ValidationError

from sec_client.errors import ApiError, ParseError, RateLimitExceeded

logger = logging.getLogger(__name__)


def parse_retry_after(headers) -> int | None:
    """Seconds from a ``Retry-After`` header, or None if absent or not an integer.

    HTTP-date values are not interpreted.
    """
    value = headers.get("retry-after")
    if value is None:
        return None
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def check_response(response, url: str) -> bytes:
    """Return the body of a 2xx response, otherwise raise the matching error."""
    if response.is_success:
        return response.body

    if response.status == 429:
        retry_after = parse_retry_after(response.headers)
        logger.error(f"Rate limited by SEC on {url} (retry after: {retry_after})")
        raise RateLimitExceeded(retry_after)

    logger.error(f"Request to {url} failed with status {response.status}")
    raise ApiError(response.status, f"Request to {url} failed with status {response.status}")


def parse_model(model, body: bytes, url: str):
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise ParseError(f"Unexpected {model.__name__} payload from {url}: {e}") from e
