"""Download one remote archive."""

from __future__ import annotations

# pylint: disable=broad-exception-caught
import requests

from mastergames.errors import TransportFailure
from mastergames.fetch_result import FetchResult
from mastergames.utils.logger import get_logger

logger = get_logger(__name__)

HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 299


def fetch_archive(
    url: str,
    user_agent: str,
    *,
    timeout_s: float,
    session: requests.Session | None = None,
) -> FetchResult:
    """Fetch an archive payload.

    Any transport problem (non-2xx status, connection error, timeout) comes
    back as a failed ``FetchResult``; nothing is raised to the caller.

    Args:
        url: Fully formed archive URL.
        user_agent: Identifying ``User-Agent`` header value.
        timeout_s: Request timeout in seconds.
        session: Optional session to issue the request with.

    Returns:
        Fetch result holding the payload or a ``TransportFailure``.
    """

    logger.info("Downloading: %s", url)
    getter = session.get if session is not None else requests.get
    try:
        response = getter(url, headers={"User-Agent": user_agent}, timeout=timeout_s)
    except requests.Timeout as exc:
        return _failed(url, f"Timed out after {timeout_s}s", cause=exc)
    except requests.RequestException as exc:
        return _failed(url, f"Request failed: {exc}", cause=exc)
    except Exception as exc:
        return _failed(url, f"Unexpected download error: {exc}", cause=exc)

    status = response.status_code
    if not HTTP_STATUS_OK_MIN <= status <= HTTP_STATUS_OK_MAX:
        return _failed(url, f"HTTP {status}: {response.reason}", status_code=status)

    payload = response.content
    logger.info("Downloaded: %.2f KB", len(payload) / 1024)
    return FetchResult.success(url, payload)


def _failed(
    url: str,
    message: str,
    *,
    status_code: int | None = None,
    cause: BaseException | None = None,
) -> FetchResult:
    logger.error("Download failed for %s: %s", url, message)
    failure = TransportFailure(message, url=url, status_code=status_code, cause=cause)
    return FetchResult.failed(url, failure)
