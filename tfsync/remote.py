"""
Remote service version probe and feature gate.

TFE reports its release in the X-TFE-Version header of the ping endpoint.
HCP Terraform does not send the header and always runs the latest release.
"""

from typing import Optional

import requests

from .env import DEFAULT_HTTP_TIMEOUT, Settings
from .logger import get_logger
from .version import MalformedVersion, classify, uses_modern_behavior

PING_PATH = "/api/v2/ping"
VERSION_HEADER = "X-TFE-Version"


class RemoteServiceError(Exception):
    """Raised when the remote service cannot be reached or answers with an error."""

    def __init__(self, address: str, message: str):
        self.address = address
        super().__init__(f"{address}: {message}")


def fetch_remote_version(
    address: str,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
) -> Optional[str]:
    """Fetch the version string reported by the remote service.

    Args:
        address: Base URL of the service, e.g. https://tfe.example.com
        session: Optional requests session to reuse connections
        timeout: Request timeout in seconds

    Returns:
        The reported version, or None when the service does not report one

    Raises:
        RemoteServiceError: On any HTTP error, timeout, or request failure
    """
    logger = get_logger()
    logger.record_version_probe()
    url = address.rstrip("/") + PING_PATH
    http = session or requests
    try:
        resp = http.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "HTTPError"
        logger.record_error(f"HTTPError_{status}")
        logger.error("Version probe failed", url=url, status=status)
        raise RemoteServiceError(address, f"ping failed ({status})") from e
    except requests.exceptions.Timeout as e:
        logger.record_error("Timeout")
        logger.warning("Version probe timed out", url=url)
        raise RemoteServiceError(address, "ping timed out") from e
    except requests.exceptions.RequestException as e:
        logger.record_error("RequestException")
        logger.error("Version probe error", url=url, error=str(e))
        raise RemoteServiceError(address, f"ping error: {e}") from e

    version = resp.headers.get(VERSION_HEADER)
    logger.debug("Version probe complete", url=url, version=version)
    return version or None


def supports_modern_behavior(version: Optional[str]) -> bool:
    """Decide whether the remote service is new enough for the modern code path.

    A missing version means HCP Terraform, which is always current.

    Raises:
        MalformedVersion: If the reported version cannot be classified
    """
    logger = get_logger()
    if version is None:
        logger.record_classification(modern=True)
        return True

    try:
        result = classify(version)
    except MalformedVersion:
        logger.record_error("MalformedVersion")
        logger.error("Unable to classify remote version", version=version)
        raise

    modern = uses_modern_behavior(result)
    logger.record_classification(modern=modern)
    logger.debug(
        "Remote version classified",
        version=version,
        encoded=result.encoded,
        is_semantic=result.is_semantic,
        modern=modern,
    )
    return modern


def probe(settings: Settings, session: Optional[requests.Session] = None) -> bool:
    """Fetch the version of the configured service and evaluate the feature gate."""
    version = fetch_remote_version(settings.address, session=session, timeout=settings.http_timeout)
    return supports_modern_behavior(version)
