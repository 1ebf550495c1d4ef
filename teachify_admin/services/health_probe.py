"""Probe a deployed Teachify back end through its health endpoint."""

import logging
from typing import Any, Dict, Optional

import httpx

from teachify_admin.exceptions import HealthCheckFailed

logger = logging.getLogger(__name__)

HEALTH_PATH = "/api/health"


def check_health(
    base_url: str,
    *,
    timeout: float = 10.0,
    client: Optional[httpx.Client] = None,
) -> Dict[str, Any]:
    url = base_url.rstrip("/") + HEALTH_PATH
    owns_client = client is None
    http = client or httpx.Client(timeout=timeout)
    try:
        response = http.get(url)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPStatusError as exc:
        raise HealthCheckFailed(
            f"{url} returned HTTP {exc.response.status_code}",
            status_code=exc.response.status_code,
        ) from exc
    except httpx.HTTPError as exc:
        raise HealthCheckFailed(f"{url} is unreachable: {exc}") from exc
    except ValueError as exc:
        raise HealthCheckFailed(f"{url} did not return JSON") from exc
    finally:
        if owns_client:
            http.close()

    if not isinstance(payload, dict):
        raise HealthCheckFailed(f"{url} returned {type(payload).__name__}, expected a JSON object")
    if payload.get("status") != "OK":
        raise HealthCheckFailed(f"{url} reported status {payload.get('status')!r}")
    logger.info("Backend healthy at %s", url)
    return payload
