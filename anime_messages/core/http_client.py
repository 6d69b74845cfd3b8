"""HTTP client and network functions for anime-messages."""

import logging
import time
import random
import requests
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Constants
DEFAULT_TIMEOUT = 15
RETRY_CODES = {429, 500, 502, 503, 504}
MAX_ATTEMPTS = 3
UA = "anime-messages/0.1"
SCHEMA = "1.0.0"


def _status_of(err: requests.RequestException) -> Optional[int]:
    resp = getattr(err, "response", None)
    return resp.status_code if resp is not None else None


def _req(method: str, url: str, **kw) -> requests.Response:
    """Internal request function with retry logic."""
    timeout = kw.pop("timeout", DEFAULT_TIMEOUT)
    headers = {"User-Agent": UA, **kw.pop("headers", {})}
    backoff = 0.7

    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            r = requests.request(method, url, timeout=timeout, headers=headers, **kw)
            if r.status_code in RETRY_CODES:
                raise requests.HTTPError(f"{r.status_code} upstream", response=r)
            return r
        except requests.HTTPError as e:
            status = _status_of(e)
            if status not in RETRY_CODES or attempt == MAX_ATTEMPTS:
                raise
            logger.warning("%s %s answered %s, retry %d/%d", method, url, status, attempt, MAX_ATTEMPTS - 1)
        except requests.RequestException as e:
            if attempt == MAX_ATTEMPTS:
                raise
            logger.warning("%s %s failed (%s), retry %d/%d", method, url, e, attempt, MAX_ATTEMPTS - 1)
        time.sleep(backoff + random.random() * 0.4)
        backoff *= 2


def http_get(url: str, **kw) -> requests.Response:
    return _req("GET", url, **kw)


def http_post(url: str, **kw) -> requests.Response:
    return _req("POST", url, **kw)


def err_payload(source: str, code: str, message: str) -> Dict[str, Any]:
    return {"schemaVersion": SCHEMA, "error": {"code": code, "message": message, "source": source}}


def err_from_exception(source: str, e: Exception) -> Dict[str, Any]:
    """Map a lookup failure onto the error payload used by the tools."""
    # JSONDecodeError is also a ValueError, KeyError and IndexError are LookupErrors
    if isinstance(e, requests.JSONDecodeError):
        return err_payload(source, "UPSTREAM_INVALID_JSON", str(e))
    if isinstance(e, requests.Timeout):
        return err_payload(source, "TIMEOUT", "Upstream timed out")
    if isinstance(e, requests.HTTPError):
        return err_payload(source, f"UPSTREAM_{_status_of(e) or 0}", str(e))
    if isinstance(e, LookupError) and not isinstance(e, (KeyError, IndexError)):
        return err_payload(source, "NOT_FOUND", str(e))
    if isinstance(e, ValueError):
        return err_payload(source, "BAD_REQUEST", str(e))
    return err_payload(source, "UNEXPECTED", str(e))
