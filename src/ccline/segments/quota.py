"""Daily API spend segment backed by a remote quota endpoint."""

import logging
from datetime import datetime
from typing import Optional

import requests

from ccline.segments.base import Segment
from ccline.services.credentials import QuotaCredentials, resolve_quota_credentials
from ccline.types.config import SegmentKind
from ccline.types.input import InputData
from ccline.types.quota import ApiQuota

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_S = 5
ANTHROPIC_HOST = "api.anthropic.com"
ANTHROPIC_VERSION = "2023-06-01"
USAGE_PATH = "/v1/dashboard/usage"

TODAY_PREFIX = "Today: $"
UNAVAILABLE = "◔ Quota: unavailable"


class QuotaSegment(Segment):
    """Today's spend from either a custom budget endpoint or the usage API.

    Without a resolvable API key the segment is disabled and renders
    nothing. Exactly one fetch is made per render, with no caching.
    """

    kind = SegmentKind.QUOTA

    def __init__(self, enabled: bool = True, credentials: QuotaCredentials | None = None):
        super().__init__(enabled)
        self._credentials = credentials if credentials is not None else resolve_quota_credentials()

    @property
    def enabled(self) -> bool:
        return self._enabled and self._credentials.api_key is not None

    def render(self, input_data: InputData) -> str:
        if not self.enabled:
            return ""

        quota = self.fetch_quota()
        if quota is None:
            return UNAVAILABLE
        return format_quota(quota)

    def fetch_quota(self) -> Optional[ApiQuota]:
        api_key = self._credentials.api_key
        if api_key is None:
            return None

        info_url = self._credentials.info_url
        if info_url:
            try:
                response = requests.get(
                    info_url,
                    headers={
                        "Authorization": f"Bearer {api_key}",
                        "accept": "*/*",
                        "content-type": "application/json",
                    },
                    timeout=REQUEST_TIMEOUT_S,
                )
            except requests.RequestException as e:
                logger.debug("Quota info request to %s failed: %s", info_url, e)
                return None

            if not response.ok:
                logger.debug("Quota info endpoint %s returned %d", info_url, response.status_code)
                return None
            return _parse_budget_response(response)

        return self._fetch_dashboard_usage(api_key)

    def _fetch_dashboard_usage(self, api_key: str) -> Optional[ApiQuota]:
        base_url = self._credentials.base_url
        if ANTHROPIC_HOST in base_url:
            headers = {"x-api-key": api_key, "anthropic-version": ANTHROPIC_VERSION}
        else:
            # Proxies differ in which auth header they accept
            headers = {"Authorization": f"Bearer {api_key}", "x-api-key": api_key}

        url = f"{base_url}{USAGE_PATH}"
        try:
            response = requests.get(url, headers=headers, timeout=REQUEST_TIMEOUT_S)
        except requests.RequestException as e:
            logger.debug("Usage request to %s failed: %s", url, e)
            return None

        if not response.ok:
            logger.debug("Usage endpoint %s returned %d", url, response.status_code)
            return None
        return _parse_usage_response(response)


def format_quota(quota: ApiQuota) -> str:
    return f"{TODAY_PREFIX}{quota.used:.2f}"


def parse_today_spend(rendered: str) -> float:
    """Read the spend back out of a rendered quota segment; 0.0 if absent."""
    if not rendered.startswith(TODAY_PREFIX):
        return 0.0
    try:
        return float(rendered[len(TODAY_PREFIX):].strip())
    except ValueError:
        return 0.0


def _parse_budget_response(response: requests.Response) -> Optional[ApiQuota]:
    """Custom endpoint: daily budget and spend as decimal strings."""
    try:
        data = response.json()
        daily_budget = float(data["daily_budget_usd"])
    except (ValueError, TypeError, KeyError) as e:
        logger.debug("Malformed quota info response: %s", e)
        return None

    daily_spent = _parse_amount(data.get("daily_spent_usd"))
    opus_enabled = data.get("opus_enabled")
    return ApiQuota(
        remaining=daily_budget - daily_spent,
        total=daily_budget,
        used=daily_spent,
        timestamp=datetime.now(),
        opus_enabled=opus_enabled if isinstance(opus_enabled, bool) else None,
        monthly_spent=_parse_amount(data.get("monthly_spent_usd")),
    )


def _parse_usage_response(response: requests.Response) -> Optional[ApiQuota]:
    """Standard endpoint: remaining credit and credit limit in USD."""
    try:
        data = response.json()
        remaining = float(data["remaining_credit_in_usd"])
        limit = float(data["credit_limit_in_usd"])
    except (ValueError, TypeError, KeyError) as e:
        logger.debug("Malformed usage response: %s", e)
        return None

    return ApiQuota(
        remaining=remaining,
        total=limit,
        used=limit - remaining,
        timestamp=datetime.now(),
    )


def _parse_amount(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0
