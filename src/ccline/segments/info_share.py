"""Team spend segment: peers' spend today plus the user's own."""

import logging
import math
from typing import Optional

import requests

from ccline.segments.base import Segment
from ccline.segments.quota import REQUEST_TIMEOUT_S, QuotaSegment, parse_today_spend
from ccline.services.credentials import (
    InfoShareCredentials,
    resolve_info_share_credentials,
)
from ccline.types.config import SegmentKind
from ccline.types.input import InputData

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "◔ Team: N/A"


class InfoShareSegment(Segment):
    """Team total = sum of peers' ``spent_usd_today`` + the user's own spend.

    The user's own spend comes from rendering ``quota_segment`` and reading
    the ``Today: $<amount>`` figure back out of it; a quota segment that
    renders anything else contributes 0. Without both a share URL and a
    token the segment is disabled and makes no network call.
    """

    kind = SegmentKind.INFO_SHARE

    def __init__(
        self,
        enabled: bool = True,
        quota_segment: QuotaSegment | None = None,
        credentials: InfoShareCredentials | None = None,
    ):
        super().__init__(enabled)
        self._credentials = (
            credentials if credentials is not None else resolve_info_share_credentials()
        )
        self._quota_segment = quota_segment

    @property
    def enabled(self) -> bool:
        return self._enabled and self._credentials.complete

    def render(self, input_data: InputData) -> str:
        if not self.enabled:
            return ""

        peers_total = self.fetch_peers_total()
        if peers_total is None:
            return NOT_AVAILABLE

        quota_segment = self._quota_segment or QuotaSegment()
        own_total = parse_today_spend(quota_segment.render(input_data))
        return f"Team: ${peers_total + own_total:.2f}"

    def fetch_peers_total(self) -> Optional[float]:
        url = self._credentials.info_share_url
        try:
            response = requests.get(
                url,
                headers={
                    "Authorization": f"Bearer {self._credentials.token}",
                    "accept": "*/*",
                    "content-type": "application/json",
                },
                timeout=REQUEST_TIMEOUT_S,
            )
        except requests.RequestException as e:
            logger.debug("Info share request to %s failed: %s", url, e)
            return None

        if not response.ok:
            logger.debug("Info share endpoint %s returned %d", url, response.status_code)
            return None

        try:
            peers = response.json()["peers"]
        except (ValueError, TypeError, KeyError) as e:
            logger.debug("Malformed info share response: %s", e)
            return None
        if not isinstance(peers, list):
            return None

        return sum(_peer_spend(peer) for peer in peers)


def _peer_spend(peer) -> float:
    if not isinstance(peer, dict):
        return 0.0
    try:
        spent = float(peer.get("spent_usd_today"))
    except (TypeError, ValueError):
        return 0.0
    return spent if math.isfinite(spent) else 0.0
