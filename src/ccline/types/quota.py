"""Remote quota types."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class ApiQuota:
    remaining: float
    total: float
    used: float
    timestamp: datetime = field(default_factory=datetime.now)
    opus_enabled: Optional[bool] = None
    monthly_spent: Optional[float] = None
