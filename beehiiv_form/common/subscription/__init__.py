"""구독 클라이언트 패키지"""

from .client import SubscriptionClient, is_valid_email
from .models import (
    Credentials, PageContext, SubscriptionRequest, SubscriptionOutcome,
    Success, InvalidInput, Rejected, NetworkFailure,
)

__all__ = [
    "SubscriptionClient", "is_valid_email",
    "Credentials", "PageContext", "SubscriptionRequest", "SubscriptionOutcome",
    "Success", "InvalidInput", "Rejected", "NetworkFailure",
]
