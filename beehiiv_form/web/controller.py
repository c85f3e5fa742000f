"""
구독 폼 상태 컨트롤러
"""

from ..common.subscription import (
    SubscriptionClient, Credentials, PageContext, SubscriptionOutcome,
    Success, InvalidInput, Rejected, NetworkFailure,
)
from ..common.subscription.models import REASON_CONNECTIVITY

CONNECTIVITY_ERROR_MESSAGE = (
    "A network error occurred while submitting your email. "
    "Please check your internet connection and try again."
)
GENERIC_ERROR_MESSAGE = "An error occurred while submitting your email. Please try again."


class FormController:
    """폼 인스턴스 하나의 UI 상태 (email, error, success)"""

    def __init__(self, email: str = ""):
        self.email = email
        self.error = ""
        self.success = False
        self.submitting = False

    def change(self, value: str) -> None:
        self.email = value

    async def submit(
        self,
        client: SubscriptionClient,
        credentials: Credentials,
        context: PageContext,
    ) -> SubscriptionOutcome:
        """제출 처리 - 결과에 따라 상태 전환"""
        self.error = ""
        self.success = False
        self.submitting = True
        try:
            outcome = await client.submit(self.email, credentials, context)
        finally:
            self.submitting = False

        self.apply(outcome)
        return outcome

    def apply(self, outcome: SubscriptionOutcome) -> None:
        if isinstance(outcome, Success):
            self.success = True
            self.error = ""
        elif isinstance(outcome, InvalidInput):
            self.error = outcome.message
        elif isinstance(outcome, Rejected):
            self.error = f"Error {outcome.status_code}: {outcome.message}"
        elif isinstance(outcome, NetworkFailure):
            if outcome.reason == REASON_CONNECTIVITY:
                self.error = CONNECTIVITY_ERROR_MESSAGE
            else:
                self.error = GENERIC_ERROR_MESSAGE
        else:
            raise TypeError(f"알 수 없는 결과 타입: {type(outcome).__name__}")
