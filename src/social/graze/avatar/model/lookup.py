"""Avatar lookup data model.

Request and result types shared by the resolver, the HTTP handlers and the
command line tool. Every instance lives for a single lookup.
"""

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field


class AccountType(StrEnum):
    """Closed set of providers an avatar can be looked up from."""

    github = "github"
    gravatar = "gravatar"
    mastodon = "mastodon"


class AbsenceReason(StrEnum):
    """Why a lookup produced no avatar.

    Only ``missing_input`` and ``invalid_account_type`` are visible to callers.
    Every provider reason collapses into the same public message.
    """

    missing_input = "missing_input"
    invalid_account_type = "invalid_account_type"
    provider_unreachable = "provider_unreachable"
    provider_status = "provider_status"
    malformed_payload = "malformed_payload"
    no_avatar = "no_avatar"


MISSING_INPUT_MESSAGE = "Missing account_type or identifier"
INVALID_ACCOUNT_TYPE_MESSAGE = "Invalid account_type"
LOOKUP_FAILED_MESSAGE = "Could not fetch the profile image"


class LookupRequest(BaseModel):
    """A validated lookup request."""

    account_type: AccountType
    identifier: str = Field(min_length=1)


class LookupResult(BaseModel):
    """Outcome of a lookup: a photo URL, or the reason there is none."""

    photo: Optional[str] = None
    reason: Optional[AbsenceReason] = None
    account_type: Optional[AccountType] = None

    @classmethod
    def found(
        cls, photo: str, account_type: Optional[AccountType] = None
    ) -> "LookupResult":
        return cls(photo=photo, account_type=account_type)

    @classmethod
    def absent(
        cls, reason: AbsenceReason, account_type: Optional[AccountType] = None
    ) -> "LookupResult":
        return cls(reason=reason, account_type=account_type)

    @property
    def success(self) -> bool:
        return self.photo is not None

    @property
    def outcome(self) -> str:
        """Metric friendly label for this result."""
        if self.reason is None:
            return "found"
        return self.reason.value

    @property
    def message(self) -> Optional[str]:
        """Public error message, or None for a successful lookup."""
        if self.success:
            return None
        if self.reason == AbsenceReason.missing_input:
            return MISSING_INPUT_MESSAGE
        if self.reason == AbsenceReason.invalid_account_type:
            return INVALID_ACCOUNT_TYPE_MESSAGE
        return LOOKUP_FAILED_MESSAGE


class LookupException(Exception):
    """
    Exception raised when a lookup request fails validation.

    Instances are created through the static constructors so that the
    absence reason and message always agree.
    """

    def __init__(self, reason: AbsenceReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason

    @staticmethod
    def missing_input() -> "LookupException":
        """The account type or the identifier is missing or empty."""
        return LookupException(AbsenceReason.missing_input, MISSING_INPUT_MESSAGE)

    @staticmethod
    def invalid_account_type() -> "LookupException":
        """The account type is not one of the supported providers."""
        return LookupException(
            AbsenceReason.invalid_account_type, INVALID_ACCOUNT_TYPE_MESSAGE
        )
