"""Session record model shared by all storage backends."""

from datetime import UTC, datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)


class Session(BaseModel):
    """Authorization state for one shop, and optionally one user.

    Offline sessions are keyed per shop; online sessions are keyed per
    shop and user, so a shop may own many sessions. Field names are
    snake_case, and the camelCase names used by the table columns are
    accepted as aliases.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(..., min_length=1, description="Unique session identifier")
    shop: str = Field(..., description="Owning shop domain")
    state: str = Field(..., description="OAuth state nonce")
    is_online: bool = Field(
        default=False, alias="isOnline", description="Online (per-user) access mode"
    )
    scope: str | None = Field(default=None, description="Granted access scopes")
    expires: datetime | None = Field(default=None, description="Expiry instant")
    online_access_info: str | None = Field(
        default=None, alias="onlineAccessInfo", description="Associated user info"
    )
    access_token: str | None = Field(
        default=None, alias="accessToken", description="Shop API access token"
    )

    @field_validator("expires")
    @classmethod
    def _ensure_aware(cls, value: datetime | None) -> datetime | None:
        # Naive datetimes are taken as UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def expires_ms(self) -> int | None:
        """Expiry as integer milliseconds since the epoch, or None."""
        if self.expires is None:
            return None
        return (self.expires - EPOCH) // _ONE_MS

    @staticmethod
    def expires_from_ms(ms: int | None) -> datetime | None:
        """Convert a millisecond epoch to an aware UTC datetime.

        ``None`` and ``0`` both mean the session does not expire.
        """
        if not ms:
            return None
        return EPOCH + timedelta(milliseconds=ms)
