"""
Current-user schemas.
"""

from typing import Optional

from app.schemas.common import ApiModel, UtcDatetime


class UserResponse(ApiModel):
    id: str
    email: Optional[str]
    name: Optional[str]
    created_at: UtcDatetime


class MeResponse(ApiModel):
    user: UserResponse
