"""
Current-user endpoint.
"""

from fastapi import APIRouter, Depends

from app.dependencies import get_current_user
from app.models import User
from app.schemas.user import MeResponse, UserResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=MeResponse)
def read_me(user: User = Depends(get_current_user)):
    """Return the user resolved from the identity header."""
    return MeResponse(user=UserResponse.model_validate(user))
