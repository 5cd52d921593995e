"""
Onboarding API Endpoints
"""
from fastapi import APIRouter, Depends

from app.core.security import get_current_user
from app.models.user import User

router = APIRouter(tags=["Onboarding"])


@router.get("")
def onboarding_index(user: User = Depends(get_current_user)):
    """Onboarding module entry point for the signed-in user"""
    return {
        "success": True,
        "module": "onboarding",
        "user_id": user.id,
        "role": user.role,
    }
