"""
Learning materials API Endpoints
"""
from fastapi import APIRouter, Depends

from app.core.security import get_current_user
from app.models.user import User

router = APIRouter(tags=["Learning"])


@router.get("")
def learning_index(user: User = Depends(get_current_user)):
    return {"success": True, "module": "learning", "user_id": user.id}
