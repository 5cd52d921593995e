"""
HR Database API Endpoints
Staff-only access to the HR record store
"""
from fastapi import APIRouter, Depends

from app.core.security import require_roles
from app.models.user import User, UserRole

router = APIRouter(tags=["HR Database"])


@router.get("")
def hr_database_index(_: User = Depends(require_roles(UserRole.ADMIN, UserRole.HR))):
    return {"success": True, "module": "hr-database"}
