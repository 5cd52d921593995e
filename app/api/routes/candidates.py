"""
Candidate API Endpoints
HR and admin views over candidate accounts
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import NotFoundError
from app.core.security import require_roles
from app.models.user import User, UserRole
from app.schemas.user import UserListResponse, UserResponse

router = APIRouter(tags=["Candidates"])

staff_only = require_roles(UserRole.ADMIN, UserRole.HR)


@router.get("", response_model=UserListResponse)
def list_candidates(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _: User = Depends(staff_only),
):
    candidates = db.query(User).filter(
        User.role == UserRole.CANDIDATE.value
    ).order_by(User.created_at.desc()).offset(skip).limit(limit).all()

    return UserListResponse(
        count=len(candidates),
        data=[UserResponse.model_validate(c) for c in candidates],
    )


@router.get("/{candidate_id}", response_model=UserResponse)
def get_candidate(
    candidate_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(staff_only),
):
    candidate = db.query(User).filter(
        User.id == candidate_id,
        User.role == UserRole.CANDIDATE.value
    ).first()
    if not candidate:
        raise NotFoundError("Candidate not found")
    return candidate
