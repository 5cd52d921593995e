"""
Employee API Endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import NotFoundError
from app.core.security import require_roles
from app.models.user import User, UserRole
from app.schemas.user import UserListResponse, UserResponse

router = APIRouter(tags=["Employees"])

staff_only = require_roles(UserRole.ADMIN, UserRole.HR)


@router.get("", response_model=UserListResponse)
def list_employees(
    is_active: Optional[bool] = None,
    db: Session = Depends(get_db),
    _: User = Depends(staff_only),
):
    query = db.query(User).filter(User.role == UserRole.EMPLOYEE.value)
    if is_active is not None:
        query = query.filter(User.is_active == is_active)

    employees = query.order_by(User.name).all()
    return UserListResponse(
        count=len(employees),
        data=[UserResponse.model_validate(e) for e in employees],
    )


@router.get("/{employee_id}", response_model=UserResponse)
def get_employee(
    employee_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(staff_only),
):
    employee = db.query(User).filter(
        User.id == employee_id,
        User.role == UserRole.EMPLOYEE.value
    ).first()
    if not employee:
        raise NotFoundError("Employee not found")
    return employee
