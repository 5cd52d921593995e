from app.schemas.user import (
    LoginRequest, LoginResponse, UserCreate, UserResponse, UserListResponse
)
