"""Auth, admin and role-restricted collaborator routers."""

import pytest
from fastapi.testclient import TestClient

from app.core.security import create_access_token, hash_password
from app.main import create_app
from app.models.user import User, UserRole
from app.services.admin_seeder import seed_admin


@pytest.fixture
def api(make_settings) -> TestClient:
    return TestClient(create_app(make_settings()), raise_server_exceptions=False)


def _add_user(db, email: str, role: UserRole, password: str = "pass1234") -> User:
    user = User(name=email.split("@")[0], email=email, password_hash=hash_password(password), role=role.value)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _auth(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user)}"}


class TestLogin:
    def test_seeded_admin_can_log_in(self, api, db, make_settings) -> None:
        settings = make_settings(ADMIN_EMAIL="admin@example.com", ADMIN_PASSWORD="Admin@123")
        seed_admin(db, settings)

        response = api.post("/api/auth/login", json={"email": " Admin@Example.com ", "password": "Admin@123"})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["token"]
        assert body["user"]["role"] == "admin"

    def test_wrong_password(self, api, db) -> None:
        _add_user(db, "emp@example.com", UserRole.EMPLOYEE)
        response = api.post("/api/auth/login", json={"email": "emp@example.com", "password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid email or password", "error": {}}

    def test_deactivated_account(self, api, db) -> None:
        user = _add_user(db, "gone@example.com", UserRole.EMPLOYEE)
        user.is_active = False
        db.commit()

        response = api.post("/api/auth/login", json={"email": "gone@example.com", "password": "pass1234"})
        assert response.status_code == 401

    def test_me(self, api, db) -> None:
        user = _add_user(db, "me@example.com", UserRole.CANDIDATE)
        response = api.get("/api/auth/me", headers=_auth(user))
        assert response.status_code == 200
        assert response.json()["email"] == "me@example.com"

    def test_me_requires_token(self, api, db) -> None:
        response = api.get("/api/auth/me")
        assert response.status_code == 401
        assert response.json()["message"] == "Authentication required"

    def test_me_rejects_garbage_token(self, api, db) -> None:
        response = api.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"


class TestAdminUsers:
    def test_admin_creates_and_lists_users(self, api, db) -> None:
        admin = _add_user(db, "boss@example.com", UserRole.ADMIN)

        created = api.post(
            "/api/admin/users",
            json={"name": "Grace", "email": "Grace@Example.com", "password": "pw", "role": "hr"},
            headers=_auth(admin),
        )
        assert created.status_code == 201
        assert created.json()["email"] == "grace@example.com"
        assert created.json()["role"] == "hr"

        listed = api.get("/api/admin/users", headers=_auth(admin))
        assert listed.json()["count"] == 2

    def test_duplicate_email_conflicts(self, api, db) -> None:
        admin = _add_user(db, "boss@example.com", UserRole.ADMIN)
        response = api.post(
            "/api/admin/users",
            json={"name": "Boss", "email": "boss@example.com", "password": "pw"},
            headers=_auth(admin),
        )
        assert response.status_code == 409

    def test_non_admin_is_forbidden(self, api, db) -> None:
        hr = _add_user(db, "hr@example.com", UserRole.HR)
        response = api.get("/api/admin/users", headers=_auth(hr))
        assert response.status_code == 403
        assert response.json()["success"] is False


class TestRoleDirectories:
    def test_hr_lists_candidates_only(self, api, db) -> None:
        hr = _add_user(db, "hr@example.com", UserRole.HR)
        _add_user(db, "cand@example.com", UserRole.CANDIDATE)
        _add_user(db, "emp@example.com", UserRole.EMPLOYEE)

        response = api.get("/api/candidates", headers=_auth(hr))
        assert response.status_code == 200
        assert [u["email"] for u in response.json()["data"]] == ["cand@example.com"]

    def test_candidate_lookup_checks_role(self, api, db) -> None:
        hr = _add_user(db, "hr@example.com", UserRole.HR)
        emp = _add_user(db, "emp@example.com", UserRole.EMPLOYEE)

        response = api.get(f"/api/candidates/{emp.id}", headers=_auth(hr))
        assert response.status_code == 404
        assert response.json()["message"] == "Candidate not found"

        response = api.get(f"/api/employees/{emp.id}", headers=_auth(hr))
        assert response.status_code == 200

    def test_employee_cannot_browse_employees(self, api, db) -> None:
        emp = _add_user(db, "emp@example.com", UserRole.EMPLOYEE)
        response = api.get("/api/employees", headers=_auth(emp))
        assert response.status_code == 403

    def test_employees_filter_by_active_flag(self, api, db) -> None:
        hr = _add_user(db, "hr@example.com", UserRole.HR)
        _add_user(db, "active@example.com", UserRole.EMPLOYEE)
        gone = _add_user(db, "gone@example.com", UserRole.EMPLOYEE)
        gone.is_active = False
        db.commit()

        response = api.get("/api/employees", params={"is_active": "false"}, headers=_auth(hr))
        assert response.status_code == 200
        assert [u["email"] for u in response.json()["data"]] == ["gone@example.com"]

        response = api.get("/api/employees", headers=_auth(hr))
        assert response.json()["count"] == 2

    def test_module_indexes(self, api, db) -> None:
        hr = _add_user(db, "hr@example.com", UserRole.HR)
        assert api.get("/api/prompts").json()["module"] == "prompts"
        assert api.get("/api/hr-database", headers=_auth(hr)).json()["module"] == "hr-database"
        assert api.get("/api/onboarding", headers=_auth(hr)).json()["role"] == "hr"
        assert api.get("/api/learning", headers=_auth(hr)).json()["user_id"] == hr.id


class TestCombinedModeListing:
    def test_trailing_slash_matches_split_mode(self, make_settings, build_dir, db) -> None:
        hr = _add_user(db, "hr@example.com", UserRole.HR)
        _add_user(db, "cand@example.com", UserRole.CANDIDATE)

        for overrides in ({}, {"SINGLE_SERVICE": True, "FRONTEND_BUILD_DIR": str(build_dir)}):
            client = TestClient(create_app(make_settings(**overrides)), raise_server_exceptions=False)
            response = client.get("/api/candidates/", headers=_auth(hr))
            assert response.status_code == 200
            assert response.json()["count"] == 1


class TestAppSettingsForTokens:
    def test_tokens_use_the_app_secret(self, make_settings, db) -> None:
        from jose import jwt

        settings = make_settings(JWT_SECRET_KEY="tenant-secret")
        client = TestClient(create_app(settings), raise_server_exceptions=False)
        user = _add_user(db, "emp@example.com", UserRole.EMPLOYEE)

        login = client.post("/api/auth/login", json={"email": "emp@example.com", "password": "pass1234"})
        token = login.json()["token"]
        assert jwt.decode(token, "tenant-secret", algorithms=["HS256"])["sub"] == user.id

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200

    def test_token_signed_with_other_secret_is_rejected(self, make_settings, db) -> None:
        client = TestClient(create_app(make_settings(JWT_SECRET_KEY="tenant-secret")))
        user = _add_user(db, "emp@example.com", UserRole.EMPLOYEE)

        response = client.get("/api/auth/me", headers=_auth(user))
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"
