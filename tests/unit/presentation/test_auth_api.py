"""API tests for registration, verification and login."""

TEST_PASSWORD = "secure_password_123"


class TestRegistration:
    def test_register_sends_code(self, test_client, email_sender, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "Student@stu.pku.edu.cn", "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        assert "student@stu.pku.edu.cn" in response.json()["message"]
        assert len(email_sender.codes["student@stu.pku.edu.cn"]) == 6

    def test_foreign_domain(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "someone@gmail.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EMAIL_DOMAIN"

    def test_weak_password(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "student@stu.pku.edu.cn", "password": "123"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "WEAK_PASSWORD"

    def test_malformed_body(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "not-an-email"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_wrong_code(self, test_client, email_sender, api_v1_prefix):
        email = "student@stu.pku.edu.cn"
        test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": email, "password": TEST_PASSWORD},
        )
        wrong = "000000" if email_sender.codes[email] != "000000" else "111111"

        response = test_client.post(
            f"{api_v1_prefix}/auth/verify-email",
            json={"email": email, "code": wrong},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_VERIFICATION_CODE"

    def test_verify_without_registration(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/verify-email",
            json={"email": "ghost@stu.pku.edu.cn", "code": "123456"},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "VERIFICATION_NOT_FOUND"

    def test_verified_user_gets_token(self, test_client, email_sender, api_v1_prefix):
        email = "student@stu.pku.edu.cn"
        test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": email, "password": TEST_PASSWORD},
        )

        response = test_client.post(
            f"{api_v1_prefix}/auth/verify-email",
            json={"email": email, "code": email_sender.codes[email]},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["expires_in"] > 0
        assert body["user"]["email"] == email
        assert body["user"]["has_completed_setup"] is False

    def test_code_is_single_use(self, test_client, email_sender, register_user, api_v1_prefix):
        register_user()

        response = test_client.post(
            f"{api_v1_prefix}/auth/verify-email",
            json={
                "email": "student@stu.pku.edu.cn",
                "code": email_sender.codes["student@stu.pku.edu.cn"],
            },
        )

        assert response.status_code == 404

    def test_registered_email_conflicts(self, test_client, register_user, api_v1_prefix):
        register_user()

        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "student@stu.pku.edu.cn", "password": TEST_PASSWORD},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_ALREADY_REGISTERED"


class TestLogin:
    def test_login(self, test_client, register_user, api_v1_prefix):
        register_user()

        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "STUDENT@stu.pku.edu.cn", "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        assert response.json()["access_token"]

    def test_wrong_password(self, test_client, register_user, api_v1_prefix):
        register_user()

        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "student@stu.pku.edu.cn", "password": "wrong_password"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_unknown_email(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "nobody@stu.pku.edu.cn", "password": TEST_PASSWORD},
        )

        assert response.status_code == 401


class TestCurrentUser:
    def test_me(self, test_client, auth_headers, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["email"] == "student@stu.pku.edu.cn"

    def test_missing_token(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/auth/me")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_invalid_token(self, test_client, api_v1_prefix):
        response = test_client.get(
            f"{api_v1_prefix}/auth/me",
            headers={"Authorization": "Bearer garbage"},
        )

        assert response.status_code == 401


class TestOnboarding:
    def test_complete_onboarding(self, test_client, auth_headers, api_v1_prefix):
        response = test_client.put(
            f"{api_v1_prefix}/onboarding/complete",
            json={"graduation_total_credits": 140},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["has_completed_setup"] is True
        assert response.json()["graduation_total_credits"] == 140.0

    def test_negative_goal(self, test_client, auth_headers, api_v1_prefix):
        response = test_client.put(
            f"{api_v1_prefix}/onboarding/complete",
            json={"graduation_total_credits": -5},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_CREDITS"

    def test_goal_must_be_a_number(self, test_client, auth_headers, api_v1_prefix):
        response = test_client.put(
            f"{api_v1_prefix}/onboarding/complete",
            json={"graduation_total_credits": "140"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
