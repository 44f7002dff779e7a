"""Unit tests for the Email value object and the institutional domain rule."""

import pytest

from unicredits.domain.shared import ErrorCode
from unicredits.domain.user import Email, InvalidEmailDomainError, InvalidEmailError


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        email = Email("  Student@STU.PKU.edu.cn ")

        assert email.value == "student@stu.pku.edu.cn"
        assert email.domain == "stu.pku.edu.cn"

    @pytest.mark.parametrize("value", ["", "   ", "no-at-sign", "a@b", "two@@pku.edu.cn"])
    def test_rejects_malformed_addresses(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)

    def test_equal_after_normalization(self):
        assert Email("A@pku.edu.cn") == Email("a@pku.edu.cn")


class TestInstitutionalEmail:
    @pytest.mark.parametrize("value", ["x@stu.pku.edu.cn", "y@pku.edu.cn"])
    def test_accepts_default_domains(self, value):
        assert Email.institutional(value).value == value

    def test_rejects_foreign_domain(self):
        with pytest.raises(InvalidEmailDomainError) as exc_info:
            Email.institutional("someone@gmail.com")

        assert exc_info.value.code == ErrorCode.INVALID_EMAIL_DOMAIN

    def test_subdomain_is_not_enough(self):
        with pytest.raises(InvalidEmailDomainError):
            Email.institutional("someone@mail.pku.edu.cn")

    def test_custom_allow_list(self):
        email = Email.institutional("prof@uni.example", ["UNI.example"])

        assert email.domain == "uni.example"
