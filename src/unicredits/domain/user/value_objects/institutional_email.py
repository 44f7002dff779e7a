"""Institutional email value object.

Registration is restricted to addresses of the university's own mail
domains; the allow-list comes from configuration.
"""

import re
from dataclasses import dataclass
from typing import Iterable

from unicredits.domain.user.exceptions import (
    InvalidEmailDomainError,
    InvalidEmailError,
)

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

DEFAULT_ALLOWED_DOMAINS = ("stu.pku.edu.cn", "pku.edu.cn")


@dataclass(frozen=True)
class Email:
    """Value object representing a validated, lower-cased email address."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        normalized = self.value.lower().strip()

        if not EMAIL_PATTERN.match(normalized):
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg)

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[1]

    @classmethod
    def institutional(
        cls,
        value: str,
        allowed_domains: Iterable[str] = DEFAULT_ALLOWED_DOMAINS,
    ) -> "Email":
        """Parse an email and require its domain to be in the allow-list.

        Raises
        ------
        InvalidEmailError
            If the address is malformed
        InvalidEmailDomainError
            If the domain is not an allowed institutional domain
        """
        email = cls(value)
        allowed = [d.lower() for d in allowed_domains]
        if email.domain not in allowed:
            raise InvalidEmailDomainError(email.value, allowed)
        return email

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
