from unicredits.domain.user.value_objects.institutional_email import (
    DEFAULT_ALLOWED_DOMAINS,
    Email,
)

__all__ = ["DEFAULT_ALLOWED_DOMAINS", "Email"]
