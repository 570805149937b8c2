"""Student email address."""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Syntactically valid address, stored in email-validator's normal form.

    Only syntax is checked; no DNS lookup is made. The domain part is
    lower-cased, so two spellings of one address compare equal.

    Raises:
        ValueError: The address is malformed.

    Example:
        >>> Email("alice@University.edu").domain
        'university.edu'
    """

    value: str

    def __post_init__(self) -> None:
        try:
            normalized = validate_email(self.value, check_deliverability=False).normalized
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        object.__setattr__(self, "value", normalized)

    @property
    def domain(self) -> str:
        return self.value.rpartition("@")[2]

    def __str__(self) -> str:
        return self.value
