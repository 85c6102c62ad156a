"""Unit tests for publisher validators (pure functions)."""

import pytest

from plpublisher.application.redirect import generate_redirect_url
from plpublisher.domain.entities import PublisherCredentials
from plpublisher.domain.validators import (
    validate_application_id,
    validate_end_user_id,
    validate_security_key,
    validate_transaction_key,
)
from plpublisher.domain.errors import (
    InvalidApplicationIDError,
    InvalidEndUserIDError,
    InvalidSecurityKeyError,
    InvalidTransactionKeyError,
    PublisherError,
)


class TestValidateApplicationID:
    """Test validate_application_id function."""

    def test_positive_id_accepted(self) -> None:
        validate_application_id(1)
        validate_application_id(123456)
        # Should not raise

    @pytest.mark.parametrize("application_id", [0, -1, -500])
    def test_non_positive_id_raises(self, application_id: int) -> None:
        with pytest.raises(InvalidApplicationIDError, match="Invalid Application ID"):
            validate_application_id(application_id)

    @pytest.mark.parametrize("application_id", [True, "1", 1.0, None])
    def test_non_integer_raises(self, application_id: object) -> None:
        with pytest.raises(InvalidApplicationIDError):
            validate_application_id(application_id)  # type: ignore[arg-type]


class TestValidateKeys:
    """Test validate_security_key and validate_transaction_key."""

    def test_security_key(self) -> None:
        validate_security_key("x")
        with pytest.raises(InvalidSecurityKeyError, match="Invalid Security Key"):
            validate_security_key("")

    def test_transaction_key(self) -> None:
        validate_transaction_key("x")
        with pytest.raises(
            InvalidTransactionKeyError, match="Invalid Transaction Key"
        ):
            validate_transaction_key("")


class TestValidateEndUserID:
    """Test validate_end_user_id function."""

    def test_boundaries(self) -> None:
        """Lengths 1 and 200 are valid."""
        validate_end_user_id("a")
        validate_end_user_id("a" * 200)

    @pytest.mark.parametrize("end_user_id", ["", "a" * 201, "a" * 1000])
    def test_invalid_raises(self, end_user_id: str) -> None:
        with pytest.raises(InvalidEndUserIDError, match="Invalid EndUserID"):
            validate_end_user_id(end_user_id)

    def test_errors_are_value_errors(self) -> None:
        """All publisher errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_end_user_id("")
        assert issubclass(InvalidEndUserIDError, PublisherError)


class TestPublisherCredentials:
    """Test that PublisherCredentials enforces the credential rules."""

    @pytest.mark.parametrize(
        "application_id, security_key, transaction_key, error",
        [
            (0, "", "", InvalidApplicationIDError),
            (0, "xxx", "xxx", InvalidApplicationIDError),
            (-3, "xxx", "", InvalidApplicationIDError),
            (1, "", "", InvalidSecurityKeyError),
            (1, "", "xxx", InvalidSecurityKeyError),
            (1, "xxx", "", InvalidTransactionKeyError),
        ],
    )
    def test_invalid_combination_raises(
        self, application_id, security_key, transaction_key, error
    ) -> None:
        """Invalid sets fail with the first broken rule, in declaration order."""
        with pytest.raises(error):
            PublisherCredentials(
                application_id=application_id,
                security_key=security_key,
                transaction_key=transaction_key,
            )

    def test_missing_fields_raise(self) -> None:
        with pytest.raises(InvalidApplicationIDError):
            PublisherCredentials()
        with pytest.raises(InvalidTransactionKeyError):
            PublisherCredentials(application_id=1, security_key="xxx")

    def test_invalid_credentials_cannot_build_redirect_url(self) -> None:
        with pytest.raises(InvalidApplicationIDError):
            generate_redirect_url(
                "saad",
                PublisherCredentials(
                    application_id=0, security_key="", transaction_key=""
                ),
            )

    def test_valid_combination(self) -> None:
        credentials = PublisherCredentials(
            application_id=1, security_key="xxx", transaction_key="yyy"
        )
        assert credentials.application_id == 1
        assert credentials.transaction_key == "yyy"
