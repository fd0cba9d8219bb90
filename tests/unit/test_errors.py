"""Tests for sf_common.errors."""

from src.sf_common.errors import AppError, NetworkIdentityError, NoEligibleInterfaceError


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=1001, message="lookup failed")
        assert err.code == 1001
        assert err.message == "lookup failed"
        assert str(err) == "lookup failed"

    def test_is_exception(self) -> None:
        err = AppError(code=1001, message="test")
        assert isinstance(err, Exception)


class TestIdentityErrors:
    def test_network_identity(self) -> None:
        err = NetworkIdentityError("permission denied")
        assert err.code == 1001
        assert "permission denied" in err.message
        assert isinstance(err, AppError)

    def test_no_eligible_interface(self) -> None:
        err = NoEligibleInterfaceError()
        assert err.code == 1002
        assert isinstance(err, AppError)
