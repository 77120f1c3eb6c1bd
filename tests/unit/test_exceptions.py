"""Unit tests for the exception hierarchy."""

import pytest

from reqidlog.exceptions import ImproperConfigurationError, NotFoundError, ReqIdLogError, is_record_not_found


def test_not_found_error_default_message() -> None:
    err = NotFoundError()
    assert str(err) == "record not found"
    assert err.detail == "record not found"
    assert repr(err) == "NotFoundError - record not found"


def test_errors_share_base_class() -> None:
    assert issubclass(NotFoundError, ReqIdLogError)
    assert issubclass(ImproperConfigurationError, ReqIdLogError)


def test_detail_keyword() -> None:
    err = ReqIdLogError("first", detail="explicit")
    assert err.detail == "explicit"
    assert str(err) == "first explicit"


def test_is_record_not_found_direct() -> None:
    assert is_record_not_found(NotFoundError())


def test_is_record_not_found_explicit_cause() -> None:
    try:
        try:
            raise NotFoundError
        except NotFoundError as exc:
            raise RuntimeError("lookup failed") from exc
    except RuntimeError as wrapped:
        assert is_record_not_found(wrapped)


def test_is_record_not_found_ignores_implicit_context() -> None:
    with pytest.raises(KeyError) as exc_info:
        try:
            raise NotFoundError
        except NotFoundError:
            raise KeyError("missing")  # noqa: B904
    assert exc_info.value.__context__ is not None
    assert not is_record_not_found(exc_info.value)


@pytest.mark.parametrize("err", [None, ValueError("boom"), ReqIdLogError("other")])
def test_is_record_not_found_negative(err: "BaseException | None") -> None:
    assert not is_record_not_found(err)
