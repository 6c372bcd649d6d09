import pytest
from pydantic import ValidationError

from core.domain.errors import FigmaJsonError, NetworkError, RemoteApplicationError
from core.domain.models import ErrorKind, RetrievalResult, SelectionReference


def test_success_result() -> None:
    result = RetrievalResult.success("{}", status_code=200)
    assert result.ok
    assert result.error_kind is None
    result.raise_for_error()


def test_failure_kinds_map_to_exceptions() -> None:
    with pytest.raises(NetworkError):
        RetrievalResult.failure(ErrorKind.NETWORK, "Error fetching JSON").raise_for_error()

    with pytest.raises(RemoteApplicationError) as excinfo:
        RetrievalResult.failure(ErrorKind.REMOTE_APPLICATION, "Invalid token", status_code=403).raise_for_error()
    assert isinstance(excinfo.value, FigmaJsonError)
    assert excinfo.value.kind == ErrorKind.REMOTE_APPLICATION
    assert str(excinfo.value) == "Invalid token"


def test_selection_reference_is_frozen() -> None:
    ref = SelectionReference(file_id="F", node_id="1-2")
    with pytest.raises(ValidationError):
        ref.file_id = "other"  # type: ignore[misc]
