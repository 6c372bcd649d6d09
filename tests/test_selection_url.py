import pytest

from core.domain.errors import FormatError
from core.domain.models import ErrorKind, SelectionReference
from core.selection_url import build_nodes_url, resolve_selection_url


def test_design_url_keeps_encoded_node_id() -> None:
    ref = resolve_selection_url("https://www.figma.com/design/FILEID/SomeName?node-id=12%3A34")
    assert ref == SelectionReference(file_id="FILEID", node_id="12%3A34")


def test_file_url() -> None:
    ref = resolve_selection_url("https://www.figma.com/file/FILEID/?node-id=5-6")
    assert ref.file_id == "FILEID"
    assert ref.node_id == "5-6"


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.figma.com/design/abc/Name?node-id=1-2&t=xyz", ("abc", "1-2")),
        ("https://www.figma.com/design/abc/Name?node-id=1:2", ("abc", "1:2")),
        ("https://www.figma.com/file/abc/?node-id=7%3A8&mode=dev", ("abc", "7%3A8")),
        ("https://figma.com/design/k3Y/My-File/Sub?node-id=0-1", ("k3Y", "0-1")),
    ],
)
def test_accepted_shapes(url: str, expected: tuple[str, str]) -> None:
    ref = resolve_selection_url(url)
    assert (ref.file_id, ref.node_id) == expected


def test_design_pattern_wins_when_both_match() -> None:
    url = "https://www.figma.com/file/OTHER/?node-id=9-9&x=design/FIRST/n?node-id=1-1"
    ref = resolve_selection_url(url)
    assert ref.file_id == "FIRST"
    assert ref.node_id == "1-1"


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/not-figma",
        "https://www.figma.com/design/FILEID/SomeName",
        "https://www.figma.com/file/FILEID?node-id=1-2",
        "",
    ],
)
def test_unrecognized_urls_raise_format_error(url: str) -> None:
    with pytest.raises(FormatError) as excinfo:
        resolve_selection_url(url)
    assert excinfo.value.kind == ErrorKind.FORMAT
    assert excinfo.value.message == "Invalid Figma URL format"


def test_build_nodes_url_interpolates_verbatim() -> None:
    ref = SelectionReference(file_id="FILEID", node_id="12%3A34")
    assert build_nodes_url("https://api.figma.com/", ref) == "https://api.figma.com/v1/files/FILEID/nodes?ids=12%3A34"
