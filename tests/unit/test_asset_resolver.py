import base64

import pytest

from inspection_report_builder.io.asset_resolver import (
    encode_data_uri,
    inline_local_asset,
    mime_type_for,
    resolve_local_path,
)
from inspection_report_builder.utils.exceptions import AssetResolutionError

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


def test_leading_slash_resolves_under_public(tmp_path):
    assert resolve_local_path("/logo.png", tmp_path) == tmp_path / "public" / "logo.png"
    assert resolve_local_path("assets/logo.png", tmp_path) == tmp_path / "assets" / "logo.png"


def test_mime_types(tmp_path):
    assert mime_type_for(tmp_path / "a.SVG") == "image/svg+xml"
    assert mime_type_for(tmp_path / "a.png") == "image/png"
    assert mime_type_for(tmp_path / "a.jpeg") == "image/jpeg"
    assert mime_type_for(tmp_path / "a") == "image/jpeg"


def test_inline_png_from_public(tmp_path):
    (tmp_path / "public").mkdir()
    (tmp_path / "public" / "logo.png").write_bytes(PNG_BYTES)

    result = inline_local_asset("/logo.png", "/default.png", tmp_path)

    assert result == "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")


def test_empty_reference_uses_default(tmp_path):
    (tmp_path / "public").mkdir()
    (tmp_path / "public" / "AGI_Logo.svg").write_text("<svg/>", encoding="utf-8")

    result = inline_local_asset(None, "/AGI_Logo.svg", tmp_path)

    assert result.startswith("data:image/svg+xml;base64,")


def test_missing_file_returns_reference_unchanged(tmp_path):
    assert inline_local_asset("/missing.png", "/default.png", tmp_path) == "/missing.png"


@pytest.mark.parametrize(
    "reference",
    ["https://cdn.example.com/logo.png", "HTTP://example.com/a.jpg", "data:image/png;base64,AAAA"],
)
def test_remote_and_data_references_are_untouched(tmp_path, reference):
    assert inline_local_asset(reference, "/default.png", tmp_path) == reference


def test_encode_data_uri_raises_on_missing_file(tmp_path):
    with pytest.raises(AssetResolutionError):
        encode_data_uri(tmp_path / "nope.png")
