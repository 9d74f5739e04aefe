import pytest
from core.utils.mime import (
    content_type_for_format,
    content_type_from_name,
    is_supported_content_type,
    matching_image_type,
    resolve_content_type,
)


class TestContentTypeFromName:
    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("photo.jpg", "image/jpeg"),
            ("photo.JPEG", "image/jpeg"),
            ("icon.png", "image/png"),
            ("pic.webp", "image/webp"),
            ("anim.gif", "image/gif"),
            ("doc.pdf", "application/pdf"),
            ("notes.txt", ""),
            ("noextension", ""),
            ("", ""),
            (None, ""),
        ],
    )
    def test_lookup(self, filename, expected) -> None:
        assert content_type_from_name(filename) == expected


class TestResolveContentType:
    def test_declared_type_wins(self) -> None:
        assert resolve_content_type("image/png", "photo.jpg") == "image/png"

    def test_falls_back_to_extension(self) -> None:
        assert resolve_content_type("", "photo.jpg") == "image/jpeg"
        assert resolve_content_type(None, "doc.pdf") == "application/pdf"

    def test_unknown_yields_empty(self) -> None:
        assert resolve_content_type("  ", "archive.zip") == ""


class TestSupportedTypes:
    def test_substring_match_accepts_parameters(self) -> None:
        assert is_supported_content_type("image/jpeg; charset=binary")

    def test_rejects_unknown_and_empty(self) -> None:
        assert not is_supported_content_type("text/plain")
        assert not is_supported_content_type("")

    def test_matching_image_type(self) -> None:
        assert matching_image_type("image/gif") == "image/gif"
        assert matching_image_type("application/pdf") is None


class TestContentTypeForFormat:
    def test_known_formats(self) -> None:
        assert content_type_for_format("webp") == "image/webp"
        assert content_type_for_format("PDF") == "application/pdf"

    def test_unknown_is_binary(self) -> None:
        assert content_type_for_format("bin") == "application/octet-stream"
