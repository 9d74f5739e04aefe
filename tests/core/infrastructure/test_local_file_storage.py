from pathlib import Path
from unittest.mock import patch

import pytest
from core.infrastructure.local.local_file_storage import LocalFileStorage
from core.models.errors import InternalError, NotFoundError


class TestLocalFileStorage:
    def test_creates_root_idempotently(self, tmp_path) -> None:
        root = tmp_path / "nested" / "uploads"

        LocalFileStorage(root)
        LocalFileStorage(root)

        assert root.is_dir()

    def test_save_read_remove(self, tmp_path) -> None:
        storage = LocalFileStorage(tmp_path)

        path = storage.save(stored_name="a_1.pdf", data=b"%PDF-1.4")

        assert Path(path) == tmp_path.resolve() / "a_1.pdf"
        assert storage.read(stored_name="a_1.pdf") == b"%PDF-1.4"

        storage.remove(stored_name="a_1.pdf")

        assert not Path(path).exists()

    def test_remove_missing_file_is_not_an_error(self, tmp_path) -> None:
        LocalFileStorage(tmp_path).remove(stored_name="never_written.webp")

    def test_read_missing_file(self, tmp_path) -> None:
        with pytest.raises(NotFoundError):
            LocalFileStorage(tmp_path).read(stored_name="never_written.webp")

    @pytest.mark.parametrize("name", ["../escape.pdf", "sub/dir.pdf", "", ".."])
    def test_refuses_names_outside_root(self, tmp_path, name) -> None:
        storage = LocalFileStorage(tmp_path / "uploads")

        with pytest.raises(InternalError, match="Invalid stored file name"):
            storage.save(stored_name=name, data=b"x")

        assert not (tmp_path / "escape.pdf").exists()

    def test_write_failure_is_internal(self, tmp_path) -> None:
        storage = LocalFileStorage(tmp_path)

        with patch.object(Path, "write_bytes", side_effect=PermissionError("read-only")):
            with pytest.raises(InternalError, match="Failed to save file") as exc_info:
                storage.save(stored_name="a_1.pdf", data=b"x")

        assert isinstance(exc_info.value.cause, PermissionError)

    def test_remove_failure_other_than_missing_is_internal(self, tmp_path) -> None:
        storage = LocalFileStorage(tmp_path)
        storage.save(stored_name="a_1.pdf", data=b"x")

        with patch.object(Path, "unlink", side_effect=PermissionError("busy")):
            with pytest.raises(InternalError, match="Failed to delete file"):
                storage.remove(stored_name="a_1.pdf")
