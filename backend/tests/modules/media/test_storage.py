"""Tests for modules/media/storage.py."""

import re
from pathlib import Path

from modules.media.storage import LocalBlobStore, generate_stored_name

NAME_PATTERN = re.compile(r"^\d{13}-[0-9a-f]{8}(\.[a-z0-9]+)?$")


class TestGenerateStoredName:
    def test_keeps_extension(self):
        name = generate_stored_name("Holiday.JPG")
        assert NAME_PATTERN.match(name)
        assert name.endswith(".jpg")

    def test_drops_unsafe_extension(self):
        name = generate_stored_name("photo.jp g")
        assert "." not in name

    def test_no_extension(self):
        assert NAME_PATTERN.match(generate_stored_name("photo"))

    def test_unique(self):
        assert generate_stored_name("a.jpg") != generate_stored_name("a.jpg")

    def test_never_contains_original_path(self):
        name = generate_stored_name("../../etc/passwd.jpg")
        assert "/" not in name
        assert "passwd" not in name


class TestLocalBlobStore:
    def test_save_creates_root(self, tmp_path):
        store = LocalBlobStore(tmp_path / "nested" / "uploads")
        path = store.save("a.jpg", b"data")

        assert Path(path).read_bytes() == b"data"
        assert Path(path).parent == store.root

    def test_exists(self, tmp_path):
        store = LocalBlobStore(tmp_path)
        path = store.save("a.jpg", b"data")
        assert store.exists(path)
        assert not store.exists(str(tmp_path / "missing.jpg"))

    def test_delete(self, tmp_path):
        store = LocalBlobStore(tmp_path)
        path = store.save("a.jpg", b"data")
        store.delete(path)
        assert not Path(path).exists()

    def test_delete_missing_is_not_an_error(self, tmp_path):
        LocalBlobStore(tmp_path).delete(str(tmp_path / "missing.jpg"))
