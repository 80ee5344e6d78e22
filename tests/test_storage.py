"""
Tests for upload storage backends and the uploads endpoint.
"""

import io
import os
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from app.core import storage as storage_module
from app.core.config import settings
from app.core.storage import (
    LocalStorage,
    S3Storage,
    StorageError,
    generate_filename,
    get_storage,
    is_safe_filename,
)


def client_error(operation):
    return ClientError({"Error": {"Code": "404", "Message": "Not Found"}}, operation)


class TestFilenames:

    def test_generated_name_keeps_extension(self):
        name = generate_filename("My CV (final).PDF")
        assert name.endswith(".pdf")
        assert "CV" not in name
        assert len(name) == 32 + len(".pdf")

    def test_generated_names_are_unique(self):
        assert generate_filename("a.pdf") != generate_filename("a.pdf")

    @pytest.mark.parametrize("original", [None, "", "noextension", "weird.ex!t"])
    def test_odd_extensions_dropped(self, original):
        assert "." not in generate_filename(original)

    @pytest.mark.parametrize("filename,safe", [
        ("abc123.pdf", True),
        ("../etc/passwd", False),
        ("..", False),
        ("", False),
        ("nested/file.pdf", False),
        ("back\\slash.pdf", False),
    ])
    def test_is_safe_filename(self, filename, safe):
        assert is_safe_filename(filename) is safe


class TestLocalStorage:

    def test_upload_download_delete(self, tmp_path):
        storage = LocalStorage(str(tmp_path / "files"))

        name = storage.upload_file(io.BytesIO(b"hello"), "note.pdf")

        assert storage.file_exists(name)
        assert storage.download_file(name).read() == b"hello"
        assert os.path.dirname(storage.path_for(name)) == os.path.abspath(str(tmp_path / "files"))
        assert storage.delete_file(name) is True
        assert not storage.file_exists(name)
        assert storage.delete_file(name) is False

    def test_unsafe_names_never_exist(self, tmp_path):
        storage = LocalStorage(str(tmp_path))
        (tmp_path / "secret.txt").write_text("x")

        assert storage.file_exists("secret.txt")
        assert not storage.file_exists("../secret.txt")
        with pytest.raises(ValueError):
            storage.path_for("../secret.txt")

    def test_check_health(self, tmp_path):
        LocalStorage(str(tmp_path)).check_health()


class TestS3Storage:

    def test_upload_uses_prefixed_key(self):
        s3 = MagicMock()
        storage = S3Storage("bucket", client=s3)

        name = storage.upload_file(io.BytesIO(b"data"), "resume.pdf", "application/pdf")

        args, kwargs = s3.upload_fileobj.call_args
        assert args[1] == "bucket"
        assert args[2] == f"uploads/{name}"
        assert kwargs["ExtraArgs"]["ContentType"] == "application/pdf"

    def test_upload_failure_raises_storage_error(self):
        s3 = MagicMock()
        s3.upload_fileobj.side_effect = client_error("PutObject")

        with pytest.raises(StorageError):
            S3Storage("bucket", client=s3).upload_file(io.BytesIO(b"data"), "resume.pdf")

    def test_download(self):
        s3 = MagicMock()
        s3.get_object.return_value = {"Body": io.BytesIO(b"content")}

        data = S3Storage("bucket", client=s3).download_file("abc.pdf")

        assert data.read() == b"content"
        s3.get_object.assert_called_once_with(Bucket="bucket", Key="uploads/abc.pdf")

    def test_file_exists(self):
        s3 = MagicMock()
        storage = S3Storage("bucket", client=s3)

        assert storage.file_exists("abc.pdf") is True

        s3.head_object.side_effect = client_error("HeadObject")
        assert storage.file_exists("abc.pdf") is False
        assert storage.file_exists("../abc.pdf") is False

    def test_check_health_failure(self):
        s3 = MagicMock()
        s3.list_objects_v2.side_effect = client_error("ListObjectsV2")

        with pytest.raises(StorageError):
            S3Storage("bucket", client=s3).check_health()


class TestGetStorage:

    @pytest.fixture(autouse=True)
    def clear_cache(self):
        get_storage.cache_clear()
        yield
        get_storage.cache_clear()

    def test_local_by_default(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "USE_S3", False)
        monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path / "up"))

        backend = get_storage()

        assert isinstance(backend, LocalStorage)
        assert backend.base_dir == str(tmp_path / "up")

    def test_s3_requires_bucket(self, monkeypatch):
        monkeypatch.setattr(settings, "USE_S3", True)
        monkeypatch.setattr(settings, "S3_BUCKET_NAME", "")

        with pytest.raises(ValueError):
            get_storage()

    def test_s3_selected(self, monkeypatch):
        monkeypatch.setattr(settings, "USE_S3", True)
        monkeypatch.setattr(settings, "S3_BUCKET_NAME", "uploads-bucket")
        monkeypatch.setattr(storage_module.boto3, "client", MagicMock())

        backend = get_storage()

        assert isinstance(backend, S3Storage)
        assert backend.bucket_name == "uploads-bucket"


class TestUploadsEndpoint:

    def test_missing_file(self, client):
        response = client.get("/api/uploads/nothing-here.pdf")

        assert response.status_code == 404
        assert response.json() == {"error": "File not found"}

    def test_serves_stored_file(self, client, upload_storage):
        name = upload_storage.upload_file(io.BytesIO(b"\x89PNG"), "photo.png")

        response = client.get(f"/api/uploads/{name}")

        assert response.status_code == 200
        assert response.content == b"\x89PNG"
        assert response.headers["content-type"] == "image/png"

    def test_serves_from_s3_backend(self, client):
        from main import app

        s3 = MagicMock()
        s3.get_object.return_value = {"Body": io.BytesIO(b"remote bytes")}
        app.dependency_overrides[get_storage] = lambda: S3Storage("bucket", client=s3)

        response = client.get("/api/uploads/abc.pdf")

        assert response.status_code == 200
        assert response.content == b"remote bytes"
