"""
File storage abstraction layer supporting both local filesystem and AWS S3.

Uploaded application documents are stored under generated names; the name
returned by upload_file() is the only reference the database keeps, and it is
the key used by GET /api/uploads/{filename}.
"""

import logging
import mimetypes
import os
import re
import uuid
from functools import lru_cache
from io import BytesIO
from typing import BinaryIO, Optional
import boto3
from botocore.exceptions import ClientError
from app.core.config import settings

logger = logging.getLogger(__name__)

_EXTENSION_RE = re.compile(r"^\.[a-z0-9]{1,8}$")


class StorageError(Exception):
    """Raised when a storage backend cannot complete an operation"""


def generate_filename(original_filename: Optional[str]) -> str:
    """
    Build a collision-free storage name, keeping a sane extension if present.

    The client-supplied name is never used as a path component.
    """
    extension = os.path.splitext(original_filename or "")[1].lower()
    if not _EXTENSION_RE.match(extension):
        extension = ""
    return f"{uuid.uuid4().hex}{extension}"


def is_safe_filename(filename: str) -> bool:
    """Reject anything that could escape the upload directory"""
    return bool(filename) and filename not in (".", "..") and os.path.basename(filename) == filename and "\\" not in filename


def guess_content_type(filename: str) -> str:
    content_type, _ = mimetypes.guess_type(filename)
    return content_type or "application/octet-stream"


class StorageBackend:
    """Abstract base class for storage backends"""

    def upload_file(self, file: BinaryIO, filename: str, content_type: Optional[str] = None) -> str:
        """Store file and return the generated filename"""
        raise NotImplementedError

    def download_file(self, filename: str) -> BytesIO:
        """Download file and return as BytesIO object"""
        raise NotImplementedError

    def delete_file(self, filename: str) -> bool:
        """Delete file from storage"""
        raise NotImplementedError

    def file_exists(self, filename: str) -> bool:
        """Check if file exists"""
        raise NotImplementedError

    def check_health(self) -> None:
        """Raise StorageError if the backend is unreachable"""
        raise NotImplementedError


class LocalStorage(StorageBackend):
    """Local filesystem storage backend"""

    def __init__(self, base_dir: str = "uploads"):
        self.base_dir = base_dir
        os.makedirs(self.base_dir, exist_ok=True)

    def path_for(self, filename: str) -> str:
        """Absolute path of a stored file; raises ValueError for unsafe names"""
        if not is_safe_filename(filename):
            raise ValueError(f"Invalid storage filename: {filename!r}")
        return os.path.abspath(os.path.join(self.base_dir, filename))

    def upload_file(self, file: BinaryIO, filename: str, content_type: Optional[str] = None) -> str:
        """Save file to the local upload directory"""
        stored_name = generate_filename(filename)
        file_path = self.path_for(stored_name)

        try:
            with open(file_path, "wb") as buffer:
                buffer.write(file.read())
        except OSError as e:
            logger.error(f"Error writing file {file_path}: {e}")
            raise StorageError(f"Failed to store file {filename}") from e

        return stored_name

    def download_file(self, filename: str) -> BytesIO:
        """Read file from local filesystem"""
        with open(self.path_for(filename), "rb") as f:
            return BytesIO(f.read())

    def delete_file(self, filename: str) -> bool:
        """Delete file from local filesystem"""
        try:
            file_path = self.path_for(filename)
            if os.path.exists(file_path):
                os.remove(file_path)
                return True
            return False
        except (OSError, ValueError) as e:
            logger.error(f"Error deleting file {filename}: {e}")
            return False

    def file_exists(self, filename: str) -> bool:
        """Check if file exists on local filesystem"""
        if not is_safe_filename(filename):
            return False
        return os.path.isfile(self.path_for(filename))

    def check_health(self) -> None:
        if not os.path.isdir(self.base_dir) or not os.access(self.base_dir, os.W_OK):
            raise StorageError(f"Upload directory {self.base_dir} is not writable")


class S3Storage(StorageBackend):
    """AWS S3 storage backend"""

    KEY_PREFIX = "uploads/"

    def __init__(self, bucket_name: str, client=None):
        self.bucket_name = bucket_name

        if client is not None:
            self.s3_client = client
        # If AWS_ACCESS_KEY_ID is not set, boto3 will use IAM roles (for EC2/ECS)
        elif settings.AWS_ACCESS_KEY_ID and settings.AWS_SECRET_ACCESS_KEY:
            self.s3_client = boto3.client(
                's3',
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                region_name=settings.AWS_REGION
            )
        else:
            self.s3_client = boto3.client('s3', region_name=settings.AWS_REGION)

    def _key(self, filename: str) -> str:
        if not is_safe_filename(filename):
            raise ValueError(f"Invalid storage filename: {filename!r}")
        return f"{self.KEY_PREFIX}{filename}"

    def upload_file(self, file: BinaryIO, filename: str, content_type: Optional[str] = None) -> str:
        """Upload file to S3 and return the generated filename"""
        stored_name = generate_filename(filename)

        try:
            self.s3_client.upload_fileobj(
                file,
                self.bucket_name,
                self._key(stored_name),
                ExtraArgs={
                    'ContentType': content_type or guess_content_type(filename),
                    'ServerSideEncryption': 'AES256'
                }
            )
        except ClientError as e:
            logger.error(f"Error uploading to S3: {e}")
            raise StorageError(f"Failed to upload file {filename} to S3") from e

        return stored_name

    def download_file(self, filename: str) -> BytesIO:
        """Download file from S3 and return as BytesIO"""
        try:
            response = self.s3_client.get_object(Bucket=self.bucket_name, Key=self._key(filename))
            return BytesIO(response['Body'].read())
        except ClientError as e:
            logger.error(f"Error downloading from S3: {e}")
            raise StorageError(f"Failed to download file {filename} from S3") from e

    def delete_file(self, filename: str) -> bool:
        """Delete file from S3"""
        try:
            self.s3_client.delete_object(Bucket=self.bucket_name, Key=self._key(filename))
            return True
        except (ClientError, ValueError) as e:
            logger.error(f"Error deleting from S3: {e}")
            return False

    def file_exists(self, filename: str) -> bool:
        """Check if file exists in S3"""
        if not is_safe_filename(filename):
            return False
        try:
            self.s3_client.head_object(Bucket=self.bucket_name, Key=self._key(filename))
            return True
        except ClientError:
            return False

    def check_health(self) -> None:
        try:
            self.s3_client.list_objects_v2(Bucket=self.bucket_name, MaxKeys=1)
        except ClientError as e:
            raise StorageError(f"S3 bucket {self.bucket_name} is not accessible") from e


@lru_cache
def get_storage() -> StorageBackend:
    """
    Storage backend dependency, selected by the USE_S3 setting.

    Endpoints receive it through Depends(get_storage) so tests can swap in a
    LocalStorage rooted at a temporary directory.
    """
    if settings.USE_S3:
        if not settings.S3_BUCKET_NAME:
            raise ValueError("S3_BUCKET_NAME must be set when USE_S3=True")
        return S3Storage(settings.S3_BUCKET_NAME)
    return LocalStorage(settings.UPLOAD_DIR)
