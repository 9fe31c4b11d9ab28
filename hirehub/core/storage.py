"""
S3 / MinIO storage for resume files.

Resume files are uploaded by the browser straight to the bucket through a
presigned POST; the API only ever stores the object key in
``Resume.file_path``. The same code works against MinIO in development
(``S3_ENDPOINT_URL=http://localhost:9000``) and real AWS S3 (no endpoint).
"""
import re
import uuid
from typing import Optional

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from hirehub.core.config import settings
from hirehub.core.logging import get_logger

logger = get_logger(__name__)

RESUME_KEY_PREFIX = "resumes/"

# file_type -> Content-Type enforced by the upload policy
RESUME_CONTENT_TYPES = {
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def build_resume_key(job_seeker_id: str, filename: str, object_id: Optional[str] = None) -> str:
    """Canonical key: resumes/{job_seeker_id}/{uuid}/{safe_filename}"""
    object_id = object_id or uuid.uuid4().hex
    return f"{RESUME_KEY_PREFIX}{job_seeker_id}/{object_id}/{_sanitize_filename(filename)}"


def is_resume_key(file_path: Optional[str]) -> bool:
    """Only paths we issued ourselves are eligible for deletion from the bucket."""
    return bool(file_path) and file_path.startswith(RESUME_KEY_PREFIX)


def _sanitize_filename(name: str) -> str:
    safe = re.sub(r"[^\w\-.]", "_", name, flags=re.ASCII)
    safe = re.sub(r"_+", "_", safe)
    return safe[:200]


def _s3_client():
    """Async context manager for an S3 client configured from settings."""
    session = aioboto3.Session()
    kwargs = dict(
        region_name=settings.s3_region,
        aws_access_key_id=settings.s3_aws_access_key_id,
        aws_secret_access_key=settings.s3_aws_secret_access_key,
    )
    if settings.s3_endpoint_url:
        kwargs["endpoint_url"] = settings.s3_endpoint_url
    return session.client("s3", **kwargs)


# ── Upload: presigned POST ───────────────────────────────────────────────────

async def generate_presign_upload(s3_key: str, content_type: str, max_size_bytes: int) -> dict:
    """
    Presigned POST for a direct browser-to-bucket upload.

    Returns ``{"url": ..., "fields": {...}}``. The policy pins the
    Content-Type and bounds the size between 1 byte and ``max_size_bytes``.
    """
    async with _s3_client() as s3:
        return await s3.generate_presigned_post(
            Bucket=settings.s3_bucket_name,
            Key=s3_key,
            Fields={"Content-Type": content_type},
            Conditions=[
                {"Content-Type": content_type},
                ["content-length-range", 1, max_size_bytes],
            ],
            ExpiresIn=settings.s3_presign_upload_expires,
        )


# ── Delete ───────────────────────────────────────────────────────────────────

async def delete_object(s3_key: str) -> bool:
    """
    Remove one object. Returns False instead of raising when the bucket
    is unreachable; a dangling object is preferable to a failed delete.
    """
    try:
        async with _s3_client() as s3:
            await s3.delete_object(Bucket=settings.s3_bucket_name, Key=s3_key)
    except (BotoCoreError, ClientError) as e:
        logger.warning("resume_object_delete_failed", key=s3_key, error=str(e))
        return False
    return True
