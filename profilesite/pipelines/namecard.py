"""
Name-card import pipeline.

upload -> validate -> persist -> OCR -> heuristic parse -> draft profile
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import UploadFile

from common.utils.exceptions import BadRequestException
from profilesite.services.identifiers import epoch_ms, now_iso
from profilesite.services.namecard import (
    NamecardOCR,
    estimate_gender,
    parse_profile_from_text,
    sample_image_url,
)
from profilesite.services.profiles import ProfileService

logger = logging.getLogger(__name__)

READ_CHUNK_BYTES = 64 * 1024


def build_bio(company: str, occupation: str) -> str:
    """`<company>の<occupation>として活動中。` with 専門職 as the default title."""
    prefix = f"{company}の" if company else ""
    return f"{prefix}{occupation or '専門職'}として活動中。"


async def read_limited(upload: UploadFile, max_bytes: int) -> bytes:
    """
    Read an upload in chunks, stopping as soon as it exceeds max_bytes.

    Raises:
        BadRequestException: The upload is larger than max_bytes
    """
    chunks = []
    size = 0
    while True:
        chunk = await upload.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        size += len(chunk)
        if size > max_bytes:
            raise BadRequestException(
                message=f"ファイルサイズは{max_bytes // (1024 * 1024)}MBまでです",
                code="FILE_TOO_LARGE",
                details={"maxBytes": max_bytes},
            )
        chunks.append(chunk)
    return b"".join(chunks)


async def save_upload(
    upload: Optional[UploadFile],
    uploads_dir: str,
    max_bytes: int,
) -> Path:
    """
    Validate an uploaded image and store it as `namecard_<epoch-ms><ext>`.

    Raises:
        BadRequestException: Missing file, non-image type, or too large
    """
    if upload is None or not upload.filename:
        raise BadRequestException(message="画像ファイルが必要です", code="FILE_REQUIRED")

    content_type = upload.content_type or ""
    if not content_type.startswith("image/"):
        raise BadRequestException(
            message="画像ファイルのみアップロード可能です",
            code="INVALID_FILE_TYPE",
        )

    data = await read_limited(upload, max_bytes)

    directory = Path(uploads_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"namecard_{epoch_ms()}{Path(upload.filename).suffix}"
    path.write_bytes(data)

    logger.info(f"Saved name-card upload: {path.name} ({len(data)} bytes)")
    return path


async def import_namecard_pipeline(
    profile_service: ProfileService,
    ocr: NamecardOCR,
    upload: Optional[UploadFile],
    uploads_dir: str,
    max_bytes: int,
    uploaded_by: str,
) -> Dict[str, Any]:
    """
    Orchestrates turning a business-card image into an unapproved profile.

    Args:
        profile_service: For draft persistence
        ocr: Text extractor
        upload: The uploaded image
        uploads_dir: Directory for stored uploads
        max_bytes: Upload size limit
        uploaded_by: Current user's email

    Returns:
        Response dict with message and profile summary

    Raises:
        BadRequestException: Upload validation failed
        InternalServerException: OCR failed
    """
    path = await save_upload(upload, uploads_dir, max_bytes)

    extracted_text = await ocr.extract_text(path)
    logger.debug(f"Extracted text: {extracted_text!r}")

    parsed = parse_profile_from_text(extracted_text)
    logger.info(f"Parsed name card: name={parsed['name']!r}, company={parsed['company']!r}")

    gender = estimate_gender(parsed["name"])
    timestamp = now_iso()

    profile = {
        "id": f"user_{epoch_ms()}",
        "name": parsed["name"] or "名前不明",
        "occupation": parsed["occupation"],
        "company": parsed["company"],
        "email": parsed["email"],
        "phone": parsed["phone"],
        "website": parsed["website"],
        "location": parsed["location"],
        "bio": build_bio(parsed["company"], parsed["occupation"]),
        "skills": [],
        "image": sample_image_url(parsed["name"], gender),
        "originalImage": path.name,
        "extractedText": extracted_text,
        "uploadedBy": uploaded_by,
        "uploadedAt": timestamp,
        "createdAt": timestamp,
    }

    stored = await profile_service.create_draft(profile)

    return {
        "message": "プロフィール生成成功",
        "profile": {
            "id": stored["id"],
            "name": stored["name"],
            "occupation": stored["occupation"],
            "company": stored["company"],
            "extractedText": stored["extractedText"],
        },
    }
