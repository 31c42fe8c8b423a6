"""
FastAPI router for name-card import.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, UploadFile

from profilesite.dependencies import (
    get_app_settings,
    get_namecard_ocr,
    get_profile_service,
    require_auth,
)
from profilesite.pipelines.namecard import import_namecard_pipeline

logger = logging.getLogger(__name__)

router = APIRouter(tags=["namecard"])


@router.post("/upload-namecard")
async def upload_namecard(
    claims: Annotated[dict, Depends(require_auth)],
    namecard: Optional[UploadFile] = File(None),
):
    """
    Turn a business-card image into an unapproved profile draft.

    Multipart field: `namecard` (image/*, 5 MB max).
    """
    settings = get_app_settings()

    return await import_namecard_pipeline(
        profile_service=get_profile_service(),
        ocr=get_namecard_ocr(),
        upload=namecard,
        uploads_dir=settings.UPLOADS_DIR,
        max_bytes=settings.MAX_UPLOAD_BYTES,
        uploaded_by=claims["sub"],
    )
