import logging
import os
import uuid

from fastapi import UploadFile, HTTPException

from config.settings import AVATAR_DIRECTORY

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "webp", "heic"}


def save_avatar(file: UploadFile) -> str:
    """Stores an uploaded image under a random name and returns that name."""
    if not file.filename or "." not in file.filename:
        raise HTTPException(status_code=400, detail="File must have an image extension")

    file_extension = file.filename.rsplit(".", 1)[-1].lower()
    if file_extension not in ALLOWED_IMAGE_EXTENSIONS:
        raise HTTPException(status_code=400, detail="Unsupported image type")

    os.makedirs(AVATAR_DIRECTORY, exist_ok=True)
    random_filename = f"{uuid.uuid4().hex}.{file_extension}"
    file_path = os.path.join(AVATAR_DIRECTORY, random_filename)

    try:
        with open(file_path, "wb") as buffer:
            buffer.write(file.file.read())
    except OSError as e:
        logger.exception("Could not store avatar %s", random_filename)
        raise HTTPException(status_code=500, detail="Failed to upload avatar") from e

    return random_filename


def remove_avatar(file_name: str) -> None:
    try:
        os.remove(os.path.join(AVATAR_DIRECTORY, file_name))
    except OSError:
        logger.warning("Old avatar %s was already gone", file_name)
