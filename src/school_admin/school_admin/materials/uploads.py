from __future__ import annotations

import random
import time
from pathlib import Path
from typing import Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..core.exceptions import ValidationError
from .model import Attachment


class UploadStorage:
    """Saves uploaded files to a local folder and hands back an Attachment."""

    def __init__(self, folder: Path | str, *, base_url: str):
        self._folder = Path(folder)
        self._base_url = base_url.rstrip("/")

    @property
    def folder(self) -> Path:
        return self._folder

    def save(self, file: Optional[FileStorage]) -> Optional[Attachment]:
        if file is None or not file.filename:
            return None

        name = secure_filename(file.filename)
        if not name:
            raise ValidationError("file name is not valid")

        unique = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}-{name}"
        self._folder.mkdir(parents=True, exist_ok=True)
        file.save(self._folder / unique)
        return Attachment(filename=unique, url=f"{self._base_url}/uploads/{unique}")
