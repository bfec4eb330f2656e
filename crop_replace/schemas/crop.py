"""Attachment/Crop 도메인 값을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel

from crop_replace.utils.filenames import file_stem


class Crop(BaseModel):
    dimensions: str  # "600x340"
    width: int
    height: int

    model_config = {"frozen": True}


class AttachmentRecord(BaseModel):
    id: int
    guid: str
    file_name: str
    ext: str

    model_config = {"frozen": True}


class Attachment(BaseModel):
    id: int = 0
    file_name: str
    ext: str
    crops: tuple[Crop, ...] = ()

    model_config = {"frozen": True}

    @property
    def stem(self) -> str:
        return file_stem(self.file_name, self.ext)
