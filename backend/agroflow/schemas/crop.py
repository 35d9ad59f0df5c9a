from typing import Optional

from pydantic import BaseModel

from .common import CommonResponse, NonEmptyStr, PartialUpdate


class CropCreate(BaseModel):
    crop_name: NonEmptyStr


class CropUpdate(PartialUpdate):
    crop_name: Optional[NonEmptyStr] = None


class CropResponse(CommonResponse):
    crop_name: str


class CropCreatedResponse(BaseModel):
    message: str
    data: CropResponse
