"""Color analysis schemas."""

from pydantic import Field

from palette_api.schemas.base import BaseSchema


class RGB(BaseSchema):
    """Raw 8-bit channel triple."""

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class ColorDescription(BaseSchema):
    """One extracted color with its reference and standard names."""

    rgb: RGB
    hex: str = Field(..., pattern=r"^#[0-9A-F]{6}$")
    eng_name: str = Field(..., alias="engName")
    chinese_name: str = Field(..., alias="chineseName")
    eng_stander_name: str = Field(..., alias="engStanderName")


class AnalysisResult(BaseSchema):
    """Dominant color plus the ordered palette."""

    dominant: ColorDescription
    palette: list[ColorDescription] = Field(default_factory=list)
