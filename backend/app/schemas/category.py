"""
Category Pydantic schemas for API validation.
"""

from pydantic import Field, field_validator
from typing import Optional

from app.schemas.common import ApiModel

COLOR_PATTERN = r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"


class CategoryPayload(ApiModel):
    """Schema for creating or updating a category."""
    name: str = Field(..., min_length=1, max_length=100)
    color: Optional[str] = Field(None, pattern=COLOR_PATTERN)
    icon: Optional[str] = Field(None, max_length=50)

    @field_validator("name", "icon", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class CategoryResponse(ApiModel):
    """Schema for category response."""
    id: str
    name: str
    color: Optional[str]
    icon: Optional[str]
    is_global: bool


class CategoryList(ApiModel):
    categories: list[CategoryResponse]


class CategoryMutationResponse(ApiModel):
    category: CategoryResponse
