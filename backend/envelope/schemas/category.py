from pydantic import BaseModel, Field, field_validator

from ..models import MAX_SAFE_AMOUNT


class CategoryBase(BaseModel):
    """Base category fields."""
    name: str = Field(min_length=1)
    group: str = Field(min_length=1)
    assigned: int = Field(default=0, ge=0, le=MAX_SAFE_AMOUNT)
    sort_order: int = 0


class CategoryCreate(CategoryBase):
    """Fields for creating a category."""
    pass


class CategoryUpdate(BaseModel):
    """Fields for updating a category (all optional)."""
    name: str | None = Field(default=None, min_length=1)
    group: str | None = Field(default=None, min_length=1)
    assigned: int | None = Field(default=None, ge=0, le=MAX_SAFE_AMOUNT)
    sort_order: int | None = None
    archived: bool | None = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class CategoryResponse(CategoryBase):
    """Category response with all fields."""
    id: str
    archived: bool

    class Config:
        from_attributes = True
