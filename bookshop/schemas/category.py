# bookshop/schemas/category.py

from pydantic import BaseModel, field_validator


class CategoryCreateRequest(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be empty")
        if len(v) > 255:
            raise ValueError("Name too long (max 255 characters)")
        return v


class CategoryResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}
