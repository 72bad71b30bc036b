# app/schemas/car.py
from pydantic import BaseModel, Field, field_serializer
from datetime import datetime, timezone
from typing import Any


class CarCreate(BaseModel):
    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: int
    # Left untyped: car_service.is_valid_user_id decides, so any bad value gets the same 400
    user_id: Any = Field(default=None, alias="userId")

    class Config:
        populate_by_name = True


class CarOut(BaseModel):
    id: str = Field(serialization_alias="_id")
    user_id: str = Field(serialization_alias="userId")
    make: str
    model: str
    year: int
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    class Config:
        from_attributes = True

    @field_serializer("created_at", "updated_at")
    def serialize_utc(self, value: datetime) -> str:
        """ISO-8601 UTC with millisecond precision and a Z suffix. Naive values are UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
