import datetime

from pydantic import BaseModel, Field, field_validator

from thesis_admin.schemas._validators import as_utc


class HistoryResponse(BaseModel):
    id: int = Field(description="History entry ID")
    user_id: int = Field(description="ID of the user who performed the action")
    action: str = Field(description="Action label (e.g. 'Updated Thesis')")
    description: str = Field(description="Free-text description of the action")
    created_at: datetime.datetime = Field(description="When the action was recorded")

    model_config = {"from_attributes": True}

    @field_validator("created_at")
    @classmethod
    def created_at_in_utc(cls, v: datetime.datetime) -> datetime.datetime:
        return as_utc(v)
