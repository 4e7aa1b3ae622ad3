"""Data models for ResDiary availability search responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resdiary_notifier.timestamps import ResDiaryDateTime, format_timeslot


def _null_to_empty(v: Any) -> Any:
    # ResDiary sends null for empty arrays
    return [] if v is None else v


class TimeSlot(BaseModel):
    """One bookable time offered by the restaurant."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    time_slot: ResDiaryDateTime = Field(
        ..., alias="TimeSlot", description="Local slot time, no timezone"
    )
    is_leave_time_required: bool = Field(False, alias="IsLeaveTimeRequired")
    leave_time: str | None = Field(None, alias="LeaveTime")
    service_id: int = Field(0, alias="ServiceId")
    has_standard_availability: bool = Field(False, alias="HasStandardAvailability")
    available_promotions: list[Any] = Field(
        default_factory=list, alias="AvailablePromotions"
    )
    standard_availability_fee_amount: float = Field(
        0.0, alias="StandardAvailabilityFeeAmount"
    )

    @field_validator("available_promotions", mode="before")
    @classmethod
    def null_promotions_to_empty(cls, v: Any) -> Any:
        return _null_to_empty(v)

    @property
    def display_time(self) -> str:
        return format_timeslot(self.time_slot)


class AvailabilityResponse(BaseModel):
    """Decoded body of the AvailabilitySearch endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    time_slots: list[TimeSlot] = Field(
        default_factory=list, alias="TimeSlots", description="Slots in API order"
    )
    promotions: list[Any] = Field(default_factory=list, alias="Promotions")
    standard_availability_may_require_credit_card: bool = Field(
        False, alias="StandardAvailabilityMayRequireCreditCard"
    )

    @field_validator("time_slots", "promotions", mode="before")
    @classmethod
    def null_lists_to_empty(cls, v: Any) -> Any:
        return _null_to_empty(v)
