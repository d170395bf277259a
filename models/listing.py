from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from models.enums import ROOM_TYPE_LABELS, RoomType, Shift


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Listing(BaseModel):
    # Identity
    id: str
    user_id: str = ""
    title: str = ""

    # Location
    city: str = "Unknown"
    area: Optional[str] = None
    commute_area: Optional[str] = None
    jobsite_id: Optional[str] = None
    hub_id: Optional[str] = None

    # Terms
    rent_min: Optional[int] = Field(default=None, ge=0)
    rent_max: Optional[int] = Field(default=None, ge=0)
    move_in: Optional[date] = None
    room_type: RoomType = RoomType.PRIVATE_ROOM
    shift: Optional[Shift] = None
    details: str = ""

    # Photos
    cover_photo_url: Optional[str] = None
    photo_urls: list[str] = Field(default_factory=list)

    # Metadata
    poster_name: Optional[str] = None
    is_active: bool = True
    is_demo: bool = False
    created_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="before")
    @classmethod
    def _flatten_backend_row(cls, data: Any) -> Any:
        """Accept rows as returned by the backend's embedded-select syntax.

        `profiles(display_name)` comes back as a nested object; null text
        columns come back as None.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        profiles = data.pop("profiles", None)
        if isinstance(profiles, dict) and not data.get("poster_name"):
            data["poster_name"] = profiles.get("display_name")
        for key in ("title", "details", "user_id", "city", "photo_urls", "created_at"):
            if key in data and data[key] is None:
                del data[key]
        return data

    def price_text(self) -> str:
        """Card price label: "$800 - $950/mo", "$800/mo", or "Contact for price"."""
        has_min = bool(self.rent_min)
        has_max = bool(self.rent_max)

        if has_min and has_max:
            if self.rent_min == self.rent_max:
                return f"${self.rent_min:,}/mo"
            return f"${self.rent_min:,} - ${self.rent_max:,}/mo"
        if has_min:
            return f"${self.rent_min:,}/mo"
        if has_max:
            return f"${self.rent_max:,}/mo"
        return "Contact for price"

    def room_type_label(self) -> str:
        return ROOM_TYPE_LABELS.get(self.room_type, "Room")

    def near_text(self) -> Optional[str]:
        return f"Near {self.commute_area}" if self.commute_area else None

    def all_photo_urls(self) -> list[str]:
        """Cover photo first, then the gallery, without duplicates."""
        urls = [self.cover_photo_url, *self.photo_urls]
        return list(dict.fromkeys(u for u in urls if u))
