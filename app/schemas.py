# app/schemas.py  # Pydantic models for the public event payload.

# =================================================================================
# 📦 Schemas (Pydantic data models)
# ---------------------------------------------------------------------------------
# The backend serves events as camelCase JSON. These models:
# - Parse and validate the payload of GET /public/event/{id}.
# - Expose snake_case attributes to the rest of the app (aliases keep the wire names).
# - Normalise field types to a closed set so rendering is a plain table lookup.
# - Use Pydantic v2: model_validator/field_validator and ConfigDict.
# =================================================================================

from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


class EventCategory(str, Enum):
    free = "free"
    paid = "paid"


class LocationType(str, Enum):
    address = "address"
    url = "url"


class FieldType(str, Enum):
    text = "text"
    email = "email"
    tel = "tel"
    dropdown = "dropdown"


# =================================================================================
# 🧰 Normalisation helpers
# =================================================================================
def _as_text(raw: Any) -> Any:
    """Numbers from the form builder (ids, phones, option values) become strings."""
    if isinstance(raw, bool):                                     # bool is an int: leave it to the validator.
        return raw
    if isinstance(raw, (int, float)):
        return str(raw)
    return raw


# Wire values the form builder emits for phone inputs.
_TEL_ALIASES = {"tel", "mobile", "phone"}


# =================================================================================
# 🧾 Form fields
# =================================================================================
class FieldDefinition(BaseModel):
    id: str
    label: str
    type: FieldType = FieldType.text
    required: bool = False
    options: List[str] = Field(default_factory=list)            # Only used by dropdowns.

    model_config = ConfigDict(extra="ignore")

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, v):
        code = str(v or "").strip().lower()
        if code in _TEL_ALIASES:
            return FieldType.tel
        if code in FieldType.__members__:
            return FieldType(code)
        return FieldType.text                                     # Unknown widgets degrade to a text box.

    @field_validator("id", "label", mode="before")
    @classmethod
    def _text_keys(cls, v):
        return _as_text(v)

    @field_validator("options", mode="before")
    @classmethod
    def _none_options(cls, v):
        if not v:
            return []                                             # null / missing -> no options.
        return [_as_text(o) for o in v] if isinstance(v, list) else v


# =================================================================================
# 📅 Event definition
# =================================================================================
class EventDefinition(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    category: EventCategory = EventCategory.free
    amount: Optional[float] = Field(default=None, ge=0)
    expiry_date: datetime = Field(alias="expiryDate")
    contact_name: Optional[str] = Field(default=None, alias="contactName")
    contact_phone: Optional[str] = Field(default=None, alias="contactPhone")
    location: Optional[str] = None
    location_type: LocationType = Field(default=LocationType.address, alias="locationType")
    fields: List[FieldDefinition] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("id", "name", "contact_name", "contact_phone", mode="before")
    @classmethod
    def _text_values(cls, v):
        return _as_text(v)                                        # e.g. contactPhone: 9876543210

    @field_validator("expiry_date")
    @classmethod
    def _aware_expiry(cls, v: datetime) -> datetime:
        # Naive timestamps are read as UTC so the countdown never mixes clocks.
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)

    @field_validator("location_type", mode="before")
    @classmethod
    def _default_location_type(cls, v):
        return v or LocationType.address

    @model_validator(mode="after")
    def _check_consistency(self):
        if self.category == EventCategory.paid and self.amount is None:
            raise ValueError("A paid event must declare an amount.")
        ids = [f.id for f in self.fields]
        if len(ids) != len(set(ids)):
            raise ValueError("Field ids must be unique within an event.")
        return self

    @property
    def is_paid(self) -> bool:
        return self.category == EventCategory.paid
