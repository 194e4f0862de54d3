"""
Pydantic schemas for request validation.

Business fields are optional strings here: emptiness and format rules are
enforced by the services so they answer with their own error codes. The
schemas only reject payloads whose shape is wrong.
"""

from pydantic import BaseModel, Field, field_validator


class SignupCustomerRequest(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email_address: str | None = None
    contact_number: str | None = None
    password: str | None = None


class UpdateCustomerRequest(BaseModel):
    first_name: str | None = None
    last_name: str | None = None


class UpdatePasswordRequest(BaseModel):
    old_password: str | None = None
    new_password: str | None = None


class SaveAddressRequest(BaseModel):
    flat_building_name: str | None = None
    locality: str | None = None
    city: str | None = None
    pincode: str | None = None
    state_uuid: str | None = None

    @field_validator("pincode", mode="before")
    @classmethod
    def pincode_as_text(cls, v):
        # Clients sometimes send the pincode as a JSON number
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class ItemQuantityRequest(BaseModel):
    item_id: str | None = None
    quantity: int = Field(..., ge=1)
    price: int = Field(..., ge=0)


class SaveOrderRequest(BaseModel):
    address_id: str | None = None
    payment_id: str | None = None
    coupon_id: str | None = None
    restaurant_id: str | None = None
    bill: float = Field(..., ge=0)
    discount: float = Field(default=0, ge=0)
    item_quantities: list[ItemQuantityRequest] = Field(default_factory=list)

    @field_validator("discount", mode="before")
    @classmethod
    def discount_defaults_to_zero(cls, v):
        return 0 if v is None else v
