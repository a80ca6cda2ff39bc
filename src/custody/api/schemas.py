"""Pydantic API schemas for the Custody domain.

These are the external API contracts — separate from domain commands.
The acting account never travels in a body; it comes from the X-Account
header.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class RegisterBottleRequest(BaseModel):
    bottle_id: str


class RegisterShipmentRequest(BaseModel):
    shipment_id: str
    carrier: str
    retailer: str
    bottle_ids: list[str] = Field(default_factory=list)


class TrackShipmentRequest(BaseModel):
    operation: str


class SellToCustomerRequest(BaseModel):
    customer: str
    bottle_ids: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class MemberResponse(BaseModel):
    account: str
    role: str


class MemberListResponse(BaseModel):
    role: str
    accounts: list[str]


class BottleIdResponse(BaseModel):
    bottle_id: str


class BottleResponse(BaseModel):
    bottle_id: str
    manufacturer: str
    owner: str
    status: str
    shipment_id: str | None = None
    registered_at: datetime


class BottleListResponse(BaseModel):
    bottle_ids: list[str]


class ShipmentIdResponse(BaseModel):
    shipment_id: str


class ShipmentStatusResponse(BaseModel):
    shipment_id: str
    status: str


class ShipmentResponse(BaseModel):
    shipment_id: str
    manufacturer: str
    carrier: str
    retailer: str
    bottle_ids: list[str]
    status: str
    registered_at: datetime
    delivered_at: datetime | None = None


class ShipmentListResponse(BaseModel):
    shipment_ids: list[str]


class SaleIdResponse(BaseModel):
    sale_id: str


class SaleResponse(BaseModel):
    sale_id: str
    retailer: str
    customer: str
    bottle_ids: list[str]
    sold_at: datetime


class SaleListResponse(BaseModel):
    sales: list[SaleResponse]
