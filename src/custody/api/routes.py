"""FastAPI routes for the Custody domain.

Every state-changing request names its acting account in the ``X-Account``
header; the account becomes the role field of the domain command.
"""

import json

from fastapi import APIRouter, Header, HTTPException, Query
from protean.utils.globals import current_domain

from custody.api.schemas import (
    BottleIdResponse,
    BottleListResponse,
    BottleResponse,
    MemberListResponse,
    MemberResponse,
    RegisterBottleRequest,
    RegisterShipmentRequest,
    SaleIdResponse,
    SaleListResponse,
    SaleResponse,
    SellToCustomerRequest,
    ShipmentIdResponse,
    ShipmentListResponse,
    ShipmentResponse,
    ShipmentStatusResponse,
    TrackShipmentRequest,
)
from custody.bottle import registry as bottle_registry
from custody.bottle.registration import RegisterBottle
from custody.membership import registry as member_registry
from custody.membership.member import Role
from custody.membership.registration import (
    RegisterCarrier,
    RegisterCustomer,
    RegisterManufacturer,
    RegisterRetailer,
)
from custody.sale.sale import Sale
from custody.sale.selling import SellToCustomer
from custody.shipment import ledger
from custody.shipment.registration import RegisterShipment
from custody.shipment.tracking import TrackShipment

# Path segment -> (role, registration command)
_ROLE_COLLECTIONS = {
    "manufacturers": (Role.MANUFACTURER, RegisterManufacturer),
    "carriers": (Role.CARRIER, RegisterCarrier),
    "retailers": (Role.RETAILER, RegisterRetailer),
    "customers": (Role.CUSTOMER, RegisterCustomer),
}


def _role_collection(collection: str):
    try:
        return _ROLE_COLLECTIONS[collection]
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown member collection '{collection}'") from None


# ---------------------------------------------------------------------------
# Member Router
# ---------------------------------------------------------------------------
member_router = APIRouter(prefix="/members", tags=["members"])


@member_router.post("/{collection}", status_code=201, response_model=MemberResponse)
async def register_member(collection: str, x_account: str = Header()) -> MemberResponse:
    """Register the calling account under the role named by the path."""
    role, command_cls = _role_collection(collection)
    account = current_domain.process(command_cls(account=x_account), asynchronous=False)
    return MemberResponse(account=account, role=role.value)


@member_router.get("/{collection}", response_model=MemberListResponse)
async def list_members(collection: str) -> MemberListResponse:
    role, _ = _role_collection(collection)
    return MemberListResponse(role=role.value, accounts=member_registry.members_of(role))


# ---------------------------------------------------------------------------
# Bottle Router
# ---------------------------------------------------------------------------
bottle_router = APIRouter(prefix="/bottles", tags=["bottles"])


@bottle_router.post("", status_code=201, response_model=BottleIdResponse)
async def register_bottle(body: RegisterBottleRequest, x_account: str = Header()) -> BottleIdResponse:
    """Register a bottle under the calling manufacturer."""
    command = RegisterBottle(bottle_id=body.bottle_id, manufacturer=x_account)
    bottle_id = current_domain.process(command, asynchronous=False)
    return BottleIdResponse(bottle_id=bottle_id)


@bottle_router.get("", response_model=BottleListResponse)
async def list_bottles(
    manufacturer: str | None = Query(default=None),
    owner: str | None = Query(default=None),
) -> BottleListResponse:
    """Bottles made by ``manufacturer`` or currently held by ``owner``."""
    if manufacturer:
        return BottleListResponse(bottle_ids=bottle_registry.bottles_of_manufacturer(manufacturer))
    if owner:
        return BottleListResponse(bottle_ids=bottle_registry.bottles_owned_by(owner))
    raise HTTPException(status_code=400, detail="Filter by 'manufacturer' or 'owner'")


@bottle_router.get("/{bottle_id}", response_model=BottleResponse)
async def get_bottle(bottle_id: str) -> BottleResponse:
    bottle = bottle_registry.find_bottle(bottle_id)
    if bottle is None:
        raise HTTPException(status_code=404, detail=f"Bottle '{bottle_id}' not found")

    return BottleResponse(
        bottle_id=str(bottle.bottle_id),
        manufacturer=str(bottle.manufacturer),
        owner=str(bottle.owner),
        status=bottle.status,
        shipment_id=str(bottle.shipment_id) if bottle.shipment_id else None,
        registered_at=bottle.registered_at,
    )


# ---------------------------------------------------------------------------
# Shipment Router
# ---------------------------------------------------------------------------
shipment_router = APIRouter(prefix="/shipments", tags=["shipments"])


@shipment_router.post("", status_code=201, response_model=ShipmentIdResponse)
async def register_shipment(body: RegisterShipmentRequest, x_account: str = Header()) -> ShipmentIdResponse:
    """Ship the calling manufacturer's bottles to a retailer via a carrier."""
    command = RegisterShipment(
        shipment_id=body.shipment_id,
        manufacturer=x_account,
        carrier=body.carrier,
        retailer=body.retailer,
        bottle_ids=json.dumps(body.bottle_ids),
    )
    shipment_id = current_domain.process(command, asynchronous=False)
    return ShipmentIdResponse(shipment_id=shipment_id)


@shipment_router.put("/{shipment_id}/track", response_model=ShipmentStatusResponse)
async def track_shipment(
    shipment_id: str, body: TrackShipmentRequest, x_account: str = Header()
) -> ShipmentStatusResponse:
    """Pickup, Scan or Deliver, performed by the shipment's carrier."""
    command = TrackShipment(
        shipment_id=shipment_id,
        carrier=x_account,
        operation=body.operation,
    )
    status = current_domain.process(command, asynchronous=False)
    return ShipmentStatusResponse(shipment_id=shipment_id, status=status)


@shipment_router.get("", response_model=ShipmentListResponse)
async def list_shipments(
    manufacturer: str | None = Query(default=None),
    carrier: str | None = Query(default=None),
    retailer: str | None = Query(default=None),
) -> ShipmentListResponse:
    if manufacturer:
        return ShipmentListResponse(shipment_ids=ledger.shipments_of_manufacturer(manufacturer))
    if carrier:
        return ShipmentListResponse(shipment_ids=ledger.shipments_of_carrier(carrier))
    if retailer:
        return ShipmentListResponse(shipment_ids=ledger.shipments_of_retailer(retailer))
    raise HTTPException(status_code=400, detail="Filter by 'manufacturer', 'carrier' or 'retailer'")


@shipment_router.get("/{shipment_id}", response_model=ShipmentResponse)
async def get_shipment(shipment_id: str) -> ShipmentResponse:
    shipment = ledger.find_shipment(shipment_id)
    if shipment is None:
        raise HTTPException(status_code=404, detail=f"Shipment '{shipment_id}' not found")

    return ShipmentResponse(
        shipment_id=str(shipment.shipment_id),
        manufacturer=str(shipment.manufacturer),
        carrier=str(shipment.carrier),
        retailer=str(shipment.retailer),
        bottle_ids=shipment.bottle_ids,
        status=shipment.status,
        registered_at=shipment.registered_at,
        delivered_at=shipment.delivered_at,
    )


# ---------------------------------------------------------------------------
# Sale Router
# ---------------------------------------------------------------------------
sale_router = APIRouter(prefix="/sales", tags=["sales"])


@sale_router.post("", status_code=201, response_model=SaleIdResponse)
async def sell_to_customer(body: SellToCustomerRequest, x_account: str = Header()) -> SaleIdResponse:
    """Sell bottles held by the calling retailer to a customer."""
    command = SellToCustomer(
        retailer=x_account,
        customer=body.customer,
        bottle_ids=json.dumps(body.bottle_ids),
    )
    sale_id = current_domain.process(command, asynchronous=False)
    return SaleIdResponse(sale_id=sale_id)


@sale_router.get("", response_model=SaleListResponse)
async def list_sales(customer: str = Query()) -> SaleListResponse:
    sales = current_domain.repository_for(Sale).sales_to_customer(customer)
    return SaleListResponse(
        sales=[
            SaleResponse(
                sale_id=str(sale.id),
                retailer=str(sale.retailer),
                customer=str(sale.customer),
                bottle_ids=sale.bottle_ids,
                sold_at=sale.sold_at,
            )
            for sale in sales
        ]
    )
