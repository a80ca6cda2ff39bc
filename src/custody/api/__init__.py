from custody.api.routes import bottle_router, member_router, sale_router, shipment_router

__all__ = ["member_router", "bottle_router", "shipment_router", "sale_router"]
