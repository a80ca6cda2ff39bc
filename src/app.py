"""Custody FastAPI application.

Web server that processes custody commands synchronously via HTTP. Every
request runs inside the custody domain context, with the calling account
(the ``X-Account`` header) bound to its log lines.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from custody/domain.toml.
from custody.domain import custody  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from custody.utils.logging import bind_caller, clear_context

custody.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Custody API",
    description="Bottle custody tracking — manufacturer, carrier, retailer and customer",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the custody domain context and tag logs with the caller."""
    if request.url.path == "/health":
        return await call_next(request)

    account = request.headers.get("x-account")
    if account:
        bind_caller(account, path=request.url.path)
    try:
        with custody.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from custody.api import bottle_router, member_router, sale_router, shipment_router  # noqa: E402

app.include_router(member_router)
app.include_router(bottle_router)
app.include_router(shipment_router)
app.include_router(sale_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {"custody": {"name": custody.name}},
        }
    )
