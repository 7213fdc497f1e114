import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.config import Settings, settings as default_settings
from storefront.database import Database, build_database
from storefront.exceptions import StoreError
from storefront.notifications import EmailNotificationGateway
from storefront.routes import (
    account,
    admin_orders,
    admin_products,
    cart,
    health,
    orders,
    products,
)
from storefront.seed import seed_initial_products

logger = logging.getLogger(__name__)


def describe_validation_error(exc: RequestValidationError) -> str:
    """One-line message for the first failing field of a malformed request."""
    errors = exc.errors()
    if not errors:
        return "Invalid request."

    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"Invalid request: {field}: {message}" if field else f"Invalid request: {message}"


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    notifier=None,
) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or build_database(settings)
        app.state.database = db

        # Create tables and seed ONLY in local
        if settings.ENV == "local":
            db.create_all()
            with db.session() as session:
                seeded = seed_initial_products(session)
            if seeded:
                logger.info(f"Seeded {seeded} sample products")

        logger.info("Storefront started")
        yield

        db.dispose()
        logger.info("Storefront stopped")

    app = FastAPI(title="Storefront Orders API", lifespan=lifespan)
    app.state.settings = settings
    app.state.notifier = notifier or EmailNotificationGateway(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://localhost:3000",
            "http://127.0.0.1:5173",
            "http://127.0.0.1:8000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400, content={"detail": describe_validation_error(exc)}
        )

    app.include_router(products.router, prefix="/products", tags=["Products"])
    app.include_router(cart.router, prefix="/cart", tags=["Cart"])
    app.include_router(orders.router, prefix="/orders", tags=["Orders"])
    app.include_router(admin_orders.router, prefix="/admin/orders", tags=["Admin Orders"])
    app.include_router(
        admin_products.router, prefix="/admin/products", tags=["Admin Products"]
    )
    app.include_router(account.router, prefix="/account", tags=["Account"])
    app.include_router(health.router, prefix="/health", tags=["Health"])

    @app.get("/")
    def root():
        return {
            "product_endpoints": ["/products", "/products/{product_id}"],
            "cart_endpoints": [
                "/cart", "/cart/items", "/cart/items/{product_id}"
            ],
            "order_endpoints": ["/orders", "/orders/my-orders"],
            "admin_order_endpoints": [
                "/admin/orders", "/admin/orders/{order_id}",
                "/admin/orders/{order_id}/status"
            ],
            "admin_product_endpoints": [
                "/admin/products", "/admin/products/{product_id}"
            ],
            "account_endpoints": ["/account"],
        }

    return app


app = create_app()
