from contextlib import asynccontextmanager
from datetime import date, datetime, time
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Path as PathParam, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import RedirectResponse, Response
from pydantic import BaseModel, ConfigDict

from bakery_data import config
from bakery_data.build_assets import (order_items_df, orders_df, products_df, stats_orders_by_month,
                                      stats_state_mix, stats_top_products)
from bakery_data.generator import DataGenerator
from bakery_data.model import OrderState, Role
from bakery_data.random_stream import RandomStream
from bakery_data.security import WerkzeugPasswordHasher
from bakery_data.storage import DemoStore

# --- Swagger tags ---
tags_metadata = [
    {"name": "Catalogue", "description": "Products, users and pickup locations."},
    {"name": "Orders", "description": "Generated orders with their items and lifecycle history."},
    {"name": "KPIs", "description": "Aggregates computed from the generated orders."},
    {"name": "Raw CSV tables", "description": "Downloadable CSV data."},
]

# --- Response models for nicer docs ---
class _FromEntity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

class ProductOut(_FromEntity):
    id: int
    name: str
    price: int

class PickupLocationOut(_FromEntity):
    id: int
    name: str

class UserOut(_FromEntity):
    id: int
    email: str
    first_name: str
    last_name: str
    role: Role
    locked: bool

class UserRef(_FromEntity):
    email: str
    first_name: str
    last_name: str

class CustomerOut(_FromEntity):
    full_name: str
    phone_number: str
    details: Optional[str] = None

class OrderItemOut(_FromEntity):
    product: ProductOut
    quantity: int
    comment: Optional[str] = None

class HistoryItemOut(_FromEntity):
    created_by: UserRef
    message: str
    new_state: OrderState
    timestamp: datetime

class OrderOut(_FromEntity):
    id: int
    created_by: UserRef
    customer: CustomerOut
    pickup_location: PickupLocationOut
    due_date: date
    due_time: time
    state: OrderState
    total_price: int
    items: list[OrderItemOut]
    history: list[HistoryItemOut]

class MonthStats(BaseModel):
    month: str
    orders: int
    revenue: int

class StateShare(BaseModel):
    state: OrderState
    orders: int
    share: float

class TopProduct(BaseModel):
    product_id: int
    name: str
    quantity: int
    revenue: int


def create_app(store: Optional[DemoStore] = None) -> FastAPI:
    """Build the API around ``store``; an empty store is filled with demo data at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store = store if store is not None else DemoStore()
        DataGenerator(app.state.store, WerkzeugPasswordHasher(), rng=RandomStream(config.SEED)).load_data()
        yield

    app = FastAPI(
        title="Bakery demo API",
        description="Read-only access to the bakery demo dataset: catalogue, orders and simple KPIs.",
        openapi_tags=tags_metadata,
        swagger_ui_parameters={"docExpansion": "list", "defaultModelsExpandDepth": -1},
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET"], allow_headers=["*"])
    app.add_middleware(GZipMiddleware, minimum_size=512)
    _add_routes(app)
    return app


def get_store(request: Request) -> DemoStore:
    return request.app.state.store


def _add_routes(app: FastAPI) -> None:
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")

    # Catalogue

    @app.get("/products", tags=["Catalogue"], summary="All products", response_model=list[ProductOut])
    def products(store: DemoStore = Depends(get_store)):
        return store.products.all()

    @app.get("/users", tags=["Catalogue"], summary="All users (without password hashes)", response_model=list[UserOut])
    def users(store: DemoStore = Depends(get_store)):
        return store.users.all()

    @app.get("/pickup-locations", tags=["Catalogue"], summary="Pickup locations", response_model=list[PickupLocationOut])
    def pickup_locations(store: DemoStore = Depends(get_store)):
        return store.pickup_locations.all()

    # Orders

    @app.get(
        "/orders",
        tags=["Orders"],
        summary="Orders, optionally filtered by state and due date",
        description="Orders are returned in the order they were generated.",
        response_model=list[OrderOut],
    )
    def orders(
        state: Optional[OrderState] = Query(None, description="Only orders currently in this state"),
        due_date: Optional[date] = Query(None, description="Only orders due on this day (YYYY-MM-DD)"),
        limit: int = Query(50, ge=1, le=500),
        offset: int = Query(0, ge=0),
        store: DemoStore = Depends(get_store),
    ):
        rows = store.orders.all()
        if state is not None:
            rows = [o for o in rows if o.state is state]
        if due_date is not None:
            rows = [o for o in rows if o.due_date == due_date]
        # asdict() on the dataclass would drop total_price
        return [OrderOut.model_validate(o) for o in rows[offset:offset + limit]]

    @app.get(
        "/orders/{order_id}",
        tags=["Orders"],
        summary="One order with items and history",
        response_model=OrderOut,
        responses={404: {"description": "Unknown order id"}},
    )
    def order(order_id: int = PathParam(ge=1), store: DemoStore = Depends(get_store)):
        o = store.orders.get(order_id)
        if o is None:
            raise HTTPException(404, "Not found")
        return OrderOut.model_validate(o)

    # KPIs

    @app.get("/stats/orders-by-month", tags=["KPIs"], summary="Orders and revenue per due month", response_model=list[MonthStats])
    def orders_by_month(store: DemoStore = Depends(get_store)):
        return stats_orders_by_month(orders_df(store))

    @app.get("/stats/state-mix", tags=["KPIs"], summary="Share of orders per current state", response_model=list[StateShare])
    def state_mix(store: DemoStore = Depends(get_store)):
        return stats_state_mix(orders_df(store))

    @app.get("/stats/top-products", tags=["KPIs"], summary="Top 5 products by revenue", response_model=list[TopProduct])
    def top_products(store: DemoStore = Depends(get_store)):
        return stats_top_products(order_items_df(store), products_df(store))

    # Raw CSV

    @app.get(
        "/orders.csv",
        tags=["Raw CSV tables"],
        summary="`orders` table (CSV)",
        description="Join with `order_items` (on `order_id`) for line items.",
        responses={200: {"description": "CSV content", "content": {"text/csv": {}}}},
    )
    def orders_csv(store: DemoStore = Depends(get_store)):
        return Response(
            content=orders_df(store).to_csv(index=False),
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="orders.csv"'},
        )


app = create_app()
