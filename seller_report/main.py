import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Query

from seller_report.config import get_settings
from seller_report.engine import analyze_sales_data
from seller_report.errors import SalesReportError
from seller_report.models import SalesData
from seller_report.store import store
from seller_report.strategies import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    # Auto-seed on startup so the service is immediately usable
    if settings.seed_on_startup:
        from scripts.seed_data import seed
        seed(store)
        logger.info("Store seeded: %d sellers, %d purchase records",
                    len(store.sellers), len(store.purchase_records))
    yield


app = FastAPI(
    title="Seller Performance Report",
    version="1.0.0",
    description="Seller revenue, profit and bonus ranking",
    lifespan=lifespan,
)


def _build_report(data) -> list[dict]:
    try:
        rows = analyze_sales_data(
            data, DEFAULT_OPTIONS, top_products_limit=get_settings().top_products_limit,
        )
    except SalesReportError as exc:
        raise HTTPException(422, str(exc))
    return [r.model_dump() for r in rows]


# ── Sellers & products ───────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


@app.get("/api/v1/sellers/{seller_id}", summary="Get seller details")
def get_seller(seller_id: str):
    seller = store.get_seller(seller_id)
    if not seller:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    return seller.model_dump()


@app.get("/api/v1/products", summary="List all products")
def list_products():
    return {"products": [p.model_dump() for p in store.list_products()]}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/reports/sellers", summary="Seller report over the stored data")
def get_seller_report(
    limit: Optional[int] = Query(default=None, ge=1, description="Return only the top N sellers"),
):
    rows = _build_report(store.as_sales_data())
    if limit is not None:
        rows = rows[:limit]
    return {"sellers": rows}


@app.get("/api/v1/reports/sellers/{seller_id}", summary="One seller's report row")
def get_seller_report_row(seller_id: str):
    if store.get_seller(seller_id) is None:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    rows = _build_report(store.as_sales_data())
    rank = next(i for i, r in enumerate(rows) if r["seller_id"] == seller_id)
    return {"rank": rank + 1, "total": len(rows), **rows[rank]}


@app.post("/api/v1/reports/sellers", summary="Seller report over the posted data")
def post_seller_report(data: SalesData):
    return {"sellers": _build_report(data)}


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed test data")
def reseed():
    from scripts.seed_data import seed
    store.clear()
    seed(store)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "products": len(store.products),
        "purchase_records": len(store.purchase_records),
    }
