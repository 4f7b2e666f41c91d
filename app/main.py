# app/main.py
from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from typing import Optional, Dict, Any
import uvicorn

from .config import Settings, configure_logging, get_settings
from .database import ProductStore
from .middleware import install_pipeline
from .models import ErrorBody, Product, ProductPage
from .sdk import (
    list_products_logic, get_product_logic, search_products_logic, stats_logic,
    create_product_logic, update_product_logic, delete_product_logic,
)

WELCOME_MESSAGE = "Welcome to the Product API! Go to /api/products to see all products."

router = APIRouter()

# ---------------------------
# Dependencies
# ---------------------------
def get_store(request: Request) -> ProductStore:
    return request.app.state.store

def get_product_fields(request: Request) -> Dict[str, Any]:
    # set by the validation stage for every POST/PUT that got this far
    return request.state.product_fields

# ---------------------------
# Routes
# ---------------------------
@router.get("/", response_class=PlainTextResponse)
async def root():
    return WELCOME_MESSAGE

@router.get("/api/products", responses={200: {"model": ProductPage}})
async def list_products(category: Optional[str] = None, page: Optional[str] = None,
                        limit: Optional[str] = None, store: ProductStore = Depends(get_store)):
    return await list_products_logic(store, category, page, limit)

# search and stats are declared before /{product_id} so they aren't captured by it
@router.get("/api/products/search")
async def search_products(q: Optional[str] = None, store: ProductStore = Depends(get_store)):
    return await search_products_logic(store, q)

@router.get("/api/products/stats", response_model=Dict[str, int])
async def product_stats(store: ProductStore = Depends(get_store)):
    return await stats_logic(store)

@router.get("/api/products/{product_id}", responses={200: {"model": Product}, 404: {"model": ErrorBody}})
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await get_product_logic(store, product_id)

@router.post("/api/products", status_code=201, responses={201: {"model": Product}, 400: {"model": ErrorBody}})
async def create_product(fields: Dict[str, Any] = Depends(get_product_fields),
                         store: ProductStore = Depends(get_store)):
    return await create_product_logic(store, fields)

@router.put("/api/products/{product_id}", responses={200: {"model": Product}, 400: {"model": ErrorBody}, 404: {"model": ErrorBody}})
async def update_product(product_id: str, fields: Dict[str, Any] = Depends(get_product_fields),
                         store: ProductStore = Depends(get_store)):
    return await update_product_logic(store, product_id, fields)

@router.delete("/api/products/{product_id}", status_code=204, response_class=Response, responses={404: {"model": ErrorBody}})
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    await delete_product_logic(store, product_id)
    return Response(status_code=204)

# ---------------------------
# App factory
# ---------------------------
def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Product API (in-memory)")
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore()
    install_pipeline(app, settings)
    app.include_router(router)
    return app

app = create_app()

def run() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    # log_config=None keeps uvicorn on the root handler set up above
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)

if __name__ == "__main__":
    run()
