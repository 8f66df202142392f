import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pymongo.database import Database

from core.config import settings
from core.errors import validation_exception_handler
from db.database import close_client, ensure_indexes, get_database, get_db
from routers.cocktails import router as cocktails_router
from routers.ingredients import router as ingredients_router
from routers.cocktail_ingredient import router as cocktail_ingredient_router
from routers.docs import router as docs_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Keep serving when the store is down; /health reports it as degraded
    try:
        ensure_indexes(get_db())
        logger.info("MongoDB connected (database %r)", settings.mongodb_db)
    except Exception:
        logger.exception("MongoDB connection error")
    try:
        yield
    finally:
        close_client()


app = FastAPI(
    title="Cocktail API",
    description="API for managing cocktails, ingredients and the ingredients of each cocktail",
    version="1.0.0",
    # Served by routers.docs at /swagger and /docs
    openapi_url=None,
    docs_url=None,
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

# API documentation
app.include_router(docs_router)

# Cocktail catalog routes
app.include_router(cocktails_router, prefix="/cocktails", tags=["Cocktails"])
app.include_router(ingredients_router, prefix="/ingredients", tags=["Ingredients"])
app.include_router(cocktail_ingredient_router, prefix="/cocktail-ingredients", tags=["CocktailIngredients"])


@app.get("/health", include_in_schema=False)
def health(db: Database = Depends(get_database)) -> dict:
    try:
        db.command("ping")
        return {"status": "ok", "db": "reachable"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
