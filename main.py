import logging
import os
from datetime import datetime

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import Base, engine
from exceptions import InventoryError
from crud.api.deps import LOGIN_PATH
from crud.api.v1.endpoints import auth, contact, inventory, movements, reports, taxonomy, users
import models  # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Lab Inventory API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def exception_handling(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("error processing %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error occurred"}
        )

@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    headers = {"Location": LOGIN_PATH} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.__class__.__name__},
        headers=headers,
    )

Base.metadata.create_all(bind=engine)


app.include_router(auth.router, prefix="/api/v1/auth", tags=["auth"])
app.include_router(users.router, prefix="/api/v1/users", tags=["users"])
app.include_router(inventory.router, prefix="/api/v1/inventory", tags=["inventory"])
app.include_router(taxonomy.categories, prefix="/api/v1/categories", tags=["taxonomy"])
app.include_router(taxonomy.locations, prefix="/api/v1/locations", tags=["taxonomy"])
app.include_router(movements.router, prefix="/api/v1/movements", tags=["movements"])
app.include_router(reports.router, prefix="/api/v1/reports", tags=["reports"])
app.include_router(contact.router, prefix="/api/v1/contact", tags=["contact"])


@app.get("/health", tags=["system"])
def health_check():
    return {"status": "ok", "timestamp": datetime.now().isoformat()}

if __name__ == '__main__':
    port = int(os.environ.get("PORT", 8000))

    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=False)
