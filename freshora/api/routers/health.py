# freshora/api/routers/health.py
from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/")
def root():
    return {
        "message": "Freshora Backend API is running",
        "health": "/health",
        "endpoints": ["/api/services", "/api/items", "/api/orders", "/api/cart"],
    }


@router.get("/health")
def health():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}
