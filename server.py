from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from datetime import datetime, timezone

# Load config first (triggers dotenv)
from config import LOG_LEVEL
from database import client

from routes.session import router as session_router
from routes.rbac import router as rbac_router

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI(title="Platform Admin API")

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=os.environ.get('CORS_ORIGINS', '*').split(','),
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register all routers under /api prefix
API_PREFIX = "/api"
app.include_router(session_router, prefix=API_PREFIX)
app.include_router(rbac_router,    prefix=API_PREFIX)


# ── Root / Health ──────────────────────────────────────────

@app.get("/api/")
async def root():
    return {"message": "Platform Admin API", "version": "1.0.0"}


@app.get("/api/health")
async def health():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


# ── Shutdown ───────────────────────────────────────────────

@app.on_event("shutdown")
async def shutdown_db_client():
    client.close()
