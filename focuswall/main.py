# focuswall/main.py
import uvicorn
import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from focuswall.api.v1.api import api_router
from focuswall.core.config import settings
from focuswall.core.database import AsyncSessionLocal, create_db_and_tables
from focuswall.core.errors import FocusWallError
from focuswall.core.storage import SQLBlobStorage
from focuswall.utils.archiving import auto_archive_items

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    openapi_tags=[
        {"name": "goals", "description": "Create, edit, complete, archive and restore goals"},
        {"name": "tasks", "description": "Tasks and Today's Top 3"},
        {"name": "settings", "description": "Auto-archive settings"},
        {"name": "dashboard", "description": "Focus wall and progress dashboard views"},
    ],
)

# Domain errors carry their own status code
@app.exception_handler(FocusWallError)
async def focus_wall_exception_handler(request: Request, exc: FocusWallError):
    logger.info(f"{request.method} {request.url.path} rejected: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for better error responses"""
    if isinstance(exc, HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail}
        )

    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )

# ------------------------------------------------------------
# ROOT ENDPOINT
# ------------------------------------------------------------
@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information"""
    return {
        "message": f"{settings.APP_NAME} is running!",
        "version": settings.VERSION
    }

# ------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ------------------------------------------------------------
@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT
    }

# ------------------------------------------------------------
# BUSINESS LOGIC ROUTES
# ------------------------------------------------------------
app.include_router(api_router, prefix="/api/v1")

# ------------------------------------------------------------
# STARTUP EVENT
# ------------------------------------------------------------
@app.on_event("startup")
async def on_startup():
    """Create the storage table and run the auto-archive sweep once per session"""
    try:
        await create_db_and_tables()
        logger.info(f"✅ Storage ready at {settings.DATABASE_URL}")
    except Exception as e:
        logger.error(f"❌ Startup error: {str(e)}")
        return

    if not settings.AUTO_ARCHIVE_ON_STARTUP:
        return
    try:
        async with AsyncSessionLocal() as session:
            result = await auto_archive_items(SQLBlobStorage(session))
        logger.info(
            f"✅ Auto-archive sweep done: {result.archived_goals} goal(s), "
            f"{result.archived_tasks} task(s)"
        )
    except FocusWallError as e:
        logger.warning(f"⚠️ Auto-archive sweep skipped: {e.detail}")

def run() -> None:
    uvicorn.run("focuswall.main:app", host=settings.HOST, port=settings.PORT, reload=False)

if __name__ == "__main__":
    run()
