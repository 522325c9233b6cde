from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from taskboard.config.settings import settings
from taskboard.database import Base, engine
from taskboard.routers import graphql
from taskboard.services.scheduler import overdue_scheduler
import taskboard.models  # noqa: F401  (registers tables on Base.metadata)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Taskboard API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Route registration
app.include_router(graphql.router, prefix="/graphql", tags=["GraphQL"])

# Startup and shutdown events
@app.on_event("startup")
async def startup_event():
    logger.info("Starting Taskboard API...")
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    if settings.SCHEDULER_ENABLED:
        overdue_scheduler.start()

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Taskboard API...")
    overdue_scheduler.stop()

# Root route
@app.get("/")
def read_root():
    return {"message": "Taskboard API"}

@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/scheduler/status")
async def get_scheduler_status():
    """Get scheduler status and job information"""
    return await overdue_scheduler.get_scheduler_status()

@app.post("/scheduler/trigger/overdue")
async def trigger_overdue_check():
    """Manually trigger the overdue task check"""
    try:
        overdue_ids = await overdue_scheduler.check_overdue_tasks()
        return {"message": "Overdue check triggered successfully", "overdue_task_ids": overdue_ids}
    except Exception as e:
        logger.error(f"Failed to trigger overdue check: {e}")
        return {"error": "Failed to trigger overdue check"}
