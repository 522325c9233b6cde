# taskboard/services/scheduler.py
"""
Scheduler service for the periodic overdue task scan
"""

from datetime import datetime
from typing import Any, Callable, Dict, List

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from sqlalchemy.orm import Session
import logging

from taskboard.config.settings import settings
from taskboard.database import SessionLocal
from taskboard.services.task_queries import TaskQueries

logger = logging.getLogger(__name__)


class OverdueTaskScheduler:
    """Periodically looks for tasks past their due date that are still open"""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal, interval_minutes: int = None):
        self.scheduler = AsyncIOScheduler()
        self.session_factory = session_factory
        self.interval_minutes = interval_minutes or settings.OVERDUE_CHECK_MINUTES
        self.is_running = False
        self.last_run_at = None
        self.last_overdue_count = 0

    def start(self):
        """Start the scheduler"""
        if self.is_running:
            return

        self.scheduler.add_job(
            self.check_overdue_tasks,
            trigger=IntervalTrigger(minutes=self.interval_minutes),
            id='check_overdue_tasks',
            name='Check Overdue Tasks',
            replace_existing=True
        )
        self.scheduler.start()
        self.is_running = True
        logger.info(f"Overdue task scheduler started (every {self.interval_minutes} min)")

    def stop(self):
        """Stop the scheduler"""
        if self.is_running:
            self.scheduler.shutdown(wait=False)
            self.is_running = False
            logger.info("Overdue task scheduler stopped")

    async def check_overdue_tasks(self) -> List[str]:
        """Log every open task whose due date has passed and return their ids"""
        db = self.session_factory()
        try:
            overdue = TaskQueries(db).get_overdue_tasks()
            overdue_ids = [task.id for task in overdue]

            for task in overdue:
                logger.warning(f"Task {task.id} '{task.title}' is overdue (state: {task.state})")
            logger.info(f"Overdue check completed: {len(overdue_ids)} overdue task(s)")

            self.last_run_at = datetime.now()
            self.last_overdue_count = len(overdue_ids)
            return overdue_ids
        except Exception as e:
            logger.error(f"Error checking overdue tasks: {str(e)}")
            raise
        finally:
            db.close()

    async def get_scheduler_status(self) -> Dict[str, Any]:
        """Get scheduler status and job information"""
        jobs = []
        if self.is_running:
            for job in self.scheduler.get_jobs():
                jobs.append({
                    "id": job.id,
                    "name": job.name,
                    "next_run_time": job.next_run_time.isoformat() if job.next_run_time else None,
                })

        return {
            "status": "running" if self.is_running else "stopped",
            "interval_minutes": self.interval_minutes,
            "last_run_at": self.last_run_at.isoformat() if self.last_run_at else None,
            "last_overdue_count": self.last_overdue_count,
            "jobs": jobs,
        }


overdue_scheduler = OverdueTaskScheduler()
