# File: kwcrawl/core/jobs/manager.py

import logging
from typing import Optional
from uuid import UUID
from datetime import datetime, timezone
from kwcrawl.core.database.connection import SessionLocal
from .domain.models import JobSubmission, JobRecord
from .models import JobModel
from .types import JobType, JobStatus

logger = logging.getLogger(__name__)

class JobManager:
    """
    The Central Dispatcher.
    It doesn't know *how* to do the job, but it knows *who* can.
    """

    def submit_job(self, submission: JobSubmission) -> UUID:
        """Create a Job Record in PENDING state."""
        with SessionLocal() as db:
            job = JobModel(job_type=submission.job_type, payload=dict(submission.payload))
            db.add(job)
            db.commit()
            db.refresh(job)
            logger.info(f"Job Submitted: {job.id} [{submission.job_type.value}]")
            return job.id

    def run_job(self, job_id: UUID):
        """
        Executes a specific job by routing it to the appropriate feature handler.
        """
        with SessionLocal() as db:
            job = db.get(JobModel, job_id)
            if not job:
                logger.error(f"Job {job_id} not found.")
                return

            # Update Status -> PROCESSING
            job.status = JobStatus.PROCESSING
            job.started_at = datetime.now(timezone.utc)
            db.commit()

            try:
                logger.info(f"Starting Job {job_id} ({job.job_type.value})...")

                result = self._route_to_feature(job)

                # Update Status -> COMPLETED
                job.result_meta = result
                job.status = JobStatus.COMPLETED
                logger.info(f"Job {job_id} Completed successfully.")

            except NotImplementedError as e:
                # Configuration error
                job.status = JobStatus.FAILED
                job.error_message = f"Configuration Error: {str(e)}"
                logger.error(f"Job {job_id} Failed: {e}")

            except Exception as e:
                # Execution error
                job.status = JobStatus.FAILED
                job.error_message = str(e)
                logger.exception(f"Job {job_id} Failed: {e}")

            finally:
                job.finished_at = datetime.now(timezone.utc)
                db.commit()

    def get_job(self, job_id: UUID) -> Optional[JobRecord]:
        with SessionLocal() as db:
            job = db.get(JobModel, job_id)
            if not job:
                return None
            return JobRecord(
                id=job.id,
                job_type=job.job_type,
                status=job.status,
                payload=dict(job.payload or {}),
                result_meta=dict(job.result_meta or {}),
                created_at=job.created_at,
                started_at=job.started_at,
                finished_at=job.finished_at,
                error_message=job.error_message,
            )

    def _route_to_feature(self, job: JobModel) -> dict:
        """
        Routes the job to the correct Feature Handler.
        Uses lazy imports to prevent circular dependencies.
        """
        if job.job_type == JobType.KEYWORD_CRAWL:
            from kwcrawl.features.keyword_crawler.service.job_handler import CrawlJobHandler
            return CrawlJobHandler().handle(job.payload)

        raise NotImplementedError(f"No handler registered for JobType: {job.job_type}")
