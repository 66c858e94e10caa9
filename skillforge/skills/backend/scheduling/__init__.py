"""Scheduled task skills"""

from skillforge.skills.backend.scheduling.cron_job_scheduler import CronJobSchedulerSkill

__all__ = [
    "CronJobSchedulerSkill",
]
