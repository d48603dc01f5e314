"""
Job

Data access for job postings: CRUD plus filtered search by title, salary
and equity.
"""

from jobly.job.filters import JOB_FILTERS
from jobly.job.repository import JobRepository

__all__ = ["JobRepository", "JOB_FILTERS"]
