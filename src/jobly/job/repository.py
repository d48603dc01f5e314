import logging
from typing import Any, Iterable, List, Mapping, Optional

from psycopg.errors import UniqueViolation

from jobly import db
from jobly.errors import ConflictAlreadyExists, NotFound
from jobly.job.filters import JOB_FILTERS
from jobly.sql import as_pairs, build_set_clause, build_where_clause, where

logger = logging.getLogger(__name__)

JOB_COLUMNS = """
    id,
    title,
    salary,
    equity,
    company_handle AS "companyHandle"
"""

# company_handle and id are fixed once a job exists
UPDATABLE_FIELDS = ("title", "salary", "equity")

# Job fields share their column names
FIELD_TO_COLUMN: dict[str, str] = {}


class JobRepository:
    """
    Repository for job posting data access.
    Encapsulates all SQL and queries for the jobs table.
    """

    def create(
        self,
        title: str,
        salary: int,
        equity,
        company_handle: str,
    ) -> dict:
        """
        Create a job posting and return it.

        Raises:
            ConflictAlreadyExists: If the company already posts a job with
                this title.
        """
        duplicate = db.fetch_one(
            "SELECT id FROM jobs WHERE company_handle = $1 AND title = $2",
            [company_handle, title],
        )
        if duplicate:
            raise ConflictAlreadyExists(f"Duplicate job: {title} at {company_handle}")

        # UNIQUE (company_handle, title) covers creates that race past the check
        try:
            job = db.fetch_one(
                f"""
                INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}
                """,
                [title, salary, equity, company_handle],
            )
        except UniqueViolation:
            raise ConflictAlreadyExists(f"Duplicate job: {title} at {company_handle}") from None
        logger.info("Created job %s (%s at %s)", job["id"], title, company_handle)
        return job

    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[dict]:
        """
        Find jobs with their company's name, optionally filtered.

        Filters (all optional):
            - title: case-insensitive partial match
            - minSalary: salary at least this much
            - hasEquity: True returns only jobs with equity > 0;
              any other value is ignored

        Returns [{ id, title, salary, equity, companyHandle, companyName }, ...]
        """
        clause = build_where_clause(filters, JOB_FILTERS)
        query = f"""
            SELECT j.id,
                   j.title,
                   j.salary,
                   j.equity,
                   j.company_handle AS "companyHandle",
                   c.name AS "companyName"
            FROM jobs j
              LEFT JOIN companies AS c ON c.handle = j.company_handle
            {where(clause)}
            ORDER BY title, id
        """
        logger.debug("Job search: %s", query)
        return db.fetch_all(query, clause.values)

    def get(self, job_id: int) -> dict:
        """
        Get a job with the company that posted it.

        Returns { id, title, salary, equity, company }
        where company is { handle, name, description, numEmployees, logoUrl }
        """
        job = db.fetch_one(
            f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
            [job_id],
        )
        if not job:
            raise NotFound(f"No job: {job_id}")

        job["company"] = db.fetch_one(
            """
            SELECT handle,
                   name,
                   description,
                   num_employees AS "numEmployees",
                   logo_url AS "logoUrl"
            FROM companies
            WHERE handle = $1
            """,
            [job.pop("companyHandle")],
        )
        return job

    def update(
        self, job_id: int, data: Mapping[str, Any] | Iterable[tuple[str, Any]]
    ) -> dict:
        """
        Partially update a job; only the supplied fields change.

        Data can include: { title, salary, equity }

        Raises:
            InvalidInput: If data is empty.
            NotFound: If no job has this id.
            ConflictAlreadyExists: If the new title is already posted by
                the same company.
        """
        pairs = as_pairs(data)
        clause = build_set_clause(pairs, FIELD_TO_COLUMN)
        try:
            job = db.fetch_one(
                f"""
                UPDATE jobs
                SET {clause.text}
                WHERE id = {clause.next_placeholder()}
                RETURNING {JOB_COLUMNS}
                """,
                [*clause.values, job_id],
            )
        except UniqueViolation:
            raise ConflictAlreadyExists(f"Duplicate job title for job {job_id}") from None
        if not job:
            raise NotFound(f"No job: {job_id}")

        logger.info("Updated job %s (%s)", job_id, ", ".join(field for field, _ in pairs))
        return job

    def remove(self, job_id: int) -> None:
        """Delete a job posting."""
        deleted = db.execute("DELETE FROM jobs WHERE id = $1", [job_id])
        if not deleted:
            raise NotFound(f"No job: {job_id}")

        logger.info("Removed job %s", job_id)
