import logging
from typing import Any, Iterable, List, Mapping, Optional

from psycopg.errors import UniqueViolation

from jobly import db
from jobly.company.filters import COMPANY_FILTERS, COMPANY_RANGES
from jobly.errors import ConflictAlreadyExists, NotFound
from jobly.sql import as_pairs, build_set_clause, build_where_clause, where

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = """
    handle,
    name,
    description,
    num_employees AS "numEmployees",
    logo_url AS "logoUrl"
"""

# Fields a caller may change; anything else is rejected before it reaches SQL
UPDATABLE_FIELDS = ("name", "description", "numEmployees", "logoUrl")

FIELD_TO_COLUMN = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class CompanyRepository:
    """
    Repository for company data access.
    Encapsulates all SQL and queries for the companies table.
    """

    def create(
        self,
        handle: str,
        name: str,
        description: str,
        num_employees: int = None,
        logo_url: str = None,
    ) -> dict:
        """
        Create a company and return it.

        Raises:
            ConflictAlreadyExists: If a company with this handle or name exists.
        """
        duplicate = db.fetch_one(
            "SELECT handle FROM companies WHERE handle = $1",
            [handle],
        )
        if duplicate:
            raise ConflictAlreadyExists(f"Duplicate company: {handle}")

        # UNIQUE constraints still apply when a concurrent create passes the check
        try:
            company = db.fetch_one(
                f"""
                INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_COLUMNS}
                """,
                [handle, name, description, num_employees, logo_url],
            )
        except UniqueViolation:
            raise ConflictAlreadyExists(f"Duplicate company: {handle}") from None
        logger.info("Created company %s", handle)
        return company

    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[dict]:
        """
        Find companies, optionally filtered, ordered by name.

        Filters (all optional):
            - name: case-insensitive partial match
            - minEmployees / maxEmployees: inclusive bounds on num_employees

        Raises:
            InvalidInput: If minEmployees > maxEmployees.
        """
        clause = build_where_clause(filters, COMPANY_FILTERS, COMPANY_RANGES)
        query = f"SELECT {COMPANY_COLUMNS} FROM companies{where(clause)} ORDER BY name"
        logger.debug("Company search: %s", query)
        return db.fetch_all(query, clause.values)

    def get(self, handle: str) -> dict:
        """
        Get a company with its jobs.

        Returns { handle, name, description, numEmployees, logoUrl, jobs }
        where jobs is [{ id, title, salary, equity }, ...]
        """
        company = db.fetch_one(
            f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
            [handle],
        )
        if not company:
            raise NotFound(f"No company: {handle}")

        company["jobs"] = db.fetch_all(
            """
            SELECT id, title, salary, equity
            FROM jobs
            WHERE company_handle = $1
            ORDER BY id
            """,
            [handle],
        )
        return company

    def update(
        self, handle: str, data: Mapping[str, Any] | Iterable[tuple[str, Any]]
    ) -> dict:
        """
        Partially update a company; only the supplied fields change.

        Data can include: { name, description, numEmployees, logoUrl }

        Raises:
            InvalidInput: If data is empty.
            NotFound: If no company has this handle.
            ConflictAlreadyExists: If the new name belongs to another company.
        """
        pairs = as_pairs(data)
        clause = build_set_clause(pairs, FIELD_TO_COLUMN)
        try:
            company = db.fetch_one(
                f"""
                UPDATE companies
                SET {clause.text}
                WHERE handle = {clause.next_placeholder()}
                RETURNING {COMPANY_COLUMNS}
                """,
                [*clause.values, handle],
            )
        except UniqueViolation:
            raise ConflictAlreadyExists(f"Duplicate company name for {handle}") from None
        if not company:
            raise NotFound(f"No company: {handle}")

        logger.info("Updated company %s (%s)", handle, ", ".join(field for field, _ in pairs))
        return company

    def remove(self, handle: str) -> None:
        """Delete a company (and, by cascade, its jobs)."""
        deleted = db.execute("DELETE FROM companies WHERE handle = $1", [handle])
        if not deleted:
            raise NotFound(f"No company: {handle}")

        logger.info("Removed company %s", handle)
