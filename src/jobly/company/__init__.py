"""
Company

Data access for companies: CRUD plus filtered search by name and size.
"""

from jobly.company.filters import COMPANY_FILTERS, COMPANY_RANGES
from jobly.company.repository import CompanyRepository

__all__ = ["CompanyRepository", "COMPANY_FILTERS", "COMPANY_RANGES"]
