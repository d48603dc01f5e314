"""
Unit tests for the job search filters.

Run with: pytest src/jobly/job/filters_test.py -v
"""
import pytest

from jobly.job import JOB_FILTERS
from jobly.sql import build_where_clause


def job_where(filters):
    return build_where_clause(filters, JOB_FILTERS)


class TestJobFilters:
    def test_title(self):
        assert job_where({"title": "b1"}) == ("title ILIKE $1", ["%b1%"])

    def test_min_salary_and_equity(self):
        result = job_where({"minSalary": 15, "hasEquity": True})

        assert result == ("salary >= $1 AND equity > 0", [15])

    def test_text_and_lower_bound_in_declared_order(self):
        result = job_where({"minSalary": 100, "title": "eng"})

        assert result == ("title ILIKE $1 AND salary >= $2", ["%eng%", 100])

    @pytest.mark.parametrize("has_equity", [False, "true", 1])
    def test_has_equity_only_when_true(self, has_equity):
        assert job_where({"hasEquity": has_equity}) == ("", [])

    def test_equity_alone_binds_nothing(self):
        assert job_where({"hasEquity": True}) == ("equity > 0", [])

    def test_all_filters(self):
        result = job_where({"hasEquity": True, "title": "j", "minSalary": 0})

        assert result == ("title ILIKE $1 AND salary >= $2 AND equity > 0", ["%j%", 0])
