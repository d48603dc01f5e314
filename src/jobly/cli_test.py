"""
Tests for the jobly CLI.

Run with: pytest src/jobly/cli_test.py -v
"""
import sys
from unittest.mock import MagicMock, patch

import pytest

from jobly import cli
from jobly.errors import NotFound


def run(*argv):
    with patch.object(sys, "argv", ["jobly", *argv]):
        cli.main()


class TestSearch:
    def test_search_jobs_maps_flags_to_filters(self):
        with patch("jobly.cli.JobRepository") as repo_class:
            repo_class.return_value.find_all.return_value = []

            run("search-jobs", "--title", "eng", "--has-equity")

        repo_class.return_value.find_all.assert_called_once_with(
            {"title": "eng", "minSalary": None, "hasEquity": True}
        )

    def test_search_companies_maps_flags_to_filters(self):
        with patch("jobly.cli.CompanyRepository") as repo_class:
            repo_class.return_value.find_all.return_value = [
                {"handle": "c1", "name": "C1", "numEmployees": None}
            ]

            run("search-companies", "--min-employees", "1", "--max-employees", "9")

        repo_class.return_value.find_all.assert_called_once_with(
            {"name": None, "minEmployees": 1, "maxEmployees": 9}
        )


class TestRemoveCompany:
    def test_remove_after_confirm(self):
        with patch("jobly.cli.CompanyRepository") as repo_class, \
                patch("jobly.cli.questionary.confirm") as confirm:
            repo = repo_class.return_value
            repo.get.return_value = {"handle": "c1", "name": "C1", "jobs": []}
            confirm.return_value = MagicMock(ask=MagicMock(return_value=True))

            run("remove-company", "c1")

        repo.remove.assert_called_once_with("c1")

    def test_cancelled(self):
        with patch("jobly.cli.CompanyRepository") as repo_class, \
                patch("jobly.cli.questionary.confirm") as confirm:
            repo = repo_class.return_value
            repo.get.return_value = {"handle": "c1", "name": "C1", "jobs": []}
            confirm.return_value = MagicMock(ask=MagicMock(return_value=False))

            run("remove-company", "c1")

        repo.remove.assert_not_called()

    def test_unknown_company_exits(self):
        with patch("jobly.cli.CompanyRepository") as repo_class:
            repo_class.return_value.get.side_effect = NotFound("No company: nope")

            with pytest.raises(SystemExit) as exc:
                run("remove-company", "nope")

        assert exc.value.code == 1
