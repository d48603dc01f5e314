#!/usr/bin/env python3
"""Jobly CLI for searching and pruning records."""

import argparse

import questionary
from rich.console import Console
from rich.table import Table

from jobly.company import CompanyRepository
from jobly.config import configure_logging
from jobly.errors import JoblyError
from jobly.job import JobRepository

console = Console()


def render(title: str, rows: list[dict]) -> None:
    """Print rows as a table, one column per key of the first row."""
    if not rows:
        console.print(f"[red]No {title.lower()} found.[/]")
        return

    table = Table(title=title)
    for column in rows[0]:
        table.add_column(column)
    for row in rows:
        table.add_row(*("" if value is None else str(value) for value in row.values()))
    console.print(table)


def search_companies(args: argparse.Namespace) -> None:
    """Search companies by name and employee count."""
    filters = {
        "name": args.name,
        "minEmployees": args.min_employees,
        "maxEmployees": args.max_employees,
    }
    render("Companies", CompanyRepository().find_all(filters))


def search_jobs(args: argparse.Namespace) -> None:
    """Search jobs by title, minimum salary and equity."""
    filters = {
        "title": args.title,
        "minSalary": args.min_salary,
        "hasEquity": args.has_equity,
    }
    render("Jobs", JobRepository().find_all(filters))


def remove_company(args: argparse.Namespace) -> None:
    """Delete a company and its jobs after confirmation."""
    company_repo = CompanyRepository()
    company = company_repo.get(args.handle)

    summary = (
        f"Will delete [bold]{company['name']}[/] ({company['handle']}) "
        f"and its {len(company['jobs'])} job(s)."
    )
    console.print(f"[yellow]{summary}[/]")

    if not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    company_repo.remove(args.handle)
    console.print(f"[green]Deleted {args.handle}.[/]")


def main():
    parser = argparse.ArgumentParser(description="Jobly CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    companies = subparsers.add_parser("search-companies", help="Search companies")
    companies.add_argument("--name")
    companies.add_argument("--min-employees", type=int)
    companies.add_argument("--max-employees", type=int)
    companies.set_defaults(handler=search_companies)

    jobs = subparsers.add_parser("search-jobs", help="Search jobs")
    jobs.add_argument("--title")
    jobs.add_argument("--min-salary", type=int)
    jobs.add_argument("--has-equity", action="store_true", default=None)
    jobs.set_defaults(handler=search_jobs)

    remove = subparsers.add_parser("remove-company", help="Delete a company")
    remove.add_argument("handle")
    remove.set_defaults(handler=remove_company)

    args = parser.parse_args()
    configure_logging()

    try:
        args.handler(args)
    except JoblyError as e:
        console.print(f"[red]{e.message}[/]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
