"""Seed a few companies and jobs into the database."""
from jobly.company import CompanyRepository
from jobly.errors import ConflictAlreadyExists
from jobly.job import JobRepository

INITIAL_COMPANIES = [
    {
        "handle": "anderson-arias-morrow",
        "name": "Anderson, Arias and Morrow",
        "description": "Somebody program how I.",
        "num_employees": 245,
    },
    {
        "handle": "arnold-berger-townsend",
        "name": "Arnold, Berger and Townsend",
        "description": "Kind crime at perhaps beat.",
        "num_employees": 795,
    },
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "description": "Difficult ready trip question produce produce someone.",
        "num_employees": 862,
    },
]

INITIAL_JOBS = [
    {"title": "Conservator, furniture", "salary": 110000, "equity": "0", "company_handle": "arnold-berger-townsend"},
    {"title": "Information officer", "salary": 200000, "equity": "0", "company_handle": "bauer-gallagher"},
    {"title": "Consulting civil engineer", "salary": 60000, "equity": "0.02", "company_handle": "anderson-arias-morrow"},
]


def main():
    company_repo = CompanyRepository()
    job_repo = JobRepository()

    for company in INITIAL_COMPANIES:
        try:
            result = company_repo.create(**company)
        except ConflictAlreadyExists:
            print(f"Skipping {company['handle']} - already exists")
            continue
        print(f"Created: {result['handle']}")

    for job in INITIAL_JOBS:
        try:
            result = job_repo.create(**job)
        except ConflictAlreadyExists:
            print(f"Skipping {job['title']} - already exists")
            continue
        print(f"Created: {result['title']} (id={result['id']})")


if __name__ == "__main__":
    main()
