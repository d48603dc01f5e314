from jobly.sql import FilterRule, contains

# Declared order fixes placeholder numbering
JOB_FILTERS = (
    FilterRule("title", "title ILIKE {}", transform=contains),
    FilterRule("minSalary", "salary >= {}"),
    # Only an explicit True narrows the search; False means "don't care"
    FilterRule("hasEquity", "equity > 0", gate=lambda value: value is True),
)
