from jobly.sql import FilterRule, RangeCheck, contains

# Declared order fixes placeholder numbering
COMPANY_FILTERS = (
    FilterRule("name", "name ILIKE {}", gate=bool, transform=contains),
    FilterRule("minEmployees", "num_employees >= {}"),
    FilterRule("maxEmployees", "num_employees <= {}"),
)

COMPANY_RANGES = (
    RangeCheck(
        "minEmployees",
        "maxEmployees",
        "Minimum number of employees cannot be greater than maximum number of employees.",
    ),
)
