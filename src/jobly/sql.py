"""
SQL fragment builders.

Two helpers shared by the record repositories:

- build_set_clause: sparse update data -> `"col"=$1, "col2"=$2` + values
- build_where_clause: optional search filters -> `a >= $1 AND b ILIKE $2` + values

Both return a SqlFragment whose Nth value binds placeholder $N. Column names
only ever come from a trusted field-to-column mapping or from a record
type's declared filter rules.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterable, NamedTuple

from jobly.errors import InvalidInput


class SqlFragment(NamedTuple):
    """A partial SQL clause and the values for its $N placeholders, in order."""

    text: str
    values: list[Any]

    def next_placeholder(self) -> str:
        """Placeholder for one more value appended after this fragment's."""
        return f"${len(self.values) + 1}"


# =============================================================================
# Partial Update
# =============================================================================


def column_name(field: str, field_to_column: Mapping[str, str]) -> str:
    """Resolve a field to its column, falling back to the field itself."""
    return field_to_column.get(field, field)


def as_pairs(update_set: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> list[tuple[str, Any]]:
    """Normalise update data to an ordered list of (field, value) pairs."""
    if isinstance(update_set, Mapping):
        return list(update_set.items())
    return list(update_set)


def build_set_clause(
    update_set: Mapping[str, Any] | Iterable[tuple[str, Any]],
    field_to_column: Mapping[str, str],
) -> SqlFragment:
    """
    Build the body of a SET clause from only the fields being changed.

    Args:
        update_set: Fields to change, as a mapping (insertion order is used)
                    or as an explicit sequence of (field, value) pairs.
        field_to_column: Trusted field -> column mapping. Unmapped fields
                         use their own name as the column.

    Returns:
        SqlFragment, e.g. ('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Raises:
        InvalidInput: If update_set is empty.

    Example:
        >>> build_set_clause({"firstName": "Aliya", "age": 32},
        ...                  {"firstName": "first_name"})
        SqlFragment(text='"first_name"=$1, "age"=$2', values=['Aliya', 32])
    """
    items = as_pairs(update_set)
    if not items:
        raise InvalidInput("No data")

    columns = [
        f'"{column_name(field, field_to_column)}"=${idx}'
        for idx, (field, _) in enumerate(items, start=1)
    ]
    return SqlFragment(", ".join(columns), [value for _, value in items])


# =============================================================================
# Filtered Search
# =============================================================================


def _is_present(value: Any) -> bool:
    return value is not None


def _identity(value: Any) -> Any:
    return value


def contains(value: Any) -> str:
    """Wrap a value in % wildcards for a partial ILIKE match."""
    return f"%{value}%"


@dataclass(frozen=True)
class FilterRule:
    """
    One recognized search filter.

    `template` holds `{}` where the placeholder goes; a template without `{}`
    is a value-less predicate (e.g. `equity > 0`) and binds nothing. `gate`
    decides whether a supplied value contributes a predicate at all.
    """

    key: str
    template: str
    gate: Callable[[Any], bool] = _is_present
    transform: Callable[[Any], Any] = _identity

    @property
    def takes_value(self) -> bool:
        return "{}" in self.template


@dataclass(frozen=True)
class RangeCheck:
    """A lower/upper filter pair that must not be inverted."""

    lower: str
    upper: str
    message: str


def build_where_clause(
    filters: Mapping[str, Any] | None,
    rules: Iterable[FilterRule],
    ranges: Iterable[RangeCheck] = (),
) -> SqlFragment:
    """
    Build the body of a WHERE clause from optional search filters.

    Rules are applied in their declared order, not the order of `filters`,
    so the same filter set always yields the same SQL and numbering. Keys
    with a None value count as absent; keys without a rule are ignored.

    Returns:
        SqlFragment joined with ' AND ', or empty text if nothing matched.

    Raises:
        InvalidInput: If both bounds of a range are given and lower > upper,
            or the bounds cannot be compared.
    """
    filters = filters or {}

    for check in ranges:
        lower = filters.get(check.lower)
        upper = filters.get(check.upper)
        if lower is None or upper is None:
            continue
        try:
            inverted = lower > upper
        except TypeError:
            raise InvalidInput(f"{check.lower} and {check.upper} must be comparable numbers") from None
        if inverted:
            raise InvalidInput(check.message)

    predicates = []
    values = []
    for rule in rules:
        value = filters.get(rule.key)
        if value is None or not rule.gate(value):
            continue
        if rule.takes_value:
            values.append(rule.transform(value))
            predicates.append(rule.template.format(f"${len(values)}"))
        else:
            predicates.append(rule.template)

    return SqlFragment(" AND ".join(predicates), values)


def where(fragment: SqlFragment) -> str:
    """Prefix a non-empty predicate fragment with WHERE."""
    return f" WHERE {fragment.text}" if fragment.text else ""
