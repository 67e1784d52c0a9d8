"""
SQL fragment helpers for partial updates and filtered listings

Every helper returns a CompiledClause: clause text using 1-based positional
placeholders ($1, $2, ...) plus the values to bind, in placeholder order.
Values are never interpolated into the clause text.
"""
from typing import Any, List, Mapping, NamedTuple, Optional, Tuple

from ..exceptions import ValidationError


class CompiledClause(NamedTuple):
    """SQL fragment and the ordered values for its placeholders"""

    clause: str
    values: List[Any]


def compile_partial_update(
    data: Mapping[str, Any], field_mapping: Optional[Mapping[str, str]] = None
) -> CompiledClause:
    """
    Build the SET clause of an UPDATE from the supplied fields only.

    Args:
        data: field name -> new value; must not be empty
        field_mapping: field name -> column name, for fields whose column
            differs from the field name; other fields map to themselves

    Returns:
        CompiledClause, e.g. for ({"firstName": "Aliya", "age": 32},
        {"firstName": "first_name"}):
            ('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Raises:
        ValidationError: if data is empty
    """
    if not data:
        raise ValidationError("No data supplied")

    field_mapping = field_mapping or {}
    columns = [
        f'"{field_mapping.get(field, field)}"=${idx}'
        for idx, field in enumerate(data, start=1)
    ]
    return CompiledClause(", ".join(columns), list(data.values()))


def _where(expressions: List[str]) -> str:
    if not expressions:
        return ""
    return "WHERE " + " AND ".join(expressions)


def compile_job_filters(criteria: Optional[Mapping[str, Any]] = None) -> CompiledClause:
    """
    Build the WHERE clause for the job listing.

    Recognised criteria (None or missing means "no constraint"):
        min_salary: salary >= value
        has_equity: only True constrains, to equity > 0
        title: case-insensitive substring match

    An empty clause is returned when nothing constrains the listing.
    """
    criteria = criteria or {}
    expressions: List[str] = []
    values: List[Any] = []

    min_salary = criteria.get("min_salary")
    if min_salary is not None:
        values.append(min_salary)
        expressions.append(f"salary >= ${len(values)}")

    if criteria.get("has_equity") is True:
        expressions.append("equity > 0")

    title = criteria.get("title")
    if title is not None:
        values.append(f"%{title}%")
        expressions.append(f"title ILIKE ${len(values)}")

    return CompiledClause(_where(expressions), values)


def compile_company_filters(
    criteria: Optional[Mapping[str, Any]] = None,
) -> CompiledClause:
    """
    Build the WHERE clause for the company listing.

    Recognised criteria:
        min_employees: num_employees >= value
        max_employees: num_employees <= value
        name: case-insensitive substring match

    Raises:
        ValidationError: if min_employees is greater than max_employees
    """
    criteria = criteria or {}
    expressions: List[str] = []
    values: List[Any] = []

    min_employees = criteria.get("min_employees")
    max_employees = criteria.get("max_employees")
    if (
        min_employees is not None
        and max_employees is not None
        and min_employees > max_employees
    ):
        raise ValidationError("Min employees cannot be greater than max")

    if min_employees is not None:
        values.append(min_employees)
        expressions.append(f"num_employees >= ${len(values)}")

    if max_employees is not None:
        values.append(max_employees)
        expressions.append(f"num_employees <= ${len(values)}")

    name = criteria.get("name")
    if name is not None:
        values.append(f"%{name}%")
        expressions.append(f"name ILIKE ${len(values)}")

    return CompiledClause(_where(expressions), values)


def bind_key(compiled: CompiledClause, key: Any) -> Tuple[str, List[Any]]:
    """
    Bind a record key after the values of a compiled clause.

    Returns the key's placeholder (one past the clause's last one) and the
    full value list.
    """
    values = [*compiled.values, key]
    return f"${len(values)}", values
