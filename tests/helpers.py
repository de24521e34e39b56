from typing import Any, Iterable, Optional

from graphql import parse

from graphql_field_collector import CollectedField, RequestContext, collect_fields, get_operation


def collect(
    query: str, satisfies: Iterable[str] = ('Query',), variables: Optional[dict[str, Any]] = None
) -> list[CollectedField]:
    document = parse(query)
    context = RequestContext.from_document(document, variables)
    return collect_fields(context, get_operation(document).selection_set, satisfies)


def keys(fields: list[CollectedField]) -> list[str]:
    return [field.alias for field in fields]


def child_names(field: CollectedField) -> list[str]:
    return [selection.name.value for selection in field.selections]
