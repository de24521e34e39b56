from typing import Union

from graphql import GraphQLObjectType, GraphQLSchema

from graphql_field_collector.collect_fields import (
    SelectionSetLike,
    collect_fields,
    collect_subfields,
    resolve_arguments,
    should_include_node,
)
from graphql_field_collector.collected_field import CollectedField
from graphql_field_collector.context import FragmentMap, RequestContext, get_operation
from graphql_field_collector.errors import (
    FieldCollectionError,
    InvalidArgumentValueError,
    MalformedDirectiveError,
    MissingFragmentError,
    UnsupportedSelectionError,
)
from graphql_field_collector.type_info import is_instance_of, satisfied_type_names

__all__ = [
    'CollectedField',
    'FieldCollectionError',
    'FieldCollector',
    'FragmentMap',
    'InvalidArgumentValueError',
    'MalformedDirectiveError',
    'MissingFragmentError',
    'RequestContext',
    'UnsupportedSelectionError',
    'collect_fields',
    'collect_subfields',
    'get_operation',
    'is_instance_of',
    'resolve_arguments',
    'satisfied_type_names',
    'should_include_node',
]

__version__ = '0.1.0'


class FieldCollector:
    # Binds collection to a schema so the satisfied type names of each object type
    # are derived once, instead of on every level of every response.

    schema: GraphQLSchema

    def __init__(self, schema: GraphQLSchema):
        self.schema = schema
        self._satisfied_type_names: dict[str, frozenset[str]] = {}

    def satisfies(self, object_type: Union[GraphQLObjectType, str]) -> frozenset[str]:
        type_name = object_type if isinstance(object_type, str) else object_type.name
        names = self._satisfied_type_names.get(type_name)
        if names is None:
            names = frozenset(satisfied_type_names(self.schema, object_type))
            self._satisfied_type_names[type_name] = names
        return names

    def collect(
        self,
        context: RequestContext,
        selection_set: SelectionSetLike,
        object_type: Union[GraphQLObjectType, str],
    ) -> list[CollectedField]:
        return collect_fields(context, selection_set, self.satisfies(object_type))

    def collect_subfields(
        self,
        context: RequestContext,
        field: CollectedField,
        object_type: Union[GraphQLObjectType, str],
    ) -> list[CollectedField]:
        return collect_subfields(context, field, self.satisfies(object_type))
