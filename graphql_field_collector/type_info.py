from typing import Collection, Optional, Union, cast

from graphql import (
    GraphQLError,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
    NamedTypeNode,
    is_object_type,
    is_union_type,
)


def satisfied_type_names(
    schema: GraphQLSchema, object_type: Union[GraphQLObjectType, str]
) -> list[str]:
    """Return every type name a value of the given object type satisfies.

    The object type's own name comes first, followed by the interfaces it implements
    and then every union of the schema it is a member of. The result is what
    `collect_fields` expects as its `satisfies` argument.
    """
    if isinstance(object_type, str):
        named_type = schema.get_type(object_type)
        if named_type is None or not is_object_type(named_type):
            raise GraphQLError(f"Unknown object type '{object_type}'.")
        object_type = cast(GraphQLObjectType, named_type)

    names = [object_type.name]
    names.extend(interface.name for interface in object_type.interfaces)
    names.extend(
        type_.name
        for type_ in schema.type_map.values()
        if is_union_type(type_) and schema.is_sub_type(cast(GraphQLUnionType, type_), object_type)
    )
    return names


def is_instance_of(type_condition: Optional[NamedTypeNode], satisfies: Collection[str]) -> bool:
    # An inline fragment without a type condition always applies
    if type_condition is None:
        return True
    return type_condition.name.value in satisfies
