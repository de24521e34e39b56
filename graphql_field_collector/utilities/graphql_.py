from typing import Any, Optional, Sequence

from graphql import (
    ArgumentNode,
    DirectiveNode,
    FieldNode,
    SelectionNode,
    SelectionSetNode,
    Undefined,
    ValueNode,
    value_from_ast_untyped,
)

from graphql_field_collector.errors import InvalidArgumentValueError

Selections = Sequence[SelectionNode]


def get_response_name(node: FieldNode) -> str:
    return node.alias.value if node.alias is not None else node.name.value


def get_selections(selection_set: Optional[Any]) -> Selections:
    # Accepts the node itself, a raw list of selections or nothing at all (leaf fields)
    if selection_set is None:
        return ()
    if isinstance(selection_set, SelectionSetNode):
        return selection_set.selections or ()
    return selection_set


def find_directive(
    directives: Optional[Sequence[DirectiveNode]], name: str
) -> Optional[DirectiveNode]:
    for directive in directives or ():
        if directive.name.value == name:
            return directive
    return None


def find_argument(
    arguments: Optional[Sequence[ArgumentNode]], name: str
) -> Optional[ArgumentNode]:
    for argument in arguments or ():
        if argument.name.value == name:
            return argument
    return None


def value_from_literal(
    value_node: ValueNode, variables: dict[str, Any], argument_name: Optional[str] = None
) -> Any:
    try:
        value = value_from_ast_untyped(value_node, variables)
    except (TypeError, ValueError) as error:
        raise InvalidArgumentValueError(argument_name, error) from error
    return undefined_to_none(value)


def undefined_to_none(value: Any) -> Any:
    # Unbound variables nested in list and object literals evaluate to null
    if value is Undefined:
        return None
    if isinstance(value, list):
        return [undefined_to_none(item) for item in value]
    if isinstance(value, dict):
        return {key: undefined_to_none(item) for key, item in value.items()}
    return value
