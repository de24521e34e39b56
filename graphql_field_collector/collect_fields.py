import logging
from typing import Any, Collection, Iterable, Optional, Sequence, Union, cast

from graphql import (
    ArgumentNode,
    DirectiveNode,
    FieldNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    SelectionNode,
    SelectionSetNode,
    VariableNode,
)

from graphql_field_collector.collected_field import Arguments, CollectedField
from graphql_field_collector.context import FragmentName, RequestContext, VariableValues
from graphql_field_collector.errors import MalformedDirectiveError, UnsupportedSelectionError
from graphql_field_collector.type_info import is_instance_of
from graphql_field_collector.utilities.graphql_ import (
    find_argument,
    find_directive,
    get_response_name,
    get_selections,
    value_from_literal,
)

logger = logging.getLogger(__name__)

ResponseKey = str

GroupedFields = dict[ResponseKey, CollectedField]

SelectionSetLike = Union[SelectionSetNode, Sequence[SelectionNode], None]


def collect_fields(
    context: RequestContext, selection_set: SelectionSetLike, satisfies: Iterable[str]
) -> list[CollectedField]:
    """Collect the fields of a selection set that apply to the given types.

    Fields sharing a response key are merged into a single `CollectedField`, in
    the order their key first appears during a depth-first, left-to-right walk.
    Only the first occurrence of a key contributes arguments, every occurrence
    contributes child selections. Child selections are left uncollected; call
    `collect_subfields` once the concrete type of the field's value is known.

    `satisfies` holds the names of every type the current object satisfies,
    its own type name plus the interfaces and unions it belongs to.

    Raises a `FieldCollectionError` subclass when the document breaks an invariant
    that validation guarantees. No partial result is returned in that case.
    """
    fields: GroupedFields = {}
    _collect_fields_impl(
        context, get_selections(selection_set), _as_type_names(satisfies), fields, set()
    )
    return list(fields.values())


def _as_type_names(satisfies: Iterable[str]) -> frozenset[str]:
    # A bare type name is one type, not an iterable of characters
    if isinstance(satisfies, str):
        return frozenset((satisfies,))
    return frozenset(satisfies)


def collect_subfields(
    context: RequestContext, field: CollectedField, satisfies: Iterable[str]
) -> list[CollectedField]:
    return collect_fields(context, field.selections, satisfies)


def _collect_fields_impl(
    context: RequestContext,
    selections: Sequence[SelectionNode],
    satisfies: Collection[str],
    fields: GroupedFields,
    visited_fragment_names: set[FragmentName],
) -> None:
    variables = context.variables

    for selection in selections:
        if selection.kind == FieldNode.kind:
            selection = cast(FieldNode, selection)
            if not should_include_node(selection.directives, variables):
                continue

            response_name = get_response_name(selection)
            field = fields.get(response_name)
            if field is None:
                field = CollectedField(
                    alias=response_name,
                    name=selection.name.value,
                    arguments=resolve_arguments(selection.arguments, variables),
                )
                fields[response_name] = field

            field.selections.extend(get_selections(selection.selection_set))
        elif selection.kind == InlineFragmentNode.kind:
            selection = cast(InlineFragmentNode, selection)
            if not should_include_node(selection.directives, variables):
                continue
            if not is_instance_of(selection.type_condition, satisfies):
                continue

            _collect_fields_impl(
                context,
                get_selections(selection.selection_set),
                satisfies,
                fields,
                visited_fragment_names,
            )
        elif selection.kind == FragmentSpreadNode.kind:
            selection = cast(FragmentSpreadNode, selection)
            if not should_include_node(selection.directives, variables):
                continue

            fragment_name = selection.name.value
            if fragment_name in visited_fragment_names:
                logger.debug('Fragment %s already expanded, skipping spread', fragment_name)
                continue
            visited_fragment_names.add(fragment_name)

            fragment = context.get_fragment(fragment_name)

            # The name stays visited even when the condition does not apply
            if not is_instance_of(fragment.type_condition, satisfies):
                logger.debug(
                    'Fragment %s on %s does not apply to %s',
                    fragment_name,
                    fragment.type_condition.name.value,
                    sorted(satisfies),
                )
                continue

            _collect_fields_impl(
                context,
                get_selections(fragment.selection_set),
                satisfies,
                fields,
                visited_fragment_names,
            )
        else:
            raise UnsupportedSelectionError(selection)


def should_include_node(
    directives: Optional[Sequence[DirectiveNode]], variables: VariableValues
) -> bool:
    # @skip wins over @include, only one of them is ever consulted
    skip = find_directive(directives, 'skip')
    if skip is not None:
        return not resolve_if_argument(skip, variables)

    include = find_directive(directives, 'include')
    if include is not None:
        return resolve_if_argument(include, variables)

    return True


def resolve_if_argument(directive: DirectiveNode, variables: VariableValues) -> bool:
    argument = find_argument(directive.arguments, 'if')
    if argument is None:
        raise MalformedDirectiveError(directive, "argument 'if' not defined")

    value: Any = value_from_literal(argument.value, variables, 'if')
    if not isinstance(value, bool):
        raise MalformedDirectiveError(directive, "argument 'if' is not a boolean")
    return value


def resolve_arguments(
    arguments: Optional[Sequence[ArgumentNode]], variables: VariableValues
) -> Arguments:
    """Evaluate the arguments of a field node.

    An argument bound to a variable that is not in `variables` is left out of
    the result instead of being set to null.
    """
    result: Arguments = {}
    for argument in arguments or ():
        name = argument.name.value
        if argument.value.kind == VariableNode.kind:
            variable_name = cast(VariableNode, argument.value).name.value
            if variable_name in variables:
                result[name] = variables[variable_name]
        else:
            result[name] = value_from_literal(argument.value, variables, name)
    return result
