from dataclasses import dataclass, field
from typing import Any, Optional

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    GraphQLError,
    OperationDefinitionNode,
    Visitor,
    get_operation_ast,
    visit,
)

from graphql_field_collector.errors import MissingFragmentError

FragmentName = str

FragmentMap = dict[FragmentName, FragmentDefinitionNode]

VariableValues = dict[str, Any]


@dataclass
class RequestContext:
    """Read-only inputs shared by every collection call of one request.

    `variables` must already be coerced against the operation's variable
    definitions. `fragments` indexes the document's fragment definitions by name.
    """

    variables: VariableValues = field(default_factory=dict)
    fragments: FragmentMap = field(default_factory=dict)

    @classmethod
    def from_document(
        cls, document: DocumentNode, variables: Optional[VariableValues] = None
    ) -> 'RequestContext':
        fragments: FragmentMap = {}

        # noinspection PyMethodMayBeStatic
        class FragmentDefinitionVisitor(Visitor):
            def enter_fragment_definition(self, definition: FragmentDefinitionNode, *_) -> None:
                fragments[definition.name.value] = definition

        visit(document, FragmentDefinitionVisitor())

        return cls(variables=dict(variables) if variables is not None else {}, fragments=fragments)

    def get_fragment(self, name: FragmentName) -> FragmentDefinitionNode:
        fragment = self.fragments.get(name)
        if fragment is None:
            # should never happen, validation has already run
            raise MissingFragmentError(name)
        return fragment


def get_operation(
    document: DocumentNode, operation_name: Optional[str] = None
) -> OperationDefinitionNode:
    operation = get_operation_ast(document, operation_name)
    if operation is None:
        if operation_name is not None:
            raise GraphQLError(f"Unknown operation named '{operation_name}'.")
        if not any(
            isinstance(definition, OperationDefinitionNode) for definition in document.definitions
        ):
            raise GraphQLError('Must provide an operation.')
        raise GraphQLError('Must provide operation name if query contains multiple operations.')
    return operation
