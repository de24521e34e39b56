from typing import Optional

from graphql import DirectiveNode, SelectionNode


class FieldCollectionError(Exception):
    """Generic error when collecting fields.

    Every subclass signals a broken invariant that validation should already
    have ruled out, so collection is aborted and nothing is returned.
    """


class MalformedDirectiveError(FieldCollectionError):
    """Raised when a @skip or @include directive has no usable boolean `if` argument."""

    directive_name: str

    def __init__(self, directive: DirectiveNode, reason: str):
        self.directive_name = directive.name.value
        super().__init__(f'{self.directive_name}: {reason}')


class MissingFragmentError(FieldCollectionError):
    """Raised when a fragment spread names a fragment absent from the document."""

    fragment_name: str

    def __init__(self, fragment_name: str):
        self.fragment_name = fragment_name
        super().__init__(f'missing fragment {fragment_name}')


class UnsupportedSelectionError(FieldCollectionError):
    """Raised for a selection node that is not a field, inline fragment or fragment spread."""

    node: SelectionNode

    def __init__(self, node: SelectionNode):
        self.node = node
        super().__init__(f'unsupported {type(node).__name__}')


class InvalidArgumentValueError(FieldCollectionError):
    """Raised when an argument literal cannot be evaluated."""

    argument_name: Optional[str]

    def __init__(self, argument_name: Optional[str], cause: Exception):
        self.argument_name = argument_name
        super().__init__(f'invalid value for argument {argument_name}: {cause}')
