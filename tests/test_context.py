"""Tests for the request context."""

import pytest
from graphql import GraphQLError, parse

from graphql_field_collector import MissingFragmentError, RequestContext, get_operation


class TestRequestContext:
    """Tests for RequestContext."""

    def test_indexes_fragments_by_name(self):
        document = parse(
            '''
            query { ...A }
            fragment A on Query { a ...B }
            fragment B on Query { b }
            '''
        )
        context = RequestContext.from_document(document, {'x': 1})
        assert sorted(context.fragments) == ['A', 'B']
        assert context.get_fragment('B').type_condition.name.value == 'Query'
        assert context.variables == {'x': 1}

    def test_variables_default_to_empty(self):
        context = RequestContext.from_document(parse('{ a }'))
        assert context.variables == {}
        assert context.fragments == {}

    def test_variables_are_copied(self):
        variables = {'x': 1}
        context = RequestContext.from_document(parse('{ a }'), variables)
        variables['x'] = 2
        assert context.variables == {'x': 1}

    def test_missing_fragment(self):
        with pytest.raises(MissingFragmentError, match='missing fragment Nope'):
            RequestContext().get_fragment('Nope')


class TestGetOperation:
    """Tests for get_operation."""

    def test_single_anonymous_operation(self):
        document = parse('fragment A on Query { a } { ...A }')
        assert get_operation(document).selection_set.selections[0].name.value == 'A'

    def test_named_operation(self):
        document = parse('query First { a } query Second { b }')
        assert get_operation(document, 'Second').name.value == 'Second'

    def test_ambiguous_operation(self):
        document = parse('query First { a } query Second { b }')
        with pytest.raises(GraphQLError, match='Must provide operation name'):
            get_operation(document)

    def test_unknown_operation(self):
        with pytest.raises(GraphQLError, match="Unknown operation named 'Third'"):
            get_operation(parse('query First { a }'), 'Third')

    def test_no_operation(self):
        with pytest.raises(GraphQLError, match='Must provide an operation'):
            get_operation(parse('fragment A on Query { a }'))
