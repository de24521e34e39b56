import pytest
from graphql import GraphQLSchema, build_schema

SDL = '''
interface Node {
  id: ID!
}

interface Pet {
  name: String
}

type Dog implements Pet & Node {
  id: ID!
  name: String
  barkVolume: Int
  owner: Human
}

type Cat implements Pet {
  name: String
  meowVolume: Int
}

type Human implements Node {
  id: ID!
  name: String
  pets: [Pet]
}

union Animal = Dog | Cat

union Companion = Dog | Human

type Query {
  pet(id: ID, limit: Int, filter: PetFilter): Pet
  animal: Animal
  human(id: ID): Human
  a: String
  b: String
  c: String
  x: String
  y: String
}

input PetFilter {
  name: String
  tags: [String]
}
'''


@pytest.fixture(scope='session')
def schema() -> GraphQLSchema:
    return build_schema(SDL)
