from dataclasses import dataclass, field
from typing import Any

from graphql import SelectionNode, SelectionSetNode

Arguments = dict[str, Any]


@dataclass
class CollectedField:
    # Response key, the alias when one is given and the field name otherwise
    alias: str
    name: str
    arguments: Arguments = field(default_factory=dict)
    # Raw child selections from every branch that contributed to this response key,
    # in encounter order. They are collected lazily when execution descends.
    selections: list[SelectionNode] = field(default_factory=list)

    @property
    def response_key(self) -> str:
        return self.alias

    @property
    def selection_set(self) -> SelectionSetNode:
        return SelectionSetNode(selections=tuple(self.selections))
