"""Template tree nodes.

A template is parsed once into a flat list of these immutable nodes; block
nodes carry their bodies as nested node lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class TemplateNode:
    """Base class for every node of a parsed template."""


@dataclass(frozen=True)
class Text(TemplateNode):
    """Literal text copied to the output unchanged."""

    text: str


@dataclass(frozen=True)
class Variable(TemplateNode):
    """``{{path}}``: HTML-escaped interpolation."""

    path: str


@dataclass(frozen=True)
class RawVariable(TemplateNode):
    """``{{{path}}}``: interpolation without escaping."""

    path: str


@dataclass(frozen=True)
class Partial(TemplateNode):
    """``{{> name}}``: a named sub-template rendered in the current scope."""

    name: str


@dataclass(frozen=True)
class IfElse(TemplateNode):
    condition: str
    then_nodes: Tuple[TemplateNode, ...]
    else_nodes: Tuple[TemplateNode, ...] = ()


@dataclass(frozen=True)
class Unless(TemplateNode):
    condition: str
    body: Tuple[TemplateNode, ...]


@dataclass(frozen=True)
class Each(TemplateNode):
    path: str
    body: Tuple[TemplateNode, ...]


@dataclass(frozen=True)
class With(TemplateNode):
    path: str
    body: Tuple[TemplateNode, ...]

