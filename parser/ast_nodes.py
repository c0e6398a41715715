# parser/ast_nodes.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas. Each binary node exclusively owns
its two children and no node is ever mutated after parsing; evaluation and
variable collection only read the tree.

Node Types:
    Literal: Boolean constants ``true`` and ``false``
    Variable: Free propositional variables
    Not: Negation
    And, Or, Implies, Equivalent: Binary connectives

All nodes support the visitor design pattern for traversal, and render as a
fully parenthesized string that parses back into an equal tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Protocol, Tuple


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal operations.
    """

    def visit_literal(self, n: Literal): ...

    def visit_variable(self, n: Variable): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...

    def visit_equivalent(self, n: Equivalent): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    All concrete node types inherit from this class and implement ``accept``
    for visitor dispatch and ``__str__`` for their textual form.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Literal(Expr):
    """Boolean constant ``true`` or ``false``.

    Attributes:
        value: The constant's truth value
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_literal(self)

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Free propositional variable.

    Names consist of ASCII letters only and are case sensitive, so ``p`` and
    ``P`` are different variables.

    Attributes:
        name: The variable's identifier
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"!{self.operand}"


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction, true when both operands are true.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return f"({self.left} & {self.right})"


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction, true when at least one operand is true.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return f"({self.left} | {self.right})"


@dataclass(frozen=True, slots=True)
class Implies(Expr):
    """Material implication, false only when the premise holds and the
    conclusion does not.

    Attributes:
        left: Premise
        right: Conclusion
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_implies(self)

    def __str__(self) -> str:
        return f"({self.left} => {self.right})"


@dataclass(frozen=True, slots=True)
class Equivalent(Expr):
    """Logical equivalence, true when both operands have the same value.

    Attributes:
        left: Left operand of the equivalence
        right: Right operand of the equivalence
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_equivalent(self)

    def __str__(self) -> str:
        return f"({self.left} <=> {self.right})"


@dataclass(frozen=True, slots=True)
class NamedFormula:
    """A ``name = formula;`` statement from a program.

    Attributes:
        name: Statement name, used as the result column label
        expr: The statement's formula
    """

    name: str
    expr: Expr

    def __str__(self) -> str:
        return f"{self.name} = {self.expr};"


# Connective spelling -> node constructor
CONNECTIVES = {
    "&": And,
    "|": Or,
    "=>": Implies,
    "<=>": Equivalent,
}


def fold_connectives(first: Expr, rest: Iterable[Tuple[str, Expr]]) -> Expr:
    """Combine an operand chain left to right into a single tree.

    All connectives share one precedence level, so ``a & b | c`` folds to
    ``((a & b) | c)`` and ``a => b => c`` to ``((a => b) => c)``.

    Args:
        first: Leftmost operand
        rest: ``(connective, operand)`` pairs in source order

    Returns:
        Root of the folded expression
    """
    result = first
    for symbol, operand in rest:
        result = CONNECTIVES[symbol](result, operand)
    return result


def tree_depth(expr: Expr) -> int:
    """Return the number of nodes on the longest root-to-leaf path.

    Walks the tree with an explicit stack, so arbitrarily deep trees can be
    measured before any recursive traversal touches them.
    """
    deepest = 0
    stack = [(expr, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if isinstance(node, Not):
            stack.append((node.operand, depth + 1))
        elif isinstance(node, (And, Or, Implies, Equivalent)):
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
    return deepest
