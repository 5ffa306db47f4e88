"""
Term model: Variable, Constant, Functor, Application, Predicate.

These are the atoms of the whole system. Nothing in here depends on
unification, clauses, or the search.

Equality is by identity, never by name:
    Variable("X") != Variable("X")     two scopes, two variables
    Constant("a") is only equal to itself; the syntax layer interns
    constants, functors and predicates so one name means one object.

Terms:
    Variable                      -> X
    Constant                      -> zero
    Application(Functor, terms)   -> s(zero), plus(X, Y)
"""

from dataclasses import dataclass
from typing import Union


class Symbol:
    """A named object compared by identity. Base for the leaf kinds."""
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class Variable(Symbol):
    """A logic variable. Fresh identities are minted by parsing and by standardize_apart."""
    __slots__ = ()


class Constant(Symbol):
    __slots__ = ()


class Functor(Symbol):
    """Labels the head of an Application."""
    __slots__ = ()


class Predicate(Symbol):
    """Labels a Fact, a Rule head or a Goal. Never appears inside a term."""
    __slots__ = ()


@dataclass(frozen=True, eq=False)
class Application:
    """A compound term functor(t1, ..., tn). Immutable once built."""
    functor: Functor
    terms: tuple

    def __post_init__(self):
        if not isinstance(self.terms, tuple):
            object.__setattr__(self, "terms", tuple(self.terms))

    @property
    def arity(self) -> int:
        return len(self.terms)

    def __str__(self):
        return f"{self.functor.name}({', '.join(str(t) for t in self.terms)})"

    def __repr__(self):
        return f"Application({self})"


Term = Union[Variable, Constant, Application]


def list_variables(term) -> list:
    """
    Variables reachable in term, deduplicated by identity.

    Order is first appearance (depth-first, left to right), so callers that
    report variables get a stable order.
    """
    found = {}

    def walk(t):
        if isinstance(t, Variable):
            found.setdefault(t, None)
        elif isinstance(t, Application):
            for arg in t.terms:
                walk(arg)

    walk(term)
    return list(found)


def variables_of(terms) -> list:
    """Union of list_variables over a sequence of terms, first-appearance order."""
    found = {}
    for term in terms:
        for var in list_variables(term):
            found.setdefault(var, None)
    return list(found)


def is_ground(term) -> bool:
    """A ground term contains no variables."""
    if isinstance(term, Variable):
        return False
    if isinstance(term, Application):
        return all(is_ground(arg) for arg in term.terms)
    return True


def same_term(a, b) -> bool:
    """
    Structural comparison: identical leaves, identical functors, pairwise
    same arguments. Unification itself only ever uses identity; this is for
    hosts and tests comparing freshly built terms.
    """
    if a is b:
        return True
    if isinstance(a, Application) and isinstance(b, Application):
        return (a.functor is b.functor
                and len(a.terms) == len(b.terms)
                and all(same_term(x, y) for x, y in zip(a.terms, b.terms)))
    return False
