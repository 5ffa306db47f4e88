"""
Syntactic unification over identity-compared terms, without occurs check.

Given a list of constraints (pairs of terms that must become equal), find
the list of bindings that makes every pair identical -- or report that no
such list exists.

Bindings are an ordered list of Substitution(variable, term). Applying a
list folds each binding over the term in order: later bindings act on the
output of earlier ones. This is sequential composition, not simultaneous
substitution and not a fixpoint.

    apply_all(f(X, Y), [X -> g(Y), Y -> a])  ==  f(g(a), a)
"""

from dataclasses import dataclass
from functools import reduce
from typing import Optional

from .terms import Variable, Constant, Application


@dataclass(frozen=True, eq=False)
class Substitution:
    """One binding: variable -> term."""
    variable: Variable
    term: object

    def apply(self, term):
        """
        Replace every occurrence of self.variable in term.

        Subtrees that do not mention the variable are returned as-is, so a
        ground term comes back as the very same object.
        """
        if isinstance(term, Variable):
            return self.term if term is self.variable else term
        if isinstance(term, Application):
            args = [self.apply(arg) for arg in term.terms]
            if all(new is old for new, old in zip(args, term.terms)):
                return term
            return Application(term.functor, tuple(args))
        return term  # constant

    def __str__(self):
        return f"{self.variable} -> {self.term}"

    def __repr__(self):
        return f"Substitution({self})"


def apply_all(term, substitutions):
    """Left fold of Substitution.apply over substitutions, in list order."""
    return reduce(lambda t, sub: sub.apply(t), substitutions, term)


@dataclass(frozen=True, eq=False)
class Constraint:
    """An equation left = right that unification must establish."""
    left: object
    right: object

    def substitute(self, substitution: Substitution) -> "Constraint":
        return Constraint(substitution.apply(self.left),
                          substitution.apply(self.right))

    def __str__(self):
        return f"{self.left} = {self.right}"

    def __repr__(self):
        return f"Constraint({self})"


def unify(constraints) -> Optional[list]:
    """
    Solve a list of constraints.

    Returns the bindings in the order they were discovered, or None if the
    system has no solution. Worklist loop:

        identical sides            -> drop the constraint
        a variable on either side  -> bind it, rewrite the remaining
                                      constraints with the new binding
        a constant on either side  -> fail (clash)
        two applications           -> same functor and arity, or fail;
                                      push one constraint per argument pair
                                      in front of the remaining ones

    No occurs check: X = f(X) binds X to f(X).
    """
    pending = list(constraints)
    bindings = []

    while pending:
        first = pending[0]
        left, right = first.left, first.right
        rest = pending[1:]

        if left is right:
            pending = rest
            continue

        if isinstance(left, Variable) or isinstance(right, Variable):
            if isinstance(left, Variable):
                sub = Substitution(left, right)
            else:
                sub = Substitution(right, left)
            bindings.append(sub)
            pending = [c.substitute(sub) for c in rest]
            continue

        if isinstance(left, Constant) or isinstance(right, Constant):
            return None  # distinct constants, or constant vs application

        if left.functor is not right.functor:
            return None
        if len(left.terms) != len(right.terms):
            return None

        pending = [Constraint(a, b) for a, b in zip(left.terms, right.terms)] + rest

    return bindings


def unify_terms(a, b) -> Optional[list]:
    """Unify two terms. Shorthand for unify([Constraint(a, b)])."""
    return unify([Constraint(a, b)])
