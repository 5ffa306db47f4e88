"""
Clauses and the clause store.

    Fact    add(z, Y, Y)                     asserted unconditionally
    Rule    add(s(X), Y, s(Z)) :- add(X, Y, Z)
    Goal    add(s(z), s(s(z)), V)            to be proven by a query

The store keeps facts and rules in load order. Order matters: it is the
tie-break order of the search.
"""

from dataclasses import dataclass

from .terms import Variable, Predicate, variables_of
from .unification import Substitution, apply_all


@dataclass(frozen=True, eq=False)
class Atom:
    """predicate(t1, ..., tn). A zero-arity atom renders as the bare name."""
    predicate: Predicate
    terms: tuple = ()

    def __post_init__(self):
        if not isinstance(self.terms, tuple):
            object.__setattr__(self, "terms", tuple(self.terms))

    @property
    def arity(self) -> int:
        return len(self.terms)

    def matches(self, other: "Atom") -> bool:
        return self.predicate is other.predicate and len(self.terms) == len(other.terms)

    def variables(self) -> list:
        return variables_of(self.terms)

    def substitute(self, substitutions):
        return type(self)(self.predicate,
                          tuple(apply_all(t, substitutions) for t in self.terms))

    def __str__(self):
        if not self.terms:
            return self.predicate.name
        return f"{self.predicate.name}({', '.join(str(t) for t in self.terms)})"

    def __repr__(self):
        return f"{type(self).__name__}({self})"


class Fact(Atom):
    """An atom asserted unconditionally."""


class Goal(Atom):
    """An atom to be proven during a query."""


@dataclass(frozen=True, eq=False)
class Rule:
    """Horn clause: head holds if every body atom holds."""
    head: Atom
    body: tuple = ()

    def __post_init__(self):
        if not isinstance(self.body, tuple):
            object.__setattr__(self, "body", tuple(self.body))

    def matches(self, goal: Atom) -> bool:
        return self.head.matches(goal)

    def body_goals(self) -> list:
        return [Goal(atom.predicate, atom.terms) for atom in self.body]

    def variables(self) -> list:
        terms = list(self.head.terms)
        for atom in self.body:
            terms.extend(atom.terms)
        return variables_of(terms)

    def substitute(self, substitutions):
        return Rule(self.head.substitute(substitutions),
                    tuple(atom.substitute(substitutions) for atom in self.body))

    def __str__(self):
        if not self.body:
            return str(self.head)
        return f"{self.head} :- {', '.join(str(a) for a in self.body)}"

    def __repr__(self):
        return f"Rule({self})"


def standardize_apart(clause):
    """
    Rename every variable in a clause to a fresh Variable with the same name.

    Returns a structurally identical clause of the same kind whose variables
    are disjoint from everything else in play. Must be called once per
    attempt of the clause against a goal.
    """
    substitutions = [Substitution(var, Variable(var.name)) for var in clause.variables()]
    if not substitutions:
        return clause
    return clause.substitute(substitutions)


class ClauseStore:
    """
    Append-only facts and rules, in load order.

    The store is read-only while a query is being consumed; appending
    between queries is fine, appending mid-enumeration is not supported.
    """

    def __init__(self, facts=(), rules=()):
        self._facts = list(facts)
        self._rules = list(rules)

    @property
    def facts(self) -> tuple:
        return tuple(self._facts)

    @property
    def rules(self) -> tuple:
        return tuple(self._rules)

    def add_fact(self, fact: Fact) -> Fact:
        self._facts.append(fact)
        return fact

    def add_rule(self, rule: Rule) -> Rule:
        self._rules.append(rule)
        return rule

    def add(self, clause):
        """Append a Fact or a Rule to the matching collection."""
        if isinstance(clause, Rule):
            return self.add_rule(clause)
        if isinstance(clause, Atom):
            return self.add_fact(clause if isinstance(clause, Fact)
                                 else Fact(clause.predicate, clause.terms))
        raise TypeError(f"not a clause: {clause!r}")

    def extend(self, clauses) -> list:
        return [self.add(c) for c in clauses]

    def predicates(self) -> list:
        """(name, arity) of every defined predicate, first-seen order."""
        seen = {}
        for fact in self._facts:
            seen.setdefault((fact.predicate.name, fact.arity), None)
        for rule in self._rules:
            seen.setdefault((rule.head.predicate.name, rule.head.arity), None)
        return list(seen)

    def query(self, goals, verbose: bool = False, record_history: bool = False):
        """Start an independent, pull-based search for goals."""
        from .engine import Query
        return Query(self, goals, verbose=verbose, record_history=record_history)

    def __len__(self):
        return len(self._facts) + len(self._rules)

    def __repr__(self):
        return f"ClauseStore({len(self._facts)} facts, {len(self._rules)} rules)"
