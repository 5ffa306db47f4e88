"""
hornlog: a small logic-programming engine.

Facts and Horn-clause rules over first-order terms, queried by syntactic
unification and breadth-first resolution. Answers come out one at a time,
on demand, so recursive programs over infinite domains can still be
queried lazily.

Usage:
    python -m hornlog --program peano --query "add(X, Y, s(s(z)))"
    python -m hornlog --load family.pl

    from hornlog import ClauseStore, Parser, format_answer
    parser = Parser()
    store = ClauseStore()
    store.extend(parser.parse_program("add(z, Y, Y). add(s(X), Y, s(Z)) :- add(X, Y, Z)."))
    for answer in store.query(parser.parse_goals("add(X, Y, s(z))")):
        print(format_answer(answer))
"""

from .core.terms import (
    Variable, Constant, Functor, Predicate, Application,
    list_variables, is_ground, same_term,
)
from .core.unification import Substitution, Constraint, apply_all, unify, unify_terms
from .core.clauses import Atom, Fact, Rule, Goal, standardize_apart, ClauseStore
from .core.engine import Query, take_answers, format_answer
from .syntax import SymbolTable, Parser, ParseError, load_file
from .programs import PROGRAMS, load_program

__all__ = [
    "Variable", "Constant", "Functor", "Predicate", "Application",
    "list_variables", "is_ground", "same_term",
    "Substitution", "Constraint", "apply_all", "unify", "unify_terms",
    "Atom", "Fact", "Rule", "Goal", "standardize_apart", "ClauseStore",
    "Query", "take_answers", "format_answer",
    "SymbolTable", "Parser", "ParseError", "load_file",
    "PROGRAMS", "load_program",
]
