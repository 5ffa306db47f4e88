from .terms import (
    Variable, Constant, Functor, Predicate, Application,
    list_variables, variables_of, is_ground, same_term,
)
from .unification import Substitution, Constraint, apply_all, unify, unify_terms
from .clauses import Atom, Fact, Rule, Goal, standardize_apart, ClauseStore
from .engine import SearchItem, Query, take_answers, format_answer

__all__ = [
    "Variable", "Constant", "Functor", "Predicate", "Application",
    "list_variables", "variables_of", "is_ground", "same_term",
    "Substitution", "Constraint", "apply_all", "unify", "unify_terms",
    "Atom", "Fact", "Rule", "Goal", "standardize_apart", "ClauseStore",
    "SearchItem", "Query", "take_answers", "format_answer",
]
