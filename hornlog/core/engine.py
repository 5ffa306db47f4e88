"""
The resolution engine: breadth-first search over partial proofs.

A search item is (goals still to prove, bindings so far). A query starts
with one item -- the caller's goals, no bindings -- in a FIFO queue. One
step takes the oldest item:

    no goals left   -> candidate answer; accepted only if every query
                       variable is bound to a ground term
    otherwise       -> resolve the first goal against every matching fact,
                       then every matching rule (store order, each clause
                       standardized apart), and enqueue one item per
                       successful unification. A rule's body goes *after*
                       the goals already waiting.

The queue is the whole state. A pull returns as soon as an answer turns up
and the next pull resumes from the remaining queue, so infinite search
spaces can be enumerated lazily.
"""

from collections import deque
from dataclasses import dataclass
from typing import Optional

from .terms import variables_of, is_ground
from .unification import Constraint, apply_all, unify
from .clauses import Goal, standardize_apart


@dataclass(frozen=True)
class SearchItem:
    goals: tuple
    bindings: tuple


class Query:
    """
    Pull-based answer sequence for one list of goals.

    next_answer() returns a dict {Variable: ground Term} or None once the
    search is exhausted (and every call after that). A Query is also an
    iterator, so `itertools.islice(query, 3)` takes the first three answers.

    Each Query owns its queue; several queries over the same store are
    independent.

    The per-step history log is kept only with record_history=True; an
    enumeration of an infinite search otherwise holds nothing but its queue.
    """

    def __init__(self, store, goals, verbose: bool = False,
                 record_history: bool = False):
        self.store = store
        self.goals = tuple(g if isinstance(g, Goal) else Goal(g.predicate, g.terms)
                           for g in goals)
        terms = [t for goal in self.goals for t in goal.terms]
        self.query_variables = variables_of(terms)
        self.queue = deque([SearchItem(self.goals, ())])
        self.steps = 0
        self.answers = 0
        self.history = []
        self.record_history = record_history
        self.verbose = verbose

    @property
    def exhausted(self) -> bool:
        return not self.queue

    def step(self) -> Optional[dict]:
        """
        Expand exactly one queue item.

        Returns an answer if that item was an accepted candidate, else None.
        Hosts wanting a node budget call this directly instead of
        next_answer().
        """
        if not self.queue:
            return None

        item = self.queue.popleft()
        self.steps += 1

        if not item.goals:
            return self._accept(item)

        goal, deferred = item.goals[0], item.goals[1:]
        args = [apply_all(t, item.bindings) for t in goal.terms]
        produced = 0

        for fact in self.store.facts:
            if not fact.matches(goal):
                continue
            fresh = standardize_apart(fact)
            new_bindings = unify([Constraint(a, t) for a, t in zip(args, fresh.terms)])
            if new_bindings is not None:
                self.queue.append(SearchItem(deferred, item.bindings + tuple(new_bindings)))
                produced += 1
                if self.verbose:
                    print(f"  [fact] {goal} <- {fact}")

        for rule in self.store.rules:
            if not rule.matches(goal):
                continue
            fresh = standardize_apart(rule)
            new_bindings = unify([Constraint(a, t) for a, t in zip(args, fresh.head.terms)])
            if new_bindings is not None:
                self.queue.append(SearchItem(
                    deferred + tuple(fresh.body_goals()),
                    item.bindings + tuple(new_bindings),
                ))
                produced += 1
                if self.verbose:
                    print(f"  [rule] {goal} <- {rule}")

        if self.record_history:
            self.history.append({
                "step": self.steps,
                "goal": str(goal),
                "produced": produced,
                "queue_size": len(self.queue),
            })
        if self.verbose:
            print(f"--- Step {self.steps}: {goal} -> {produced} branch(es), "
                  f"queue {len(self.queue)}")
        return None

    def _accept(self, item: SearchItem) -> Optional[dict]:
        answer = {var: apply_all(var, item.bindings) for var in self.query_variables}
        if not all(is_ground(term) for term in answer.values()):
            if self.verbose:
                print(f"--- Step {self.steps}: candidate discarded (non-ground binding)")
            return None
        self.answers += 1
        if self.verbose:
            print(f"--- Step {self.steps}: answer {self.answers}: {format_answer(answer)}")
        return answer

    def next_answer(self) -> Optional[dict]:
        """Run until the next answer, or return None when the queue is empty."""
        while self.queue:
            answer = self.step()
            if answer is not None:
                return answer
        return None

    def __iter__(self):
        return self

    def __next__(self) -> dict:
        answer = self.next_answer()
        if answer is None:
            raise StopIteration
        return answer

    def __repr__(self):
        goals = ", ".join(str(g) for g in self.goals)
        return f"Query({goals}; steps={self.steps}, queue={len(self.queue)})"


def take_answers(query: Query, limit: Optional[int] = None,
                 max_steps: Optional[int] = None):
    """
    Collect answers until exhaustion, `limit` answers, or `max_steps` total
    expansions on this query.

    Returns (answers, reason) with reason one of "exhausted",
    "limit reached", "step budget exceeded".
    """
    answers = []
    while True:
        if limit is not None and len(answers) >= limit:
            return answers, "limit reached"
        if query.exhausted:
            return answers, "exhausted"
        if max_steps is not None and query.steps >= max_steps:
            return answers, "step budget exceeded"
        answer = query.step()
        if answer is not None:
            answers.append(answer)


def format_answer(answer: dict) -> str:
    """X -> z, Y -> s(s(z)); a query without variables renders as `true`."""
    if not answer:
        return "true"
    return ", ".join(f"{var} -> {term}" for var, term in answer.items())
