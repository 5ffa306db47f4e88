"""
Property-based and unit tests for substitution and unification.

The core claims:
    - Sequential: apply_all folds bindings in order, later on earlier output
    - Ground:     applying bindings to a ground term returns that very term
    - Clash:      distinct constants or functors never unify
    - Solving:    unifying a term against a ground term yields bindings that
                  turn the term into that ground term
    - No occurs check: X = f(X) is accepted
"""

from hypothesis import given, assume
from hypothesis import strategies as st

from hornlog.core.terms import (
    Variable, Constant, Functor, Application, is_ground, same_term,
)
from hornlog.core.unification import (
    Substitution, Constraint, apply_all, unify, unify_terms,
)


a = Constant("a")
b = Constant("b")
c = Constant("c")
d = Constant("d")
f = Functor("f")
g = Functor("g")


def app(functor, *args):
    return Application(functor, args)


# ── Generators ──────────────────────────────────────────────────────────────

VARIABLES = [Variable("X"), Variable("Y"), Variable("Z")]


@st.composite
def ground_terms(draw, max_depth=3):
    if max_depth == 0 or draw(st.booleans()):
        return draw(st.sampled_from([a, b]))
    functor = draw(st.sampled_from([f, g]))
    arity = draw(st.integers(min_value=1, max_value=2))
    return Application(functor, tuple(draw(ground_terms(max_depth=max_depth - 1)) for _ in range(arity)))


@st.composite
def terms(draw, max_depth=3):
    if max_depth == 0 or draw(st.booleans()):
        return draw(st.sampled_from(VARIABLES + [a, b]))
    functor = draw(st.sampled_from([f, g]))
    arity = draw(st.integers(min_value=1, max_value=2))
    return Application(functor, tuple(draw(terms(max_depth=max_depth - 1)) for _ in range(arity)))


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestSubstitutionApply:
    def test_bound_variable_replaced(self):
        X = Variable("X")
        assert Substitution(X, a).apply(X) is a

    def test_other_variable_unchanged(self):
        X, Y = Variable("X"), Variable("Y")
        assert Substitution(X, a).apply(Y) is Y

    def test_same_name_other_variable_unchanged(self):
        X, X2 = Variable("X"), Variable("X")
        assert Substitution(X, a).apply(X2) is X2

    def test_constant_unchanged(self):
        assert Substitution(Variable("X"), a).apply(b) is b

    def test_application_rebuilt(self):
        X, Y = Variable("X"), Variable("Y")
        result = Substitution(X, a).apply(app(f, X, app(g, Y, X)))
        assert str(result) == "f(a, g(Y, a))"

    def test_untouched_application_is_same_object(self):
        Y = Variable("Y")
        term = app(f, Y, a)
        assert Substitution(Variable("X"), b).apply(term) is term

    def test_str(self):
        assert str(Substitution(Variable("X"), app(f, a))) == "X -> f(a)"


class TestApplyAll:
    def test_applies_in_order(self):
        X, Y = Variable("X"), Variable("Y")
        term = app(f, X, app(f, X, Y))
        assert str(apply_all(term, [Substitution(X, c), Substitution(Y, d)])) == "f(c, f(c, d))"

    def test_later_bindings_act_on_earlier_output(self):
        X, Y = Variable("X"), Variable("Y")
        result = apply_all(app(f, X, Y), [Substitution(X, app(g, Y)), Substitution(Y, a)])
        assert str(result) == "f(g(a), a)"

    def test_earlier_bindings_do_not_see_later_output(self):
        # sequential, not a fixpoint: X -> a runs before Y -> X introduces X
        X, Y = Variable("X"), Variable("Y")
        result = apply_all(Y, [Substitution(X, a), Substitution(Y, X)])
        assert result is X

    def test_empty_list_is_identity(self):
        X = Variable("X")
        assert apply_all(X, []) is X


class TestUnify:
    def test_empty_input_succeeds_empty(self):
        assert unify([]) == []

    def test_identical_ground_terms(self):
        assert unify([Constraint(app(f, a), app(f, a))]) == []

    def test_identical_object(self):
        t = app(f, Variable("X"))
        assert unify([Constraint(t, t)]) == []

    def test_solves_two_arguments(self):
        X, Y = Variable("X"), Variable("Y")
        result = unify([Constraint(app(f, X, Y), app(f, a, b))])
        assert result is not None
        assert str(apply_all(app(f, X, Y), result)) == "f(a, b)"

    def test_bindings_in_discovery_order(self):
        X, Y = Variable("X"), Variable("Y")
        result = unify([Constraint(app(f, X, Y), app(f, a, b))])
        assert [str(s) for s in result] == ["X -> a", "Y -> b"]

    def test_functor_mismatch_fails(self):
        X = Variable("X")
        assert unify([Constraint(app(f, X), app(g, X))]) is None

    def test_arity_mismatch_fails(self):
        X = Variable("X")
        assert unify([Constraint(app(f, X), app(f, X, a))]) is None

    def test_repeated_variable_clash_fails(self):
        X = Variable("X")
        assert unify([Constraint(app(f, X, X), app(f, a, b))]) is None

    def test_distinct_constants_fail(self):
        assert unify_terms(a, b) is None

    def test_constant_against_application_fails(self):
        assert unify_terms(a, app(f, a)) is None
        assert unify_terms(app(f, a), a) is None

    def test_left_variable_is_bound(self):
        X, Y = Variable("X"), Variable("Y")
        [sub] = unify_terms(X, Y)
        assert sub.variable is X and sub.term is Y

    def test_right_variable_is_bound_when_left_is_not(self):
        X = Variable("X")
        [sub] = unify_terms(a, X)
        assert sub.variable is X and sub.term is a

    def test_binding_rewrites_remaining_constraints(self):
        X, Y = Variable("X"), Variable("Y")
        result = unify([Constraint(X, a), Constraint(Y, app(f, X))])
        assert [str(s) for s in result] == ["X -> a", "Y -> f(a)"]

    def test_no_occurs_check(self):
        X = Variable("X")
        result = unify_terms(X, app(f, X))
        assert result is not None
        assert result[0].variable is X

    def test_same_name_variables_are_distinct(self):
        X1, X2 = Variable("X"), Variable("X")
        result = unify([Constraint(app(f, X1, X2), app(f, a, b))])
        assert result is not None
        assert apply_all(X1, result) is a
        assert apply_all(X2, result) is b

    def test_long_constraint_list(self):
        xs = [Variable(f"X{i}") for i in range(1200)]
        result = unify([Constraint(x, a) for x in xs])
        assert len(result) == 1200


# ── Property-based tests ─────────────────────────────────────────────────────

class TestUnificationProperties:

    @given(ground_terms(), ground_terms())
    def test_ground_terms_unify_iff_same(self, t1, t2):
        result = unify_terms(t1, t2)
        assert (result is not None) == same_term(t1, t2)
        if result is not None:
            assert result == []

    @given(terms(), ground_terms())
    def test_solution_against_ground_term(self, t, ground):
        """If unify(T, G) = σ with G ground, then applying σ to T gives G."""
        result = unify_terms(t, ground)
        if result is not None:
            assert same_term(apply_all(t, result), ground)

    @given(terms(), ground_terms())
    def test_direction_does_not_matter_against_ground(self, t, ground):
        assert (unify_terms(t, ground) is None) == (unify_terms(ground, t) is None)

    @given(terms())
    def test_term_unifies_with_itself(self, t):
        assert unify_terms(t, t) == []

    @given(ground_terms(), st.lists(st.tuples(st.sampled_from(VARIABLES), terms()), max_size=4))
    def test_ground_term_is_fixed(self, t, pairs):
        """Applying any binding list to a ground term is a no-op, every time."""
        subs = [Substitution(v, term) for v, term in pairs]
        once = apply_all(t, subs)
        twice = apply_all(t, subs)
        assert once is t and twice is t

    @given(terms(), ground_terms())
    def test_bindings_are_ground_against_ground(self, t, ground):
        assume(not is_ground(t))
        result = unify_terms(t, ground)
        if result is not None:
            assert all(is_ground(s.term) for s in result)
