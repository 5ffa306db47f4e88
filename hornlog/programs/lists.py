"""
Program: lists.

Lists are built from nil and cons(Head, Tail):

    cons(a, cons(b, nil))  is the list [a, b]
"""

LISTS_SOURCE = """\
append(nil, L, L).
append(cons(H, T), L, cons(H, R)) :- append(T, L, R).

member(X, cons(X, T)).
member(X, cons(H, T)) :- member(X, T).

reverse(nil, nil).
reverse(cons(H, T), R) :- reverse(T, S), append(S, cons(H, nil), R).
"""

LISTS_QUERY = "append(X, Y, cons(a, cons(b, nil)))"
