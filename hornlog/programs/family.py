"""
Program: family tree.

Flat facts plus a recursive ancestor relation. Everything is finite, so
every query exhausts.
"""

FAMILY_SOURCE = """\
parent(tom, bob).
parent(tom, liz).
parent(bob, ann).
parent(bob, pat).
parent(pat, jim).

female(liz).
female(ann).
female(pat).

mother(X, Y) :- parent(X, Y), female(X).
grandparent(X, Z) :- parent(X, Y), parent(Y, Z).
ancestor(X, Y) :- parent(X, Y).
ancestor(X, Y) :- parent(X, Z), ancestor(Z, Y).
"""

FAMILY_QUERY = "ancestor(tom, Who)"
