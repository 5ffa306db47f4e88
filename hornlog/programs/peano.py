"""
Program: Peano arithmetic.

Natural numbers as z, s(z), s(s(z)), ... with addition and multiplication
defined by recursion on the first argument.

    add(s(z), s(s(z)), V)     ->  V -> s(s(s(z)))
    add(X, Y, s(s(z)))        ->  three answers, smallest X first

nat/1 enumerates every natural number, so `nat(N)` never exhausts; take a
bounded number of answers.
"""

PEANO_SOURCE = """\
% addition
add(z, Y, Y).
add(s(X), Y, s(Z)) :- add(X, Y, Z).

% multiplication
mul(z, Y, z).
mul(s(X), Y, Z) :- mul(X, Y, W), add(W, Y, Z).

% every natural number
nat(z).
nat(s(X)) :- nat(X).
"""

PEANO_QUERY = "add(X, Y, s(s(z)))"
