"""
Text syntax: tokenizer, interning tables and a recursive-descent parser.

    program   := clause*
    clause    := atom "."  |  atom ":-" atom ("," atom)* "."
    query     := ["?-"] atom ("," atom)* ["."]
    atom      := name ["(" term ("," term)* ")"]
    term      := name ["(" term ("," term)* ")"]

A bare name starting with an uppercase letter or "_" is a variable; any
other bare name is a constant. A name followed by "(" is a functor inside
a term and a predicate at atom position. "%" starts a comment that runs to
the end of the line.

Constants, functors and predicates are interned in a SymbolTable, so the
same name always yields the same object for the table's lifetime.
Variables are scoped per clause (or per query): every occurrence of a name
inside one clause is the same Variable, and a new clause starts a new scope.
"""

import re
from pathlib import Path

from .core.terms import Variable, Constant, Functor, Predicate, Application
from .core.clauses import Atom, Fact, Rule, Goal


class ParseError(ValueError):
    """Malformed program or query text."""

    def __init__(self, message: str, position: int = None):
        self.message = message
        self.position = position
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)


TOKEN_RE = re.compile(r"""
    (?P<ws>\s+)
  | (?P<comment>%[^\n]*)
  | (?P<neck>:-)
  | (?P<query>\?-)
  | (?P<name>[A-Za-z0-9_]+)
  | (?P<punct>[(),.])
""", re.VERBOSE)


def tokenize(text: str) -> list:
    """Split text into (kind, value, offset) tokens. Whitespace and comments are dropped."""
    tokens = []
    pos = 0
    while pos < len(text):
        m = TOKEN_RE.match(text, pos)
        if m is None:
            raise ParseError(f"unexpected character {text[pos]!r}", pos)
        kind = m.lastgroup
        if kind == "punct":
            tokens.append((m.group(), m.group(), pos))
        elif kind not in ("ws", "comment"):
            tokens.append((kind, m.group(), pos))
        pos = m.end()
    tokens.append(("eof", "", len(text)))
    return tokens


def is_variable_name(name: str) -> bool:
    return name[0].isupper() or name[0] == "_"


class SymbolTable:
    """One interning table per kind; lives as long as the session."""

    def __init__(self):
        self.constants = {}
        self.functors = {}
        self.predicates = {}

    def constant(self, name: str) -> Constant:
        if name not in self.constants:
            self.constants[name] = Constant(name)
        return self.constants[name]

    def functor(self, name: str) -> Functor:
        if name not in self.functors:
            self.functors[name] = Functor(name)
        return self.functors[name]

    def predicate(self, name: str) -> Predicate:
        if name not in self.predicates:
            self.predicates[name] = Predicate(name)
        return self.predicates[name]


class Parser:
    """
    Builds canonical clauses and goals from text.

    Reuse one Parser (or at least one SymbolTable) for everything loaded into
    a store and every query against it, otherwise the same name would map to
    different objects and nothing would unify.
    """

    def __init__(self, symbols: SymbolTable = None):
        self.symbols = symbols if symbols is not None else SymbolTable()
        self._tokens = []
        self._pos = 0
        self._scope = {}

    # -- entry points ---------------------------------------------------

    def parse_program(self, text: str) -> list:
        """Every clause in text, in order."""
        self._start(text)
        clauses = []
        while self._peek()[0] != "eof":
            clauses.append(self._clause())
        return clauses

    def parse_clause(self, text: str):
        """Exactly one clause; the trailing "." is optional."""
        self._start(text)
        clause = self._clause(final_dot_optional=True)
        self._expect("eof")
        return clause

    def parse_goals(self, text: str) -> list:
        """A query: comma-separated goals sharing one variable scope."""
        self._start(text)
        if self._peek()[0] == "query":
            self._advance()
        goals = [self._atom(Goal)]
        while self._peek()[0] == ",":
            self._advance()
            goals.append(self._atom(Goal))
        if self._peek()[0] == ".":
            self._advance()
        self._expect("eof")
        return goals

    def parse_term(self, text: str):
        self._start(text)
        term = self._term()
        self._expect("eof")
        return term

    # -- grammar --------------------------------------------------------

    def _start(self, text):
        self._tokens = tokenize(text)
        self._pos = 0
        self._scope = {}

    def _clause(self, final_dot_optional=False):
        self._scope = {}
        head = self._atom(Atom)
        if self._peek()[0] == "neck":
            self._advance()
            body = [self._atom(Atom)]
            while self._peek()[0] == ",":
                self._advance()
                body.append(self._atom(Atom))
            clause = Rule(head, tuple(body))
        else:
            clause = Fact(head.predicate, head.terms)
        if final_dot_optional and self._peek()[0] == "eof":
            return clause
        self._expect(".")
        return clause

    def _atom(self, kind):
        _, name, pos = self._expect("name")
        if is_variable_name(name):
            raise ParseError(f"predicate name expected, got variable {name!r}", pos)
        predicate = self.symbols.predicate(name)
        return kind(predicate, tuple(self._arguments()))

    def _term(self):
        _, name, pos = self._expect("name")
        if self._peek()[0] == "(":
            return Application(self.symbols.functor(name), tuple(self._arguments()))
        if is_variable_name(name):
            if name not in self._scope:
                self._scope[name] = Variable(name)
            return self._scope[name]
        return self.symbols.constant(name)

    def _arguments(self) -> list:
        if self._peek()[0] != "(":
            return []
        self._advance()
        args = [self._term()]
        while self._peek()[0] == ",":
            self._advance()
            args.append(self._term())
        self._expect(")")
        return args

    # -- token plumbing -------------------------------------------------

    def _peek(self):
        return self._tokens[self._pos]

    def _advance(self):
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def _expect(self, kind):
        token = self._peek()
        if token[0] != kind:
            expected = "end of input" if kind == "eof" else repr(kind)
            found = "end of input" if token[0] == "eof" else repr(token[1])
            raise ParseError(f"expected {expected}, found {found}", token[2])
        return self._advance()


def load_file(path, store, parser: Parser) -> list:
    """Parse a program file and append its clauses to store, in file order."""
    text = Path(path).read_text()
    clauses = parser.parse_program(text)
    store.extend(clauses)
    return clauses
