"""
Interactive read-eval loop.

    ?- add(X, Y, s(s(z))).
    X -> z, Y -> s(s(z))
    ;                          empty line or ";" asks for the next answer
    X -> s(z), Y -> s(z)
    .                          anything else stops the enumeration

Other inputs:
    ['file.pl'].  or  consult('file.pl').   load a program file
    listing.                                print the store
    halt.                                   leave
"""

import re

from .core.clauses import Rule
from .core.engine import format_answer
from .syntax import ParseError, load_file
from .visualization import print_store


CONSULT_RE = re.compile(r"^\[(.+)\]$|^consult\((.+)\)$")
QUIT_COMMANDS = ("halt", "quit", "exit")


def _strip_quotes(name: str) -> str:
    return name.strip().strip("'\"")


class Repl:
    """
    One session: a store, the parser (and so the symbol table) shared by
    everything typed into it, and at most one pending query.
    """

    def __init__(self, store, parser, input_fn=input, verbose=False):
        self.store = store
        self.parser = parser
        self.input_fn = input_fn
        self.verbose = verbose

    def run(self):
        while True:
            try:
                line = self.input_fn("?- ")
            except (EOFError, KeyboardInterrupt):
                print()
                return
            if not self.handle(line):
                return

    def handle(self, line: str) -> bool:
        """Process one input line. Returns False when the session should end."""
        text = line.strip()
        if text.endswith("."):
            text = text[:-1].strip()
        if not text:
            return True
        if text in QUIT_COMMANDS:
            return False
        if text == "listing":
            print_store(self.store)
            return True

        m = CONSULT_RE.match(text)
        if m:
            for path in (m.group(1) or m.group(2)).split(","):
                self.consult(_strip_quotes(path))
            return True

        try:
            goals = self.parser.parse_goals(text)
        except ParseError as e:
            print(f"syntax error: {e}")
            return True
        self.enumerate(self.store.query(goals, verbose=self.verbose))
        return True

    def consult(self, path: str):
        try:
            clauses = load_file(path, self.store, self.parser)
        except OSError as e:
            print(f"cannot read {path}: {e.strerror or e}")
            return
        except ParseError as e:
            print(f"syntax error in {path}: {e}")
            return
        for clause in clauses:
            kind = "rule" if isinstance(clause, Rule) else "fact"
            print(f"{kind} added: {clause}")

    def enumerate(self, query):
        """Show answers one at a time until the user stops or the search ends."""
        while True:
            try:
                answer = query.next_answer()
            except KeyboardInterrupt:
                print("\nInterrupted.")
                return
            if answer is None:
                print("false.")
                return
            print(format_answer(answer))
            try:
                reply = self.input_fn("").strip()
            except (EOFError, KeyboardInterrupt):
                print()
                return
            if reply not in ("", ";"):
                return
