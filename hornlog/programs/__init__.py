"""
Built-in program registry.

Each program is a dict:
    source:       program text, one clause per "."
    query:        a sample query to try against it
    description:  str
"""

from .peano import PEANO_SOURCE, PEANO_QUERY
from .family import FAMILY_SOURCE, FAMILY_QUERY
from .lists import LISTS_SOURCE, LISTS_QUERY


PROGRAMS = {
    "peano": {
        "source":      PEANO_SOURCE,
        "query":       PEANO_QUERY,
        "description": "Peano arithmetic: add/3, mul/3, nat/1 over z and s(_)",
    },
    "family": {
        "source":      FAMILY_SOURCE,
        "query":       FAMILY_QUERY,
        "description": "Family tree: parent/2 facts, ancestor/2 by recursion",
    },
    "lists": {
        "source":      LISTS_SOURCE,
        "query":       LISTS_QUERY,
        "description": "Lists over cons/nil: append/3, member/2, reverse/2",
    },
}


def load_program(name: str, store, parser) -> list:
    """Parse a built-in program and append its clauses to store."""
    clauses = parser.parse_program(PROGRAMS[name]["source"])
    store.extend(clauses)
    return clauses
