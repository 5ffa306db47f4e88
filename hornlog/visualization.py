"""
Visualization and reporting utilities.
"""

from .core.clauses import ClauseStore


def print_store(store: ClauseStore):
    """Print every fact and rule, in store order."""
    print(f"\n{'='*60}")
    print(f"Facts ({len(store.facts)}):")
    for fact in store.facts:
        print(f"  {fact}.")
    print(f"Rules ({len(store.rules)}):")
    for rule in store.rules:
        print(f"  {rule}.")
    print(f"{'='*60}")


def print_history(query):
    """Print the expansion log of a query."""
    print(f"\n{'='*60}")
    print("Search history:")
    print(f"{'='*60}")
    for entry in query.history:
        print(f"  Step {entry['step']}: {entry['goal']} -> "
              f"{entry['produced']} branch(es), queue {entry['queue_size']}")


def export_dot(store: ClauseStore, path="hornlog_graph.dot"):
    """
    Export the predicate dependency graph as a DOT file for Graphviz.

    One node per name/arity; an edge from each rule head to each body
    predicate. Predicates with facts are filled.
    """
    with_facts = {(f.predicate.name, f.arity) for f in store.facts}
    with open(path, "w") as f:
        f.write("digraph hornlog {\n")
        f.write("  rankdir=LR;\n")
        f.write("  node [shape=box, style=rounded];\n")
        for name, arity in store.predicates():
            label = f"{name}/{arity}".replace('"', '\\"')
            color = "lightblue" if (name, arity) in with_facts else "lightgray"
            f.write(f'  "{label}" [fillcolor={color}, style=filled];\n')
        edges = {}
        for rule in store.rules:
            head = f"{rule.head.predicate.name}/{rule.head.arity}"
            for atom in rule.body:
                edges.setdefault((head, f"{atom.predicate.name}/{atom.arity}"), None)
        for head, body in edges:
            f.write(f'  "{head}" -> "{body}";\n')
        f.write("}\n")
    print(f"Graph exported to {path}")
