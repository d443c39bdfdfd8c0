"""Example: transitive closure of dense and labeled graphs.

Shows how to:
- Close a list-of-lists matrix in place
- Close a labeled adjacency mapping and query reachability
- Keep the original graph with transitive_closure()
- Summarize what the closure added with analyze_closure()
"""

from pyclosure import (
    LabeledAdjacency,
    analyze_closure,
    compute_closure,
    transitive_closure,
)

# =============================================================================
# Example 1: Dense matrix
# =============================================================================

print("=" * 60)
print("Example 1: Dense Matrix")
print("=" * 60)

# graph[i][j] == 1 means there is an edge i -> j (self-loops seeded)
graph = [
    [1, 0, 0, 0],
    [0, 1, 1, 1],
    [0, 1, 1, 0],
    [1, 0, 1, 1],
]
compute_closure(graph)
for row in graph:
    print(" ".join(str(cell) for cell in row))

if graph[2][0]:
    print("There is a path from 2 to 0.")
print()

# =============================================================================
# Example 2: Labeled adjacency
# =============================================================================

print("=" * 60)
print("Example 2: Labeled Adjacency")
print("=" * 60)

labeled = {
    "one": {"one": 1},
    "two": {"two": 1, "three": 1, "four": 1},
    "three": {"two": 1, "three": 1},
    "four": {"one": 1, "three": 1, "four": 1},
}
closed = transitive_closure(labeled)

for source in ("one", "two", "three", "four"):
    targets = [t for t in ("one", "two", "three", "four") if t != source and closed[source].get(t)]
    print(f"{source}: {' '.join(targets)}")

# The original mapping is untouched
assert not labeled["three"].get("one")
print()

# =============================================================================
# Example 3: Building from edges and reporting
# =============================================================================

print("=" * 60)
print("Example 3: Analysis Report")
print("=" * 60)

deps = LabeledAdjacency.from_edges(
    [("app", "web"), ("web", "http"), ("http", "socket"), ("app", "db"), ("db", "socket")]
)
result = analyze_closure(deps)
print(result.summary())
print(f"app transitively depends on: {sorted(result.closure.successors('app'))}")
