"""Cycle detection in an undirected graph by depth-first search.

The DFS is simulated with an explicit frame stack so every step exposes
the call stack and the current path.
"""

from __future__ import annotations

from algotrace.constants import (
    CYCLE_DETECTION,
    EMPHASIS_STEP_DURATION,
    MAX_GRAPH_EDGES,
    MAX_GRAPH_NODES,
)
from algotrace.generators._base import (
    RecursionTracker,
    TraceBuilder,
    ids,
    require,
    returns_empty_on_invalid_input,
)
from algotrace.snapshot_types import GraphEdge, GraphNode, GraphSnapshot
from algotrace.trace_types import (
    DataStructureKind,
    LoopType,
    Operation,
    Step,
    StepContext,
    StepType,
)

GRAPH = "graph"
CALL_STACK = "callStack"

CYCLE_DETECTION_STYLES = frozenset({"current", "visited", "path", "explore", "cycle", "backtrack"})

# Edge ids join their endpoints with this, so node ids may not contain it.
EDGE_ID_SEPARATOR = "-"


def _validate_graph(nodes: list[str], edges: list[tuple[str, str]]) -> None:
    require(isinstance(nodes, (list, tuple)), CYCLE_DETECTION, "nodes must be a list")
    require(isinstance(edges, (list, tuple)), CYCLE_DETECTION, "edges must be a list")
    require(
        1 <= len(nodes) <= MAX_GRAPH_NODES,
        CYCLE_DETECTION,
        f"graph must have 1..{MAX_GRAPH_NODES} nodes",
    )
    require(len(edges) <= MAX_GRAPH_EDGES, CYCLE_DETECTION, f"at most {MAX_GRAPH_EDGES} edges")
    require(
        all(isinstance(n, str) and n for n in nodes),
        CYCLE_DETECTION,
        "node ids must be non-empty strings",
    )
    require(len(set(nodes)) == len(nodes), CYCLE_DETECTION, "node ids must be unique")
    require(
        not any(EDGE_ID_SEPARATOR in n for n in nodes),
        CYCLE_DETECTION,
        f"node ids must not contain {EDGE_ID_SEPARATOR!r}",
    )
    known = set(nodes)
    seen: set[frozenset[str]] = set()
    for edge in edges:
        require(
            isinstance(edge, (list, tuple)) and len(edge) == 2,
            CYCLE_DETECTION,
            "each edge must be a (source, target) pair",
        )
        a, b = edge
        require(
            a in known and b in known,
            CYCLE_DETECTION,
            f"edge {a}-{b} references an unknown node",
        )
        require(a != b, CYCLE_DETECTION, f"self-loop on {a} is not supported")
        pair = frozenset((a, b))
        require(pair not in seen, CYCLE_DETECTION, f"duplicate edge {a}-{b}")
        seen.add(pair)


@returns_empty_on_invalid_input
def generate_cycle_detection_steps(
    nodes: list[str], edges: list[tuple[str, str]]
) -> list[Step]:
    """Detect a cycle in the undirected graph given by *nodes* and *edges*."""
    _validate_graph(nodes, edges)

    graph = GraphSnapshot(
        nodes=[GraphNode(id=n, label=n) for n in nodes],
        edges=[
            GraphEdge(id=f"{a}{EDGE_ID_SEPARATOR}{b}", source=a, target=b) for a, b in edges
        ],
        adjacency={n: [] for n in nodes},
    )
    edge_ids: dict[frozenset[str], str] = {}
    for edge in graph.edges:
        graph.adjacency[edge.source].append(edge.target)
        graph.adjacency[edge.target].append(edge.source)
        edge_ids[frozenset((edge.source, edge.target))] = edge.id

    trace = TraceBuilder(
        CYCLE_DETECTION,
        {
            GRAPH: (DataStructureKind.GRAPH, "Graph"),
            CALL_STACK: (DataStructureKind.CALL_STACK, "DFS Call Stack"),
        },
        CYCLE_DETECTION_STYLES,
    )
    frames = RecursionTracker(prefix="dfs")
    cursors: list[int] = []

    def state() -> dict:
        return {GRAPH: graph, CALL_STACK: frames.call_stack}

    def base_highlights() -> list:
        return [ids("visited", graph.visited), ids("path", graph.current_path)]

    def stack_highlight() -> dict:
        top = frames.top
        return {CALL_STACK: [ids("current", [top.id])]} if top else {}

    def enter(node: str, parent: str | None) -> None:
        frames.push(node, f"dfs({node})")
        cursors.append(0)
        trace.emit(
            StepType.RECURSIVE_CALL,
            f"Call dfs({node}" + (f", parent={parent})" if parent else ")"),
            state(),
            {GRAPH: base_highlights() + [ids("current", [node])], **stack_highlight()},
            StepContext(loop_type=LoopType.RECURSIVE, data_structure="graph"),
            {"node": node, "parent": parent, "depth": frames.depth},
        )
        graph.visited.append(node)
        graph.current_path.append(node)
        graph.current_node = node
        graph.parent_map[node] = parent
        trace.emit(
            StepType.GRAPH_NODE_VISIT,
            f"Visiting node {node}; neighbors: {graph.adjacency[node]}",
            state(),
            {GRAPH: base_highlights() + [ids("current", [node])], **stack_highlight()},
            StepContext(operation=Operation.WRITE, data_structure="graph"),
            {"node": node, "visited": list(graph.visited), "path": list(graph.current_path)},
        )

    trace.emit(
        StepType.INITIALIZATION,
        f"Detecting cycles with DFS on {len(nodes)} node(s) and {len(edges)} edge(s)",
        state(),
        variables={"nodes": len(nodes), "edges": len(edges), "hasCycle": False},
    )

    component = 0
    for start in nodes:
        already = start in graph.visited
        trace.emit(
            StepType.LOOP_CONDITION,
            (
                f"Node {start} was already visited, skip it"
                if already
                else f"Node {start} is unvisited: start DFS for component {component + 1}"
            ),
            state(),
            {GRAPH: base_highlights() + [ids("current", [start])]},
            StepContext(loop_type=LoopType.OUTER),
            {"start": start, "component": component if already else component + 1},
        )
        if already:
            continue
        component += 1
        enter(start, None)

        while frames.call_stack:
            node = frames.top.node
            parent = graph.parent_map[node]
            neighbors = graph.adjacency[node]
            if cursors[-1] < len(neighbors):
                neighbor = neighbors[cursors[-1]]
                cursors[-1] += 1
                edge_id = edge_ids[frozenset((node, neighbor))]
                if neighbor == parent:
                    outcome = f"{neighbor} is the parent of {node}, ignore this edge"
                elif neighbor in graph.visited:
                    outcome = f"{neighbor} is already on the search tree"
                else:
                    outcome = f"{neighbor} is unvisited, recurse into it"
                trace.emit(
                    StepType.GRAPH_EDGE_EXPLORE,
                    f"Exploring edge {node} - {neighbor}: {outcome}",
                    state(),
                    {
                        GRAPH: base_highlights()
                        + [ids("current", [node]), ids("explore", [edge_id, neighbor])],
                        **stack_highlight(),
                    },
                    StepContext(operation=Operation.READ, data_structure="graph"),
                    {"node": node, "neighbor": neighbor, "parent": parent},
                )
                if neighbor == parent:
                    continue
                if neighbor not in graph.visited:
                    enter(neighbor, node)
                    continue

                cycle_nodes = graph.current_path[graph.current_path.index(neighbor):]
                closed = cycle_nodes + [neighbor]
                graph.cycle_edges = [
                    edge_ids[frozenset(pair)] for pair in zip(closed, closed[1:])
                ]
                trace.emit(
                    StepType.GRAPH_CYCLE_DETECTED,
                    f"Cycle detected: back edge {node} - {neighbor} closes "
                    + " -> ".join(closed),
                    state(),
                    {
                        GRAPH: [
                            ids("cycle", cycle_nodes),
                            ids("cycle", graph.cycle_edges),
                            ids("current", [node]),
                        ],
                        **stack_highlight(),
                    },
                    StepContext(operation=Operation.COMPARE, data_structure="graph"),
                    {"hasCycle": True, "cycle": cycle_nodes, "backEdge": f"{node} - {neighbor}"},
                    duration=EMPHASIS_STEP_DURATION,
                )
                trace.emit(
                    StepType.RETURN,
                    f"The graph contains a cycle through {', '.join(cycle_nodes)}",
                    state(),
                    {GRAPH: [ids("cycle", cycle_nodes), ids("cycle", graph.cycle_edges)]},
                    variables={"hasCycle": True, "cycle": cycle_nodes},
                    duration=EMPHASIS_STEP_DURATION,
                )
                return trace.finish()

            graph.current_path.pop()
            frames.pop(None)
            cursors.pop()
            graph.current_node = frames.top.node if frames.top else None
            trace.emit(
                StepType.GRAPH_BACKTRACK,
                f"All neighbors of {node} explored, backtrack",
                state(),
                {GRAPH: base_highlights() + [ids("backtrack", [node])], **stack_highlight()},
                StepContext(loop_type=LoopType.RECURSIVE, data_structure="graph"),
                {"node": node, "path": list(graph.current_path)},
            )

    trace.emit(
        StepType.RETURN,
        f"Every node explored across {component} component(s): no cycle",
        state(),
        {GRAPH: [ids("visited", graph.visited)]},
        variables={"hasCycle": False, "components": component},
        duration=EMPHASIS_STEP_DURATION,
    )
    return trace.finish()
