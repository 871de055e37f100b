"""Script-driven harness for exercising graphs and shortest paths.

A script is read line by line. Blank lines and comments are echoed as-is;
every other line is a command followed by whitespace-separated arguments.
Each command writes exactly one line of output (``FindPath`` writes one line
per path segment plus a header and a total). Node names are strings and edge
labels are floats.

Commands:
    CreateGraph <graph>
    AddNode <graph> <node>
    AddEdge <graph> <parent> <child> <weight>
    ListNodes <graph>
    ListChildren <graph> <parent>
    FindPath <graph> <from> <to>

Example:
    >>> import io
    >>> out = io.StringIO()
    >>> ScriptRunner(io.StringIO("CreateGraph g\\n"), out).run()
    >>> out.getvalue()
    'created graph g\\n'
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, TextIO

from pathgraph.algorithms.spf import shortest_path
from pathgraph.config import HARNESS_CONFIG, HarnessConfig
from pathgraph.errors import CommandError, PathGraphError
from pathgraph.graph.labeled_graph import Graph
from pathgraph.logging import get_logger

logger = get_logger(__name__)


class ScriptRunner:
    """Executes harness commands from ``reader`` and writes results to ``writer``.

    Errors raised by a command are reported as an ``Exception: ...`` line and
    never stop the script.
    """

    def __init__(
        self,
        reader: TextIO,
        writer: TextIO,
        config: Optional[HarnessConfig] = None,
    ) -> None:
        self._input = reader
        self._output = writer
        self._config = config or HARNESS_CONFIG
        self.graphs: Dict[str, Graph[str, float]] = {}
        self._commands: Dict[str, Callable[[List[str]], None]] = {
            "CreateGraph": self._create_graph,
            "AddNode": self._add_node,
            "AddEdge": self._add_edge,
            "ListNodes": self._list_nodes,
            "ListChildren": self._list_children,
            "FindPath": self._find_path,
        }

    def run(self) -> None:
        """Process every line of the input."""
        for raw_line in self._input:
            line = raw_line.rstrip("\r\n")
            if not line.strip() or line.startswith(self._config.comment_prefix):
                self._println(line)
            else:
                command, *arguments = line.split()
                self.execute(command, arguments)
            self._output.flush()

    def execute(self, command: str, arguments: List[str]) -> None:
        """Run one command, reporting failures as output lines."""
        handler = self._commands.get(command)
        if handler is None:
            self._println(f"Unrecognized command: {command}")
            return
        try:
            handler(arguments)
        except (PathGraphError, ValueError) as exc:
            logger.debug("%s %s failed: %r", command, arguments, exc)
            self._println(f"Exception: {type(exc).__name__}: {exc}")

    def _println(self, text: str) -> None:
        self._output.write(text + "\n")

    def _graph(self, name: str) -> Graph[str, float]:
        try:
            return self.graphs[name]
        except KeyError:
            raise CommandError(f"Unknown graph: {name}") from None

    @staticmethod
    def _expect(command: str, arguments: List[str], count: int) -> None:
        if len(arguments) != count:
            raise CommandError(f"Bad arguments to {command}: {arguments}")

    #
    # Commands
    #
    def _create_graph(self, arguments: List[str]) -> None:
        self._expect("CreateGraph", arguments, 1)
        (graph_name,) = arguments
        self.graphs[graph_name] = Graph()
        self._println(f"created graph {graph_name}")

    def _add_node(self, arguments: List[str]) -> None:
        self._expect("AddNode", arguments, 2)
        graph_name, node_name = arguments
        self._graph(graph_name).add_node(node_name)
        self._println(f"added node {node_name} to {graph_name}")

    def _add_edge(self, arguments: List[str]) -> None:
        self._expect("AddEdge", arguments, 4)
        graph_name, parent, child, raw_label = arguments
        label = float(raw_label)
        self._graph(graph_name).add_edge(parent, child, label)
        self._println(
            f"added edge {self._config.format_cost(label)} from {parent} "
            f"to {child} in {graph_name}"
        )

    def _list_nodes(self, arguments: List[str]) -> None:
        self._expect("ListNodes", arguments, 1)
        (graph_name,) = arguments
        nodes = sorted(self._graph(graph_name).nodes())
        self._println(f"{graph_name} contains:" + "".join(f" {n}" for n in nodes))

    def _list_children(self, arguments: List[str]) -> None:
        self._expect("ListChildren", arguments, 2)
        graph_name, parent = arguments
        children = sorted(
            {
                f"{edge.destination}({self._config.format_cost(edge.label)})"
                for edge in self._graph(graph_name).children_of(parent)
            }
        )
        self._println(
            f"the children of {parent} in {graph_name} are:"
            + "".join(f" {c}" for c in children)
        )

    def _find_path(self, arguments: List[str]) -> None:
        self._expect("FindPath", arguments, 3)
        graph_name, start, end = arguments
        graph = self._graph(graph_name)
        # Underscores stand in for spaces in node names
        start = start.replace("_", " ")
        end = end.replace("_", " ")

        unknown = [node for node in (start, end) if not graph.contains_node(node)]
        if unknown:
            for node in unknown:
                self._println(f"unknown node {node}")
            return

        self._println(f"path from {start} to {end}:")
        path = shortest_path(graph, start, end)
        if path is None:
            self._println("no path found")
            return
        fmt = self._config.format_cost
        for segment in path:
            self._println(
                f"{segment.start} to {segment.end} with weight {fmt(segment.cost)}"
            )
        self._println(f"total cost: {fmt(path.cost)}")
