"""
Traversal Engine.

Generic depth-first, pre-order walking over a PHP syntax tree.

Two entry points share the same ordering guarantees (a node is produced before
its children, children in declaration order, all of them before the next
sibling):

1.  `walk`: a generator over nodes, optionally restricted in which nodes it
    descends into.
2.  `traverse`: drives a `NodeVisitor`, calling `visit_<Kind>` before a node's
    children and `leave_<Kind>` after them.

Both use an explicit stack, so tree depth does not consume interpreter call
stack. Trees are assumed acyclic; a cyclic tree makes traversal non-terminating.
"""

from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from phpsniff.core.nodes import PhpNode

DescendPredicate = Callable[[PhpNode], bool]


def walk(nodes: Sequence[PhpNode], descend: Optional[DescendPredicate] = None) -> Iterator[PhpNode]:
  """
  Yields every node reachable from `nodes`, pre-order and depth-first.

  Args:
      nodes (Sequence[PhpNode]): Root sequence, visited in order.
      descend (Optional[Callable]): If given, children of a node are only
          explored when `descend(node)` is truthy. The node itself is always yielded.

  Yields:
      PhpNode: Nodes in encounter order.
  """
  stack: List[PhpNode] = list(reversed(nodes))
  while stack:
    node = stack.pop()
    if node is None:
      continue
    yield node
    if descend is not None and not descend(node):
      continue
    stack.extend(reversed(node.children()))


class NodeVisitor:
  """
  Base class for per-kind visitors driven by `traverse`.

  Subclasses define `visit_<Kind>(node)` and/or `leave_<Kind>(node)` for the
  node kinds they care about (e.g. `visit_FunctionCall`). Kinds without a
  handler are passed through. A `visit_*` handler returning `False` prevents
  descent into that node's children; its `leave_*` handler still runs.
  """

  def on_visit(self, node: PhpNode) -> bool:
    """
    Dispatches to `visit_<Kind>`.

    Args:
        node (PhpNode): The node being entered.

    Returns:
        bool: Whether to descend into the node's children.
    """
    handler = getattr(self, f"visit_{node.kind}", None)
    if handler is None:
      return True
    return handler(node) is not False

  def on_leave(self, node: PhpNode) -> None:
    """Dispatches to `leave_<Kind>` once the node's children are done."""
    handler = getattr(self, f"leave_{node.kind}", None)
    if handler is not None:
      handler(node)


def traverse(nodes: Sequence[PhpNode], visitor: NodeVisitor) -> None:
  """
  Runs a visitor over a node sequence.

  Args:
      nodes (Sequence[PhpNode]): Root sequence.
      visitor (NodeVisitor): Receives `on_visit` / `on_leave` for every node.
  """
  # Entries are (node, leaving); leaving entries fire the leave hook.
  stack: List[Tuple[PhpNode, bool]] = [(n, False) for n in reversed(nodes) if n is not None]
  while stack:
    node, leaving = stack.pop()
    if leaving:
      visitor.on_leave(node)
      continue

    descend = visitor.on_visit(node)
    stack.append((node, True))
    if descend:
      stack.extend((child, False) for child in reversed(node.children()) if child is not None)
