"""Syntax-tree nodes for shell command lines and their text dumps."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

__all__ = [
    "NodeType",
    "Command",
    "AstNode",
    "node_label",
    "format_node",
    "format_tree",
    "print_tree",
]


class NodeType(IntEnum):
    """Kinds of node in a command-line syntax tree."""

    CMD = 0
    PIPE = 1
    AND_IF = 2
    OR_IF = 3
    REDIR_IN = 4
    REDIR_OUT = 5
    REDIR_APPEND = 6
    HEREDOC = 7


_LABELS = {
    NodeType.CMD: "Command node",
    NodeType.PIPE: "Pipe node",
    NodeType.AND_IF: "And-if node",
    NodeType.OR_IF: "Or-if node",
    NodeType.REDIR_IN: "Redir in node",
    NodeType.REDIR_OUT: "Redir out node",
    NodeType.REDIR_APPEND: "Redir append node",
    NodeType.HEREDOC: "Heredoc node",
}


@dataclass
class Command:
    """The executable part of a command node."""

    args: list[str] | None = None
    path: str | None = None
    fd_in: int = 0
    fd_out: int = 1


@dataclass
class AstNode:
    """A node of the tree: a command, an operator or a redirection."""

    type: NodeType
    cmd: Command = field(default_factory=Command)
    children: list[AstNode] = field(default_factory=list)
    file: str | None = None
    root: AstNode | None = field(default=None, repr=False, compare=False)

    def set_root(self, root: AstNode) -> None:
        """Point this node and every descendant at root."""
        for node in self.walk():
            node.root = root

    def walk(self) -> Iterator[AstNode]:
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


def node_label(node_type) -> str:
    """Human-readable name of a node type."""
    return _LABELS[NodeType(node_type)]


def _child_lines(child: AstNode) -> list[str]:
    lines = [node_label(child.type)]
    if child.type is NodeType.CMD and child.cmd.args:
        lines.append(child.cmd.args[0])
    return lines


def format_node(node: AstNode) -> str:
    """Describe one node: type, identity, root, command, file and children."""
    lines = [node_label(node.type), f"Pointer address: 0x{id(node):x}"]
    if node.root is not None:
        lines.append(f"Root: {node_label(node.root.type)}")
    if node.cmd.path:
        lines.extend(["Path:", f"\t{node.cmd.path}"])
    if node.cmd.args is not None:
        lines.append("Arguments:")
        lines.extend(f"\t{arg}" for arg in node.cmd.args)
    if node.type is NodeType.CMD:
        lines.append(f"fd_in = {node.cmd.fd_in}")
        lines.append(f"fd_out = {node.cmd.fd_out}")
    if node.file:
        lines.append(f"File: {node.file}")
    if node.children:
        lines.append("Children:")
        for child in node.children:
            lines.extend(_child_lines(child))
    return "\n".join(lines) + "\n\n"


def format_tree(node: AstNode) -> str:
    """Describe every node of the tree, in pre-order."""
    return "".join(format_node(each) for each in node.walk())


def print_tree(node: AstNode) -> None:
    """Write the description of the whole tree to standard output."""
    print(format_tree(node), end="")