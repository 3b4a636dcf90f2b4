"""A small HTML node tree that renders itself to markup."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

_TEXT_ESCAPES = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        "&": "&amp;",
        '"': "&quot;",
        "'": "&#39;",
    }
)

_ATTR_ESCAPES = str.maketrans(
    {
        '"': "&quot;",
        "'": "&#39;",
        "&": "&amp;",
    }
)

_VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


class NodeType(enum.Enum):
    """Kind of a node in the tree."""

    DOCUMENT = "文档节点"
    ELEMENT = "元素节点"
    ATTR = "属性"
    TEXT = "文本节点"


class NodeName(str, enum.Enum):
    """Tag names an element node may carry."""

    HTML = "html"
    HEAD = "head"
    DIV = "div"
    SPAN = "span"
    A = "a"
    BODY = "body"
    P = "p"
    META = "meta"
    TITLE = "title"

    def __str__(self) -> str:
        return self.value


def escape_html_text(s: str) -> str:
    """Escape text for use as element content."""
    return s.translate(_TEXT_ESCAPES)


def escape_html_attr(s: str) -> str:
    """Escape text for use inside a quoted attribute value."""
    return s.translate(_ATTR_ESCAPES)


def is_void_element(tag: str) -> bool:
    """Tell whether a tag has no closing tag and no content."""
    return tag.lower() in _VOID_ELEMENTS


def save(content: str, directory: str | Path | None = None) -> Path:
    """Write ``content`` to ``index.html`` in ``directory`` (default: cwd)."""
    path = Path.cwd() if directory is None else Path(directory)
    target = path / "index.html"
    target.write_text(content, encoding="utf-8")
    return target


@dataclass(eq=False)
class Node:
    """One node of an HTML tree: an element or a piece of text."""

    node_type: NodeType = NodeType.ELEMENT
    name: NodeName = NodeName.DIV
    value: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    parent: Node | None = field(default=None, init=False, repr=False)
    _children: list[Node] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def element(cls, name: NodeName) -> Node:
        """Create an element node with the given tag name."""
        return cls(node_type=NodeType.ELEMENT, name=NodeName(name))

    @classmethod
    def text(cls, value: str) -> Node:
        """Create a text node."""
        return cls(node_type=NodeType.TEXT, value=value)

    def attr_insert(self, key: str, value: str) -> None:
        """Set an attribute, replacing any earlier value for the key."""
        self.attributes[str(key)] = str(value)

    def append_child(self, node: Node) -> None:
        """Attach ``node`` as the last child of this node."""
        if node is self:
            raise ValueError("a node cannot be its own child")
        if node.parent is not None:
            raise ValueError("node already belongs to a parent")
        node.parent = self
        self._children.append(node)

    def last_child(self) -> Node | None:
        """Return the last child, or None when there are no children."""
        return self._children[-1] if self._children else None

    def children(self) -> tuple[Node, ...]:
        """Return the children in document order."""
        return tuple(self._children)

    def to_html(self) -> str:
        """Render this node and everything below it as HTML."""
        return "".join(self._render())

    def _render(self) -> Iterator[str]:
        if self.node_type is NodeType.ELEMENT:
            yield from self._render_element()
        elif self.node_type is NodeType.TEXT:
            if self.value is not None:
                yield escape_html_text(self.value)

    def _render_element(self) -> Iterator[str]:
        tag = str(self.name)
        yield f"<{tag}"
        for key, value in self.attributes.items():
            yield f' {key}="{value}"'
        yield ">"
        if is_void_element(tag):
            return
        for child in self._children:
            yield from child._render()
        yield f"</{tag}>"


def demo_page() -> Node:
    """Build a small sample page with head, metadata, title and body."""
    root = Node.element(NodeName.HTML)

    head = Node.element(NodeName.HEAD)
    charset = Node.element(NodeName.META)
    charset.attr_insert("charset", "UTF-8")
    head.append_child(charset)

    viewport = Node.element(NodeName.META)
    viewport.attr_insert("name", "viewport")
    viewport.attr_insert("content", "width=device-width, initial-scale=1.0")
    head.append_child(viewport)

    title = Node.element(NodeName.TITLE)
    title.append_child(Node.text("测试环境"))
    head.append_child(title)
    root.append_child(head)

    body = Node.element(NodeName.BODY)
    span = Node.element(NodeName.SPAN)
    div = Node.element(NodeName.DIV)
    paragraph = Node.element(NodeName.P)

    link = Node.element(NodeName.A)
    link.attributes.update({"href": "https://example.com", "target": "_blank"})
    link.append_child(Node.text("点击跳转"))
    div.append_child(link)

    body.append_child(span)
    body.append_child(div)
    body.append_child(paragraph)
    root.append_child(body)
    return root