# gvlayout

`gvlayout` is a small, dependency-free library of building blocks for
working with GraphViz DOT files and drawing graphs as SVG. It supports
Python 3.10 and later.

What is in it:

- `gvlayout.gv.lexer` — `Lexer`, `Token` and `TokenKind`: a tokenizer for the
  DOT language (keywords, identifiers, quoted strings with `\n`/`\l`
  escapes, numbers, `->`, `--`, `/* */` and `//` comments).
- `gvlayout.gv.parser` — `DotParser`, a recursive-descent parser that builds
  a plain syntax tree, and `DotParseError`, raised on invalid input.
- `gvlayout.gv.ast` — the syntax tree: `Graph`, `NodeStmt`, `EdgeStmt`,
  `AttrStmt`, `NodeId` (name and optional port), `AttributeList`,
  `ArrowKind` and `AttrStmtTarget`.
- `gvlayout.gv.printer` — `format_ast` and `dump_ast`, an indented text dump
  of the syntax tree.
- `gvlayout.adt.dag` — `DAG`, a directed acyclic graph whose nodes are also
  placed in ranks (levels), with topological sorting, reachability checks
  and validation.
- `gvlayout.adt.scoped_map` — `ScopedMap`, a map whose bindings live in
  nested scopes.
- `gvlayout.core.geometry` — `Point`, `Position` and helpers such as
  connection points on boxes and ellipses, segment/box intersection and
  `weighted_median`.
- `gvlayout.core.color` — `Color`, from CSS names or `#rrggbb`.
- `gvlayout.core.style` — `StyleAttr` and `LineStyleKind`.
- `gvlayout.core.format` — the abstract interfaces `Visible`, `Renderable`
  and `RenderBackend`.
- `gvlayout.backends.svg` — `SVGWriter`, a `RenderBackend` that collects
  draw calls and produces an SVG document.
- `gvlayout.core.utils` — `save_to_file`.

## Parsing a DOT file

```python
from gvlayout.gv.parser import DotParser, DotParseError
from gvlayout.gv.printer import format_ast

source = 'digraph { a -> b [label="foo"]; }'
parser = DotParser(source)
try:
    graph = parser.process()
except DotParseError as err:
    parser.print_error()   # echoes the input and marks where parsing stopped
    print("Error:", err)
else:
    print(format_ast(graph))
```

`dump_ast(graph)` writes the same text to standard output, or to any file
object passed as `file`. `parser.print_error(file)` does the same for the
error context.

## Ranking nodes in a DAG

```python
from gvlayout.adt.dag import DAG

dag = DAG()
a, b, c = dag.new_node(), dag.new_node(), dag.new_node()
dag.add_edge(a, b)
dag.add_edge(b, c)
dag.recompute_node_ranks()
dag.verify()

print(dag.level(a), dag.level(b), dag.level(c))   # 0 1 2
```

`verify()` raises `ValueError` if the graph has a cycle or a node is not in
exactly one rank; pass `DAG(validate=False)` to turn those checks off.

## Scoped attributes

```python
from gvlayout.adt.scoped_map import ScopedMap

attrs = ScopedMap()
attrs.push()
attrs.insert("color", "red")
attrs.push()
attrs.insert("color", "blue")
attrs.get("color")   # 'blue'
attrs.pop()
attrs.get("color")   # 'red'
```

## Drawing SVG

```python
from gvlayout.backends.svg import SVGWriter
from gvlayout.core.geometry import Point
from gvlayout.core.style import StyleAttr
from gvlayout.core.utils import save_to_file

svg = SVGWriter()
look = StyleAttr.simple()
svg.draw_rect(Point(10.0, 10.0), Point(100.0, 50.0), look, None)
svg.draw_text(Point(60.0, 35.0), "hello", look)
save_to_file("graph.svg", svg.finalize())
```

Colors are given by web name or hex code:

```python
from gvlayout.core.color import Color

Color.from_name("coral").to_web_color()    # '#ff7f50ff'
Color.from_name("#112233").to_web_color()  # '#112233ff'
```

## What it does not do

The package has no layout engine: nothing turns a parsed `Graph` into
positioned shapes, and there are no node shapes (boxes, circles, records)
that implement `Visible` and `Renderable`. Going from a DOT file to an SVG
picture therefore takes code of your own that places nodes and issues draw
calls to `SVGWriter`. There is no command-line tool.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.