# cmdlines

A small toolkit of terminal and web helpers:

- `cmdlines.html`: build an HTML document as a tree of nodes and render it to a string.
- `cmdlines.progress`: a terminal progress bar that shows percentage, count and elapsed and remaining time.
- `cmdlines.editor`: a minimal multi-line text editor that runs inline in a terminal.
- `cmdlines.server`: a tiny asyncio HTTP server that answers every request with `hello world`.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Start the HTTP server (by default on `127.0.0.1:8081`); `--host` takes an IPv4
address and `--port` a port from 0 to 65535. It prints `start`, serves until
interrupted with Ctrl+C, then prints `end`:

```
cmdlines-serve
cmdlines-serve --host 127.0.0.1 --port 9000
```

Open the terminal editor. Arrow keys move the cursor, Enter splits a line,
Backspace deletes (joining lines at the start of a line), and Ctrl+C quits.
`--text` gives the initial contents:

```
cmdlines-edit
cmdlines-edit --text "first line"
```

The editor needs an interactive POSIX terminal; without one it prints an error
and exits with status 1.

## Building HTML

```python
from cmdlines.html import Node, NodeName

page = Node.element(NodeName.DIV)
page.attr_insert("class", "greeting")
page.append_child(Node.text("Fish & chips"))
print(page.to_html())
# <div class="greeting">Fish &amp; chips</div>
```

- `NodeName` lists the supported tags (`html`, `head`, `div`, `span`, `a`,
  `body`, `p`, `meta`, `title`); `NodeType` tells element and text nodes apart.
- Text nodes are escaped with `escape_html_text`; `escape_html_attr` escapes
  quotes and ampersands for attribute values. Attributes are written in the
  order they were set.
- Void elements such as `meta` (see `is_void_element`) are written without a
  closing tag or children.
- `append_child` raises `ValueError` if the node is the parent itself or already
  has a parent. `children()` returns the direct children in order as a tuple and
  `last_child()` returns the last one, or `None`.
- `demo_page()` builds a complete sample document with a head, meta tags, a
  title and a body.
- `save(content, directory=None)` writes a rendered page to `index.html` in the
  given directory (the current directory by default) and returns its path.

## Progress bar

```python
from cmdlines.progress import ProgressBar

bar = ProgressBar(100).with_message("copying")
for _ in range(100):
    bar.inc(1)
bar.finish()
```

- `update(current)` sets progress (capped at the total) and `inc(delta)` adds
  to it; both redraw the bar on the current line. Negative values raise
  `ValueError`. `finish()` fills the bar and ends the line.
- `with_width` fixes the bar width, brackets included (at least 2); otherwise
  the width follows the terminal, or 50 when there is none. `with_style` takes
  a `BarStyle` to change the characters and colours.
- `ProgressBar(total, stream=..., clock=...)` draws to another text stream and
  takes time from another clock function.
- `render_line()` returns the text of the bar without colours and without
  drawing it; `fraction` is the completed share from 0.0 to 1.0.
- `format_duration(seconds)` formats a time as `mm:ss`.

## Editor

`Editor(text="", width=None)` keeps its text as a list of lines and can be
driven without a terminal: `insert_char`, `insert_newline`, `delete_char`,
`move_cursor` with a `Direction`, and `process_key(key, ctrl=False)` all change
the buffer and cursor. `process_key` returns `True` for Ctrl+C. `text()`
returns the whole content joined with newlines, `lines` and `cursor` expose the
buffer and the (row, column) position, and `render()` returns the terminal
output that redraws the buffer. `run()` starts the interactive loop that
`cmdlines-edit` uses and returns the final text.

## Server

```python
import asyncio
from cmdlines.server import HttpServer

async def serve():
    server = HttpServer("127.0.0.1", 0)
    await server.start()
    print(server.address)
    await server.close()

asyncio.run(serve())
```

`start()` binds and begins accepting, `run()` serves until cancelled, and
`close()` stops listening. `make_response(body)` builds the raw HTTP/1.1 200
response bytes.

## What it does not do

The server has no routing and does not look at the request: every request gets
the same `hello world` reply and the connection is closed. The editor does not
load or save files; its text lives only in memory and is returned by `run()`.