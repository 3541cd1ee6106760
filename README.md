# ldcommon

Small building blocks for feature-flag clients:

- `ldcommon.node` – a mutable JSON value tree (`JSONNode`, `NodeType`);
- `ldcommon.edit` – removing, inserting and replacing members of arrays and
  objects;
- `ldcommon.ops` – deep copies, structural equality, and building arrays
  from Python sequences;
- `ldcommon.logger` – leveled logging through one process-wide logger hook;
- `ldcommon.sse` – an incremental server-sent events parser.

The package has no runtime dependencies.

## Installing

```
pip install .
```

## JSON trees

Each `JSONNode` has a `type` (a `NodeType`), a string or numeric value, an
optional `key` when it is a member of an object, and a `children` list for
arrays and objects.

```python
from ldcommon.node import JSONNode

obj = JSONNode.object()
obj.add("enabled", JSONNode.true())
items = JSONNode.array()
items.append(JSONNode.number(3.7))
obj.add("items", items)

len(obj)                               # 2
obj.get("ENABLED")                     # found: key lookup ignores ASCII case
obj.get("ENABLED", case_sensitive=True)  # None
obj.has("items")                       # True
items.item_at(0).value_int             # 3 (truncated, clamped to 32 bits)
items.item_at(5)                       # None
```

Constructors: `null`, `true`, `false`, `boolean`, `number`, `string`, `raw`
(text meant to be emitted verbatim), `array`, `object`. `string_value()`
returns the text of a string node and None for anything else;
`set_number()` stores a new numeric value.

### Editing

```python
from ldcommon import edit

edit.insert(items, 0, JSONNode.string("first"))   # past the end it appends
edit.replace_key(obj, "enabled", JSONNode.false())
edit.delete_at(items, 1)
removed = edit.detach_key(obj, "items")
```

`detach` raises `ValueError` when the item is not a member of the parent;
the index and key variants return None (or do nothing) when there is no
such member. `replace`, `replace_at` and `replace_key` return a bool.

### Copying, comparing and building arrays

```python
from ldcommon import ops

copy = ops.duplicate(obj)            # deep by default; recurse=False copies one node
ops.equals(copy, obj)                # True; object members match in any order
ops.equals(copy, obj, case_sensitive=False)

ops.int_array([1, 2, 3])
ops.float_array([0.1])               # stored at single precision, then widened
ops.double_array([0.1])
ops.string_array(["a", "b"])
```

Nodes of type `NodeType.INVALID` are never equal to anything.

## Logging

```python
from ldcommon.logger import LogLevel, basic_logger, configure_global_logger, log

configure_global_logger(LogLevel.INFO, basic_logger)
log(LogLevel.WARNING, "retrying in %d ms", 500)  # [LD_LOG_WARNING] retrying in 500 ms
log(LogLevel.DEBUG, "not shown")                 # less severe than INFO: dropped
```

Messages are formatted printf-style and cut to 4095 characters. Passing
None as the logger silences logging. `log_level_to_string` gives names such
as `"LD_LOG_ERROR"` (None for an unknown value); `thread_safe_basic_logger`
keeps lines from interleaving when several threads log at once.

## Server-sent events

```python
from ldcommon.sse import DispatchAborted, SSEParser

def on_event(name, body):
    print(name, body)
    return True  # returning False raises DispatchAborted from feed()

with SSEParser(on_event) as parser:
    parser.feed(b"event: put\ndata: {}\n")
    parser.feed("data: more\n\n")    # str is accepted too
# prints: put {}\nmore
```

Input may arrive in any chunks; each complete line is handled as soon as it
is seen. Comment lines (starting with `:`) are skipped, several `data:`
lines are joined with newlines, and a blank line dispatches the event. An
event with no name or no data is dropped with a warning through the
logger. `close()` discards buffered input and any partly read event.

## What this package does not do

There is no reading of JSON text into a tree and no writing of a tree out
as JSON text: trees are built and inspected in code only. Nothing here
opens network connections; the SSE parser works on bytes you give it.

## Tests

```
pip install ".[test]"
pytest
```