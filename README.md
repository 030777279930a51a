# jsonc

A small library for building, inspecting, comparing, copying and
serializing JSON values in memory.

Each JSON value is an object with a type: `JsonBoolean`, `JsonInt`,
`JsonDouble`, `JsonString` (in `jsonc.value`) and `JsonArray`,
`JsonObject` (in `jsonc.containers`). JSON `null` is represented by
`None`. Values count their references (`retain()` / `release()`), can
carry user data with a release callback, and can each have their own
serializer.

## Installation

```
pip install .
```

## Building and serializing values

```python
from jsonc.value import JsonInt, JsonString, JsonDouble
from jsonc.containers import JsonArray, JsonObject
from jsonc.serialize import ToStringFlags

obj = JsonObject()
obj.add("name", JsonString("widget"))
obj.add("count", JsonInt(3))

items = JsonArray()
items.append(JsonDouble(1.5))
items.append(None)
obj.add("items", items)

print(obj.to_json_string(ToStringFlags.PLAIN))
# {"name":"widget","count":3,"items":[1.5,null]}

print(obj.to_json_string(ToStringFlags.PRETTY))
```

Containers take over the reference passed to `add`, `append` and `put`,
and release children when they are replaced, deleted or when the
container itself is freed. Adding an object to itself raises
`ValueError`.

The module-level function `jsonc.value.to_json_string(jso, flags)` also
accepts `None` and returns `"null"` for it.

These `ToStringFlags` control the output:

- `PLAIN`: no extra whitespace.
- `SPACED`: a little whitespace; the default for `to_json_string`.
- `PRETTY`: one field per line, indented with two spaces.
- `PRETTY_TAB`: indent with tabs instead; use together with `PRETTY`.
- `NOZERO`: drop trailing zeros from doubles.
- `NOSLASHESCAPE`: write `/` without escaping it.

## Reading values with coercion

`jsonc.value` has accessors that convert between types:

- `get_boolean`: numbers are true when non-zero, strings when non-empty;
  containers and `None` are false.
- `get_int`: clamps to the signed 32-bit range.
- `get_int64`, `get_uint64`: clamp to the 64-bit ranges; strings are read
  as leading integers.
- `get_double`: strings must hold a whole number literal, otherwise 0.0.
- `get_string`: a string's contents, the JSON text of other values, or
  `None` for null.
- `get_string_len`

For example, `get_int(JsonString("42"))` returns `42`. `get_type` and
`is_type` report a value's `JsonType`.

`JsonInt.increment(delta)` adds with saturation at the 64-bit limits,
switching between signed and unsigned storage as needed.

## Doubles

Keep the exact source text of a double with `JsonDouble(12.3, "12.30")`;
calling `set()` on it drops that text. Change the printf-style format of
every double with
`jsonc.serialize.set_double_format("%.3g", OptionScope.GLOBAL)`, or only
for the calling thread with `OptionScope.THREAD`; pass `None` to restore
the default `%.17g`. NaN and infinities are written as `NaN`, `Infinity`
and `-Infinity`. A per-value format can be set with
`value.set_serializer(double_serializer, "%.2f")`.

## Comparing and copying

```python
from jsonc.copy import equal, deep_copy

clone = deep_copy(obj)
assert equal(obj, clone)
```

`deep_copy` accepts an optional `shallow_copy(src, parent, key, index)`
function for values with custom serializers; the default is
`shallow_copy_default`.

## Iterating over objects

Iterate with `obj.items()` and `obj.keys()`, or use the cursor-style
iterators in `jsonc.iterator`: `iter_begin`, `iter_end`,
`iter_init_default`, and `ObjectIterator.advance`, `peek_name`,
`peek_value`. Two iterators compare equal when they refer to the same
field or are both at the end.

## Other modules

- `jsonc.arraylist.ArrayList`: the growable slot list behind `JsonArray`,
  with a release callback for elements.
- `jsonc.debug`: `set_debug`, `set_syslog`, `debug`, `error` and `info`
  for printf-style diagnostic messages.
- `jsonc.version`: `version()` returns `"0.16.99"`, `version_num()` the
  same version packed into an integer.

## What this package does not do

It does not parse JSON text: values are built through the classes above,
and there is no tokenizer, no reading from files, and no command-line
tool.