# transitmap

A small library for loading street maps and bus systems from text data,
together with the readers, writers and string helpers it is built on.
It needs nothing beyond the Python standard library (Python 3.10 or later).

## Modules

- `transitmap.stringutils`: string helpers `slice_string`, `capitalize`,
  `upper`, `lower`, `lstrip`, `rstrip`, `strip`, `center`, `ljust`, `rjust`,
  `replace`, `split`, `join`, `expand_tabs` and `edit_distance`.
  - `slice_string(text, start, end=0)` treats an `end` of 0 as the end of the
    string; negative positions count from the end.
  - `split(text)` with no separator splits on runs of whitespace.
  - `expand_tabs(text, tabsize=4)` removes tabs when `tabsize` is 0 or less.
  - `edit_distance(left, right, ignorecase=False)` is the Levenshtein distance.
  - `center`, `ljust` and `rjust` raise `ValueError` unless `fill` is one
    character.
- `transitmap.datasource`: the `DataSource` interface (`end`, `get`, `peek`,
  `read`) and `StringDataSource`, which reads from an in-memory string.
  `get` and `peek` return `None` at the end; `read` returns an empty string.
- `transitmap.datasink`: the `DataSink` interface (`put`, `write`) and
  `StringDataSink`, whose `string()` returns everything written so far.
- `transitmap.dsv`: `DSVReader` and `DSVWriter` for delimiter-separated values.
  The reader handles quoted fields, doubled quotes and `\n` or `\r\n` line
  endings; `read_row()` returns `None` when the input is exhausted, and the
  reader can be iterated over. The writer quotes a field when it holds the
  delimiter, a quote or a newline, or always when `quoteall=True`.
- `transitmap.xmlentity`: `XMLEntity` (type, `name_data`, `attributes`) and
  `EntityType` (`START_ELEMENT`, `END_ELEMENT`, `CHAR_DATA`,
  `COMPLETE_ELEMENT`), with `attribute_exists`, `attribute_value` and
  `set_attribute`.
- `transitmap.xmlreader`: `XMLReader` turns a data source into entities.
  Text between tags becomes one `CHAR_DATA` entity; `read_entity(skipcdata=True)`
  passes over it. Malformed input raises `XMLParseError`, a `ValueError`.
- `transitmap.xmlwriter`: `XMLWriter` writes entities to a data sink,
  escaping text and attribute values; `flush()` closes any elements still open.
- `transitmap.streetmap`: `Node`, `Way` and the `StreetMap` interface.
  Index lookups raise `IndexError`, `get_attribute` raises `KeyError`, and
  `node_by_id` / `way_by_id` return `None` when there is no match.
- `transitmap.openstreetmap`: `OpenStreetMap` builds a street map from
  `node`, `way`, `nd` and `tag` elements in any iterable of entities, such as
  an `XMLReader`.
- `transitmap.bussystem`: `Stop`, `Route` and the `BusSystem` interface.
- `transitmap.csvbussystem`: `CSVBusSystem` builds a bus system from rows of
  `stop_id, node_id` and rows of `route name, stop_id`. Rows that are too
  short are ignored, rows whose ids cannot be parsed are logged and skipped,
  and routes keep the order in which their names first appear. `str()` gives a
  plain-text summary of stops and routes.

## Installation

```
pip install .
```

## Examples

Loading a bus system:

```python
from transitmap.datasource import StringDataSource
from transitmap.dsv import DSVReader
from transitmap.csvbussystem import CSVBusSystem

stops = DSVReader(StringDataSource("1,1001\n2,1002\n"), ",")
routes = DSVReader(StringDataSource("A,1\nA,2\n"), ",")
system = CSVBusSystem(stops, routes)

print(system.stop_count())                     # 2
print(system.route_by_name("A").stop_count())  # 2
print(system)
```

Loading a street map:

```python
from transitmap.datasource import StringDataSource
from transitmap.xmlreader import XMLReader
from transitmap.openstreetmap import OpenStreetMap

xml = '<osm><node id="1" lat="38.5" lon="-121.7"><tag k="name" v="A"/></node></osm>'
street_map = OpenStreetMap(XMLReader(StringDataSource(xml)))

node = street_map.node_by_id(1)
print(node.location)               # (38.5, -121.7)
print(node.get_attribute("name"))  # A
```

Writing DSV and XML:

```python
from transitmap.datasink import StringDataSink
from transitmap.dsv import DSVWriter
from transitmap.xmlentity import EntityType, XMLEntity
from transitmap.xmlwriter import XMLWriter

sink = StringDataSink()
DSVWriter(sink, ",").write_row(["Cat, Woman", "30", "New York"])
print(sink.string())  # "Cat, Woman",30,New York

sink = StringDataSink()
writer = XMLWriter(sink)
writer.write_entity(XMLEntity(EntityType.START_ELEMENT, "test"))
writer.write_entity(XMLEntity(EntityType.CHAR_DATA, "<Hi & World>"))
writer.flush()
print(sink.string())  # <test>&lt;Hi &amp; World&gt;</test>
```

## What it does not do

- There is no command-line tool; the package is a library only.
- The only data source and sink provided work on in-memory strings; reading
  from or writing to files is left to the caller.
- Street maps and bus systems can be loaded and queried, but there is no
  route planning or shortest-path search over them.

## Running the tests

```
pip install .[test]
pytest
```