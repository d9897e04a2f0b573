# calforge

Serialize and parse iCalendar (RFC 5545) content.

calforge has two halves:

- `calforge.properties` and `calforge.value_types` describe content lines:
  properties with their parameters, the value type registry, text escaping
  and the 75-octet line folding the RFC asks for.
- `calforge.parser` reads iCalendar text into a tree of components,
  properties and parameters, and writes that tree back out again.

## Installation

```
pip install calforge
```

The package has no runtime dependencies. Python 3.10 or later is required.

## Writing content lines

```python
from calforge.properties import Property, EventStatus, fold_line

prop = Property("DESCRIPTION", "Bring snacks; drinks, too")
prop.add_parameter("LANGUAGE", "en")
print(repr(prop.serialize()))
# 'DESCRIPTION;LANGUAGE=en:Bring snacks\\; drinks\\, too\r\n'

status = EventStatus.CONFIRMED.to_property()
print(repr(status.serialize()))
# 'STATUS:CONFIRMED\r\n'
```

`Property` holds a `key`, a `value` and a `params` dictionary of `Parameter`
objects keyed by parameter name; `append_parameter` and `add_parameter`
replace any parameter with the same key and return the property, so calls
can be chained. `Property.from_array` builds a list of properties from
`Property` objects, `(key, value)` pairs, `datetime.timedelta` values (as
`DURATION`) and the `Class`, `EventStatus` and `TodoStatus` enums.

Values of properties whose value type is TEXT, either by a `VALUE=TEXT`
parameter or by the default type for their name (see
`calforge.value_types.value_type_by_name`), are escaped on output with
`escape_text`. Parameter values holding a `:` or `;` are quoted. Every line
longer than 75 octets is folded with `fold_line`, which never splits a
multi-byte character.

## Parsing

```python
from calforge.parser.lexing import unfold
from calforge.parser.calendar import read_calendar

with open("meeting.ics", encoding="utf-8") as handle:
    calendar = read_calendar(unfold(handle.read()))

for component in calendar.components:
    summary = component.find_prop("SUMMARY")
    if summary is not None:
        print(component.name, summary.value)

print(calendar.serialize())
```

Always `unfold` a document before parsing it: a line break followed by a
single space or tab is removed, so the parser sees one content line per
property. If the first top-level component is a `VCALENDAR`, its properties
and children become the calendar's own; otherwise every top-level component
is kept. `read_components` and `read_calendar_simple` return the top-level
components as a list instead.

Values of TEXT properties are unescaped while parsing, and written back as
stored by `serialize`, so a parsed document round-trips unchanged.

Malformed input, such as an `END:` line that does not match its `BEGIN:`,
raises `calforge.parser.lexing.ParseError`, a `ValueError` whose `position`
attribute is the offset into the unfolded text.

Smaller pieces can be parsed on their own:

```python
from calforge.parser.content_lines import parse_property, property_from_str
from calforge.parser.parameters import parse_parameters

prop = parse_property("DESCRIPTION;foo=bar:Line one\\nLine two\n")
print(prop.value)        # "Line one\nLine two"

params = parse_parameters(";KEY=VALUE;DATE=20170218")
print([p.key for p in params])   # ['KEY', 'DATE']

builder_prop = property_from_str("SUMMARY:Lunch\n")   # a calforge.properties.Property
```

## What calforge does not do

There are no event, to-do, alarm or venue builder classes and no typed
calendar model: parsed documents stay a generic tree of `Component`,
`Property` and `Parameter` objects. Dates, times and recurrence rules are
kept as plain strings and are neither interpreted nor expanded. There is no
command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```