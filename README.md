# gsheet_source

A small data source that pulls records from a spreadsheet by running an
external script, then hands the records out one at a time.

The script is run through the shell as `<interpreter> <script_path>`
(the interpreter is `python3` unless you choose another). It should print
JSON on its standard output, normally an array of objects. The source
queues the elements of that document: the items of an array, the values
of an object in key order, or a single scalar value. Each call to
`get_output()` returns the next record. When the queue is empty, the
source runs the script again. After the last record of a batch is handed
out, the source sleeps for the poll interval before it returns.

Script output longer than 10 MiB is truncated. If the script prints
nothing or cannot be started, the batch is empty.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from gsheet_source.source import GSheetSource
from gsheet_source.common import SourceError

source = GSheetSource()
source.set_params({
    "script_path": "fetch_gsheet.py",   # default: fetch_gsheet.py
    "agent_id": "sheet-reader",         # optional, added to every record
    "poll_interval_minutes": 5,         # default: 5; values <= 0 are ignored
})

try:
    record = source.get_output()
    print(record)
except SourceError as exc:
    print("no data:", exc)
```

`next_line()` returns the next record as compact JSON with sorted keys,
or `None` when no record could be produced.

The constructor takes two keyword-only arguments:

- `interpreter` – the program that runs the script (default `"python3"`).
- `sleep` – the function used to wait (default `time.sleep`); it is
  called with a number of seconds, which makes the waits easy to replace
  in tests.

### Parameters

| key                     | meaning                                              |
|-------------------------|------------------------------------------------------|
| `script_path`           | script to run                                        |
| `agent_id`              | if non-empty, written into each record as `agent_id` |
| `poll_interval_minutes` | minutes to wait after the last record of a batch     |

`set_params(None)` changes nothing. A parameter of the wrong type
(`agent_id` or `script_path` not a string, `poll_interval_minutes` not an
integer) is logged as an error and the settings after it are not applied.

### Identity and description

- `GSheetSource.version` is the plugin protocol version,
  `gsheet_source.common.PLUGIN_PROTOCOL_VERSION` (4).
- `GSheetSource.server_name()` gives `"SourceServer"`.
- `GSheetSource.kind_static()` and `source.kind()` give `"source_gsheet"`.
- `source.info()` gives a dict with `name`, `description` and
  `blob_format` (`"none"`).
- `source.blob_format()` gives an empty string; this source carries no
  binary payload.

### Errors

`get_output()` raises `SourceError` when the script output is not valid
JSON, when it yields no records (after a pause of 0.1 s), or when
`agent_id` is set and the record is neither an object nor `null`.

`SourceError` carries a `code` from the `ReturnType` enum in
`gsheet_source.common` (`SUCCESS`, `RETRY`, `WARNING`, `ERROR`,
`CRITICAL`); the errors above use `ERROR`. Its string form is
`"[error] <message>"`.

Progress and problems are reported through the `logging` module under
the logger `gsheet_source.source`.

## What this package does not do

It has no command-line program and does not publish records anywhere:
it is a library class that you call from your own code. It does not talk
to a spreadsheet service itself; the fetching script is yours to supply.