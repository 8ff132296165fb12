# crawlkit

Building blocks for a concurrent web crawler, plus two small command-line
tools: one prints a directory tree, the other prints the dependencies of a
Go package.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `crawlkit.buffer`: `Buffer` is a bounded FIFO whose `put` and `get` never
  block. `put` returns `False` when the buffer is full, and `get` returns
  `None` when it is empty. `Pool` is a pool of buffers whose `put` and `get`
  block. It starts with one buffer, adds buffers up to `max_buffer_number()`
  while puts keep failing, and retires empty buffers while gets keep failing.
  A closed buffer raises `BufferClosedError`, and a closed pool raises
  `PoolClosedError`. Zero sizes raise `ValueError`.
- `crawlkit.reader`: `MultipleReader` reads a stream once. Each call to
  `reader()` then returns a new `io.BytesIO` over the same bytes.
- `crawlkit.errors`: `CrawlerError`, with its `ErrorType` (downloader,
  analyzer, pipeline or scheduler), and `IllegalParameterError`. The helpers
  `gen_error`, `gen_error_by_error` and `gen_parameter_error` build
  scheduler errors. For example, `gen_error("x")` reads
  `crawler error: scheduler error: x`.
- `crawlkit.domain`: `get_primary_domain` turns a host name such as
  `cn.bing.com` into its primary domain, `bing.com`. IP addresses are
  returned unchanged. An empty or unrecognized host raises `CrawlerError`.
- `crawlkit.args`: the dataclasses `RequestArgs`, `DataArgs` and
  `ModuleArgs`. Each has a `check()` that raises `CrawlerError` on invalid
  settings. `RequestArgs.same()` compares two request argument sets.
  `ModuleArgs.summary()` returns a `ModuleArgsSummary` with the sizes of the
  module lists.
- `crawlkit.logbase`: `LogLevel`, `LogFormat`, `LoggerType`, the
  `OptWithLocation` option and `get_invoker_location`.
- `crawlkit.logfield`: `Field` and `FieldType`, with the constructors
  `bool_field`, `int64_field`, `float64_field`, `string_field` and
  `object_field`.
- `crawlkit.stdlogger`: `StdLogger`, a leveled logger that writes text or
  JSON records, one per line. Create one with `new_logger`. `fatal()`
  exits with code 1, and `panic()` raises `LoggerPanic`.
- `crawlkit.logger`: `default_logger()` returns an info-level text logger on
  standard output. `logger(...)` builds one from a type, level, format,
  writer and options. `register_logger` adds creators for other logger
  types.
- `crawlkit.pkgtool`: finds the GOROOT and GOPATH source directories
  (`get_goroot`, `get_all_gopath`, `get_src_dirs`) and reads import lists
  from Go sources (`get_imports_from_go_source`, `get_imports_from_package`).
  `PkgNode.grow()` builds the dependency tree of a package.

## Examples

A buffer pool:

```python
from crawlkit.buffer import Pool

pool = Pool(10, 2)          # buffers of 10 items, at most 2 buffers
pool.put("request-1")
print(pool.total())         # 1
print(pool.get())           # "request-1"
pool.close()
```

Primary domains and argument checks:

```python
from crawlkit.args import RequestArgs
from crawlkit.domain import get_primary_domain

print(get_primary_domain("cn.bing.com"))           # bing.com
RequestArgs(accepted_domains=["bing.com"], max_depth=1).check()
```

Logging with extra fields:

```python
from crawlkit.logger import default_logger
from crawlkit.logfield import string_field

log = default_logger().with_fields(string_field("component", "downloader"))
log.info("Download finished.")
```

## Command-line tools

Print the tree of a directory. Directories are marked with `/`, and hidden
entries are left out. Without `-p`, the current directory is used:

```
crawlkit-showds -p path/to/dir
```

Print every import chain of a Go package, given by its import path. Without
`-p`, the import path is worked out from the current directory and the
GOROOT and GOPATH source directories:

```
crawlkit-showpds -p some/import/path
```

## What it does not do

crawlkit provides parts for a crawler but not a crawler that runs. It has
no scheduler that moves requests, responses and items between the buffer
pools. It does not track scheduler status or transitions between states.
It has no downloaders, analyzers or pipelines. `ModuleArgs` only holds and
counts the objects you pass to it.