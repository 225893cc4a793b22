# dbccoder

`dbccoder` reads CAN matrix descriptions in the DBC format into Python
objects and writes the C frame-monitor files of a driver for them.

## What it does

- **Line parsing**: `dbccoder.lineparser.DbcLineParser` handles the single
  DBC line kinds: messages (`BO_`), signals (`SG_`), comments (`CM_`),
  cycle-time attributes (`BA_ "GenMsgCycleTime" BO_ ...`), value tables
  (`VAL_`) and multi-transmitter lines (`BO_TX_BU_`). Comment, attribute and
  value-table records may span several lines. A parse method returns the
  parsed object, or `None` when the line is not valid or the record is not
  complete yet.
- **Scanning**: `dbccoder.scanner.DbcScanner.trim_dbc_text` takes a whole DBC
  text (a string or a text stream) and returns a `DbcMessageList`. It holds
  the messages, each with its signals sorted by start bit and with the
  receivers of its signals collected. Comments, value tables, cycle times,
  `<RollingCounter>` and `<Checksum:METHOD:N>` markers and the
  `VERSION "x.y"` of the file are attached too.
- **Model**: `dbccoder.model` defines the descriptors: `MessageDescriptor`,
  `SignalDescriptor`, `Comment`, `ValTable`, `AttributeDescriptor` and
  `DbcMessageList`. It also defines the enums `BitLayout`, `MultiplexType`,
  `SigType`, `CommentTarget` and `AttributeType`.
- **Output layout**: `dbccoder.fscreator.FsCreator.configure` works out the
  driver's file names, the output directories (`lib`, `usr`, `inc`, `conf`,
  `butl`) and the preprocessor define names taken from the driver name. It
  stores them in `FsCreator.settings`, an `AppSettings` object.
  `prepare_directory` creates the directory tree. With `rw=True` it uses the
  output directory itself; otherwise it uses the next free numbered
  subdirectory (`000`, `001`, …).
- **Monitor generation**: `dbccoder.monitorgen.fill_mon_header` writes the
  `<driver>-fmon.h` text. `fill_mon_source` writes the `<driver>-fmon.c` text
  with weak default functions.
- **Helpers**: `dbccoder.filewriter.FileWriter` builds text line by line.
  `dbccoder.formatter` provides the string helpers: `make_c_name`,
  `prt_double`, `str_trim`, `str_toupper`, `str_tolower`, `indented_string`
  and `print_type`.
- **Options**: `dbccoder.options.parse_options` reads an argument list with
  the flags `-dbc`, `-out`, `-drvname`, `-rw`, `-nodeutils`, `-noconfig`,
  `-noinc`, `-nofmon` and `-help` into a `GenOptions` value. An option that
  was not given is `None` or `False`.

## Examples

Formatting helpers:

```python
from dbccoder.formatter import make_c_name, prt_double, str_trim

make_c_name("State one")                    # "State_one"
prt_double(-124.10001110002220, 1, False)   # "-124.1"
prt_double(123.0, 3, True)                  # "123.0"
str_trim("BO_ 100 MSG: 8 ECU  \r")          # "BO_ 100 MSG: 8 ECU"
```

Building text:

```python
from dbccoder.filewriter import FileWriter

writer = FileWriter()
writer.append("#pragma once")
writer.blank()
writer.append("#include <stdint.h>")
print(writer.getvalue())
writer.flush("example.h")   # writes the text to the file and empties the writer
```

Reading options from an argument list, where the first item is the program
name:

```python
from dbccoder.options import parse_options

opts = parse_options(["dbccoder", "-dbc", "path/to/test.dbc",
                      "-out", "path/to/out", "-drvname", "testdbc", "-rw"])
opts.dbc          # "path/to/test.dbc"
opts.is_rewrite   # True
```

Parsing a single signal line:

```python
from dbccoder.lineparser import DbcLineParser

parser = DbcLineParser()
line = ' SG_ FLT4_TEST_1 : 39|4@0+ (2.01,1E-002) [-0.01|30.14] ""  BCM'
parser.is_signal_line(line)              # True
signal = parser.parse_signal_line(line)
signal.is_double_sig, signal.offset      # (True, 0.01)
```

Scanning a DBC file and writing the frame-monitor files:

```python
from pathlib import Path

from dbccoder.filewriter import FileWriter
from dbccoder.fscreator import FsCreator
from dbccoder.monitorgen import fill_mon_header, fill_mon_source
from dbccoder.scanner import DbcScanner

dblist = DbcScanner().trim_dbc_text(Path("testdb.dbc").read_text())

creator = FsCreator()
creator.configure("testdb", "out", "", dblist.ver_hi, dblist.ver_low)
creator.prepare_directory(True)
settings = creator.settings

writer = FileWriter()
fill_mon_header(writer, dblist.msgs, settings)
writer.flush(settings.file.fmon_h.fpath)     # out/lib/testdb-fmon.h
fill_mon_source(writer, dblist.msgs, settings)
writer.flush(settings.file.fmon_c.fpath)     # out/usr/testdb-fmon.c
```

## What it does not do

- It has no command-line program. `parse_options` only turns an argument
  list into a `GenOptions` value, and nothing acts on those options.
- The only files it writes are the frame-monitor header and source. It does
  not write the driver's core `.h`/`.c` files, the `-config.h` header or the
  per-node `-binutil` files. `FsCreator` names their paths and defines, but
  the package does not fill them with text.

## Requirements

Python 3.10 or later. The package uses only the standard library. The tests
use pytest (`pip install dbccoder[test]`).