# kimchi

Building blocks for a small terminal text editor: text buffers backed by
files, a bounded in-memory log, terminal drawing with raw-mode handling, and
decoding of control-key descriptions. It has no dependencies outside the
standard library.

## Installing

```
pip install .
```

## Modules

### `kimchi.fs`

- `PathKind`: an enum with `NONE`, `FILE` and `DIR`.
- `file_exists(path)`, `is_dir(path)`, `is_file(path)`.
- `classify_path(path)` returns `(kind, absolute_path)`. A path that does not
  exist gives `PathKind.NONE`; a path that exists but is neither a directory
  nor a regular file raises `ValueError`.

### `kimchi.buffer`

- `Buffer`: a dataclass with `name`, `path`, `modified`, `cursor_x`,
  `cursor_y`, `content` (a list of lines, one empty line by default) and
  `cursors`.
  - `text()` joins the lines with `\n`.
  - `save()` writes `text()` as UTF-8 to `path` and clears `modified`;
    it raises `ValueError` when the buffer has no path.
- `load_buffer(path)` reads a file (UTF-8, undecodable bytes replaced),
  turns `\r\n` into `\n` and splits it into lines. The buffer's name is the
  file's base name.
- `new_empty_buffer(name)` makes an in-memory buffer with one empty line.
- `Cursor` (`x`, `y`) and `Cursors` (`list`) hold cursor positions.

### `kimchi.logger`

- `format_message(prefix, *args)` builds `"[prefix] message"`.
- `Logger(max_lines=256, out=None)` keeps the most recent `max_lines` lines in
  a `Buffer` named `[Log]`.
  - `log(*args)` and `error(*args)` record `[log] ...` and `[error] ...` lines.
  - `logf(fmt, *args)` and `errorf(fmt, *args)` use `%`-formatting; `logf`
    also prints the message to the logger's output stream (standard output by
    default).
  - `append_line(line)`, `lines()`, `tail(count)`.
  - `dump(out=None)` prints a `--- LOG DUMP ---` header and every line.

### `kimchi.terminal`

- `clear_line(out=None)` and `move_cursor(x, y, out=None)` write ANSI escape
  sequences; coordinates are zero-based.
- `Screen(out=None, fd=None)`:
  - `enter_raw_mode()` puts the input terminal into raw mode (POSIX only;
    elsewhere it raises `OSError`); `exit_raw_mode()` restores the saved
    settings and shows the cursor again.
  - `clear()` refreshes `width` and `height`, clears the screen and hides the
    cursor.
  - `render_log(logger)` draws the last five log lines; `render(logger)`
    clears the screen first.
  - Used as a context manager, it enters raw mode and clears the screen on
    entry and leaves raw mode on exit.

### `kimchi.input`

- `Mods`: a dataclass with `ctrl`, `alt`, `shift` and `key`.
- `ctrl_mod(char)` gives the control code for Ctrl plus `char`
  (`ctrl_mod("a") == 1`).
- `parse_input(s)` decodes `"ctrl+<letter>"` to its control byte
  (`parse_input("ctrl+c") == 3`) and returns `0` for anything else.

## Example

```python
import io

from kimchi.buffer import load_buffer
from kimchi.logger import Logger
from kimchi.terminal import Screen

buf = load_buffer("notes.txt")
log = Logger()
log.log("opened", buf.name)

out = io.StringIO()
Screen(out=out).render(log)
print(log.tail(5))
```

## What it does not do

The package provides no command to start, no editor loop that reads keys and
edits buffers, and no loading of a configuration file or default settings.
Those pieces are left to the program that uses these modules.

## Running the tests

```
pip install .[test]
pytest
```