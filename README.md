# zwmconf

Building blocks for a minimal stacking/tiling window manager. The package
covers window geometry, parsing of key and mouse bindings, splitting of
configuration lines, starting external commands, and the sockets used to
receive commands and send status messages.

## Installing

```
pip install .
```

## Modules

### `zwmconf.geometry`

- `Position(x, y)` is a point. `move_inside(geom)` clamps it to a rectangle
  of that size, and `move(direction, amount)` shifts it.
- `Geometry(x, y, w, h)` is a rectangle. It has these methods:
  - `center` and `contains` take a `Coordinates.ROOT` or
    `Coordinates.WINDOW` frame.
  - `intersects` checks for overlap with another rectangle.
  - Placement: `set_pos`, `set_placement` (for new windows),
    `set_menu_placement`, `set_submenu_placement`, `set_user_placement` and
    `adjust_for_maximized`.
  - Moving and sizing: `move`, `resize`, `warp_to_edge`, `snap_to_edge`,
    `apply_border_gap` and `apply_size_hints`.
- `Direction` is a flag enum: `NORTH`, `EAST`, `SOUTH` and `WEST`.
- `SizeHints.from_hints(flags, base, minimum, maximum, increment,
  min_aspect, max_aspect)` normalises raw WM_NORMAL_HINTS values.
- `BorderGap(top, bottom, left, right)` holds the gaps kept free at the
  screen edges.
- `Viewport(num, view, gap)` describes one monitor. It computes its `work`
  area from `view` minus the gap, and `contains(p)` tests a point against
  `view`.

```python
from zwmconf.geometry import Coordinates, Geometry, Position

area = Geometry(0, 0, 1920, 1080)
window = Geometry(100, 100, 640, 480)
window.set_placement(Position(960, 540), area, 2)
print(window.x, window.y)                                  # 650 310
print(window.contains(Position(10, 10), Coordinates.WINDOW))  # True
```

### `zwmconf.binding`

- Combos are written as modifier letters, then `-`, then a key name or a
  mouse button number. The modifier letters are `S` (Shift), `C` (Control),
  `M` (Mod1), `4` (Mod4) and `5` (Mod5).
- `parse_combo(combo)` returns `(Modifier, symbol)`. It raises
  `BindingError` if a letter before the `-` is not a modifier.
- `Binding.from_def(BindingDef(keycombo, function, path), event_type)`
  validates a definition for `EventType.KEY` or `EventType.BUTTON`. It raises
  `BindingError` in three cases:
  - a key symbol is empty or contains whitespace;
  - a button is not in the range 1 to 5;
  - the function is missing.
- `Binding.same_combo(other)` tells whether two bindings are triggered by
  the same input.

```python
from zwmconf.binding import Binding, BindingDef, EventType

kb = Binding.from_def(BindingDef("CM-Return", "terminal"), EventType.KEY)
print(kb.modmask, kb.keysym)
```

### `zwmconf.parsing`

- `read_logical_lines(lines)` joins lines that end in a backslash with the
  line that follows.
- `tokenize(line)` splits a line into words, with double quotes grouping
  words. A line that is empty or starts with `#` gives no words, and a lone
  `#` word ends the line.
- `split_string(s, separator)` splits a string on the separator.
- `parse_grid_mode("2x3")` returns `(2, 3)`, and `(0, 0)` when the value is
  not a grid.
- `get_name_class("name:class")` splits a resource name and class.

### `zwmconf.process`

- `split_command(command)` splits a command line into words. Double quotes
  group words, and a backslash escapes a character inside quotes.
- `spawn(command)` starts the command in a new session without waiting for
  it and returns the `Popen` object.
- `run(command)` waits for the command and returns its exit status.
- Both raise `ValueError` for an empty command and `OSError` when the
  command cannot be started.

### `zwmconf.messaging`

- `parse_address(name)` returns `(host, port)` for a `host:port` name, and
  otherwise the name itself as a Unix socket path.
- `CommandListener(name)` binds and listens on such an address:
  - for a Unix socket it creates the parent directory, replaces any old
    socket file and restricts the file to its owner;
  - `receive()` accepts one connection and returns its message with line
    breaks removed;
  - it can be used as a context manager.
- `parse_command_message("0;desktop-switch-2")` returns
  `(0, "desktop-switch-2")`, and `None` for a malformed message.
- `MessageSender(name).send(message)` connects, sends the message followed
  by a newline and returns the number of bytes sent.

### `zwmconf.timer`

- `gettime()` returns the local time as `HH:MM:SS` for use in log lines.

## What this package does not do

- It has no reader that turns a whole configuration file into settings.
- It has no command-line program.
- It has no desktop tiling layouts.
- It does not connect to an X server or manage windows.

It provides the pieces listed above, for use by code that does those
things.