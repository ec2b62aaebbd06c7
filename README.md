# relinput

`relinput` carries mouse and keyboard events as plain text lines and replays
them on a Linux X display with `xdotool`.

## The line format

Every event is one line of four integers separated by single spaces:

```
<event type> <input> <value1> <value2>
```

| event type | meaning      | input                      | value1        | value2 |
|------------|--------------|----------------------------|---------------|--------|
| 0          | mouse button | 1 left, 2 right, 4 middle  | 0 down, 1 up  | 0      |
| 1          | mouse move   | 0 relative, 1 absolute     | x             | y      |
| 2          | wheel        | not used by the server     | 0 down, 1 up  | 0      |
| 3          | key          | Windows virtual-key code   | 0 down, 1 up  | 0      |

The event type and input are unsigned 32-bit integers; the two values are
signed 32-bit integers. Fields after the fourth are ignored.

## Installing

```
pip install .
```

The server needs `bash`, `ps` and `xdotool` on the machine that owns the X
display.

## Running the server

```
relinput-server
```

The server looks through the process list for a running Xorg server
(`/usr/lib/xorg/Xorg`) or, failing that, an Xvnc server (`/usr/bin/Xvnc`) and
takes the display from its command line; if neither is found it stops with a
`LookupError`. It then reads event lines from standard input until end of
input and replays each one on that display:

- mouse moves and button presses run `xdotool mousemove_relative`,
  `mousemove`, `mousedown` and `mouseup` in the background;
- wheel events click button 5 (down) or 4 (up);
- key events look the virtual-key code up in the Windows key table and press
  or release the key under its xdotool name. Codes that are not in the table,
  or that have no xdotool name, are ignored.

Lines that do not parse, and events that mean nothing to the server, are
skipped without comment. A failing `xdotool` call is reported on standard
error and the server carries on.

## Using the library

Writing events (`relinput.protocol.Sender` writes to any text stream):

```python
import sys
from relinput.events import EventType
from relinput.protocol import InputType, Sender

sender = Sender(sys.stdout)
sender.send_relative_cursor(5, -3)                          # "1 0 5 -3"
sender.send_absolute_cursor(100, 200)                       # "1 1 100 200"
sender.send_input(EventType.KEY, 0x41, InputType.KEY_DOWN)  # "3 65 0 0"
```

Reading them back:

```python
from relinput.protocol import parse_event

event = parse_event("1 0 5 -3")
event.event_type, event.input, event.value1, event.value2  # (1, 0, 5, -3)
event.to_line()                                            # "1 0 5 -3\n"
```

`parse_event` raises `ValueError` for a line with fewer than four fields or a
field that is not an integer of its width.

Replaying events yourself:

```python
from relinput.display import get_display
from relinput.server import serve
from relinput.xdotool import Xdotool

serve(["1 0 10 0", "3 65 0 0", "3 65 1 0"], Xdotool(get_display()))
```

`relinput.server.dispatch(xdot, event)` replays a single parsed event.
`Xdotool` also offers `get_position()` and `get_window_geometry()`, and
`relinput.display.get_display_size(display)` reads the current screen size
from `xrandr`; each returns zeros where the value cannot be read.

Looking up keys:

```python
from relinput.windows_keys import get_windows_key_detail
from relinput.linux_keys import get_linux_key_detail_from_event_input

get_windows_key_detail(0x77).event_input          # "F8"
get_linux_key_detail_from_event_input("a").value  # 0
```

The full tables are `relinput.windows_keys.WINDOWS_KEYS` and
`relinput.linux_keys.LINUX_KEYS`. Where several keys share an xdotool name,
lookups by name return the one with the lowest code. Lookups of unknown keys
raise `relinput.events.KeyNotFoundError`.

## Debug output

`relinput.debug.debugf` and `relinput.debug.debugln` append messages to the
file named by `RELATIVE_INPUT_DEBUG_PATH` when `RELATIVE_INPUT_DEBUG` is set
to `ON`, and do nothing otherwise.

## What it does not do

The package has no client: nothing here captures mouse or keyboard input from
a desktop and turns it into event lines. `Sender` only writes the lines you
give it. Nor does the package carry lines over a network; the server reads
standard input, so pipe it the lines yourself, for example over ssh.

## Running the tests

```
pip install .[test]
pytest
```