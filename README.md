# calmcore

The logic of a small, keyboard-driven window manager, kept apart from any
display server. Everything here works on plain Python values, so it can be
driven by an X11 binding, a test harness or another front end.

## What is inside

- `calmcore.strtonum`: `strtonum(numstr, minval, maxval)` parses a decimal
  integer (leading whitespace and a sign allowed) within bounds and raises
  `StrtonumError`, a `ValueError` whose `reason` is `"invalid"`,
  `"too small"` or `"too large"`, otherwise.
- `calmcore.util`: `split_command` breaks a command line into arguments on
  blanks, keeping a single- or double-quoted word together; `exec_command`
  replaces the current process with the command in a new session, and
  `spawn` does so in a forked child and returns its pid; `join_argv` joins
  arguments with single spaces; `log_debug` writes `debugN: func: message`
  lines to stderr when the debug level is high enough.
- `calmcore.geometry`: `Geom`, `Gap`, `Region`, `Window` and `Screen`.
  `Screen.update_geometry` rebuilds the regions (one per output, or one for
  the whole display), `find_region` finds the region under a point, `area`
  gives that region's area with or without the gap applied, and
  `assert_clients_within` moves windows lying wholly off screen back to the
  top left and returns them.
- `calmcore.items`: `MenuItem` and `menu_add`, the entries a menu shows.
- `calmcore.search`: matchers and printers for the menus: windows
  (`match_client`, ranked by label, name history and resource class, with
  the active window ranked down and hidden ones up), commands, groups,
  executables (`match_exec`, falling back to executable paths), paths,
  plain text and window managers, plus `match_substr` for case-insensitive
  matching.
- `calmcore.ewmh`: `ClientState` flags and `StateAction`; `state_message`
  applies a `_NET_WM_STATE` request, `restore_state` replays a stored state,
  `state_atoms` rebuilds the atom list, and `parse_desktop_names`,
  `encode_desktop_names`, `workarea`, `stacking_list` and `xor_color`
  produce the matching property values.
- `calmcore.menu`: `MenuState`, the interactive filter menu: key controls
  (`Ctl`, `control_for_key`), tab completion of the common prefix, listing
  all entries, sizing the menu (`prepare_draw`), mapping pointer positions
  to entries (`calc_entry`, `release`), and `place_menu` to fit a menu
  inside an area.

## Examples

```python
from calmcore.strtonum import strtonum, StrtonumError
from calmcore.util import split_command
from calmcore.search import match_substr

strtonum("42", 0, 100)            # 42
try:
    strtonum("420", 0, 100)
except StrtonumError as exc:
    print(exc)                    # too large

split_command("xterm -e 'top -d 1'")
# ['xterm', '-e', 'top -d 1']

match_substr("term", "XTerm", False)   # True: case-insensitive substring
match_substr("term", "XTerm", True)    # False: must match at the start
```

```python
from calmcore.geometry import Geom, Gap

gap = Gap(top=20, bottom=0, left=0, right=0)
gap.apply(Geom(0, 0, 1920, 1080))      # Geom(x=0, y=20, w=1920, h=1060)
```

## What it does not do

This package does not talk to a display server. It opens no X connection,
grabs no keys or pointer, draws nothing on screen and runs no event loop;
it reads no configuration file and has no command to start a window
manager. Those parts belong to a front end that feeds it key names, pointer
positions, output geometry and property values and applies what it returns.

## Tests

The test suite uses pytest and lives in `tests/`:

```
pip install .[test]
pytest
```