"""Window-manager hint bookkeeping: window state atoms, desktop names and lists."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence

from calmcore.geometry import Geom


class ClientState(enum.IntFlag):
    """State flags of a managed window that are mirrored in ``_NET_WM_STATE``."""

    NONE = 0
    STICKY = enum.auto()
    VMAXIMIZED = enum.auto()
    HMAXIMIZED = enum.auto()
    HIDDEN = enum.auto()
    FULLSCREEN = enum.auto()
    URGENCY = enum.auto()
    SKIP_PAGER = enum.auto()
    SKIP_TASKBAR = enum.auto()
    FREEZE = enum.auto()


class StateAction(enum.IntEnum):
    """The action carried by a ``_NET_WM_STATE`` client message."""

    REMOVE = 0
    ADD = 1
    TOGGLE = 2


STATE_STICKY = "_NET_WM_STATE_STICKY"
STATE_MAXIMIZED_VERT = "_NET_WM_STATE_MAXIMIZED_VERT"
STATE_MAXIMIZED_HORZ = "_NET_WM_STATE_MAXIMIZED_HORZ"
STATE_HIDDEN = "_NET_WM_STATE_HIDDEN"
STATE_FULLSCREEN = "_NET_WM_STATE_FULLSCREEN"
STATE_DEMANDS_ATTENTION = "_NET_WM_STATE_DEMANDS_ATTENTION"
STATE_SKIP_PAGER = "_NET_WM_STATE_SKIP_PAGER"
STATE_SKIP_TASKBAR = "_NET_WM_STATE_SKIP_TASKBAR"
STATE_FREEZE = "_CWM_WM_STATE_FREEZE"

# Atom names paired with the flag each one stands for, in handling order.
_STATE_ATOMS: tuple[tuple[str, ClientState], ...] = (
    (STATE_STICKY, ClientState.STICKY),
    (STATE_MAXIMIZED_VERT, ClientState.VMAXIMIZED),
    (STATE_MAXIMIZED_HORZ, ClientState.HMAXIMIZED),
    (STATE_HIDDEN, ClientState.HIDDEN),
    (STATE_FULLSCREEN, ClientState.FULLSCREEN),
    (STATE_DEMANDS_ATTENTION, ClientState.URGENCY),
    (STATE_SKIP_PAGER, ClientState.SKIP_PAGER),
    (STATE_SKIP_TASKBAR, ClientState.SKIP_TASKBAR),
    (STATE_FREEZE, ClientState.FREEZE),
)
_MANAGED = frozenset(atom for atom, _ in _STATE_ATOMS)


def state_message(
    flags: ClientState, action: int, first: str | None, second: str | None
) -> ClientState:
    """Apply a ``_NET_WM_STATE`` request naming up to two state atoms.

    ADD switches a state on if it is off, REMOVE switches it off if it is
    on, TOGGLE flips it. Atoms that are not handled, and unknown actions,
    change nothing. Returns the new flags.
    """
    flags = ClientState(flags)
    for atom, flag in _STATE_ATOMS:
        if atom not in (first, second):
            continue
        if action == StateAction.ADD:
            if not flags & flag:
                flags ^= flag
        elif action == StateAction.REMOVE:
            if flags & flag:
                flags ^= flag
        elif action == StateAction.TOGGLE:
            flags ^= flag
    return flags


def restore_state(flags: ClientState, atoms: Iterable[str]) -> ClientState:
    """Flip the state of every handled atom found in a window's stored state."""
    flags = ClientState(flags)
    lookup = dict(_STATE_ATOMS)
    for atom in atoms:
        flag = lookup.get(atom)
        if flag is not None:
            flags ^= flag
    return flags


def state_atoms(flags: ClientState, existing: Iterable[str]) -> list[str]:
    """The ``_NET_WM_STATE`` value for ``flags``.

    Atoms in ``existing`` that are not managed here are kept in front;
    the managed ones follow from ``flags``. A fullscreen window does not
    also report itself maximized. An empty list means the property is to
    be deleted.
    """
    atoms = [atom for atom in existing if atom not in _MANAGED]
    if flags & ClientState.STICKY:
        atoms.append(STATE_STICKY)
    if flags & ClientState.HIDDEN:
        atoms.append(STATE_HIDDEN)
    if flags & ClientState.FULLSCREEN:
        atoms.append(STATE_FULLSCREEN)
    else:
        if flags & ClientState.VMAXIMIZED:
            atoms.append(STATE_MAXIMIZED_VERT)
        if flags & ClientState.HMAXIMIZED:
            atoms.append(STATE_MAXIMIZED_HORZ)
    if flags & ClientState.URGENCY:
        atoms.append(STATE_DEMANDS_ATTENTION)
    if flags & ClientState.SKIP_PAGER:
        atoms.append(STATE_SKIP_PAGER)
    if flags & ClientState.SKIP_TASKBAR:
        atoms.append(STATE_SKIP_TASKBAR)
    if flags & ClientState.FREEZE:
        atoms.append(STATE_FREEZE)
    return atoms


def parse_desktop_names(data: bytes | None) -> list[str]:
    """Split a ``_NET_DESKTOP_NAMES`` value into names.

    The last byte is always treated as the terminator, so a value that
    lacks one loses its final byte.
    """
    if not data:
        return []
    terminated = data[:-1] + b"\0"
    return [part.decode("utf-8", "replace") for part in terminated.split(b"\0")[:-1]]


def encode_desktop_names(names: Iterable[str]) -> bytes:
    """Encode names as consecutive NUL-terminated UTF-8 strings."""
    return b"".join(name.encode("utf-8") + b"\0" for name in names)


def workarea(work: Geom, ngroups: int) -> list[int]:
    """The ``_NET_WORKAREA`` value: the work area repeated for each group."""
    return [work.x, work.y, work.w, work.h] * max(ngroups, 0)


def stacking_list(windows: Sequence[int]) -> list[int]:
    """The ``_NET_CLIENT_LIST_STACKING`` value: windows in reverse order."""
    return list(reversed(windows))


def xor_color(
    a: Sequence[int], b: Sequence[int]
) -> tuple[int, int, int, int, int]:
    """XOR two ``(pixel, red, green, blue[, alpha])`` colours; alpha is opaque."""
    pixel, red, green, blue = (x ^ y for x, y in zip(a[:4], b[:4]))
    return (pixel, red, green, blue, 0xFFFF)