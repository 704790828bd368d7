import pytest

from calmcore.geometry import Geom
from calmcore.items import MenuItem, menu_add
from calmcore.menu import (
    PROMPT_END,
    PROMPT_START,
    Ctl,
    MenuState,
    control_for_key,
    place_menu,
)


def make_items(*texts):
    items = []
    for text in texts:
        menu_add(items, None, text)
    return items


@pytest.mark.parametrize(
    "keysym,control,alt,expected",
    [
        ("BackSpace", False, False, Ctl.ERASEONE),
        ("Return", False, False, Ctl.RETURN),
        ("KP_Enter", False, False, Ctl.RETURN),
        ("Tab", False, False, Ctl.TAB),
        ("Up", False, False, Ctl.UP),
        ("Down", False, False, Ctl.DOWN),
        ("Escape", False, False, Ctl.ABORT),
        ("s", True, False, Ctl.DOWN),
        ("R", True, False, Ctl.UP),
        ("u", True, False, Ctl.WIPE),
        ("h", True, False, Ctl.ERASEONE),
        ("a", True, False, Ctl.ALL),
        ("bracketleft", True, False, Ctl.ABORT),
        ("j", False, True, Ctl.DOWN),
        ("K", False, True, Ctl.UP),
        ("s", False, False, Ctl.NONE),
        ("j", True, False, Ctl.NONE),
        ("u", False, True, Ctl.NONE),
    ],
)
def test_control_for_key(keysym, control, alt, expected):
    assert control_for_key(keysym, control, alt) is expected


def test_erase_and_wipe():
    items = make_items("abc")
    state = MenuState(search="ab")
    state.handle_key(Ctl.ERASEONE, "", items)
    assert state.search == "a"
    assert state.changed is True
    state.handle_key(Ctl.WIPE, "", items)
    assert state.search == ""


def test_erase_on_empty_search_is_unchanged():
    state = MenuState()
    state.handle_key(Ctl.ERASEONE, "", [])
    assert state.search == ""
    assert state.changed is False


def test_up_and_down_rotate_results():
    items = make_items("a1", "a2", "a3")
    state = MenuState()
    state.handle_key(Ctl.NONE, "a", items)
    state.handle_key(Ctl.DOWN, "", items)
    assert [i.text for i in state.results] == ["a2", "a3", "a1"]
    state.handle_key(Ctl.UP, "", items)
    assert [i.text for i in state.results] == ["a1", "a2", "a3"]


def test_return_picks_first_result():
    items = make_items("alpha", "alps")
    state = MenuState()
    state.handle_key(Ctl.NONE, "al", items)
    chosen = state.handle_key(Ctl.RETURN, "", items)
    assert chosen is items[0]
    assert state.done is True
    assert chosen.abort is False


def test_return_without_results_refuses_dummy():
    state = MenuState(search="zzz")
    assert state.handle_key(Ctl.RETURN, "", []) is None
    assert state.done is True


def test_return_without_results_gives_dummy_when_allowed():
    state = MenuState(search="zzz", allow_dummy=True)
    chosen = state.handle_key(Ctl.RETURN, "", [])
    assert chosen.text == "zzz"
    assert chosen.dummy is True


def test_abort():
    state = MenuState(search="q", allow_dummy=True)
    chosen = state.handle_key(Ctl.ABORT, "", [])
    assert chosen.abort is True
    assert chosen.text == ""
    assert state.done is True


def test_tab_completes_common_prefix():
    items = make_items("firefox", "FireWire")
    state = MenuState()
    state.handle_key(Ctl.NONE, "fi", items)
    state.handle_key(Ctl.TAB, "", items)
    assert state.search == "fire"
    assert all(i.text.lower().startswith(state.search) for i in state.results)


def test_tab_in_file_mode_completes_path():
    items = make_items("vi")
    seen = []

    def complete(search):
        seen.append(search)
        return MenuItem(text="notes.txt")

    state = MenuState(file_mode=True, complete_path=complete)
    state.handle_key(Ctl.NONE, "vi", items)
    chosen = state.handle_key(Ctl.TAB, "", items)
    assert seen == ["vi"]
    assert chosen.text == 'vi "notes.txt"'
    assert state.done is True


def test_tab_in_file_mode_with_empty_choice_keeps_search():
    items = make_items("vi")
    state = MenuState(
        file_mode=True, complete_path=lambda search: MenuItem(text="")
    )
    state.handle_key(Ctl.NONE, "vi", items)
    chosen = state.handle_key(Ctl.TAB, "", items)
    assert chosen.text == "vi"


def test_all_toggles_listing():
    items = make_items("one", "two")
    state = MenuState()
    state.handle_key(Ctl.ALL, "", items)
    assert state.show_all is True
    lines = state.prepare_draw(items)
    assert state.listing is True
    assert lines[1:] == ["one", "two"]
    state.handle_key(Ctl.ALL, "", items)
    assert state.show_all is False
    assert state.results == []
    assert state.listing is False


def test_prepare_draw_sizes_menu():
    items = make_items("short", "a much longer entry")
    state = MenuState(prompt="run", line_height=10)
    state.handle_key(Ctl.NONE, "e", items)
    lines = state.prepare_draw(items)
    assert lines[0] == "run" + PROMPT_START + "e" + PROMPT_END
    assert state.geom.w == max(len(line) for line in lines)
    assert state.geom.h == 10 * len(lines)
    assert state.num == len(lines)


def test_calc_entry():
    state = MenuState(line_height=10, num=3)
    state.geom.w = 100
    assert state.calc_entry(5, 15) == 1
    assert state.calc_entry(5, 25) == 2
    assert state.calc_entry(5, 5) == -1
    assert state.calc_entry(5, 35) == -1
    assert state.calc_entry(-1, 15) == -1
    assert state.calc_entry(101, 15) == -1


def test_release_on_entry():
    items = make_items("one", "two")
    state = MenuState(show_all=True, line_height=10)
    state.prepare_draw(items)
    state.geom.w = 100
    assert state.release(5, 25) is items[1]
    assert state.done is True


def test_release_outside_entries():
    state = MenuState(line_height=10, num=1, allow_dummy=True)
    state.geom.w = 100
    chosen = state.release(5, 5)
    assert chosen.dummy is True
    assert chosen.text == ""


def test_place_menu_keeps_fitting_menu():
    geom = Geom(10, 10, 50, 20)
    assert place_menu(geom, Geom(0, 0, 800, 600), 0) == geom


def test_place_menu_pushes_inside():
    area = Geom(0, 0, 800, 600)
    placed = place_menu(Geom(790, 590, 50, 20), area, 1)
    assert placed.w == 50
    assert placed.h == 20
    assert placed.x + placed.w <= area.w - 2
    assert placed.y + placed.h <= area.h - 2
    assert placed.x >= area.x and placed.y >= area.y


def test_place_menu_shrinks_oversized():
    area = Geom(100, 50, 200, 100)
    placed = place_menu(Geom(150, 60, 500, 500), area, 0)
    assert (placed.x, placed.y) == (area.x, area.y)
    assert placed.w == area.w
    assert placed.h == area.h


def test_place_menu_does_not_modify_input():
    geom = Geom(790, 590, 50, 20)
    place_menu(geom, Geom(0, 0, 800, 600), 0)
    assert geom == Geom(790, 590, 50, 20)