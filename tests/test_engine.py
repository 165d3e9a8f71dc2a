import logging

import pytest

from gridmenu.core.events import ClickDecision, CloseEvent, InteractionEvent, OpenResult
from gridmenu.core.items import MenuItem
from gridmenu.core.layout import GridSize
from gridmenu.core.menu import Menu, PaginatedMenu


def _click(engine, user, slot):
    grid = engine.host.displayed(user)
    return engine.on_click(
        InteractionEvent(user=user, slot=slot, clicked=grid.get(slot), grid=grid)
    )


def _catalogue(engine, user="alice", count=30):
    items = [MenuItem("paper", display_name=f"Page item {index}") for index in range(count)]
    menu = PaginatedMenu(
        user,
        "Catalogue",
        GridSize.NORMAL,
        items=items,
        static_slots=[18, 26],
        buttons=lambda m: {
            18: engine.bind_previous_page(m),
            26: engine.bind_next_page(m),
        },
    )
    return menu, items


def test_open_renders_content_into_a_titled_grid(engine, host) -> None:
    sword = MenuItem("iron_sword", display_name="Sword")
    menu = Menu("alice", "Armoury", GridSize.SMALLEST, content={4: sword, 40: MenuItem("void")})

    assert engine.open(menu) is OpenResult.OPENED

    grid = host.displayed("alice")
    assert grid.title == "Armoury"
    assert grid.size == 9
    assert grid.holder is menu
    assert grid.cells == {4: sword}
    assert engine.current_menu("alice") is menu
    assert engine.displayed_menu("alice") is menu


def test_texture_overrides_the_title(engine, host) -> None:
    engine.open(Menu("alice", "Shop", texture=" Shop"))

    assert host.displayed("alice").title == " Shop"


def test_reopening_the_current_menu_does_not_grow_history(engine) -> None:
    menu = Menu("alice", "Home")
    engine.open(menu)
    engine.open(menu)

    assert engine.history.depth("alice") == 1


def test_permission_denied_sends_message_and_changes_nothing(engine, host) -> None:
    home = Menu("alice", "Home")
    staff = Menu("alice", "Staff", permission="menus.staff")
    engine.open(home)

    assert engine.open(staff) is OpenResult.DENIED

    assert host.messages_for("alice") == [engine.settings.no_permission_message]
    assert engine.current_menu("alice") is home
    assert host.displayed("alice").holder is home

    host.grant("alice", "menus.staff")
    assert engine.open(staff) is OpenResult.OPENED


def test_back_control_reopens_previous_menu(engine, host) -> None:
    back = engine.back_button()
    first = Menu("alice", "A")
    second = Menu("alice", "B", content={0: back})
    engine.open(first)
    engine.open(second)

    decision = _click(engine, "alice", 0)

    assert decision is ClickDecision.REOPEN
    assert host.displayed("alice").holder is first
    assert engine.history.depth("alice") == 1
    assert engine.current_menu("alice") is first


def test_back_control_hidden_without_history(engine, host) -> None:
    menu = Menu("alice", "Root", content={0: engine.back_button(), 1: MenuItem("stone")})

    engine.open(menu)

    assert sorted(host.displayed("alice").cells) == [1]


def test_back_click_without_history_is_harmless(engine, host) -> None:
    menu = Menu("alice", "Root")
    engine.open(menu)
    grid = host.displayed("alice")

    decision = engine.on_click(
        InteractionEvent(user="alice", slot=0, clicked=engine.back_button(), grid=grid)
    )

    assert decision is ClickDecision.CONSUME
    assert host.displayed("alice") is grid


def test_programmatic_back(engine, host) -> None:
    first, second = Menu("alice", "A"), Menu("alice", "B")
    engine.open(first)
    engine.open(second)

    assert engine.back("alice") is first
    assert host.displayed("alice").holder is first
    assert engine.back("alice") is None


def test_click_runs_menu_handler_then_bound_handler(engine) -> None:
    calls = []
    buy = MenuItem("emerald", display_name="Buy")
    menu = Menu("alice", "Shop", content={3: buy}, on_click=lambda event: calls.append("menu"))
    menu.bind(buy, lambda event: calls.append(("buy", event.slot)))
    engine.open(menu)

    assert _click(engine, "alice", 3) is ClickDecision.CONSUME
    assert calls == ["menu", ("buy", 3)]


def test_failing_menu_handler_does_not_block_bindings(engine, caplog) -> None:
    calls = []
    item = MenuItem("stone")

    def broken(event) -> None:
        raise ValueError("menu handler broke")

    menu = Menu("alice", "Quarry", content={0: item}, on_click=broken)
    menu.bind(item, lambda event: calls.append("bound"))
    engine.open(menu)

    with caplog.at_level(logging.ERROR, logger="gridmenu.core.engine"):
        _click(engine, "alice", 0)

    assert calls == ["bound"]
    assert "click handler failed" in caplog.text


def test_takable_slots_pass_through(engine) -> None:
    calls = []
    menu = Menu("alice", "Stash", takable_slots=[5], on_click=lambda event: calls.append(event))
    engine.open(menu)

    assert _click(engine, "alice", 5) is ClickDecision.NONE
    assert calls == []
    assert _click(engine, "alice", 6) is ClickDecision.CONSUME
    assert len(calls) == 1


def test_click_on_unmanaged_container_is_ignored(engine, host) -> None:
    chest = host.create_grid("Chest", 27)
    event = InteractionEvent(user="alice", slot=0, clicked=MenuItem("stone"), grid=chest)

    assert engine.on_click(event) is ClickDecision.NONE
    assert engine.on_click(InteractionEvent("alice", 0, None, None)) is ClickDecision.NONE


def test_render_failure_closes_display_and_is_logged(engine, host, clock, scheduler, caplog) -> None:
    healthy = Menu("alice", "Healthy")

    def explode(menu):
        raise KeyError("missing stock")

    broken = Menu("alice", "Broken", content=explode)
    engine.open(healthy)

    with caplog.at_level(logging.ERROR, logger="gridmenu.core.engine"):
        assert engine.open(broken) is OpenResult.FAILED

    assert host.displayed("alice") is None
    assert "Could not open menu 'Broken'" in caplog.text
    assert "Failed to render menu 'Broken'" in caplog.text

    clock.advance(1.0)
    scheduler.run_due()
    assert engine.current_menu("alice") is None


def test_cells_outside_the_host_grid_fail_cleanly(engine, host, monkeypatch) -> None:
    menu = Menu("alice", "Odd", content={3: MenuItem("stone")})

    def refuse(grid, slot, item):
        raise IndexError("host rejected cell")

    monkeypatch.setattr(host, "set_cell", refuse)

    assert engine.open(menu) is OpenResult.FAILED
    assert host.displayed("alice") is None


def test_close_clears_history_after_delay(engine, host, clock, scheduler) -> None:
    closed = []
    menu = Menu("alice", "Home", on_close=closed.append)
    engine.open(menu)

    engine.close("alice")

    assert len(closed) == 1 and isinstance(closed[0], CloseEvent)
    assert engine.current_menu("alice") is menu

    clock.advance(0.01)
    scheduler.run_due()
    assert engine.current_menu("alice") is menu

    clock.advance(0.05)
    scheduler.run_due()
    assert engine.current_menu("alice") is None


def test_reopen_within_debounce_keeps_history(engine, host, clock, scheduler) -> None:
    first, second = Menu("alice", "A"), Menu("alice", "B")
    engine.open(first)
    engine.open(second)

    engine.close("alice")
    engine.open(second)
    clock.advance(1.0)
    scheduler.run_due()

    assert engine.history.depth("alice") == 2
    assert scheduler.pending_count() == 0


def test_close_event_for_replaced_grid_keeps_history(engine, host, clock, scheduler) -> None:
    first, second = Menu("alice", "A"), Menu("alice", "B")
    engine.open(first)
    old_grid = host.displayed("alice")
    engine.open(second)

    engine.on_close(CloseEvent(user="alice", grid=old_grid))
    clock.advance(1.0)
    scheduler.run_due()

    assert engine.history.depth("alice") == 2


def test_paging_buttons_move_between_pages(engine, host) -> None:
    menu, items = _catalogue(engine)
    engine.open(menu)
    assert menu.number_of_pages == 1
    assert host.displayed("alice").get(0) == items[0]

    assert _click(engine, "alice", 26) is ClickDecision.CONSUME
    assert engine.get_page(menu) == 1
    assert host.displayed("alice").get(0) == items[25]
    assert engine.is_last_page(menu)

    _click(engine, "alice", 26)
    assert engine.get_page(menu) == 1

    _click(engine, "alice", 18)
    _click(engine, "alice", 18)
    assert engine.get_page(menu) == 0
    assert engine.history.depth("alice") == 1


def test_set_page_clamps_negative_pages(engine) -> None:
    menu, _ = _catalogue(engine)

    engine.set_page(menu, -4)

    assert engine.get_page(menu) == 0


def test_empty_paginated_menu_is_its_own_last_page(engine) -> None:
    menu, _ = _catalogue(engine, count=0)
    engine.open(menu)

    assert menu.number_of_pages == -1
    assert engine.is_last_page(menu)


def test_close_binding_closes_display(engine, host) -> None:
    menu = Menu("alice", "Closable", content=lambda m: {8: engine.bind_close(m)})
    engine.open(menu)

    _click(engine, "alice", 8)

    assert host.displayed("alice") is None


def test_refresh_slot_updates_until_menu_is_replaced(engine, host, clock, scheduler) -> None:
    ticks = iter(range(100))
    menu = Menu("alice", "Clock")
    other = Menu("alice", "Elsewhere")
    engine.open(menu)

    refresher = engine.refresh_slot(
        menu, 4, lambda: MenuItem("clock", display_name=str(next(ticks))), interval=1.0
    )
    clock.advance(1.0)
    scheduler.run_due()
    clock.advance(1.0)
    scheduler.run_due()

    assert host.displayed("alice").get(4).display_name == "1"

    engine.open(other)
    clock.advance(1.0)
    scheduler.run_due()

    assert not refresher.active
    assert host.displayed("alice").get(4) is None


def test_refresh_slot_survives_supplier_errors(engine, host, clock, scheduler, caplog) -> None:
    menu = Menu("alice", "Flaky")
    engine.open(menu)
    results = [RuntimeError("offline"), MenuItem("lamp", display_name="on")]

    def supplier():
        result = results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    refresher = engine.refresh_slot(menu, 0, supplier, interval=0.5)
    with caplog.at_level(logging.ERROR, logger="gridmenu.core.dynamic"):
        clock.advance(0.5)
        scheduler.run_due()
    clock.advance(0.5)
    scheduler.run_due()

    assert "Refreshing slot 0" in caplog.text
    assert host.displayed("alice").get(0).display_name == "on"
    assert refresher.ticks == 2
    refresher.stop()


def test_refresh_interval_must_be_positive(engine) -> None:
    with pytest.raises(ValueError):
        engine.refresh_slot(Menu("alice", "Clock"), 0, lambda: None, interval=0)


def test_invalid_grid_size_is_rejected() -> None:
    with pytest.raises(ValueError):
        Menu("alice", "Bad", 10)


def test_denied_back_target_keeps_history_in_step(engine, host) -> None:
    host.grant("alice", "menus.vault")
    vault = Menu("alice", "Vault", permission="menus.vault")
    ledger = Menu("alice", "Ledger", content={0: engine.back_button()})
    engine.open(vault)
    engine.open(ledger)
    host.revoke("alice", "menus.vault")

    assert _click(engine, "alice", 0) is ClickDecision.CONSUME

    assert engine.displayed_menu("alice") is ledger
    assert engine.current_menu("alice") is ledger
    assert engine.history.depth("alice") == 2

    host.grant("alice", "menus.vault")
    assert _click(engine, "alice", 0) is ClickDecision.REOPEN
    assert engine.displayed_menu("alice") is vault


def test_denied_programmatic_back_returns_none(engine, host) -> None:
    host.grant("alice", "menus.vault")
    vault = Menu("alice", "Vault", permission="menus.vault")
    ledger = Menu("alice", "Ledger")
    engine.open(vault)
    engine.open(ledger)
    host.revoke("alice", "menus.vault")

    assert engine.back("alice") is None
    assert engine.current_menu("alice") is ledger
    assert engine.history.previous("alice") is vault


def test_failed_menu_is_not_a_back_target(engine, host) -> None:
    def explode(menu):
        raise RuntimeError("no stock")

    first = Menu("alice", "A")
    broken = Menu("alice", "Broken", content=explode)
    third = Menu("alice", "C", content={0: engine.back_button()})
    engine.open(first)

    assert engine.open(broken) is OpenResult.FAILED
    assert engine.current_menu("alice") is first

    engine.open(third)
    assert _click(engine, "alice", 0) is ClickDecision.REOPEN
    assert engine.displayed_menu("alice") is first
    assert engine.history.depth("alice") == 1


def test_session_is_dropped_after_a_real_exit(engine, clock, scheduler) -> None:
    menu = Menu("alice", "Home")
    engine.open(menu)
    assert engine.sessions.peek("alice") is not None

    engine.close("alice")
    clock.advance(1.0)
    scheduler.run_due()

    assert engine.sessions.peek("alice") is None
    assert len(engine.sessions) == 0
    assert engine.open(menu) is OpenResult.OPENED
    assert engine.sessions.peek("alice") is not None


def test_session_survives_close_followed_by_reopen(engine, clock, scheduler) -> None:
    menu = Menu("alice", "Home")
    engine.open(menu)
    session = engine.sessions.peek("alice")

    engine.close("alice")
    engine.open(menu)
    clock.advance(1.0)
    scheduler.run_due()

    assert engine.sessions.peek("alice") is session
