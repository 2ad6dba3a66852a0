import pytest

from narrow.core.engine import NarrowEngine
from narrow.presentation.tui import NarrowApp
from narrow.presentation.widgets import CandidateList


@pytest.mark.asyncio
async def test_typing_narrows_and_enter_commits():
    session = NarrowEngine().start_session("Fruit:", ["banana", "apple", "kiwi"])
    app = NarrowApp(session)

    async with app.run_test() as pilot:
        await pilot.press("a", "p")
        await pilot.pause()
        assert session.query == "ap"
        assert [candidate.display for candidate in session.view.displayed_slice] == ["apple"]
        await pilot.press("enter")
        await pilot.pause()

    assert app.return_value == "apple"


@pytest.mark.asyncio
async def test_navigation_moves_highlighted_row():
    session = NarrowEngine().start_session("Fruit:", ["banana", "apple", "kiwi"])
    app = NarrowApp(session)

    async with app.run_test() as pilot:
        await pilot.press("down")
        await pilot.pause()
        assert session.state.cursor_index == 1
        candidate_list = app.query_one(CandidateList)
        assert any(span.style == "reverse" for span in candidate_list.lines[1].spans)
        await pilot.press("escape")
        await pilot.pause()

    assert app.return_value is None
    assert session.cancelled


@pytest.mark.asyncio
async def test_insert_copies_candidate_into_input():
    session = NarrowEngine().start_session("Fruit:", ["banana", "apple", "kiwi"])
    app = NarrowApp(session)

    async with app.run_test() as pilot:
        await pilot.press("b", "tab")
        await pilot.pause()
        assert session.query == "banana"
        assert app.query_one("#query").value == "banana"
        await pilot.press("escape")
