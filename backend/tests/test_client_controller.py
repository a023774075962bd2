"""
PinNotes Client — Controller Tests
====================================

What:  The user-action handlers driven end-to-end against the real app.
How:   NotesApiClient wraps an HTTPX AsyncClient over ASGITransport, reusing
       the test_client fixture (and therefore the in-memory database).
       Network failures use httpx.MockTransport raising ConnectError.

What we test:
    ✅ Load / create / edit / pin / delete refetch and re-render the list
    ✅ Client-side validation blocks the request
    ✅ Server rejections are shown verbatim
    ✅ Cancelled prompts and declined confirmations send nothing
    ✅ Transport failures become user-visible messages
    ✅ Malformed response bodies fall back to generic messages
"""

from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from pinnotes.client import ClientState, NotesApiClient, NotesController


@pytest_asyncio.fixture
async def controller(test_client):
    return NotesController(NotesApiClient(client=test_client))


@pytest.fixture
def offline_controller():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
    return NotesController(NotesApiClient(client=client))


def _prompt_with(*answers):
    replies = iter(answers)
    asked = []

    def prompt(label, default):
        asked.append((label, default))
        return next(replies)

    prompt.asked = asked
    return prompt


async def _add(controller, state, title="Groceries", content="Milk and eggs", pinned=False):
    state.form.title = title
    state.form.content = content
    state.form.is_pinned = pinned
    assert await controller.submit_form(state) is True
    return next(n for n in state.notes if n["title"] == title)


class TestLoadAndCreate:

    @pytest.mark.asyncio
    async def test_refresh_empty(self, controller):
        state = ClientState()

        assert await controller.refresh(state) is True
        assert state.notes == []
        assert "No notes yet" in state.html

    @pytest.mark.asyncio
    async def test_submit_creates_and_clears_form(self, controller):
        state = ClientState()
        state.form.title = "  Groceries  "
        state.form.content = "Milk and eggs"
        state.form.category = ""

        assert await controller.submit_form(state) is True

        assert state.form_errors == []
        assert state.form.title == ""
        assert len(state.notes) == 1
        assert state.notes[0]["title"] == "Groceries"
        assert state.notes[0]["category"] == "General"
        assert "Groceries" in state.html

    @pytest.mark.asyncio
    async def test_client_validation_blocks_request(self, controller):
        state = ClientState()
        state.form.title = "Hi"
        state.form.content = "Milk and eggs"
        controller.api.create_note = AsyncMock()

        assert await controller.submit_form(state) is False

        assert state.form_errors == ["Title must be at least 3 characters."]
        assert state.form.title == "Hi"
        controller.api.create_note.assert_not_called()

    @pytest.mark.asyncio
    async def test_server_errors_shown_verbatim(self, controller, test_client):
        state = ClientState()
        state.form.title = "Valid title"
        state.form.content = "Valid content"
        # Bypass the client-side checks to surface the server's own messages
        original = controller.api.create_note

        async def send_invalid(payload):
            return await original({**payload, "title": "Hi"})

        controller.api.create_note = send_invalid

        assert await controller.submit_form(state) is False
        assert state.form_errors == ["Title must be at least 3 characters"]

    @pytest.mark.asyncio
    async def test_refresh_failure_shows_message(self, offline_controller):
        state = ClientState()

        assert await offline_controller.refresh(state) is False
        assert state.html == "<p>Failed to load notes.</p>"

    @pytest.mark.asyncio
    async def test_submit_network_failure(self, offline_controller):
        state = ClientState()
        state.form.title = "Groceries"
        state.form.content = "Milk and eggs"

        assert await offline_controller.submit_form(state) is False
        assert state.form_errors == ["Something went wrong while saving the note."]
        assert state.form.title == "Groceries"


class TestEdit:

    @pytest.mark.asyncio
    async def test_edit_sends_only_changed_fields(self, controller):
        state = ClientState()
        note = await _add(controller, state)
        prompt = _prompt_with("Groceries", "Milk, eggs and bread")
        original = controller.api.update_note
        controller.api.update_note = AsyncMock(side_effect=original)

        assert await controller.edit(state, note["id"], prompt) is True

        assert prompt.asked == [("Edit title:", "Groceries"), ("Edit content:", "Milk and eggs")]
        controller.api.update_note.assert_awaited_once_with(
            note["id"], {"content": "Milk, eggs and bread"}
        )
        assert state.notes[0]["content"] == "Milk, eggs and bread"

    @pytest.mark.asyncio
    async def test_cancelled_prompt_sends_nothing(self, controller):
        state = ClientState()
        note = await _add(controller, state)
        controller.api.update_note = AsyncMock()

        assert await controller.edit(state, note["id"], _prompt_with(None)) is False
        assert await controller.edit(state, note["id"], _prompt_with("New title", None)) is False

        controller.api.update_note.assert_not_called()
        assert state.alerts == []

    @pytest.mark.asyncio
    async def test_unchanged_edit_sends_nothing(self, controller):
        state = ClientState()
        note = await _add(controller, state)
        controller.api.update_note = AsyncMock()

        assert await controller.edit(state, note["id"], _prompt_with("Groceries", "Milk and eggs")) is False

        controller.api.update_note.assert_not_called()

    @pytest.mark.asyncio
    async def test_short_edit_is_rejected_locally(self, controller):
        state = ClientState()
        note = await _add(controller, state)
        controller.api.update_note = AsyncMock()

        assert await controller.edit(state, note["id"], _prompt_with("ab", "Milk and eggs")) is False

        assert state.alerts == ["Title or content too short."]
        controller.api.update_note.assert_not_called()

    @pytest.mark.asyncio
    async def test_edit_unknown_note(self, controller):
        state = ClientState()

        assert await controller.edit(state, "missing", _prompt_with("x", "y")) is False
        assert state.alerts == ["This note is no longer available."]


class TestPinAndDelete:

    @pytest.mark.asyncio
    async def test_toggle_pin_reads_button_label(self, controller):
        state = ClientState()
        note = await _add(controller, state)

        assert await controller.toggle_pin(state, note["id"], "Pin") is True
        assert state.notes[0]["isPinned"] is True
        assert ">Unpin<" in state.html

        assert await controller.toggle_pin(state, note["id"], "Unpin") is True
        assert state.notes[0]["isPinned"] is False

    @pytest.mark.asyncio
    async def test_pinned_note_moves_to_top(self, controller):
        state = ClientState()
        first = await _add(controller, state, title="Older note")
        await controller.toggle_pin(state, first["id"], "Pin")

        await _add(controller, state, title="Newer note")

        assert [n["title"] for n in state.notes] == ["Newer note", "Older note"]
        assert state.html.index("Older note") < state.html.index("Newer note")

    @pytest.mark.asyncio
    async def test_delete_after_confirmation(self, controller):
        state = ClientState()
        note = await _add(controller, state)
        questions = []

        def confirm(question):
            questions.append(question)
            return True

        assert await controller.delete(state, note["id"], confirm) is True
        assert questions == ["Delete this note?"]
        assert state.notes == []

    @pytest.mark.asyncio
    async def test_declined_delete_sends_nothing(self, controller):
        state = ClientState()
        note = await _add(controller, state)
        controller.api.delete_note = AsyncMock()

        assert await controller.delete(state, note["id"], lambda question: False) is False

        controller.api.delete_note.assert_not_called()
        assert len(state.notes) == 1

    @pytest.mark.asyncio
    async def test_delete_missing_note_shows_server_message(self, controller):
        state = ClientState()
        note = await _add(controller, state)
        await controller.api.delete_note(note["id"])

        assert await controller.delete(state, note["id"], lambda question: True) is False
        assert state.alerts == ["Note not found"]

    @pytest.mark.asyncio
    async def test_network_failures_alert(self, offline_controller):
        state = ClientState(notes=[{"id": "n1", "title": "Groceries", "content": "Milk and eggs"}])

        await offline_controller.toggle_pin(state, "n1", "Pin")
        await offline_controller.delete(state, "n1", lambda question: True)
        await offline_controller.edit(state, "n1", _prompt_with("Groceries", "Milk, eggs"))

        assert state.alerts == [
            "Something went wrong while updating pin status.",
            "Something went wrong while deleting.",
            "Something went wrong while updating.",
        ]


class TestApiResult:

    @pytest.mark.asyncio
    async def test_non_json_response_is_a_failure(self):
        def handler(request):
            return httpx.Response(502, text="Bad gateway")

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
        async with NotesApiClient(client=client) as api:
            result = await api.list_notes()
        await client.aclose()

        assert result.ok is False
        assert result.status_code == 502
        assert result.messages("Failed to load notes") == ["Failed to load notes"]

    @pytest.mark.asyncio
    async def test_success_flag_is_required(self):
        def handler(request):
            return httpx.Response(200, json={"data": []})

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
        controller = NotesController(NotesApiClient(client=client))
        state = ClientState()

        assert await controller.refresh(state) is False
        assert state.html == "<p>Failed to load notes.</p>"
        await client.aclose()


class TestMalformedResponses:

    @staticmethod
    def _controller_returning(status_code, body):
        def handler(request):
            return httpx.Response(status_code, json=body)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
        return NotesController(NotesApiClient(client=client))

    @pytest.mark.asyncio
    async def test_non_object_notes_fail_the_load(self):
        controller = self._controller_returning(200, {"success": True, "data": [1, "x"]})
        state = ClientState(notes=[{"id": "n1", "title": "Kept"}])

        assert await controller.refresh(state) is False

        assert state.html == "<p>Failed to load notes.</p>"
        assert state.notes == [{"id": "n1", "title": "Kept"}]

    @pytest.mark.asyncio
    async def test_non_object_errors_fall_back_to_generic_message(self):
        controller = self._controller_returning(400, {"success": False, "errors": ["oops"]})
        state = ClientState()
        state.form.title = "Groceries"
        state.form.content = "Milk and eggs"

        assert await controller.submit_form(state) is False

        assert state.form_errors == ["Failed to create note"]

    @pytest.mark.asyncio
    async def test_mixed_errors_keep_object_entries(self):
        controller = self._controller_returning(
            400,
            {"success": False, "errors": [7, {"field": "title", "message": "Title is required"}]},
        )
        state = ClientState(notes=[{"id": "n1", "title": "Groceries", "content": "Milk and eggs"}])

        assert await controller.toggle_pin(state, "n1", "Pin") is False

        assert state.alerts == ["Title is required"]
