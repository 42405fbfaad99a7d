"""Tests for the pure client state updates."""

from datetime import datetime, timezone

from simple_blog.client import ClientState, Confirm, Info, Post
from simple_blog.client import state as st


POST = Post(id="p1", title="Title", content="Body", created_at=datetime.now(timezone.utc))


class TestForm:

    def test_begin_edit_prefills_form(self):
        state = st.begin_edit(ClientState(), POST)
        assert (state.title, state.content) == ("Title", "Body")
        assert state.editing_post == POST
        assert state.is_editing

    def test_cancel_edit_clears_form(self):
        state = st.cancel_edit(st.begin_edit(ClientState(), POST))
        assert state == ClientState()

    def test_original_state_is_untouched(self):
        original = ClientState()
        st.set_title(original, "x")
        assert original.title == ""

    def test_validation(self):
        assert st.validate_form(ClientState(title=" ", content="c")) == st.VALIDATION_MESSAGE
        assert st.validate_form(ClientState(title="t", content="")) == st.VALIDATION_MESSAGE
        assert st.validate_form(ClientState(title="t", content="c")) is None


class TestRefresh:

    def test_start_sets_loading_and_clears_error(self):
        state = st.start_refresh(ClientState(error="old"))
        assert state.loading is True
        assert state.error is None

    def test_success_replaces_posts(self):
        state = st.refresh_succeeded(st.start_refresh(ClientState()), [POST])
        assert state.posts == (POST,)
        assert state.loading is False

    def test_failure_sets_error_and_modal(self):
        state = st.refresh_failed(st.start_refresh(ClientState()), "down")
        assert state.loading is False
        assert state.error == "down"
        assert state.modal == Info("Error: down. Please check if the backend is running.")


class TestSubmit:

    def test_success_when_adding(self):
        state = st.submit_succeeded(ClientState(title="t", content="c", submitting=True))
        assert (state.title, state.content, state.editing_post) == ("", "", None)
        assert state.submitting is False
        assert state.modal == Info("Post successfully added!")

    def test_success_when_editing(self):
        state = st.submit_succeeded(st.begin_edit(ClientState(), POST))
        assert state.modal == Info("Post successfully updated!")
        assert state.editing_post is None

    def test_failure_keeps_form(self):
        state = st.submit_failed(ClientState(title="t", content="c", submitting=True), "boom")
        assert (state.title, state.content) == ("t", "c")
        assert state.error == "boom"
        assert state.submitting is False
        assert state.modal == Info("Error: boom.")


class TestModal:

    def test_confirm_carries_actions(self):
        calls = []
        state = st.show_confirm(
            ClientState(), "sure?", lambda: calls.append("yes"), lambda: calls.append("no")
        )
        assert isinstance(state.modal, Confirm)
        state.modal.on_affirm()
        state.modal.on_decline()
        assert calls == ["yes", "no"]

    def test_close(self):
        assert st.close_modal(st.show_info(ClientState(), "hi")).modal is None
