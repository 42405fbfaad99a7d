import logging
from typing import Callable, Optional
from ..errors import BlogError
from . import state as st
from .http import Post, PostsClient
from .state import ClientState

logger = logging.getLogger(__name__)

Listener = Callable[[ClientState], None]


class BlogController:
    '''Owns the current ClientState and the API calls that change it.

    No method raises a BlogError to its caller: failures end up in
    state.error and an Info modal.
    '''

    def __init__(self, client: PostsClient, initial: Optional[ClientState] = None) -> None:
        self.client : PostsClient = client
        self.state : ClientState = initial or ClientState()
        self._listeners : list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _apply(self, new_state: ClientState) -> ClientState:
        self.state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    def set_title(self, title: str) -> ClientState:
        return self._apply(st.set_title(self.state, title))

    def set_content(self, content: str) -> ClientState:
        return self._apply(st.set_content(self.state, content))

    def refresh(self) -> ClientState:
        self._apply(st.start_refresh(self.state))
        try:
            posts : list[Post] = self.client.list_posts()
        except BlogError as exc:
            logger.error('Error fetching posts: %s', exc.message)
            return self._apply(st.refresh_failed(self.state, exc.message))
        return self._apply(st.refresh_succeeded(self.state, posts))

    def submit(self) -> ClientState:
        '''Create a post, or update editing_post when one is set.'''
        if self.state.submitting:
            logger.debug('Submit ignored, a request is already in flight')
            return self.state

        self._apply(st.clear_error(self.state))
        problem : Optional[str] = st.validate_form(self.state)
        if problem:
            return self._apply(st.show_info(self.state, problem))

        self._apply(st.start_submit(self.state))
        editing : Optional[Post] = self.state.editing_post
        try:
            if editing is None:
                self.client.create_post(self.state.title, self.state.content)
            else:
                self.client.update_post(editing.id, title=self.state.title, content=self.state.content)
        except BlogError as exc:
            logger.error('Error %s post: %s', 'updating' if editing else 'adding', exc.message)
            return self._apply(st.submit_failed(self.state, exc.message))
        except Exception:
            # release the double-submit guard before propagating
            self._apply(st.end_submit(self.state))
            raise

        self._apply(st.submit_succeeded(self.state))
        return self.refresh()

    def begin_edit(self, post: Post) -> ClientState:
        return self._apply(st.begin_edit(self.state, post))

    def cancel_edit(self) -> ClientState:
        return self._apply(st.cancel_edit(self.state))

    def request_delete(self, post_id: str) -> ClientState:
        '''Ask for confirmation; nothing is deleted until the prompt is affirmed.'''
        self._apply(st.clear_error(self.state))
        return self._apply(st.show_confirm(self.state, st.DELETE_PROMPT,
                                           on_affirm=lambda: self._delete(post_id),
                                           on_decline=self.dismiss_modal))

    def _delete(self, post_id: str) -> ClientState:
        self._apply(st.close_modal(self.state))
        try:
            self.client.delete_post(post_id)
        except BlogError as exc:
            logger.error('Error deleting post: %s', exc.message)
            return self._apply(st.delete_failed(self.state, exc.message))
        self._apply(st.show_info(self.state, st.DELETED_MESSAGE))
        return self.refresh()

    def dismiss_modal(self) -> ClientState:
        return self._apply(st.close_modal(self.state))
