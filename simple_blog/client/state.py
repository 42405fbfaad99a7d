'''Immutable client state and the pure functions that derive new states from it.'''
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Optional, Union
from .http import Post

VALIDATION_MESSAGE : str = 'Title and Content cannot be empty.'
DELETE_PROMPT : str = 'Are you sure you want to delete this post?'
DELETED_MESSAGE : str = 'Post successfully deleted!'


@dataclass(frozen=True)
class Info:
    text: str


@dataclass(frozen=True)
class Confirm:
    '''A yes/no question; the presentation calls one of the two actions.'''
    text: str
    on_affirm: Callable[[], None] = field(compare=False)
    on_decline: Callable[[], None] = field(compare=False)


Modal = Union[None, Info, Confirm]


@dataclass(frozen=True)
class ClientState:
    posts: tuple[Post, ...] = ()
    loading: bool = False
    error: Optional[str] = None
    title: str = ''
    content: str = ''
    editing_post: Optional[Post] = None
    modal: Modal = None
    submitting: bool = False

    @property
    def is_editing(self) -> bool:
        return self.editing_post is not None


def set_title(state: ClientState, title: str) -> ClientState:
    return replace(state, title=title)


def set_content(state: ClientState, content: str) -> ClientState:
    return replace(state, content=content)


def begin_edit(state: ClientState, post: Post) -> ClientState:
    return replace(state, title=post.title, content=post.content, editing_post=post)


def cancel_edit(state: ClientState) -> ClientState:
    return replace(state, title='', content='', editing_post=None)


def show_info(state: ClientState, text: str) -> ClientState:
    return replace(state, modal=Info(text))


def show_confirm(state: ClientState, text: str, on_affirm: Callable[[], None],
                 on_decline: Callable[[], None]) -> ClientState:
    return replace(state, modal=Confirm(text, on_affirm, on_decline))


def close_modal(state: ClientState) -> ClientState:
    return replace(state, modal=None)


def clear_error(state: ClientState) -> ClientState:
    return replace(state, error=None)


def start_refresh(state: ClientState) -> ClientState:
    return replace(state, loading=True, error=None)


def refresh_succeeded(state: ClientState, posts: Iterable[Post]) -> ClientState:
    return replace(state, posts=tuple(posts), loading=False)


def refresh_failed(state: ClientState, message: str) -> ClientState:
    return replace(state, error=message, loading=False,
                   modal=Info(f'Error: {message}. Please check if the backend is running.'))


def validate_form(state: ClientState) -> Optional[str]:
    '''Return the validation message, or None when the form can be sent.'''
    if not state.title.strip() or not state.content.strip():
        return VALIDATION_MESSAGE
    return None


def start_submit(state: ClientState) -> ClientState:
    return replace(state, submitting=True)


def end_submit(state: ClientState) -> ClientState:
    return replace(state, submitting=False)


def submit_succeeded(state: ClientState) -> ClientState:
    verb : str = 'updated' if state.is_editing else 'added'
    return replace(state, title='', content='', editing_post=None, submitting=False,
                   modal=Info(f'Post successfully {verb}!'))


def submit_failed(state: ClientState, message: str) -> ClientState:
    return replace(state, submitting=False, error=message, modal=Info(f'Error: {message}.'))


def delete_failed(state: ClientState, message: str) -> ClientState:
    return replace(state, error=message, modal=Info(f'Error: {message}.'))
