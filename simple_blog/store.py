import logging
import secrets
import string
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from .models import db, Post
from .errors import NotFound, ServerError

logger = logging.getLogger(__name__)

ID_LENGTH : int = 20
ID_ALPHABET : str = string.ascii_letters + string.digits


def generate_id(length: int = ID_LENGTH) -> str:
    return ''.join(secrets.choice(ID_ALPHABET) for _ in range(length))


def generate_unique_id(length: int = ID_LENGTH) -> str:
    candidate : str = generate_id(length)
    while Post.query.filter_by(short_id=candidate).first():
        candidate = generate_id(length)
    return candidate


def _fail(message: str, exc: SQLAlchemyError) -> ServerError:
    logger.error('%s (%s)', message, exc)
    db.session.rollback()
    return ServerError(message)


def list_posts() -> list[Post]:
    try:
        return Post.query.order_by(Post.created_at.desc(), Post.id.desc()).all()
    except SQLAlchemyError as exc:
        raise _fail('Server Error: Could not retrieve posts from database.', exc) from exc


def _find(post_id: str) -> Optional[Post]:
    return Post.query.filter_by(short_id=post_id).first()


def get_post(post_id: str) -> Post:
    try:
        post : Optional[Post] = _find(post_id)
    except SQLAlchemyError as exc:
        raise _fail('Server Error: Could not retrieve post.', exc) from exc
    if post is None:
        raise NotFound('Post not found')
    return post


def create_post(title: str, content: str) -> Post:
    try:
        post : Post = Post(short_id=generate_unique_id(), title=title, content=content)
        db.session.add(post)
        db.session.commit()
    except SQLAlchemyError as exc:
        raise _fail('Server Error: Could not create post.', exc) from exc
    logger.info('Created post %s', post.short_id)
    return post


def update_post(post_id: str, title: Optional[str] = None, content: Optional[str] = None) -> Post:
    try:
        post : Optional[Post] = _find(post_id)
        if post is None:
            raise NotFound('Post not found')
        if title is not None:
            post.title = title
        if content is not None:
            post.content = content
        db.session.commit()
    except SQLAlchemyError as exc:
        raise _fail('Server Error: Could not update post.', exc) from exc
    logger.info('Updated post %s', post_id)
    return post


def delete_post(post_id: str) -> None:
    '''Remove a post; a missing id is not an error.'''
    try:
        post : Optional[Post] = _find(post_id)
        if post is not None:
            db.session.delete(post)
            db.session.commit()
    except SQLAlchemyError as exc:
        raise _fail('Server Error: Could not delete post.', exc) from exc
    if post is not None:
        logger.info('Deleted post %s', post_id)
