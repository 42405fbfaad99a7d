from flask import Blueprint, request, jsonify, Response
from typing import Any, Optional
from . import store
from .errors import ValidationError

posts_bp : Blueprint = Blueprint('posts', __name__)


def _json_body() -> dict[str, Any]:
    body : Any = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError('Request body must be a JSON object')
    return body


def _filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


@posts_bp.route('', methods=['GET'])
def list_posts() -> Response:
    return jsonify([post.to_dict() for post in store.list_posts()])


@posts_bp.route('/<path:post_id>', methods=['GET'])
def get_post(post_id: str) -> Response:
    return jsonify(store.get_post(post_id).to_dict())


@posts_bp.route('', methods=['POST'])
def create_post() -> tuple[Response, int]:
    body : dict[str, Any] = _json_body()
    title : Any = body.get('title')
    content : Any = body.get('content')
    if not _filled(title) or not _filled(content):
        raise ValidationError('Title and content are required')
    post = store.create_post(title, content)
    return jsonify(post.to_dict()), 201


@posts_bp.route('/<path:post_id>', methods=['PUT'])
def update_post(post_id: str) -> Response:
    body : dict[str, Any] = _json_body()
    title : Optional[Any] = body.get('title')
    content : Optional[Any] = body.get('content')
    if title is None and content is None:
        raise ValidationError('At least one field (title or content) is required for update')
    for field, value in (('title', title), ('content', content)):
        if value is not None and not _filled(value):
            raise ValidationError(f'Field {field} must be a non-empty string')
    post = store.update_post(post_id, title=title, content=content)
    return jsonify(post.to_dict())


@posts_bp.route('/<path:post_id>', methods=['DELETE'])
def delete_post(post_id: str) -> tuple[str, int]:
    store.delete_post(post_id)
    return '', 204
