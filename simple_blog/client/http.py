import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional
from urllib.parse import quote
import httpx
from ..config import ClientConfig
from ..errors import BlogError, NetworkError, ServerError, ValidationError, error_for_status

logger = logging.getLogger(__name__)


def parse_timestamp(value: Any) -> datetime:
    '''Convert a stored timestamp into an aware UTC datetime, defaulting to now.

    Accepts ISO-8601 strings, epoch seconds and the document-store shape
    {'_seconds': ..., '_nanoseconds': ...}.
    '''
    if isinstance(value, dict):
        seconds : Any = value.get('_seconds', value.get('seconds'))
        nanos : Any = value.get('_nanoseconds', value.get('nanoseconds', 0)) or 0
        if isinstance(seconds, (int, float)) and isinstance(nanos, (int, float)):
            return datetime.fromtimestamp(seconds + nanos / 1e9, tz=timezone.utc)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, str) and value:
        try:
            parsed : datetime = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            logger.warning('Unreadable timestamp %r, using current time', value)
        else:
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed
    return datetime.now(timezone.utc)


def post_path(post_id: str) -> str:
    if not post_id:
        raise ValidationError('Post id is required')
    return '/posts/' + quote(post_id, safe='')


@dataclass(frozen=True)
class Post:
    id: str
    title: str
    content: str
    created_at: datetime

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> 'Post':
        post_id : Any = data.get('id') or data.get('_id')
        if not post_id:
            raise ServerError('Malformed post in response: missing id')
        return cls(
            id=str(post_id),
            title=data.get('title') or '',
            content=data.get('content') or '',
            created_at=parse_timestamp(data.get('createdAt')),
        )

    def display_date(self) -> str:
        return self.created_at.astimezone().strftime('%Y-%m-%d %H:%M')


class PostsClient:
    '''httpx client for the blog API.

    Every method returns data or raises a BlogError subclass.
    '''

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.BaseTransport] = None) -> None:
        self.base_url : str = (base_url or ClientConfig.API_URL).rstrip('/')
        self.timeout : float = timeout if timeout is not None else ClientConfig.TIMEOUT
        self._http : httpx.Client = httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=transport)
        logger.info('PostsClient ready for %s', self.base_url)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> 'PostsClient':
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, failure: str, json: Optional[dict[str, Any]] = None) -> httpx.Response:
        try:
            response : httpx.Response = self._http.request(method, path, json=json)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.error('%s %s failed: %s', method, path, exc)
            raise NetworkError(str(exc) or failure) from exc

        if response.is_success:
            return response

        message : str = failure
        try:
            body : Any = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get('message'):
            message = body['message']
        logger.warning('%s %s returned %s: %s', method, path, response.status_code, message)
        raise error_for_status(response.status_code, message)

    @staticmethod
    def _decode(response: httpx.Response, failure: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ServerError(failure) from exc

    def _post_from(self, response: httpx.Response, failure: str) -> Post:
        data : Any = self._decode(response, failure)
        if not isinstance(data, dict):
            raise ServerError(failure)
        return Post.from_json(data)

    def list_posts(self) -> list[Post]:
        failure : str = 'Failed to fetch posts'
        data : Any = self._decode(self._request('GET', '/posts', failure), failure)
        if not isinstance(data, list):
            raise ServerError(failure)
        return [Post.from_json(item) for item in data if isinstance(item, dict)]

    def get_post(self, post_id: str) -> Post:
        failure : str = 'Failed to fetch post'
        return self._post_from(self._request('GET', post_path(post_id), failure), failure)

    def create_post(self, title: str, content: str) -> Post:
        failure : str = 'Failed to add post'
        response : httpx.Response = self._request('POST', '/posts', failure, json={'title': title, 'content': content})
        return self._post_from(response, failure)

    def update_post(self, post_id: str, title: Optional[str] = None, content: Optional[str] = None) -> Post:
        '''Send only the fields that are given.'''
        failure : str = 'Failed to update post'
        payload : dict[str, str] = {}
        if title is not None:
            payload['title'] = title
        if content is not None:
            payload['content'] = content
        response : httpx.Response = self._request('PUT', post_path(post_id), failure, json=payload)
        return self._post_from(response, failure)

    def delete_post(self, post_id: str) -> None:
        self._request('DELETE', post_path(post_id), 'Failed to delete post')

    def ping(self) -> bool:
        try:
            self._request('GET', '/', 'API is not responding')
        except BlogError:
            return False
        return True
