'''Error taxonomy shared by the API service and the client.'''
from typing import Optional


class BlogError(Exception):
    status_code : Optional[int] = None
    default_message : str = 'Unexpected error'

    def __init__(self, message: Optional[str] = None) -> None:
        self.message : str = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogError):
    status_code = 400
    default_message = 'Invalid request'


class NotFound(BlogError):
    status_code = 404
    default_message = 'Post not found'


class ServerError(BlogError):
    status_code = 500
    default_message = 'Server Error'


class NetworkError(BlogError):
    '''The backend could not be reached at all.'''
    default_message = 'Failed to reach the blog API'


class StoreInitError(BlogError):
    '''The post store could not be initialized at startup.'''
    default_message = 'Failed to initialize the post store'


def error_for_status(status_code: int, message: Optional[str] = None) -> BlogError:
    if status_code == 400:
        return ValidationError(message)
    if status_code == 404:
        return NotFound(message)
    return ServerError(message)
