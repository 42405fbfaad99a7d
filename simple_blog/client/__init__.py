from .http import Post, PostsClient, parse_timestamp
from .state import ClientState, Confirm, Info
from .controller import BlogController
