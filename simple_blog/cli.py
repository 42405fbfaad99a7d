import sys
from typing import Any, Optional
import click
from . import __version__
from .client import BlogController, ClientState, Confirm, Info, Post, PostsClient
from .config import ClientConfig, configure_logging


def render_posts(state: ClientState) -> str:
    if state.loading:
        return 'Loading posts...'
    if not state.posts:
        return 'No posts yet. Be the first to create one!'
    blocks : list[str] = [f'[{post.id}] {post.title}\n  {post.display_date()}\n  {post.content}'
                          for post in state.posts]
    return '\n\n'.join(blocks)


def show_modal(state: ClientState, assume_yes: bool = False) -> None:
    '''Present the current modal; a Confirm is answered on the terminal.'''
    modal = state.modal
    if isinstance(modal, Info):
        click.echo(modal.text, err=state.error is not None)
    elif isinstance(modal, Confirm):
        if assume_yes or click.confirm(modal.text, default=False):
            modal.on_affirm()
        else:
            modal.on_decline()


def _finish(controller: BlogController, list_after: bool = True) -> None:
    show_modal(controller.state)
    if list_after and controller.state.error is None:
        click.echo(render_posts(controller.state))
    if controller.state.error is not None:
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option('--api-url', default=None, help='Base URL of the blog API.')
@click.option('--log-level', default='WARNING', show_default=True)
@click.pass_context
def cli(ctx: click.Context, api_url: Optional[str], log_level: str) -> None:
    '''Simple Blog: create, read, update and delete posts.'''
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj['api_url'] = api_url or ClientConfig.API_URL


def _controller(ctx: click.Context) -> BlogController:
    client : PostsClient = PostsClient(base_url=ctx.obj['api_url'])
    ctx.call_on_close(client.close)
    return BlogController(client)


@cli.command('serve')
def serve() -> None:
    '''Run the blog API server.'''
    from .app import main
    main()


@cli.command('list')
@click.pass_context
def list_posts(ctx: click.Context) -> None:
    '''List all posts, newest first.'''
    controller : BlogController = _controller(ctx)
    controller.refresh()
    _finish(controller)


@cli.command('add')
@click.option('--title', prompt=True)
@click.option('--content', prompt=True)
@click.pass_context
def add_post(ctx: click.Context, title: str, content: str) -> None:
    '''Craft a new post.'''
    controller : BlogController = _controller(ctx)
    controller.set_title(title)
    controller.set_content(content)
    controller.submit()
    _finish(controller)


@cli.command('edit')
@click.argument('post_id')
@click.option('--title', default=None)
@click.option('--content', default=None)
@click.pass_context
def edit_post(ctx: click.Context, post_id: str, title: Optional[str], content: Optional[str]) -> None:
    '''Edit an existing post; omitted fields keep their value.'''
    controller : BlogController = _controller(ctx)
    controller.refresh()
    if controller.state.error is not None:
        _finish(controller, list_after=False)
    post : Optional[Post] = next((p for p in controller.state.posts if p.id == post_id), None)
    if post is None:
        click.echo(f'Error: Post {post_id} not found.', err=True)
        sys.exit(1)
    controller.begin_edit(post)
    if title is not None:
        controller.set_title(title)
    if content is not None:
        controller.set_content(content)
    controller.submit()
    _finish(controller)


@cli.command('delete')
@click.argument('post_id')
@click.option('--yes', is_flag=True, help='Do not ask for confirmation.')
@click.pass_context
def delete_post(ctx: click.Context, post_id: str, yes: bool) -> None:
    '''Delete a post after confirmation.'''
    controller : BlogController = _controller(ctx)
    controller.request_delete(post_id)
    show_modal(controller.state, assume_yes=yes)
    if controller.state.modal is None:
        return
    _finish(controller)


def main() -> Any:
    return cli(obj={})


if __name__ == '__main__':
    main()
