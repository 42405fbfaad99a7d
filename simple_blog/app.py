import sys
from typing import Any, Mapping, Optional
from flask import Flask, Response, jsonify
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from .models import db
from .api import posts_bp
from .config import Config, configure_logging
from .errors import BlogError, StoreInitError

LIVENESS_MESSAGE : str = 'Simple Blog API is running!'


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    '''Build the API application and make sure the post store is usable.

    Raises StoreInitError when the store cannot be reached, so a process
    never starts serving against a half-initialized store.
    '''
    app : Flask = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    app.json.sort_keys = app.config['JSON_SORT_KEYS']

    db.init_app(app)
    CORS(app, origins=app.config['CORS_ORIGINS'])

    app.register_blueprint(posts_bp, url_prefix='/posts')
    app.register_blueprint(posts_bp, url_prefix='/api/posts', name='api_posts')

    register_error_handlers(app)

    @app.route('/')
    def index() -> Response:
        return Response(LIVENESS_MESSAGE, mimetype='text/plain')

    with app.app_context():
        try:
            db.create_all()
        except SQLAlchemyError as exc:
            app.logger.critical('Failed to initialize the post store: %s', exc)
            raise StoreInitError(f'Failed to initialize the post store: {exc}') from exc
        app.logger.info('Post store ready at %s', db.engine.url.render_as_string(hide_password=True))
    return app


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(BlogError)
    def blog_error(error: BlogError) -> tuple[Response, int]:
        return jsonify({'message': error.message}), error.status_code or 500

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException) -> tuple[Response, int]:
        return jsonify({'message': error.description}), error.code or 500


def main() -> None:
    configure_logging()
    try:
        app : Flask = create_app()
    except StoreInitError as exc:
        print(f'CRITICAL ERROR: {exc.message}', file=sys.stderr)
        sys.exit(1)
    host : str = app.config['HOST']
    port : int = app.config['PORT']
    print(f'Simple Blog server running on http://{host}:{port}')
    app.run(host=host, port=port)


if __name__ == '__main__':
    main()
