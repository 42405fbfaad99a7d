from flask_sqlalchemy import SQLAlchemy
from datetime import datetime, timezone
from typing import Any

db = SQLAlchemy()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(db.Model):
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    short_id = db.Column(db.String(20), unique=True, nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)

    def created_at_iso(self) -> str:
        created : datetime = self.created_at or utcnow()
        # sqlite hands back naive datetimes; they were written as UTC
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return created.isoformat()

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.short_id,
            '_id': self.short_id,
            'title': self.title,
            'content': self.content,
            'createdAt': self.created_at_iso(),
        }

    def __repr__(self) -> str:
        return f'<Post {self.short_id} {self.title!r}>'
