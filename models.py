from extensions import db
from datetime import datetime, timezone
from flask_login import UserMixin
import json
import uuid


def utcnow():
    """Naive UTC timestamp, matching what SQLite and PostgreSQL hand back"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id():
    return str(uuid.uuid4())


def serialize_tech(items):
    """Encode a technology list as a JSON array string"""
    return json.dumps(list(items or []), ensure_ascii=False)


def parse_tech(value):
    """Decode the stored technology string back into a list"""
    if value is None or value == '':
        return []
    if isinstance(value, list):
        return value
    try:
        parsed = json.loads(value)
    except ValueError:
        # Rows written as plain comma separated text
        return [item.strip() for item in value.split(',') if item.strip()]
    if isinstance(parsed, list):
        return [str(item) for item in parsed]
    return [str(parsed)]


# Technology list persisted as a single text column holding a JSON array
class TechList(db.TypeDecorator):
    impl = db.Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return serialize_tech([])
        if isinstance(value, str):
            return serialize_tech(parse_tech(value))
        return serialize_tech(value)

    def process_result_value(self, value, dialect):
        return parse_tech(value)


class User(UserMixin, db.Model):
    __tablename__ = 'users'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    sessions = db.relationship('AdminSession', backref='user', lazy=True, cascade='all, delete-orphan')


class AdminSession(db.Model):
    __tablename__ = 'sessions'
    token = db.Column(db.String(128), primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)

    __table_args__ = (
        db.Index('idx_sessions_expires_at', 'expires_at'),
    )

    def is_expired(self, now=None):
        return (now or utcnow()) >= self.expires_at


class Profile(db.Model):
    __tablename__ = 'profile'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.Text, nullable=False)
    title = db.Column(db.Text, nullable=False)
    bio = db.Column(db.Text, nullable=False)
    email = db.Column(db.String(255), nullable=False)
    github = db.Column(db.Text)
    linkedin = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, nullable=False)


class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    image = db.Column(db.Text, nullable=False)
    link = db.Column(db.Text, default='#')
    tech = db.Column(TechList, nullable=False, default=lambda: [])
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, nullable=False)


class Skill(db.Model):
    __tablename__ = 'skills'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(20), nullable=False)  # Frontend, Backend, Tools
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)


class Experience(db.Model):
    __tablename__ = 'experience'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    role = db.Column(db.Text, nullable=False)
    company = db.Column(db.Text, nullable=False)
    period = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, nullable=False)
