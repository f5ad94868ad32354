"""
Security Module - Admin accounts, password hashing and server-side sessions

Sessions live in the `sessions` table so they survive restarts. The browser
only holds the random token, inside Flask's signed session cookie.
"""

import secrets
from datetime import timedelta
from flask import current_app, session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.security import generate_password_hash, check_password_hash
from extensions import db, login_manager
from models import User, AdminSession, utcnow
from .errors import AlreadyExists, InvalidCredentials, Unauthorized, StorageError
from .validation import validate_credentials


SESSION_TOKEN_KEY = 'session_token'
DEFAULT_SESSION_LIFETIME_DAYS = 30

# Checked against when the email is unknown so both login failures cost the same
_DUMMY_PASSWORD_HASH = generate_password_hash(secrets.token_hex(16))


def hash_password(password):
    """Salted one-way hash of a raw password"""
    return generate_password_hash(password)


def verify_password(password, password_hash):
    """Verify password against hash"""
    return check_password_hash(password_hash, password)


def get_session_lifetime():
    days = current_app.config.get('SESSION_LIFETIME_DAYS', DEFAULT_SESSION_LIFETIME_DAYS)
    return timedelta(days=days)


def get_user_by_email(email):
    return User.query.filter_by(email=email).first()


def register(email, password):
    """Create an admin account; fails if the email is already registered"""
    fields = validate_credentials({'email': email, 'password': password})
    email = fields['email']

    if get_user_by_email(email):
        raise AlreadyExists('User already exists')

    user = User(email=email, password_hash=hash_password(fields['password']))
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise AlreadyExists('User already exists') from e
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error registering admin {email}: {str(e)}")
        raise StorageError('Failed to create user') from e

    current_app.logger.info(f"Admin account created: {email}")
    return user


def login(email, password):
    """
    Verify credentials and issue a server-side session record

    Unknown email and wrong password raise the same InvalidCredentials error.

    Returns:
        AdminSession: the stored session, whose token goes to the client
    """
    user = get_user_by_email(email) if email else None
    if user is None:
        check_password_hash(_DUMMY_PASSWORD_HASH, password or '')
        raise InvalidCredentials()
    if not verify_password(password or '', user.password_hash):
        raise InvalidCredentials()

    now = utcnow()
    record = AdminSession(
        token=secrets.token_urlsafe(32),
        user_id=user.id,
        created_at=now,
        expires_at=now + get_session_lifetime()
    )
    try:
        db.session.add(record)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating session for {user.email}: {str(e)}")
        raise StorageError('Failed to create session') from e
    return record


def logout(token):
    """Invalidate a session token; unknown tokens are ignored"""
    if not token:
        return
    try:
        AdminSession.query.filter_by(token=token).delete()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageError('Failed to logout') from e


def current_user(token):
    """Resolve a session token to its account or raise Unauthorized"""
    if not token:
        raise Unauthorized()

    record = db.session.get(AdminSession, token)
    if record is None:
        raise Unauthorized()

    if record.is_expired():
        logout(token)
        raise Unauthorized('Session expired')

    user = db.session.get(User, record.user_id)
    if user is None:
        raise Unauthorized()
    return user


def purge_expired_sessions():
    """Delete every expired session row, returning how many were removed"""
    try:
        removed = AdminSession.query.filter(AdminSession.expires_at <= utcnow()).delete()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageError('Failed to purge sessions') from e
    if removed:
        current_app.logger.info(f"Purged {removed} expired sessions")
    return removed


def start_session(record):
    """Store the issued token in the signed session cookie"""
    session.clear()
    session.permanent = True
    session[SESSION_TOKEN_KEY] = record.token


def end_session():
    token = session.pop(SESSION_TOKEN_KEY, None)
    session.clear()
    return token


@login_manager.request_loader
def load_user_from_request(request):
    """Flask-Login hook: resolve the cookie's session token to an account"""
    try:
        return current_user(session.get(SESSION_TOKEN_KEY))
    except Unauthorized:
        return None


__all__ = [
    'hash_password',
    'verify_password',
    'register',
    'login',
    'logout',
    'current_user',
    'purge_expired_sessions',
    'start_session',
    'end_session',
    'SESSION_TOKEN_KEY'
]
