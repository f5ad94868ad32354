import pytest

from app import create_app
from extensions import db
from utils import security


ADMIN_EMAIL = 'a@b.com'
ADMIN_PASSWORD = 'pw'


@pytest.fixture
def app():
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def anon_client(app):
    return app.test_client()


@pytest.fixture
def admin_id(app):
    with app.app_context():
        return security.register(ADMIN_EMAIL, ADMIN_PASSWORD).id


@pytest.fixture
def auth_client(client, admin_id):
    response = client.post('/api/auth/login', json={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


class FakeSMTP:
    """Records messages instead of talking to a mail server"""
    outbox = None
    fail = False

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.credentials = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        pass

    def login(self, user, password):
        self.credentials = (user, password)

    def send_message(self, msg):
        if FakeSMTP.fail:
            raise ConnectionRefusedError('connection refused')
        FakeSMTP.outbox.append(msg)


@pytest.fixture
def outbox(app, monkeypatch):
    """Configure SMTP and capture sent mail"""
    import smtplib

    app.config.update(
        SMTP_HOST='smtp.mailer.dev',
        SMTP_PORT=587,
        SMTP_USER='mailer@portfolio.dev',
        SMTP_PASS='secret'
    )
    sent = []
    monkeypatch.setattr(FakeSMTP, 'outbox', sent)
    monkeypatch.setattr(FakeSMTP, 'fail', False)
    monkeypatch.setattr(smtplib, 'SMTP', FakeSMTP)
    return sent


class FlaskResponse:
    def __init__(self, response):
        self.status_code = response.status_code
        self._response = response

    def json(self):
        data = self._response.get_json(silent=True)
        if data is None:
            raise ValueError('Response body is not JSON')
        return data


class FlaskSession:
    """requests.Session stand-in that routes calls into a Flask test client"""

    def __init__(self, client):
        self.client = client

    def request(self, method, url, json=None, timeout=None):
        return FlaskResponse(self.client.open(url, method=method, json=json))


@pytest.fixture
def make_store():
    """Build a PortfolioStore talking to the app through a test client"""
    from client import PortfolioAPI, PortfolioStore

    def factory(test_client):
        return PortfolioStore(PortfolioAPI(session=FlaskSession(test_client)), max_workers=1)
    return factory
