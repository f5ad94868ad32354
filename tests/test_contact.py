from utils import notifications, repository

from conftest import FakeSMTP


MESSAGE = {'name': 'Jo <b>', 'email': 'jo@mail.dev', 'message': 'Hello\nthere'}


def _set_profile(auth_client, email):
    auth_client.put('/api/profile', json={
        'name': 'Nikita',
        'title': 'Developer',
        'bio': 'Bio',
        'email': email
    })


def test_missing_message_is_rejected_before_dispatch(client, outbox):
    response = client.post('/api/contact', json={'name': 'Jo', 'email': 'jo@mail.dev'})
    assert response.status_code == 400
    assert response.get_json()['message'] == 'Missing required fields: message'
    assert outbox == []


def test_invalid_sender_email_is_rejected(client, outbox):
    response = client.post('/api/contact', json=dict(MESSAGE, email='nope'))
    assert response.status_code == 400
    assert outbox == []


def test_unconfigured_transport_fails_loudly(client):
    response = client.post('/api/contact', json=MESSAGE)
    assert response.status_code == 500
    assert response.get_json() == {'message': 'Email service not configured'}


def test_unconfigured_transport_skips_profile_lookup(client, monkeypatch):
    lookups = []
    monkeypatch.setattr(repository.profiles, 'find', lambda: lookups.append(True))

    response = client.post('/api/contact', json=MESSAGE)
    assert response.status_code == 500
    assert lookups == []


def test_message_goes_to_profile_email(auth_client, outbox):
    _set_profile(auth_client, 'owner@portfolio.dev')

    response = auth_client.post('/api/contact', json=MESSAGE)
    assert response.status_code == 200
    assert response.get_json() == {'message': 'Message sent successfully'}

    assert len(outbox) == 1
    sent = outbox[0]
    assert sent['To'] == 'owner@portfolio.dev'
    assert sent['From'] == 'mailer@portfolio.dev'
    assert sent['Reply-To'] == 'jo@mail.dev'
    assert sent['Subject'] == 'Portfolio Contact: Jo <b>'
    body = sent.get_payload()[0].get_payload(decode=True).decode()
    assert 'Jo &lt;b&gt;' in body
    assert 'Hello<br>there' in body


def test_recipient_falls_back_to_config(app, client, outbox):
    app.config['CONTACT_EMAIL'] = 'inbox@portfolio.dev'
    client.post('/api/contact', json=MESSAGE)
    assert outbox[-1]['To'] == 'inbox@portfolio.dev'

    app.config['CONTACT_EMAIL'] = None
    client.post('/api/contact', json=MESSAGE)
    assert outbox[-1]['To'] == 'admin@example.com'


def test_transport_failure_is_reported(client, outbox, monkeypatch):
    monkeypatch.setattr(FakeSMTP, 'fail', True)
    response = client.post('/api/contact', json=MESSAGE)
    assert response.status_code == 500
    assert response.get_json() == {'message': 'Failed to send message'}


def test_render_contact_email_escapes_input():
    subject, body = notifications.render_contact_email('Jo', 'jo@mail.dev', '<script>x</script>')
    assert subject == 'Portfolio Contact: Jo'
    assert '<script>' not in body
