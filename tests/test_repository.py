import pytest
from sqlalchemy.exc import OperationalError

from extensions import db
from utils.errors import NotFound, StorageError
from utils.repository import profiles, projects, skills, experience


PROJECT = {
    'title': 'X',
    'description': 'A project',
    'image': 'https://img.dev/x.png',
    'link': '#',
    'tech': ['React', 'Go']
}


def test_create_returns_stored_row(ctx):
    created = projects.create(dict(PROJECT))
    assert created.id
    assert created.created_at is not None
    assert created.updated_at == created.created_at

    fetched = projects.get(created.id)
    assert fetched.id == created.id
    assert fetched.title == 'X'
    assert fetched.tech == ['React', 'Go']


def test_list_is_in_creation_order(ctx):
    names = ['React', 'Flask', 'Docker', 'Git']
    for name in names:
        skills.create({'name': name, 'category': 'Tools'})
    listed = skills.list()
    assert [s.name for s in listed] == names
    assert all(a.created_at < b.created_at for a, b in zip(listed, listed[1:]))


def test_update_changes_only_given_fields(ctx):
    entry = experience.create({
        'role': 'Engineer',
        'company': 'Acme',
        'period': '2020 - 2021',
        'description': 'Built things'
    })
    before = entry.updated_at

    updated = experience.update(entry.id, {'company': 'Globex'})
    assert updated.company == 'Globex'
    assert updated.role == 'Engineer'
    assert updated.period == '2020 - 2021'
    assert updated.updated_at > before

    # update() returns the same identity-mapped instance each time
    first = updated.updated_at
    again = experience.update(entry.id, {'company': 'Globex'})
    assert again.updated_at > first


def test_missing_ids_raise_not_found(ctx):
    with pytest.raises(NotFound):
        projects.get('missing')
    with pytest.raises(NotFound):
        projects.update('missing', {'title': 'Y'})
    with pytest.raises(NotFound):
        skills.delete('missing')
    with pytest.raises(NotFound):
        experience.delete('missing')


def test_delete_removes_row(ctx):
    created = projects.create(dict(PROJECT))
    projects.delete(created.id)
    assert projects.list() == []
    with pytest.raises(NotFound):
        projects.delete(created.id)


def test_profile_is_created_on_first_update(ctx):
    with pytest.raises(NotFound):
        profiles.get()

    fields = {
        'name': 'Nikita',
        'title': 'Developer',
        'bio': 'Bio',
        'email': 'hello@nikita.dev',
        'github': '',
        'linkedin': ''
    }
    first = profiles.update(fields)
    second = profiles.update(dict(fields, title='Lead Developer'))

    assert second.id == first.id
    assert profiles.get().title == 'Lead Developer'


def test_commit_failure_becomes_storage_error(ctx, monkeypatch):
    def broken_commit():
        raise OperationalError('INSERT', {}, Exception('database is locked'))

    monkeypatch.setattr(db.session, 'commit', broken_commit)
    with pytest.raises(StorageError) as exc:
        skills.create({'name': 'React', 'category': 'Frontend'})
    assert exc.value.status_code == 500
    monkeypatch.undo()

    assert skills.list() == []
