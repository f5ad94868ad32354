import pytest

from client import ApiError, LoadState, PortfolioStore
from client.state import SLICES
from utils.data import get_default_portfolio_data

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD


@pytest.fixture
def seeded(app):
    from migrations.seed_portfolio import seed
    with app.app_context():
        seed()


def test_hydrate_loads_every_slice(seeded, client, make_store):
    store = make_store(client)
    assert all(status == LoadState.UNINITIALIZED for status in store.state.status.values())

    state = store.hydrate()
    defaults = get_default_portfolio_data()

    assert all(state.status[name] == LoadState.LOADED for name in SLICES)
    assert state.is_authenticated is False
    assert state.profile.name == defaults['profile']['name']
    assert [p.title for p in state.projects] == [p['title'] for p in defaults['projects']]
    assert state.projects[0].tech == ['Next.js', 'Tailwind', 'Recharts']
    assert [s.name for s in state.skills] == [s['name'] for s in defaults['skills']]
    assert len(state.experience) == 2


def test_hydrate_without_profile(client, make_store):
    state = make_store(client).hydrate()
    assert state.profile is None
    assert state.status['profile'] == LoadState.LOADED
    assert state.projects == []


def test_confirmed_writes_mirror_the_server(client, admin_id, make_store):
    store = make_store(client)
    store.hydrate()

    store.login(ADMIN_EMAIL, ADMIN_PASSWORD)
    assert store.state.is_authenticated
    assert store.state.user_id == admin_id

    project = store.add_project('X', 'A project', 'https://img.dev/x.png', tech='React, Go')
    assert project.tech == ['React', 'Go']
    store.update_project(project.id, title='Y')
    skill = store.add_skill('Flask', 'Backend')
    entry = store.add_experience('Engineer', 'Acme', '2020 - 2021', 'Built things')
    store.update_experience(entry.id, company='Globex')
    store.update_profile('Nikita', 'Developer', 'Bio', 'hello@nikita.dev')

    fresh = make_store(client).hydrate()
    assert fresh.projects == store.state.projects
    assert fresh.skills == store.state.skills
    assert fresh.experience == store.state.experience
    assert fresh.profile == store.state.profile
    assert store.state.projects[0].title == 'Y'
    assert store.state.experience[0].company == 'Globex'

    store.delete_skill(skill.id)
    store.delete_project(project.id)
    store.delete_experience(entry.id)
    assert store.state.skills == store.state.projects == store.state.experience == []

    store.logout()
    assert store.state.is_authenticated is False


def test_failed_write_leaves_state_untouched(client, admin_id, make_store):
    store = make_store(client)
    store.hydrate()
    store.login(ADMIN_EMAIL, ADMIN_PASSWORD)
    store.add_skill('Flask', 'Backend')
    before = store.state

    with pytest.raises(ApiError) as exc:
        store.add_skill('Docker', 'DevOps')
    assert exc.value.status_code == 400
    assert store.state is before

    with pytest.raises(ApiError) as exc:
        store.delete_project('missing')
    assert exc.value.status_code == 404
    assert store.state is before


def test_unauthenticated_write_is_surfaced(client, make_store):
    store = make_store(client)
    store.hydrate()
    before = store.state

    with pytest.raises(ApiError) as exc:
        store.add_skill('Flask', 'Backend')
    assert exc.value.status_code == 401
    assert exc.value.message == 'Unauthorized'
    assert store.state is before


def test_wrong_password_keeps_logged_out(client, admin_id, make_store):
    store = make_store(client)
    with pytest.raises(ApiError) as exc:
        store.login(ADMIN_EMAIL, 'wrong')
    assert exc.value.status_code == 401
    assert store.state.is_authenticated is False


class FlakyAPI:
    """API double whose project and profile fetches fail"""

    def me(self):
        return {'userId': 'u1', 'email': ADMIN_EMAIL}

    def get_profile(self):
        raise ApiError(500, 'Storage failure')

    def list_projects(self):
        raise ApiError(0, 'connection reset')

    def list_skills(self):
        return [{'id': 's1', 'name': 'Go', 'category': 'Backend', 'createdAt': None}]

    def list_experience(self):
        return [{'id': 'e1', 'role': 'Dev'}]


def test_hydrate_isolates_failures_per_slice():
    store = PortfolioStore(FlakyAPI())
    state = store.hydrate()

    assert state.is_authenticated is True
    assert state.status['auth'] == LoadState.LOADED
    assert state.profile is None
    assert state.status['profile'] == LoadState.LOAD_FAILED
    assert state.errors['profile'] == 'Storage failure'
    assert state.projects == []
    assert state.status['projects'] == LoadState.LOAD_FAILED
    assert [s.name for s in state.skills] == ['Go']
    assert state.status['skills'] == LoadState.LOADED
    # malformed rows degrade the slice too
    assert state.experience == []
    assert state.status['experience'] == LoadState.LOAD_FAILED


def test_subscribers_see_each_confirmed_change(client, admin_id, make_store):
    store = make_store(client)
    seen = []
    unsubscribe = store.subscribe(seen.append)

    store.hydrate()
    store.login(ADMIN_EMAIL, ADMIN_PASSWORD)
    assert [s.status['projects'] for s in seen[:2]] == [LoadState.LOADING, LoadState.LOADED]
    assert seen[-1].is_authenticated

    unsubscribe()
    store.logout()
    assert seen[-1].is_authenticated is True
