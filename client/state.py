"""
Client State - Confirmed-write cache of the portfolio content

PortfolioStore is an explicit context object handed to whatever renders the
portfolio. It holds an immutable PortfolioState snapshot; every mutation
calls the API first and only swaps in a new snapshot once the server has
confirmed. A failed call leaves the snapshot untouched and re-raises
ApiError for the caller to report.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Dict, List, Optional

from .api import ApiError, PortfolioAPI

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    UNINITIALIZED = 'uninitialized'
    LOADING = 'loading'
    LOADED = 'loaded'
    LOAD_FAILED = 'load_failed'


SLICES = ('auth', 'profile', 'projects', 'skills', 'experience')


@dataclass(frozen=True)
class Profile:
    id: str
    name: str
    title: str
    bio: str
    email: str
    github: str = ''
    linkedin: str = ''
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            name=data['name'],
            title=data['title'],
            bio=data['bio'],
            email=data['email'],
            github=data.get('github') or '',
            linkedin=data.get('linkedin') or '',
            updated_at=data.get('updatedAt')
        )


@dataclass(frozen=True)
class Project:
    id: str
    title: str
    description: str
    image: str
    link: str = '#'
    tech: List[str] = field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            title=data['title'],
            description=data['description'],
            image=data['image'],
            link=data.get('link') or '#',
            tech=list(data.get('tech') or []),
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt')
        )


@dataclass(frozen=True)
class Skill:
    id: str
    name: str
    category: str
    created_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            name=data['name'],
            category=data['category'],
            created_at=data.get('createdAt')
        )


@dataclass(frozen=True)
class Experience:
    id: str
    role: str
    company: str
    period: str
    description: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            role=data['role'],
            company=data['company'],
            period=data['period'],
            description=data['description'],
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt')
        )


def _initial_status():
    return {name: LoadState.UNINITIALIZED for name in SLICES}


@dataclass(frozen=True)
class PortfolioState:
    profile: Optional[Profile] = None
    projects: List[Project] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    experience: List[Experience] = field(default_factory=list)
    is_authenticated: bool = False
    user_id: Optional[str] = None
    status: Dict[str, LoadState] = field(default_factory=_initial_status)
    errors: Dict[str, str] = field(default_factory=dict)


# Value a slice falls back to when its initial fetch fails
_EMPTY_SLICES = {
    'auth': {'is_authenticated': False, 'user_id': None},
    'profile': {'profile': None},
    'projects': {'projects': []},
    'skills': {'skills': []},
    'experience': {'experience': []},
}


def _empty_slice(name):
    return {key: (list(value) if isinstance(value, list) else value)
            for key, value in _EMPTY_SLICES[name].items()}


def _replace_item(items, updated):
    return [updated if item.id == updated.id else item for item in items]


def _remove_item(items, item_id):
    return [item for item in items if item.id != item_id]


class PortfolioStore:
    """State container with typed operations over a PortfolioAPI"""

    def __init__(self, api: PortfolioAPI, max_workers: int = len(SLICES)):
        self.api = api
        self.max_workers = max_workers
        self.state = PortfolioState()
        self._listeners: List[Callable[[PortfolioState], None]] = []

    def subscribe(self, listener: Callable[[PortfolioState], None]) -> Callable[[], None]:
        """Call listener with every new snapshot; returns an unsubscribe function"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _commit(self, **changes) -> PortfolioState:
        self.state = replace(self.state, **changes)
        for listener in list(self._listeners):
            listener(self.state)
        return self.state

    # ==================== HYDRATION ====================

    def _load_auth(self):
        try:
            me = self.api.me()
        except ApiError as e:
            if e.status_code == 401:
                return _empty_slice('auth')
            raise
        return {'is_authenticated': True, 'user_id': me.get('userId')}

    def _load_profile(self):
        try:
            return {'profile': Profile.from_dict(self.api.get_profile())}
        except ApiError as e:
            if e.status_code == 404:
                return _empty_slice('profile')
            raise

    def _load_projects(self):
        return {'projects': [Project.from_dict(p) for p in self.api.list_projects()]}

    def _load_skills(self):
        return {'skills': [Skill.from_dict(s) for s in self.api.list_skills()]}

    def _load_experience(self):
        return {'experience': [Experience.from_dict(e) for e in self.api.list_experience()]}

    def hydrate(self) -> PortfolioState:
        """
        Fetch every slice in parallel

        A failing fetch degrades only its own slice to an empty value and
        marks it LOAD_FAILED; the other slices still load.
        """
        loaders = {
            'auth': self._load_auth,
            'profile': self._load_profile,
            'projects': self._load_projects,
            'skills': self._load_skills,
            'experience': self._load_experience,
        }
        self._commit(status={name: LoadState.LOADING for name in SLICES}, errors={})

        # Workers share self.api.session only for these read-only GETs; nothing
        # here logs in or out, so the session's cookie jar is not written.
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {name: executor.submit(loader) for name, loader in loaders.items()}

        changes = {}
        status = {}
        errors = {}
        for name, future in futures.items():
            try:
                changes.update(future.result())
                status[name] = LoadState.LOADED
            except (ApiError, KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Failed to load {name}: {str(e)}")
                changes.update(_empty_slice(name))
                status[name] = LoadState.LOAD_FAILED
                errors[name] = getattr(e, 'message', None) or str(e)

        return self._commit(status=status, errors=errors, **changes)

    # ==================== AUTH ====================

    def login(self, email: str, password: str) -> PortfolioState:
        result = self.api.login(email, password)
        return self._commit(is_authenticated=True, user_id=result.get('userId'))

    def logout(self) -> PortfolioState:
        self.api.logout()
        return self._commit(is_authenticated=False, user_id=None)

    # ==================== PROFILE ====================

    def update_profile(self, name: str, title: str, bio: str, email: str,
                       github: str = '', linkedin: str = '') -> Profile:
        profile = Profile.from_dict(self.api.update_profile({
            'name': name,
            'title': title,
            'bio': bio,
            'email': email,
            'github': github,
            'linkedin': linkedin
        }))
        self._commit(profile=profile)
        return profile

    # ==================== PROJECTS ====================

    def add_project(self, title: str, description: str, image: str,
                    tech=None, link: str = '#') -> Project:
        project = Project.from_dict(self.api.create_project({
            'title': title,
            'description': description,
            'image': image,
            'link': link,
            'tech': tech if tech is not None else []
        }))
        self._commit(projects=self.state.projects + [project])
        return project

    def update_project(self, project_id: str, **changes) -> Project:
        project = Project.from_dict(self.api.update_project(project_id, changes))
        self._commit(projects=_replace_item(self.state.projects, project))
        return project

    def delete_project(self, project_id: str) -> None:
        self.api.delete_project(project_id)
        self._commit(projects=_remove_item(self.state.projects, project_id))

    # ==================== SKILLS ====================

    def add_skill(self, name: str, category: str) -> Skill:
        skill = Skill.from_dict(self.api.create_skill({'name': name, 'category': category}))
        self._commit(skills=self.state.skills + [skill])
        return skill

    def update_skill(self, skill_id: str, **changes) -> Skill:
        skill = Skill.from_dict(self.api.update_skill(skill_id, changes))
        self._commit(skills=_replace_item(self.state.skills, skill))
        return skill

    def delete_skill(self, skill_id: str) -> None:
        self.api.delete_skill(skill_id)
        self._commit(skills=_remove_item(self.state.skills, skill_id))

    # ==================== EXPERIENCE ====================

    def add_experience(self, role: str, company: str, period: str, description: str) -> Experience:
        entry = Experience.from_dict(self.api.create_experience({
            'role': role,
            'company': company,
            'period': period,
            'description': description
        }))
        self._commit(experience=self.state.experience + [entry])
        return entry

    def update_experience(self, experience_id: str, **changes) -> Experience:
        entry = Experience.from_dict(self.api.update_experience(experience_id, changes))
        self._commit(experience=_replace_item(self.state.experience, entry))
        return entry

    def delete_experience(self, experience_id: str) -> None:
        self.api.delete_experience(experience_id)
        self._commit(experience=_remove_item(self.state.experience, experience_id))

    # ==================== CONTACT ====================

    def send_contact(self, name: str, email: str, message: str) -> None:
        """Contact messages do not touch the cached state"""
        self.api.send_contact(name, email, message)
