"""
Repository Module - Uniform CRUD over the portfolio tables

Repositories take already validated field dicts (see utils.validation) and
return model instances. Store failures are rolled back and re-raised as
StorageError; unknown ids raise NotFound.
"""

from datetime import timedelta
from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import Profile, Project, Skill, Experience, utcnow
from .errors import NotFound, StorageError


def _commit(action, entity_name):
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error during {action} {entity_name}: {str(e)}")
        raise StorageError(f"Failed to {action} {entity_name}") from e


def _next_timestamp(previous):
    """Current time, nudged forward so updated_at never stands still"""
    now = utcnow()
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


class Repository:
    """CRUD operations for one collection model"""

    model = None
    entity_name = 'entity'

    def _query(self):
        return self.model.query

    def list(self):
        try:
            return self._query().order_by(self.model.created_at.asc()).all()
        except SQLAlchemyError as e:
            current_app.logger.error(f"Error listing {self.entity_name}: {str(e)}")
            raise StorageError(f"Failed to load {self.entity_name}") from e

    def get(self, entity_id):
        try:
            entity = db.session.get(self.model, entity_id)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load {self.entity_name}") from e
        if entity is None:
            raise NotFound(f"{self.entity_name.capitalize()} not found")
        return entity

    def _latest_created(self):
        try:
            return db.session.query(func.max(self.model.created_at)).scalar()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load {self.entity_name}") from e

    def create(self, fields):
        entity = self.model(**fields)
        # Strictly after the newest row so listing order matches insertion order
        now = _next_timestamp(self._latest_created())
        entity.created_at = now
        if hasattr(self.model, 'updated_at'):
            entity.updated_at = now
        db.session.add(entity)
        _commit('create', self.entity_name)
        current_app.logger.info(f"Created {self.entity_name} {entity.id}")
        return entity

    def update(self, entity_id, fields):
        entity = self.get(entity_id)
        for name, value in fields.items():
            setattr(entity, name, value)
        if hasattr(self.model, 'updated_at'):
            entity.updated_at = _next_timestamp(entity.updated_at)
        _commit('update', self.entity_name)
        current_app.logger.info(f"Updated {self.entity_name} {entity_id}")
        return entity

    def delete(self, entity_id):
        entity = self.get(entity_id)
        db.session.delete(entity)
        _commit('delete', self.entity_name)
        current_app.logger.info(f"Deleted {self.entity_name} {entity_id}")


class ProjectRepository(Repository):
    model = Project
    entity_name = 'project'


class SkillRepository(Repository):
    model = Skill
    entity_name = 'skill'


class ExperienceRepository(Repository):
    model = Experience
    entity_name = 'experience'


class ProfileRepository:
    """The profile is a singleton: reads resolve to the first row, updates upsert"""

    def find(self):
        try:
            return Profile.query.order_by(Profile.created_at.asc()).first()
        except SQLAlchemyError as e:
            raise StorageError('Failed to load profile') from e

    def get(self):
        profile = self.find()
        if profile is None:
            raise NotFound('Profile not found')
        return profile

    def update(self, fields):
        profile = self.find()
        if profile is None:
            now = utcnow()
            profile = Profile(created_at=now, updated_at=now, **fields)
            db.session.add(profile)
            _commit('create', 'profile')
            current_app.logger.info(f"Created profile {profile.id}")
            return profile

        for name, value in fields.items():
            setattr(profile, name, value)
        profile.updated_at = _next_timestamp(profile.updated_at)
        _commit('update', 'profile')
        current_app.logger.info(f"Updated profile {profile.id}")
        return profile


profiles = ProfileRepository()
projects = ProjectRepository()
skills = SkillRepository()
experience = ExperienceRepository()


__all__ = [
    'Repository',
    'ProjectRepository',
    'SkillRepository',
    'ExperienceRepository',
    'ProfileRepository',
    'profiles',
    'projects',
    'skills',
    'experience'
]
