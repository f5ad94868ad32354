"""
Portfolio Routes - Profile, projects, skills and experience

Reads are public. Every mutation goes through login_required first and then
through the payload validators, so nothing reaches the repository unless the
session is valid and the input is clean.
"""

from flask import jsonify, request
from utils.data import profile_to_dict, project_to_dict, skill_to_dict, experience_to_dict
from utils.decorators import login_required
from utils.repository import profiles, projects, skills, experience
from utils.validation import validate_profile, validate_project, validate_skill, validate_experience
from . import portfolio_bp


def _json_body():
    return request.get_json(silent=True)


# ==================== PROFILE ====================

@portfolio_bp.route('/profile', methods=['GET'])
def get_profile():
    return jsonify(profile_to_dict(profiles.get()))


@portfolio_bp.route('/profile', methods=['PUT'])
@login_required
def update_profile():
    """Replace the profile fields, creating the profile on first save"""
    fields = validate_profile(_json_body())
    return jsonify(profile_to_dict(profiles.update(fields)))


# ==================== PROJECTS ====================

@portfolio_bp.route('/projects', methods=['GET'])
def list_projects():
    return jsonify([project_to_dict(p) for p in projects.list()])


@portfolio_bp.route('/projects/<project_id>', methods=['GET'])
def get_project(project_id):
    return jsonify(project_to_dict(projects.get(project_id)))


@portfolio_bp.route('/projects', methods=['POST'])
@login_required
def create_project():
    fields = validate_project(_json_body())
    return jsonify(project_to_dict(projects.create(fields))), 201


@portfolio_bp.route('/projects/<project_id>', methods=['PUT'])
@login_required
def update_project(project_id):
    fields = validate_project(_json_body(), partial=True)
    return jsonify(project_to_dict(projects.update(project_id, fields)))


@portfolio_bp.route('/projects/<project_id>', methods=['DELETE'])
@login_required
def delete_project(project_id):
    projects.delete(project_id)
    return jsonify({'message': 'Project deleted successfully'})


# ==================== SKILLS ====================

@portfolio_bp.route('/skills', methods=['GET'])
def list_skills():
    return jsonify([skill_to_dict(s) for s in skills.list()])


@portfolio_bp.route('/skills/<skill_id>', methods=['GET'])
def get_skill(skill_id):
    return jsonify(skill_to_dict(skills.get(skill_id)))


@portfolio_bp.route('/skills', methods=['POST'])
@login_required
def create_skill():
    fields = validate_skill(_json_body())
    return jsonify(skill_to_dict(skills.create(fields))), 201


@portfolio_bp.route('/skills/<skill_id>', methods=['PUT'])
@login_required
def update_skill(skill_id):
    fields = validate_skill(_json_body(), partial=True)
    return jsonify(skill_to_dict(skills.update(skill_id, fields)))


@portfolio_bp.route('/skills/<skill_id>', methods=['DELETE'])
@login_required
def delete_skill(skill_id):
    skills.delete(skill_id)
    return jsonify({'message': 'Skill deleted successfully'})


# ==================== EXPERIENCE ====================

@portfolio_bp.route('/experience', methods=['GET'])
def list_experience():
    return jsonify([experience_to_dict(e) for e in experience.list()])


@portfolio_bp.route('/experience/<experience_id>', methods=['GET'])
def get_experience(experience_id):
    return jsonify(experience_to_dict(experience.get(experience_id)))


@portfolio_bp.route('/experience', methods=['POST'])
@login_required
def create_experience():
    fields = validate_experience(_json_body())
    return jsonify(experience_to_dict(experience.create(fields))), 201


@portfolio_bp.route('/experience/<experience_id>', methods=['PUT'])
@login_required
def update_experience(experience_id):
    fields = validate_experience(_json_body(), partial=True)
    return jsonify(experience_to_dict(experience.update(experience_id, fields)))


@portfolio_bp.route('/experience/<experience_id>', methods=['DELETE'])
@login_required
def delete_experience(experience_id):
    experience.delete(experience_id)
    return jsonify({'message': 'Experience deleted successfully'})
