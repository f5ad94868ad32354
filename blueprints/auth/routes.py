"""
Auth Routes - Admin registration and session management
"""

from flask import jsonify, request, current_app
from flask_login import current_user
from utils import security
from utils.data import user_to_dict
from utils.errors import InvalidCredentials
from utils.decorators import login_required
from utils.validation import validate_credentials, validate_login
from . import auth_bp


@auth_bp.route('/register', methods=['POST'])
def register():
    """Create an admin account"""
    fields = validate_credentials(request.get_json(silent=True) or {})
    user = security.register(fields['email'], fields['password'])
    return jsonify({'message': 'User created successfully', 'userId': user.id}), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    """Verify credentials and start a session"""
    fields = validate_login(request.get_json(silent=True) or {})
    try:
        record = security.login(fields['email'], fields['password'])
    except InvalidCredentials:
        current_app.logger.warning(f"Failed login for {fields['email']}")
        raise

    security.start_session(record)
    current_app.logger.info(f"Admin login: {fields['email']}")
    return jsonify({'message': 'Login successful', 'userId': record.user_id})


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Logout current session; already-invalid sessions are fine"""
    security.logout(security.end_session())
    return jsonify({'message': 'Logout successful'})


@auth_bp.route('/me', methods=['GET'])
@login_required
def me():
    """Return the account behind the current session"""
    return jsonify(user_to_dict(current_user))
