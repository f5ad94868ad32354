"""
Contact Routes - Portfolio contact form processing
"""

from flask import jsonify, request, current_app
from utils.errors import ServiceUnavailable
from utils.notifications import is_mail_configured, send_contact_message
from utils.repository import profiles
from utils.validation import validate_contact
from . import contact_bp


@contact_bp.route('/contact', methods=['POST'])
def contact():
    """Validate the submission, then mail it to the portfolio owner"""
    fields = validate_contact(request.get_json(silent=True) or {})

    if not is_mail_configured():
        current_app.logger.warning("Contact form submitted without SMTP configuration")
        raise ServiceUnavailable('Email service not configured')

    recipient = send_contact_message(
        fields['name'],
        fields['email'],
        fields['message'],
        profile=profiles.find()
    )
    current_app.logger.info(f"Contact message from {fields['email']} sent to {recipient}")
    return jsonify({'message': 'Message sent successfully'})
