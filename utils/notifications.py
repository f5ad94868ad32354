"""
Notifications Module - Contact form email delivery over SMTP
"""

import html
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from flask import current_app
from .errors import ServiceUnavailable


def get_smtp_config():
    """Load SMTP transport settings from the app config"""
    return {
        'host': current_app.config.get('SMTP_HOST'),
        'port': int(current_app.config.get('SMTP_PORT') or 587),
        'secure': bool(current_app.config.get('SMTP_SECURE')),
        'user': current_app.config.get('SMTP_USER'),
        'password': current_app.config.get('SMTP_PASS'),
        'timeout': current_app.config.get('SMTP_TIMEOUT', 10)
    }


def is_mail_configured():
    smtp_config = get_smtp_config()
    return all([smtp_config['host'], smtp_config['user'], smtp_config['password']])


def get_contact_recipient(profile=None):
    """Profile email first, then CONTACT_EMAIL, then the built-in fallback"""
    if profile is not None and profile.email:
        return profile.email
    return (current_app.config.get('CONTACT_EMAIL')
            or current_app.config.get('CONTACT_FALLBACK_EMAIL', 'admin@example.com'))


def render_contact_email(name, email, message):
    """Build the subject and HTML body for a contact submission"""
    subject = f"Portfolio Contact: {name}"
    body = (
        "<h2>New Contact Form Submission</h2>"
        f"<p><strong>Name:</strong> {html.escape(name)}</p>"
        f"<p><strong>Email:</strong> {html.escape(email)}</p>"
        "<p><strong>Message:</strong></p>"
        f"<p>{html.escape(message).replace(chr(10), '<br>')}</p>"
    )
    return subject, body


def send_email(recipient, subject, body, html_body=True, reply_to=None):
    """
    Send an email through the configured SMTP transport

    Args:
        recipient (str): Email recipient
        subject (str): Email subject
        body (str): Email body
        html_body (bool): Whether body is HTML
        reply_to (str, optional): Reply-To header value

    Raises:
        ServiceUnavailable: transport not configured or delivery failed
    """
    if not is_mail_configured():
        current_app.logger.warning("Email send attempted without SMTP configuration")
        raise ServiceUnavailable('Email service not configured')

    smtp_config = get_smtp_config()

    msg = MIMEMultipart('alternative')
    msg['Subject'] = subject
    msg['From'] = smtp_config['user']
    msg['To'] = recipient
    if reply_to:
        msg['Reply-To'] = reply_to
    msg.attach(MIMEText(body, 'html' if html_body else 'plain'))

    try:
        if smtp_config['secure']:
            server = smtplib.SMTP_SSL(smtp_config['host'], smtp_config['port'],
                                      timeout=smtp_config['timeout'])
        else:
            server = smtplib.SMTP(smtp_config['host'], smtp_config['port'],
                                  timeout=smtp_config['timeout'])
        with server:
            if not smtp_config['secure']:
                server.starttls()
            server.login(smtp_config['user'], smtp_config['password'])
            server.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        current_app.logger.error(f"Error sending email to {recipient}: {str(e)}")
        raise ServiceUnavailable('Failed to send message') from e

    current_app.logger.info(f"Email sent to {recipient}")


def send_contact_message(name, email, message, profile=None):
    """Deliver a contact form submission to the portfolio owner"""
    recipient = get_contact_recipient(profile)
    subject, body = render_contact_email(name, email, message)
    send_email(recipient, subject, body, html_body=True, reply_to=email)
    return recipient
