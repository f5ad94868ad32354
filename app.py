"""
Portfolio CMS - Main Application Entry Point
Application Factory Pattern for the portfolio API

This module initializes the Flask application with its extensions,
configuration, and middleware. All route handling is delegated to blueprints.
"""

import os
import click
from flask import Flask
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from config import get_config
from extensions import db, login_manager
from utils.errors import register_error_handlers, PortfolioError

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.portfolio import portfolio_bp
from blueprints.contact import contact_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Register CLI commands
    register_commands(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio API is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)

    # Create tables if they don't exist
    with app.app_context():
        try:
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except SQLAlchemyError as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(contact_bp)


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        if app.config.get('SESSION_COOKIE_SECURE'):
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


def register_commands(app):
    """Register maintenance commands on the flask CLI"""

    @app.cli.command('create-admin')
    @click.option('--email', default=None, help='Admin email (defaults to ADMIN_EMAIL)')
    @click.option('--password', default=None, help='Admin password (defaults to ADMIN_PASSWORD)')
    def create_admin(email, password):
        """Register the admin account"""
        from utils.security import register
        email = email or app.config.get('ADMIN_EMAIL')
        password = password or app.config.get('ADMIN_PASSWORD')
        if not email or not password:
            raise click.UsageError('Provide --email/--password or set ADMIN_EMAIL and ADMIN_PASSWORD')
        try:
            user = register(email, password)
        except PortfolioError as e:
            raise click.ClickException(e.message)
        click.echo(f"Created admin {user.email} ({user.id})")

    @app.cli.command('seed-portfolio')
    def seed_portfolio():
        """Fill empty tables with the default portfolio content"""
        from migrations.seed_portfolio import seed
        counts = seed()
        for name, count in counts.items():
            click.echo(f"{name}: {count} added")

    @app.cli.command('purge-sessions')
    def purge_sessions():
        """Delete expired admin sessions"""
        from utils.security import purge_expired_sessions
        click.echo(f"Removed {purge_expired_sessions()} expired sessions")


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', '5000')),
        debug=(env == 'development')
    )
