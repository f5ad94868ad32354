"""
Seed Script: default portfolio content
Fills empty tables with the starter profile, projects, skills and experience.
Tables that already hold rows are left untouched.

Usage:
    python migrations/seed_portfolio.py [path/to/portfolio.json]
    flask --app app:create_app seed-portfolio
"""

import os
import sys
import json

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.data import get_default_portfolio_data
from utils.repository import profiles, projects, skills, experience
from utils.validation import validate_profile, validate_project, validate_skill, validate_experience


def seed_collection(repository, validator, items):
    """Insert items only when the collection is empty"""
    if repository.list():
        return 0
    for item in items:
        repository.create(validator(item))
    return len(items)


def seed(data=None):
    """
    Seed every empty table from `data` (defaults to the starter content)

    Returns:
        dict: number of rows added per table
    """
    data = data or get_default_portfolio_data()
    counts = {}

    profile_data = data.get('profile')
    if profile_data and profiles.find() is None:
        profiles.update(validate_profile(profile_data))
        counts['profile'] = 1
    else:
        counts['profile'] = 0

    counts['projects'] = seed_collection(projects, validate_project, data.get('projects', []))
    counts['skills'] = seed_collection(skills, validate_skill, data.get('skills', []))
    counts['experience'] = seed_collection(experience, validate_experience, data.get('experience', []))
    return counts


def main():
    """Main seed function"""
    from app import create_app

    print("=" * 60)
    print("Portfolio Seed Script")
    print("=" * 60)

    data = None
    if len(sys.argv) > 1:
        json_file = sys.argv[1]
        if not os.path.exists(json_file):
            print(f"Error: {json_file} not found!")
            return
        print(f"\nLoading data from {json_file}...")
        with open(json_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

    app = create_app()
    with app.app_context():
        counts = seed(data)

    for name, count in counts.items():
        print(f"  [OK] {name}: {count} added")
    print("\nSeed completed successfully!")


if __name__ == '__main__':
    main()
