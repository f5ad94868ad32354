"""
Data Module - Converts portfolio models into their JSON wire representation
Keys are camelCase and timestamps ISO 8601, as the client layer expects.
"""


def _isoformat(value):
    return value.isoformat(timespec='microseconds') + 'Z' if value else None


def user_to_dict(user):
    """Convert admin account to the public auth payload"""
    return {
        'userId': user.id,
        'email': user.email
    }


def profile_to_dict(profile):
    """Convert profile model to dictionary"""
    return {
        'id': profile.id,
        'name': profile.name,
        'title': profile.title,
        'bio': profile.bio,
        'email': profile.email,
        'github': profile.github or '',
        'linkedin': profile.linkedin or '',
        'createdAt': _isoformat(profile.created_at),
        'updatedAt': _isoformat(profile.updated_at)
    }


def project_to_dict(project):
    """Convert project model to dictionary, tech always as a list"""
    return {
        'id': project.id,
        'title': project.title,
        'description': project.description,
        'image': project.image,
        'link': project.link or '#',
        'tech': list(project.tech or []),
        'createdAt': _isoformat(project.created_at),
        'updatedAt': _isoformat(project.updated_at)
    }


def skill_to_dict(skill):
    """Convert skill model to dictionary"""
    return {
        'id': skill.id,
        'name': skill.name,
        'category': skill.category,
        'createdAt': _isoformat(skill.created_at)
    }


def experience_to_dict(experience):
    """Convert experience model to dictionary"""
    return {
        'id': experience.id,
        'role': experience.role,
        'company': experience.company,
        'period': experience.period,
        'description': experience.description,
        'createdAt': _isoformat(experience.created_at),
        'updatedAt': _isoformat(experience.updated_at)
    }


# Default content for an empty portfolio, used by the seed command
def get_default_portfolio_data():
    return {
        'profile': {
            'name': 'Nikita',
            'title': 'Full Stack Developer',
            'bio': 'Building digital experiences with code and creativity. '
                   'Specialized in Next.js, Node.js, and modern UI architectures.',
            'email': 'hello@nikita.dev',
            'github': 'https://github.com',
            'linkedin': 'https://linkedin.com'
        },
        'projects': [
            {
                'title': 'E-Commerce Dashboard',
                'description': 'A comprehensive analytics dashboard for online retailers '
                               'with real-time data visualization.',
                'tech': ['Next.js', 'Tailwind', 'Recharts'],
                'link': '#',
                'image': 'https://images.unsplash.com/photo-1460925895917-afdab827c52f?q=80&w=2426&auto=format&fit=crop'
            },
            {
                'title': 'AI Content Generator',
                'description': 'SaaS application that uses LLMs to generate marketing copy and blog posts.',
                'tech': ['React', 'OpenAI API', 'Node.js'],
                'link': '#',
                'image': 'https://images.unsplash.com/photo-1677442136019-21780ecad995?q=80&w=2532&auto=format&fit=crop'
            },
            {
                'title': 'Task Master',
                'description': 'Collaborative project management tool with drag-and-drop kanban boards.',
                'tech': ['Vue', 'Firebase', 'Pinia'],
                'link': '#',
                'image': 'https://images.unsplash.com/photo-1484480974693-6ca0a78fb36b?q=80&w=2372&auto=format&fit=crop'
            }
        ],
        'skills': [
            {'name': 'React', 'category': 'Frontend'},
            {'name': 'Next.js', 'category': 'Frontend'},
            {'name': 'TypeScript', 'category': 'Frontend'},
            {'name': 'Tailwind CSS', 'category': 'Frontend'},
            {'name': 'Node.js', 'category': 'Backend'},
            {'name': 'PostgreSQL', 'category': 'Backend'},
            {'name': 'Prisma', 'category': 'Backend'},
            {'name': 'Docker', 'category': 'Tools'},
            {'name': 'Git', 'category': 'Tools'},
            {'name': 'AWS', 'category': 'Tools'}
        ],
        'experience': [
            {
                'role': 'Senior Frontend Engineer',
                'company': 'TechCorp Inc.',
                'period': '2023 - Present',
                'description': 'Leading the frontend team in rebuilding the core product dashboard. '
                               'Improved performance by 40%.'
            },
            {
                'role': 'Full Stack Developer',
                'company': 'Creative Agency',
                'period': '2021 - 2023',
                'description': 'Developed custom web solutions for diverse clients using the MERN stack.'
            }
        ]
    }
