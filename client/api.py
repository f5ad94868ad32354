"""
API Client - Thin requests wrapper over the portfolio HTTP API

Every non-2xx response raises ApiError carrying the status code and the
server's `message`. The session cookie set by login is kept by the
underlying requests.Session.
"""

import requests


class ApiError(Exception):
    """Any failed API call; status_code is 0 when the server was unreachable"""

    def __init__(self, status_code, message):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


def _decode(response):
    try:
        return response.json()
    except ValueError:
        return None


class PortfolioAPI:
    """One method per API route"""

    def __init__(self, base_url='', session=None, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _request(self, method, path, payload=None):
        try:
            response = self.session.request(
                method,
                f"{self.base_url}{path}",
                json=payload,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise ApiError(0, str(e)) from e

        body = _decode(response)
        if not 200 <= response.status_code < 300:
            message = body.get('message') if isinstance(body, dict) else None
            raise ApiError(response.status_code,
                           message or f"Request failed with status {response.status_code}")
        return body

    # Auth
    def register(self, email, password):
        return self._request('POST', '/api/auth/register', {'email': email, 'password': password})

    def login(self, email, password):
        return self._request('POST', '/api/auth/login', {'email': email, 'password': password})

    def logout(self):
        return self._request('POST', '/api/auth/logout')

    def me(self):
        return self._request('GET', '/api/auth/me')

    # Profile
    def get_profile(self):
        return self._request('GET', '/api/profile')

    def update_profile(self, fields):
        return self._request('PUT', '/api/profile', fields)

    # Projects
    def list_projects(self):
        return self._request('GET', '/api/projects')

    def get_project(self, project_id):
        return self._request('GET', f'/api/projects/{project_id}')

    def create_project(self, fields):
        return self._request('POST', '/api/projects', fields)

    def update_project(self, project_id, fields):
        return self._request('PUT', f'/api/projects/{project_id}', fields)

    def delete_project(self, project_id):
        return self._request('DELETE', f'/api/projects/{project_id}')

    # Skills
    def list_skills(self):
        return self._request('GET', '/api/skills')

    def create_skill(self, fields):
        return self._request('POST', '/api/skills', fields)

    def update_skill(self, skill_id, fields):
        return self._request('PUT', f'/api/skills/{skill_id}', fields)

    def delete_skill(self, skill_id):
        return self._request('DELETE', f'/api/skills/{skill_id}')

    # Experience
    def list_experience(self):
        return self._request('GET', '/api/experience')

    def create_experience(self, fields):
        return self._request('POST', '/api/experience', fields)

    def update_experience(self, experience_id, fields):
        return self._request('PUT', f'/api/experience/{experience_id}', fields)

    def delete_experience(self, experience_id):
        return self._request('DELETE', f'/api/experience/{experience_id}')

    # Contact
    def send_contact(self, name, email, message):
        return self._request('POST', '/api/contact', {'name': name, 'email': email, 'message': message})
