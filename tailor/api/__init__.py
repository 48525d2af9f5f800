"""
HTTP API

Responsibilities:
- Serves the resume, job analysis, PDF generation and section ordering as JSON
- Caches the loaded resume until its source file changes

Owns: Request handling, resume cache, front-end transform
Never: Terminates the process on a failed request
"""

from tailor.api.cache import ResumeCache
from tailor.api.server import create_app, run_server
from tailor.api.transform import transform_resume

__all__ = ["ResumeCache", "create_app", "run_server", "transform_resume"]
