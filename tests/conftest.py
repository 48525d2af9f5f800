"""Shared fixtures: a small but complete resume on disk."""

from pathlib import Path

import pytest

from tailor.contexts.content import load_resume

SAMPLE_RESUME_YAML = """\
contact:
  name: Jordan Rivera
  location: Austin, TX
  email: jordan@example.com
  phone: 555-0100
  linkedin: linkedin.com/in/jordan
  github: github.com/jordan
summary: Backend engineer focused on event-driven systems & data pipelines.
education:
  institution: State University
  location: Austin, TX
  degree: B.S. Computer Science
  minor: Mathematics
  gpa: 3.8
  honors: Dean's List
skills:
  languages:
    - name: Python
      tags: [python, backend]
    - name: Go
      tags: [go]
  frameworks:
    - name: FastAPI
      tags: [python, web]
  cloud:
    - name: Google Cloud
      tags: [gcp]
experience:
  - id: acme
    title: Senior Engineer
    company: Acme Corp
    location: Remote
    start_date: Jan 2021
    end_date: Present
    tags: [backend]
    bullets:
      - id: acme-kafka
        text: Built a Kafka pipeline processing 2M events/day
        tags: [kafka, python]
      - id: acme-latency
        text: Cut p99 latency by 40% with caching
        tags: [performance]
  - id: initech
    title: Engineer
    company: Initech
    location: Dallas, TX
    start_date: Jun 2018
    end_date: Dec 2020
    bullets:
      - id: initech-tps
        text: Automated TPS report generation
        tags: [automation, python]
projects:
  - id: ledger
    title: Ledger
    technologies: Go, PostgreSQL
    github: github.com/jordan/ledger
    tags: [go]
    bullets:
      - id: ledger-core
        text: Double-entry accounting engine
        tags: [go, finance]
leadership:
  - id: mentor
    text: Mentored 5 junior engineers
    tags: [leadership]
  - id: meetup
    text: Organized the local Python meetup
    tags: [python, community]
"""


@pytest.fixture
def resume_file(tmp_path) -> Path:
    """Sample resume written to a temporary YAML file."""
    path = tmp_path / "resume.yaml"
    path.write_text(SAMPLE_RESUME_YAML, encoding="utf-8")
    return path


@pytest.fixture
def resume(resume_file):
    """Sample resume loaded into a Resume."""
    return load_resume(resume_file)
