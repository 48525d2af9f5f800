"""
Integration tests for the HTTP API.

The app is driven through FastAPI's TestClient with a scripted LLM provider
and a fake compiler, so no network or TeX installation is needed.
"""

import json
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from tailor.api import create_app
from tailor.exceptions import CompilationError, MissingCredentialError
from tailor.utils.llm import LLMProvider, LLMResponse

ANALYSIS_REPLY = {
    "keywords": ["kafka"],
    "scores": {"acme-kafka": 91, "made-up": 88},
    "suggested_items": ["acme-kafka", "made-up"],
}


class ScriptedProvider(LLMProvider):
    _provider_prefix = "scripted"

    def __init__(self, reply: str):
        self.reply = reply
        self.update_model("test")

    def _call_api(self, user_prompt: str, system_prompt: Optional[str] = None) -> LLMResponse:
        return LLMResponse(content=self.reply, model=self.model, input_tokens=0, output_tokens=0)


class RecordingCompiler:
    def __init__(self, error: Optional[Exception] = None):
        self.sources = []
        self.error = error

    def __call__(self, latex_source: str) -> bytes:
        self.sources.append(latex_source)
        if self.error is not None:
            raise self.error
        return b"%PDF-1.5 test"


@pytest.fixture
def compiler():
    return RecordingCompiler()


@pytest.fixture
def client(resume_file, compiler):
    app = create_app(
        resume_file,
        provider_factory=lambda: ScriptedProvider(json.dumps(ANALYSIS_REPLY)),
        compiler=compiler,
    )
    return TestClient(app)


@pytest.mark.integration
def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.integration
def test_get_resume(client):
    response = client.get("/api/resume")

    assert response.status_code == 200
    data = response.json()
    assert data["contact"]["name"] == "Jordan Rivera"
    assert data["skills"][0]["category"] == "languages"
    assert data["experience"][0]["bullets"][0]["selected"] is True


@pytest.mark.integration
def test_reload_picks_up_edits(client, resume_file):
    client.get("/api/resume")
    resume_file.write_text(
        resume_file.read_text(encoding="utf-8").replace("Jordan Rivera", "J. Rivera"),
        encoding="utf-8",
    )

    response = client.post("/api/resume/reload")

    assert response.status_code == 200
    assert response.json()["contact"]["name"] == "J. Rivera"


@pytest.mark.integration
def test_cors_headers(client):
    response = client.get("/api/health", headers={"Origin": "http://localhost:5173"})

    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.integration
def test_analyze_job(client):
    response = client.post(
        "/api/job/analyze",
        json={"job_title": "Data Engineer", "company": "Initrode", "description": "Kafka"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "keywords": ["kafka"],
        "scores": {"acme-kafka": 91.0},
        "suggested_items": ["acme-kafka"],
    }


@pytest.mark.integration
def test_analyze_job_requires_description(client):
    response = client.post("/api/job/analyze", json={"job_title": "Engineer"})

    assert response.status_code == 400
    assert response.json() == {"error": "description is required"}


@pytest.mark.integration
def test_analyze_job_malformed_body(client):
    response = client.post(
        "/api/job/analyze", content="not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "invalid request body"}


@pytest.mark.integration
def test_analyze_job_missing_credential(resume_file):
    def no_key():
        raise MissingCredentialError("OPENROUTER_API_KEY environment variable not set")

    client = TestClient(create_app(resume_file, provider_factory=no_key))

    response = client.post("/api/job/analyze", json={"description": "anything"})

    assert response.status_code == 500
    assert "OPENROUTER_API_KEY" in response.json()["error"]


@pytest.mark.integration
def test_analyze_job_unparseable_reply(resume_file):
    client = TestClient(
        create_app(resume_file, provider_factory=lambda: ScriptedProvider("no json here"))
    )

    response = client.post("/api/job/analyze", json={"description": "anything"})

    assert response.status_code == 500
    assert response.json() == {"error": "no JSON object found in response"}


@pytest.mark.integration
def test_generate_returns_pdf(client, compiler):
    response = client.post(
        "/api/generate",
        json={"selections": {"experience": ["acme-latency"], "leadership": ["meetup"]}},
    )

    assert response.status_code == 200
    assert response.content == b"%PDF-1.5 test"
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == "attachment; filename=resume.pdf"

    latex = compiler.sources[0]
    assert "Cut p99 latency" in latex
    assert "Kafka pipeline" not in latex
    assert "Organized the local Python meetup" in latex
    assert "Mentored" not in latex


@pytest.mark.integration
def test_generate_empty_selection_includes_everything(client, compiler):
    response = client.post("/api/generate", json={"selections": {}})

    assert response.status_code == 200
    assert "Kafka pipeline" in compiler.sources[0]
    assert "Mentored" in compiler.sources[0]


@pytest.mark.integration
def test_generate_unknown_template(client):
    response = client.post("/api/generate", json={"selections": {}, "template": "fancy"})

    assert response.status_code == 400
    assert "fancy" in response.json()["error"]


@pytest.mark.integration
def test_generate_compilation_failure(resume_file):
    failing = RecordingCompiler(error=CompilationError("xelatex failed: boom", output="log"))
    client = TestClient(create_app(resume_file, compiler=failing))

    response = client.post("/api/generate", json={"selections": {}})

    assert response.status_code == 500
    assert response.json()["error"].startswith("xelatex failed: boom")


@pytest.mark.integration
def test_generate_follows_saved_order(client, compiler):
    client.put("/api/order", json={"experience": ["initech", "acme"]})

    client.post("/api/generate", json={"selections": {}})

    latex = compiler.sources[0]
    assert latex.index("Initech") < latex.index("Acme Corp")


@pytest.mark.integration
def test_order_defaults_and_partial_update(client, resume_file):
    assert client.get("/api/order").json() == {
        "experience": ["acme", "initech"],
        "projects": ["ledger"],
        "leadership": ["mentor", "meetup"],
    }

    response = client.put("/api/order", json={"leadership": ["meetup", "mentor"]})

    assert response.status_code == 200
    assert response.json()["leadership"] == ["meetup", "mentor"]
    assert response.json()["experience"] == ["acme", "initech"]
    assert (resume_file.parent / "order.yaml").exists()

    resume = client.get("/api/resume").json()
    assert [entry["id"] for entry in resume["leadership"]] == ["meetup", "mentor"]


@pytest.mark.integration
def test_missing_resume_file(tmp_path):
    client = TestClient(create_app(tmp_path / "missing.yaml"))

    response = client.get("/api/resume")

    assert response.status_code == 500
    assert "missing.yaml" in response.json()["error"]


@pytest.mark.integration
def test_entries_without_ids_are_served_and_rendered(tmp_path):
    resume_file = tmp_path / "resume.yaml"
    resume_file.write_text(
        "experience:\n"
        "  - company: First Job\n"
        "    bullets: [{id: b1, text: Shipped the first thing}]\n"
        "  - company: Second Job\n"
        "    bullets: [{id: b2, text: Shipped the second thing}]\n",
        encoding="utf-8",
    )
    compiler = RecordingCompiler()
    client = TestClient(create_app(resume_file, compiler=compiler))

    resume = client.get("/api/resume").json()
    client.post("/api/generate", json={"selections": {}})

    assert [entry["company"] for entry in resume["experience"]] == ["First Job", "Second Job"]
    assert "Second Job" in compiler.sources[0]
    assert "Shipped the second thing" in compiler.sources[0]


@pytest.mark.integration
def test_analyze_job_null_fields(client):
    """JSON null reads as an empty string."""
    response = client.post(
        "/api/job/analyze", json={"job_title": None, "company": None, "description": "Kafka"}
    )
    missing = client.post("/api/job/analyze", json={"description": None})

    assert response.status_code == 200
    assert missing.status_code == 400
    assert missing.json() == {"error": "description is required"}


@pytest.mark.integration
def test_generate_null_fields(client, compiler):
    """Null selections, null section lists and a null template mean defaults."""
    response = client.post(
        "/api/generate", json={"selections": {"experience": None, "leadership": ["meetup"]}, "template": None}
    )
    everything = client.post("/api/generate", json={"selections": None, "template": None})

    assert response.status_code == 200
    assert "Organized the local Python meetup" in compiler.sources[0]
    assert "Kafka pipeline" not in compiler.sources[0]
    assert everything.status_code == 200
    assert "Kafka pipeline" in compiler.sources[1]
