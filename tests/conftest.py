from __future__ import annotations

import json
from pathlib import Path

import pytest

from folio.core.font_metrics import FontMetrics, FontMetricsRegistry
from folio.core.resume import Resume

SAMPLE_RESUME = {
    "Name": "Jane Doe",
    "Trade": "Software Engineer",
    "Tel": "+1 555 0100",
    "Email": "jane@example.com",
    "Experience": [
        {
            "Name": "Example Corp",
            "URL": "https://example.com",
            "Since": "2019",
            "Ended": "2023",
            "Technologies": ["Python", "PostgreSQL", "Kubernetes"],
            "Summary": (
                "Designed and ran the billing platform, moving nightly batch jobs to an "
                "event-driven pipeline and cutting invoice latency from hours to minutes "
                "for every customer on the platform."
            ),
        },
        {
            "Name": "Acme Research",
            "URL": "https://acme.example.org",
            "Since": "2023",
            "Technologies": ["Rust", "Python"],
            "Summary": "Leads the data tooling group.",
        },
    ],
}


@pytest.fixture(autouse=True)
def fresh_registry():
    """Give every test its own font metrics registry singleton."""
    FontMetricsRegistry._instance = None
    yield
    FontMetricsRegistry._instance = None


@pytest.fixture
def helvetica() -> FontMetrics:
    return FontMetrics.from_standard("Helvetica")


@pytest.fixture
def sample_resume() -> Resume:
    return Resume.from_dict(SAMPLE_RESUME)


@pytest.fixture
def resume_file(tmp_path: Path) -> Path:
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(SAMPLE_RESUME), encoding="utf-8")
    return path


@pytest.fixture
def sample_resume_data() -> dict:
    return json.loads(json.dumps(SAMPLE_RESUME))
