"""Unit tests for LLMScorer with a stub provider."""

import asyncio
import io
import time

import docx
import pytest

from autoapply.contexts.intake import IntakeState, ResumeFile, UnsupportedResumeFormatError
from autoapply.contexts.intake.resume_text import extract_resume_text
from autoapply.contexts.targeting import ScoringError
from autoapply.contexts.targeting.llm_scorer import LLMScorer
from autoapply.contexts.workflow import FitWorkflow, WorkflowPhase, load_workflow_config, run_analysis
from autoapply.utils.llm import LLMResponse, parse_object_response


class StubProvider:
    """Stands in for an LLMProvider; returns canned content and records prompts."""

    name = "stub/model-1"

    def __init__(self, content: str):
        self.content = content
        self.prompts = []

    def generate(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        self.prompts.append((system_prompt, user_prompt))
        return LLMResponse(content=self.content, model="model-1", input_tokens=10, output_tokens=5)


def _intake(resume_name: str = "resume.txt", content: bytes = b"Python developer, 8 years") -> IntakeState:
    return IntakeState(
        job_description_text="Senior Python Engineer",
        job_url="https://company.com/job-posting",
        resume_file=ResumeFile(name=resume_name, content=content),
    )


def _docx_bytes(*paragraphs: str) -> bytes:
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.mark.unit
def test_scores_from_json_response():
    """Test scoring from a well-formed JSON response."""
    provider = StubProvider('{"fit_score": 82, "tailored_summary": "Lead with Python work."}')
    scorer = LLMScorer(provider)

    result = asyncio.run(scorer.score(_intake()))

    assert result.fit_score == 82
    assert result.tailored_summary == "Lead with Python work."
    assert result.scorer == "llm:stub/model-1"

    _, user_prompt = provider.prompts[0]
    assert "Senior Python Engineer" in user_prompt
    assert "https://company.com/job-posting" in user_prompt
    assert "Python developer, 8 years" in user_prompt


@pytest.mark.unit
def test_parses_json_wrapped_in_prose():
    """Test a JSON object embedded in prose is found."""
    content = 'Here you go:\n```json\n{"fit_score": "91", "tailored_summary": "Great fit."}\n```'
    result = LLMScorer(StubProvider(content)).parse_response(content)
    assert result.fit_score == 91


@pytest.mark.unit
@pytest.mark.parametrize(
    "content",
    [
        "I think this candidate is a strong fit.",
        '{"fit_score": 150, "tailored_summary": "Too high."}',
        '{"fit_score": -3, "tailored_summary": "Too low."}',
        '{"fit_score": true, "tailored_summary": "Boolean."}',
        '{"fit_score": 77.5, "tailored_summary": "Fractional."}',
        '{"fit_score": 77}',
        '{"fit_score": 77, "tailored_summary": "   "}',
    ],
)
def test_bad_responses_raise_scoring_error(content):
    """Test malformed or out-of-range responses raise ScoringError."""
    scorer = LLMScorer(StubProvider(content))
    with pytest.raises(ScoringError) as exc_info:
        scorer.parse_response(content)
    assert exc_info.value.scorer == "llm:stub/model-1"


@pytest.mark.unit
def test_docx_resume_text_reaches_prompt():
    """Test DOCX résumés are extracted and sent to the provider."""
    provider = StubProvider('{"fit_score": 80, "tailored_summary": "ok"}')

    result = asyncio.run(LLMScorer(provider).score(_intake("resume.docx", _docx_bytes("Jane Doe", "Kubernetes"))))

    assert result.fit_score == 80
    _, user_prompt = provider.prompts[0]
    assert "Jane Doe\nKubernetes" in user_prompt


@pytest.mark.unit
def test_legacy_doc_resume_raises_scoring_error():
    """Test binary .doc résumés fail with ScoringError before the provider is called."""
    provider = StubProvider('{"fit_score": 80, "tailored_summary": "ok"}')

    with pytest.raises(ScoringError) as exc_info:
        asyncio.run(LLMScorer(provider).score(_intake(resume_name="resume.doc")))

    assert isinstance(exc_info.value.original_error, UnsupportedResumeFormatError)
    assert provider.prompts == []


@pytest.mark.unit
def test_extract_docx_resume():
    """Test DOCX text extraction keeps one line per paragraph."""
    resume = ResumeFile(name="resume.DOCX", content=_docx_bytes("Jane Doe", "", "Python"))
    assert extract_resume_text(resume) == "Jane Doe\n\nPython"


@pytest.mark.unit
def test_slow_extraction_respects_workflow_timeout(monkeypatch):
    """Test résumé extraction runs off the event loop so the timeout can fire."""

    def slow_extract(resume):
        time.sleep(0.5)
        return "Python developer"

    monkeypatch.setattr("autoapply.contexts.targeting.llm_scorer.extract_resume_text", slow_extract)
    provider = StubProvider('{"fit_score": 80, "tailored_summary": "ok"}')
    workflow = FitWorkflow(
        scorer=LLMScorer(provider),
        config=load_workflow_config(overrides=["scoring.timeout_seconds=0.05"]),
    )
    workflow.set_job_description("Senior Python Engineer")
    workflow.set_resume_file(ResumeFile(name="resume.pdf", content=b"%PDF-1.4"))

    result = asyncio.run(run_analysis(workflow))

    assert result is None
    assert workflow.phase is WorkflowPhase.FAILED
    assert "timed out" in workflow.error.message
    assert provider.prompts == []


@pytest.mark.unit
def test_extract_plaintext_resume():
    """Test plain text résumés are read as UTF-8."""
    resume = ResumeFile(name="resume.md", content="# Jane Doe\nPython\n".encode("utf-8"))
    assert extract_resume_text(resume) == "# Jane Doe\nPython"


@pytest.mark.unit
def test_parse_object_response():
    """Test JSON object extraction from model output."""
    assert parse_object_response('{"a": 1}') == {"a": 1}
    assert parse_object_response('noise {"a": 1} noise') == {"a": 1}
    assert parse_object_response("[1, 2]") is None
    assert parse_object_response("no json") is None
