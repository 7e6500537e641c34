"""
Integration tests for a full fit analysis: config file -> workflow -> scorer -> view/report.
"""

import asyncio

import pytest

from autoapply.contexts.intake import ResumeFile, ValidationError
from autoapply.contexts.presentation import build_view, format_result_markdown, validation_message
from autoapply.contexts.targeting import SimulatedScorer
from autoapply.contexts.workflow import FitWorkflow, WorkflowPhase, load_workflow_config, run_analysis
from autoapply.contexts.workflow.config import CONFIG_ENV_VAR


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "workflow.yaml"
    path.write_text(
        "scoring:\n"
        "  backend: simulated\n"
        "  delay_seconds: 0.01\n"
        "  seed: 2024\n"
    )
    return path


@pytest.mark.integration
def test_scored_flow_from_config_file(config_file, monkeypatch):
    """Test a config file drives a full scored analysis."""
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
    workflow = FitWorkflow()
    assert isinstance(workflow.scorer, SimulatedScorer)

    workflow.set_job_description("Senior Engineer...\n\n* 5+ years Python\n* AWS")
    workflow.set_resume_file(ResumeFile(name="resume.pdf", content=b"%PDF-1.4"))
    assert build_view(workflow).can_analyze

    result = asyncio.run(run_analysis(workflow))

    assert workflow.phase is WorkflowPhase.SCORED
    assert 70 <= result.fit_score <= 100
    assert result.tailored_summary

    view = build_view(workflow)
    assert view.fit_score == result.fit_score
    assert view.tier == result.tier.value

    report = format_result_markdown(result, resume_name="resume.pdf")
    assert f"{result.fit_score}/100" in report


@pytest.mark.integration
def test_seeded_runs_are_reproducible(config_file):
    """Test seeded config gives the same score across runs."""
    scores = []
    for _ in range(2):
        workflow = FitWorkflow(config=load_workflow_config(config_file))
        workflow.set_job_url("https://company.com/job-posting")
        workflow.set_resume_file(ResumeFile(name="resume.pdf"))
        scores.append(asyncio.run(run_analysis(workflow)).fit_score)

    assert scores[0] == scores[1]


@pytest.mark.integration
def test_missing_job_input_flow(config_file):
    """Test incomplete intake is rejected end to end."""
    workflow = FitWorkflow(config=load_workflow_config(config_file))
    workflow.set_job_description("")
    workflow.set_job_url("")
    workflow.set_resume_file(ResumeFile(name="resume.pdf"))

    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(run_analysis(workflow))

    assert str(exc_info.value) == "missing job input"
    assert validation_message(exc_info.value) == "Please provide either a job description or job URL"
    assert workflow.phase is WorkflowPhase.IDLE
    assert not build_view(workflow).can_analyze
