"""Tests for the data models."""

import json

import pytest
from pydantic import ValidationError

from resubuild_ai.models.analysis import AuditResult, CareerPath, JobMatchAnalysis
from resubuild_ai.models.builders import AgentNode, CandidateMatch, DesignTheme, FormField
from resubuild_ai.models.jobs import JobPost
from resubuild_ai.models.resume import ResumeProfile


class TestResumeProfile:
    def test_parses_camel_case(self):
        resume = ResumeProfile.model_validate({
            "id": "r1",
            "templateId": "minimal",
            "personalInfo": {"fullName": "Jane Doe", "jobTitle": "Engineer"},
            "experience": [{"id": "e1", "company": "Acme", "startDate": "2020", "current": True}],
            "education": [{"id": "d1", "field": "Physics", "graduationDate": "2015"}],
        })
        assert resume.template_id == "minimal"
        assert resume.personal_info.full_name == "Jane Doe"
        assert resume.experience[0].start_date == "2020"
        assert resume.experience[0].current is True
        assert resume.education[0].field == "Physics"

    def test_accepts_field_names(self):
        resume = ResumeProfile(template_id="creative", skills=["Go"])
        assert resume.template_id == "creative"

    def test_to_wire_uses_camel_case(self, sample_resume):
        wire = sample_resume.to_wire()
        assert wire["personalInfo"]["fullName"] == "Jane Doe"
        assert wire["experience"][0]["startDate"] == "2021-03"
        assert "customSections" in wire
        assert "personal_info" not in wire

    def test_missing_sections_default_empty(self):
        resume = ResumeProfile.model_validate({"personalInfo": {"fullName": "A"}})
        assert resume.experience == []
        assert resume.skills == []
        assert resume.custom_sections == []
        assert resume.theme_color == "#000000"

    def test_null_and_wrong_types_fall_back(self):
        resume = ResumeProfile.model_validate({
            "name": None,
            "skills": "Python, Go",
            "personalInfo": {"fullName": None, "email": 42},
        })
        assert resume.name == "Untitled Resume"
        assert resume.skills == []
        assert resume.personal_info.full_name == ""

    def test_empty_has_fresh_id(self):
        a = ResumeProfile.empty()
        b = ResumeProfile.empty("minimal")
        assert a.id and b.id and a.id != b.id
        assert b.template_id == "minimal"

    def test_prompt_json_is_camel_case(self, sample_resume):
        assert '"fullName":"Jane Doe"' in sample_resume.to_prompt_json()


class TestScore:
    @pytest.mark.parametrize(
        "raw, expected",
        [(82, 82), (82.6, 83), ("82%", 82), (140, 100), (-5, 0), ("7", 7)],
    )
    def test_score_coercion(self, raw, expected):
        assert AuditResult.model_validate({"score": raw}).score == expected

    @pytest.mark.parametrize("raw", [float("inf"), float("-inf"), float("nan"), "inf", "-Infinity", "nan%"])
    def test_non_finite_score_defaults(self, raw):
        assert AuditResult.model_validate({"score": raw, "summary": "ok"}).score == 0

    def test_non_finite_score_from_json(self):
        """JSON 1e400 parses to infinity."""
        result = JobMatchAnalysis.model_validate(json.loads('{"matchScore": 1e400, "summary": "x"}'))
        assert result.match_score == 0
        assert result.summary == "x"

    def test_unparseable_score_defaults(self):
        assert AuditResult.model_validate({"score": "excellent"}).score == 0

    def test_job_match_alias(self):
        result = JobMatchAnalysis.model_validate({"matchScore": "65", "missingSkills": ["Kafka"]})
        assert result.match_score == 65
        assert result.missing_skills == ["Kafka"]


class TestRequiredFields:
    def test_career_path_requires_title(self):
        with pytest.raises(ValidationError):
            CareerPath.model_validate({"description": "no title"})

    def test_form_field_requires_label(self):
        with pytest.raises(ValidationError):
            FormField.model_validate({"type": "text"})

    def test_form_field_unknown_type_defaults_to_text(self):
        field = FormField.model_validate({"label": "Name", "type": "slider"})
        assert field.type == "text"

    def test_candidate_match_requires_id(self):
        with pytest.raises(ValidationError):
            CandidateMatch.model_validate({"score": 90})

    def test_agent_node_requires_known_type(self):
        with pytest.raises(ValidationError):
            AgentNode.model_validate({"type": "webhook"})


class TestDesignTheme:
    def test_partial_style_keeps_defaults(self):
        theme = DesignTheme.model_validate({
            "themeColor": "#2563eb",
            "customStyle": {"fontFamily": "Georgia, serif"},
        })
        assert theme.theme_color == "#2563eb"
        assert theme.custom_style.font_family == "Georgia, serif"
        assert theme.custom_style.background_color == "#ffffff"


class TestJobPost:
    def test_nulls_become_empty_strings(self):
        job = JobPost.model_validate({"id": 1, "title": "Dev", "salary": None, "company_logo": None})
        assert job.salary == ""
        assert job.company_logo == ""

    def test_null_id_rejected(self):
        with pytest.raises(ValidationError):
            JobPost.model_validate({"id": None, "title": "Dev"})

    def test_extra_keys_ignored(self):
        job = JobPost.model_validate({"id": 2, "tags": ["python"], "title": "Dev"})
        assert job.title == "Dev"
