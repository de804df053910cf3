"""Shared fixtures for survey summarizer tests."""

import pytest

from survey_summarizer.config.settings import Settings
from survey_summarizer.core.catalog import TemplateCatalog


@pytest.fixture
def template_rows():
    return [
        {"AssessmentKind": "team-feedback", "ResponseKind": "discriminator", "Category": "Role",
         "Template": "Your role", "Weight": "0"},
        {"AssessmentKind": "team-feedback", "ResponseKind": "grade", "Category": "Communication",
         "Template": "{name} communicates well", "Weight": "2"},
        {"AssessmentKind": "team-feedback", "ResponseKind": "grade", "Category": "Teamwork",
         "Template": "{name} helps the team", "Weight": "1.5"},
        {"AssessmentKind": "team-feedback", "ResponseKind": "text", "Category": "Strengths",
         "Template": "Strengths of {name}", "Weight": "0"},
    ]


@pytest.fixture
def catalog(template_rows):
    return TemplateCatalog.load(template_rows, [("{name}", "Jane")])


@pytest.fixture
def settings(tmp_path):
    return Settings(output_dir=str(tmp_path / "output"), show_progress=False)


@pytest.fixture
def template_csv(tmp_path):
    path = tmp_path / "templates.csv"
    path.write_text(
        "AssessmentKind,ResponseKind,Category,Template,Weight\n"
        "team-feedback,Discriminator,Role,Your role,0\n"
        "team-feedback,Grade,Communication,{name} communicates well,2\n"
        "team-feedback,Text,Strengths,Strengths of {name},0\n",
        encoding="utf-8"
    )
    return path


@pytest.fixture
def responses_csv(tmp_path):
    path = tmp_path / "responses.csv"
    path.write_text(
        "Timestamp,Email,Your role,Jane communicates well,Strengths of Jane\n"
        "2024-01-01,a@example.com,peer,8,clear writer\n"
        "2024-01-02,b@example.com,manager,6,calm\n",
        encoding="utf-8"
    )
    return path
