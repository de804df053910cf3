import pandas as pd
import pytest

from survey_summarizer.config.settings import Settings
from survey_summarizer.core.catalog import TemplateCatalog
from survey_summarizer.models.errors import ConfigError, DataLoadError
from survey_summarizer.services.data_loader import DataLoader


def test_load_templates_returns_string_rows(settings, template_csv):
    rows = DataLoader(settings).load_templates(str(template_csv))

    assert rows[1] == {
        "AssessmentKind": "team-feedback",
        "ResponseKind": "Grade",
        "Category": "Communication",
        "Template": "{name} communicates well",
        "Weight": "2",
    }
    assert len(TemplateCatalog.load(rows, [("{name}", "Jane")])) == 3


def test_load_templates_requires_columns(settings, tmp_path):
    path = tmp_path / "templates.csv"
    path.write_text("Category,Template\nRole,Your role\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Missing required columns"):
        DataLoader(settings).load_templates(str(path))


def test_load_responses_transposes_and_skips_header_columns(settings, responses_csv):
    sheets = DataLoader(settings).load_responses(str(responses_csv))

    assert len(sheets) == 1
    assert sheets[0].title == "responses"
    assert sheets[0].rows == [
        ["Your role", "peer", "manager"],
        ["Jane communicates well", "8", "6"],
        ["Strengths of Jane", "clear writer", "calm"],
    ]
    assert sheets[0].width == 2


def test_missing_cells_become_empty_strings(tmp_path):
    path = tmp_path / "responses.csv"
    path.write_text("Question one,Question two\nyes,\n,no\n", encoding="utf-8")

    sheets = DataLoader(Settings(header_columns_to_skip=0)).load_responses(str(path))

    assert sheets[0].rows == [["Question one", "yes", ""], ["Question two", "", "no"]]


def test_load_responses_reads_every_excel_sheet(settings, tmp_path):
    path = tmp_path / "responses.xlsx"
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame({"Timestamp": ["t"], "Email": ["e"], "Your role": ["peer"]}).to_excel(
            writer, sheet_name="Peers", index=False
        )
        pd.DataFrame({"Timestamp": ["t"], "Email": ["e"], "Strengths of Jane": ["calm"]}).to_excel(
            writer, sheet_name="Self", index=False
        )

    loader = DataLoader(settings)
    sheets = loader.load_responses(str(path))
    single = loader.load_responses(str(path), sheet_name="Self")

    assert [sheet.title for sheet in sheets] == ["Peers", "Self"]
    assert sheets[0].rows == [["Your role", "peer"]]
    assert [sheet.title for sheet in single] == ["Self"]
    assert single[0].rows == [["Strengths of Jane", "calm"]]


def test_unsupported_or_missing_files_raise(settings, tmp_path):
    loader = DataLoader(settings)
    path = tmp_path / "responses.json"
    path.write_text("{}", encoding="utf-8")

    with pytest.raises(DataLoadError, match="Unsupported file format"):
        loader.load_responses(str(path))
    with pytest.raises(DataLoadError, match="not found"):
        loader.load_templates(str(tmp_path / "missing.csv"))


def test_encoding_fallback(settings, tmp_path):
    path = tmp_path / "templates.csv"
    path.write_bytes(
        "AssessmentKind,ResponseKind,Category,Template,Weight\n"
        "équipe,grade,Communication,communique bien,1\n".encode("latin-1")
    )

    rows = DataLoader(settings).load_templates(str(path))

    assert rows[0]["AssessmentKind"] == "équipe"
