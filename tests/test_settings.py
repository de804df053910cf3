import pytest

from survey_summarizer.config.settings import Settings

ENV_NAMES = ("GRADE_ERROR_POLICY", "HEADER_COLUMNS_TO_SKIP", "NAME_PLACEHOLDER", "IGNORE_BLANK_ANSWERS")


def test_defaults_are_valid():
    settings = Settings()

    settings.validate()
    assert settings.grade_error_policy == "skip"
    assert settings.header_columns_to_skip == 2
    assert settings.encoding_fallbacks[0] == "utf-8"


def test_from_env_reads_env_file(tmp_path, monkeypatch):
    # registered with monkeypatch so values loaded from the file are removed afterwards
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    env_file = tmp_path / ".env"
    env_file.write_text(
        "GRADE_ERROR_POLICY=FAIL\n"
        "HEADER_COLUMNS_TO_SKIP=1\n"
        "NAME_PLACEHOLDER=<name>\n"
        "IGNORE_BLANK_ANSWERS=true\n",
        encoding="utf-8"
    )

    settings = Settings.from_env(str(env_file))

    assert settings.grade_error_policy == "fail"
    assert settings.header_columns_to_skip == 1
    assert settings.name_placeholder == "<name>"
    assert settings.ignore_blank_answers is True


@pytest.mark.parametrize("field, value", [
    ("grade_error_policy", "ignore"),
    ("header_columns_to_skip", -1),
    ("name_placeholder", ""),
    ("summary_sheet_name", ""),
])
def test_validate_rejects_bad_values(field, value):
    settings = Settings()
    setattr(settings, field, value)

    with pytest.raises(ValueError):
        settings.validate()
