import pytest

from survey_summarizer.core.catalog import TemplateCatalog, apply_substitutions
from survey_summarizer.models.errors import ConfigError
from survey_summarizer.models.template import ResponseKind


def test_load_applies_substitutions_in_order(catalog):
    templates = list(catalog)

    assert len(catalog) == 4
    assert templates[1].template_raw == "{name} communicates well"
    assert templates[1].template_final == "Jane communicates well"
    assert templates[1].response_kind is ResponseKind.GRADE
    assert templates[1].weight == 2.0


def test_apply_substitutions_runs_passes_sequentially():
    assert apply_substitutions("{a} and {b}", [("{a}", "{b}"), ("{b}", "x")]) == "x and x"


def test_load_accepts_positional_rows():
    catalog = TemplateCatalog.load([["self", "TEXT", "Goals", "Your goals", "0"]])

    template = catalog.match("Your goals for next year")
    assert template.category == "Goals"
    assert template.response_kind is ResponseKind.TEXT


def test_response_kind_is_case_insensitive():
    catalog = TemplateCatalog.load([["self", " Discriminator ", "Role", "Role", "0"]])

    assert list(catalog)[0].response_kind is ResponseKind.DISCRIMINATOR


def test_unknown_response_kind_raises_config_error():
    with pytest.raises(ConfigError) as excinfo:
        TemplateCatalog.load([["self", "rating", "Role", "Role", "1"]])

    assert excinfo.value.row_index == 0
    assert excinfo.value.column == "ResponseKind"


def test_unparseable_weight_raises_config_error(template_rows):
    template_rows[2]["Weight"] = "heavy"

    with pytest.raises(ConfigError) as excinfo:
        TemplateCatalog.load(template_rows)

    assert excinfo.value.row_index == 2
    assert excinfo.value.column == "Weight"


def test_missing_column_raises_config_error(template_rows):
    del template_rows[0]["Category"]

    with pytest.raises(ConfigError, match="Category"):
        TemplateCatalog.load(template_rows)


def test_short_positional_row_raises_config_error():
    with pytest.raises(ConfigError, match="Weight"):
        TemplateCatalog.load([["self", "grade", "Role", "Role"]])


def test_empty_template_raises_config_error():
    with pytest.raises(ConfigError, match="empty"):
        TemplateCatalog.load([["self", "grade", "Role", "", "1"]])


def test_match_returns_first_template_in_load_order():
    catalog = TemplateCatalog.load([
        ["self", "grade", "First", "works", "1"],
        ["self", "grade", "Second", "works well", "1"],
    ])

    assert catalog.match("Jane works well").category == "First"
    assert catalog.match("Jane works well").category == "First"


def test_match_falls_back_to_raw_template(catalog):
    assert catalog.match("{name} communicates well").category == "Communication"


def test_match_returns_none_when_nothing_matches(catalog):
    assert catalog.match("Favourite colour") is None


def test_subset_keeps_order_and_kinds(catalog):
    subset = catalog.subset([ResponseKind.GRADE, ResponseKind.DISCRIMINATOR])

    assert [t.category for t in subset] == ["Role", "Communication", "Teamwork"]
    assert catalog.kinds() == [ResponseKind.DISCRIMINATOR, ResponseKind.GRADE, ResponseKind.TEXT]
