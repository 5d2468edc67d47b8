import pytest

from regop.config.recipe import Recipe, load_recipe
from regop.core.errors import InvalidPattern, RecipeError
from regop.core.models import OperationKind

BUMP_RECIPE = r"""
lines: true
regex:
  - 'version = "(?<major>\d+)\.(?<minor>\d+)\.(?<patch>\d+)"'
op:
  - "<minor>:inc"
  - "<patch>:rep:0"
"""


def write(tmp_path, text, name="recipe.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_full_recipe(tmp_path):
    recipe = load_recipe(write(tmp_path, BUMP_RECIPE))

    assert recipe.lines is True
    assert recipe.regex == [r'version = "(?<major>\d+)\.(?<minor>\d+)\.(?<patch>\d+)"']
    assert recipe.op == ["<minor>:inc", "<patch>:rep:0"]


def test_single_strings_are_accepted(tmp_path):
    recipe = load_recipe(write(tmp_path, "regex: '(?<n>\\d+)'\nop: '<n>:inc'\n"))

    assert recipe.regex == [r"(?<n>\d+)"]
    assert recipe.op == ["<n>:inc"]
    assert recipe.lines is False


def test_empty_recipe(tmp_path):
    assert load_recipe(write(tmp_path, "")) == Recipe()


def test_build_compiles_and_parses(tmp_path):
    patterns, operators = load_recipe(write(tmp_path, BUMP_RECIPE)).build()

    assert patterns[0].names == {"major", "minor", "patch"}
    assert [op.kind for op in operators] == [OperationKind.INCREMENT, OperationKind.REPLACE]


def test_build_reports_bad_patterns():
    with pytest.raises(InvalidPattern):
        Recipe(regex=["[oops"], op=["<a>:inc"]).build()


def test_extend_appends_cli_values():
    base = Recipe(regex=["(?<a>x)"], op=["<a>:upper"], lines=False)
    merged = base.extend(["(?<b>y)"], ["<b>:del"], lines=True)

    assert merged.regex == ["(?<a>x)", "(?<b>y)"]
    assert merged.op == ["<a>:upper", "<b>:del"]
    assert merged.lines is True
    assert base.regex == ["(?<a>x)"]


@pytest.mark.parametrize("text, reason", [
    ("- just\n- a list\n", "top level must be a mapping"),
    ("regex: x\nops: y\n", "unknown key(s): ops"),
    ("lines: 'yes'\n", "'lines' must be true or false"),
    ("regex: 5\n", "'regex' must be a string or a list of strings"),
    ("op: [1, 2]\n", "'op' must be a string or a list of strings"),
    ("regex: [unclosed\n", "malformed YAML"),
])
def test_invalid_recipes(tmp_path, text, reason):
    with pytest.raises(RecipeError) as exc:
        load_recipe(write(tmp_path, text))
    assert reason in str(exc.value)


def test_missing_recipe(tmp_path):
    with pytest.raises(RecipeError) as exc:
        load_recipe(str(tmp_path / "nope.yaml"))
    assert "unable to read" in str(exc.value)
