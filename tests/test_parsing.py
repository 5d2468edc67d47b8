#!/usr/bin/env python3
"""
REGOP PARSING SUITE
-------------------
Pattern compilation and operator/parameter grammar.

Author: Regop Team
Date: 2026-10-19
"""

import pytest

from regop.core.errors import (
    InvalidOperatorSyntax,
    InvalidPattern,
    MissingParameter,
    UnknownOperator,
)
from regop.core.models import (
    NO_PARAMETER,
    GroupReference,
    IntegerParam,
    OperationKind,
    TextParam,
)
from regop.editing.compiler import PatternCompiler
from regop.editing.parser import OperatorParser, parse_int, parse_parameter


@pytest.fixture
def compiler():
    return PatternCompiler()


@pytest.fixture
def parser():
    return OperatorParser()


# --- Pattern Compiler ---

def test_angle_bracket_groups_are_named(compiler):
    pattern = compiler.compile(r'version = "(?<major>\d+)\.(?<minor>\d+)"')
    assert pattern.names == {"major", "minor"}
    assert pattern.declares("major")
    assert not pattern.declares("patch")


def test_python_named_groups_and_unnamed_groups(compiler):
    pattern = compiler.compile(r"(?P<x>a)(b)")
    assert pattern.names == {"x"}


def test_invalid_regex_is_rejected(compiler):
    with pytest.raises(InvalidPattern) as exc:
        compiler.compile("[invalid")
    assert "not a valid regex" in str(exc.value)
    assert exc.value.source == "[invalid"


def test_invalid_group_name_is_rejected(compiler):
    with pytest.raises(InvalidPattern):
        compiler.compile(r"(?<1abc>x)")


@pytest.mark.parametrize("source", [
    r"(?<=v)\d+",
    r"(?<!x)\d",
    r"\(?<a>",
    r"[(?<]",
    r"[]?<]",
    r"[^]?<]",
])
def test_normalize_leaves_non_group_constructs_alone(compiler, source):
    assert compiler.normalize(source) == source


def test_lookbehind_next_to_named_group(compiler):
    pattern = compiler.compile(r"(?<=v)(?<n>\d+)")
    assert pattern.names == {"n"}
    assert pattern.regex.search("v12").group("n") == "12"


def test_compile_all_preserves_order(compiler):
    patterns = compiler.compile_all([r"(?<a>x)", r"(?<b>y)"])
    assert [p.names for p in patterns] == [{"a"}, {"b"}]


# --- Operator Parser ---

def test_operator_with_integer_parameter(parser):
    op = parser.parse("<version>:inc:5")
    assert op.target == "version"
    assert op.kind is OperationKind.INCREMENT
    assert op.parameter == IntegerParam(5)
    assert op.source == "<version>:inc:5"


@pytest.mark.parametrize("text, kind", [
    ("<a>:inc", OperationKind.INCREMENT),
    ("<a>:dec", OperationKind.DECREMENT),
])
def test_inc_dec_default_to_one(parser, text, kind):
    op = parser.parse(text)
    assert op.kind is kind
    assert op.parameter == IntegerParam(1)


@pytest.mark.parametrize("text, kind", [
    ("<a>:del", OperationKind.DELETE),
    ("<a>:upper", OperationKind.UPPERCASE),
    ("<a>:lower", OperationKind.LOWERCASE),
    ("<a>:del:ignored", OperationKind.DELETE),
])
def test_parameterless_operations(parser, text, kind):
    op = parser.parse(text)
    assert op.kind is kind
    assert op.parameter == NO_PARAMETER


def test_group_reference_parameter(parser):
    op = parser.parse("<major>:swap:<minor>")
    assert op.kind is OperationKind.SWAP
    assert op.parameter == GroupReference("minor")


def test_text_parameter_keeps_whitespace(parser):
    assert parser.parse("<text>:rep: ").parameter == TextParam(" ")


@pytest.mark.parametrize("keyword", ["rep", "swap", "mul", "div", "append", "prepend"])
def test_missing_required_parameter(parser, keyword):
    with pytest.raises(MissingParameter) as exc:
        parser.parse(f"<test>:{keyword}")
    assert f"parameter required in '{keyword}' operator" in str(exc.value)
    assert exc.value.keyword == keyword


def test_empty_parameter_counts_as_missing(parser):
    with pytest.raises(MissingParameter):
        parser.parse("<test>:rep:")


def test_unknown_operation(parser):
    with pytest.raises(UnknownOperator) as exc:
        parser.parse("<test>:frobnicate:1")
    assert "'frobnicate' is not a valid operator" in str(exc.value)


@pytest.mark.parametrize("text", [
    "invalid",
    "<>:inc",
    "test:inc",
    "<test>inc",
    "<a>:rep:x:y",
    " <a>:inc",
])
def test_malformed_operators(parser, text):
    with pytest.raises(InvalidOperatorSyntax):
        parser.parse(text)


def test_parse_all(parser):
    ops = parser.parse_all(["<a>:inc", "<b>:upper"])
    assert [o.target for o in ops] == ["a", "b"]


# --- Parameter literals ---

@pytest.mark.parametrize("raw, expected", [
    ("42", IntegerParam(42)),
    ("-10", IntegerParam(-10)),
    ("+7", IntegerParam(7)),
    ("<capture>", GroupReference("capture")),
    ("hello", TextParam("hello")),
    ("x<b>y", TextParam("x<b>y")),
    ("1_000", TextParam("1_000")),
    ("99999999999999999999", TextParam("99999999999999999999")),
])
def test_parameter_literals(raw, expected):
    assert parse_parameter(raw) == expected


def test_parse_int_is_strict():
    assert parse_int("42") == 42
    assert parse_int("-10") == -10
    assert parse_int("9223372036854775807") == 9223372036854775807
    assert parse_int("-9223372036854775808") == -9223372036854775808
    assert parse_int("9223372036854775808") is None
    assert parse_int(" 4") is None
    assert parse_int("not_a_number") is None
    assert parse_int("") is None
