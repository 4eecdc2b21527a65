import pytest

from slang.errors import SlangArityError, SlangPatternError, SlangTypeError, SlangUnboundSymbol
from slang.evaluation.evaluator import evaluate
from slang.reader.parser import parse
from slang.types.application import Application
from slang.types.frame import Frame
from slang.types.nil import Nil
from slang.types.special_form import SpecialForm
from slang.types.symbol import Symbol

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

@pytest.mark.parametrize("literal", [5.0, -0.5, "hello", "", Nil])
def test_literals_are_fixed_points(literal, stack):
    assert evaluate(literal, stack) == literal


@pytest.mark.parametrize("source,expected", [("5", 5.0), ('"hi"', "hi"), ("Φ", Nil), ("nil", Nil)])
def test_parsed_literals_self_evaluate(source, expected, ev):
    assert ev(source) == expected


def test_symbol_lookup(stack):
    stack.push(Frame({Symbol("x"): 42.0}))
    assert evaluate(Symbol("x"), stack) == 42.0
    with pytest.raises(SlangUnboundSymbol, match="Variable 'z' is not defined"):
        evaluate(Symbol("z"), stack)


def test_def_scoping(ev, stack):
    assert ev("(δ x 1 x)") == 1.0
    assert len(stack) == 0


def test_def_nested_shadowing(ev):
    assert ev("(δ x 1 (δ x 2 x))") == 2.0
    assert ev("(δ x 1 (δ y 2 x))") == 1.0


def test_def_arity_error(ev):
    with pytest.raises(SlangArityError, match="3 arguments expected") as info:
        ev("(δ x 1)")
    assert "(δ x 5 (ι x))" in str(info.value)


def test_def_invalid_name(ev):
    with pytest.raises(SlangTypeError, match="invalid variable name '5'"):
        ev("(δ 5 1 2)")


def test_lambda_application(ev):
    assert ev("((λ x x) 5)") == 5.0
    assert ev("(lambda x x 5)") == 5.0


def test_lambda_without_argument_is_a_value(ev):
    assert ev("(λ x x)") == parse("(λ x x)")


def test_closure_capture_by_substitution(ev):
    assert ev("(δ k 3 (λ y k))") == parse("(λ y 3)")


def test_lambda_pattern_guard(ev):
    assert ev('(λ 5 "ok" 5)') == "ok"
    assert ev('(λ "a" 1 "a")') == 1.0
    assert ev("(λ Φ 1 (Ω))") == 1.0


def test_lambda_pattern_mismatch(ev):
    with pytest.raises(SlangPatternError, match="expected '5' but received '6'") as info:
        ev('(λ 5 "ok" 6)')
    assert info.value.expected == 5.0
    assert info.value.actual == 6.0


@pytest.mark.parametrize("source", ['(λ "5" 1 5)', "(λ 0.3 1 0.30000000000000004)", "(λ 1 1 Φ)"])
def test_lambda_pattern_is_exact(source, ev):
    with pytest.raises(SlangPatternError):
        ev(source)


def test_lambda_ignored_parameter(ev):
    assert ev("(λ _ 3 4)") == 3.0
    # the argument is still evaluated
    with pytest.raises(SlangUnboundSymbol, match="'nope'"):
        ev("(λ _ 3 nope)")


def test_lambda_invalid_parameter(ev):
    with pytest.raises(SlangTypeError, match="Invalid lambda"):
        ev("(λ (f x) 1 2)")


def test_lambda_arity_error(ev):
    with pytest.raises(SlangArityError, match="2 or more arguments expected"):
        ev("(λ x)")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(λ x (λ y x) 1 2)", 1.0),
        ("((λ x (λ y y)) 1 2)", 2.0),
        ("(λ 1 (λ y y) 1 4)", 4.0),
        ("(λ _ (λ y y) 0 4)", 4.0),
        ("(λ x (λ y (λ z y)) 1 2 3)", 2.0),
    ]
)
def test_curried_lambda(source, expected, ev):
    assert ev(source) == expected


def test_curried_lambda_releases_parameter_before_remaining_arguments(ev):
    assert ev("(δ x 10 ((λ x (λ y y)) 1 x))") == 10.0


@pytest.mark.parametrize(
    "selector,expected",
    [("true", 1.0), ("false", 2.0)],
)
def test_church_booleans(selector, expected, ev):
    source = f"""
    (δ true (λ p (λ q p))
      (δ false (λ p (λ q q))
        ({selector} 1 2)))
    """
    assert ev(source) == expected


def test_variable_headed_application(ev):
    assert ev("(δ f (λ x x) (f 9))") == 9.0


def test_operator_resolved_through_frames(ev):
    # (g a) sits inside an operator that substitution does not descend into
    assert ev("(δ f (λ a (g a)) (δ g (λ b b) (f 1)))") == 1.0


def test_nested_operator_is_flattened(stack):
    expr = Application(Application(SpecialForm.LAMBDA, (Symbol("x"), Symbol("x"))), (7.0,))
    assert evaluate(expr, stack) == 7.0


def test_literal_operator_cannot_be_applied(ev):
    with pytest.raises(SlangTypeError, match="Cannot apply '1'"):
        ev("(1 2)")
    with pytest.raises(SlangTypeError, match="Cannot apply '5'"):
        ev("(δ n 5 (n 1))")


def test_first_failure_aborts_and_restores_stack(ev, stack):
    with pytest.raises(SlangPatternError):
        ev("(δ x 1 (λ 5 x 6))")
    assert len(stack) == 0
