import pytest

from plugins.expression_converter.core import (
    OPERATORS,
    ConsecutiveOperatorsError,
    DivisionByZeroError,
    EmptyExpressionError,
    EmptyParensError,
    ErrorKind,
    ExpressionError,
    InsufficientOperandsError,
    InvalidBoundaryError,
    InvalidCharacterError,
    MalformedExpressionError,
    Token,
    TokenKind,
    UnboundVariableError,
    UnmatchedClosingParenError,
    UnmatchedOpeningParenError,
    UnmatchedParenError,
    convert_expression,
    eval_postfix,
    eval_prefix,
    evaluate_notation,
    shunting_yard,
    to_postfix,
    to_prefix,
    tokenize,
    validate,
)
from plugins.expression_converter.core.tokens import LEFT_PAREN, RIGHT_PAREN


@pytest.mark.parametrize(
    ("infix", "postfix", "value"),
    [
        ("(2+3)*4", "2 3 + 4 *", 20),
        ("10+2*6", "10 2 6 * +", 22),
        ("2+3*4-5", "2 3 4 * + 5 -", 9),
    ],
)
def test_postfix_conversion_and_evaluation(infix, postfix, value):
    result = to_postfix(infix)
    assert result.result == postfix
    assert eval_postfix(result.result) == pytest.approx(value)


@pytest.mark.parametrize(
    ("infix", "prefix"),
    [
        ("(2+3)*4", "* + 2 3 4"),
        ("10+2*6", "+ 10 * 2 6"),
        ("2-3-4", "- - 2 3 4"),
        ("8/4/2", "/ / 8 4 2"),
        ("a*b+c*d", "+ * a b * c d"),
        ("(p+q)/(r-s)", "/ + p q - r s"),
    ],
)
def test_prefix_conversion(infix, prefix):
    assert to_prefix(infix).result == prefix


def test_prefix_evaluates_like_postfix_example():
    assert eval_prefix(to_prefix("(2+3)*4").result) == 20


def test_whitespace_is_stripped():
    assert to_postfix(" ( 2 + 3 ) *\t4 ").result == "2 3 + 4 *"
    assert to_prefix("(2 + 3) * 4").result == "* + 2 3 4"


def test_variables_convert_but_do_not_evaluate():
    assert to_postfix("(a+b)*c").result == "a b + c *"
    assert to_postfix("x1+y*z").result == "x1 y z * +"
    with pytest.raises(UnboundVariableError):
        eval_postfix(to_postfix("(a+b)*c").result)


@pytest.mark.parametrize(
    ("infix", "value"),
    [
        ("(1+2)*(3+4)", 21),
        ("100*2+12", 212),
        ("2-3-4", -5),
        ("8/4/2", 1),
        ("1-2+3", 2),
        ("2*(3+4)-10/5", 12),
        ("12/(2+4)*3", 6),
        ("((7))", 7),
        ("2.5*4", 10),
        ("7/2", 3.5),
    ],
)
def test_postfix_and_prefix_agree(infix, value):
    from_postfix = eval_postfix(to_postfix(infix).result)
    from_prefix = eval_prefix(to_prefix(infix).result)
    assert from_postfix == pytest.approx(value)
    assert from_prefix == pytest.approx(from_postfix)


def test_postfix_step_trace():
    result = to_postfix("(2+3)*4")
    assert list(result.steps) == [
        "Converting to Postfix (Shunting Yard Algorithm):",
        "Read '(' -> Push to stack: [(]",
        "Read operand '2' -> Output: [2]",
        "Push '+' to stack: [(, +]",
        "Read operand '3' -> Output: [2, 3]",
        "Read ')' -> Pop '+' to output: [2, 3, +]",
        "Remove '(' from stack: []",
        "Push '*' to stack: [*]",
        "Read operand '4' -> Output: [2, 3, +, 4]",
        "Pop remaining '*' to output: [2, 3, +, 4, *]",
        "Final Postfix: 2 3 + 4 *",
    ]


def test_postfix_trace_records_precedence_pops():
    steps = to_postfix("2*3+4").steps
    assert "Pop '*' (higher/equal precedence) to output: [2, 3, *]" in steps


def test_prefix_step_trace_records_each_stage():
    result = to_prefix("(2+3)*4")
    assert list(result.steps) == [
        "Converting to Prefix:",
        "1. Reverse infix: 4*)3+2(",
        "2. Replace ( with ) and vice versa: 4*(3+2)",
        "3. Convert to postfix: 4 3 2 + *",
        "4. Reverse result: * + 2 3 4",
    ]


def test_prefix_reverses_multi_digit_operands_as_tokens():
    steps = to_prefix("10+2*6").steps
    assert steps[1] == "1. Reverse infix: 6*2+10"


def test_repeated_conversion_is_deterministic():
    first = to_postfix("a*b+c*d")
    second = to_postfix("a*b+c*d")
    assert first == second
    assert to_prefix("(1+2)*(3+4)") == to_prefix("(1+2)*(3+4)")


def test_conversion_result_to_dict():
    payload = to_postfix("1+2").to_dict()
    assert payload["result"] == "1 2 +"
    assert payload["steps"][-1] == "Final Postfix: 1 2 +"


def test_convert_expression_combines_both_notations():
    payload = convert_expression("(2 + 3) * 4")
    assert payload["expression"] == "(2+3)*4"
    assert payload["postfix"] == "2 3 + 4 *"
    assert payload["prefix"] == "* + 2 3 4"
    assert len(payload["steps"]) == 16
    assert payload["steps"][11] == "Converting to Prefix:"


@pytest.mark.parametrize(
    ("expression", "error", "kind"),
    [
        ("2++3", ConsecutiveOperatorsError, ErrorKind.CONSECUTIVE_OPERATORS),
        ("(2+3", UnmatchedOpeningParenError, ErrorKind.UNMATCHED_OPENING_PAREN),
        ("2+3)", UnmatchedClosingParenError, ErrorKind.UNMATCHED_CLOSING_PAREN),
        (")2+3(", UnmatchedClosingParenError, ErrorKind.UNMATCHED_CLOSING_PAREN),
        ("()", EmptyParensError, ErrorKind.EMPTY_PARENS),
        ("2*()", EmptyParensError, ErrorKind.EMPTY_PARENS),
        ("*2+3", InvalidBoundaryError, ErrorKind.INVALID_BOUNDARY),
        ("2+3/", InvalidBoundaryError, ErrorKind.INVALID_BOUNDARY),
        ("2#3", InvalidCharacterError, ErrorKind.INVALID_CHARACTER),
        ("2^3", InvalidCharacterError, ErrorKind.INVALID_CHARACTER),
        ("", EmptyExpressionError, ErrorKind.EMPTY_EXPRESSION),
        ("   ", EmptyExpressionError, ErrorKind.EMPTY_EXPRESSION),
    ],
)
def test_validator_rejects(expression, error, kind):
    with pytest.raises(error) as exc_info:
        validate(expression)
    assert exc_info.value.kind is kind
    assert isinstance(exc_info.value, ExpressionError)


def test_validator_checks_characters_before_parentheses():
    with pytest.raises(InvalidCharacterError):
        validate("(2#3")


def test_validator_accepts_valid_expression():
    assert validate("(a + b) * 2.5") is None


def test_conversion_fails_before_producing_output():
    with pytest.raises(ConsecutiveOperatorsError):
        to_postfix("2++3")
    with pytest.raises(UnmatchedOpeningParenError):
        to_prefix("(2+3")


def test_quirk_trailing_minus_passes_validation():
    validate("2-")
    assert to_postfix("2-").result == "2 -"
    with pytest.raises(InsufficientOperandsError):
        eval_postfix(to_postfix("2-").result)


def test_quirk_leading_minus_is_accepted_but_not_unary():
    validate("-5+3")
    assert to_postfix("-5+3").result == "5 - 3 +"
    with pytest.raises(InsufficientOperandsError):
        eval_postfix("5 - 3 +")


def test_quirk_unary_minus_after_operator_is_rejected():
    with pytest.raises(ConsecutiveOperatorsError):
        validate("3*-2")


def test_tokenize_groups_operands():
    assert tokenize("x1+12*(y)") == [
        Token.operand("x1"),
        Token.operator("+"),
        Token.operand("12"),
        Token.operator("*"),
        LEFT_PAREN,
        Token.operand("y"),
        RIGHT_PAREN,
    ]
    assert tokenize("2.5")[0].kind is TokenKind.OPERAND


def test_tokenize_rejects_unknown_character():
    with pytest.raises(InvalidCharacterError):
        tokenize("2%3")


def test_shunting_yard_rejects_unbalanced_tokens():
    with pytest.raises(UnmatchedParenError):
        shunting_yard([Token.operand("1"), RIGHT_PAREN])
    with pytest.raises(UnmatchedParenError):
        shunting_yard([LEFT_PAREN, Token.operand("1")])


def test_operator_table_is_read_only():
    assert OPERATORS["*"].precedence == 2
    assert OPERATORS["-"].associativity == "left"
    with pytest.raises(TypeError):
        OPERATORS["^"] = OPERATORS["*"]  # type: ignore[index]


@pytest.mark.parametrize(
    ("tokens", "error"),
    [
        ("x 2 +", UnboundVariableError),
        ("2 +", InsufficientOperandsError),
        ("2 0 /", DivisionByZeroError),
        ("2 0.0 /", DivisionByZeroError),
        ("2 3", MalformedExpressionError),
        ("", MalformedExpressionError),
        ("2 ( +", MalformedExpressionError),
        ("1.2.3", MalformedExpressionError),
    ],
)
def test_postfix_evaluation_errors(tokens, error):
    with pytest.raises(error):
        eval_postfix(tokens)


def test_postfix_operand_order():
    assert eval_postfix("10 4 -") == 6
    assert eval_postfix("8 2 /") == 4


def test_prefix_operand_order():
    assert eval_prefix("- 10 4") == 6
    assert eval_prefix("/ 8 2") == 4


@pytest.mark.parametrize(
    ("tokens", "error"),
    [
        ("+ x 2", UnboundVariableError),
        ("+ 2", InsufficientOperandsError),
        ("/ 2 0", DivisionByZeroError),
        ("2 3", MalformedExpressionError),
    ],
)
def test_prefix_evaluation_errors(tokens, error):
    with pytest.raises(error):
        eval_prefix(tokens)


def test_evaluate_notation_dispatch():
    assert evaluate_notation("2 3 + 4 *", "postfix") == 20
    assert evaluate_notation("* + 2 3 4", "prefix") == 20
    with pytest.raises(ExpressionError):
        evaluate_notation("1", "infix")  # type: ignore[arg-type]


def test_error_details_carry_kind():
    with pytest.raises(ExpressionError) as exc_info:
        eval_postfix("2 0 /")
    assert exc_info.value.to_details() == {"kind": "division_by_zero"}
    assert str(exc_info.value) == "Division by zero"
