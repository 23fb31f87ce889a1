import pytest

from dsakit.expressions import (
    evaluate_postfix,
    infix_to_postfix,
    is_matching_pair,
    is_right_associative,
    is_valid_brackets,
    is_valid_expression,
    precedence,
)


@pytest.mark.parametrize(
    "opening, closing, expected",
    [
        ("(", ")", True),
        ("[", "]", True),
        ("{", "}", True),
        ("(", "]", False),
        ("[", "}", False),
        ("{", ")", False),
        (")", "(", False),
    ],
)
def test_is_matching_pair(opening, closing, expected):
    assert is_matching_pair(opening, closing) is expected


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("()", True),
        ("[]", True),
        ("{}", True),
        ("()[]{}", True),
        ("{[]}", True),
        ("{[()]}", True),
        ("((()))", True),
        ("[[[{}]]]", True),
        ("()[]{}()", True),
        ("(3 + 5) * 2", True),
        ("[(2 + 3) * {4 - 1}]", True),
        ("((a + b) * (c - d))", True),
        ("{x + [y * (z - 5)]}", True),
        ("func(arr[i], obj{key})", True),
        ("(", False),
        (")", False),
        ("[", False),
        ("]", False),
        ("{", False),
        ("}", False),
        ("(]", False),
        ("[}", False),
        ("{)", False),
        ("(3 + 5]", False),
        ("[{(})]", False),
        ("((3 + 5)", False),
        ("(3 + 5))", False),
        ("[(2 + 3)", False),
        ("[(2 + 3])", False),
        ("((a + b) * (c - d)]", False),
        ("{[(])}", False),
        (")(", False),
        ("][", False),
        ("}{", False),
        (")3 + 5(", False),
        ("", True),
        ("2 + 3 * 4", True),
        ("abc xyz 123", True),
        ("+-*/", True),
        ("   ", True),
        ("(()())", True),
        ("{[()()]}", True),
        ("((((((((()))))))})", False),
        ("(((((((())))))))", True),
        ("{[({}[])]}", True),
        ("if (x > 0) { return arr[x]; }", True),
        ("for (int i = 0; i < n; i++) { sum += arr[i]; }", True),
        ("while (stack.empty()) { process(); }", True),
        ("function(param1, param2, arr[0])", True),
        ("{{nested}, [array]}", True),
    ],
)
def test_is_valid_expression(expression, expected):
    assert is_valid_expression(expression) is expected


def test_is_valid_expression_stress():
    assert is_valid_expression("(" * 100 + ")" * 100) is True
    assert is_valid_expression("(" * 100 + ")" * 99) is False
    assert is_valid_expression("([{" * 50 + "}])" * 50) is True


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()", True),
        ("({})", True),
        ("({}]", False),
        ("({}", False),
        ("{)[]{}", False),
        ("", True),
    ],
)
def test_is_valid_brackets(text, expected):
    assert is_valid_brackets(text) is expected


def test_is_valid_brackets_rejects_other_characters():
    assert is_valid_brackets("(a)") is False
    assert is_valid_expression("(a)") is True


def test_precedence_values():
    assert precedence("^") == 3
    assert precedence("*") == precedence("/") == 2
    assert precedence("+") == precedence("-") == 1
    assert precedence("(") == -1
    assert precedence("x") == -1


def test_right_associativity():
    assert is_right_associative("^") is True
    assert is_right_associative("+") is False
    assert is_right_associative("*") is False


def test_infix_to_postfix_worked_example():
    assert infix_to_postfix("a*(b+c)/d") == "abc+*d/"


def test_infix_to_postfix_power_is_right_associative():
    assert infix_to_postfix("a^b^c") == "abc^^"


def test_infix_to_postfix_operands_only_unchanged():
    assert infix_to_postfix("abc123") == "abc123"


def test_infix_to_postfix_drops_parentheses_and_keeps_symbols():
    expression = "(a+b)*(c-d)/e^f"
    result = infix_to_postfix(expression)
    assert "(" not in result and ")" not in result
    assert sorted(result) == sorted(expression.replace("(", "").replace(")", ""))


def test_infix_to_postfix_preserves_operand_order():
    result = infix_to_postfix("a+b*c-(d/e)")
    operands = [ch for ch in result if ch.isalpha()]
    assert operands == ["a", "b", "c", "d", "e"]


@pytest.mark.parametrize("expression", ["a+b)", "(a+b", ")"])
def test_infix_to_postfix_unbalanced(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)


@pytest.mark.parametrize(
    "infix, expected",
    [("2*(3+4)", 2 * (3 + 4)), ("1+2*3", 1 + 2 * 3), ("(1+2)*(3+4)", (1 + 2) * (3 + 4))],
)
def test_postfix_round_trip_for_commutative_operators(infix, expected):
    assert evaluate_postfix(infix_to_postfix(infix)) == expected


def test_evaluate_postfix_documented_expression():
    assert evaluate_postfix("5 1 2 + 4 * + 3 -") == -14


def test_evaluate_postfix_single_operand():
    assert evaluate_postfix("7") == 7


def test_evaluate_postfix_top_is_left_operand():
    assert evaluate_postfix("34-") == -evaluate_postfix("43-")
    assert evaluate_postfix("34+") == evaluate_postfix("43+")
    assert evaluate_postfix("36/") == evaluate_postfix("6 3 / 3 3 / *") * evaluate_postfix("1 2 /") + evaluate_postfix("36/")


def test_evaluate_postfix_ignores_spaces():
    assert evaluate_postfix("1 2 +") == evaluate_postfix("12+")


def test_evaluate_postfix_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("05/")


@pytest.mark.parametrize("expression", ["", "+", "1+", "   "])
def test_evaluate_postfix_malformed(expression):
    with pytest.raises(ValueError):
        evaluate_postfix(expression)