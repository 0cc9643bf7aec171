from __future__ import annotations

import math

import pytest
from lark.exceptions import LarkError

from commonlib.parser import (
    Declaration,
    EBool,
    ECall,
    EList,
    ENumber,
    EReference,
    EString,
    Print,
    parse_expression,
    parse_program,
    parse_program_content,
)


@pytest.mark.unit
def test_parse_let_and_print():
    program = parse_program_content(
        """
        // quotient of a division by zero
        let q = arithmetic.divide(5, 0)
        print "quotient" q
        """
    )
    assert len(program.commands) == 2
    declaration, printed = program.commands
    assert isinstance(declaration, Declaration)
    assert declaration.identifier == "q"
    assert isinstance(declaration.expression, ECall)
    assert declaration.expression.identifier == "arithmetic.divide"
    assert declaration.expression.arguments == [ENumber(5.0), ENumber(0.0)]
    assert isinstance(printed, Print)
    assert printed.identifier == "quotient"
    assert isinstance(printed.expression, EReference)
    assert printed.expression.identifier == "q"


@pytest.mark.unit
def test_call_positions_are_line_and_column():
    program = parse_program_content('print "n"\n  string.length("abc")')
    call = program.commands[0].expression
    assert call.position == "2:3"


@pytest.mark.unit
def test_number_literals():
    assert parse_expression("3") == ENumber(3.0)
    assert parse_expression("-0.5") == ENumber(-0.5)
    assert parse_expression("1e3") == ENumber(1000.0)
    negative_zero = parse_expression("-0")
    assert negative_zero.value == 0.0 and math.copysign(1.0, negative_zero.value) < 0


@pytest.mark.unit
def test_special_float_literals():
    assert math.isnan(parse_expression("NaN").value)
    assert parse_expression("Infinity") == ENumber(math.inf)
    assert parse_expression("-Infinity") == ENumber(-math.inf)


@pytest.mark.unit
def test_boolean_string_and_list_literals():
    assert parse_expression("true") == EBool(True)
    assert parse_expression("false") == EBool(False)
    assert parse_expression('"a\\tb"') == EString("a\tb")
    assert parse_expression('"\\ud83d\\ude00"') == EString("\U0001F600")
    assert parse_expression('"\\ud83d"') == EString("\ud83d")
    assert parse_expression('["a", "b"]') == EList([EString("a"), EString("b")])
    assert parse_expression("[]") == EList([])


@pytest.mark.unit
def test_unqualified_and_nullary_calls():
    call = parse_expression("trim(x)")
    assert isinstance(call, ECall)
    assert call.identifier == "trim"
    assert isinstance(call.arguments[0], EReference)
    assert parse_expression("f()").arguments == []


@pytest.mark.unit
def test_to_syntax_round_trips():
    source = 'let s=string.split("a,,b",",")\nprint "n" arithmetic.add(1.0,NaN)'
    program = parse_program_content(source)
    assert parse_program_content(program.to_syntax()) == program
    assert parse_expression("-Infinity").to_syntax() == "-Infinity"


@pytest.mark.unit
def test_syntax_errors_raise_lark_errors():
    with pytest.raises(LarkError):
        parse_program_content("let = 3")
    with pytest.raises(LarkError):
        parse_program_content('print label 3')
    with pytest.raises(LarkError):
        parse_expression("arithmetic.add(1,")


@pytest.mark.unit
def test_parse_program_reads_files(tmp_path):
    script = tmp_path / "demo.cl"
    script.write_text('print "empty" string.isEmpty("")\n', encoding="utf-8")
    program = parse_program(script)
    assert program.commands[0].identifier == "empty"


@pytest.mark.unit
def test_empty_program():
    assert parse_program_content("").commands == []
    assert parse_program_content("// nothing here\n").commands == []
