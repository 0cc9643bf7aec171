"""
commonlib script parser - expression scripts parsed with Lark

A script is a sequence of commands:

    // comments run to the end of the line
    let q = arithmetic.divide(5, 0)
    print "quotient" q
    print "parts" string.split("a,,b", ",")
"""

from dataclasses import dataclass
from typing import List, Union
from pathlib import Path
import json
import math

from lark import Lark, Transformer, v_args

Position = str


@dataclass
class Expression:
    """Base class for script expressions"""

    def to_syntax(self) -> str:
        """Convert the expression to syntax form"""
        raise NotImplementedError("Must be implemented by subclasses")


@dataclass
class ECall(Expression):
    """Primitive call expression"""

    position: Position
    identifier: str
    arguments: List[Expression]

    def __str__(self) -> str:
        arg_str = [str(arg) for arg in self.arguments]
        return f"{self.identifier}({arg_str})"

    def to_syntax(self) -> str:
        arg_str = ",".join([arg.to_syntax() for arg in self.arguments])
        return f"{self.identifier}({arg_str})"


@dataclass
class EReference(Expression):
    """Reference to a name bound by `let`"""

    position: Position
    identifier: str

    def __str__(self) -> str:
        return self.identifier

    def to_syntax(self) -> str:
        return self.identifier


@dataclass
class ENumber(Expression):
    """Numeric literal expression, NaN and the infinities included"""

    value: float

    def __str__(self) -> str:
        return self.to_syntax()

    def to_syntax(self) -> str:
        if math.isnan(self.value):
            return "NaN"
        if math.isinf(self.value):
            return "Infinity" if self.value > 0 else "-Infinity"
        return repr(self.value)


@dataclass
class EBool(Expression):
    """Boolean literal expression"""

    value: bool

    def __str__(self) -> str:
        return f"{self.value}".lower()

    def to_syntax(self) -> str:
        return f"{self.value}".lower()


@dataclass
class EString(Expression):
    """String literal expression"""

    value: str

    def __str__(self) -> str:
        return self.value

    def to_syntax(self) -> str:
        return json.dumps(self.value)


@dataclass
class EList(Expression):
    """Array literal expression"""

    items: List[Expression]

    def __str__(self) -> str:
        return self.to_syntax()

    def to_syntax(self) -> str:
        return "[" + ",".join(item.to_syntax() for item in self.items) + "]"


@dataclass
class Command:
    """Base class for script commands"""

    def to_syntax(self) -> str:
        """Convert the command to syntax form"""
        raise NotImplementedError("Must be implemented by subclasses")


@dataclass
class Declaration(Command):
    """Binding of a name to the value of an expression"""

    identifier: str
    expression: Expression

    def to_syntax(self) -> str:
        return f"let {self.identifier}={self.expression.to_syntax()}"


@dataclass
class Print(Command):
    """Command to print an expression"""

    position: Position
    identifier: str
    expression: Expression

    def to_syntax(self) -> str:
        return f"print {json.dumps(self.identifier)} {self.expression.to_syntax()}"


@dataclass
class Program:
    """A program consisting of a list of commands"""

    commands: List[Command]

    def to_syntax(self) -> str:
        return "\n".join([cmd.to_syntax() for cmd in self.commands])

    def __str__(self) -> str:
        return self.to_syntax()


grammar = r"""
    start: command*

    ?command: let_cmd | print_cmd

    let_cmd: "let" NAME "=" expression
    print_cmd: "print" ESCAPED_STRING expression

    ?expression: number
               | special
               | "true" -> true
               | "false" -> false
               | ESCAPED_STRING -> string
               | call
               | NAME -> reference
               | list

    call: identifier "(" [arguments] ")"
    list: "[" [arguments] "]"
    arguments: expression ("," expression)*

    identifier: NAME ("." NAME)?
    number: SIGNED_NUMBER
    special: "NaN" -> nan
           | "Infinity" -> positive_infinity
           | "-" "Infinity" -> negative_infinity

    NAME: /[a-zA-Z_][a-zA-Z0-9_]*/
    COMMENT: "//" /[^\n]*/

    %import common.ESCAPED_STRING
    %import common.SIGNED_NUMBER
    %import common.WS
    %ignore WS
    %ignore COMMENT
"""


def _position(meta) -> Position:
    if getattr(meta, "empty", True):
        return "?"
    return f"{meta.line}:{meta.column}"


class ScriptTransformer(Transformer):
    """Transform the parse tree into the AST"""

    @v_args(inline=True)
    def start(self, *commands):
        return Program(list(commands))

    @v_args(inline=True)
    def let_cmd(self, name, expression):
        return Declaration(str(name), expression)

    @v_args(meta=True, inline=True)
    def print_cmd(self, meta, label, expression):
        return Print(_position(meta), json.loads(label), expression)

    @v_args(meta=True, inline=True)
    def call(self, meta, identifier, arguments=None):
        return ECall(_position(meta), identifier, arguments or [])

    @v_args(inline=True)
    def list(self, arguments=None):
        return EList(arguments or [])

    @v_args(inline=True)
    def arguments(self, *expressions):
        return [*expressions]

    @v_args(inline=True)
    def identifier(self, *names):
        return ".".join(str(name) for name in names)

    @v_args(meta=True, inline=True)
    def reference(self, meta, name):
        return EReference(_position(meta), str(name))

    @v_args(inline=True)
    def number(self, token):
        return ENumber(float(token))

    def nan(self, _):
        return ENumber(math.nan)

    def positive_infinity(self, _):
        return ENumber(math.inf)

    def negative_infinity(self, _):
        return ENumber(-math.inf)

    def true(self, _):
        return EBool(True)

    def false(self, _):
        return EBool(False)

    @v_args(inline=True)
    def string(self, token):
        # json.loads resolves the escapes, \uXXXX surrogates included
        return EString(json.loads(token))


parser = Lark(
    grammar,
    start=["start", "expression"],
    parser="lalr",
    propagate_positions=True,
)


def parse_program_content(content: str) -> Program:
    """
    Parse a script from content string

    Args:
        content: String containing the program text

    Returns:
        A Program object representing the parsed program
    """
    parse_tree = parser.parse(content, start="start")
    result = ScriptTransformer().transform(parse_tree)

    # Ensure we got a Program object
    if not isinstance(result, Program):
        raise ValueError(f"Expected Program object, got {type(result).__name__}")

    return result


def parse_expression(content: str) -> Expression:
    """Parse a single expression, e.g. a literal argument given on the command line"""
    parse_tree = parser.parse(content, start="expression")
    result = ScriptTransformer().transform(parse_tree)
    if not isinstance(result, Expression):
        raise ValueError(f"Expected Expression object, got {type(result).__name__}")
    return result


def parse_program(filename: Union[str, Path]) -> Program:
    """
    Parse a script from a file

    Args:
        filename: Path to the file containing the program

    Returns:
        A Program object representing the parsed program
    """
    with open(filename, "r", encoding="utf-8") as f:
        program_text = f.read()
    return parse_program_content(program_text)
