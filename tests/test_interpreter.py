import io
import unittest

from tinylox.errors import (
    DivisionByZeroError, LoxRuntimeError, NestingTooDeepError, OperandTypeError, UndefinedVariableError)
from tinylox.interpreter import Interpreter, is_equal, is_truthy, stringify
from tinylox.parser import parse
from tinylox.scanner import scan


def execute(source, interpreter=None):
    """Runs source and returns everything it printed."""
    stdout = io.StringIO()
    if interpreter is None:
        interpreter = Interpreter(stdout)
    else:
        interpreter.stdout = stdout
    tokens, scan_errors = scan(source)
    statements, parse_errors = parse(tokens)
    assert not scan_errors and not parse_errors, (scan_errors, parse_errors)
    interpreter.interpret(statements)
    return stdout.getvalue()


class ValueTestCase(unittest.TestCase):

    def test_is_truthy(self):
        for case in [None, False]:
            self.assertFalse(is_truthy(case), case)
        for case in [True, 0.0, 1.0, "", "false"]:
            self.assertTrue(is_truthy(case), case)

    def test_is_equal(self):
        should_be_equal = [(None, None), (True, True), (1.0, 1.0), ("a", "a"), (0.0, -0.0)]
        for left, right in should_be_equal:
            self.assertTrue(is_equal(left, right), (left, right))

        should_differ = [(None, False), (True, 1.0), (False, 0.0), ("1", 1.0), ("", None), (1.0, 2.0),
                         (float("nan"), float("nan"))]
        for left, right in should_differ:
            self.assertFalse(is_equal(left, right), (left, right))

    def test_stringify(self):
        cases = [(None, "nil"), (True, "true"), (False, "false"), (3.0, "3"), (2.5, "2.5"), ("text", "text"),
                 (-0.0, "-0")]
        for case, expected in cases:
            self.assertEqual(expected, stringify(case), case)


class ExpressionTestCase(unittest.TestCase):

    def test_print_values(self):
        cases = {
            "print 1 + 2;": "3\n",
            "print 7 / 2;": "3.5\n",
            "print -(3 - 5) * 2;": "4\n",
            'print "hello" + "world";': "helloworld\n",
            "print nil;": "nil\n",
            "print !nil;": "true\n",
            "print !0;": "false\n",
            'print !"";': "false\n",
            "print 2 >= 2;": "true\n",
            "print 1 < 1;": "false\n",
            "print 1 == 1;": "true\n",
            'print "a" != "a";': "false\n",
            "print true == 1;": "false\n",
            "print nil == false;": "false\n",
            "print nil == nil;": "true\n",
            'print 1 == "1";': "false\n",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, execute(case), case)

    def test_type_errors(self):
        cases = {
            '1 + "a";': "Operands must be two numbers or two strings.",
            "nil + nil;": "Operands must be two numbers or two strings.",
            '-"a";': "Operand must be a number.",
            "-nil;": "Operand must be a number.",
            '"a" - "b";': "Operands must be numbers.",
            "true * 2;": "Operands must be numbers.",
            '1 < "2";': "Operands must be numbers.",
            "nil / 1;": "Operands must be numbers.",
        }
        for case, expected in cases.items():
            with self.assertRaises(OperandTypeError, msg=case) as context:
                execute(case)
            self.assertEqual(expected, context.exception.message, case)

    def test_division_by_zero(self):
        for case in ["5 / 0;", "5 / (1 - 1);", "0 / -0;"]:
            with self.assertRaises(DivisionByZeroError, msg=case) as context:
                execute(case)
            self.assertEqual("Division by zero.\n[line 1]", str(context.exception), case)
            self.assertNotIsInstance(context.exception, OperandTypeError)

    def test_runtime_error_line(self):
        with self.assertRaises(OperandTypeError) as context:
            execute("var a = 1;\n\nprint a +\n nil;")
        self.assertEqual(3, context.exception.line)
        self.assertEqual("+", context.exception.token.lexeme)

    def test_nesting_too_deep(self):
        long_sum = " + ".join(["1"] * 2000)
        cases = {
            "print " + long_sum + ";": ("+", 1),
            "var a =\n" + long_sum + ";": ("a", 1),
            "var a = 1;\n{ var a = 2;\n  print " + long_sum + "; }": ("{", 2),
        }
        for case, expected in cases.items():
            interpreter = Interpreter(io.StringIO())
            with self.assertRaises(NestingTooDeepError, msg=case[:20]) as context:
                execute(case, interpreter)
            self.assertIsInstance(context.exception, LoxRuntimeError)
            self.assertEqual("Expression nesting too deep.", context.exception.message)
            self.assertEqual(expected, (context.exception.token.lexeme, context.exception.line), case[:20])
            self.assertEqual(1, interpreter.environment.depth, case[:20])


class StatementTestCase(unittest.TestCase):

    def test_variables(self):
        self.assertEqual("1\nnil\n", execute("var a = 1; var b; print a; print b;"))
        self.assertEqual("2\n", execute("var a = 1; var a = 2; print a;"))
        self.assertEqual("3\n3\n", execute("var a = 1; var b; b = a = 3; print a; print b;"))
        self.assertEqual("5\n", execute("var a = 1; print a = 5;"))

    def test_block_shadowing(self):
        self.assertEqual("1\n", execute("var x = 1; { var x = 2; } print x;"))
        self.assertEqual("2\n1\n", execute("var x = 1; { var x = 2; print x; } print x;"))

    def test_block_assigns_outer(self):
        self.assertEqual("2\n", execute("var x = 1; { x = 2; } print x;"))
        self.assertEqual("inner\nouter\n", execute(
            'var a = "outer"; { var a = "x"; { a = "inner"; print a; } } print a;'))

    def test_block_locals_are_discarded(self):
        with self.assertRaises(UndefinedVariableError):
            execute("{ var inner = 1; } print inner;")

    def test_undefined_variable(self):
        with self.assertRaises(UndefinedVariableError) as context:
            execute("\nprint y;")
        self.assertEqual("Undefined variable 'y'.\n[line 2]", str(context.exception))

        with self.assertRaises(UndefinedVariableError) as context:
            execute("z = 1;")
        self.assertEqual("Undefined variable 'z'.", context.exception.message)

    def test_assignment_does_not_define(self):
        interpreter = Interpreter(io.StringIO())
        with self.assertRaises(UndefinedVariableError):
            execute("{ fresh = 1; }", interpreter)
        self.assertNotIn("fresh", interpreter.environment.globals)

    def test_error_stops_execution(self):
        stdout = io.StringIO()
        interpreter = Interpreter(stdout)
        tokens, __ = scan("print 1; print missing; print 2;")
        statements, __ = parse(tokens)
        with self.assertRaises(LoxRuntimeError):
            interpreter.interpret(statements)
        self.assertEqual("1\n", stdout.getvalue())

    def test_environment_restored_after_error(self):
        interpreter = Interpreter(io.StringIO())
        with self.assertRaises(LoxRuntimeError):
            execute("var a = 1; { var a = 2; { print nope; } }", interpreter)
        self.assertEqual(1, interpreter.environment.depth)
        self.assertEqual("1\n", execute("print a;", interpreter))

    def test_globals_persist_between_calls(self):
        interpreter = Interpreter()
        execute("var count = 1;", interpreter)
        execute("count = count + 1;", interpreter)
        self.assertEqual("2\n", execute("print count;", interpreter))


if __name__ == '__main__':
    unittest.main()
