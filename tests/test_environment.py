import unittest

from tinylox.environment import Environment
from tinylox.errors import UndefinedVariableError
from tinylox.tokens import Token, TokenType


def name(lexeme, line=1):
    return Token(TokenType.IDENTIFIER, lexeme, None, line)


class EnvironmentTestCase(unittest.TestCase):

    def test_define_and_get(self):
        environment = Environment()
        environment.define("a", 1.0)
        self.assertEqual(1.0, environment.get(name("a")))

        environment.define("a", "redefined")
        self.assertEqual("redefined", environment.get(name("a")))

    def test_get_undefined(self):
        with self.assertRaises(UndefinedVariableError) as context:
            Environment().get(name("missing", line=7))
        self.assertEqual("Undefined variable 'missing'.\n[line 7]", str(context.exception))

    def test_assign_does_not_create(self):
        environment = Environment()
        self.assertRaises(UndefinedVariableError, environment.assign, name("a"), 1.0)
        self.assertNotIn("a", environment.globals)

    def test_define_writes_innermost_frame(self):
        environment = Environment()
        environment.define("a", "outer")
        with environment.enclosed():
            environment.define("a", "inner")
            self.assertEqual("inner", environment.get(name("a")))
        self.assertEqual("outer", environment.get(name("a")))

    def test_assign_updates_nearest_binding(self):
        environment = Environment()
        environment.define("a", "global")
        with environment.enclosed():
            environment.define("a", "middle")
            with environment.enclosed():
                environment.assign(name("a"), "changed")
                self.assertEqual(3, environment.depth)
            self.assertEqual("changed", environment.get(name("a")))
        self.assertEqual("global", environment.get(name("a")))

    def test_enclosed_lookup_reaches_globals(self):
        environment = Environment()
        environment.define("a", True)
        with environment.enclosed():
            with environment.enclosed():
                self.assertIs(True, environment.get(name("a")))
                environment.assign(name("a"), None)
        self.assertIsNone(environment.get(name("a")))

    def test_enclosed_restores_on_error(self):
        environment = Environment()
        with self.assertRaises(UndefinedVariableError):
            with environment.enclosed():
                environment.define("local", 1.0)
                environment.get(name("missing"))
        self.assertEqual(1, environment.depth)
        self.assertRaises(UndefinedVariableError, environment.get, name("local"))


if __name__ == '__main__':
    unittest.main()
