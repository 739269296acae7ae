from tinylox.errors import ParseError
from tinylox.syntax import (
    Assign, Binary, Block, Expression, Grouping, Literal, Print, Unary, Var, Variable)
from tinylox.tokens import TokenType


class Parser:
    STATEMENT_STARTS = {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }

    def __init__(self, tokens, report=None):
        self.tokens = tokens
        self.current = 0
        self.report = report
        self.errors = []

    def parse(self):
        statements = []
        while not self.at_end():
            try:
                statement = self.declaration()
            except RecursionError:
                self.error(self.peek(), "Expression nesting too deep.")
                self.synchronize()
                continue
            if statement is not None:
                statements.append(statement)
        return statements

    def parse_expression(self):
        try:
            expr = self.expression()
            if not self.at_end():
                raise self.error(self.peek(), "Expect end of expression.")
            return expr
        except ParseError:
            return None
        except RecursionError:
            self.error(self.peek(), "Expression nesting too deep.")
            return None

    def declaration(self):
        try:
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except ParseError:
            self.synchronize()
            return None

    def statement(self):
        if self.match(TokenType.PRINT):
            return self.print_statement()
        if brace := self.match(TokenType.LEFT_BRACE):
            return Block(tuple(self.block()), brace)
        return self.expression_statement()

    def block(self):
        statements = []
        while self.peek().type != TokenType.RIGHT_BRACE and not self.at_end():
            if (statement := self.declaration()) is not None:
                statements.append(statement)
        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        return statements

    def expression_statement(self):
        expression = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return Expression(expression)

    def print_statement(self):
        expression = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return Print(expression)

    def var_declaration(self):
        name = self.consume(TokenType.IDENTIFIER, "Expect variable name.")
        initializer = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return Var(name, initializer)

    def expression(self):
        return self.assignment()

    def assignment(self):
        expr = self.equality()
        if equals := self.match(TokenType.EQUAL):
            value = self.assignment()
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            raise self.error(equals, "Invalid assignment target.")
        return expr

    def equality(self):
        expr = self.comparison()
        while operator := self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            expr = Binary(expr, operator, self.comparison())
        return expr

    def comparison(self):
        expr = self.term()
        while operator := self.match(
                TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL):
            expr = Binary(expr, operator, self.term())
        return expr

    def term(self):
        expr = self.factor()
        while operator := self.match(TokenType.MINUS, TokenType.PLUS):
            expr = Binary(expr, operator, self.factor())
        return expr

    def factor(self):
        expr = self.unary()
        while operator := self.match(TokenType.SLASH, TokenType.STAR):
            expr = Binary(expr, operator, self.unary())
        return expr

    def unary(self):
        if operator := self.match(TokenType.BANG, TokenType.MINUS):
            return Unary(operator, self.unary())
        return self.primary()

    def primary(self):
        if self.match(TokenType.FALSE):
            return Literal(False)
        if self.match(TokenType.TRUE):
            return Literal(True)
        if self.match(TokenType.NIL):
            return Literal(None)
        if token := self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(token.literal)
        if paren := self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr, paren)
        if token := self.match(TokenType.IDENTIFIER):
            return Variable(token)
        raise self.error(self.peek(), "Expect expression.")

    def synchronize(self):
        # The offending token is always dropped so that a statement keyword
        # this grammar cannot parse yet does not stall the loop.
        self.advance()
        while not self.at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in Parser.STATEMENT_STARTS:
                return
            self.advance()

    def consume(self, token_type, message):
        if token := self.match(token_type):
            return token
        raise self.error(self.peek(), message)

    def match(self, *token_types):
        if self.peek().type in token_types:
            return self.advance()
        return None

    def advance(self):
        token = self.peek()
        if not self.at_end():
            self.current += 1
        return token

    def at_end(self):
        return self.peek().type == TokenType.EOF

    def peek(self):
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[self.current - 1]

    def error(self, token, message):
        error = ParseError.at_token(token, message)
        self.errors.append(error)
        if self.report:
            self.report(error)
        return error


def parse(tokens, report=None):
    parser = Parser(tokens, report)
    statements = parser.parse()
    return statements, parser.errors
