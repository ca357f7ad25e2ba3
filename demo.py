from lox import AstPrinter, ErrorRaiser, Parser, Scanner
from lox.error.parser_error import ParserException
from tests.test_util import open_file

# Load a program string,
program = open_file("data/valid/comments.lox")
# or define a program manually
program = r"""
-123 * (45.67) >= "a\tb" // comparing a number with a string is fine for a parser
"""

# Diagnostics of both passes are collected here
errors = ErrorRaiser()

# Perform scanning on the input program
scanner = Scanner(program, errors)
tokens = scanner.scan()

print("=" * 25)
print("Tokens:")
print("=" * 25)
for token in tokens:
    print(repr(token))

# Perform parsing on the scanned tokens
parser = Parser(program, errors)
tree = parser.parse(tokens)

# Raise a ParserException with the full error listings, if anything went wrong
errors.raise_all(ParserException)

# Print out the tree
print("=" * 25)
print("Tree:")
print("=" * 25)
print(AstPrinter().print(tree))
