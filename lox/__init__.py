import sys

from lox.error.communicator import ErrorRaiser
from lox.parser.parser import Parser
from lox.scanner.scanner import Scanner
from lox.token import Token
from lox.tree.printer import AstPrinter
from lox.type import Type

# Default is 1000, which deeply nested groupings exceed during recursive descent
sys.setrecursionlimit(5000)
