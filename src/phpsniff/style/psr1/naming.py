"""
PSR-1 Naming Sniffs.

Checks the naming conventions PSR-1 imposes on declarations:

1.  **Classes** must be declared in PascalCase.
2.  **Methods** must be declared in camelCase. PHP magic methods are exempt and
    a single leading underscore is ignored.
"""

from phpsniff.core.nodes import Class, FunctionDef
from phpsniff.enums import Severity
from phpsniff.style.sniff import NodeSniff
from phpsniff.style.string_case import camel_case, pascal_case

MAGIC_METHODS = frozenset(
  {
    "__construct",
    "__destruct",
    "__call",
    "__callStatic",
    "__get",
    "__set",
    "__isset",
    "__unset",
    "__sleep",
    "__wakeup",
    "__serialize",
    "__unserialize",
    "__toString",
    "__invoke",
    "__set_state",
    "__clone",
    "__debugInfo",
    "__autoload",
  }
)


class ClassNameSniff(NodeSniff):
  """Reports classes whose name is not PascalCase."""

  code = "PSR1.Classes.ClassDeclaration.PascalCase"
  severity = Severity.ERROR
  fixable = False

  def visit_Class(self, node: Class) -> None:
    if node.name != pascal_case(node.name):
      self.add_issue(node, self.filename, "Class name should be PascalCase")


def is_camel_case_method(name: str) -> bool:
  """
  Checks a method name against the camelCase convention.

  Args:
      name (str): Method name.

  Returns:
      bool: True if the name is valid camelCase or a magic method.
  """
  if not name:
    return False
  if name in MAGIC_METHODS:
    return True
  if name.startswith("_") and len(name) > 1:
    return is_camel_case_method(name[1:])
  return name == camel_case(name)


class MethodCamelCaseSniff(NodeSniff):
  """Reports class methods whose name is not camelCase."""

  code = "PSR1.Methods.CamelCapsMethodName"
  severity = Severity.ERROR
  fixable = False

  def visit_Class(self, node: Class) -> None:
    for method in node.methods:
      if isinstance(method, FunctionDef) and not is_camel_case_method(method.name):
        self.add_issue(method, self.filename, "Method name should be camelCase")
