"""
Identifier case conversion helpers used by naming sniffs.
"""


def pascal_case(name: str) -> str:
  """
  Converts an underscore separated name to PascalCase.

  Names already in PascalCase are returned unchanged.

  Args:
      name (str): The identifier.

  Returns:
      str: e.g. `user_account` -> `UserAccount`.
  """
  result = []
  capitalize_next = True
  for ch in name:
    if ch == "_":
      capitalize_next = True
      continue
    result.append(ch.upper() if capitalize_next else ch)
    capitalize_next = False
  return "".join(result)


def camel_case(name: str) -> str:
  """
  Converts an underscore separated name to camelCase.

  Args:
      name (str): The identifier.

  Returns:
      str: e.g. `get_user` -> `getUser`, `GetUser` -> `getUser`.
  """
  result = []
  capitalize_next = False
  for i, ch in enumerate(name):
    if ch == "_":
      capitalize_next = True
      continue
    if i == 0:
      result.append(ch.lower())
    elif capitalize_next:
      result.append(ch.upper())
    else:
      result.append(ch)
    capitalize_next = False
  return "".join(result)
