"""
# Section Replace: definitions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Definitions for template-style substitution.
"""

from secreplace.exceptions import UnrecognisedNameException


class DefinitionMaster:
    """
    Object storing definitions to be substituted into sections.

    The interior of a section is taken to be the «name» of a definition,
    and the whole section is replaced by its «value»:
    ````
    Hello, (_NAME_)!
    ````
    A «value» may itself contain sections, which `replace_all` will go on to expand.
    """
    _value_from_name: dict[str, str]

    def __init__(self):
        self._value_from_name = {}

    def store_definition(self, name: str, value: str):
        name = DefinitionMaster.normalise_name(name)
        self._value_from_name[name] = value

    def substitute(self, name: str) -> str:
        normalised_name = DefinitionMaster.normalise_name(name)

        try:
            return self._value_from_name[normalised_name]
        except KeyError:
            raise UnrecognisedNameException(name)

    @staticmethod
    def normalise_name(name: str) -> str:
        return name.strip()
