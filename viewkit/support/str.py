"""
String Helper Functions
Case conversion for handler, template and module names
"""
import re
from typing import List

# Word boundaries: explicit separators, or a lower/digit -> upper transition,
# or the last capital of an acronym followed by a lowercase letter
_SEPARATORS = re.compile(r'[\s_\-]+')
_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')


class Str:
    """
    Case conversion helpers (Laravel-style)

    The exception renderer derives handler and template names from class
    names with these:

        Str.camel('MissingTemplate')  # 'missingTemplate' (handler/template)
        Str.snake('MissingTemplate')  # 'missing_template'
    """

    @staticmethod
    def _words(value: str) -> List[str]:
        words = []
        for chunk in _SEPARATORS.split(value):
            words.extend(part for part in _BOUNDARY.split(chunk) if part)
        return words

    @staticmethod
    def snake(value: str, delimiter: str = '_') -> str:
        """
        Convert a string to snake_case

        Example:
            Str.snake('MissingTemplate')  # 'missing_template'
            Str.snake('Missing Template')  # 'missing_template'
        """
        if not value:
            return value

        return delimiter.join(word.lower() for word in Str._words(value))

    @staticmethod
    def studly(value: str) -> str:
        """
        Convert a string to StudlyCase

        Only the first letter of each word is touched, so 'MissingTemplate'
        comes back unchanged.
        """
        if not value:
            return value

        return ''.join(word[0].upper() + word[1:] for word in _SEPARATORS.split(value) if word)

    @staticmethod
    def camel(value: str) -> str:
        """
        Convert a string to camelCase

        Example:
            Str.camel('MissingTemplate')  # 'missingTemplate'
            Str.camel('missing_template')  # 'missingTemplate'
        """
        studly = Str.studly(value)
        if not studly:
            return studly

        return studly[0].lower() + studly[1:]
