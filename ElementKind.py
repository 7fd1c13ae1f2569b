from enum import Enum

import numpy as np

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1

class ElementKind(Enum):
    """
    Enumeration of the element kinds a SortedLinkedList can hold.

    A list holds either only integers or only text strings, never both. The
    enum values are the short tags accepted wherever a kind is expected, so
    ElementKind("int") is ElementKind.INTEGER.

    Values:
        INTEGER: Signed integers, compared numerically.
        TEXT: Text strings, compared lexicographically (case-sensitive).
    """
    INTEGER = "int"
    TEXT = "string"

    @staticmethod
    def Of(value):
        """
        Determine the element kind of a runtime value.

        Booleans are not integers here, even though Python treats them as such.

        Args:
            value: Any value.

        Returns:
            ElementKind or None: The kind of the value, or None if it is neither
                an integer nor a string.
        """
        if isinstance(value, (bool, np.bool_)):
            return None
        if isinstance(value, (int, np.integer)):
            return ElementKind.INTEGER
        if isinstance(value, str):
            return ElementKind.TEXT
        return None

    def Normalize(self, value):
        """
        Convert a value of this kind to its plain Python form (int or str).
        """
        if self is ElementKind.INTEGER:
            return int(value)
        return str(value)
