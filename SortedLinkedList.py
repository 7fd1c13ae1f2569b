from LinkedList import LinkedList
from ElementKind import ElementKind, INT64_MIN, INT64_MAX

import logging, os
import numpy as np


class SortedLinkedListError(Exception):
    """Base class for the errors raised by a SortedLinkedList."""

    pass


class InvalidKindError(SortedLinkedListError, ValueError):
    """Exception raised when a list is constructed with an unrecognized element kind."""

    pass


class TypeMismatchError(SortedLinkedListError, TypeError):
    """Exception raised when a value does not match the element kind of the list."""

    pass


class SortedLinkedList(LinkedList):
    """
    A LinkedList that holds either only integers or only strings, kept in ascending order.

    The element kind is either given at construction or inferred from the first value
    added. Once set it never changes for the lifetime of the list, not even after clear().
    Integers are compared numerically, strings lexicographically by code point (the same
    order as comparing their UTF-8 bytes).

    Insertion walks the chain from the head, so add, remove and contains are O(n), while
    first/min and last/max are O(1) thanks to the cached head and tail nodes. A value equal
    to values already stored is inserted in front of them.

    Attributes:
        kind (ElementKind): The element kind of the list, None until it is first set.
        logger (logging.Logger): Logger for list diagnostics.
        (Inherits headNode, tailNode and nodeCount from LinkedList)
    """

    def __init__(
        self,
        kind=None,
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize an empty sorted linked list.

        Args:
            kind (ElementKind or str, optional): Force the element kind, either as an
                ElementKind or as its tag ("int" or "string"). If None the kind is
                inferred from the first value added. Defaults to None.
            logFile (str, optional): Path to log file. Defaults to None.
            logLevel (int, optional): Logging level. Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger. If None, creates new one. Defaults to None.

        Raises:
            InvalidKindError: If kind is neither None nor a recognized element kind.
        """
        if logger is None:
            self.logger = logging.getLogger("SORTED_LINKED_LIST")
            self.logger.setLevel(logLevel)

            if logFile is not None:
                logPath = os.path.abspath(logFile)
                alreadyAttached = any(
                    isinstance(h, logging.FileHandler) and h.baseFilename == logPath
                    for h in self.logger.handlers
                )
                if not alreadyAttached:
                    file_handler = logging.FileHandler(logFile)
                    file_handler.setLevel(logLevel)

                    formatter = logging.Formatter(
                        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                    )
                    file_handler.setFormatter(formatter)

                    self.logger.addHandler(file_handler)
        else:
            self.logger = logger

        super().__init__()
        self.kind = self.ParseKind(kind)

    def ParseKind(self, kind):
        """
        Convert a kind argument to an ElementKind.

        Args:
            kind (ElementKind, str or None): The kind or its tag.

        Returns:
            ElementKind or None: The parsed kind.

        Raises:
            InvalidKindError: If kind is not None and not a recognized element kind.
        """
        if kind is None or isinstance(kind, ElementKind):
            return kind
        try:
            return ElementKind(kind)
        except (ValueError, TypeError):
            message = 'Kind must be "int", "string" or None, not %r.'
            self.logger.error(message, kind)
            raise InvalidKindError(message % (kind,)) from None

    @classmethod
    def ofInt(cls, **kwargs):
        """
        Create an empty list constrained to integers.

        Args:
            **kwargs: Logging options forwarded to the constructor.

        Returns:
            SortedLinkedList: The new list.
        """
        return cls(ElementKind.INTEGER, **kwargs)

    @classmethod
    def ofString(cls, **kwargs):
        """
        Create an empty list constrained to strings.

        Args:
            **kwargs: Logging options forwarded to the constructor.

        Returns:
            SortedLinkedList: The new list.
        """
        return cls(ElementKind.TEXT, **kwargs)

    @classmethod
    def fromValues(cls, values, kind=None, **kwargs):
        """
        Create a list holding the given values, in any order.

        The values are added one at a time, so the result is always sorted. If kind is
        None it is inferred from the first value.

        Args:
            values (iterable): The values to add.
            kind (ElementKind or str, optional): Force the element kind. Defaults to None.
            **kwargs: Logging options forwarded to the constructor.

        Returns:
            SortedLinkedList: The new list.

        Raises:
            InvalidKindError: If kind is not a recognized element kind.
            TypeMismatchError: At the first value whose kind disagrees with the list kind.
        """
        newList = cls(kind, **kwargs)
        newList.addAll(values)
        return newList

    def EnsureKind(self, value):
        """
        Check a value against the list kind, locking the kind on first use.

        Args:
            value: The value about to be inserted.

        Returns:
            The value converted to its plain Python form.

        Raises:
            TypeMismatchError: If the value kind disagrees with the list kind,
                or an integer does not fit in 64 bits.
        """
        valueKind = ElementKind.Of(value)
        if valueKind is None:
            message = "Values must be int or string, not %s."
            self.logger.error(message, type(value).__name__)
            raise TypeMismatchError(message % type(value).__name__)

        value = valueKind.Normalize(value)
        if valueKind is ElementKind.INTEGER and not INT64_MIN <= value <= INT64_MAX:
            message = "Integers must fit in 64 bits, got %r."
            self.logger.error(message, value)
            raise TypeMismatchError(message % (value,))

        if self.kind is None:
            self.kind = valueKind
            self.logger.debug("Element kind inferred from first value: %s", valueKind)

        if valueKind is not self.kind:
            if self.kind is ElementKind.INTEGER:
                message = "This list accepts only integers, got %r."
            else:
                message = "This list accepts only strings, got %r."
            self.logger.error(message, value)
            raise TypeMismatchError(message % (value,))

        return value

    def Matches(self, value):
        """
        Whether a query value could possibly be stored in this list.

        Queries never lock or check the kind, a value of another kind simply
        matches nothing.
        """
        return self.headNode is not None and ElementKind.Of(value) is self.kind

    def append(self, newVal):
        """
        Append operation is not supported for SortedLinkedList.

        Raises:
            NotImplementedError: Always, since append would violate sort order.
        """
        raise NotImplementedError("\"append\" is intentionally not implemented for a SortedLinkedList. Please use \"add\" instead.")

    def prepend(self, newVal):
        """
        Prepend operation is not supported for SortedLinkedList.

        Raises:
            NotImplementedError: Always, since prepend would violate sort order.
        """
        raise NotImplementedError("\"prepend\" is intentionally not implemented for a SortedLinkedList. Please use \"add\" instead.")

    def insertAfter(self, node, newVal):
        """
        Positional insertion is not supported for SortedLinkedList.

        Raises:
            NotImplementedError: Always, since it would violate sort order.
        """
        raise NotImplementedError("\"insertAfter\" is intentionally not implemented for a SortedLinkedList. Please use \"add\" instead.")

    def add(self, value):
        """
        Insert a value at its sorted position. Duplicates are allowed.

        A value equal to values already in the list is placed in front of them.

        Args:
            value (int or str): The value to insert.

        Raises:
            TypeMismatchError: If the value kind disagrees with the list kind.
        """
        value = self.EnsureKind(value)

        if self.headNode is None:
            super().append(value)
            return

        if value <= self.headNode.value:
            super().prepend(value)
            return

        #Walk until the next node is no longer smaller than the new value.
        nodei = self.headNode
        while nodei.nextNode is not None and nodei.nextNode.value < value:
            nodei = nodei.nextNode

        super().insertAfter(nodei, value)

    def addAll(self, values):
        """
        Add many values, in any order.

        Values are added one by one. If one of them is rejected, the values before it
        remain in the list.

        Args:
            values (iterable): The values to add.

        Raises:
            TypeMismatchError: At the first value whose kind disagrees with the list kind.
        """
        numAdded = 0
        for v in values:
            self.add(v)
            numAdded += 1
        self.logger.debug("Added %s values, list now holds %s.", numAdded, self.nodeCount)

    def remove(self, value):
        """
        Remove the first occurrence of a value.

        A value of the wrong kind is never found; no exception is raised for it.

        Args:
            value (int or str): The value to remove.

        Returns:
            bool: True if a node was removed.
        """
        if not self.Matches(value):
            return False
        value = self.kind.Normalize(value)

        if self.headNode.value == value:
            super().popFront()
            return True

        nodei = self.headNode
        while nodei.nextNode is not None:
            nextVal = nodei.nextNode.value
            if nextVal == value:
                super().removeAfter(nodei)
                return True
            if nextVal > value:
                #Sorted order: no match can appear further along.
                return False
            nodei = nodei.nextNode

        return False

    def removeAll(self, value):
        """
        Remove all occurrences of a value.

        Like remove, this does not check the value kind: a value of another kind
        simply removes nothing.

        Args:
            value (int or str): The value to remove.

        Returns:
            int: The number of removed nodes.
        """
        if not self.Matches(value):
            return 0
        value = self.kind.Normalize(value)

        removed = 0
        while self.headNode is not None and self.headNode.value == value:
            super().popFront()
            removed += 1

        if self.headNode is None:
            self.logger.debug("Removed %s occurrences of %r, list is now empty.", removed, value)
            return removed

        nodei = self.headNode
        while nodei.nextNode is not None:
            nextVal = nodei.nextNode.value
            if nextVal == value:
                super().removeAfter(nodei)
                removed += 1
                continue
            if nextVal > value:
                break
            nodei = nodei.nextNode

        self.logger.debug("Removed %s occurrences of %r.", removed, value)
        return removed

    def contains(self, value):
        """
        Whether the list holds a value.

        Args:
            value (int or str): The value to look for.

        Returns:
            bool: True if found. Always False for a value of the wrong kind.
        """
        if not self.Matches(value):
            return False
        value = self.kind.Normalize(value)

        nodei = self.headNode
        while nodei is not None:
            if nodei.value == value:
                return True
            if nodei.value > value:
                return False
            nodei = nodei.nextNode
        return False

    def first(self):
        """
        Returns:
            int or str: The smallest value, or None if the list is empty.
        """
        return self.headNode.value if self.headNode is not None else None

    def last(self):
        """
        Returns:
            int or str: The largest value, or None if the list is empty.
        """
        return self.tailNode.value if self.tailNode is not None else None

    def min(self):
        return self.first()

    def max(self):
        return self.last()

    def toArray(self):
        """
        Snapshot the values as a plain list, smallest first.

        This is the plain-data form of the list (suitable for json.dumps). The element
        kind is not part of it.

        Returns:
            list: The values in ascending order.
        """
        return list(self)

    def isEmpty(self):
        return self.nodeCount == 0

    def size(self):
        return self.nodeCount

    def count(self):
        return self.nodeCount

    def clear(self):
        """
        Remove every value. The element kind is kept.
        """
        self.logger.debug("Clearing %s values.", self.nodeCount)
        super().clear()

    def equals(self, other):
        """
        Check structural equality: same element kind and same ordered values.

        Args:
            other (SortedLinkedList): The list to compare against.

        Returns:
            bool: True if both lists are equal.
        """
        if self is other:
            return True
        if not isinstance(other, SortedLinkedList):
            return False
        if self.nodeCount != other.nodeCount:
            return False
        if self.kind is not other.kind:
            return False

        a = self.headNode
        b = other.headNode
        while a is not None and b is not None:
            if a.value != b.value:
                return False
            a = a.nextNode
            b = b.nextNode
        return a is None and b is None

    def __eq__(self, other):
        if not isinstance(other, SortedLinkedList):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __contains__(self, value):
        return self.contains(value)

    def toNumpy(self):
        """
        Snapshot the values as a numpy array, smallest first.

        Integer lists give an int64 array. String lists give an object array holding
        the str values unchanged, since numpy's fixed-width unicode type drops trailing
        NUL characters. A list that never had a kind gives an empty float array.

        Returns:
            np.ndarray: The values in ascending order.
        """
        if self.kind is ElementKind.INTEGER:
            return np.array(self.toArray(), dtype=np.int64)
        if self.kind is ElementKind.TEXT:
            arr = np.empty(self.nodeCount, dtype=object)
            arr[:] = self.toArray()
            return arr
        return np.array([])

    def Save(self, fileName: str):
        """
        Save the values of the list to a numpy .npz archive.

        Integer lists are stored as one int64 array ("integers"). String lists are
        stored as their concatenated UTF-8 bytes ("textData", uint8) together with the
        byte length of every value ("textLengths", int64), so no value is pickled and
        every character survives. A list that never had a kind stores no array.

        Args:
            fileName (str): Name of the file to save to. '.npz' extension will be
                added automatically if not present.

        Returns:
            str: The full filename where the list was saved.
        """
        if not fileName.endswith(".npz"):
            fileName = f"{fileName}.npz"

        arrays = {}
        if self.kind is ElementKind.INTEGER:
            arrays["integers"] = self.toNumpy()
        elif self.kind is ElementKind.TEXT:
            encoded = [v.encode("utf-8") for v in self]
            arrays["textLengths"] = np.array([len(e) for e in encoded], dtype=np.int64)
            data = b"".join(encoded)
            arrays["textData"] = np.fromiter(data, dtype=np.uint8, count=len(data))

        np.savez(fileName, **arrays)
        self.logger.info("Saved %s values to %s", self.nodeCount, fileName)
        return fileName

    @classmethod
    def Load(cls, fileName: str, kind=None, **kwargs):
        """
        Load a list from a .npz archive written by Save.

        Args:
            fileName (str): Name of the file to load from.
            kind (ElementKind or str, optional): Force the element kind. If None it is
                taken from the arrays stored in the archive. Defaults to None.
            **kwargs: Logging options forwarded to the constructor.

        Returns:
            SortedLinkedList: A new list with the loaded values.

        Raises:
            TypeMismatchError: If the stored values do not match the element kind.
        """
        with np.load(fileName, allow_pickle=False) as archive:
            if "integers" in archive.files:
                storedKind = ElementKind.INTEGER
                values = archive["integers"].tolist()
            elif "textData" in archive.files:
                storedKind = ElementKind.TEXT
                data = archive["textData"].tobytes()
                ends = np.cumsum(archive["textLengths"]).tolist()
                starts = [0] + ends[:-1]
                values = [data[s:e].decode("utf-8") for s, e in zip(starts, ends)]
            else:
                storedKind = None
                values = []

        if kind is None:
            kind = storedKind
        return cls.fromValues(values, kind, **kwargs)

    def ToString(self):
        """
        Generate a string representation of the list.

        Returns:
            str: The element kind and the values of the list.
        """
        kindStr = "untyped" if self.kind is None else self.kind.value
        return f"SortedLinkedList[{kindStr}]({self.toArray()!r})"

    def __str__(self):
        return self.ToString()

    def __repr__(self):
        return str(self)
