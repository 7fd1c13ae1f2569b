
class LinkedListNode:
    """
    A node in a forward-linked list structure.

    Each node holds a value and a reference to the next node. A node is owned
    by its predecessor, or by the list itself when it is the head node.

    Attributes:
        value: The data stored in this node.
        nextNode (LinkedListNode): Reference to the next node in the list.
    """
    def __init__(self,value,nextNode=None):
        """
        Initialize a new linked list node.

        Args:
            value: The data to store in this node.
            nextNode (LinkedListNode, optional): The node following this one. Defaults to None.
        """
        self.value = value
        self.nextNode = nextNode

class LinkedList:
    """
    A forward-linked list that caches its tail node and its node count.

    Provides constant time insertion at both ends, and removal at the head or
    after a known node. Every operation keeps headNode, tailNode and nodeCount
    consistent with the chain.

    Attributes:
        nodeCount (int): Number of nodes reachable from headNode.
        headNode (LinkedListNode): First node in the list.
        tailNode (LinkedListNode): Last node in the list.
    """
    def __init__(self,arr=()):
        """
        Initialize a new linked list.

        Args:
            arr (iterable, optional): Initial elements to append, in order. Defaults to ().
        """
        self.nodeCount = 0
        self.headNode = None
        self.tailNode = None

        for e in arr:
            self.append(e)

    def append(self,newVal):
        """
        Add a new element to the end of the list.

        Args:
            newVal: The value to append to the list.
        """
        newNode = LinkedListNode(newVal)

        if self.headNode is None:
            self.headNode = newNode
            self.tailNode = newNode
        else:
            self.tailNode.nextNode = newNode
            self.tailNode = newNode

        self.nodeCount += 1

    def prepend(self,newVal):
        """
        Add a new element to the beginning of the list.

        Args:
            newVal: The value to prepend to the list.
        """
        newNode = LinkedListNode(newVal,self.headNode)

        if self.headNode is None:
            self.tailNode = newNode
        self.headNode = newNode

        self.nodeCount += 1

    def insertAfter(self,node:LinkedListNode,newVal):
        """
        Insert a new element directly after an existing node.

        Args:
            node (LinkedListNode): A node of this list.
            newVal: The value to insert.
        """
        newNode = LinkedListNode(newVal,node.nextNode)
        node.nextNode = newNode

        if newNode.nextNode is None:
            self.tailNode = newNode

        self.nodeCount += 1

    def popFront(self):
        """
        Unlink the head node.

        Returns:
            The value held by the removed head node.

        Raises:
            IndexError: If the list is empty.
        """
        if self.headNode is None:
            raise IndexError("popFront from an empty LinkedList")

        node = self.headNode
        self.headNode = node.nextNode
        if self.headNode is None:
            self.tailNode = None

        self.nodeCount -= 1
        return node.value

    def removeAfter(self,node:LinkedListNode):
        """
        Unlink the node that follows the given node.

        Args:
            node (LinkedListNode): A node of this list that has a successor.

        Returns:
            The value held by the removed node.
        """
        removed = node.nextNode
        node.nextNode = removed.nextNode

        if removed is self.tailNode:
            self.tailNode = node

        self.nodeCount -= 1
        return removed.value

    def clear(self):
        """
        Drop every node of the list.
        """
        self.headNode = None
        self.tailNode = None
        self.nodeCount = 0

    def __iter__(self):
        """
        Make the LinkedList iterable.

        Returns:
            iterator: A lazy iterator over the list values, head to tail.
        """
        nodei = self.headNode
        while nodei is not None:
            yield nodei.value
            nodei = nodei.nextNode

    def __len__(self):
        """
        Return the number of elements in the list.

        Returns:
            int: The size of the linked list.
        """
        return self.nodeCount
