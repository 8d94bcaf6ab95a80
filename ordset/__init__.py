from ordset.errors import EmptyCollection
from ordset.ordered_set import OrderedSet

__all__ = ["EmptyCollection", "OrderedSet"]
