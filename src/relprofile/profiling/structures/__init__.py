"""Data structures for dependency discovery."""

from relprofile.profiling.structures.attribute_list import AttributeList
from relprofile.profiling.structures.dependencies import IND, UCC
from relprofile.profiling.structures.position_list_index import SINGLETON, PositionListIndex

__all__ = [
    "AttributeList",
    "PositionListIndex",
    "SINGLETON",
    "UCC",
    "IND",
]
