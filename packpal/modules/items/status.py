"""Item packing status and its transitions, independent of storage."""

from enum import Enum


class ItemStatus(str, Enum):
    TO_PACK = "to_pack"
    PACKED = "packed"
    DELIVERED = "delivered"


class Direction(str, Enum):
    CHECK = "check"
    UNCHECK = "uncheck"


_FORWARD = {
    ItemStatus.TO_PACK: ItemStatus.PACKED,
    ItemStatus.PACKED: ItemStatus.DELIVERED,
    ItemStatus.DELIVERED: ItemStatus.DELIVERED,
}


def next_status(status: ItemStatus, direction: Direction) -> ItemStatus:
    """check: to_pack -> packed -> delivered (delivered stays). uncheck: always to_pack."""
    status = ItemStatus(status)
    if Direction(direction) == Direction.UNCHECK:
        return ItemStatus.TO_PACK
    return _FORWARD[status]
