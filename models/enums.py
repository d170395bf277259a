from enum import Enum


class RoomType(str, Enum):
    PRIVATE_ROOM = "private_room"
    SHARED_ROOM = "shared_room"
    ENTIRE_PLACE = "entire_place"


class Shift(str, Enum):
    DAY = "day"
    SWING = "swing"
    NIGHT = "night"


ROOM_TYPE_LABELS = {
    RoomType.PRIVATE_ROOM: "Private Room",
    RoomType.SHARED_ROOM: "Shared Room",
    RoomType.ENTIRE_PLACE: "Entire Place",
}
