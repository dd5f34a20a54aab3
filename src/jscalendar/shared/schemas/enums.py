"""RFC 8984 で定義される列挙値。値がそのままワイヤタグになる。"""

from __future__ import annotations

from enum import auto

from jscalendar.shared.schemas.wire_enum import WireEnum


class AlertAction(WireEnum):
    DISPLAY = auto()
    EMAIL = auto()


class DayOfWeek(WireEnum):
    MONDAY = "mo"
    TUESDAY = "tu"
    WEDNESDAY = "we"
    THURSDAY = "th"
    FRIDAY = "fr"
    SATURDAY = "sa"
    SUNDAY = "su"


class EventStatus(WireEnum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    TENTATIVE = "tentative"


class FreeBusyStatus(WireEnum):
    FREE = "free"
    BUSY = "busy"


class LinkDisplayType(WireEnum):
    BADGE = "badge"
    GRAPHIC = "graphic"
    FULLSIZE = "fullsize"
    THUMBNAIL = "thumbnail"


class LocationRelation(WireEnum):
    START = "start"
    END = "end"


class ParticipantKind(WireEnum):
    INDIVIDUAL = "individual"
    GROUP = "group"
    RESOURCE = "resource"
    LOCATION = "location"


class ParticipantRole(WireEnum):
    OWNER = "owner"
    ATTENDEE = "attendee"
    OPTIONAL = "optional"
    INFORMATIONAL = "informational"
    CHAIR = "chair"
    CONTACT = "contact"


class ParticipationStatus(WireEnum):
    NEEDS_ACTION = "needs-action"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    TENTATIVE = "tentative"
    DELEGATED = "delegated"


class Privacy(WireEnum):
    PUBLIC = "public"
    PRIVATE = "private"
    SECRET = "secret"


class ProgressStatus(WireEnum):
    NEEDS_ACTION = "needs-action"
    IN_PROCESS = "in-process"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class RecurrenceFrequency(WireEnum):
    YEARLY = "yearly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    DAILY = "daily"
    HOURLY = "hourly"
    MINUTELY = "minutely"
    SECONDLY = "secondly"


class RecurrenceSkip(WireEnum):
    OMIT = "omit"
    BACKWARD = "backward"
    FORWARD = "forward"


class RelationType(WireEnum):
    FIRST = "first"
    NEXT = "next"
    CHILD = "child"
    PARENT = "parent"


class ScheduleAgent(WireEnum):
    SERVER = "server"
    CLIENT = "client"
    NONE = "none"


class TriggerRelation(WireEnum):
    START = "start"
    END = "end"


class VirtualLocationFeature(WireEnum):
    AUDIO = "audio"
    CHAT = "chat"
    FEED = "feed"
    MODERATOR = "moderator"
    PHONE = "phone"
    SCREEN = "screen"
    VIDEO = "video"


ALL_ENUMS: tuple[type[WireEnum], ...] = (
    AlertAction,
    DayOfWeek,
    EventStatus,
    FreeBusyStatus,
    LinkDisplayType,
    LocationRelation,
    ParticipantKind,
    ParticipantRole,
    ParticipationStatus,
    Privacy,
    ProgressStatus,
    RecurrenceFrequency,
    RecurrenceSkip,
    RelationType,
    ScheduleAgent,
    TriggerRelation,
    VirtualLocationFeature,
)
