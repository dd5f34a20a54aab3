"""jscalendar パッケージ。"""

from .core.errors import FormatError, JSCalendarError, MissingRequiredFieldError, UnknownValueError
from .core.settings import Settings, load_settings
from .features.calendar_objects.schemas_calendar_objects import (
    CalendarObject,
    CalendarObjectModel,
    Event,
    Group,
    Participant,
    Task,
    register_variant,
)
from .features.calendar_objects.usecase_calendar_objects import (
    decode_calendar_object,
    decode_group,
    dump_calendar_object,
    encode_calendar_object,
    encode_group,
)
from .features.patch_apply.usecase_patch_apply import (
    apply_patch,
    apply_recurrence_override,
    expand_override,
    localize,
)
from .shared.schemas.duration import Duration
from .shared.schemas.enums import (
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
from .shared.schemas.local_datetime import LocalDateTime
from .shared.schemas.patch_object import (
    PatchObject,
    decode_patch_object,
    encode_patch_object,
    is_forbidden_for_recurrence,
)
from .shared.schemas.pointer import is_prefix_conflict, is_valid_pointer
from .shared.schemas.wire_enum import EnumCodec, WireEnum, codec_for

__all__ = [
    "AlertAction",
    "CalendarObject",
    "CalendarObjectModel",
    "DayOfWeek",
    "Duration",
    "EnumCodec",
    "Event",
    "EventStatus",
    "FormatError",
    "FreeBusyStatus",
    "Group",
    "JSCalendarError",
    "LinkDisplayType",
    "LocalDateTime",
    "LocationRelation",
    "MissingRequiredFieldError",
    "Participant",
    "ParticipantKind",
    "ParticipantRole",
    "ParticipationStatus",
    "PatchObject",
    "Privacy",
    "ProgressStatus",
    "RecurrenceFrequency",
    "RecurrenceSkip",
    "RelationType",
    "ScheduleAgent",
    "Settings",
    "Task",
    "TriggerRelation",
    "UnknownValueError",
    "VirtualLocationFeature",
    "WireEnum",
    "apply_patch",
    "apply_recurrence_override",
    "codec_for",
    "decode_calendar_object",
    "decode_group",
    "decode_patch_object",
    "dump_calendar_object",
    "encode_calendar_object",
    "encode_group",
    "encode_patch_object",
    "expand_override",
    "is_forbidden_for_recurrence",
    "is_prefix_conflict",
    "is_valid_pointer",
    "load_settings",
    "localize",
]
